"""
A BigInt is an arbitrary-precision signed integer, stored as decimal digits.

Features:
 - exact add, subtract, multiply
 - truncating division, and a modulus whose sign follows the dividend
 - parse and render in any base 2 to 36
"""

import logging
import numbers

from . import digits as digit_vector
from .digits import InvalidArgument


log = logging.getLogger(__name__)


class BigInt(numbers.Number):
    """
    Integers of any size.

    A BigInt is internally a sign and a magnitude.
        _negative - True for values less than zero.  Never True for zero.
        _digits - list of decimal digits, least significant first.
    Examples:
          +123 == BigInt('123')   _negative False, _digits [3, 2, 1]
             0 == BigInt('-0')    _negative False, _digits [0]
         -4500 == BigInt(-4500)   _negative True,  _digits [0, 0, 5, 4]

    Every BigInt is canonical:  no extra zero digits on the most significant end,
    and no negative zero.  So equal values have equal insides.

    Math goes digit by digit, the way it's done on paper.  Multiplying is
    schoolbook long multiplication.  Dividing is long division where each
    quotient digit is found by repeatedly subtracting the divisor, at most
    nine times per digit.

    Operators mix with Python int:

        assert BigInt(7) == 3 + BigInt(4)
        assert BigInt(-14) == BigInt(-100) / 7
        assert BigInt(-2) == BigInt(-100) % -7
    """

    __slots__ = ('_negative', '_digits')

    def __init__(self, content=0, base=None):
        """
        BigInt constructor.

        content - the type can be:
            int               -42
            decimal string    '-42'
            radix string      'FF' (with base=16)
            another BigInt    BigInt(42)
        base - 2 to 36, only for a string content.  None means a plain decimal string.
        """
        self._negative = False
        self._digits = [0]
        if base is not None and not isinstance(content, str):
            raise self.ConstructorTypeError("BigInt(..., base) needs a string, not a {inner}".format(
                inner=type(content).__name__,
            ))
        if isinstance(content, int):
            self._from_int(content)
        elif isinstance(content, BigInt):
            self._from_another_bigint(content)
        elif isinstance(content, str):
            if base is None:
                self._from_decimal_string(content)
            else:
                self._from_radix_string(content, base)
        else:
            raise self.ConstructorTypeError("BigInt({inner}) is not supported".format(
                inner=type(content).__name__,
            ))
        self._check_canonical()

    class ConstructorTypeError(TypeError):
        """e.g. BigInt(1.5) or BigInt(42, base=16)"""

    class ConstructorValueError(InvalidArgument):
        """e.g. BigInt('') or BigInt('12a45') or BigInt('G', 16)"""

    class BaseError(InvalidArgument):
        """e.g. BigInt('101', 1) or BigInt(5).to_string(37)"""

    class DivisionByZero(InvalidArgument, ZeroDivisionError):
        """e.g. BigInt(100) / 0 or BigInt(100) % 0"""

    # "from" conversions:  BigInt <-- other type
    # -----------------------------------------
    def _from_int(self, i):
        """Fill in sign and digits from a Python int."""
        self._negative = i < 0
        magnitude = -i if i < 0 else i
        if magnitude == 0:
            self._digits = [0]
        else:
            self._digits = []
            while magnitude > 0:
                self._digits.append(magnitude % 10)
                magnitude //= 10

    def _from_another_bigint(self, another_bigint_instance):
        """
        Copy Constructor

            assert BigInt(1) == BigInt(BigInt(1))

        The copy does not share its digit list, so mutating one leaves the other alone.
        """
        self._negative = another_bigint_instance._negative
        self._digits = list(another_bigint_instance._digits)

    def _from_decimal_string(self, s):
        """
        Fill in from a decimal string, e.g. '-00123'

        Only ASCII digits.  Not even a '+' sign.
        """
        if len(s) == 0:
            raise self.ConstructorValueError("String cannot be empty")
        negative, unsigned = self._split_sign(s)
        if len(unsigned) == 0:
            raise self.ConstructorValueError("No digits in {}".format(repr(s)))
        magnitude = []
        for symbol in reversed(unsigned):
            if not '0' <= symbol <= '9':
                raise self.ConstructorValueError("Invalid character {symbol} in {s}".format(
                    symbol=repr(symbol),
                    s=repr(s),
                ))
            magnitude.append(ord(symbol) - ord('0'))
        self._set_sign_digits(negative, magnitude)

    def _from_radix_string(self, s, base):
        """
        Fill in from a string of digit symbols in some base.

        assert BigInt(255) == BigInt('ff', 16)
        assert BigInt(-5) == BigInt('-101', 2)
        """
        if not digit_vector.is_valid_base(base):
            raise self.BaseError("Base must be {min} to {max}, not {base}".format(
                min=digit_vector.BASE_MIN,
                max=digit_vector.BASE_MAX,
                base=repr(base),
            ))
        negative, unsigned = self._split_sign(s)
        if len(unsigned) == 0:
            raise self.ConstructorValueError("No digits in {}".format(repr(s)))
        big_base = type(self)(base)
        value = type(self)(0)
        for symbol in unsigned:
            symbol_value = digit_vector.digit_value(symbol)
            if symbol_value is None or symbol_value >= base:
                raise self.ConstructorValueError("Invalid character {symbol} for base {base} in {s}".format(
                    symbol=repr(symbol),
                    base=base,
                    s=repr(s),
                ))
            value = value * big_base + type(self)(symbol_value)
        if negative:
            value = -value
        self._from_another_bigint(value)

    @staticmethod
    def _split_sign(s):
        """'-123' --> (True, '123')"""
        if s.startswith('-'):
            return True, s[1:]
        else:
            return False, s

    @classmethod
    def from_int(cls, i):
        """
        Construct a BigInt from a Python int.

        assert BigInt(42) == BigInt.from_int(42)
        """
        if not isinstance(i, int):
            raise cls.ConstructorTypeError("BigInt.from_int() needs an int, not a " + type(i).__name__)
        return cls(i)

    @classmethod
    def from_string(cls, s, base=10):
        """
        Construct a BigInt from a string in some base, 10 by default.

        assert BigInt(371) == BigInt.from_string('aB', 36)
        """
        if not isinstance(s, str):
            raise cls.ConstructorTypeError("BigInt.from_string() needs a str, not a " + type(s).__name__)
        return cls(s, base)

    @classmethod
    def _from_sign_digits(cls, negative, digits):
        """
        The internal constructor, from a sign and a least-significant-first digit sequence.

        The result is canonical:  excess zero digits trimmed, and zero is never negative.
        Every operator builds its result here.
        """
        return_value = cls()
        return_value._set_sign_digits(negative, list(digits))
        return_value._check_canonical()
        return return_value

    def _set_sign_digits(self, negative, digits):
        """Set the internals and canonicalize.  Takes ownership of the digits list."""
        self._digits = digit_vector.trim(digits) if digits else [0]
        self._negative = bool(negative) and not digit_vector.is_zero(self._digits)

    def _check_canonical(self):
        assert len(self._digits) >= 1
        assert all(0 <= d <= 9 for d in self._digits), repr(self._digits)
        assert len(self._digits) == 1 or self._digits[-1] != 0
        assert not (self._negative and digit_vector.is_zero(self._digits))

    # Inspection
    # ----------
    @property
    def digits(self):
        """
        The magnitude digits, least significant first, as a tuple.

        assert (3, 2, 1) == BigInt(-123).digits
        """
        return tuple(self._digits)

    def is_negative(self):
        """Is this BigInt less than zero?"""
        return self._negative

    def is_zero(self):
        """Is this BigInt zero?"""
        return digit_vector.is_zero(self._digits)

    def is_positive(self):
        """Is this BigInt greater than zero?"""
        return not self._negative and not self.is_zero()

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        """Convert to a Python int."""
        the_int = 0
        for d in reversed(self._digits):
            the_int = the_int * 10 + d
        return -the_int if self._negative else the_int

    def __hash__(self):
        # NOTE:  Agrees with hash(int) because BigInt(5) == 5.
        #        Don't inc() or dec() a BigInt that's a dict key or in a set.
        return hash(int(self))

    # "to" conversions:  BigInt --> other type
    # ---------------------------------------
    def __format__(self, format_spec):
        """
        Format like the decimal string.

        assert '  -7' == '{:>4}'.format(BigInt(-7))
        """
        return format(str(self), format_spec)

    def __str__(self):
        """
        Decimal rendering, straight from the digits.

        assert '-9876' == str(BigInt(-9876))
        """
        return ('-' if self._negative else '') + ''.join(str(d) for d in reversed(self._digits))

    def __repr__(self):
        """Handle repr(BigInt(x))"""
        return "BigInt('{}')".format(str(self))

    def to_string(self, base=10):
        """
        Render in some base, 2 to 36.  Digits above 9 are capital letters.

        assert 'FF' == BigInt(255).to_string(16)
        assert '-101' == BigInt(-5).to_string(2)
        """
        if not digit_vector.is_valid_base(base):
            raise self.BaseError("Base must be {min} to {max}, not {base}".format(
                min=digit_vector.BASE_MIN,
                max=digit_vector.BASE_MAX,
                base=repr(base),
            ))
        if self.is_zero():
            return '0'
        symbols = []
        quotient = list(self._digits)
        while not digit_vector.is_zero(quotient):
            quotient, remainder = digit_vector.divide_by_base(quotient, base)
            symbols.append(digit_vector.DIGIT_SYMBOLS[remainder])
        if self._negative:
            symbols.append('-')
        return ''.join(reversed(symbols))

    # Comparison
    # ----------
    @classmethod
    def _op_ready(cls, x):
        """Get x ready to be an operand.  A BigInt, or NotImplemented for types we don't mix with."""
        if isinstance(x, BigInt):
            return x
        elif isinstance(x, int):
            return cls(x)
        else:
            return NotImplemented

    def __eq__(self, other):
        """Handle BigInt(x) == something"""
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        return self._negative == other_ready._negative and self._digits == other_ready._digits

    def __ne__(self, other):
        """Handle BigInt(x) != something"""
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other):
        """
        Handle BigInt(x) < something

        More digits means farther from zero, so for negatives more digits means smaller.
        """
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        if self._negative != other_ready._negative:
            return self._negative
        a = self._digits
        b = other_ready._digits
        if len(a) != len(b):
            return len(a) > len(b) if self._negative else len(a) < len(b)
        for i in reversed(range(len(a))):
            if a[i] != b[i]:
                return a[i] > b[i] if self._negative else a[i] < b[i]
        return False

    def __le__(self, other):
        lt_result = self.__lt__(other)
        if lt_result is NotImplemented:
            return NotImplemented
        return lt_result or self.__eq__(other)

    def __gt__(self, other):
        le_result = self.__le__(other)
        if le_result is NotImplemented:
            return NotImplemented
        return not le_result

    def __ge__(self, other):
        lt_result = self.__lt__(other)
        if lt_result is NotImplemented:
            return NotImplemented
        return not lt_result

    # Math
    # ----
    def __pos__(self):
        return type(self)(self)

    def __neg__(self):
        return self._from_sign_digits(not self._negative, self._digits)

    def __abs__(self):
        return self._from_sign_digits(False, self._digits)

    def add(self, other):
        """Sum, self + other.  Same signs add magnitudes, different signs subtract them."""
        a, b = self._digits, other._digits
        if self._negative == other._negative:
            return self._from_sign_digits(self._negative, digit_vector.add_vec(a, b))
        elif digit_vector.abs_compare(a, b) >= 0:
            return self._from_sign_digits(self._negative, digit_vector.subtract_vec(a, b))
        else:
            return self._from_sign_digits(other._negative, digit_vector.subtract_vec(b, a))

    def subtract(self, other):
        """Difference, self - other."""
        a, b = self._digits, other._digits
        if self._negative != other._negative:
            return self._from_sign_digits(self._negative, digit_vector.add_vec(a, b))
        elif digit_vector.abs_compare(a, b) >= 0:
            return self._from_sign_digits(self._negative, digit_vector.subtract_vec(a, b))
        else:
            return self._from_sign_digits(not self._negative, digit_vector.subtract_vec(b, a))

    def multiply(self, other):
        """Product, self * other, by schoolbook long multiplication."""
        return self._from_sign_digits(
            self._negative != other._negative,
            digit_vector.multiply_vec(self._digits, other._digits),
        )

    def divide(self, other):
        """
        Quotient, self / other, truncated toward zero.

        assert BigInt(-14) == BigInt(-100).divide(BigInt(7))
        """
        if other.is_zero():
            raise self.DivisionByZero("Division by zero")
        quotient, _ = self._long_division(other)
        return quotient

    def modulo(self, other):
        """
        Remainder, self % other.  Takes the sign of the dividend (self), never of the divisor.

        assert BigInt(2) == BigInt(100).modulo(BigInt(-7))
        assert BigInt(-2) == BigInt(-100).modulo(BigInt(-7))
        """
        if other.is_zero():
            raise self.DivisionByZero("Modulus by zero")
        _, remainder = self._long_division(other)
        return remainder

    def _long_division(self, other):
        """
        Long division of magnitudes.  Return (quotient, remainder), each a signed BigInt.

        From the most significant dividend digit down, bring the digit into a running
        remainder, then subtract the divisor from it as many times as it fits.  That count
        is the next quotient digit.

        The quotient's sign is the XOR of the operand signs.
        The remainder's sign is the dividend's.  (Zero stays non-negative of course.)
        """
        cls = type(self)
        if digit_vector.abs_compare(self._digits, other._digits) < 0:
            return cls(0), cls(self)
        log.debug("Long division, %d digits by %d digits", len(self._digits), len(other._digits))
        divisor = cls._from_sign_digits(False, other._digits)
        quotient_high_to_low = []
        current = cls(0)
        for digit in reversed(self._digits):
            current = cls._from_sign_digits(False, [digit] + current._digits)
            count = 0
            while current >= divisor:
                current = current - divisor
                count += 1
            assert count <= 9
            quotient_high_to_low.append(count)
        quotient_high_to_low.reverse()
        quotient = cls._from_sign_digits(self._negative != other._negative, quotient_high_to_low)
        remainder = cls._from_sign_digits(self._negative, current._digits)
        return quotient, remainder

    @classmethod
    def _binary_op(cls, op, input_left, input_right):
        """Two-input operator.  Either side may be a Python int."""
        left = cls._op_ready(input_left)
        right = cls._op_ready(input_right)
        if left is NotImplemented or right is NotImplemented:
            return NotImplemented
        return op(left, right)

    def __add__(self, other): return self._binary_op(BigInt.add, self, other)
    def __radd__(self, other): return self._binary_op(BigInt.add, other, self)
    def __sub__(self, other): return self._binary_op(BigInt.subtract, self, other)
    def __rsub__(self, other): return self._binary_op(BigInt.subtract, other, self)
    def __mul__(self, other): return self._binary_op(BigInt.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(BigInt.multiply, other, self)
    def __truediv__( self, other): return self._binary_op(BigInt.divide, self, other)
    def __rtruediv__(self, other): return self._binary_op(BigInt.divide, other, self)
    def __mod__( self, other): return self._binary_op(BigInt.modulo, self, other)
    def __rmod__(self, other): return self._binary_op(BigInt.modulo, other, self)
    # NOTE:  No // operator.  Python's // floors, and BigInt division truncates.

    def __divmod__(self, other):
        """divmod(a, b) == (a / b, a % b), with one long division."""
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        if other_ready.is_zero():
            raise self.DivisionByZero("Division by zero")
        return self._long_division(other_ready)

    def __rdivmod__(self, other):
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        return other_ready.__divmod__(self)

    # In-place math
    # -------------
    # NOTE:  No __iadd__() etc.  So x += y falls back on __add__() and rebinds x to a new BigInt.
    #        Other references to the old value keep the old value.  A failed x /= 0 leaves x alone.

    def _assign(self, new_value):
        """Replace the value of self, in place.  Return self."""
        self._negative = new_value._negative
        self._digits = list(new_value._digits)
        return self

    def inc(self):
        """
        Add one, in place.  Like ++x, returns the changed BigInt itself.

        n = BigInt(10)
        assert n.inc() is n
        assert BigInt(11) == n
        """
        return self._assign(self + 1)

    def dec(self):
        """Subtract one, in place.  Like --x, returns the changed BigInt itself."""
        return self._assign(self - 1)

    def post_inc(self):
        """
        Add one, in place.  Like x++, returns a copy of the value from before.

        n = BigInt(10)
        assert BigInt(10) == n.post_inc()
        assert BigInt(11) == n
        """
        snapshot = type(self)(self)
        self.inc()
        return snapshot

    def post_dec(self):
        """Subtract one, in place.  Like x--, returns a copy of the value from before."""
        snapshot = type(self)(self)
        self.dec()
        return snapshot


assert BigInt(579) == BigInt(123) + BigInt(456)
assert BigInt(-333) == BigInt(123) - BigInt(456)
assert BigInt(14) == BigInt(100) / BigInt(7)
assert 'FF' == BigInt(255).to_string(16)
