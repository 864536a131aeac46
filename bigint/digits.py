"""
Digit vectors - the magnitude of a BigInt, one decimal digit per element.

A digit vector is a list of ints 0-9, least-significant digit first.
    [3, 2, 1] is 123
    [0] is zero
The functions here never look at a sign.  BigInt takes care of that.
"""


BASE_MIN = 2
BASE_MAX = 36
DIGIT_SYMBOLS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'
assert len(DIGIT_SYMBOLS) == BASE_MAX


class InvalidArgument(ValueError):
    """The one kind of error a BigInt raises for a bad value, e.g. BigInt(''), BigInt(1) / 0"""


def trim(digits):
    """
    Strip most-significant zeros, in place.  Leaves at least one digit.

    Returns the same list, for chaining.
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits
assert [3, 2, 1] == trim([3, 2, 1, 0, 0])
assert [0] == trim([0, 0, 0])


def is_zero(digits):
    """Is this (trimmed) digit vector zero?"""
    return len(digits) == 1 and digits[0] == 0


def abs_compare(a, b):
    """
    Compare two trimmed magnitudes.

    Returns 1 if a > b, -1 if a < b, 0 if equal.  A longer vector is the bigger one.
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for i in reversed(range(len(a))):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1
    return 0
assert 1 == abs_compare([0, 1], [9])
assert -1 == abs_compare([1, 2], [2, 2])
assert 0 == abs_compare([7], [7])


def add_vec(a, b):
    """Sum of two magnitudes, with carry."""
    result = []
    carry = 0
    i = 0
    while i < max(len(a), len(b)) or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % 10)
        carry = total // 10
        i += 1
    return result
assert [0, 0, 1] == add_vec([9, 9], [1])


def subtract_vec(a, b):
    """
    Difference a - b of two magnitudes, with borrow.

    The caller makes sure a >= b, see abs_compare().  The result is trimmed.
    """
    result = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    assert borrow == 0, "subtract_vec() needs a >= b"
    return trim(result)
assert [9, 9] == subtract_vec([0, 0, 1], [1])
assert [0] == subtract_vec([5, 4], [5, 4])


def multiply_vec(a, b):
    """
    Product of two magnitudes, by schoolbook long multiplication.

    O(len(a) * len(b)).  The result is trimmed.
    """
    product = [0] * (len(a) + len(b))
    for i in range(len(a)):
        carry = 0
        j = 0
        while j < len(b) or carry:
            current = product[i + j] + a[i] * (b[j] if j < len(b) else 0) + carry
            product[i + j] = current % 10
            carry = current // 10
            j += 1
    return trim(product)
assert [8, 8, 0, 6, 5] == multiply_vec([3, 2, 1], [6, 5, 4])   # 123 * 456 == 56088
assert [0] == multiply_vec([0], [9, 9, 9])


def divide_by_base(digits, base):
    """
    Divide a magnitude by a small base.  Return (quotient digits, remainder).

    One pass from the most significant digit down, carrying c = c*10 + digit.
    The remainder is a single symbol value 0 <= remainder < base, see DIGIT_SYMBOLS.
    """
    quotient = [0] * len(digits)
    c = 0
    for i in reversed(range(len(digits))):
        c = c * 10 + digits[i]
        quotient[i] = c // base
        c %= base
    return trim(quotient), c
assert ([5, 1], 15) == divide_by_base([5, 5, 2], 16)   # 255 == 15*16 + 15


def digit_value(symbol):
    """
    The value of one digit symbol, case-insensitive, or None if it isn't one.

        '7' --> 7
        'a' --> 10
        'Z' --> 35
        '@' --> None
    """
    if '0' <= symbol <= '9':
        return ord(symbol) - ord('0')
    elif 'A' <= symbol <= 'Z':
        return ord(symbol) - ord('A') + 10
    elif 'a' <= symbol <= 'z':
        return ord(symbol) - ord('a') + 10
    else:
        return None
assert 35 == digit_value('z') == digit_value('Z')
assert digit_value(' ') is None


def is_valid_base(base):
    """Can a BigInt be parsed or rendered in this base?"""
    return isinstance(base, int) and not isinstance(base, bool) and BASE_MIN <= base <= BASE_MAX
assert is_valid_base(36)
assert not is_valid_base(1)
