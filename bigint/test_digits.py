"""
Unit tests for the digit vector functions in digits.py
"""


import unittest

from bigint import digits
from bigint.digits import abs_compare, add_vec, divide_by_base, multiply_vec, subtract_vec, trim


def vec(i):
    """Digit vector of a non-negative int, least significant first.  Test helper."""
    return [int(c) for c in reversed(str(i))]


def unvec(d):
    """Non-negative int of a digit vector."""
    return int(''.join(str(x) for x in reversed(d)))


class VecHelperTests(unittest.TestCase):

    def test_vec(self):
        self.assertEqual([3, 2, 1], vec(123))
        self.assertEqual([0], vec(0))
        self.assertEqual(123, unvec([3, 2, 1]))
        self.assertEqual(123, unvec([3, 2, 1, 0]))


class TrimTests(unittest.TestCase):

    def test_trim_excess_zeros(self):
        self.assertEqual([5, 4], trim([5, 4, 0, 0, 0]))

    def test_trim_nothing_to_do(self):
        self.assertEqual([5, 4], trim([5, 4]))

    def test_trim_inner_zeros_stay(self):
        self.assertEqual([0, 0, 1], trim([0, 0, 1]))

    def test_trim_zero(self):
        self.assertEqual([0], trim([0]))
        self.assertEqual([0], trim([0, 0, 0, 0]))

    def test_trim_in_place(self):
        d = [1, 0]
        self.assertIs(d, trim(d))
        self.assertEqual([1], d)

    def test_is_zero(self):
        self.assertTrue(digits.is_zero([0]))
        self.assertFalse(digits.is_zero([1]))
        self.assertFalse(digits.is_zero([0, 1]))


class AbsCompareTests(unittest.TestCase):

    def test_longer_is_bigger(self):
        self.assertEqual(1, abs_compare(vec(100), vec(99)))
        self.assertEqual(-1, abs_compare(vec(99), vec(100)))

    def test_same_length(self):
        self.assertEqual(1, abs_compare(vec(521), vec(512)))
        self.assertEqual(-1, abs_compare(vec(512), vec(521)))

    def test_most_significant_decides(self):
        self.assertEqual(1, abs_compare(vec(900), vec(899)))
        self.assertEqual(-1, abs_compare(vec(199), vec(200)))

    def test_equal(self):
        self.assertEqual(0, abs_compare(vec(0), vec(0)))
        self.assertEqual(0, abs_compare(vec(123456789), vec(123456789)))


class AddSubtractVecTests(unittest.TestCase):

    def test_add_no_carry(self):
        self.assertEqual(vec(579), add_vec(vec(123), vec(456)))

    def test_add_carry_ripples_out(self):
        self.assertEqual(vec(100000), add_vec(vec(99999), vec(1)))
        self.assertEqual(vec(100000), add_vec(vec(1), vec(99999)))

    def test_add_zero(self):
        self.assertEqual(vec(42), add_vec(vec(42), vec(0)))
        self.assertEqual(vec(0), add_vec(vec(0), vec(0)))

    def test_add_many(self):
        for a in (0, 1, 9, 10, 99, 1234, 5000000, 987654321):
            for b in (0, 1, 9, 10, 99, 8766, 5000000, 123456789):
                self.assertEqual(a + b, unvec(add_vec(vec(a), vec(b))), "{} + {}".format(a, b))

    def test_subtract_borrow_ripples(self):
        self.assertEqual(vec(99999), subtract_vec(vec(100000), vec(1)))

    def test_subtract_to_zero(self):
        self.assertEqual([0], subtract_vec(vec(31415), vec(31415)))

    def test_subtract_trims(self):
        self.assertEqual([1], subtract_vec(vec(1001), vec(1000)))

    def test_subtract_many(self):
        for a in (0, 1, 9, 10, 99, 1234, 5000000, 987654321):
            for b in (0, 1, 9, 10, 99, 1234, 5000000, 987654321):
                if a >= b:
                    self.assertEqual(a - b, unvec(subtract_vec(vec(a), vec(b))), "{} - {}".format(a, b))


class MultiplyVecTests(unittest.TestCase):

    def test_multiply(self):
        self.assertEqual(vec(56088), multiply_vec(vec(123), vec(456)))

    def test_multiply_all_nines(self):
        self.assertEqual(vec(9999800001), multiply_vec(vec(99999), vec(99999)))

    def test_multiply_by_zero(self):
        self.assertEqual([0], multiply_vec(vec(123456), vec(0)))
        self.assertEqual([0], multiply_vec(vec(0), vec(123456)))

    def test_multiply_by_one(self):
        self.assertEqual(vec(123456), multiply_vec(vec(123456), vec(1)))

    def test_multiply_many(self):
        for a in (0, 1, 7, 10, 99, 1234, 5000000, 987654321):
            for b in (0, 1, 3, 10, 99, 8766, 5000000, 123456789):
                self.assertEqual(a * b, unvec(multiply_vec(vec(a), vec(b))), "{} * {}".format(a, b))


class DivideByBaseTests(unittest.TestCase):

    def test_hex(self):
        self.assertEqual((vec(15), 15), divide_by_base(vec(255), 16))
        self.assertEqual((vec(16), 0), divide_by_base(vec(256), 16))

    def test_binary(self):
        self.assertEqual((vec(2), 1), divide_by_base(vec(5), 2))

    def test_smaller_than_base(self):
        self.assertEqual(([0], 35), divide_by_base(vec(35), 36))

    def test_every_base(self):
        n = 98765432109876543210
        for base in range(2, 37):
            quotient, remainder = divide_by_base(vec(n), base)
            self.assertEqual(n // base, unvec(quotient))
            self.assertEqual(n % base, remainder)
            self.assertTrue(len(quotient) == 1 or quotient[-1] != 0)


class DigitValueTests(unittest.TestCase):

    def test_decimal_symbols(self):
        for i in range(10):
            self.assertEqual(i, digits.digit_value(str(i)))

    def test_letters_either_case(self):
        self.assertEqual(10, digits.digit_value('A'))
        self.assertEqual(10, digits.digit_value('a'))
        self.assertEqual(35, digits.digit_value('Z'))
        self.assertEqual(35, digits.digit_value('z'))

    def test_symbol_table_agrees(self):
        for value, symbol in enumerate(digits.DIGIT_SYMBOLS):
            self.assertEqual(value, digits.digit_value(symbol))

    def test_not_symbols(self):
        for symbol in (' ', '-', '+', '@', '_', '.', '٣'):
            self.assertIsNone(digits.digit_value(symbol), repr(symbol))

    def test_valid_base(self):
        self.assertTrue(digits.is_valid_base(2))
        self.assertTrue(digits.is_valid_base(10))
        self.assertTrue(digits.is_valid_base(36))
        self.assertFalse(digits.is_valid_base(0))
        self.assertFalse(digits.is_valid_base(1))
        self.assertFalse(digits.is_valid_base(37))
        self.assertFalse(digits.is_valid_base(-10))
        self.assertFalse(digits.is_valid_base(16.0))
        self.assertFalse(digits.is_valid_base('16'))
        self.assertFalse(digits.is_valid_base(True))


if __name__ == '__main__':
    unittest.main()
