import math

import pytest

from infixcalc.errors import DivideByZero
from infixcalc.operations import (
    divide,
    integer_divide,
    remainder,
    power,
    lookup,
    operations,
)


class TestOperations:
    def test_divide_signed_infinity(self):
        assert divide(1.0, -0.0) == -math.inf
        assert divide(-2.0, 0.0) == -math.inf

    def test_integer_divide_truncates_toward_zero(self):
        assert integer_divide(-7.0, 2.0) == -3.0
        assert integer_divide(7.9, 1.0) == 7.0

    def test_integer_divide_infinite_quotient(self):
        assert integer_divide(math.inf, 2.0) == math.inf

    def test_integer_divide_by_zero(self):
        with pytest.raises(DivideByZero):
            integer_divide(1.0, 0.0)

    def test_remainder_has_sign_of_dividend(self):
        assert remainder(-7.0, 3.0) == -1.0
        assert remainder(7.0, -3.0) == 1.0

    def test_remainder_of_infinity(self):
        assert math.isnan(remainder(math.inf, 3.0))

    def test_power_overflow(self):
        assert power(10.0, 400.0) == math.inf
        assert power(-10.0, 401.0) == -math.inf

    def test_lookup(self):
        assert lookup('+') == (1, operations[0]['+'])
        assert lookup('%')[0] == 2
        assert lookup('^')[0] == 3
        with pytest.raises(KeyError):
            lookup('&')
