"""
Тесты для Log(base) — log_b(x) = ln(x) / ln(b)
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from src.core.math.precision import FunctionDomainError, InvalidParameterError
from src.logarithmic.log import Log, get_log
from src.logarithmic.natural_log import NaturalLog, get_natural_log

DEFAULT_PRECISION = Decimal("0.0001")


class TestLogValues:
    """Значения логарифма."""

    @pytest.mark.parametrize("base", [2, 3, 5, 10])
    def test_log_of_base_is_one(self, base):
        assert get_log(base).calculate(Decimal(base), DEFAULT_PRECISION) == Decimal("1.0000")

    def test_log_of_one_is_zero(self):
        assert str(get_log(10).calculate(Decimal(1), DEFAULT_PRECISION)) == "0.0000"

    def test_log2_of_eight(self):
        result = get_log(2).calculate(Decimal(8), Decimal("1E-8"))
        assert abs(result - 3) <= Decimal("1E-5")

    def test_scale(self):
        result = get_log(3).calculate(Decimal("2.5"), Decimal("0.001"))
        assert result.as_tuple().exponent == -3


class TestLogDomain:
    """x <= 0 и некорректное основание."""

    @pytest.mark.parametrize("x", ["0", "-3"])
    def test_non_positive_undefined(self, x):
        with pytest.raises(FunctionDomainError, match="doesn't exist"):
            get_log(5).calculate(Decimal(x), DEFAULT_PRECISION)

    @pytest.mark.parametrize("base", [1, 0, -2])
    def test_base_below_two(self, base):
        with pytest.raises(InvalidParameterError, match=">= 2"):
            Log(base)

    @pytest.mark.parametrize("base", [2.5, "10", True, None])
    def test_base_not_integer(self, base):
        with pytest.raises(InvalidParameterError, match="integer"):
            Log(base)

    def test_invalid_precision(self):
        with pytest.raises(InvalidParameterError):
            get_log(2).calculate(Decimal(4), Decimal("1.5"))


class TestLogWiring:
    """Зависимость от натурального логарифма."""

    def test_with_mocked_natural_log(self):
        values = {Decimal(100): Decimal("4.6052"), Decimal(10): Decimal("2.3026")}
        natural_log = Mock(spec=NaturalLog)
        natural_log.calculate.side_effect = lambda x, p: values[x]

        result = Log(10, natural_log).calculate(Decimal(100), DEFAULT_PRECISION)

        assert result == Decimal("2.0000")
        assert natural_log.calculate.call_count == 2

    def test_default_uses_shared_natural_log(self):
        assert Log(7)._natural_log is get_natural_log()

    def test_instances_cached_per_base(self):
        assert get_log(3) is get_log(3)
        assert get_log(3) is not get_log(5)
        assert get_log(5).base == 5

    def test_repr(self):
        assert repr(Log(2)) == "Log(base=2)"
