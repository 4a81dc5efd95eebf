"""
Тесты для NaturalLog — near/far ряды

Проверяемые инварианты:
1. x <= 0 → FunctionDomainError
2. ln(1) = 0 без вызова рядов
3. Near-режим возвращает среднее двух последних частичных сумм
4. Far-режим сводится к near-режиму циклом (без рекурсии)
5. Результат имеет ровно scale(precision) дробных разрядов
"""

from decimal import Decimal
from unittest.mock import patch

import mpmath
import pytest

from src.core.math.precision import FunctionDomainError, InvalidParameterError
from src.logarithmic.natural_log import NaturalLog, get_natural_log


@pytest.fixture
def ln() -> NaturalLog:
    return NaturalLog()


def _reference(x: str) -> Decimal:
    return Decimal(mpmath.nstr(mpmath.log(mpmath.mpf(x)), 20))


# =============================================================================
# ТЕСТЫ: Область определения
# =============================================================================


class TestNaturalLogDomain:
    """x <= 0 и невалидные параметры."""

    @pytest.mark.parametrize("x", ["0", "-1", "-0.5"])
    def test_non_positive_undefined(self, ln, x):
        with pytest.raises(FunctionDomainError, match="doesn't exist"):
            ln.calculate(Decimal(x), Decimal("0.0001"))

    def test_invalid_precision(self, ln):
        with pytest.raises(InvalidParameterError):
            ln.calculate(Decimal(2), Decimal(0))

    def test_none_argument(self, ln):
        with pytest.raises(InvalidParameterError):
            ln.calculate(None, Decimal("0.0001"))


# =============================================================================
# ТЕСТЫ: ln(1)
# =============================================================================


class TestNaturalLogOfOne:
    """ln(1) = 0 без вызова рядов."""

    def test_exact_zero(self, ln):
        assert str(ln.calculate(Decimal(1), Decimal("0.0001"))) == "0.0000"

    def test_series_not_invoked(self, ln):
        with patch.object(NaturalLog, "_near_series") as near, patch.object(
            NaturalLog, "_far_series"
        ) as far:
            ln.calculate(Decimal(1), Decimal("0.01"))
        near.assert_not_called()
        far.assert_not_called()


# =============================================================================
# ТЕСТЫ: Near-режим
# =============================================================================


class TestNearRegime:
    """|x - 1| <= 1."""

    def test_averaged_partial_sums(self, ln):
        """
        ln(1.5) при точности 0.0001: последние частичные суммы 0.4056 и 0.4055,
        среднее 0.40555 → 0.4056 (ROUND_HALF_EVEN).
        """
        assert ln.calculate(Decimal("1.5"), Decimal("0.0001")) == Decimal("0.4056")

    def test_below_one(self, ln):
        result = ln.calculate(Decimal("0.5"), Decimal("1E-8"))
        assert abs(result - _reference("0.5")) <= Decimal("1E-6")

    def test_only_near_series_used(self, ln):
        with patch.object(NaturalLog, "_far_series") as far:
            ln.calculate(Decimal("1.7"), Decimal("0.001"))
        far.assert_not_called()


# =============================================================================
# ТЕСТЫ: Far-режим
# =============================================================================


class TestFarRegime:
    """|x - 1| > 1: сведение к near-режиму."""

    @pytest.mark.parametrize("x", ["5", "10"])
    def test_matches_mpmath(self, ln, x):
        result = ln.calculate(Decimal(x), Decimal("1E-8"))
        assert abs(result - _reference(x)) <= Decimal("1E-5")

    def test_far_series_called_per_reduction_step(self, ln):
        """ln(5) = far(5) + far(4) + far(3) + near(2)."""
        with patch.object(NaturalLog, "_far_series", wraps=ln._far_series) as far:
            ln.calculate(Decimal(5), Decimal("0.001"))
        arguments = [call.args[0] for call in far.call_args_list]
        assert arguments == [Decimal(5), Decimal(4), Decimal(3)]

    def test_large_argument_no_recursion_limit(self, ln):
        result = ln.calculate(Decimal(5000), Decimal("0.01"))
        assert result > 0
        assert result.as_tuple().exponent == -2

    def test_large_argument_accuracy(self, ln):
        result = ln.calculate(Decimal(1000), Decimal("0.0001"))
        assert abs(result - _reference("1000")) <= Decimal("0.1")


class TestSharedInstance:
    def test_get_natural_log_cached(self):
        assert get_natural_log() is get_natural_log()
