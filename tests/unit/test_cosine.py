"""
Тесты для Cosine — cos(x) = sin(π/2 - x)

Проверяемые инварианты:
1. Приведение по модулю 2π точное, приведённый 0 → 1 без вызова синуса
2. Синус вызывается в точке π/2 - x (π с рабочей точностью)
3. sec(x) = 1/cos(x), не определён при cos(x) = 0
"""

from decimal import Decimal
from unittest.mock import Mock

import mpmath
import pytest

from src.core.math.constants import half_pi, pi, two_pi
from src.core.math.precision import (
    FunctionDomainError,
    InvalidParameterError,
    exact_context,
    working_divide,
)
from src.trigonometric.cosine import Cosine, Secant, get_cosine
from src.trigonometric.sine import Sine, get_sine

DEFAULT_PRECISION = Decimal("0.0001")


@pytest.fixture
def cosine() -> Cosine:
    return Cosine()


# =============================================================================
# ТЕСТЫ: cos(x)
# =============================================================================


class TestCosine:
    """Значения косинуса."""

    def test_zero(self, cosine):
        assert str(cosine.calculate(Decimal(0), DEFAULT_PRECISION)) == "1.0000"

    def test_one(self, cosine):
        assert cosine.calculate(Decimal(1), DEFAULT_PRECISION) == Decimal("0.5403")

    def test_periodicity_large_negative(self, cosine):
        assert cosine.calculate(Decimal(-543), DEFAULT_PRECISION) == Decimal("-0.8797")

    def test_two_pi_short_circuit(self, cosine):
        assert cosine.calculate(two_pi(), DEFAULT_PRECISION) == Decimal("1.0000")

    def test_pi(self, cosine):
        assert cosine.calculate(pi(), DEFAULT_PRECISION) == Decimal("-1.0000")

    @pytest.mark.parametrize("x", ["-2.5", "0.75", "4", "12"])
    def test_matches_mpmath(self, cosine, x):
        result = cosine.calculate(Decimal(x), Decimal("1E-10"))
        reference = Decimal(mpmath.nstr(mpmath.cos(mpmath.mpf(x)), 20))
        assert abs(result - reference) <= Decimal("1E-9")

    def test_invalid_precision(self, cosine):
        with pytest.raises(InvalidParameterError):
            cosine.calculate(Decimal(1), Decimal(1))


class TestCosineWiring:
    """Зависимость от синуса."""

    def test_default_uses_shared_sine(self):
        assert Cosine()._sine is get_sine()

    def test_delegates_to_sine_at_shifted_angle(self):
        sine = Mock(spec=Sine)
        sine.calculate.return_value = Decimal("0.283662")
        precision = Decimal("0.000001")

        result = Cosine(sine).calculate(Decimal(5), precision)

        with exact_context():
            expected_angle = half_pi() - Decimal(5)
        sine.calculate.assert_called_once_with(expected_angle, precision)
        assert result == Decimal("0.283662")

    def test_zero_does_not_call_sine(self):
        sine = Mock(spec=Sine)
        result = Cosine(sine).calculate(Decimal(0), DEFAULT_PRECISION)
        sine.calculate.assert_not_called()
        assert result == 1

    def test_spy_on_real_sine(self):
        spy = Mock(wraps=Sine())
        result = Cosine(spy).calculate(Decimal(1), DEFAULT_PRECISION)
        assert spy.calculate.call_count == 1
        assert result == Decimal("0.5403")


# =============================================================================
# ТЕСТЫ: sec(x)
# =============================================================================


class TestSecant:
    """sec(x) = 1/cos(x)."""

    def test_zero(self, cosine):
        assert cosine.calculate_sec(Decimal(0), DEFAULT_PRECISION) == Decimal("1.0000")

    def test_third_of_pi(self, cosine):
        angle = working_divide(pi(), Decimal(3))
        assert cosine.calculate_sec(angle, DEFAULT_PRECISION) == Decimal("2.0000")

    def test_pi(self, cosine):
        assert cosine.calculate_sec(pi(), DEFAULT_PRECISION) == Decimal("-1.0000")

    def test_half_pi_undefined(self, cosine):
        with pytest.raises(FunctionDomainError, match="Secant is undefined"):
            cosine.calculate_sec(half_pi(), DEFAULT_PRECISION)

    def test_adapter(self, cosine):
        assert Secant(cosine).calculate(Decimal(0), DEFAULT_PRECISION) == Decimal("1.0000")

    @pytest.mark.parametrize("x", ["0.3", "1", "-2", "2.5", "4", "-5.5"])
    def test_sec_times_cos_is_one(self, cosine, x):
        precision = Decimal("1E-8")
        product = cosine.calculate(Decimal(x), precision) * cosine.calculate_sec(
            Decimal(x), precision
        )
        assert abs(product - 1) <= Decimal("1E-7")


class TestSharedInstance:
    def test_get_cosine_cached(self):
        assert get_cosine() is get_cosine()
