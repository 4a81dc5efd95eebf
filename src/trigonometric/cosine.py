"""
Cosine — cos(x) = sin(π/2 - x)

Угол приводится по модулю 2π в точной десятичной арифметике, затем
вычисляется sin(π/2 - x). π берётся с рабочей точностью (34 цифры)
независимо от точности, запрошенной вызывающим.

Приведённый угол, равный нулю, обрабатывается отдельно: cos(0) = 1
без вызова ряда.
"""

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Final

from src.core.math.constants import half_pi, reduce_angle
from src.core.math.precision import (
    FunctionDomainError,
    exact_context,
    round_to_scale,
    working_divide,
)
from src.core.math.series import LimitedIterationsFunction
from src.trigonometric.sine import Sine, get_sine

logger = logging.getLogger(__name__)

_ONE: Final[Decimal] = Decimal(1)


class Cosine(LimitedIterationsFunction):
    """cos(x) через тождество cos(x) = sin(π/2 - x)."""

    def __init__(self, sine: Sine | None = None):
        super().__init__()
        if sine is None:
            self._sine = get_sine()
            logger.info("Cosine function initialized with default Sin instance.")
        else:
            self._sine = sine
            logger.info("Cosine function initialized with provided Sin instance.")

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Косинус угла x (радианы).

        Args:
            x: Угол в радианах
            precision: Точность, строго между 0 и 1

        Returns:
            cos(x), округлённый до scale(precision)

        Raises:
            InvalidParameterError: Если параметры некорректны
        """
        x, precision = self.check_validity(x, precision)

        corrected_x = reduce_angle(x)
        logger.debug("Corrected input angle for cosine calculation: %s", corrected_x)

        if corrected_x == 0:
            logger.debug("Input angle is 0 radians, returning cosine value 1")
            return round_to_scale(_ONE, precision)

        with exact_context():
            shifted = half_pi() - corrected_x

        result = round_to_scale(self._sine.calculate(shifted, precision), precision)
        logger.debug("Calculated cosine of %s: %s", x, result)
        return result

    def calculate_sec(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Секанс угла x: 1 / cos(x).

        Raises:
            InvalidParameterError: Если параметры некорректны
            FunctionDomainError: Если cos(x) округляется до нуля
        """
        x, precision = self.check_validity(x, precision)

        cos_value = self.calculate(x, precision)

        if cos_value == 0:
            message = f"Secant is undefined for angle {x} (cos(x) = 0)."
            logger.error(message)
            raise FunctionDomainError(message)

        return round_to_scale(working_divide(_ONE, cos_value), precision)


class Secant:
    """sec(x) через единый контракт calculate(x, precision)."""

    def __init__(self, cosine: Cosine | None = None):
        self._cosine = cosine if cosine is not None else get_cosine()

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        return self._cosine.calculate_sec(x, precision)


@lru_cache(maxsize=None)
def get_cosine() -> Cosine:
    """Канонический общий экземпляр Cosine (поверх get_sine())."""
    return Cosine(get_sine())
