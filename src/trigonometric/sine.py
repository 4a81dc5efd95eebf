"""
Sine — sin(x) рядом Тейлора

Алгоритм:
1. Приведение угла в [-2π, 2π] повторным вычитанием/прибавлением 2π
   в двойной точности (float), с сохранением знака
2. Сумма ряда Σ (-1)^i · x^(2i+1)/(2i+1)!, где каждый член — бегущее
   произведение множителей x/k (без факториала в явном виде)
3. Остановка, когда |sum - prev| <= 10^(-scale)
4. Округление до scale, ROUND_HALF_EVEN

Приведение угла выполняется во float, а сам ряд — в точной десятичной
арифметике: каждый множитель x/k — это float-частное, переведённое
в Decimal без потерь. Для |x| > 2π·MAX_ITERATIONS угол предварительно
приводится точно в Decimal (остаток по модулю 34-значного 2π), поэтому
любой конечный Decimal, в том числе вне диапазона float, допустим.

Sine — фундамент всех тригонометрических функций (cos, tan, cot, csc, sec).
"""

import logging
import math
from decimal import Decimal
from functools import lru_cache
from typing import Final

from src.core.math.constants import reduce_angle
from src.core.math.precision import (
    MAX_ITERATIONS,
    FunctionDomainError,
    InvalidParameterError,
    convergence_threshold,
    exact_context,
    round_to_scale,
    working_divide,
)
from src.core.math.series import LimitedIterationsFunction

logger = logging.getLogger(__name__)

# 2π в двойной точности (граница цикла приведения)
TWO_PI_DOUBLE: Final[float] = math.pi * 2

_ONE: Final[Decimal] = Decimal(1)

# Граница, выше которой угол сначала приводится точно (Decimal mod 2π)
EXACT_REDUCTION_LIMIT: Final[Decimal] = Decimal(TWO_PI_DOUBLE * MAX_ITERATIONS)


def reduce_angle_double(angle: float) -> float:
    """
    Приведение угла в [-2π, 2π] во float с сохранением знака.

    Положительный угол уменьшается до <= 2π, отрицательный увеличивается
    до >= -2π.

    Raises:
        InvalidParameterError: Если угол не представим конечным float
    """
    if not math.isfinite(angle):
        raise InvalidParameterError(f"Angle {angle} can not be reduced")

    if abs(angle) > TWO_PI_DOUBLE * MAX_ITERATIONS:
        angle = math.fmod(angle, TWO_PI_DOUBLE)

    if angle >= 0:
        while angle > TWO_PI_DOUBLE:
            angle -= TWO_PI_DOUBLE
    else:
        while angle < -TWO_PI_DOUBLE:
            angle += TWO_PI_DOUBLE

    return angle


class Sine(LimitedIterationsFunction):
    """sin(x) рядом Тейлора с приведением угла."""

    def __init__(self, max_iterations: int = MAX_ITERATIONS):
        super().__init__(max_iterations)
        logger.info("Sine function initialized.")

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Синус угла x (радианы).

        Args:
            x: Угол в радианах
            precision: Точность, строго между 0 и 1

        Returns:
            sin(x), округлённый до scale(precision)

        Raises:
            InvalidParameterError: Если параметры некорректны
        """
        x, precision = self.check_validity(x, precision)
        threshold = convergence_threshold(precision)

        if abs(x) > EXACT_REDUCTION_LIMIT:
            angle = reduce_angle_double(float(reduce_angle(x)))
        else:
            angle = reduce_angle_double(float(x))
        logger.debug("Normalized input angle for sine calculation: %r", angle)

        with exact_context():
            total = Decimal(0)
            # Бегущее произведение x/1 · x/2 · ... · x/(2i+1)
            term = Decimal(angle)
            i = 0
            while True:
                previous = total
                total = total + term if i % 2 == 0 else total - term
                i += 1

                if abs(previous - total) <= threshold:
                    break
                if i >= self.max_iterations:
                    logger.warning(
                        "Sine series for %s stopped after %d terms without convergence",
                        x,
                        i,
                    )
                    break

                term = term * Decimal(angle / (2 * i)) * Decimal(angle / (2 * i + 1))

        result = round_to_scale(total, precision)
        logger.debug("Calculated sine of %s: %s", x, result)
        return result

    def calculate_csc(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Косеканс угла x: 1 / sin(x).

        Raises:
            InvalidParameterError: Если параметры некорректны
            FunctionDomainError: Если sin(x) округляется до нуля
        """
        x, precision = self.check_validity(x, precision)

        sin_value = self.calculate(x, precision)

        if sin_value == 0:
            message = f"Cosecant is undefined for angle {x} (sin(x) = 0)."
            logger.error(message)
            raise FunctionDomainError(message)

        return round_to_scale(working_divide(_ONE, sin_value), precision)


class Cosecant:
    """csc(x) через единый контракт calculate(x, precision)."""

    def __init__(self, sine: Sine | None = None):
        self._sine = sine if sine is not None else get_sine()

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        return self._sine.calculate_csc(x, precision)


@lru_cache(maxsize=None)
def get_sine() -> Sine:
    """Канонический общий экземпляр Sine."""
    return Sine()
