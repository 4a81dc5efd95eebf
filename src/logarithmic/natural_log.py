"""
Natural Logarithm — ln(x) знакопеременными рядами

Два режима, выбираемых по |x - 1|:

- Near (|x - 1| <= 1):
      Σ (-1)^(i-1) · (x-1)^i / i
  Возвращается СРЕДНЕЕ двух последних частичных сумм (ускорение сходимости
  знакопеременного ряда, а не опечатка).

- Far (|x - 1| > 1):
      Σ (-1)^(i-1) / ((x-1)^i · i)  =  ln(x) - ln(x-1)
  Затем к сумме добавляется ln(x - 1); аргумент уменьшается на 1 до тех
  пор, пока не попадёт в near-режим (цикл, O(x) шагов).

Каждый член ряда округляется до scale (ROUND_HALF_UP) перед суммированием.
Ряд останавливается, когда |cur - prev| <= 10^(-scale) или исчерпан
бюджет итераций (MAX_ITERATIONS); исчерпание бюджета не является ошибкой.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x <= 0 → FunctionDomainError
2. ln(1) = 0 без вызова ряда
3. Результат округлён до scale(precision), ROUND_HALF_EVEN
"""

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Final

from src.core.math.precision import (
    FunctionDomainError,
    convergence_threshold,
    exact_context,
    round_term,
    round_to_scale,
    scale_of,
    series_context,
)
from src.core.math.series import LimitedIterationsFunction

logger = logging.getLogger(__name__)

_ZERO: Final[Decimal] = Decimal(0)
_ONE: Final[Decimal] = Decimal(1)
_HALF: Final[Decimal] = Decimal("0.5")


class NaturalLog(LimitedIterationsFunction):
    """ln(x) рядами с редукцией аргумента к окрестности 1."""

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Натуральный логарифм x.

        Args:
            x: Аргумент, строго больше нуля
            precision: Точность, строго между 0 и 1

        Returns:
            ln(x), округлённый до scale(precision)

        Raises:
            InvalidParameterError: Если параметры некорректны
            FunctionDomainError: Если x <= 0
        """
        x, precision = self.check_validity(x, precision)

        if x <= 0:
            logger.error(
                "Function value for argument %s doesn't exist because it is "
                "less than or equal to zero.",
                x,
            )
            raise FunctionDomainError(f"Function value for argument {x} doesn't exist")

        if x == 1:
            return round_to_scale(_ZERO, precision)

        total = _ZERO
        argument = x

        # Far-режим: ln(x) = [ln(x) - ln(x-1)] + ln(x-1), пока x - 1 > 1
        while abs(argument - _ONE) > _ONE:
            far_value = self._far_series(argument, precision)
            with exact_context():
                total = total + far_value
                argument = argument - _ONE
            logger.debug("Reducing argument toward 1: %s", argument)

        if argument != _ONE:
            with exact_context():
                total = total + self._near_series(argument, precision)

        result = round_to_scale(total, precision)
        logger.debug("Final result for ln(%s) with precision %s: %s", x, precision, result)
        return result

    def _near_series(self, x: Decimal, precision: Decimal) -> Decimal:
        """Σ (-1)^(i-1) (x-1)^i / i; среднее двух последних частичных сумм."""
        scale = scale_of(precision)
        threshold = convergence_threshold(precision)

        with exact_context():
            delta = x - _ONE

        power = _ONE
        current = _ZERO
        previous = _ZERO
        i = 1
        while True:
            previous = current
            with series_context(scale):
                power = power * delta
                raw_term = power / i
            term = round_term(raw_term if i % 2 == 1 else -raw_term, scale)
            with exact_context():
                current = current + term
            logger.debug("Iteration %d: Current Value = %s", i, current)
            i += 1

            if abs(previous - current) <= threshold or i >= self.max_iterations:
                break

        with exact_context():
            average = (current + previous) * _HALF
        return round_to_scale(average, precision)

    def _far_series(self, x: Decimal, precision: Decimal) -> Decimal:
        """Σ (-1)^(i-1) / ((x-1)^i · i) = ln(x) - ln(x-1)."""
        scale = scale_of(precision)
        threshold = convergence_threshold(precision)

        with exact_context():
            delta = x - _ONE

        power = _ONE
        current = _ZERO
        i = 1
        while True:
            previous = current
            with series_context(scale):
                power = power * delta
                reciprocal = _ONE / power
            reciprocal = round_term(reciprocal if i % 2 == 1 else -reciprocal, scale)
            with series_context(scale):
                raw_term = reciprocal / i
            term = round_term(raw_term, scale)
            with exact_context():
                current = current + term
            logger.debug("Iteration %d: Current Value = %s", i, current)
            i += 1

            if abs(previous - current) <= threshold or i >= self.max_iterations:
                break

        return current


@lru_cache(maxsize=None)
def get_natural_log() -> NaturalLog:
    """Канонический общий экземпляр NaturalLog."""
    return NaturalLog()
