"""
Constants — π с рабочей точностью и приведение угла по модулю 2π

π вычисляется mpmath (binary splitting) с запасом разрядов и округляется
до WORKING_PRECISION значащих цифр, ROUND_HALF_EVEN. Точность π не зависит
от точности, запрошенной вызывающим.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. pi() содержит ровно 34 значащих цифры
2. half_pi() и two_pi() получены из pi() точно (без повторного округления)
3. reduce_angle() точен и сохраняет знак делимого
"""

import math
from decimal import ROUND_HALF_EVEN, Context, Decimal
from functools import lru_cache
from typing import Final

from mpmath.libmp import mpf_pi, to_str

from src.core.math.precision import WORKING_PRECISION, exact_context

# Запас десятичных разрядов при генерации π
PI_GUARD_DIGITS: Final[int] = 10

_HALF: Final[Decimal] = Decimal("0.5")
_TWO: Final[Decimal] = Decimal(2)


@lru_cache(maxsize=None)
def pi(digits: int = WORKING_PRECISION) -> Decimal:
    """
    π с заданным числом значащих цифр (ROUND_HALF_EVEN).

    Args:
        digits: Число значащих цифр (default: WORKING_PRECISION)

    Returns:
        π как Decimal

    Examples:
        >>> pi()
        Decimal('3.141592653589793238462643383279503')
    """
    raw_digits = digits + PI_GUARD_DIGITS
    prec_bits = math.ceil(raw_digits * math.log2(10)) + 8
    raw = to_str(mpf_pi(prec_bits), raw_digits)
    return Context(prec=digits, rounding=ROUND_HALF_EVEN).create_decimal(raw)


def half_pi() -> Decimal:
    """π/2, точно из 34-значного π."""
    with exact_context():
        return pi() * _HALF


def two_pi() -> Decimal:
    """2π, точно из 34-значного π."""
    with exact_context():
        return pi() * _TWO


def reduce_angle(x: Decimal) -> Decimal:
    """
    Остаток x по модулю 2π (усечённый, знак делимого).

    Examples:
        >>> reduce_angle(Decimal(-5))
        Decimal('-5')
        >>> reduce_angle(two_pi())
        Decimal('0E-33')
    """
    with exact_context():
        return x % two_pi()
