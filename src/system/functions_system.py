"""
Functions System — составная формула из тригонометрической и логарифмической ветвей

Аргумент приводится по модулю 2π (точно, с 34-значным π), ветвь выбирается
по знаку ИСХОДНОГО x:

x <= 0 (тригонометрическая ветвь), все значения в приведённой точке:
    term1 = tan / cot / sin
    term2 = sin - cos
    term3 = cot + (cos - cos)
    term4 = csc - sec + sec
    term5 = term3 / term4
    result = term1 + term2 - term5 - sin

x > 0 (логарифмическая ветвь):
    term1 = log5 - log10 - ln
    term2 = term1 / log10 / log3
    term3 = log2 - log10 - ln
    result = term2 - term3

Порядок операций фиксирован: деления выполняются с рабочей точностью
(34 цифры), сложения и вычитания точно, поэтому любая "упрощённая" форма
даст другой округлённый результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. calculate() НИКОГДА не пробрасывает FunctionDomainError: вместо
   неопределённого подвыражения возвращается DEFAULT_VALUE
2. InvalidParameterError всегда пробрасывается вызывающему
3. Настоящий результат имеет ровно scale(precision) дробных разрядов,
   поэтому никогда не совпадает с DEFAULT_VALUE по представлению
"""

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Final

from src.core.math.constants import reduce_angle
from src.core.math.precision import (
    FunctionDomainError,
    exact_context,
    round_to_scale,
    validate,
    working_divide,
)
from src.logarithmic.log import Log, get_log
from src.logarithmic.natural_log import NaturalLog, get_natural_log
from src.trigonometric.cosine import Cosine, get_cosine
from src.trigonometric.cotangent import Cotangent
from src.trigonometric.sine import Sine, get_sine
from src.trigonometric.tangent import Tangent

logger = logging.getLogger(__name__)

# =============================================================================
# SENTINEL
# =============================================================================

# Значение "подвыражение не определено" (наибольшее 32-битное знаковое целое)
DEFAULT_VALUE: Final[Decimal] = Decimal(2147483647)


def is_default_value(value: Decimal) -> bool:
    """
    True, если value — sentinel DEFAULT_VALUE, а не результат вычисления.

    Сравнение по представлению (compare_total): вычисленные значения всегда
    имеют дробные разряды, sentinel — нет.

    Examples:
        >>> is_default_value(DEFAULT_VALUE)
        True
        >>> is_default_value(Decimal("2147483647.0000"))
        False
    """
    return isinstance(value, Decimal) and value.compare_total(DEFAULT_VALUE) == 0


# =============================================================================
# FUNCTIONS SYSTEM
# =============================================================================


class FunctionsSystem:
    """Составная функция; все зависимости можно подменить через конструктор."""

    def __init__(
        self,
        *,
        sine: Sine | None = None,
        cosine: Cosine | None = None,
        tangent: Tangent | None = None,
        cotangent: Cotangent | None = None,
        natural_log: NaturalLog | None = None,
        log2: Log | None = None,
        log3: Log | None = None,
        log5: Log | None = None,
        log10: Log | None = None,
    ):
        self._sine = sine if sine is not None else get_sine()
        self._cosine = cosine if cosine is not None else get_cosine()
        self._tangent = (
            tangent if tangent is not None else Tangent(self._sine, self._cosine)
        )
        self._cotangent = (
            cotangent if cotangent is not None else Cotangent(self._cosine, self._sine)
        )
        self._natural_log = natural_log if natural_log is not None else get_natural_log()
        self._log2 = log2 if log2 is not None else get_log(2)
        self._log3 = log3 if log3 is not None else get_log(3)
        self._log5 = log5 if log5 is not None else get_log(5)
        self._log10 = log10 if log10 is not None else get_log(10)

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Значение составной функции в точке x.

        Args:
            x: Аргумент (любое конечное число)
            precision: Точность, строго между 0 и 1

        Returns:
            Результат, округлённый до scale(precision), или DEFAULT_VALUE,
            если какое-либо подвыражение не определено

        Raises:
            InvalidParameterError: Если параметры некорректны
        """
        x, precision = validate(x, precision)
        corrected_x = reduce_angle(x)

        logger.info("Starting calculation for x: %s with precision: %s", x, precision)
        logger.debug("Corrected x: %s", corrected_x)

        try:
            if x <= 0:
                return self._trigonometric_branch(x, corrected_x, precision)
            return self._logarithmic_branch(x, corrected_x, precision)
        except (FunctionDomainError, ZeroDivisionError) as exc:
            logger.warning("%s", exc)
            logger.warning("Return default value: %s", DEFAULT_VALUE)
            return DEFAULT_VALUE

    def _trigonometric_branch(
        self, x: Decimal, corrected_x: Decimal, precision: Decimal
    ) -> Decimal:
        tan_x = self._tangent.calculate(corrected_x, precision)
        sin_x = self._sine.calculate(corrected_x, precision)
        cos_x = self._cosine.calculate(corrected_x, precision)

        logger.debug("tanX: %s, sinX: %s, cosX: %s", tan_x, sin_x, cos_x)

        if sin_x == 0:
            logger.warning("cotX and cscX are undefined because sinX = 0 at x = %s", x)
            return DEFAULT_VALUE

        if cos_x == 0:
            logger.warning("secX is undefined because cosX = 0 at x = %s", x)
            return DEFAULT_VALUE

        cot_x = self._cotangent.calculate(corrected_x, precision)
        csc_x = self._sine.calculate_csc(corrected_x, precision)
        sec_x = self._cosine.calculate_sec(corrected_x, precision)

        logger.debug("cotX: %s, cscX: %s, secX: %s", cot_x, csc_x, sec_x)

        term1 = working_divide(working_divide(tan_x, cot_x), sin_x)
        with exact_context():
            term2 = sin_x - cos_x
            term3 = cot_x + (cos_x - cos_x)
            term4 = csc_x - sec_x + sec_x
        term5 = working_divide(term3, term4)
        with exact_context():
            raw = term1 + term2 - term5 - sin_x

        result = round_to_scale(raw, precision)
        logger.debug("Result for x <= 0: %s", result)
        return result

    def _logarithmic_branch(
        self, x: Decimal, corrected_x: Decimal, precision: Decimal
    ) -> Decimal:
        log5_x = self._log5.calculate(corrected_x, precision)
        log10_x = self._log10.calculate(corrected_x, precision)
        ln_x = self._natural_log.calculate(corrected_x, precision)
        log3_x = self._log3.calculate(corrected_x, precision)
        log2_x = self._log2.calculate(corrected_x, precision)

        if log10_x == 0 or log3_x == 0:
            logger.warning("Division by 0 is prohibited, log10X or log3X = 0 at x = %s", x)
            return DEFAULT_VALUE

        logger.debug(
            "log5X: %s, log10X: %s, lnX: %s, log3X: %s, log2X: %s",
            log5_x,
            log10_x,
            ln_x,
            log3_x,
            log2_x,
        )

        with exact_context():
            term1 = log5_x - log10_x - ln_x
        term2 = working_divide(working_divide(term1, log10_x), log3_x)
        with exact_context():
            term3 = log2_x - log10_x - ln_x
            raw = term2 - term3

        result = round_to_scale(raw, precision)
        logger.debug("Result for x > 0: %s", result)
        return result


@lru_cache(maxsize=None)
def get_functions_system() -> FunctionsSystem:
    """Канонический экземпляр FunctionsSystem поверх общих функций."""
    return FunctionsSystem()
