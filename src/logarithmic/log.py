"""
Logarithm to an integer base — log_b(x) = ln(x) / ln(b)

Основание фиксируется при создании и должно быть целым >= 2:
- base = 1 дало бы деление на ln(1) = 0
- base <= 0 не имеет логарифма

Экземпляры кэшируются по основанию (get_log). Кэш не наблюдаем:
Log не хранит состояния между вызовами.
"""

import logging
from decimal import Decimal
from functools import lru_cache

from src.core.math.precision import (
    FunctionDomainError,
    InvalidParameterError,
    round_to_scale,
    working_divide,
)
from src.core.math.series import LimitedIterationsFunction
from src.logarithmic.natural_log import NaturalLog, get_natural_log

logger = logging.getLogger(__name__)


class Log(LimitedIterationsFunction):
    """log_b(x) через натуральный логарифм."""

    def __init__(self, base: int, natural_log: NaturalLog | None = None):
        super().__init__()
        if isinstance(base, bool) or not isinstance(base, int):
            raise InvalidParameterError(
                f"Logarithm base must be an integer, got {type(base).__name__}"
            )
        if base < 2:
            raise InvalidParameterError(f"Logarithm base must be >= 2, got {base}")

        self._base = base
        self._natural_log = natural_log if natural_log is not None else get_natural_log()
        logger.info("Log base %d initialized.", base)

    @property
    def base(self) -> int:
        return self._base

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Логарифм x по основанию base.

        Args:
            x: Аргумент, строго больше нуля
            precision: Точность, строго между 0 и 1

        Returns:
            log_base(x), округлённый до scale(precision)

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

        ln_x = self._natural_log.calculate(x, precision)
        ln_base = self._natural_log.calculate(Decimal(self._base), precision)

        logger.debug("Calculating log_%d(%s) = ln(%s) / ln(%d)", self._base, x, x, self._base)
        logger.debug("Computed ln(%s) = %s", x, ln_x)
        logger.debug("Computed ln(%d) = %s", self._base, ln_base)

        result = round_to_scale(working_divide(ln_x, ln_base), precision)
        logger.info("Calculated log_%d(%s) = %s", self._base, x, result)
        return result

    def __repr__(self) -> str:
        return f"Log(base={self._base})"


@lru_cache(maxsize=None)
def get_log(base: int) -> Log:
    """
    Канонический экземпляр Log для основания base.

    Raises:
        InvalidParameterError: Если основание не целое >= 2
    """
    return Log(base)
