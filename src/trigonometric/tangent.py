"""
Tangent — tan(x) = sin(x) / cos(x)

Деление выполняется с рабочей точностью (34 цифры), затем результат
округляется до scale. При cos(x) = 0 (после округления) тангенс не определён.
"""

import logging
from decimal import Decimal

from src.core.math.precision import FunctionDomainError, round_to_scale, working_divide
from src.core.math.series import LimitedIterationsFunction
from src.trigonometric.cosine import Cosine, get_cosine
from src.trigonometric.sine import Sine, get_sine

logger = logging.getLogger(__name__)


class Tangent(LimitedIterationsFunction):
    """tan(x) как отношение синуса к косинусу."""

    def __init__(self, sine: Sine | None = None, cosine: Cosine | None = None):
        super().__init__()
        self._sine = sine if sine is not None else get_sine()
        self._cosine = cosine if cosine is not None else get_cosine()
        logger.info("Tangent function initialized.")

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Тангенс угла x (радианы).

        Returns:
            tan(x), округлённый до scale(precision)

        Raises:
            InvalidParameterError: Если параметры некорректны
            FunctionDomainError: Если cos(x) = 0 (тангенс не определён)
        """
        x, precision = self.check_validity(x, precision)

        sin_value = self._sine.calculate(x, precision)
        cos_value = self._cosine.calculate(x, precision)

        logger.debug("Calculated sin(%s) = %s", x, sin_value)
        logger.debug("Calculated cos(%s) = %s", x, cos_value)

        if cos_value == 0:
            message = f"Function value for argument {x} doesn't exist (cosine is zero)"
            logger.error(message)
            raise FunctionDomainError(message)

        result = round_to_scale(working_divide(sin_value, cos_value), precision)
        logger.debug("Calculated tan(%s) = %s", x, result)
        return result
