"""
Cotangent — cot(x) = cos(x) / sin(x)

Независимая композиция косинуса и синуса (не 1/tan). При sin(x) = 0
(x = 0, x = π, ...) котангенс не определён.
"""

import logging
from decimal import Decimal

from src.core.math.precision import FunctionDomainError, round_to_scale, working_divide
from src.core.math.series import LimitedIterationsFunction
from src.trigonometric.cosine import Cosine, get_cosine
from src.trigonometric.sine import Sine, get_sine

logger = logging.getLogger(__name__)


class Cotangent(LimitedIterationsFunction):
    """cot(x) как отношение косинуса к синусу."""

    def __init__(self, cosine: Cosine | None = None, sine: Sine | None = None):
        super().__init__()
        self._cosine = cosine if cosine is not None else get_cosine()
        self._sine = sine if sine is not None else get_sine()

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        """
        Котангенс угла x (радианы).

        Raises:
            InvalidParameterError: Если параметры некорректны
            FunctionDomainError: Если sin(x) = 0 (котангенс не определён)
        """
        x, precision = self.check_validity(x, precision)

        sin_value = self._sine.calculate(x, precision)
        cos_value = self._cosine.calculate(x, precision)

        if sin_value == 0:
            message = f"Cotangent is undefined for angle {x} (sin(x) = 0)."
            logger.error(message)
            raise FunctionDomainError(message)

        result = round_to_scale(working_divide(cos_value, sin_value), precision)
        logger.debug("Calculated cotangent of %s: %s", x, result)
        return result
