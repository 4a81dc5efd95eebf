"""
Series-expandable functions — общий контракт и базовый класс

Каждая функция (sin, cos, tan, cot, ln, log_b, система функций) реализует
единственный метод calculate(x, precision) -> Decimal, поэтому потребители
(табуляция, CLI) работают с ними взаимозаменяемо.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Protocol, runtime_checkable

from src.core.math.precision import MAX_ITERATIONS, InvalidParameterError, validate


@runtime_checkable
class SeriesExpandableFunction(Protocol):
    """Функциональный контракт: значение функции в точке x с точностью precision."""

    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        ...


class LimitedIterationsFunction(ABC):
    """
    Базовый класс функций, вычисляемых рядом с ограниченным числом членов.

    Экземпляры не хранят изменяемого состояния между вызовами и безопасны
    для одновременного использования из нескольких потоков.
    """

    def __init__(self, max_iterations: int = MAX_ITERATIONS):
        if max_iterations < 1:
            raise InvalidParameterError(
                f"max_iterations must be positive, got {max_iterations}"
            )
        self.max_iterations = max_iterations

    def check_validity(self, x: object, precision: object) -> tuple[Decimal, Decimal]:
        """
        Валидация аргумента и точности (см. precision.validate).

        Raises:
            InvalidParameterError: Если x или precision некорректны
        """
        return validate(x, precision)

    @abstractmethod
    def calculate(self, x: Decimal, precision: Decimal) -> Decimal:
        """Значение функции в точке x, округлённое до scale(precision)."""
