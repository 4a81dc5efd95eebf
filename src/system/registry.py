"""
Function registry — имя функции → объект с контрактом calculate(x, precision)

Используется табуляцией и CLI. Имена совпадают с enum в
schema/tabulation_plan.json.
"""

from collections.abc import Callable
from typing import Final

from src.core.math.precision import InvalidParameterError
from src.core.math.series import SeriesExpandableFunction
from src.logarithmic.log import get_log
from src.logarithmic.natural_log import get_natural_log
from src.system.functions_system import get_functions_system
from src.trigonometric.cosine import Secant, get_cosine
from src.trigonometric.cotangent import Cotangent
from src.trigonometric.sine import Cosecant, get_sine
from src.trigonometric.tangent import Tangent

_FACTORIES: Final[dict[str, Callable[[], SeriesExpandableFunction]]] = {
    "sin": get_sine,
    "cos": get_cosine,
    "tan": Tangent,
    "cot": Cotangent,
    "csc": Cosecant,
    "sec": Secant,
    "ln": get_natural_log,
    "log2": lambda: get_log(2),
    "log3": lambda: get_log(3),
    "log5": lambda: get_log(5),
    "log10": lambda: get_log(10),
    "system": get_functions_system,
}

FUNCTION_NAMES: Final[tuple[str, ...]] = tuple(_FACTORIES)


def get_function(name: str) -> SeriesExpandableFunction:
    """
    Функция по имени из реестра.

    Args:
        name: Одно из FUNCTION_NAMES

    Returns:
        Объект с методом calculate(x, precision)

    Raises:
        InvalidParameterError: Если имя не зарегистрировано
    """
    try:
        factory = _FACTORIES[name]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown function {name!r}, expected one of: {', '.join(FUNCTION_NAMES)}"
        ) from None
    return factory()
