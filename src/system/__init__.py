"""
Functions System — составная функция и реестр функций по имени.
"""

from src.system.functions_system import (
    DEFAULT_VALUE,
    FunctionsSystem,
    get_functions_system,
    is_default_value,
)
from src.system.registry import FUNCTION_NAMES, get_function

__all__ = [
    "DEFAULT_VALUE",
    "FunctionsSystem",
    "get_functions_system",
    "is_default_value",
    "FUNCTION_NAMES",
    "get_function",
]
