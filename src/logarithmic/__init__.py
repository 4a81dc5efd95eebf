"""
Logarithmic functions, вычисляемые рядами.

Граф зависимостей: Log(base) → NaturalLog.
"""

from src.logarithmic.log import Log, get_log
from src.logarithmic.natural_log import NaturalLog, get_natural_log

__all__ = [
    "NaturalLog",
    "get_natural_log",
    "Log",
    "get_log",
]
