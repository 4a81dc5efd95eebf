"""
Trigonometric functions, вычисляемые рядами.

Граф зависимостей: Cosine → Sine; Tangent, Cotangent → Sine, Cosine.
"""

from src.trigonometric.cosine import Cosine, Secant, get_cosine
from src.trigonometric.cotangent import Cotangent
from src.trigonometric.sine import Cosecant, Sine, get_sine, reduce_angle_double
from src.trigonometric.tangent import Tangent

__all__ = [
    "Sine",
    "Cosecant",
    "get_sine",
    "reduce_angle_double",
    "Cosine",
    "Secant",
    "get_cosine",
    "Tangent",
    "Cotangent",
]
