"""
Core math modules для series-math

Политика точности, константы и общий контракт функций, вычисляемых рядами.
"""

# Precision Contract
from src.core.math.precision import (
    # Parameters
    EXACT_CONTEXT,
    MAX_ITERATIONS,
    WORKING_CONTEXT,
    WORKING_PRECISION,
    # Exceptions
    FunctionDomainError,
    InvalidParameterError,
    SeriesMathError,
    # Contexts
    exact_context,
    series_context,
    working_context,
    working_divide,
    # Coercion and rounding
    as_decimal,
    convergence_threshold,
    quantum,
    round_term,
    round_to_scale,
    scale_of,
    # Validation
    validate,
)

# Constants
from src.core.math.constants import half_pi, pi, reduce_angle, two_pi

# Functional contract
from src.core.math.series import LimitedIterationsFunction, SeriesExpandableFunction

__all__ = [
    # Precision: Parameters
    "EXACT_CONTEXT",
    "MAX_ITERATIONS",
    "WORKING_CONTEXT",
    "WORKING_PRECISION",
    # Precision: Exceptions
    "SeriesMathError",
    "InvalidParameterError",
    "FunctionDomainError",
    # Precision: Contexts
    "exact_context",
    "series_context",
    "working_context",
    "working_divide",
    # Precision: Coercion and rounding
    "as_decimal",
    "convergence_threshold",
    "quantum",
    "round_term",
    "round_to_scale",
    "scale_of",
    # Precision: Validation
    "validate",
    # Constants
    "pi",
    "half_pi",
    "two_pi",
    "reduce_angle",
    # Functional contract
    "SeriesExpandableFunction",
    "LimitedIterationsFunction",
]
