"""
Contract Validation Module

Модуль для валидации JSON контрактов (план табуляции).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TabulationPlanValidator,
    tabulated_function_names,
    validate_tabulation_plan,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TabulationPlanValidator",
    # Functions
    "validate_tabulation_plan",
    "tabulated_function_names",
]
