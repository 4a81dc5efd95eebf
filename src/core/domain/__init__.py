"""
Domain models and value objects.

Contains tabulation entities: TabulationJob, TabulationPlan, TabulationRow.
"""

from src.core.domain.tabulation import TabulationJob, TabulationPlan, TabulationRow

__all__ = [
    "TabulationJob",
    "TabulationPlan",
    "TabulationRow",
]
