"""
Tabulation — выборка функций на отрезке, запись CSV и командная строка.
"""

from src.tabulation.csv_writer import iter_rows, run_job, run_plan, write_csv
from src.tabulation.plan import DEFAULT_OUTPUT_DIR, DEFAULT_PLAN, load_plan

__all__ = [
    "iter_rows",
    "write_csv",
    "run_job",
    "run_plan",
    "DEFAULT_PLAN",
    "DEFAULT_OUTPUT_DIR",
    "load_plan",
]
