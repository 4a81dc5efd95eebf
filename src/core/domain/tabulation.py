"""
Tabulation — модели задания табуляции и строки результата

Immutable Pydantic модели, описывающие выборку функции на отрезке
[start, stop] с шагом step и запись результата в CSV.
Совместимы с JSON Schema (contracts/schema/tabulation_plan.json):
десятичные поля в JSON передаются строками, чтобы избежать двоичного
округления.
"""

from decimal import Decimal
from pathlib import Path
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.validators import tabulated_function_names

# Имена функций из enum схемы tabulation_plan.json
TABULATED_FUNCTIONS: Final[tuple[str, ...]] = tabulated_function_names()


# =============================================================================
# TABULATION JOB
# =============================================================================


class TabulationJob(BaseModel):
    """
    Одно задание табуляции: функция, отрезок, шаг, точность, файл.

    Immutable модель (frozen=True).
    """

    function: str = Field(..., description="Имя функции из реестра (sin, ln, system, ...)")
    start: Decimal = Field(..., description="Начало отрезка (включительно)")
    stop: Decimal = Field(..., description="Конец отрезка (включительно)")
    step: Decimal = Field(..., gt=0, description="Шаг выборки")
    precision: Decimal = Field(..., gt=0, lt=1, description="Точность, строго в (0, 1)")
    output: Path = Field(..., description="Путь к CSV-файлу")

    model_config = {"frozen": True}

    @field_validator("function")
    @classmethod
    def validate_function_name(cls, v: str) -> str:
        """Проверка, что функция зарегистрирована"""
        if v not in TABULATED_FUNCTIONS:
            raise ValueError(
                f"function {v!r} is not registered, expected one of: {', '.join(TABULATED_FUNCTIONS)}"
            )
        return v

    @field_validator("stop")
    @classmethod
    def validate_stop_after_start(cls, v: Decimal, info) -> Decimal:
        """Проверка, что отрезок не пустой"""
        if "start" in info.data:
            start = info.data["start"]
            if v < start:
                raise ValueError(f"stop {v} must be greater than or equal to start {start}")
        return v

    def point_count(self) -> int:
        """
        Число точек выборки: x = start + k·step, x <= stop.

        Returns:
            floor((stop - start) / step) + 1
        """
        return int((self.stop - self.start) // self.step) + 1

    def rooted_at(self, output_dir: Path) -> "TabulationJob":
        """
        Копия задания с относительным output, перенесённым в output_dir.

        Абсолютные пути не меняются.
        """
        if self.output.is_absolute():
            return self
        return self.model_copy(update={"output": Path(output_dir) / self.output})


# =============================================================================
# TABULATION PLAN
# =============================================================================


class TabulationPlan(BaseModel):
    """Набор заданий табуляции, выполняемых по порядку."""

    jobs: tuple[TabulationJob, ...] = Field(..., min_length=1, description="Задания")

    model_config = {"frozen": True}


# =============================================================================
# TABULATION ROW
# =============================================================================


class TabulationRow(BaseModel):
    """
    Строка результата: аргумент и значение функции.

    Immutable модель (frozen=True).
    """

    x: Decimal = Field(..., description="Аргумент")
    value: Decimal = Field(..., description="Значение функции в точке x")

    model_config = {"frozen": True}

    def as_csv_fields(self) -> tuple[str, str]:
        """
        Поля CSV в виде обычной десятичной записи (без экспоненты).

        Examples:
            >>> TabulationRow(x=Decimal("0.1"), value=Decimal("0.0998")).as_csv_fields()
            ('0.1', '0.0998')
        """
        return format(self.x, "f"), format(self.value, "f")
