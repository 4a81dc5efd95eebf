"""
Tabulation Plan — план по умолчанию и загрузка плана из JSON

JSON план проверяется JSON Schema контрактом (tabulation_plan.json)
и затем разбирается в frozen Pydantic модели.
"""

import json
import logging
from pathlib import Path
from typing import Final

from src.core.contracts.validators import validate_tabulation_plan
from src.core.domain.tabulation import TabulationJob, TabulationPlan

logger = logging.getLogger(__name__)

# Каталог для относительных путей output по умолчанию
DEFAULT_OUTPUT_DIR: Final[Path] = Path("csv")

_STEP: Final[str] = "0.1"
_PRECISION_E10: Final[str] = "0.0000000001"
_PRECISION_E11: Final[str] = "0.00000000001"


def _job(function: str, start: str, stop: str, precision: str) -> TabulationJob:
    return TabulationJob(
        function=function,
        start=start,
        stop=stop,
        step=_STEP,
        precision=precision,
        output=f"{function}.csv",
    )


# Тригонометрия на [-1, 1], логарифмы на [1, 20], составная функция на [-2, 2]
DEFAULT_PLAN: Final[TabulationPlan] = TabulationPlan(
    jobs=(
        _job("cos", "-1", "1", _PRECISION_E10),
        _job("sin", "-1", "1", _PRECISION_E10),
        _job("tan", "-1", "1", _PRECISION_E10),
        _job("ln", "1", "20", _PRECISION_E10),
        _job("log3", "1", "20", _PRECISION_E11),
        _job("log5", "1", "20", _PRECISION_E11),
        _job("log10", "1", "20", _PRECISION_E11),
        _job("system", "-2", "2", _PRECISION_E11),
    )
)


def load_plan(path: Path) -> TabulationPlan:
    """
    Загрузка плана табуляции из JSON файла.

    Args:
        path: Путь к JSON файлу

    Returns:
        TabulationPlan

    Raises:
        OSError: Если файл не удалось прочитать
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если план не соответствует схеме
        pydantic.ValidationError: Если задание некорректно (например, stop < start)
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_tabulation_plan(data)
    plan = TabulationPlan.model_validate(data)
    logger.info("Loaded tabulation plan %s: %d jobs", path, len(plan.jobs))
    return plan
