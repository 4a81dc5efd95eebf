"""
CSV Writer — табуляция функции на отрезке и запись в CSV

Выборка x = start, start + step, ... пока x <= stop (точное десятичное
сложение, без накопления двоичной ошибки). Каждая строка файла —
"x,value" без заголовка, числа в обычной десятичной записи.

Доменные ошибки табулируемой функции пробрасываются без изменений,
неполный файл при этом не остаётся.
"""

import csv
import logging
from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path

from src.core.domain.tabulation import TabulationJob, TabulationPlan, TabulationRow
from src.core.math.precision import (
    InvalidParameterError,
    SeriesMathError,
    as_decimal,
    exact_context,
)
from src.core.math.series import SeriesExpandableFunction
from src.system.registry import get_function

logger = logging.getLogger(__name__)


def iter_rows(
    function: SeriesExpandableFunction,
    start: Decimal,
    stop: Decimal,
    step: Decimal,
    precision: Decimal,
) -> Iterator[TabulationRow]:
    """
    Значения функции в точках start, start + step, ..., <= stop.

    Args:
        function: Объект с методом calculate(x, precision)
        start: Начало отрезка (включительно)
        stop: Конец отрезка (включительно)
        step: Шаг, строго больше нуля
        precision: Точность вычисления

    Yields:
        TabulationRow для каждой точки

    Raises:
        InvalidParameterError: Если step <= 0
    """
    start = as_decimal(start, "start")
    stop = as_decimal(stop, "stop")
    step = as_decimal(step, "step")

    if step <= 0:
        raise InvalidParameterError(f"step must be positive, got {step}")

    current = start
    while current <= stop:
        value = function.calculate(current, precision)
        yield TabulationRow(x=current, value=value)
        with exact_context():
            current = current + step


def write_csv(
    path: Path,
    function: SeriesExpandableFunction,
    start: Decimal,
    stop: Decimal,
    step: Decimal,
    precision: Decimal,
) -> int:
    """
    Табуляция функции в CSV-файл.

    Родительские каталоги создаются. Строки пишутся в PATH.part, который
    заменяет существующий файл только после записи всех строк; при ошибке
    PATH.part удаляется, а прежний файл остаётся без изменений.

    Returns:
        Число записанных строк

    Raises:
        OSError: Если каталог или файл не удалось создать/записать
        InvalidParameterError: Если параметры выборки некорректны
        FunctionDomainError: Если функция не определена в одной из точек
    """
    path = Path(path)
    logger.info("Preparing to write CSV data to file: %s", path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.error("Failed to create directories for file: %s", path)
        raise

    partial = path.with_name(f"{path.name}.part")
    count = 0
    try:
        with open(partial, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            for row in iter_rows(function, start, stop, step, precision):
                writer.writerow(row.as_csv_fields())
                count += 1
                logger.debug(
                    "Wrote data to file: %s (current: %s, result: %s)", path, row.x, row.value
                )
        partial.replace(path)
    except (OSError, SeriesMathError):
        logger.error("Failed to write to file: %s", path)
        partial.unlink(missing_ok=True)
        raise

    logger.info("Successfully wrote %d rows to %s", count, path)
    return count


def run_job(job: TabulationJob) -> int:
    """
    Выполнение одного задания табуляции.

    Returns:
        Число записанных строк
    """
    function = get_function(job.function)
    logger.info(
        "Tabulating %s over [%s, %s] step %s (%d points)",
        job.function,
        job.start,
        job.stop,
        job.step,
        job.point_count(),
    )
    return write_csv(job.output, function, job.start, job.stop, job.step, job.precision)


def run_plan(plan: TabulationPlan, output_dir: Path | None = None) -> dict[Path, int]:
    """
    Выполнение всех заданий плана по порядку.

    Args:
        plan: План табуляции
        output_dir: Каталог для относительных путей output (default: как есть)

    Returns:
        {путь файла: число строк}
    """
    written: dict[Path, int] = {}
    for job in plan.jobs:
        if output_dir is not None:
            job = job.rooted_at(output_dir)
        written[job.output] = run_job(job)
    logger.info("Tabulation plan finished: %d files written", len(written))
    return written
