"""
series-math — командная строка

Sub-commands:
    eval FUNCTION X [--precision P]       значение функции в точке
    tabulate FUNCTION --start A --stop B --step H [--precision P] --output PATH
    plan [PLAN_JSON] [--output-dir DIR]   выполнить план (по умолчанию DEFAULT_PLAN)

Коды выхода: 0 — успех, 1 — ошибка вычисления/ввода-вывода/валидации,
2 — ошибка использования (argparse).
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import jsonschema
import pydantic

from src.core.domain.tabulation import TabulationJob
from src.core.math.precision import SeriesMathError
from src.system.registry import FUNCTION_NAMES, get_function
from src.tabulation.csv_writer import run_job, run_plan
from src.tabulation.plan import DEFAULT_OUTPUT_DIR, DEFAULT_PLAN, load_plan

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = "0.0001"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="series-math",
        description="Evaluate and tabulate series-expanded elementary functions.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    eval_parser = subparsers.add_parser("eval", help="Evaluate a function at one point.")
    eval_parser.add_argument("function", choices=FUNCTION_NAMES)
    eval_parser.add_argument("x", help="Argument as a decimal string.")
    eval_parser.add_argument(
        "--precision",
        default=DEFAULT_PRECISION,
        help=f"Precision strictly between 0 and 1 (default: {DEFAULT_PRECISION}).",
    )

    tabulate_parser = subparsers.add_parser(
        "tabulate", help="Sample a function over a range and write CSV."
    )
    tabulate_parser.add_argument("function", choices=FUNCTION_NAMES)
    tabulate_parser.add_argument("--start", required=True)
    tabulate_parser.add_argument("--stop", required=True)
    tabulate_parser.add_argument("--step", required=True)
    tabulate_parser.add_argument("--precision", default=DEFAULT_PRECISION)
    tabulate_parser.add_argument("--output", required=True, type=Path)

    plan_parser = subparsers.add_parser(
        "plan", help="Run a JSON tabulation plan (or the built-in default plan)."
    )
    plan_parser.add_argument("plan_file", nargs="?", type=Path, help="Path to a plan JSON file.")
    plan_parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for relative output paths (default: {DEFAULT_OUTPUT_DIR}).",
    )

    return parser


def _run(args: argparse.Namespace) -> None:
    if args.command == "eval":
        value = get_function(args.function).calculate(args.x, args.precision)
        print(format(value, "f"))
    elif args.command == "tabulate":
        job = TabulationJob(
            function=args.function,
            start=args.start,
            stop=args.stop,
            step=args.step,
            precision=args.precision,
            output=args.output,
        )
        count = run_job(job)
        print(f"{job.output}: {count} rows")
    else:
        plan = load_plan(args.plan_file) if args.plan_file is not None else DEFAULT_PLAN
        for path, count in run_plan(plan, args.output_dir).items():
            print(f"{path}: {count} rows")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        _run(args)
    except (
        SeriesMathError,
        OSError,
        json.JSONDecodeError,
        jsonschema.ValidationError,
        pydantic.ValidationError,
    ) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"series-math: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
