"""
Тесты для реестра функций
"""

import json
from decimal import Decimal
from pathlib import Path

import pytest

import src.core.contracts.validators as validators
from src.core.domain.tabulation import TABULATED_FUNCTIONS
from src.core.math.precision import InvalidParameterError
from src.core.math.series import SeriesExpandableFunction
from src.logarithmic.natural_log import get_natural_log
from src.system.functions_system import get_functions_system
from src.system.registry import FUNCTION_NAMES, get_function
from src.trigonometric.cosine import get_cosine
from src.trigonometric.sine import get_sine


class TestRegistry:
    """get_function и FUNCTION_NAMES."""

    def test_names(self):
        assert FUNCTION_NAMES == (
            "sin",
            "cos",
            "tan",
            "cot",
            "csc",
            "sec",
            "ln",
            "log2",
            "log3",
            "log5",
            "log10",
            "system",
        )

    @pytest.mark.parametrize("name", FUNCTION_NAMES)
    def test_every_function_has_single_method_contract(self, name):
        assert isinstance(get_function(name), SeriesExpandableFunction)

    def test_shared_instances(self):
        assert get_function("sin") is get_sine()
        assert get_function("cos") is get_cosine()
        assert get_function("ln") is get_natural_log()
        assert get_function("system") is get_functions_system()

    @pytest.mark.parametrize("name,base", [("log2", 2), ("log3", 3), ("log5", 5), ("log10", 10)])
    def test_log_bases(self, name, base):
        assert get_function(name).base == base

    def test_log10_of_ten(self):
        assert get_function("log10").calculate(Decimal(10), Decimal("0.0001")) == Decimal("1.0000")

    def test_csc_and_sec_adapters(self):
        precision = Decimal("0.0001")
        assert get_function("csc").calculate(Decimal(1), precision) == Decimal("1.1884")
        assert get_function("sec").calculate(Decimal(0), precision) == Decimal("1.0000")

    def test_unknown_name(self):
        with pytest.raises(InvalidParameterError, match="Unknown function 'exp'"):
            get_function("exp")

    def test_schema_enum_matches_registry(self):
        schema_path = Path(validators.__file__).parent / "schema" / "tabulation_plan.json"
        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        enum = schema["$defs"]["job"]["properties"]["function"]["enum"]
        assert tuple(enum) == FUNCTION_NAMES

    def test_tabulation_models_accept_every_registered_name(self):
        """Модели табуляции берут имена из схемы, не из реестра."""
        assert TABULATED_FUNCTIONS == FUNCTION_NAMES
