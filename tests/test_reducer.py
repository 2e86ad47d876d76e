"""Tests for operand normalization and folding."""

import pytest
from strcalc.lib.reducer import (
    divide_truncate,
    formula_render,
    operand_parse,
    operands_normalize,
    operation_fold,
    reduce,
)
from strcalc.models.dataModel import CalculatorConfig, ErrorKind, Operation


@pytest.fixture
def lenient() -> CalculatorConfig:
    return CalculatorConfig(denyNegatives=False)


@pytest.mark.parametrize(
    "token,expected",
    [
        ("5", 5),
        (" 7 ", 7),
        ("+3", 3),
        ("-2", -2),
        ("tytyt", 0),
        ("", 0),
        ("1.5", 0),
        ("1_000", 0),
        ("0x10", 0),
        ("٣", 0),
        ("2147483647", 2147483647),
        ("2147483648", 0),
        ("-2147483648", -2147483648),
        ("-2147483649", 0),
    ],
)
def test_operand_parse(token: str, expected: int) -> None:
    assert operand_parse(token) == expected


def test_operands_normalize_clamps_above_bound_only() -> None:
    normalized = operands_normalize(["2", "1001", "1000", "-3"], 1000)
    assert normalized.values == [2, 0, 1000, -3]
    assert normalized.negatives == [-3]


def test_negatives_recorded_before_clamping() -> None:
    normalized = operands_normalize(["-5"], -10)
    assert normalized.values == [0]
    assert normalized.negatives == [-5]


@pytest.mark.parametrize(
    "values,operation,expected",
    [
        ([2, 3, 4], Operation.ADD, 9),
        ([10, 3, 2], Operation.SUBTRACT, 5),
        ([2, 3, 4], Operation.MULTIPLY, 24),
        ([100, 2, 5], Operation.DIVIDE, 10),
        ([5], Operation.SUBTRACT, 5),
        ([5], Operation.DIVIDE, 5),
        ([-7, 2], Operation.DIVIDE, -3),
        ([7, -2], Operation.DIVIDE, -3),
        ([-7, -2], Operation.DIVIDE, 3),
        ([0, 5], Operation.DIVIDE, 0),
    ],
)
def test_operation_fold(values: list[int], operation: Operation, expected: int) -> None:
    assert operation_fold(values, operation) == expected


@pytest.mark.parametrize("operation", list(Operation))
def test_operation_fold_empty_is_zero(operation: Operation) -> None:
    assert operation_fold([], operation) == 0


def test_divide_truncate_rounds_toward_zero() -> None:
    assert divide_truncate(7, 2) == 3
    assert divide_truncate(-7, 2) == -3


def test_formula_render() -> None:
    assert formula_render([10, 3, 2], Operation.SUBTRACT, 5) == "10-3-2 = 5"
    assert formula_render([1, -2], Operation.ADD, -1) == "1+-2 = -1"


def test_reduce_two_operand_cap() -> None:
    config = CalculatorConfig(twoOperandCap=True, denyNegatives=False)
    outcome = reduce(["1", "2", "3"], config)
    assert not outcome.success
    assert outcome.result is None
    assert outcome.error.kind is ErrorKind.TOO_MANY_OPERANDS
    assert "2 numbers" in outcome.error.message

    outcome = reduce(["1", "2"], config)
    assert outcome.success
    assert outcome.result.value == 3


def test_reduce_cap_checked_before_negatives() -> None:
    config = CalculatorConfig(twoOperandCap=True, denyNegatives=True)
    outcome = reduce(["-1", "-2", "-3"], config)
    assert outcome.error.kind is ErrorKind.TOO_MANY_OPERANDS


def test_reduce_denies_negatives() -> None:
    outcome = reduce(["1", "-2", "-3"], CalculatorConfig(denyNegatives=True))
    assert not outcome.success
    assert outcome.error.kind is ErrorKind.NEGATIVE_OPERANDS
    assert outcome.error.negatives == [-2, -3]
    assert outcome.error.message == "Negatives not allowed: -2, -3"


def test_reduce_allows_negatives(lenient: CalculatorConfig) -> None:
    outcome = reduce(["1", "-2", "-3"], lenient)
    assert outcome.success
    assert outcome.result.value == -4
    assert outcome.result.formula is None


@pytest.mark.parametrize("tokens", [["10", "0"], ["10", "abc"], ["10", "2000"], ["8", "2", "0"]])
def test_reduce_division_by_zero(tokens: list[str]) -> None:
    config = CalculatorConfig(denyNegatives=False, operation=Operation.DIVIDE)
    outcome = reduce(tokens, config)
    assert not outcome.success
    assert outcome.error.kind is ErrorKind.DIVISION_BY_ZERO


def test_reduce_zero_dividend_is_fine() -> None:
    config = CalculatorConfig(operation=Operation.DIVIDE)
    assert reduce(["0", "5"], config).result.value == 0


def test_reduce_formula_uses_normalized_values() -> None:
    config = CalculatorConfig(denyNegatives=False, showFormula=True, upperBound=1000)
    outcome = reduce(["2", "", "4", "rrrr", "1001", "6"], config)
    assert outcome.result.value == 12
    assert outcome.result.formula == "2+0+4+0+0+6 = 12"


def test_reduce_formula_symbol_follows_operation() -> None:
    config = CalculatorConfig(showFormula=True, operation=Operation.MULTIPLY)
    outcome = reduce(["2", "3", "4"], config)
    assert outcome.result.formula == "2*3*4 = 24"
