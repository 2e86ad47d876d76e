"""
Calculation engine for strcalc.

Turns a token sequence into a single integer:

1. Operand cap check (two operands at most, when enabled)
2. Normalization: unparsable tokens become 0, values above the upper bound
   become 0, negatives are collected
3. Negative policy check
4. Left-to-right fold with the configured operation
5. Optional formula rendering from the normalized values

Failures are returned as CalcOutcome errors rather than raised.
"""

import operator
import re
from functools import reduce as fold
from typing import Final, NamedTuple, Sequence
from strcalc.models.dataModel import (
    CalcOutcome,
    CalcResult,
    CalculatorConfig,
    CalculatorError,
    ErrorKind,
    Operation,
)

INT_MIN: Final[int] = -(2**31)
INT_MAX: Final[int] = 2**31 - 1
MAX_OPERANDS: Final[int] = 2

_integer_re: Final[re.Pattern[str]] = re.compile(r"\s*[+-]?[0-9]+\s*")

MSG_TOO_MANY: Final[str] = f"Only up to {MAX_OPERANDS} numbers are allowed in this mode."
MSG_NEGATIVES: Final[str] = "Negatives not allowed: {0}"
MSG_DIVISION: Final[str] = "Division by zero in expression."


class Normalized(NamedTuple):
    values: list[int]
    negatives: list[int]


def operand_parse(token: str) -> int:
    """
    Parse a token as a base-10 integer.

    Accepts surrounding whitespace and a sign. Non-numeric text and values
    outside the signed 32-bit range parse as 0.

    :param token: Raw token text.
    :return: The parsed integer, or 0.
    """
    if not _integer_re.fullmatch(token):
        return 0
    value: int = int(token)
    if value < INT_MIN or value > INT_MAX:
        return 0
    return value


def operands_normalize(tokens: Sequence[str], upper_bound: int) -> Normalized:
    """
    Convert tokens to operands and collect negatives.

    :param tokens: Raw tokens.
    :param upper_bound: Values strictly greater than this become 0.
    :return: Normalized values and the negatives in encounter order.
    """
    values: list[int] = []
    negatives: list[int] = []
    for token in tokens:
        value: int = operand_parse(token)
        if value < 0:
            negatives.append(value)
        if value > upper_bound:
            value = 0
        values.append(value)
    return Normalized(values=values, negatives=negatives)


def divide_truncate(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient: int = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def operation_fold(values: Sequence[int], operation: Operation) -> int:
    """
    Reduce operands left to right.

    An empty sequence gives 0 for every operation.

    :param values: Normalized operands.
    :param operation: The operation to apply.
    :return: The folded value.
    :raises ZeroDivisionError: If a divisor after the first operand is 0.
    """
    if not values:
        return 0
    if operation is Operation.SUBTRACT:
        return fold(operator.sub, values[1:], values[0])
    if operation is Operation.MULTIPLY:
        return fold(operator.mul, values, 1)
    if operation is Operation.DIVIDE:
        return fold(divide_truncate, values[1:], values[0])
    return sum(values)


def formula_render(values: Sequence[int], operation: Operation, result: int) -> str:
    """Render e.g. "2+0+4 = 6"."""
    return f"{operation.symbol.join(str(v) for v in values)} = {result}"


def reduce(tokens: Sequence[str], config: CalculatorConfig) -> CalcOutcome:
    """Reduce tokens to a single value under `config`.

    Args:
        tokens: Raw tokens from the tokenizer
        config: The calculator configuration

    Returns:
        CalcOutcome holding either the CalcResult or the CalculatorError
    """
    if config.twoOperandCap and len(tokens) > MAX_OPERANDS:
        return CalcOutcome.fail(
            CalculatorError(kind=ErrorKind.TOO_MANY_OPERANDS, message=MSG_TOO_MANY)
        )

    normalized: Normalized = operands_normalize(tokens, config.upperBound)

    if config.denyNegatives and normalized.negatives:
        return CalcOutcome.fail(
            CalculatorError(
                kind=ErrorKind.NEGATIVE_OPERANDS,
                message=MSG_NEGATIVES.format(
                    ", ".join(str(n) for n in normalized.negatives)
                ),
                negatives=normalized.negatives,
            )
        )

    if config.operation is Operation.DIVIDE and 0 in normalized.values[1:]:
        return CalcOutcome.fail(
            CalculatorError(kind=ErrorKind.DIVISION_BY_ZERO, message=MSG_DIVISION)
        )

    value: int = operation_fold(normalized.values, config.operation)

    formula: str | None = None
    if config.showFormula:
        formula = formula_render(normalized.values, config.operation, value)
    return CalcOutcome.ok(CalcResult(value=value, formula=formula))
