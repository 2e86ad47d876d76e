"""
Exception types for callers that prefer raising over CalcOutcome checks.

The calculation pipeline itself never raises these; `outcome_unwrap` in
strcalc.lib.calculator converts a failed outcome into the matching class.
"""

from typing import Final
from strcalc.models.dataModel import CalculatorError, ErrorKind


class CalculatorException(Exception):
    """Base class for rejected calculations."""

    def __init__(self, error: CalculatorError) -> None:
        super().__init__(error.message)
        self.error: CalculatorError = error


class TooManyOperandsError(CalculatorException):
    """More operands than the two-operand cap allows."""


class NegativeOperandsError(CalculatorException):
    """Negative operands while negatives are denied."""

    @property
    def negatives(self) -> list[int]:
        return list(self.error.negatives)


class DivisionByZeroError(CalculatorException, ZeroDivisionError):
    """A zero divisor after the first operand."""


EXCEPTIONS: Final[dict[ErrorKind, type[CalculatorException]]] = {
    ErrorKind.TOO_MANY_OPERANDS: TooManyOperandsError,
    ErrorKind.NEGATIVE_OPERANDS: NegativeOperandsError,
    ErrorKind.DIVISION_BY_ZERO: DivisionByZeroError,
}


def exception_from(error: CalculatorError) -> CalculatorException:
    """Build the exception matching `error.kind`."""
    return EXCEPTIONS[error.kind](error)
