"""
dataModel.py

This module defines the data models and schemas used throughout the strcalc
application. The models leverage Pydantic for validation and type safety.

Features:
- Enum classes for arithmetic operations and calculation error kinds.
- The immutable calculator configuration.
- Results of delimiter resolution and of a calculation.
- Input processing results for the REPL and non-interactive modes.

Usage:
Import these models to validate and structure data used in the application.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Final, Optional, Self
from enum import Enum


class Operation(str, Enum):
    """
    Enum for the arithmetic operation used to fold operands.
    """

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        """Infix symbol used when rendering a formula."""
        return OPERATION_SYMBOLS[self]

    @classmethod
    def from_name(cls, name: str | None) -> "Operation":
        """
        Map a user supplied operation name to an Operation.

        Accepts the short CLI forms (add, sub, mul, div) as well as the full
        names, case-insensitively. Anything unrecognised maps to ADD.

        :param name: The operation name, possibly None.
        :return: The matching Operation.
        """
        if not name:
            return cls.ADD
        return OPERATION_ALIASES.get(name.strip().lower(), cls.ADD)


OPERATION_SYMBOLS: Final[dict[Operation, str]] = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
}

OPERATION_ALIASES: Final[dict[str, Operation]] = {
    "add": Operation.ADD,
    "sub": Operation.SUBTRACT,
    "subtract": Operation.SUBTRACT,
    "mul": Operation.MULTIPLY,
    "multiply": Operation.MULTIPLY,
    "div": Operation.DIVIDE,
    "divide": Operation.DIVIDE,
}

DEFAULT_DELIMITERS: Final[tuple[str, ...]] = (",", "\n")


class CalculatorConfig(BaseModel):
    """
    Immutable configuration supplied once per calculation.

    Attributes:
        twoOperandCap (bool): Reject inputs with more than two operands.
        denyNegatives (bool): Reject inputs containing negative operands.
        upperBound (int): Operands strictly greater than this count as zero.
        baseDelimiters (list[str]): Separators recognised in every input.
        showFormula (bool): Render the infix formula alongside the value.
        operation (Operation): Operation used to fold the operands.
    """

    model_config = ConfigDict(frozen=True)

    twoOperandCap: bool = False
    denyNegatives: bool = True
    upperBound: int = 1000
    baseDelimiters: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DELIMITERS),
        description="Token separators recognised before any header delimiters.",
    )
    showFormula: bool = False
    operation: Operation = Operation.ADD

    @field_validator("baseDelimiters")
    @classmethod
    def delimiters_check(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("baseDelimiters must contain at least one delimiter")
        if any(not delimiter for delimiter in value):
            raise ValueError("baseDelimiters must not contain empty strings")
        return value


class DelimiterResolution(BaseModel):
    """
    Result of splitting a raw input into its body and delimiter set.

    Attributes:
        body (str): The input remaining after any delimiter header.
        delimiters (list[str]): Deduplicated, non-empty separators in
            declaration order (base delimiters first).
    """

    body: str
    delimiters: list[str]


class CalcResult(BaseModel):
    """
    A successful calculation.

    Attributes:
        value (int): The folded result.
        formula (Optional[str]): Infix rendering, set only when requested.
    """

    model_config = ConfigDict(frozen=True)

    value: int
    formula: Optional[str] = None


class ErrorKind(str, Enum):
    """
    Enum for the recoverable failures of a calculation.
    """

    TOO_MANY_OPERANDS = "TooManyOperandsError"
    NEGATIVE_OPERANDS = "NegativeOperandsError"
    DIVISION_BY_ZERO = "DivisionByZeroError"


class CalculatorError(BaseModel):
    """
    Description of a failed calculation.

    Attributes:
        kind (ErrorKind): Which rule rejected the input.
        message (str): Human-readable message.
        negatives (list[int]): Offending values, for NEGATIVE_OPERANDS only.
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    negatives: list[int] = Field(default_factory=list)


class CalcOutcome(BaseModel):
    """Outcome of a calculation.

    Attributes:
        result: The calculation result if successful
        error: Error details if the calculation was rejected
        success: Whether the calculation succeeded
    """

    result: CalcResult | None = None
    error: CalculatorError | None = None
    success: bool = True

    @model_validator(mode="after")
    def outcome_check(self) -> Self:
        if self.success and (self.result is None or self.error is not None):
            raise ValueError("a successful outcome carries a result and no error")
        if not self.success and (self.error is None or self.result is not None):
            raise ValueError("a failed outcome carries an error and no result")
        return self

    @classmethod
    def ok(cls, result: CalcResult) -> "CalcOutcome":
        return cls(result=result, error=None, success=True)

    @classmethod
    def fail(cls, error: CalculatorError) -> "CalcOutcome":
        return cls(result=None, error=error, success=False)


class InputResult(BaseModel):
    """Result of input collection operation.

    Attributes:
        text: The collected input text
        continue_loop: Whether to continue processing
        error: Optional error message if input collection failed
    """

    text: str
    continue_loop: bool
    error: str | None = None


class ProcessResult(BaseModel):
    """Result of command/input processing.

    Attributes:
        text: Calculation output or command text
        is_command: Whether input was a command
        should_exit: Whether to exit processing
        error: Optional error message
        success: Whether processing succeeded
        exit_code: Exit code for non-interactive mode
    """

    text: str
    is_command: bool
    should_exit: bool
    error: str | None = None
    success: bool = True
    exit_code: int = 0


class InputMode(BaseModel):
    """Input mode determination.

    Attributes:
        has_stdin: Whether stdin has content
        ask_string: Direct calculation input if provided
        use_repl: Whether to use interactive REPL
    """

    has_stdin: bool = False
    ask_string: str | None = None
    use_repl: bool = True
