r"""
Calculator entry point.

Wires the pipeline together: delimiter resolution, tokenization and
reduction. The functions here hold no state, so they can be called from any
number of threads or REPL sessions at once.

Example:
    config = CalculatorConfig(denyNegatives=False)
    outcome = calculate("//[***]\n11***22***33", config)
    outcome.result.value   # 66
"""

from strcalc.lib.errors import exception_from
from strcalc.lib.parser import delimiters_resolve, tokens_split
from strcalc.lib.reducer import reduce
from strcalc.models.dataModel import (
    CalcOutcome,
    CalcResult,
    CalculatorConfig,
    DelimiterResolution,
)

EMPTY_FORMULA: str = "0 = 0"


def calculate(input: str | None, config: CalculatorConfig) -> CalcOutcome:
    """Calculate the value of an input string.

    Args:
        input: Raw input, optionally with a delimiter header; None counts as
            empty
        config: The calculator configuration

    Returns:
        CalcOutcome with the result, or the reason the input was rejected
    """
    if not input:
        return CalcOutcome.ok(
            CalcResult(value=0, formula=EMPTY_FORMULA if config.showFormula else None)
        )

    resolution: DelimiterResolution = delimiters_resolve(input, config.baseDelimiters)
    tokens: list[str] = tokens_split(resolution.body, resolution.delimiters)
    return reduce(tokens, config)


def outcome_unwrap(outcome: CalcOutcome) -> CalcResult:
    """Return the result of `outcome`, raising if the calculation failed.

    Raises:
        TooManyOperandsError | NegativeOperandsError | DivisionByZeroError
    """
    if not outcome.success:
        raise exception_from(outcome.error)
    return outcome.result


def calculator_add(input: str | None, config: CalculatorConfig) -> int:
    """Calculate `input` and return only the value, raising on failure."""
    return outcome_unwrap(calculate(input, config)).value
