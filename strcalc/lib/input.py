"""
Input handling and processing for strcalc.

This module collects user input and routes it either to the slash command
palette or to the calculator.

The module handles:
- Interactive input with history
- Input mode detection (stdin, --ask, REPL)
- Calculation and result display
- Error reporting without leaving the loop

Each line is processed as:
1. Slash command, if it starts with a single "/"
2. Calculation, otherwise (an empty line calculates to 0)
"""

import sys
from typing import Final, Iterable, Optional
from rich.console import Console
from rich.markup import escape
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from strcalc.config.settings import historyFile_ensure
from strcalc.lib.calculator import calculate
from strcalc.lib.command import command_is, command_process
from strcalc.lib.log import LOG
from strcalc.lib.session import session_get
from strcalc.models.dataModel import (
    CalcOutcome,
    CalculatorConfig,
    InputMode,
    InputResult,
    ProcessResult,
)

console: Final[Console] = Console()

PROMPT: Final[str] = "strcalc> "


class REPLSession:
    """Manages REPL input session with history support."""

    def __init__(self) -> None:
        self.session: PromptSession = PromptSession(
            history=FileHistory(str(historyFile_ensure())),
            enable_history_search=True,
        )

    async def prompt(self) -> str:
        return await self.session.prompt_async(PROMPT)


repl_session: Optional[REPLSession] = None


async def input_get() -> InputResult:
    """Get user input with prompt.

    Returns:
        InputResult containing:
            - text: The user input text (not stripped; spaces may matter)
            - continue_loop: Whether to continue processing
            - error: Any error message if input failed

    Note:
        Ctrl-C and Ctrl-D at the prompt end the loop.
    """
    global repl_session
    try:
        if not repl_session:
            repl_session = REPLSession()

        user_input: str = await repl_session.prompt()
        return InputResult(text=user_input, continue_loop=True)

    except KeyboardInterrupt:
        return InputResult(text="", continue_loop=False, error="Interrupt received")
    except EOFError:
        return InputResult(text="", continue_loop=False, error="End of input")
    except Exception as e:
        return InputResult(text="", continue_loop=False, error=f"Input error: {e}")


async def mode_detect(ask_string: str | None = None) -> InputMode:
    """Detect the appropriate input mode.

    Args:
        ask_string: Optional direct calculation input

    Returns:
        InputMode indicating how to handle input

    Note:
        Priority order:
        1. Ask string (an empty string is a valid calculation)
        2. Stdin content, when stdin is not a terminal
        3. REPL mode
    """
    try:
        if ask_string is not None:
            return InputMode(has_stdin=False, ask_string=ask_string, use_repl=False)
        if not sys.stdin.isatty():
            return InputMode(has_stdin=True, ask_string=None, use_repl=False)
        return InputMode(has_stdin=False, ask_string=None, use_repl=True)

    except Exception as e:
        LOG(f"Error detecting input mode: {e}")
        return InputMode(has_stdin=False, ask_string=None, use_repl=True)


async def input_readStdin() -> list[str]:
    """Read every line from stdin.

    Returns:
        The lines, without line terminators

    Raises:
        IOError: If stdin read fails
    """
    try:
        return sys.stdin.read().splitlines()
    except Exception as e:
        LOG(f"Error reading from stdin: {e}")
        raise IOError(f"Failed to read from stdin: {e}")


def outcome_render(outcome: CalcOutcome, config: CalculatorConfig) -> str:
    """Text shown for a successful calculation: the formula or the value."""
    if config.showFormula and outcome.result.formula is not None:
        return outcome.result.formula
    return str(outcome.result.value)


async def input_process(text: str) -> ProcessResult:
    """Process one line of input (command or calculation).

    Args:
        text: Raw input line

    Returns:
        ProcessResult containing the calculation output or command status
    """
    if command_is(text.strip()):
        try:
            continue_processing: bool = await command_process(text.strip())
            return ProcessResult(
                text=text.strip(),
                is_command=True,
                should_exit=not continue_processing,
                success=True,
                exit_code=0,
            )
        except Exception as e:
            LOG(f"Command processing error: {e}")
            return ProcessResult(
                text="",
                is_command=True,
                should_exit=True,
                error=str(e),
                success=False,
                exit_code=1,
            )

    config: CalculatorConfig = session_get().config
    outcome: CalcOutcome = calculate(text, config)
    if not outcome.success:
        LOG(f"Rejected input {text!r}: {outcome.error.message}")
        return ProcessResult(
            text="",
            is_command=False,
            should_exit=False,
            error=outcome.error.message,
            success=False,
            exit_code=1,
        )

    return ProcessResult(
        text=outcome_render(outcome, config),
        is_command=False,
        should_exit=False,
        success=True,
        exit_code=0,
    )


def result_print(process_result: ProcessResult) -> None:
    """Print a calculation result or its error."""
    if not process_result.success:
        console.print(
            f"[bold red]ERROR:[/bold red] {escape(process_result.error or '')}",
            soft_wrap=True,
        )
    elif not process_result.is_command:
        console.print(
            process_result.text, markup=False, highlight=False, soft_wrap=True
        )


async def input_handle(text: str) -> bool:
    """Handle one interactive line and return whether to continue the REPL loop.

    Returns:
        bool: True if REPL should continue, False if should exit
    """
    process_result: ProcessResult = await input_process(text)
    result_print(process_result)

    if process_result.is_command and process_result.should_exit:
        console.print("[bold cyan]Exiting.[/bold cyan]")
        return False
    return True


async def input_batch(lines: Iterable[str]) -> int:
    """Process non-interactive input lines, continuing past failures.

    Args:
        lines: Input lines from stdin or --ask

    Returns:
        int: 0 if every line succeeded, otherwise 1
    """
    exit_code: int = 0
    for line in lines:
        process_result: ProcessResult = await input_process(line)
        result_print(process_result)
        exit_code = max(exit_code, process_result.exit_code)
        if process_result.is_command and process_result.should_exit:
            break
    return exit_code
