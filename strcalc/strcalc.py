"""
strcalc Main Module.

This module serves as the entry point for strcalc, a calculator that reduces a
delimited string of numbers to a single value.

Features:
- Builds the calculator configuration from flags and STRCALC_ environment
  settings
- Supports multiple input modes: stdin, direct input, and interactive REPL
- Handles graceful termination on user interruption

Examples:
    Start interactive REPL:
        $ strcalc

    Single calculation:
        $ strcalc --ask "1,2,3"
        $ strcalc --op mul --formula true --ask "2,3,4"
        $ printf '1,2\\n//;\\\\n3;4\\n' | strcalc

    Feature level and delimiters:
        $ strcalc --step 1
        $ strcalc --newlineDelimiter "|"

Note:
    Input priority order:
    1. --ask argument (if provided)
    2. stdin (if not a terminal, one calculation per line)
    3. interactive REPL (default)
"""

from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
import asyncio
import signal
import sys
from types import FrameType
from typing import Final, Optional
from pydantic import ValidationError
from rich.console import Console
from strcalc.config.settings import config_build
from strcalc.lib.input import mode_detect, input_readStdin, input_batch
from strcalc.lib.log import LOG
from strcalc.lib.repl import repl_do
from strcalc.lib.session import session_start
from strcalc.models.dataModel import CalculatorConfig, InputMode

__version__: Final[str] = "0.1.0"

DISPLAY_TITLE: Final[
    str
] = """
█▀ ▀█▀ █▀█ █▀▀ ▄▀█ █   █▀▀
▄█  █  █▀▄ █▄▄ █▀█ █▄▄ █▄▄
"""

console: Final[Console] = Console()

parser: Final[ArgumentParser] = ArgumentParser(
    description="Reduce a delimited string of numbers to a single value.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument(
    "--step", type=str, help="Feature level: 1, 2, 3, 4, 5 or final (default final)"
)
parser.add_argument(
    "--denyNegatives", type=str, help="Reject negative numbers (true|false)"
)
parser.add_argument(
    "--upperBound", type=int, help="Numbers above this bound count as 0 (default 1000)"
)
parser.add_argument(
    "--newlineDelimiter", type=str, help="Delimiter used in place of newline"
)
parser.add_argument(
    "--formula", type=str, help="Print the formula instead of the value (true|false)"
)
parser.add_argument("--op", type=str, help="Operation: add, sub, mul or div")
parser.add_argument("--ask", type=str, help="Direct input (alternative to stdin)")
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def config_setup(options: Namespace) -> bool:
    """Build the calculator configuration and start the session.

    Args:
        options: Parsed command-line arguments

    Returns:
        bool: True if configuration successful
    """
    try:
        config: CalculatorConfig = config_build(options)
    except ValidationError as e:
        LOG(f"Configuration setup failed: {e}")
        console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        return False
    session_start(config)
    return True


async def async_main(options: Namespace) -> int:
    """Asynchronous main function handling all input modes.

    Args:
        options: Parsed command-line arguments

    Returns:
        int: Process exit code
    """
    try:
        if not config_setup(options):
            return 1

        mode: InputMode = await mode_detect(options.ask)

        if mode.ask_string is not None:
            return await input_batch([mode.ask_string])

        if mode.has_stdin:
            lines: list[str] = await input_readStdin()
            return await input_batch(lines)

        console.print(DISPLAY_TITLE)
        await repl_do()
        return 0

    except Exception as e:
        LOG(f"Unhandled exception in async_main: {e}")
        console.print(f"[bold red]An unexpected error occurred: {e}[/bold red]")
        return 1


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for graceful interruption outside the prompt.

    Args:
        sig: Signal number
        frame: Current stack frame
    """
    console.print("\n[bold cyan]Interrupt received. Exiting.[/bold cyan]")
    sys.exit(0)


def main(argv: list[str] | None = None) -> None:
    """Console script entry point.

    Args:
        argv: Argument list; defaults to sys.argv[1:]
    """
    options: Namespace = parser.parse_args(argv)
    signal.signal(signal.SIGINT, signal_handle)

    try:
        sys.exit(asyncio.run(async_main(options)))
    except KeyboardInterrupt:
        console.print("\n[bold cyan]Program interrupted by user. Exiting.[/bold cyan]")


if __name__ == "__main__":
    main()
