"""
REPL implementation for strcalc.

This module provides the REPL (Read-Eval-Print Loop) interface, managing:
- User interaction loop
- Calculation and command dispatch
- Error recovery
"""

from rich.console import Console
from typing import Final
from strcalc.lib.input import input_get, input_handle
from strcalc.lib.log import LOG
from strcalc.models.dataModel import InputResult

console: Final[Console] = Console()


async def repl_do() -> None:
    """Main REPL entry point.

    Flow:
    1. Print welcome banner
    2. Process inputs until exit condition
    3. Print exit message

    Exits on:
    - /exit command
    - Ctrl-C or Ctrl-D at the prompt
    - Unexpected errors
    """
    console.print(
        """
        [cyan]Welcome to the strcalc REPL!
        [green]Type [white]/exit[green] or press Ctrl-C to quit.
        [green]Use [white]/help[green] for command list.
        """
    )

    continue_repl: bool = True
    while continue_repl:
        try:
            input_result: InputResult = await input_get()

            if not input_result.continue_loop:
                if input_result.error:
                    LOG(input_result.error)
                break

            continue_repl = await input_handle(input_result.text)

        except KeyboardInterrupt:
            break
        except Exception as e:
            LOG(f"REPL critical error: {e}")
            console.print(f"[bold red]Fatal error: {e}[/bold red]")
            continue_repl = False

    console.print("[bold cyan]REPL session terminated[/bold cyan]")
