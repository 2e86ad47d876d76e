"""
Slash command processing for strcalc.

Handles:
- Command parsing
- Command execution through the Click palette
- Help system integration
- Error handling
"""

import shlex
import click
from typing import Final
from rich.console import Console
from strcalc.commands.app import cli
from strcalc.lib.log import LOG

console: Final[Console] = Console()


def command_is(text: str) -> bool:
    """
    Tell slash commands apart from calculations.

    A single leading "/" marks a command; "//" opens a delimiter header.
    """
    return text.startswith("/") and not text.startswith("//")


async def command_process(user_input: str) -> bool:
    """Handle commands starting with '/'.

    Args:
        user_input: The user's command input string starting with '/'

    Returns:
        bool: True to continue processing, False to exit

    Note:
        Handles special commands:
        - /exit: Terminates processing
        - /help: Shows command help
        Other commands are passed to the Click CLI
    """
    try:
        parts: list[str] = shlex.split(user_input[1:])
    except ValueError as e:
        LOG(f"Error parsing command: {e}")
        console.print(f"[bold red]Error parsing input: {e}[/bold red]")
        return True

    if not parts:
        console.print("[bold red]Error: No command provided.[/bold red]")
        return True

    command: str = parts[0]
    args: list[str] = parts[1:]

    try:
        if command == "exit":
            return False

        if command == "help":
            cli.main(args=["--help"], prog_name="/", standalone_mode=False)
            return True

        cli.main(args=[command] + args, prog_name="/", standalone_mode=False)
        return True

    except click.exceptions.UsageError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return True
    except SystemExit:
        return True
    except Exception as e:
        LOG(f"Command processing error: {e}")
        console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        return True
