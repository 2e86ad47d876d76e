"""
Defines the main Click command group for the strcalc REPL.

This module provides:
- The root `cli` command group for slash commands.
- Registration of subcommands from other modules.

Usage:
Import `cli` to dispatch slash commands typed in the REPL.
"""

from rich.console import Console
import click
from strcalc.commands.base import RichGroup
from strcalc.commands.config import config

console: Console = Console()


@click.group(
    cls=RichGroup,
    help="""
    strcalc Command Palette

    Type a calculation such as 1,2,3 or //;\\n1;2 to evaluate it.
    Slash commands manage the session.
    """,
)
def cli() -> None:
    """
    The root Click command group for strcalc.
    """
    pass


cli: click.Group = cli

cli.add_command(config)
