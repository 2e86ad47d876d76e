"""
Calculator Configuration Commands

This module provides REPL commands for inspecting and changing the
configuration used by subsequent calculations.

Commands:
- /config show: Show the active configuration.
- /config set <field> <value...>: Change one field.
- /config reset: Restore the configuration the session started with.
"""

from typing import Any, Final
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from pydantic import ValidationError
import click
from strcalc.commands.base import RichGroup, RichCommand, rich_help
from strcalc.config.settings import bool_parse
from strcalc.lib.log import LOG
from strcalc.lib.parser import escapes_normalize
from strcalc.lib.session import session_get
from strcalc.models.dataModel import CalculatorConfig, OPERATION_ALIASES

console: Console = Console()

BOOL_FIELDS: Final[tuple[str, ...]] = ("twoOperandCap", "denyNegatives", "showFormula")
FIELDS: Final[tuple[str, ...]] = BOOL_FIELDS + (
    "upperBound",
    "operation",
    "baseDelimiters",
)


def value_convert(field: str, values: tuple[str, ...]) -> Any:
    """
    Convert command words into a value for a CalculatorConfig field.

    :param field: One of FIELDS.
    :param values: The words following the field name.
    :return: The converted value.
    :raises ValueError: If the words do not fit the field.
    """
    if field == "baseDelimiters":
        return [escapes_normalize(value) for value in values]
    if len(values) != 1:
        raise ValueError(f"{field} takes exactly one value")
    value: str = values[0]
    if field in BOOL_FIELDS:
        flag: bool | None = bool_parse(value)
        if flag is None:
            raise ValueError(f"{field} expects true or false, got '{value}'")
        return flag
    if field == "upperBound":
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"upperBound expects an integer, got '{value}'")
    operation = OPERATION_ALIASES.get(value.lower())
    if operation is None:
        raise ValueError(f"Unknown operation '{value}'")
    return operation


def delimiter_show(delimiter: str) -> str:
    return delimiter.encode("unicode_escape").decode("ascii")


def config_table(config: CalculatorConfig) -> Table:
    """Render a configuration as a two-column table."""
    table: Table = Table(title="Calculator configuration", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("twoOperandCap", str(config.twoOperandCap))
    table.add_row("denyNegatives", str(config.denyNegatives))
    table.add_row("upperBound", str(config.upperBound))
    table.add_row(
        "baseDelimiters",
        escape(" ".join(f"'{delimiter_show(d)}'" for d in config.baseDelimiters)),
    )
    table.add_row("showFormula", str(config.showFormula))
    table.add_row("operation", config.operation.value)
    return table


@click.group(
    cls=RichGroup,
    short_help="Show or change the calculator configuration",
    help="""
    Calculator Configuration

    Commands to inspect and change how inputs are calculated.
    """,
)
def config() -> None:
    """
    Root group for configuration commands.
    """
    pass


config: click.Group = config


@config.command(
    cls=RichCommand,
    short_help="Show the active configuration",
    help=rich_help("Show the active calculator configuration."),
)
def show() -> None:
    """
    Print the active configuration.
    """
    console.print(config_table(session_get().config))


@config.command(
    cls=RichCommand,
    short_help="Change one configuration field",
    help=rich_help(
        "Change one field of the calculator configuration. "
        "baseDelimiters takes one or more quoted words, where '\\n' is a newline.",
        examples=[
            "/config set upperBound 500",
            "/config set operation mul",
            "/config set baseDelimiters , '\\n' ';'",
        ],
    ),
)
@click.argument("field", type=click.Choice(FIELDS))
@click.argument("values", nargs=-1, required=True)
def set(field: str, values: tuple[str, ...]) -> None:
    """
    Change one configuration field, keeping the old config on failure.

    :param field: The field to change.
    :param values: The new value as one or more words.
    """
    try:
        session_get().update(**{field: value_convert(field, values)})
        console.print(f"[bold green]{field} updated.[/bold green]")
    except (ValueError, ValidationError) as e:
        LOG(f"Rejected config change {field}={values}: {e}")
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")


@config.command(
    cls=RichCommand,
    short_help="Restore the starting configuration",
    help=rich_help("Restore the configuration the session started with."),
)
def reset() -> None:
    """
    Restore the initial configuration.
    """
    session_get().reset()
    console.print("[bold green]Configuration reset.[/bold green]")
