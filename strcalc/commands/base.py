"""
Base classes for Rich-enhanced Click commands and groups.

Slash command help is rendered from the click definitions themselves: usage
lines and argument lists come from each command's parameters, so the
`FIELD` choices of `/config set` are always the fields that command accepts.

This module defines:
- `RichGroup`: A Click group that lists its commands as slash paths.
- `RichCommand`: A Click command whose help panel documents its arguments.
- `rich_help`: Builder for the description and examples of a command.
"""

from typing import Iterable, Optional
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
import click
from strcalc.lib.log import LOG

console: Console = Console()


def rich_help(description: str, examples: Optional[Iterable[str]] = None) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param description: Description of the command.
    :param examples: Example command lines, shown verbatim.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{description}[/bold cyan]"
    if examples:
        help_text += "\n\n[bold yellow]Examples:[/bold yellow]"
        for example in examples:
            help_text += f"\n    [green]{escape(example)}[/green]"
    return help_text


def slash_path(ctx: click.Context, *names: str) -> str:
    """
    Build the slash form of a command path, e.g. "/config set".

    The REPL invokes the root group with the program name "/", which is
    dropped here.
    """
    parts: list[str] = [part.lstrip("/") for part in ctx.command_path.split()]
    parts.extend(names)
    return "/" + " ".join(part for part in parts if part)


def params_describe(params: Iterable[click.Parameter]) -> list[tuple[str, str]]:
    """
    Describe the positional arguments of a command.

    :param params: The command's click parameters.
    :return: (placeholder, description) pairs in declaration order.
    """
    described: list[tuple[str, str]] = []
    for param in params:
        if not isinstance(param, click.Argument):
            continue
        placeholder: str = param.human_readable_name
        if param.nargs == -1:
            placeholder += "..."
        if isinstance(param.type, click.Choice):
            description = "one of " + ", ".join(str(c) for c in param.type.choices)
        else:
            description = param.type.name
        if not param.required:
            description += " (optional)"
        described.append((placeholder, description))
    return described


class RichGroup(click.Group):
    """
    A Click Group that uses Rich for rendering help messages.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the group help as a table of slash commands.

        :param ctx: The Click context for the command group.
        :param formatter: The Click help formatter.
        """
        try:
            console.print(
                f"[bold yellow]Usage:[/bold yellow] [cyan]{slash_path(ctx)}[/cyan] "
                f"[magenta]COMMAND [ARGS]...[/magenta]\n"
            )

            if self.help:
                console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")

            if self.commands:
                table = Table(title="Available Commands", box=None, show_header=False)
                table.add_column("Command", style="cyan", no_wrap=True)
                table.add_column("Description")
                for name in sorted(self.commands):
                    command = self.commands[name]
                    table.add_row(
                        slash_path(ctx, name),
                        command.short_help or "No description available.",
                    )
                console.print(table)
                console.print()
        except Exception as e:
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")


class RichCommand(click.Command):
    """
    A Click Command that renders its help text inside a Rich panel.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the command help with a usage line and its arguments.

        :param ctx: The Click context for the command.
        :param formatter: The Click help formatter.
        """
        try:
            arguments: list[tuple[str, str]] = params_describe(self.params)
            usage: str = " ".join(
                [slash_path(ctx)] + [placeholder for placeholder, _ in arguments]
            )

            help_text = self.help or "No help text available."
            help_text += "\n\n[bold yellow]Usage:[/bold yellow]"
            help_text += f"\n    [green]{escape(usage)}[/green]"
            help_text += "\n\n[bold yellow]Arguments:[/bold yellow]"
            if not arguments:
                help_text += "\n    none"
            for placeholder, description in arguments:
                help_text += (
                    f"\n    [green]{escape(placeholder)}[/green]: {escape(description)}"
                )

            console.print(Panel(help_text, expand=False, border_style="cyan"))
        except Exception as e:
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")
