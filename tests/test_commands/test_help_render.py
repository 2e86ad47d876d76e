"""
Tests for slash command help rendering.
"""

from typing import Generator
import io
import re
import pytest
from unittest.mock import patch
from click.testing import CliRunner
from rich.console import Console
from strcalc.commands.app import cli
from strcalc.commands.base import params_describe, rich_help
from strcalc.commands import config


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    return ansi_escape.sub("", text)


@pytest.fixture
def captured_output() -> Generator[io.StringIO, None, None]:
    """Captures help output."""
    output = io.StringIO()
    console = Console(file=output, width=120)
    with patch("strcalc.commands.base.console", console):
        yield output


def test_params_describe_config_set() -> None:
    described = params_describe(config.set.params)
    assert described == [
        ("FIELD", "one of " + ", ".join(config.FIELDS)),
        ("VALUES...", "text"),
    ]


def test_params_describe_no_arguments() -> None:
    assert params_describe(config.show.params) == []


def test_rich_help_escapes_examples() -> None:
    help_text = rich_help("Do it.", examples=["/config set baseDelimiters '[x]'"])
    assert "Do it." in help_text
    assert "\\[x]" in help_text


def test_command_help_lists_fields(captured_output: io.StringIO) -> None:
    result = CliRunner().invoke(config.config, ["set", "--help"])
    assert result.exit_code == 0
    output = strip_ansi(captured_output.getvalue())
    assert "/config set FIELD VALUES..." in output
    for field in config.FIELDS:
        assert field in output
    assert "/config set operation mul" in output


def test_command_help_without_arguments(captured_output: io.StringIO) -> None:
    result = CliRunner().invoke(config.config, ["reset", "--help"])
    assert result.exit_code == 0
    output = strip_ansi(captured_output.getvalue())
    assert "/config reset" in output
    assert "none" in output


def test_group_help_lists_slash_paths(captured_output: io.StringIO) -> None:
    result = CliRunner().invoke(config.config, ["--help"])
    assert result.exit_code == 0
    output = strip_ansi(captured_output.getvalue())
    for name in ["show", "set", "reset"]:
        assert f"/config {name}" in output
    assert "Change one configuration field" in output


def test_root_help_from_repl_prefix(captured_output: io.StringIO) -> None:
    assert cli.main(args=["--help"], prog_name="/", standalone_mode=False) == 0
    output = strip_ansi(captured_output.getvalue())
    assert "/config" in output
    assert "Show or change the calculator configuration" in output
