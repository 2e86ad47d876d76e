"""
settings.py

This module provides application configuration management for strcalc.

Features:
- Centralized application settings using Pydantic settings, overridable
  from the environment with the STRCALC_ prefix
- Translation of the CLI "step" levels into calculator defaults
- Assembly of the immutable CalculatorConfig from settings and CLI flags

Usage:
Import appsettings for application configuration values, and config_build to
turn parsed command line options into a CalculatorConfig.
"""

from argparse import Namespace
from pathlib import Path
from typing import Any, Final, Optional
from appdirs import user_config_dir
from pydantic_settings import BaseSettings, SettingsConfigDict
from strcalc.models.dataModel import CalculatorConfig, Operation, DEFAULT_DELIMITERS

# Set up the configuration directory using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("strcalc", ""))
HISTORY_FILE: Final[Path] = CONFIG_DIR / "history"

# Step value meaning "every feature enabled"
STEP_FINAL: Final[int] = 999


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with the
    STRCALC_ prefix. Calculator fields left as None defer to the CLI flags
    and the step defaults.

    Attributes:
        beQuiet: Suppress logging output
        step: Feature level (1-5, or "final")
        denyNegatives: Reject negative operands
        upperBound: Operands above this value count as zero
        newlineDelimiter: Replacement for the newline base delimiter
        formula: Print the formula instead of the bare value
        op: Operation name (add, sub, mul, div)
    """

    beQuiet: bool = False

    step: Optional[str] = None
    denyNegatives: Optional[bool] = None
    upperBound: Optional[int] = None
    newlineDelimiter: Optional[str] = None
    formula: Optional[bool] = None
    op: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="STRCALC_",
        case_sensitive=False,
        extra="allow",
    )


def step_parse(step: str | None) -> int:
    """
    Translate a step argument into a feature level.

    :param step: "1".."5", "final", or None.
    :return: The numeric step; "final", None and anything unparsable map to
        STEP_FINAL.
    """
    if step is None:
        return STEP_FINAL
    text: str = str(step).strip().lower()
    if text == "final":
        return STEP_FINAL
    try:
        return int(text)
    except ValueError:
        return STEP_FINAL


def bool_parse(value: Any) -> bool | None:
    """
    Interpret a flag value such as "true", "False", "1" or "no".

    :param value: Raw flag value, possibly already a bool or None.
    :return: The boolean, or None when the value is missing or unrecognised.
    """
    if value is None or isinstance(value, bool):
        return value
    text: str = str(value).strip().lower()
    if text in ("true", "1", "yes", "on"):
        return True
    if text in ("false", "0", "no", "off"):
        return False
    return None


def first_set(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def baseDelimiters_build(newline_delimiter: str | None) -> list[str]:
    """
    Build the base delimiter list, swapping the newline for an alternative.

    :param newline_delimiter: Replacement for "\\n", or None/empty to keep it.
    :return: The base delimiters in declaration order.
    """
    delimiters: list[str] = list(DEFAULT_DELIMITERS)
    if newline_delimiter:
        delimiters.remove("\n")
        delimiters.append(newline_delimiter)
    return delimiters


def config_build(
    options: Namespace | None = None, settings: App | None = None
) -> CalculatorConfig:
    """
    Assemble the calculator configuration for one invocation.

    Precedence per field: CLI flag, then environment setting, then the
    default implied by the step.

    Args:
        options: Parsed command-line arguments (attributes may be missing)
        settings: Application settings; defaults to appsettings

    Returns:
        CalculatorConfig: The immutable configuration

    Raises:
        pydantic.ValidationError: If the assembled values are invalid
    """
    settings = settings or appsettings

    def option(name: str) -> Any:
        return getattr(options, name, None) if options is not None else None

    step: int = step_parse(first_set(option("step"), settings.step))
    deny_negatives: bool = first_set(
        bool_parse(option("denyNegatives")),
        settings.denyNegatives,
        step >= 4,
    )
    upper_bound: int = first_set(option("upperBound"), settings.upperBound, 1000)
    show_formula: bool = first_set(
        bool_parse(option("formula")), settings.formula, False
    )
    operation: Operation = Operation.from_name(first_set(option("op"), settings.op))
    newline_delimiter: str | None = first_set(
        option("newlineDelimiter"), settings.newlineDelimiter
    )

    return CalculatorConfig(
        twoOperandCap=step == 1,
        denyNegatives=deny_negatives,
        upperBound=upper_bound,
        baseDelimiters=baseDelimiters_build(newline_delimiter),
        showFormula=show_formula,
        operation=operation,
    )


def historyFile_ensure() -> Path:
    """
    Ensure the configuration directory exists and return the history file path.

    Returns:
        Path: Location of the REPL history file
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return HISTORY_FILE


# Create the application settings instance
appsettings: Final[App] = App()
