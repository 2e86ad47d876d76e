"""
Active calculator configuration for a REPL or CLI session.

CalculatorConfig is immutable; the session swaps in a new instance when the
user changes a setting, and remembers the one it started with so that
`/config reset` can restore it.
"""

from typing import Any, Optional
from strcalc.models.dataModel import CalculatorConfig


class CalculatorSession:
    """Holds the configuration used for each calculation."""

    def __init__(self, config: CalculatorConfig) -> None:
        self.initial: CalculatorConfig = config
        self.config: CalculatorConfig = config

    def update(self, **changes: Any) -> CalculatorConfig:
        """
        Replace the active configuration with a validated copy.

        :param changes: Field names and new values.
        :return: The new active configuration.
        :raises pydantic.ValidationError: If the changed values are invalid;
            the active configuration is left untouched.
        """
        candidate: dict[str, Any] = self.config.model_dump()
        candidate.update(changes)
        self.config = CalculatorConfig.model_validate(candidate)
        return self.config

    def reset(self) -> CalculatorConfig:
        self.config = self.initial
        return self.config


session: Optional[CalculatorSession] = None


def session_start(config: CalculatorConfig) -> CalculatorSession:
    """Begin a session with `config` as the active configuration."""
    global session
    session = CalculatorSession(config)
    return session


def session_get() -> CalculatorSession:
    """Return the current session, starting a default one if needed."""
    global session
    if session is None:
        session = CalculatorSession(CalculatorConfig())
    return session
