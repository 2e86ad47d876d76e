"""
Diagnostic logging for strcalc using Loguru.

strcalc writes its results and `ERROR: <message>` lines to stdout. Everything
else it wants to report goes through `LOG` to stderr at debug level, so that
piped output stays one line per input:

- configuration that failed validation at startup
- inputs the calculator rejected, with the reason
- `/config set` changes that were refused
- command parsing, stdin and REPL failures

Usage:
    from strcalc.lib.log import LOG
    LOG("Rejected input '1,-2': Negatives not allowed: -2")

Environment:
- Set `STRCALC_BEQUIET=True` to suppress these diagnostics.
"""

from loguru import logger
from typing import Any
import sys

app_logger = logger.bind(app="STRCALC")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Log a diagnostic line to stderr.

    Nothing is written when `beQuiet` is set in `appsettings`.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    try:
        from strcalc.config.settings import appsettings

        if not appsettings.beQuiet:
            app_logger.debug(*args, **kwargs)
    except Exception as e:
        print(f"Logging error: {e}", file=sys.stderr)
