"""
Integration tests for the configuration -> command -> calculation chain.

These run real session state, real slash commands and real calculations;
only the terminal is replaced by captured stdout.
"""

from argparse import Namespace
import pytest
from strcalc.config.settings import App, config_build
from strcalc.lib.input import input_batch
from strcalc.lib.session import session_start


def options_make(**kwargs) -> Namespace:
    fields = dict(
        step=None,
        denyNegatives=None,
        upperBound=None,
        newlineDelimiter=None,
        formula=None,
        op=None,
        ask=None,
    )
    fields.update(kwargs)
    return Namespace(**fields)


@pytest.mark.asyncio
async def test_step_one_then_reconfigure(capsys: pytest.CaptureFixture) -> None:
    session_start(config_build(options_make(step="1"), App()))

    exit_code = await input_batch(
        [
            "1,2",
            "1,2,3",
            "/config set twoOperandCap false",
            "1,2,3",
            "/config set operation mul",
            "/config set showFormula true",
            "2,3,4",
            "/exit",
            "9,9",
        ]
    )

    assert exit_code == 1
    lines = [line.strip() for line in capsys.readouterr().out.splitlines()]
    assert lines[0] == "3"
    assert lines[1] == "ERROR: Only up to 2 numbers are allowed in this mode."
    assert "6" in lines
    assert "2*3*4 = 24" in lines
    assert "18" not in lines


@pytest.mark.asyncio
async def test_alternate_newline_delimiter_and_reset(capsys: pytest.CaptureFixture) -> None:
    session_start(
        config_build(options_make(newlineDelimiter="|", denyNegatives="false"), App())
    )

    exit_code = await input_batch(
        [
            "1|2,3",
            "1,-2,-3",
            "/config set denyNegatives true",
            "1,-2,-3",
            "/config reset",
            "1,-2,-3",
        ]
    )

    assert exit_code == 1
    lines = [line.strip() for line in capsys.readouterr().out.splitlines()]
    assert lines[0] == "6"
    assert lines[1] == "-4"
    assert "ERROR: Negatives not allowed: -2, -3" in lines
    assert lines[-1] == "-4"
