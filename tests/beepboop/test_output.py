"""
Unit tests for the colorizer and the reporter.
"""

import io

import pytest

from beepboop.beep import TerminalBell
from beepboop.domain import CheckMode, CheckOptions
from beepboop.errors import TransportError
from beepboop.output import ANSI_GREEN, ANSI_RESET, Colorizer, Reporter, format_duration


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.mark.parametrize(
    "no_color_flag, environ, stream, expected",
    [
        (False, {}, _TtyStream(), True),
        (True, {}, _TtyStream(), False),
        (False, {"NO_COLOR": "1"}, _TtyStream(), False),
        (False, {"NO_COLOR": "anything"}, _TtyStream(), False),
        (False, {"NO_COLOR": ""}, _TtyStream(), True),
        (False, {"TERM": "dumb"}, _TtyStream(), False),
        (False, {}, io.StringIO(), False),
    ],
)
def test_colorizer_detect_should_honor_flags_environment_and_tty(
    no_color_flag: bool, environ, stream, expected: bool
) -> None:
    """
    Tests that colors are only enabled on a terminal without opt-outs.
    """
    assert Colorizer.detect(no_color_flag, environ, stream).enabled is expected


def test_colorizer_should_wrap_text_only_when_enabled() -> None:
    """
    Tests that disabled colors return the text untouched.
    """
    assert Colorizer(True).up("target is up") == f"{ANSI_GREEN}target is up{ANSI_RESET}"
    assert Colorizer(False).up("target is up") == "target is up"


def _reporter(quiet: bool = False):
    out, err = io.StringIO(), io.StringIO()
    return Reporter(Colorizer(False), out=out, err=err, quiet=quiet), out, err


def test_reporter_should_print_banner() -> None:
    """
    Tests that the banner lists the resolved settings of the run.
    """
    # Arrange
    reporter, out, _ = _reporter()
    options = CheckOptions(mode=CheckMode.HTTPS, target="https://example.com", timeout=3.0)

    # Act
    reporter.banner("1.2.3", options, interval=5.0, retries=2, once=False)

    # Assert
    assert out.getvalue() == (
        "beepboop 1.2.3: mode=https target=https://example.com interval=5s timeout=3s "
        "retries=2 once=false\n"
    )


def test_reporter_should_narrate_waiting_with_and_without_error() -> None:
    """
    Tests that waiting rounds show either the error or the down state.
    """
    # Arrange
    reporter, out, _ = _reporter()

    # Act
    reporter.waiting()
    reporter.waiting(TransportError("GET http://x: connection refused"))

    # Assert
    assert out.getvalue().splitlines() == [
        "still waiting: target is down",
        "still waiting: GET http://x: connection refused",
    ]


def test_reporter_quiet_should_only_print_failures() -> None:
    """
    Tests that quiet mode suppresses everything except failures.
    """
    # Arrange
    reporter, out, err = _reporter(quiet=True)

    # Act
    reporter.up()
    reporter.down()
    reporter.waiting()
    reporter.failed(TransportError("boom"))

    # Assert
    assert out.getvalue() == ""
    assert err.getvalue() == "check failed: boom\n"


@pytest.mark.parametrize("seconds, expected", [(5.0, "5s"), (1.5, "1.5s"), (0.3, "300ms"), (90.0, "90s")])
def test_format_duration_should_render_compact_durations(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_terminal_bell_should_write_bel_character() -> None:
    """
    Tests that the bell writes BEL to its stream.
    """
    stream = io.StringIO()
    TerminalBell(stream).emit()
    assert stream.getvalue() == "\a"
