"""
User-facing terminal output.

Everything the user is meant to read goes through the Reporter defined here;
diagnostics go through logging instead. Whether colors are used is decided
once, from the flags and environment handed in by the entry point.
"""

from typing import Mapping, Optional, TextIO

from beepboop.domain import CheckOptions

ANSI_RESET = "\033[0m"
ANSI_RED = "\033[31m"
ANSI_GREEN = "\033[32m"
ANSI_YELLOW = "\033[33m"
ANSI_CYAN = "\033[36m"


class Colorizer:
    """Wraps text in ANSI color codes when enabled."""

    def __init__(self, enabled: bool) -> None:
        self.enabled: bool = enabled

    @classmethod
    def detect(cls, no_color_flag: bool, environ: Mapping[str, str], stream: TextIO) -> "Colorizer":
        """
        Decide whether colors should be used.

        Colors are disabled by the --no-color flag, a non-empty NO_COLOR
        variable, TERM=dumb, or a stream that is not a terminal.
        """
        if no_color_flag or environ.get("NO_COLOR"):
            return cls(False)
        if environ.get("TERM", "").lower() == "dumb":
            return cls(False)
        try:
            is_tty = stream.isatty()
        except (AttributeError, ValueError):
            is_tty = False
        return cls(is_tty)

    def up(self, text: str) -> str:
        return self._wrap(text, ANSI_GREEN)

    def down(self, text: str) -> str:
        return self._wrap(text, ANSI_YELLOW)

    def waiting(self, text: str) -> str:
        return self._wrap(text, ANSI_CYAN)

    def error(self, text: str) -> str:
        return self._wrap(text, ANSI_RED)

    def _wrap(self, text: str, color: str) -> str:
        if not self.enabled:
            return text
        return f"{color}{text}{ANSI_RESET}"


class Reporter:
    """
    Prints the narration of a run.

    In quiet mode only failures are printed.
    """

    def __init__(self, colors: Colorizer, out: TextIO, err: TextIO, quiet: bool = False) -> None:
        self._colors: Colorizer = colors
        self._out: TextIO = out
        self._err: TextIO = err
        self._quiet: bool = quiet

    def banner(
        self, version: str, options: CheckOptions, interval: float, retries: int, once: bool
    ) -> None:
        self._print(
            f"beepboop {version}: mode={options.mode.value} target={options.target} "
            f"interval={format_duration(interval)} timeout={format_duration(options.timeout)} "
            f"retries={retries} once={str(once).lower()}"
        )

    def up(self) -> None:
        self._print(self._colors.up("target is up"))

    def down(self) -> None:
        self._print(self._colors.down("target is down"))

    def waiting(self, error: Optional[BaseException] = None) -> None:
        detail = str(error) if error is not None else self._colors.down("target is down")
        self._print(f"{self._colors.waiting('still waiting')}: {detail}")

    def failed(self, error: BaseException) -> None:
        print(f"{self._colors.error('check failed')}: {error}", file=self._err, flush=True)

    def _print(self, text: str) -> None:
        if self._quiet:
            return
        print(text, file=self._out, flush=True)


def format_duration(seconds: float) -> str:
    """Format a duration the way it is usually typed on the command line, e.g. 1.5s or 300ms."""
    if seconds < 1:
        return f"{seconds * 1000:g}ms"
    return f"{seconds:g}s"
