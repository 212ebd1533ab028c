"""
Domain models for the beepboop reachability checker.

This module defines the core data structures used throughout the application:
the checking mode, the immutable check options handed to the checker and the
outcome of a polling run together with the process exit code it maps to.
"""

from enum import Enum
from typing import FrozenSet, NamedTuple


class CheckMode(str, Enum):
    """
    Defines the supported checking protocols as a type-safe enumeration.

    Inheriting from 'str' allows enum members to behave like strings,
    which keeps them printable in the startup banner and in log records.
    The raw "auto" hint is never a member: it is resolved away before a
    checker is built.
    """

    ICMP = "icmp"
    HTTP = "http"
    HTTPS = "https"


class CheckOptions(NamedTuple):
    """
    The complete configuration of a single reachability check.

    Built once from validated command-line input and never modified afterwards.

    Attributes:
        mode: The resolved protocol used to check the target.
        target: The normalized target (a URL for HTTP modes, a host or IP for ICMP).
        timeout: The per-check deadline in seconds, always greater than zero.
        expected_statuses: HTTP status codes that count as "up". An empty set
            means any status in the 200-399 range is accepted.
    """

    mode: CheckMode
    target: str
    timeout: float
    expected_statuses: FrozenSet[int] = frozenset()


class Outcome(Enum):
    """
    The final result of a polling run.

    Each member carries the process exit code expected by the environment.
    """

    UP = "up"
    DOWN = "down"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


EXIT_SUCCESS = 0
EXIT_USAGE = 2

_EXIT_CODES = {
    Outcome.UP: 0,
    Outcome.DOWN: 1,
    Outcome.FAILED: 1,
    Outcome.CANCELLED: 130,
}
