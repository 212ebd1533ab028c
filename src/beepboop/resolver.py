"""
Pure helpers that turn raw command-line input into check options.

Nothing in this module touches the network or the process environment, so
both functions can be unit tested without any mocking.
"""

from typing import FrozenSet, Set, Tuple
from urllib.parse import urlsplit

from beepboop.domain import CheckMode
from beepboop.errors import (
    InvalidStatusCodeError,
    InvalidTargetError,
    ModeTargetMismatchError,
    UnsupportedModeError,
)

HTTP_PREFIX = "http://"
HTTPS_PREFIX = "https://"

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599


def resolve_mode_and_target(mode_hint: str, raw_target: str) -> Tuple[CheckMode, str]:
    """
    Resolve a mode hint and a raw target into a concrete mode and normalized target.

    Args:
        mode_hint: One of auto, icmp, http or https (case insensitive).
        raw_target: A host name, IP address or URL.

    Returns:
        Tuple[CheckMode, str]: The mode to check with and the target to check.

    Raises:
        InvalidTargetError: If the target is empty or only whitespace.
        ModeTargetMismatchError: If an explicit http/https mode contradicts the
            scheme already present on the target.
        UnsupportedModeError: If the mode hint is not recognized.
    """
    target = raw_target.strip()
    if not target:
        raise InvalidTargetError("target is empty")

    hint = mode_hint.strip().lower()
    if hint == "icmp":
        return CheckMode.ICMP, target
    elif hint == "http":
        return CheckMode.HTTP, _with_scheme(target, HTTP_PREFIX, HTTPS_PREFIX, hint)
    elif hint == "https":
        return CheckMode.HTTPS, _with_scheme(target, HTTPS_PREFIX, HTTP_PREFIX, hint)
    elif hint == "auto":
        return _auto_detect(target), target
    raise UnsupportedModeError(f"unsupported mode: {mode_hint}")


def _with_scheme(target: str, prefix: str, conflicting_prefix: str, hint: str) -> str:
    if target.startswith(prefix):
        return target
    if target.startswith(conflicting_prefix):
        other = conflicting_prefix[: -len("://")]
        raise ModeTargetMismatchError(f"--mode={hint} cannot use {other} target")
    return prefix + target


def _auto_detect(target: str) -> CheckMode:
    if target.startswith(HTTP_PREFIX):
        return CheckMode.HTTP
    if target.startswith(HTTPS_PREFIX):
        return CheckMode.HTTPS

    # Anything that is not clearly an http(s) URL is treated as a ping target.
    try:
        scheme = urlsplit(target).scheme
    except ValueError:
        return CheckMode.ICMP
    if scheme == "http":
        return CheckMode.HTTP
    if scheme == "https":
        return CheckMode.HTTPS
    return CheckMode.ICMP


def parse_expected_statuses(text: str) -> FrozenSet[int]:
    """
    Parse a comma-separated list of HTTP status codes.

    Empty tokens are skipped and duplicates collapse. An empty or blank input
    yields an empty set, which tells the checker to fall back to the default
    2xx/3xx success range.

    Args:
        text: Raw input such as "200, 204,301".

    Returns:
        FrozenSet[int]: The accepted status codes.

    Raises:
        InvalidStatusCodeError: If a token is not an integer or is outside 100-599.
    """
    statuses: Set[int] = set()
    for token in text.split(","):
        status_text = token.strip()
        if not status_text:
            continue
        try:
            status_code = int(status_text)
        except ValueError as err:
            raise InvalidStatusCodeError(f"{status_text!r} is not a valid status code") from err
        if status_code < MIN_STATUS_CODE or status_code > MAX_STATUS_CODE:
            raise InvalidStatusCodeError(f"{status_code} is outside valid HTTP status range")
        statuses.add(status_code)
    return frozenset(statuses)
