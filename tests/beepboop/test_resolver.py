"""
Unit tests for the mode resolver and the expected-status parser.

Both functions are pure, so the tests exercise them directly without mocking.
"""

import pytest

from beepboop.domain import CheckMode
from beepboop.errors import (
    InvalidStatusCodeError,
    InvalidTargetError,
    ModeTargetMismatchError,
    UnsupportedModeError,
    ValidationError,
)
from beepboop.resolver import parse_expected_statuses, resolve_mode_and_target


@pytest.mark.parametrize(
    "raw_target, expected_mode, expected_target",
    [
        ("example.com", CheckMode.ICMP, "example.com"),
        ("  10.0.0.1  ", CheckMode.ICMP, "10.0.0.1"),
        ("http://example.com", CheckMode.HTTP, "http://example.com"),
        ("https://example.com", CheckMode.HTTPS, "https://example.com"),
        ("  https://example.com/health ", CheckMode.HTTPS, "https://example.com/health"),
        ("HTTP://example.com", CheckMode.HTTP, "HTTP://example.com"),
        ("Https://example.com", CheckMode.HTTPS, "Https://example.com"),
        ("ftp://example.com", CheckMode.ICMP, "ftp://example.com"),
        ("example.com:8080", CheckMode.ICMP, "example.com:8080"),
        ("::1", CheckMode.ICMP, "::1"),
    ],
)
def test_resolve_auto_should_detect_mode_from_target(
    raw_target: str, expected_mode: CheckMode, expected_target: str
) -> None:
    """
    Tests that auto mode honors http(s) schemes and defaults everything else to ICMP.
    """
    # Act
    mode, target = resolve_mode_and_target("auto", raw_target)

    # Assert
    assert mode is expected_mode
    assert target == expected_target


@pytest.mark.parametrize("raw_target", ["example.com", " 192.168.1.1", "host-with-dash.local "])
def test_resolve_icmp_should_return_trimmed_target_unchanged(raw_target: str) -> None:
    """
    Tests that icmp mode never rewrites the target beyond trimming it.
    """
    # Act
    mode, target = resolve_mode_and_target("icmp", raw_target)

    # Assert
    assert mode is CheckMode.ICMP
    assert target == raw_target.strip()


def test_resolve_icmp_should_not_validate_urls() -> None:
    """
    Tests that icmp mode accepts even URL-looking targets as-is.
    """
    assert resolve_mode_and_target("icmp", "https://example.com") == (
        CheckMode.ICMP,
        "https://example.com",
    )


@pytest.mark.parametrize(
    "mode_hint, raw_target, expected",
    [
        ("http", "example.com", (CheckMode.HTTP, "http://example.com")),
        ("http", "http://example.com/x", (CheckMode.HTTP, "http://example.com/x")),
        ("https", "example.com", (CheckMode.HTTPS, "https://example.com")),
        ("https", "https://example.com/x", (CheckMode.HTTPS, "https://example.com/x")),
        ("HTTPS", "example.com", (CheckMode.HTTPS, "https://example.com")),
        (" Http ", "example.com", (CheckMode.HTTP, "http://example.com")),
    ],
)
def test_resolve_explicit_http_modes_should_prefix_scheme(mode_hint, raw_target, expected) -> None:
    """
    Tests that explicit http/https modes add the scheme when it is missing.
    """
    assert resolve_mode_and_target(mode_hint, raw_target) == expected


@pytest.mark.parametrize(
    "mode_hint, raw_target",
    [("http", "https://x"), ("https", "http://x")],
)
def test_resolve_should_reject_mode_target_mismatch(mode_hint: str, raw_target: str) -> None:
    """
    Tests that an explicit mode contradicting the target scheme is rejected.
    """
    with pytest.raises(ModeTargetMismatchError, match=f"--mode={mode_hint} cannot use"):
        resolve_mode_and_target(mode_hint, raw_target)


@pytest.mark.parametrize("raw_target", ["", "   ", "\t\n"])
def test_resolve_should_reject_empty_target(raw_target: str) -> None:
    """
    Tests that an empty or blank target is rejected for every mode.
    """
    with pytest.raises(InvalidTargetError, match="target is empty"):
        resolve_mode_and_target("auto", raw_target)


def test_resolve_should_reject_unsupported_mode() -> None:
    """
    Tests that an unknown mode hint is rejected.
    """
    with pytest.raises(UnsupportedModeError, match="unsupported mode: tcp"):
        resolve_mode_and_target("tcp", "example.com")


def test_validation_errors_should_be_value_errors() -> None:
    """
    Tests that validation errors can be handled as plain ValueErrors.
    """
    with pytest.raises(ValueError):
        resolve_mode_and_target("tcp", "example.com")
    assert issubclass(InvalidStatusCodeError, ValidationError)


def test_parse_expected_statuses_should_return_set_of_codes() -> None:
    """
    Tests that a comma-separated list is parsed into a set, ignoring whitespace.
    """
    # Act
    statuses = parse_expected_statuses("200, 204,301")

    # Assert
    assert statuses == {200, 204, 301}
    assert parse_expected_statuses("301,200,204") == statuses


def test_parse_expected_statuses_should_collapse_duplicates() -> None:
    """
    Tests that duplicate codes collapse into a single entry.
    """
    assert parse_expected_statuses("200,200") == {200}


@pytest.mark.parametrize("text", ["", "   ", ","])
def test_parse_expected_statuses_should_return_empty_set_for_blank_input(text: str) -> None:
    """
    Tests that blank input means "use the default success range".
    """
    assert parse_expected_statuses(text) == frozenset()


def test_parse_expected_statuses_should_skip_empty_tokens() -> None:
    """
    Tests that a trailing comma does not make the input invalid.
    """
    assert parse_expected_statuses("200,") == {200}


@pytest.mark.parametrize(
    "text, message",
    [
        ("abc", "'abc' is not a valid status code"),
        ("200,x", "'x' is not a valid status code"),
        ("700", "700 is outside valid HTTP status range"),
        ("99", "99 is outside valid HTTP status range"),
        ("200,600", "600 is outside valid HTTP status range"),
    ],
)
def test_parse_expected_statuses_should_reject_invalid_codes(text: str, message: str) -> None:
    """
    Tests that non-integer and out-of-range codes are rejected.
    """
    with pytest.raises(InvalidStatusCodeError, match=message):
        parse_expected_statuses(text)


def test_parse_expected_statuses_should_accept_range_bounds() -> None:
    """
    Tests that 100 and 599 are both valid status codes.
    """
    assert parse_expected_statuses("100,599") == {100, 599}
