"""
Configuration module for beepboop.

This module parses command-line arguments and environment variables into a
run context. Every option first checks for a command-line argument, then
falls back to a BEEPBOOP_* environment variable, and finally uses a default
value from the constants module.
"""

import argparse
import os
import re
from typing import Any, List, Optional

from beepboop.config.constants import (
    DEFAULT_INTERVAL,
    DEFAULT_LOGGING_CONFIG_FILE,
    DEFAULT_LOGGING_TYPE,
    DEFAULT_MODE,
    DEFAULT_NO_COLOR,
    DEFAULT_ONCE,
    DEFAULT_QUIET,
    DEFAULT_RETRIES,
    DEFAULT_STATUS,
    DEFAULT_TARGET,
    DEFAULT_TIMEOUT,
    ENV_PREFIX,
    SUPPORTED_MODES,
)
from beepboop.config.run_context import RunContext
from beepboop.errors import UsageError

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def get_context(argv: Optional[List[str]] = None) -> RunContext:
    """
    Parse command-line arguments and environment variables to create a run context.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        RunContext: A validated context object containing all parsed settings.

    Raises:
        UsageError: If a value is missing, malformed or out of range.
    """
    parser = argparse.ArgumentParser(
        prog="beepboop",
        description="Wait until a host or URL responds, then beep.",
    )

    parser.add_argument(
        "-t",
        "--target",
        type=str,
        default=_env("TARGET", DEFAULT_TARGET),
        help="Target host, IP or URL to check.\n"
        f"If not provided, the value is read from the {ENV_PREFIX}TARGET environment variable.",
    )

    parser.add_argument(
        "-m",
        "--mode",
        type=str,
        default=_env("MODE", DEFAULT_MODE),
        help="Check mode: auto|icmp|http|https (case insensitive).\n"
        f"If not provided, the value is read from the {ENV_PREFIX}MODE environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_MODE} is used.",
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=str,
        default=_env("INTERVAL", DEFAULT_INTERVAL),
        help="Polling interval, e.g. 500ms, 5s, 1m30s or a number of seconds.\n"
        f"If not provided, the value is read from the {ENV_PREFIX}INTERVAL environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_INTERVAL} is used.",
    )

    parser.add_argument(
        "-to",
        "--timeout",
        type=str,
        default=_env("TIMEOUT", DEFAULT_TIMEOUT),
        help="Per-check timeout, in the same format as --interval.\n"
        f"If not provided, the value is read from the {ENV_PREFIX}TIMEOUT environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_TIMEOUT} is used.",
    )

    parser.add_argument(
        "-r",
        "--retries",
        type=int,
        default=_env("RETRIES", str(DEFAULT_RETRIES)),
        help="Additional retry attempts per interval.\n"
        f"If not provided, the value is read from the {ENV_PREFIX}RETRIES environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_RETRIES} is used.",
    )

    parser.add_argument(
        "-s",
        "--status",
        type=str,
        default=_env("STATUS", DEFAULT_STATUS),
        help="Expected HTTP status codes, comma-separated (e.g. 200,204).\n"
        "If empty, any 2xx or 3xx status counts as up.",
    )

    parser.add_argument(
        "--once",
        action="store_true",
        default=_env_flag("ONCE", DEFAULT_ONCE),
        help="Run one check (with its retries) and exit.",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=_env_flag("QUIET", DEFAULT_QUIET),
        help="Suppress non-essential output.",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        default=_env_flag("NO_COLOR", DEFAULT_NO_COLOR),
        help="Disable colored output.",
    )

    parser.add_argument("--version", action="store_true", help="Print version and exit.")

    parser.add_argument(
        "-lt",
        "--logging-type",
        type=str,
        default=_env("LOGGING_TYPE", DEFAULT_LOGGING_TYPE),
        help="Specifies the logging configuration type to use.\n"
        "Allowed values: dev, prod, custom (case insensitive).\n"
        "For 'custom', the --logging-config-file argument is required.",
    )

    parser.add_argument(
        "-lcf",
        "--logging-config-file",
        type=str,
        default=_env("LOGGING_CONFIG_FILE", DEFAULT_LOGGING_CONFIG_FILE),
        help="Path to custom logging configuration file.\n"
        "Required when --logging-type is set to 'custom'.",
    )

    # Parse the command-line arguments
    args: Any = parser.parse_args(argv)

    if args.version:
        return RunContext(
            show_version=True,
            target=args.target,
            mode=args.mode,
            interval=0.0,
            timeout=0.0,
            retries=args.retries,
            once=args.once,
            status=args.status,
            quiet=args.quiet,
            no_color=args.no_color,
            logging_type=args.logging_type,
            logging_config_file=args.logging_config_file,
        )

    if not args.target.strip():
        raise UsageError("--target is required")

    interval = parse_duration(args.interval)
    if interval <= 0:
        raise UsageError("--interval must be > 0")

    timeout = parse_duration(args.timeout)
    if timeout <= 0:
        raise UsageError("--timeout must be > 0")

    if args.retries < 0:
        raise UsageError("--retries must be >= 0")

    mode = args.mode.strip().lower()
    if mode not in SUPPORTED_MODES:
        raise UsageError(f"--mode must be one of {'|'.join(SUPPORTED_MODES)}")

    # Create and return a RunContext with the parsed settings
    return RunContext(
        show_version=False,
        target=args.target,
        mode=mode,
        interval=interval,
        timeout=timeout,
        retries=args.retries,
        once=args.once,
        status=args.status,
        quiet=args.quiet,
        no_color=args.no_color,
        logging_type=args.logging_type,
        logging_config_file=args.logging_config_file,
    )


def parse_duration(text: str) -> float:
    """
    Parse a duration such as "300ms", "1.5s", "2m" or "1h30m" into seconds.

    A bare number is read as seconds. A leading sign is accepted so that
    negative values reach range validation instead of failing to parse.

    Args:
        text: The duration to parse.

    Returns:
        float: The duration in seconds.

    Raises:
        UsageError: If the text is not a valid duration.
    """
    value = text.strip()
    sign = 1.0
    if value[:1] in ("+", "-"):
        sign = -1.0 if value[0] == "-" else 1.0
        value = value[1:]

    if not value:
        raise UsageError(f"invalid duration {text!r}")

    if _NUMBER.fullmatch(value):
        return sign * float(value)

    total = 0.0
    position = 0
    for match in _DURATION_PART.finditer(value):
        if match.start() != position:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()

    if position != len(value):
        raise UsageError(f"invalid duration {text!r}")
    return sign * total


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: str) -> bool:
    return _env(name, default).strip().lower() in ("1", "true", "yes")
