"""
Run context for beepboop.

This module defines the data structure that holds every parameter of a run,
as parsed from the command line and the environment. It is the only place
where configuration lives; nothing below the entry point reads flags or
environment variables on its own.
"""

from typing import NamedTuple


class RunContext(NamedTuple):
    """
    A data structure containing all configuration parameters of a run.

    Attributes:
        show_version: Print the version and exit.
        target: Raw target (host, IP or URL) before mode resolution.
        mode: Mode hint, one of auto, icmp, http or https (lower case).
        interval: Seconds between polling rounds.
        timeout: Per-check timeout in seconds.
        retries: Additional attempts per polling round.
        once: Run a single polling round and exit.
        status: Raw comma-separated list of expected HTTP status codes.
        quiet: Suppress non-essential output.
        no_color: Disable colored output.
        logging_type: Type of logging configuration to use (dev, prod, or custom).
        logging_config_file: Path to custom logging configuration file (if logging_type is 'custom').
    """

    show_version: bool
    target: str
    mode: str
    interval: float
    timeout: float
    retries: int
    once: bool
    status: str
    quiet: bool
    no_color: bool
    logging_type: str
    logging_config_file: str
