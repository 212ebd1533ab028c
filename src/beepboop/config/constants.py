"""
Constants for beepboop.

This module defines default values for all configurable parameters. These
constants are used as fallback values when neither command-line arguments
nor environment variables are provided.
"""

# Environment variable prefix
ENV_PREFIX = "BEEPBOOP_"

# Check configuration defaults
DEFAULT_TARGET = ""
DEFAULT_MODE = "auto"
DEFAULT_INTERVAL = "5s"
DEFAULT_TIMEOUT = "3s"
DEFAULT_RETRIES = 0
DEFAULT_STATUS = ""
DEFAULT_ONCE = "false"

# Output configuration defaults
DEFAULT_QUIET = "false"
DEFAULT_NO_COLOR = "false"

# Logging configuration defaults
DEFAULT_LOGGING_TYPE = "prod"
DEFAULT_LOGGING_CONFIG_FILE = ""

SUPPORTED_MODES = ("auto", "icmp", "http", "https")
