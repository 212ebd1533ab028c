"""
Logging configuration module for beepboop.

This module configures logging for the application based on the run context.
It supports built-in configurations for development and production and a
custom configuration read from a user-supplied JSON file. Logging carries
diagnostics only; the narration meant for the user is printed by the Reporter.
"""

import json
import logging.config
import os
from typing import Any, Dict

from beepboop.config.run_context import RunContext


def configure_logging(context: RunContext) -> None:
    """
    Configure logging for the application based on the provided configuration.

    This function sets up logging based on the logging type specified in the
    run context. It supports three types of logging configurations:
    - dev: debug output on stderr
    - prod: warnings and errors only on stderr
    - custom: configuration loaded from the given file

    It also adds a target filter to all log records so formatters can show
    which target a record belongs to.

    Args:
        context: Run context containing logging settings.

    Raises:
        ValueError: If the logging type is invalid or if a custom logging
            configuration file is not provided when using the 'custom' type.
    """
    logging_type: str = context.logging_type.lower()
    if not logging_type:
        raise ValueError("Logging type must be provided.")
    elif logging_type == "dev":
        file_path = _get_local_package_file_path("logging-config-dev.json")
        _load_logging_config(file_path)
    elif logging_type == "prod":
        file_path = _get_local_package_file_path("logging-config-prod.json")
        _load_logging_config(file_path)
    elif logging_type == "custom":
        if not context.logging_config_file:
            raise ValueError("Custom logging configuration file must be provided.")
        else:
            _load_logging_config(context.logging_config_file)
    else:
        raise ValueError(
            f"Invalid logging type: {context.logging_type}. Allowed values are: dev, prod, custom"
        )

    # Filters on a logger do not apply to records from child loggers,
    # so the filter goes on every root handler.
    target_filter = _TargetFilter(target=context.target.strip())
    for handler in logging.getLogger().handlers:
        handler.addFilter(target_filter)

    logging.debug("Logging configured and TargetFilter added.")


def _load_logging_config(config_file: str) -> None:
    """
    Load logging configuration from a JSON file and apply it with dictConfig.

    Args:
        config_file: Path to the JSON file containing logging configuration.

    Raises:
        RuntimeError: If the file is not found, contains invalid JSON, or
            if there is any other error loading the configuration.
    """
    try:
        with open(config_file) as f:
            config: Dict[str, Any] = json.load(f)
            logging.config.dictConfig(config)
    except FileNotFoundError as err:
        raise RuntimeError(f"Logging config file not found: {config_file}") from err
    except json.JSONDecodeError as err:
        raise RuntimeError(f"Invalid JSON format in logging config file: {config_file}") from err
    except Exception as err:
        raise RuntimeError(f"Error loading logging config: {str(err)}") from err


def _get_local_package_file_path(config_file: str) -> str:
    """
    Get the absolute path to a file in the same directory as this module.

    Args:
        config_file: Name of the file to locate.

    Returns:
        str: Absolute path to the specified file.
    """
    return os.path.join(os.path.dirname(__file__), config_file)


class _TargetFilter(logging.Filter):
    """
    A logging filter that injects the checked target into every log record.
    """

    def __init__(self, target: str) -> None:
        super().__init__()
        self._target: str = target

    def filter(self, record: logging.LogRecord) -> bool:
        record.target = self._target
        return True
