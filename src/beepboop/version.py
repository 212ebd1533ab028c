"""
Version resolution for beepboop.

The version comes from the installed distribution metadata when available,
then from a VERSION file in the working directory or next to the executable,
and finally falls back to "dev".
"""

import logging
import sys
from importlib import metadata
from pathlib import Path
from typing import Iterable, Optional

DISTRIBUTION_NAME = "beepboop"
DEV_VERSION = "dev"
VERSION_FILE = "VERSION"

logger = logging.getLogger(__name__)


def resolve_version(search_paths: Optional[Iterable[Path]] = None) -> str:
    """
    Resolve the version string shown by --version and in the startup banner.

    Args:
        search_paths: VERSION files to try, in order. Defaults to ./VERSION and
            VERSION beside the running executable.

    Returns:
        str: The version without a leading "v", or "dev".
    """
    installed = _normalize(_distribution_version())
    if installed:
        return installed

    if search_paths is None:
        search_paths = [Path(VERSION_FILE), Path(sys.argv[0]).resolve().parent / VERSION_FILE]

    for path in search_paths:
        try:
            content = path.read_text(encoding="utf-8")
        except OSError:
            continue
        from_file = _normalize(content)
        if from_file:
            return from_file

    return DEV_VERSION


def _distribution_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        logger.debug(f"Distribution {DISTRIBUTION_NAME} is not installed")
        return ""


def _normalize(raw: str) -> str:
    trimmed = raw.strip()
    if trimmed in ("", DEV_VERSION):
        return ""
    return trimmed[1:] if trimmed.startswith("v") else trimmed
