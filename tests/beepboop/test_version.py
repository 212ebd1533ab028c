"""
Unit tests for version resolution.
"""

from importlib import metadata
from pathlib import Path
from unittest.mock import patch

import pytest

from beepboop.version import resolve_version


def test_resolve_version_should_prefer_installed_distribution() -> None:
    """
    Tests that the installed distribution version wins, without a leading v.
    """
    with patch("beepboop.version.metadata.version", return_value="v1.4.0"):
        assert resolve_version(search_paths=[]) == "1.4.0"


@pytest.fixture
def not_installed():
    with patch(
        "beepboop.version.metadata.version",
        side_effect=metadata.PackageNotFoundError("beepboop"),
    ):
        yield


def test_resolve_version_should_read_version_file(tmp_path: Path, not_installed) -> None:
    """
    Tests that a VERSION file is used when the distribution is not installed.
    """
    # Arrange
    missing = tmp_path / "missing" / "VERSION"
    version_file = tmp_path / "VERSION"
    version_file.write_text("v2.0.1\n", encoding="utf-8")

    # Act & Assert
    assert resolve_version(search_paths=[missing, version_file]) == "2.0.1"


def test_resolve_version_should_skip_blank_version_file(tmp_path: Path, not_installed) -> None:
    """
    Tests that an empty VERSION file falls through to the default.
    """
    version_file = tmp_path / "VERSION"
    version_file.write_text("  \n", encoding="utf-8")

    assert resolve_version(search_paths=[version_file]) == "dev"


def test_resolve_version_should_fall_back_to_dev(not_installed) -> None:
    """
    Tests that "dev" is returned when no source is available.
    """
    assert resolve_version(search_paths=[]) == "dev"
