"""Tests for version information."""

import subprocess
import sys


def test_version_module():
    """Test that version is accessible from module."""
    from archivist import __version__

    assert __version__
    assert isinstance(__version__, str)
    # Should be in SemVer format
    parts = __version__.split('.')
    assert len(parts) >= 2  # At least MAJOR.MINOR


def test_version_flag():
    """Test that --version works through `python -m archivist`."""
    result = subprocess.run(
        [sys.executable, "-m", "archivist", "--version"],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert "archivist" in result.stdout
