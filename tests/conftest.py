"""Pytest configuration and shared fixtures for header parser tests."""

import sys
import os
from pathlib import Path

import pytest

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent))

from header_parser import parse, parse_with_diagnostics

BUNDLED_SAMPLES = Path(__file__).parent / "samples"


def pytest_addoption(parser):
    parser.addoption(
        "--samples-dir",
        action="store",
        default=os.environ.get("HEADER_SAMPLES_DIR", str(BUNDLED_SAMPLES)),
        help="Path to a directory of sample header files",
    )


@pytest.fixture
def parse_snippet():
    """Parse header text and return its contents."""
    def _parse(text):
        return parse(text, filename="<test>")
    return _parse


@pytest.fixture
def parse_snippet_with_diagnostics():
    """Parse header text and return (contents, errors)."""
    def _parse(text):
        return parse_with_diagnostics(text, filename="<test>")
    return _parse


@pytest.fixture
def samples_dir(request):
    """Path to the sample header directory."""
    return Path(request.config.getoption("--samples-dir"))


@pytest.fixture
def sample_files(samples_dir):
    """List of all sample file paths."""
    if not samples_dir.is_dir():
        pytest.skip(f"Samples dir not found: {samples_dir}")
    files = []
    for dirpath, _, filenames in os.walk(samples_dir):
        for fn in sorted(filenames):
            files.append(Path(dirpath) / fn)
    return files
