"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import io
import sys
from pathlib import Path

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from wipedir.common.utils.output_sink import OutputSink  # noqa: E402


@pytest.fixture
def output():
    """In-memory stream the test sink writes to."""
    return io.StringIO()


@pytest.fixture
def sink(output):
    """Output sink writing uncolored text to the in-memory stream."""
    return OutputSink(file=output, no_color=True)


@pytest.fixture
def make_dirs(tmp_path):
    """Create directories relative to tmp_path and return tmp_path."""

    def _make(*relative_paths: str) -> Path:
        for relative in relative_paths:
            (tmp_path / relative).mkdir(parents=True, exist_ok=True)
        return tmp_path

    return _make
