"""Pytest configuration and fixtures for Tempora tests."""

from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so tempora can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def fixed_clock():
    """A clock frozen at 2024-03-05 10:20:30.456789."""
    moment = datetime.datetime(2024, 3, 5, 10, 20, 30, 456789)
    return lambda: moment
