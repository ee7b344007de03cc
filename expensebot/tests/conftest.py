"""Shared pytest setup and fixtures."""

import os
import tempfile
from datetime import datetime

# Keep the global database out of the real data directory; must run before settings load
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="expensebot-test-"))

import pytest  # noqa: E402


@pytest.fixture
def now() -> datetime:
    """A Wednesday afternoon; the week started on Sunday 2025-05-18."""
    return datetime(2025, 5, 21, 15, 30)
