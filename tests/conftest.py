"""Shared pytest fixtures."""

import pytest

from designos.utils.logger import setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to a test's captured streams."""
    yield
    setup_logging(level="WARNING", console=False)
