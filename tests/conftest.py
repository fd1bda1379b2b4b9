"""Shared test fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so log capture works in every test."""
    yield
    structlog.reset_defaults()
