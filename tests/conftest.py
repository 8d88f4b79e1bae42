"""
Shared fixtures for the okfail test suite.

structlog configuration is process-global; every test starts from, and
returns to, structlog's defaults.
"""

from __future__ import annotations

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog.configure() a test performed."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture()
def call_log() -> list:
    """Record of transform invocations, for asserting a rail was never touched."""
    return []
