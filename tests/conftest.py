"""Pytest configuration and fixtures.

Provides logging configuration for the unit suites. Fixtures here are
opt-in unless marked autouse.
"""

from __future__ import annotations

import logging

import pytest

# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_asyncio_logger():
    """Suppress asyncio debug chatter in failing-test output."""
    logging.getLogger("asyncio").setLevel(logging.WARNING)


@pytest.fixture
def debug_logs(caplog):
    """Capture resultkit DEBUG records for the duration of a test."""
    caplog.set_level(logging.DEBUG, logger="resultkit")
    return caplog
