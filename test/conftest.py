"""Pytest configuration and fixtures

Provides a fresh goal store, settings and a Starlette TestClient for each
test so no state leaks between tests.
"""

import sys
from pathlib import Path

import pytest
from starlette.testclient import TestClient

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from goal_tracker.config import Settings, reset_settings  # noqa: E402 - after sys.path setup
from goal_tracker.store import GoalStore  # noqa: E402
from goal_tracker.web_server import GoalTrackerWebServer  # noqa: E402


class RecordingLogger:
    """Logger double that keeps every call for assertions."""

    def __init__(self):
        self.records = []

    def _record(self, level, message, **kwargs):
        self.records.append((level, message, kwargs))

    def debug(self, message, **kwargs):
        self._record("debug", message, **kwargs)

    def info(self, message, **kwargs):
        self._record("info", message, **kwargs)

    def warning(self, message, **kwargs):
        self._record("warning", message, **kwargs)

    def error(self, message, **kwargs):
        self._record("error", message, **kwargs)

    def critical(self, message, **kwargs):
        self._record("critical", message, **kwargs)

    def levels(self):
        return [level for level, _, _ in self.records]


@pytest.fixture(autouse=True)
def clean_settings():
    """Cached settings never survive a test"""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def store():
    return GoalStore()


@pytest.fixture
def settings():
    """Production-like settings: no stack traces in error pages"""
    return Settings(environment="production")


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def server(store, settings, recording_logger):
    return GoalTrackerWebServer(store=store, settings=settings, logger=recording_logger)


@pytest.fixture
def client(server):
    """
    TestClient that returns 500 responses instead of re-raising handler errors.

    Redirects are not followed so tests can assert on the 302 itself.
    """
    with TestClient(server.app, raise_server_exceptions=False, follow_redirects=False) as test_client:
        yield test_client
