"""Unit tests for logging setup."""

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from core.config import Settings
from core.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    def test_events_reach_stdlib_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Structured events are emitted as stdlib records."""
        setup_logging(Settings(_env_file=None, log_json=True))  # type: ignore[call-arg]

        with caplog.at_level(logging.INFO):
            structlog.get_logger("daylist.tests").info("task_added", task_count=1)

        record = next(r for r in caplog.records if r.name == "daylist.tests")
        payload = json.loads(record.getMessage())
        assert payload["event"] == "task_added"
        assert payload["task_count"] == 1
        assert payload["level"] == "info"
        assert payload["logger"] == "daylist.tests"

    def test_level_filters_events(self, caplog: pytest.LogCaptureFixture) -> None:
        """Events below the configured level are dropped."""
        setup_logging(Settings(_env_file=None, log_level="WARNING"))  # type: ignore[call-arg]

        with caplog.at_level(logging.DEBUG):
            structlog.get_logger("daylist.tests").info("quiet_event")

        assert "quiet_event" not in caplog.text
