"""Pytest configuration for the actions_core test suite.

Provides a captured view of the shared ``actions`` logger and makes sure
pooled HTTP clients never leak between tests.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List

import pytest


class LogCapture(logging.Handler):
    """Collects records reaching the shared ``actions`` logger."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self, name: str | None = None) -> List[Dict[str, Any]]:
        """Return ``log_event`` payloads, each with the record level under ``_level``."""
        out = []
        for record in self.records:
            try:
                payload = json.loads(record.getMessage())
            except ValueError:
                continue
            if not isinstance(payload, dict) or "event" not in payload:
                continue
            if name is not None and payload["event"] != name:
                continue
            payload["_level"] = record.levelname
            out.append(payload)
        return out


@pytest.fixture()
def captured_logs() -> Iterator[LogCapture]:
    """Attach a DEBUG-level capture handler to the ``actions`` logger for one test."""

    from actions_core.base.logging import get_logger

    base = get_logger()
    capture = LogCapture()
    previous = base.level
    base.addHandler(capture)
    base.setLevel(logging.DEBUG)
    yield capture
    base.removeHandler(capture)
    base.setLevel(previous)


@pytest.fixture()
def taxonomy_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provision the Yahoo taxonomy OAuth client for the duration of a test."""

    monkeypatch.setenv("ACTIONS_YAHOO_AUDIENCES_TAXONOMY_CLIENT_SECRET", "yoda")
    monkeypatch.setenv("ACTIONS_YAHOO_AUDIENCES_TAXONOMY_CLIENT_ID", "luke")


@pytest.fixture(autouse=True)
def close_http_clients() -> Iterator[None]:
    """Close pooled HTTP clients after every test."""

    from actions_core.base.http import close_all_clients

    yield
    close_all_clients()
