"""Pytest fixtures for the valuecheck test-suite.

Every test starts from default settings (environment variables removed and
the settings cache dropped) so that tests touching ``VALUECHECK_*`` variables
cannot leak into each other.
"""
from __future__ import annotations

import types
from typing import Any, Optional

import pytest

from valuecheck import config
from valuecheck.telemetry import metrics


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):  # noqa: D401
    """Reset VALUECHECK_* environment and the cached settings around each test."""
    monkeypatch.delenv("VALUECHECK_MAX_VALUE_CHARS", raising=False)
    monkeypatch.delenv("VALUECHECK_TELEMETRY", raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


class _RecordingCounter:  # pylint: disable=too-few-public-methods
    """Stand-in for an OpenTelemetry counter that remembers every ``add``."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, dict[str, Any]]] = []

    def add(self, amount: int, attributes: Optional[dict[str, Any]] = None) -> None:
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture()
def recorded_metrics(monkeypatch):
    """Replace the check counters with recording doubles."""
    total = _RecordingCounter()
    failures = _RecordingCounter()
    monkeypatch.setattr(metrics, "check_total", total)
    monkeypatch.setattr(metrics, "check_failure_total", failures)
    return types.SimpleNamespace(total=total, failures=failures)
