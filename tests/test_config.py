# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for environment driven settings."""

from __future__ import annotations

import pytest

from valuecheck.config import DEFAULT_MAX_VALUE_CHARS, Settings, get_settings, reload_settings


def test_defaults():
    settings = get_settings()
    assert settings == Settings()
    assert settings.max_value_chars == DEFAULT_MAX_VALUE_CHARS
    assert settings.telemetry_enabled is True


def test_settings_are_cached_until_reload(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("VALUECHECK_MAX_VALUE_CHARS", "64")

    assert get_settings() is first
    assert reload_settings().max_value_chars == 64


@pytest.mark.parametrize(
    "raw,expected",
    [("500", 500), ("5", 16), ("not-a-number", DEFAULT_MAX_VALUE_CHARS)],
)
def test_max_value_chars_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("VALUECHECK_MAX_VALUE_CHARS", raw)
    assert reload_settings().max_value_chars == expected


@pytest.mark.parametrize(
    "raw,enabled",
    [("1", True), ("true", True), ("0", False), ("false", False), ("No", False), ("", False), (" off ", False)],
)
def test_telemetry_flag(monkeypatch, raw, enabled):
    monkeypatch.setenv("VALUECHECK_TELEMETRY", raw)
    assert reload_settings().telemetry_enabled is enabled


def test_settings_are_immutable():
    with pytest.raises(AttributeError):
        get_settings().max_value_chars = 10  # type: ignore[misc]
