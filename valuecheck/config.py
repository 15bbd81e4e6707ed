# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment driven settings for the value checkers."""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MAX_VALUE_CHARS = 200
MIN_MAX_VALUE_CHARS = 16

_FALSE_VALUES = ("", "0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Read-only settings snapshot.

    ``max_value_chars`` caps how much of a rejected value is rendered into an
    error message; ``telemetry_enabled`` toggles metric emission.
    """

    max_value_chars: int = DEFAULT_MAX_VALUE_CHARS
    telemetry_enabled: bool = True


def _read_max_value_chars() -> int:
    raw = os.getenv("VALUECHECK_MAX_VALUE_CHARS")
    if raw is None:
        return DEFAULT_MAX_VALUE_CHARS
    try:
        parsed = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring invalid VALUECHECK_MAX_VALUE_CHARS=%r; using %d",
            raw,
            DEFAULT_MAX_VALUE_CHARS,
        )
        return DEFAULT_MAX_VALUE_CHARS
    if parsed < MIN_MAX_VALUE_CHARS:
        logger.warning(
            "VALUECHECK_MAX_VALUE_CHARS=%d is below the minimum; clamped to %d",
            parsed,
            MIN_MAX_VALUE_CHARS,
        )
        return MIN_MAX_VALUE_CHARS
    return parsed


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment once."""

    telemetry = os.getenv("VALUECHECK_TELEMETRY", "1").strip().lower() not in _FALSE_VALUES
    return Settings(
        max_value_chars=_read_max_value_chars(),
        telemetry_enabled=telemetry,
    )


def reload_settings() -> Settings:
    """Drop the cached settings and re-read the environment."""

    get_settings.cache_clear()
    return get_settings()


__all__ = [
    "DEFAULT_MAX_VALUE_CHARS",
    "Settings",
    "get_settings",
    "reload_settings",
]
