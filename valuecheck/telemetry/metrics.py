# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for the value checkers."""

from __future__ import annotations

from typing import Optional

from ..config import get_settings
from .runtime import meter

check_total = meter.create_counter(
    name="valuecheck.check.total",
    description="Counts value checks partitioned by check name and outcome.",
    unit="1",
)

check_failure_total = meter.create_counter(
    name="valuecheck.check.failure.total",
    description="Counts failed value checks partitioned by check name and failure kind.",
    unit="1",
)


def record_check(check: str, failure_kind: Optional[str] = None) -> None:
    """Record the outcome of one top-level check.

    Args:
        check: Public check name ("int", "email", ...)
        failure_kind: ``ValueCheckError.kind`` of the raised error, or None on success
    """
    if not get_settings().telemetry_enabled:
        return

    status = "ok" if failure_kind is None else "failed"
    check_total.add(1, {"check": check, "status": status})
    if failure_kind is not None:
        check_failure_total.add(1, {"check": check, "kind": failure_kind})


__all__ = [
    "check_total",
    "check_failure_total",
    "record_check",
]
