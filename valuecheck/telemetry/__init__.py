"""Telemetry package - metric instruments for value checks."""

from .metrics import check_failure_total, check_total, record_check
from .runtime import meter

__all__ = [
    "meter",
    "check_total",
    "check_failure_total",
    "record_check",
]
