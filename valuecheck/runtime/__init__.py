"""Runtime helpers wrapped around the value checkers."""

from .guard import current_check, instrumented
from .input_validation import format_validation_reason, validate

__all__ = [
    "current_check",
    "format_validation_reason",
    "instrumented",
    "validate",
]
