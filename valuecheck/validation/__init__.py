"""Validation package - the value checkers.

Each checker validates one value against one set of constraints and either
returns the value cast to its canonical type or raises a
:class:`~valuecheck.exceptions.ValueCheckError`.
"""

from .base import ValidationResult, ValidationViolation, ValueKind, classify
from .numeric import check_float, check_id, check_int, check_timestamp
from .patterns import EMAIL_PATTERN, check_email, check_regexp
from .scalars import check_bool, check_instance, check_values, loose_equals
from .strings import check_string

__all__ = [
    "EMAIL_PATTERN",
    "ValidationResult",
    "ValidationViolation",
    "ValueKind",
    "check_bool",
    "check_email",
    "check_float",
    "check_id",
    "check_instance",
    "check_int",
    "check_regexp",
    "check_string",
    "check_timestamp",
    "check_values",
    "classify",
    "loose_equals",
]
