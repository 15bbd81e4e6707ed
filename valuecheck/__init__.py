# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""valuecheck - live, catchable assertions for primary type and range checks.

One call per field: pass the raw value, the field name and the constraints,
get back the value cast to its canonical type or a ``ValueCheckError``::

    from valuecheck import check_int, check_string

    limit = check_int(params.get("limit"), "limit", 1, 1000)
    name = check_string(params.get("name"), "name", max_length=64)
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfigurationError,
    DomainViolationError,
    EmailFormatError,
    FormatError,
    PatternMismatchError,
    TypeMismatchError,
    ValueCheckError,
)
from .runtime import format_validation_reason, validate
from .validation import (
    EMAIL_PATTERN,
    ValidationResult,
    ValidationViolation,
    ValueKind,
    check_bool,
    check_email,
    check_float,
    check_id,
    check_instance,
    check_int,
    check_regexp,
    check_string,
    check_timestamp,
    check_values,
    classify,
    loose_equals,
)

__all__ = [
    "__version__",
    # checks
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
    "loose_equals",
    "EMAIL_PATTERN",
    # result model
    "ValidationResult",
    "ValidationViolation",
    "ValueKind",
    "classify",
    "validate",
    "format_validation_reason",
    # errors
    "ValueCheckError",
    "TypeMismatchError",
    "DomainViolationError",
    "ConfigurationError",
    "PatternMismatchError",
    "FormatError",
    "EmailFormatError",
]
