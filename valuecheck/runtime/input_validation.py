# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Non-raising entry point: run one check and return a ValidationResult."""

from __future__ import annotations

from typing import Any, Callable

from ..exceptions import ConfigurationError, ValueCheckError
from ..validation.base import ValidationResult, ValidationViolation


def validate(check: Callable[..., Any], value: Any, field: str, *args: Any, **kwargs: Any) -> ValidationResult:
    """Run *check* on *value* and capture a failure instead of raising it.

    ``ConfigurationError`` still propagates: inconsistent constraints are a
    bug in the caller, not a property of the value.

    Example:
        ```python
        result = validate(check_int, "5000", "row_limit", 1, 1000)
        assert result.allowed is False
        assert result.violation.rule == "max"
        ```
    """

    try:
        canonical = check(value, field, *args, **kwargs)
    except ConfigurationError:
        raise
    except ValueCheckError as exc:
        return ValidationResult(allowed=False, violation=ValidationViolation.from_error(exc))

    return ValidationResult(allowed=True, value=canonical)


def format_validation_reason(result: ValidationResult) -> str:
    """Produce a human-readable line for a validation result."""

    if result.allowed:
        return "Validation passed"
    violation = result.violation
    return f"Validation failed for '{violation.field}' ({violation.rule}): {violation.message}"


__all__ = [
    "format_validation_reason",
    "validate",
]
