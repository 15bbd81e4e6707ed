# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy raised by the value checkers.

Every checker either returns a canonical value or raises one of the errors
below at the point of violation. All of them derive from
:class:`ValueCheckError`, which itself is a :class:`ValueError`, so callers may
catch at whichever granularity suits the call site::

    from valuecheck import check_int
    from valuecheck.exceptions import ConfigurationError, ValueCheckError

    try:
        limit = check_int(raw_limit, "limit", 1, 1000)
    except ConfigurationError:
        raise                      # bug in the calling code
    except ValueCheckError as exc:
        return {"error": exc.message, "field": exc.field}
"""

from __future__ import annotations

from typing import Any, Optional

# Marker for errors that are not tied to a concrete input value.
_NO_VALUE = object()


class ValueCheckError(ValueError):
    """Base class for all value check failures."""

    kind = "invalid"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Any = _NO_VALUE,
        rule: Optional[str] = None,
        expected: Any = None,
    ):
        self.message = message
        self.field = field
        self.value = None if value is _NO_VALUE else value
        self.has_value = value is not _NO_VALUE
        self.rule = rule
        self.expected = expected
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(field={self.field!r}, rule={self.rule!r}, "
            f"message={self.message!r})"
        )


class TypeMismatchError(ValueCheckError):
    """The value's intrinsic type cannot be handled by the requested check."""

    kind = "type_mismatch"


class DomainViolationError(ValueCheckError):
    """The value has the right kind but lies outside the declared domain."""

    kind = "domain_violation"


class ConfigurationError(ValueCheckError):
    """The constraints passed to a check are inconsistent or malformed.

    Raised independently of the value under test, e.g. ``min > max``.
    """

    kind = "configuration"


class PatternMismatchError(ValueCheckError):
    """Textual value does not satisfy the required pattern."""

    kind = "pattern_mismatch"


class FormatError(ValueCheckError):
    """A derived check normalized an inner failure into a single message."""

    kind = "format"


class EmailFormatError(FormatError):
    """Value is not a valid email address."""


__all__ = [
    "ValueCheckError",
    "TypeMismatchError",
    "DomainViolationError",
    "ConfigurationError",
    "PatternMismatchError",
    "FormatError",
    "EmailFormatError",
]
