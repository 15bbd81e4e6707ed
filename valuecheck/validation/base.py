# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared building blocks for the value checkers.

* :class:`ValueKind` / :func:`classify` – closed set of raw input shapes every
  checker dispatches on instead of relying on implicit coercion.
* :func:`parse_number` / :func:`parse_integral` – the numeral grammar shared by
  the numeric checks and loose equality.
* :func:`canonical_text` / :func:`render_value` – textual forms used for
  casting and for error messages.
* :class:`ValidationViolation` / :class:`ValidationResult` – structured
  failure record and the non-raising outcome type.
"""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from ..config import get_settings
from ..exceptions import ValueCheckError


class ValueKind(Enum):
    """Shape of a raw input value."""

    NULL = "none"
    BOOL = "bool"
    INTEGER = "int"
    FLOAT = "float"
    TEXT = "str"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OPAQUE = "object"

    @property
    def is_numeric(self) -> bool:
        return self in (ValueKind.INTEGER, ValueKind.FLOAT)


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of *value*."""

    if value is None:
        return ValueKind.NULL
    # bool before Integral: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Sequence, Set)) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.OPAQUE


def is_real_number(value: Any) -> bool:
    """True for ints, floats and Decimals, never for bool."""

    return classify(value).is_numeric


def is_nan(value: Any) -> bool:
    """True if the real number *value* is NaN, signalling Decimal NaN included."""

    if isinstance(value, Decimal):
        # comparing a signalling NaN raises InvalidOperation
        return value.is_nan()
    return value != value


# ---------------------------------------------------------------------------
# Numeral grammar
# ---------------------------------------------------------------------------

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_HEX_RE = re.compile(r"0[xX][0-9a-fA-F]+")
_INTEGRAL_RE = re.compile(r"(?P<sign>[+-]?)(?:(?P<digits>[0-9]+)(?:\.0*)?|\.0+)")

# Integer numerals with more digits than this overflow.
MAX_INTEGRAL_DIGITS = 4300

Number = Union[int, float]


def parse_number(text: str) -> Optional[Number]:
    """Parse *text* as a numeral, returning ``None`` if it is not one.

    Surrounding whitespace is ignored; blank text is not a number. Accepts
    signed decimal and scientific forms plus unsigned ``0x``/``0o``/``0b``
    prefixed numerals. Leading zeros are decimal (``"07"`` is 7). Decimal text
    without fraction or exponent parses to ``int``; other decimal text parses
    to ``float`` and may overflow to infinity.
    """

    stripped = text.strip()
    if not stripped:
        return None
    if _PREFIXED_RE.fullmatch(stripped):
        return int(stripped, 0)
    if not _DECIMAL_RE.fullmatch(stripped):
        return None
    if any(ch in stripped for ch in ".eE") or len(stripped) > MAX_INTEGRAL_DIGITS:
        return float(stripped)
    return int(stripped)


def parse_integral(text: str) -> Optional[int]:
    """Parse *text* as an integer numeral, returning ``None`` if it is not one.

    Integer numerals are signed digits with an optional all-zero fraction
    (``"-238.0"``, ``"5."``) or unsigned ``0x`` hex. Exponent forms and
    ``0o``/``0b`` numerals are not integer numerals even though
    :func:`parse_number` reads them; callers use that function to tell
    non-integral numerals from non-numerals. Numerals with more than
    :data:`MAX_INTEGRAL_DIGITS` significant digits are not parsed.
    """

    stripped = text.strip()
    if _HEX_RE.fullmatch(stripped):
        return int(stripped, 16)
    match = _INTEGRAL_RE.fullmatch(stripped)
    if match is None:
        return None
    digits = (match.group("digits") or "").lstrip("0") or "0"
    if len(digits) > MAX_INTEGRAL_DIGITS:
        return None
    return int(match.group("sign") + digits)


def real_to_int(value: Any) -> Optional[int]:
    """Return ``int(value)`` if the real number *value* is finite and integral."""

    try:
        as_int = int(value)
    except (ValueError, OverflowError):
        return None
    if as_int != value:
        return None
    return as_int


# ---------------------------------------------------------------------------
# Textual forms
# ---------------------------------------------------------------------------


def canonical_text(value: Any) -> str:
    """Canonical textual form of a scalar.

    Integral finite floats drop their fraction (``5.0`` -> ``"5"``) so that
    every representation of the same number renders identically.
    """

    kind = classify(value)
    if kind is ValueKind.TEXT:
        return value
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.NULL:
        return "none"
    if kind is ValueKind.INTEGER:
        return str(int(value))
    if kind is ValueKind.FLOAT:
        if isinstance(value, float):
            if not math.isfinite(value):
                return repr(value)
            if value.is_integer():
                return str(int(value))
            return repr(value)
        as_int = real_to_int(value)
        return str(as_int) if as_int is not None else str(value)
    return repr(value)


def render_value(value: Any) -> str:
    """Render *value* for an error message, truncated to the configured size."""

    text = canonical_text(value)
    limit = get_settings().max_value_chars
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


def kind_name(value: Any) -> str:
    """Human readable name of the actual type of *value* (``"none"`` for None)."""

    if value is None:
        return "none"
    return type(value).__qualname__


# ---------------------------------------------------------------------------
# Outcome records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationViolation:
    """Structured description of a single failed check."""

    field: Optional[str]
    rule: Optional[str]
    kind: str
    expected: Any
    actual: Optional[str]
    message: str

    @classmethod
    def from_error(cls, error: ValueCheckError) -> "ValidationViolation":
        return cls(
            field=error.field,
            rule=error.rule,
            kind=error.kind,
            expected=error.expected,
            actual=render_value(error.value) if error.has_value else None,
            message=error.message,
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a check run through :func:`valuecheck.runtime.validate`."""

    allowed: bool
    value: Any = None
    violation: Optional[ValidationViolation] = None

    @property
    def message(self) -> Optional[str]:
        return self.violation.message if self.violation else None


__all__ = [
    "MAX_INTEGRAL_DIGITS",
    "ValueKind",
    "ValidationResult",
    "ValidationViolation",
    "canonical_text",
    "classify",
    "is_nan",
    "is_real_number",
    "kind_name",
    "parse_integral",
    "parse_number",
    "real_to_int",
    "render_value",
]
