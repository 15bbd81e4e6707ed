# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Numeric domain checks: integers, floats, ids and unix timestamps.

Both :func:`check_int` and :func:`check_float` accept numbers as well as
numeric text, validate optional inclusive bounds and return the value cast to
``int`` / ``float``. Inconsistent bounds raise :class:`ConfigurationError`
before the value is looked at.
"""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Optional, Union

from ..exceptions import ConfigurationError, DomainViolationError, TypeMismatchError
from ..runtime.guard import instrumented
from .base import (
    ValueKind,
    canonical_text,
    classify,
    is_nan,
    is_real_number,
    parse_integral,
    parse_number,
    real_to_int,
    render_value,
)

Bound = Optional[Union[Real, Decimal]]


def _validate_bounds(field: str, minimum: Any, maximum: Any) -> None:
    for name, bound in (("min", minimum), ("max", maximum)):
        if bound is None:
            continue
        if not is_real_number(bound) or is_nan(bound):
            raise ConfigurationError(
                f"{name} for {field} has to be a real number; {bound!r} given",
                field=field,
                rule=name,
                expected="real number",
            )

    if minimum is not None and maximum is not None and minimum > maximum:
        raise ConfigurationError(
            f"max mustn't be lower than min for {field}: "
            f"({canonical_text(minimum)}, {canonical_text(maximum)})",
            field=field,
            rule="bounds",
            expected=(minimum, maximum),
        )


def describe_domain(minimum: Bound, maximum: Bound, *, integral: bool) -> str:
    """Readable name of the numeric domain spanned by the bounds."""

    noun = "integers" if integral else "real numbers"
    if minimum is None and maximum is None:
        return f"all {noun}"
    if maximum is None:
        if minimum == 0:
            return f"non-negative {noun}"
        if integral and minimum == 1:
            return "positive integers"
        return f"{noun} >= {canonical_text(minimum)}"
    if minimum is None:
        if maximum == 0:
            return f"non-positive {noun}"
        if integral and maximum == -1:
            return "negative integers"
        return f"{noun} <= {canonical_text(maximum)}"
    return f"{noun} in [{canonical_text(minimum)}, {canonical_text(maximum)}]"


def _reject_type(value: Any, field: str, domain: str) -> TypeMismatchError:
    kind = classify(value)
    detail = kind.value if kind is not ValueKind.OPAQUE else type(value).__qualname__
    return TypeMismatchError(
        f'{field}=="{render_value(value)}" is not numeric ({detail}); expected {domain}',
        field=field,
        value=value,
        rule="type",
        expected=domain,
    )


def _reject_domain(value: Any, field: str, domain: str, reason: str, rule: str) -> DomainViolationError:
    return DomainViolationError(
        f'{field}=="{render_value(value)}" {reason}; expected {domain}',
        field=field,
        value=value,
        rule=rule,
        expected=domain,
    )


def _check_range(number, value: Any, field: str, minimum: Bound, maximum: Bound, domain: str) -> None:
    if minimum is not None and number < minimum:
        raise DomainViolationError(
            f'{field}=="{render_value(value)}" is lower than {canonical_text(minimum)}; expected {domain}',
            field=field,
            value=value,
            rule="min",
            expected=minimum,
        )
    if maximum is not None and number > maximum:
        raise DomainViolationError(
            f'{field}=="{render_value(value)}" is greater than {canonical_text(maximum)}; expected {domain}',
            field=field,
            value=value,
            rule="max",
            expected=maximum,
        )


def _as_int(value: Any, field: str, domain: str) -> int:
    kind = classify(value)
    if kind is ValueKind.INTEGER:
        return int(value)

    if kind is ValueKind.FLOAT:
        as_int = real_to_int(value)
        if as_int is None:
            raise _reject_domain(value, field, domain, "is not an integer", "integer")
        return as_int

    if kind is ValueKind.TEXT:
        parsed = parse_integral(value)
        if parsed is not None:
            return parsed
        number = parse_number(value)
        if number is None:
            raise _reject_type(value, field, domain)
        reason = "is not finite" if math.isinf(number) else "is not an integer"
        raise _reject_domain(value, field, domain, reason, "integer")

    raise _reject_type(value, field, domain)


def _as_float(value: Any, field: str, domain: str) -> float:
    kind = classify(value)
    if kind.is_numeric:
        number = value
    elif kind is ValueKind.TEXT:
        number = parse_number(value)
        if number is None:
            raise _reject_type(value, field, domain)
    else:
        raise _reject_type(value, field, domain)

    try:
        as_float = float(number)
    except OverflowError:
        as_float = math.inf
    except ValueError:
        # signalling NaN Decimals refuse conversion
        as_float = math.nan
    if not math.isfinite(as_float):
        raise _reject_domain(value, field, domain, "is not finite", "finite")
    return as_float


@instrumented("int")
def check_int(value: Any, field: str, minimum: Bound = None, maximum: Bound = None) -> int:
    """Check that *value* is losslessly castable to ``int`` and within bounds.

    Accepts ints, floats with zero fraction (``10028123.0``) and text holding
    either (``"07"``, ``"-238.0"``, ``"0xad"``). ``"2.3"``, exponent text such
    as ``"1e3"``, ``0o``/``0b`` numerals, blank text, bools and containers are
    rejected.

    Args:
        value: Raw value to check
        field: Name of the checked field, used in messages
        minimum: Inclusive lower bound, if any
        maximum: Inclusive upper bound, if any

    Returns:
        The value cast to ``int``

    Raises:
        ConfigurationError: bounds are not numbers or ``minimum > maximum``
        TypeMismatchError: value is not numeric at all
        DomainViolationError: value is not integral or out of bounds
    """

    _validate_bounds(field, minimum, maximum)
    domain = describe_domain(minimum, maximum, integral=True)
    number = _as_int(value, field, domain)
    _check_range(number, value, field, minimum, maximum, domain)
    return number


@instrumented("float")
def check_float(value: Any, field: str, minimum: Bound = None, maximum: Bound = None) -> float:
    """Check that *value* is a finite real number within bounds.

    Numeric text in decimal, scientific or ``0x``/``0o``/``0b`` form is
    accepted; blank text is not. Returns the value cast to ``float``.
    """

    _validate_bounds(field, minimum, maximum)
    domain = describe_domain(minimum, maximum, integral=False)
    number = _as_float(value, field, domain)
    _check_range(number, value, field, minimum, maximum, domain)
    return number


@instrumented("id")
def check_id(value: Any, field: str, zero_allowed: bool = False) -> int:
    """Integer check for identifiers: ``> 0``, or ``>= 0`` if *zero_allowed*."""

    return check_int(value, field, 0 if zero_allowed else 1)


@instrumented("timestamp")
def check_timestamp(value: Any, field: str) -> int:
    """Integer check for unix timestamps (``>= 0``)."""

    return check_int(value, field, 0)


__all__ = [
    "check_float",
    "check_id",
    "check_int",
    "check_timestamp",
    "describe_domain",
]
