# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Boolean, enumerated-value and instance checks."""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence, Tuple, Type, Union

from ..exceptions import ConfigurationError, DomainViolationError, TypeMismatchError
from ..runtime.guard import instrumented
from .base import (
    ValueKind,
    canonical_text,
    classify,
    is_nan,
    is_real_number,
    kind_name,
    parse_number,
    render_value,
)

Category = Union[ValueKind, Type[Any], Tuple[Type[Any], ...]]


@instrumented("bool")
def check_bool(value: Any, field: str) -> bool:
    """Accept ``True``/``False`` and numbers equal to 0 or 1.

    ``1.0``, ``0.0`` and ``Decimal("1")`` pass; the strings ``"0"``/``"1"``
    and any other number do not.
    """

    kind = classify(value)
    if kind is ValueKind.BOOL:
        return value
    if kind.is_numeric:
        if not is_nan(value):
            if value == 0:
                return False
            if value == 1:
                return True
        raise DomainViolationError(
            f"{field} should be boolean, {render_value(value)} given",
            field=field,
            value=value,
            rule="bool",
            expected=(0, 1),
        )
    raise TypeMismatchError(
        f"{field} should be boolean, {render_value(value)} ({kind.value}) given",
        field=field,
        value=value,
        rule="type",
        expected="bool",
    )


def _is_nan_number(value: Any) -> bool:
    return is_real_number(value) and is_nan(value)


def _loose_key(value: Any) -> Optional[str]:
    kind = classify(value)
    if kind is ValueKind.TEXT:
        parsed = parse_number(value)
        if parsed is None:
            return value
        value, kind = parsed, classify(parsed)
    if not kind.is_numeric:
        return None
    if is_nan(value) or value in (math.inf, -math.inf):
        return None
    return canonical_text(value)


def loose_equals(left: Any, right: Any) -> bool:
    """Cross-type equality where numbers equal their numeric text.

    Plain ``==`` is tried first. If that fails and either side is a number,
    both sides are normalized to canonical text (numeric text is parsed and
    re-rendered) and compared, so ``5 == 5.0 == "5" == "5.0"``. Blank text
    never equals a number.
    """

    if _is_nan_number(left) or _is_nan_number(right):
        return False
    if left == right:
        return True
    if not (is_real_number(left) or is_real_number(right)):
        return False
    left_key = _loose_key(left)
    return left_key is not None and left_key == _loose_key(right)


@instrumented("values")
def check_values(value: Any, field: str, allowed: Sequence[Any]) -> Any:
    """Check that *value* loosely equals one of *allowed*; returns it uncast."""

    if classify(allowed) is not ValueKind.SEQUENCE:
        raise ConfigurationError(
            f"allowed values for {field} have to be a sequence; {allowed!r} given",
            field=field,
            rule="in",
            expected="sequence",
        )

    for candidate in allowed:
        if loose_equals(value, candidate):
            return value

    choices = ", ".join(f'"{render_value(c)}"' for c in allowed)
    raise DomainViolationError(
        f'{field}=="{render_value(value)}" must be one of [{choices}]',
        field=field,
        value=value,
        rule="in",
        expected=list(allowed),
    )


def _category_name(expected: Category) -> str:
    if isinstance(expected, ValueKind):
        return expected.value
    if isinstance(expected, tuple):
        return " or ".join(t.__qualname__ for t in expected)
    return expected.__qualname__


def _is_category(expected: Any) -> bool:
    if isinstance(expected, (ValueKind, type)):
        return True
    return isinstance(expected, tuple) and bool(expected) and all(isinstance(t, type) for t in expected)


@instrumented("instance")
def check_instance(value: Any, field: str, expected: Category) -> Any:
    """Check that *value* belongs to *expected* and return it unchanged.

    *expected* is a class, a tuple of classes (ABCs such as
    ``collections.abc.Mapping`` included) or a :class:`ValueKind` for the
    structural kinds.
    """

    if not _is_category(expected):
        raise ConfigurationError(
            f"expected category for {field} has to be a class, a tuple of classes "
            f"or a ValueKind; {expected!r} given",
            field=field,
            rule="instance",
            expected="category",
        )

    if isinstance(expected, ValueKind):
        matches = classify(value) is expected
        actual = classify(value).value
    else:
        matches = isinstance(value, expected)
        actual = kind_name(value)

    if not matches:
        raise TypeMismatchError(
            f"{field} has to be an instance of {_category_name(expected)}; {actual} given",
            field=field,
            value=value,
            rule="instance",
            expected=_category_name(expected),
        )
    return value


__all__ = [
    "check_bool",
    "check_instance",
    "check_values",
    "loose_equals",
]
