# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""String constraint check."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

from ..exceptions import ConfigurationError, DomainViolationError, TypeMismatchError
from ..runtime.guard import instrumented
from .base import ValueKind, canonical_text, classify, render_value

CharSet = Union[str, Iterable[str], None]

_SCALAR_KINDS = (ValueKind.TEXT, ValueKind.INTEGER, ValueKind.FLOAT)


def _normalize_charset(chars: CharSet, field: str, name: str) -> str:
    if chars is None:
        return ""
    if isinstance(chars, str):
        return chars
    try:
        members = list(chars)
    except TypeError:
        members = None
    if members is None or not all(isinstance(ch, str) and len(ch) == 1 for ch in members):
        raise ConfigurationError(
            f"{name} for {field} has to be a string or an iterable of characters; {chars!r} given",
            field=field,
            rule=name,
            expected="characters",
        )
    return "".join(members)


def _validate_lengths(field: str, min_length: Optional[int], max_length: Optional[int]) -> None:
    for name, bound in (("minLength", min_length), ("maxLength", max_length)):
        if bound is not None and classify(bound) is not ValueKind.INTEGER:
            raise ConfigurationError(
                f"{name} for {field} has to be an integer; {bound!r} given",
                field=field,
                rule=name,
                expected="integer",
            )
    if min_length is not None and max_length is not None and min_length > max_length:
        raise ConfigurationError(
            f"max mustn't be lower than min for {field}: ({min_length}, {max_length})",
            field=field,
            rule="bounds",
            expected=(min_length, max_length),
        )


@instrumented("string")
def check_string(
    value: Any,
    field: str,
    empty_allowed: bool = False,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    blacklist: CharSet = None,
    whitelist: CharSet = None,
) -> str:
    """Check that *value* is a scalar castable to ``str`` matching the constraints.

    Text and numbers are accepted (``1.4`` -> ``"1.4"``, ``1.0`` -> ``"1"``);
    None, bools and containers are not. Rules are applied to the converted
    text in this order: emptiness, blacklist, whitelist, min length, max
    length. Lengths are inclusive.

    Args:
        value: Raw value to check
        field: Name of the checked field, used in messages
        empty_allowed: Whether ``""`` passes
        min_length: Minimum number of characters
        max_length: Maximum number of characters
        blacklist: Characters that must not occur
        whitelist: Characters that are the only ones allowed

    Returns:
        The value cast to ``str``
    """

    _validate_lengths(field, min_length, max_length)
    banned = _normalize_charset(blacklist, field, "blacklist")
    allowed = _normalize_charset(whitelist, field, "whitelist")

    kind = classify(value)
    if kind not in _SCALAR_KINDS:
        raise TypeMismatchError(
            f'{field} is not scalar; type is "{kind.value}"',
            field=field,
            value=value,
            rule="type",
            expected="str",
        )

    text = canonical_text(value)
    rendered = render_value(value)

    if not empty_allowed and not text:
        raise DomainViolationError(
            f'{field} must not be empty; "{rendered}" given',
            field=field,
            value=value,
            rule="empty",
            expected="non-empty",
        )

    for ch in banned:
        if ch in text:
            raise DomainViolationError(
                f'{field} must not contain {ch!r}; "{rendered}" given - blacklist: {banned!r}',
                field=field,
                value=value,
                rule="blacklist",
                expected=banned,
            )

    if allowed:
        for ch in text:
            if ch not in allowed:
                raise DomainViolationError(
                    f'{field} must not contain any character but one of {allowed!r}; "{rendered}" given',
                    field=field,
                    value=value,
                    rule="whitelist",
                    expected=allowed,
                )

    if min_length is not None and len(text) < min_length:
        raise DomainViolationError(
            f'{field} must be at least {min_length} characters long; "{rendered}" given',
            field=field,
            value=value,
            rule="minLength",
            expected=min_length,
        )
    if max_length is not None and len(text) > max_length:
        raise DomainViolationError(
            f'{field} must be at most {max_length} characters long; "{rendered}" given',
            field=field,
            value=value,
            rule="maxLength",
            expected=max_length,
        )

    return text


__all__ = ["check_string"]
