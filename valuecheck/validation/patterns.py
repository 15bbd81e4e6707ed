# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Pattern and email checks."""

from __future__ import annotations

import re
from typing import Any

from ..exceptions import (
    ConfigurationError,
    EmailFormatError,
    PatternMismatchError,
    TypeMismatchError,
    ValueCheckError,
)
from ..runtime.guard import instrumented
from .base import ValueKind, canonical_text, classify, render_value

# RFC 2822 atext; "\w" is ASCII only because of re.ASCII below.
_ATEXT = r"[\w!#$%&'*+/=?`{|}~^-]"
_DOT_ATOM = rf"{_ATEXT}+(?:\.{_ATEXT}+)*"
_QUOTED = r'"(?:[^"\\\r\n]|\\.)+"'
_DOMAIN = r"(?:[A-Z0-9-]+\.)+[A-Z]{2,}"
_IPV4 = r"[0-9]{1,3}(?:\.[0-9]{1,3}){3}"

# No bracketed IPv6 literal hosts.
EMAIL_PATTERN = re.compile(
    rf"\A(?:{_DOT_ATOM}|{_QUOTED})@(?:{_DOMAIN}|{_IPV4})\Z",
    re.IGNORECASE | re.ASCII,
)

_TEXTUAL_KINDS = (ValueKind.TEXT, ValueKind.INTEGER, ValueKind.FLOAT)


@instrumented("regexp")
def check_regexp(value: Any, field: str, pattern: "re.Pattern[str]") -> str:
    """Check that *value* matches the compiled *pattern* (search semantics).

    Numbers are matched against their canonical text. Returns the text.
    """

    if not isinstance(pattern, re.Pattern) or not isinstance(pattern.pattern, str):
        raise ConfigurationError(
            f"pattern for {field} has to be a compiled str pattern; {pattern!r} given",
            field=field,
            rule="matches",
            expected="re.Pattern",
        )

    kind = classify(value)
    if kind not in _TEXTUAL_KINDS:
        raise TypeMismatchError(
            f'{field} is not scalar; type is "{kind.value}"',
            field=field,
            value=value,
            rule="type",
            expected="str",
        )

    text = canonical_text(value)
    if pattern.search(text) is None:
        raise PatternMismatchError(
            f"{field} has to match the pattern '{pattern.pattern}'; '{render_value(value)}' given",
            field=field,
            value=value,
            rule="matches",
            expected=pattern.pattern,
        )
    return text


@instrumented("email")
def check_email(value: Any, field: str) -> str:
    """Check that *value* is an email address as described by RFC 2822.

    So ``$#@domain.tld`` or ``!@123.423.23.21`` pass, although some mail
    servers would refuse them. IPv6 hosts are not supported. Every failure is
    reported as :class:`EmailFormatError`; the underlying error is kept as
    ``__cause__``.
    """

    try:
        return check_regexp(value, field, EMAIL_PATTERN)
    except ValueCheckError as exc:
        raise EmailFormatError(
            f"{field} has to be a valid email address; '{render_value(value)}' given",
            field=field,
            value=value,
            rule="email",
            expected="email address",
        ) from exc


__all__ = [
    "EMAIL_PATTERN",
    "check_email",
    "check_regexp",
]
