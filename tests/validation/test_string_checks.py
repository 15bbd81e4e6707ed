# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for check_string."""

from __future__ import annotations

import pytest

from valuecheck import (
    ConfigurationError,
    DomainViolationError,
    TypeMismatchError,
    check_string,
)


def test_empty_string_accepted_when_allowed():
    assert check_string("", "x", True) == ""


def test_empty_string_rejected_by_default():
    with pytest.raises(DomainViolationError) as exc_info:
        check_string("", "x")
    assert exc_info.value.rule == "empty"
    assert "must not be empty" in exc_info.value.message


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        (1.4, "1.4"),
        (1.0, "1"),
        ("hallo", "hallo"),
        ("\n", "\n"),
        ("\t", "\t"),
        (" ", " "),
    ],
)
def test_scalars_are_cast_to_text(value, expected):
    assert check_string(value, "x") == expected
    assert check_string(value, "x", True) == expected
    assert check_string(value, "x", True, 0, 10) == expected
    assert check_string(value, "x", True, 0, 10, "!") == expected
    assert check_string(value, "x", True, 0, 10, None, "1.4hallo\n\t ") == expected


@pytest.mark.parametrize("value", [[], {}, None, True, b"bytes", object()])
def test_non_scalar_values_rejected(value):
    with pytest.raises(TypeMismatchError):
        check_string(value, "x")
    with pytest.raises(TypeMismatchError):
        check_string(value, "x", True, 0, 10, "!")
    with pytest.raises(TypeMismatchError):
        check_string(value, "x", True, 0, 10, None, ".")


@pytest.mark.parametrize(
    "minimum,maximum",
    [(None, None), (1, 4), (0, 5), (4, 4), (None, 4), (4, None), (0, None)],
)
def test_length_range_passes(minimum, maximum):
    assert check_string("lala", "x", False, minimum, maximum) == "lala"


@pytest.mark.parametrize(
    "minimum,maximum,rule",
    [(None, 3, "maxLength"), (5, None, "minLength"), (5, 6, "minLength"), (2, 3, "maxLength")],
)
def test_length_out_of_range_fails(minimum, maximum, rule):
    with pytest.raises(DomainViolationError) as exc_info:
        check_string("lala", "x", False, minimum, maximum)
    assert exc_info.value.rule == rule


@pytest.mark.parametrize("value", ["lala", "", [], None])
def test_max_lower_than_min_is_configuration_error(value):
    with pytest.raises(ConfigurationError, match=r"\(5, 0\)"):
        check_string(value, "x", False, 5, 0)


@pytest.mark.parametrize("bound", ["3", 2.5, True])
def test_non_integer_length_is_configuration_error(bound):
    with pytest.raises(ConfigurationError):
        check_string("lala", "x", False, bound)


def test_length_counts_converted_text():
    assert check_string(12345, "x", False, 5, 5) == "12345"
    with pytest.raises(DomainViolationError):
        check_string(1.25, "x", False, None, 3)


# ------------------------------------------------------------------
# Blacklist / whitelist
# ------------------------------------------------------------------


def test_blacklist_without_offending_characters_passes():
    assert check_string("lala", "x", False, None, None, "qwertzuiopsdfghjkyxcvbnm,.1234567890ß*+~öäü") == "lala"


@pytest.mark.parametrize("blacklist", ["l", "la", "a", ["!", "a"]])
def test_blacklist_violation_fails(blacklist):
    with pytest.raises(DomainViolationError) as exc_info:
        check_string("lala", "x", False, None, None, blacklist)
    assert exc_info.value.rule == "blacklist"


def test_blacklist_message_names_character():
    with pytest.raises(DomainViolationError, match="must not contain '/'"):
        check_string("../etc/passwd", "path", blacklist="/")


@pytest.mark.parametrize("whitelist", ["la", "uzu38l9wu2786234uiha34j", {"l", "a"}])
def test_whitelist_covering_all_characters_passes(whitelist):
    assert check_string("lala", "x", False, None, None, None, whitelist) == "lala"


@pytest.mark.parametrize("whitelist", ["l", "uzusdl", "io"])
def test_whitelist_violation_fails(whitelist):
    with pytest.raises(DomainViolationError) as exc_info:
        check_string("lala", "x", False, None, None, None, whitelist)
    assert exc_info.value.rule == "whitelist"


def test_empty_character_sets_are_ignored():
    assert check_string("lala", "x", blacklist="", whitelist="") == "lala"
    assert check_string("lala", "x", blacklist=[], whitelist=()) == "lala"


def test_blacklist_and_whitelist_are_independent():
    assert check_string("abc", "x", blacklist="xyz", whitelist="abcd") == "abc"
    with pytest.raises(DomainViolationError, match="must not contain 'c'"):
        check_string("abc", "x", blacklist="c", whitelist="abcd")
    with pytest.raises(DomainViolationError, match="any character but one of"):
        check_string("abc", "x", blacklist="xyz", whitelist="ab")


@pytest.mark.parametrize("chars", [5, ["ab"], [1, 2]])
def test_malformed_character_set_is_configuration_error(chars):
    with pytest.raises(ConfigurationError):
        check_string("lala", "x", blacklist=chars)
    with pytest.raises(ConfigurationError):
        check_string("lala", "x", whitelist=chars)


def test_rules_apply_in_documented_order():
    # empty beats whitelist
    with pytest.raises(DomainViolationError) as exc_info:
        check_string("", "x", whitelist="a", min_length=1)
    assert exc_info.value.rule == "empty"

    # blacklist beats length
    with pytest.raises(DomainViolationError) as exc_info:
        check_string("lala", "x", blacklist="l", max_length=2)
    assert exc_info.value.rule == "blacklist"
