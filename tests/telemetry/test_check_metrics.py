# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for the check counters emitted by the runtime guard."""

from __future__ import annotations

import pytest

from valuecheck import ValueCheckError, check_email, check_id, check_int, check_string
from valuecheck.config import reload_settings
from valuecheck.telemetry import meter, record_check


def test_success_is_counted(recorded_metrics):
    check_int(5, "x")

    assert recorded_metrics.total.calls == [(1, {"check": "int", "status": "ok"})]
    assert recorded_metrics.failures.calls == []


def test_failure_is_counted_with_kind(recorded_metrics):
    with pytest.raises(ValueCheckError):
        check_string("", "name")

    assert recorded_metrics.total.calls == [(1, {"check": "string", "status": "failed"})]
    assert recorded_metrics.failures.calls == [(1, {"check": "string", "kind": "domain_violation"})]


def test_configuration_error_is_counted(recorded_metrics):
    with pytest.raises(ValueCheckError):
        check_int(1, "x", 3, 2)

    assert recorded_metrics.failures.calls == [(1, {"check": "int", "kind": "configuration"})]


def test_nested_checks_record_only_outermost(recorded_metrics):
    with pytest.raises(ValueCheckError):
        check_id(0, "user_id")
    check_id(3, "user_id")

    assert recorded_metrics.total.calls == [
        (1, {"check": "id", "status": "failed"}),
        (1, {"check": "id", "status": "ok"}),
    ]
    assert recorded_metrics.failures.calls == [(1, {"check": "id", "kind": "domain_violation"})]


def test_email_failure_is_counted_as_format(recorded_metrics):
    with pytest.raises(ValueCheckError):
        check_email("not-an-email", "addr")

    assert recorded_metrics.failures.calls == [(1, {"check": "email", "kind": "format"})]


def test_telemetry_can_be_disabled(recorded_metrics, monkeypatch):
    monkeypatch.setenv("VALUECHECK_TELEMETRY", "0")
    reload_settings()

    check_int(5, "x")
    record_check("int", "type_mismatch")

    assert recorded_metrics.total.calls == []
    assert recorded_metrics.failures.calls == []


def test_record_check_direct(recorded_metrics):
    record_check("bool", "type_mismatch")

    assert recorded_metrics.total.calls == [(1, {"check": "bool", "status": "failed"})]
    assert recorded_metrics.failures.calls == [(1, {"check": "bool", "kind": "type_mismatch"})]


def test_instruments_work_without_meter_provider():
    counter = meter.create_counter(name="valuecheck.test.total", unit="1")
    counter.add(1, {"check": "int"})
