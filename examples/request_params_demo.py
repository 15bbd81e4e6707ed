# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Request Parameters Demo: one check per field, branch on failure.

Shows how an API handler validates raw query parameters (everything arrives
as text) and gets back properly typed values, or a precise reason why a
parameter is unacceptable.

Run with:
    python examples/request_params_demo.py
"""

import re

from valuecheck import (
    ConfigurationError,
    ValueCheckError,
    check_bool,
    check_email,
    check_id,
    check_int,
    check_regexp,
    check_string,
    check_values,
    validate,
)

SLUG = re.compile(r"^[a-z0-9-]+$")


def parse_report_request(params):
    """Turn raw query parameters into typed arguments or raise ValueCheckError."""
    return {
        "user_id": check_id(params.get("user_id"), "user_id"),
        "table": check_values(params.get("table"), "table", ["users", "orders", "products"]),
        "row_limit": check_int(params.get("row_limit", "100"), "row_limit", 1, 1000),
        "title": check_string(params.get("title", ""), "title", True, None, 80, "<>"),
        "slug": check_regexp(params.get("slug"), "slug", SLUG),
        "notify": check_email(params.get("notify"), "notify"),
        "dry_run": check_bool(params.get("dry_run", False), "dry_run"),
    }


def demo_valid_request():
    print("\n" + "=" * 70)
    print("DEMO 1: Valid request")
    print("=" * 70)
    params = {
        "user_id": "42",
        "table": "orders",
        "row_limit": "250.0",
        "title": "Quarterly orders",
        "slug": "q3-orders",
        "notify": "ops@example.com",
        "dry_run": 1,
    }
    print(f"\n  Parsed: {parse_report_request(params)}")


def demo_invalid_request():
    print("\n" + "=" * 70)
    print("DEMO 2: Invalid request")
    print("=" * 70)
    params = {
        "user_id": "42",
        "table": "orders",
        "row_limit": "5000",
        "slug": "q3-orders",
        "notify": "ops@example.com",
    }
    try:
        parse_report_request(params)
    except ValueCheckError as e:
        print(f"\n  Rejected ({e.kind}, rule={e.rule}):")
        print(f"    {e.message}")


def demo_result_form():
    print("\n" + "=" * 70)
    print("DEMO 3: Non-raising result form")
    print("=" * 70)
    for raw in ("07", "2.3", "hallo"):
        result = validate(check_int, raw, "count")
        status = result.value if result.allowed else result.message
        print(f"  {raw!r:>8} -> {status}")


def demo_configuration_error():
    print("\n" + "=" * 70)
    print("DEMO 4: Inconsistent constraints")
    print("=" * 70)
    try:
        check_int(5, "row_limit", 1000, 1)
    except ConfigurationError as e:
        print(f"\n  {e}")


if __name__ == "__main__":
    demo_valid_request()
    demo_invalid_request()
    demo_result_form()
    demo_configuration_error()
