# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter used by the value checkers.

Instruments created from this meter are no-ops until the host application
installs a meter provider.
"""

from __future__ import annotations

from opentelemetry import metrics

from .. import __version__

meter = metrics.get_meter("valuecheck", __version__)

__all__ = ["meter"]
