# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Instrumentation wrapper applied to every public check."""

from __future__ import annotations

import contextvars
import functools
import logging
from typing import Any, Callable, Optional, TypeVar

from ..exceptions import ConfigurationError, ValueCheckError
from ..telemetry.metrics import record_check

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Name of the outermost check running in this context; nested checks
# (id -> int, email -> regexp) are not recorded separately.
_active_check: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "valuecheck_active_check", default=None
)


def current_check() -> Optional[str]:
    """Return the name of the top-level check executing in this context."""

    return _active_check.get()


def instrumented(check: str) -> Callable[[F], F]:
    """Log and count failures of the decorated check function.

    Errors always propagate unchanged; the wrapper only observes them.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if _active_check.get() is not None:
                return func(*args, **kwargs)

            token = _active_check.set(check)
            try:
                result = func(*args, **kwargs)
            except ConfigurationError as exc:
                logger.warning(
                    "Invalid constraints for %s check on field '%s': %s",
                    check,
                    exc.field,
                    exc.message,
                )
                record_check(check, exc.kind)
                raise
            except ValueCheckError as exc:
                logger.debug(
                    "%s check failed for field '%s' (%s): %s",
                    check,
                    exc.field,
                    exc.kind,
                    exc.message,
                )
                record_check(check, exc.kind)
                raise
            finally:
                _active_check.reset(token)

            record_check(check)
            return result

        wrapper.check_name = check  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "current_check",
    "instrumented",
]
