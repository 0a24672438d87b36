"""Library diagnostics routed through the standard :mod:`logging` package.

Purpose
    Report what the library itself does (catalog files read, facilities
    created, hooks installed) without mixing those records into the text a
    facility writes to its sink.

Contents
    - ``ACTIVE_FACILITY``: context variable naming the facility currently
      dispatching or being configured.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_facility`` / ``facility_context``: bind the active facility name,
      permanently or for a block.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via
      a single private emitter.
    - ``make_event``: convenience builder for structured event payloads.

System Integration
    Used by adapters, the hook registry, and the composition root. The
    package logger carries a ``NullHandler`` so host applications decide
    whether these records go anywhere.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final, Iterator, Mapping

ACTIVE_FACILITY: ContextVar[str | None] = ContextVar("lib_catalog_log_facility", default=None)
"""Facility name attached to every diagnostic record emitted in this context."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_catalog_log")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def bind_facility(name: str | None) -> None:
    """Bind or clear the facility name carried by diagnostic records.

    Examples
    --------
    >>> bind_facility('billing')
    >>> ACTIVE_FACILITY.get()
    'billing'
    >>> bind_facility(None)
    >>> ACTIVE_FACILITY.get() is None
    True
    """

    ACTIVE_FACILITY.set(name)


@contextmanager
def facility_context(name: str | None) -> Iterator[None]:
    """Bind *name* for the duration of a ``with`` block, then restore."""

    token = ACTIVE_FACILITY.set(name)
    try:
        yield
    finally:
        ACTIVE_FACILITY.reset(token)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug record that includes the active facility."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info record that includes the active facility."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error record that includes the active facility."""

    _emit(logging.ERROR, message, fields)


def make_event(
    facility: str | None,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured payload for catalog lifecycle events.

    Examples
    --------
    >>> make_event('billing', None, {'records': 3})
    {'facility': 'billing', 'path': None, 'records': 3}
    """

    event: dict[str, Any] = {"facility": facility, "path": path}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a record through the shared logger with contextual metadata."""

    if not _LOGGER.isEnabledFor(level):
        return
    context: dict[str, Any] = {"facility": ACTIVE_FACILITY.get()}
    context.update(fields)
    _LOGGER.log(level, message, extra={"context": context})


__all__ = [
    "ACTIVE_FACILITY",
    "bind_facility",
    "facility_context",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "make_event",
]
