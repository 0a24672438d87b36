"""Process-wide hook registry and the ordered interception chain.

Purpose
-------
Run every dispatched message through up to three hooks in a fixed order:

1. the context-scoped hook found on the call's scope,
2. the facility hook,
3. the process-wide hook.

The first two may replace the message; the process-wide hook only observes
(its return value is discarded).

Contents
    - ``set_global_hook`` / ``clear_global_hook`` / ``get_global_hook``:
      single-slot, last-writer-wins registry.
    - ``run_hook_chain``: apply the three layers to a message.

System Role
-----------
The registry is written rarely (at startup, or by test fixtures) and read on
every dispatch. Writes are serialised by a lock; reads are a plain attribute
load.
"""

from __future__ import annotations

import threading

from ..domain.message import Hook, Message
from ..domain.scope import Scope, caught_hook
from ..observability import log_debug

_GLOBAL_HOOK: Hook | None = None
_WRITE_LOCK = threading.Lock()


def set_global_hook(hook: Hook | None) -> Hook | None:
    """Install *hook* as the process-wide hook and return the previous one.

    Examples
    --------
    >>> previous = set_global_hook(lambda message: message)
    >>> get_global_hook() is not None
    True
    >>> _ = set_global_hook(previous)
    """

    global _GLOBAL_HOOK
    with _WRITE_LOCK:
        previous, _GLOBAL_HOOK = _GLOBAL_HOOK, hook
    log_debug("global_hook_set", installed=hook is not None, replaced=previous is not None)
    return previous


def clear_global_hook() -> Hook | None:
    """Remove the process-wide hook, returning whatever was installed."""

    return set_global_hook(None)


def get_global_hook() -> Hook | None:
    """Return the installed process-wide hook, if any."""

    return _GLOBAL_HOOK


def run_hook_chain(message: Message, scope: Scope | None, facility_hook: Hook | None) -> Message:
    """Pass *message* through the context, facility and process-wide hooks.

    Returns the message as left by the facility hook.
    """

    context_hook = caught_hook(scope)
    if context_hook is not None:
        message = context_hook(message)
    if facility_hook is not None:
        message = facility_hook(message)
    global_hook = _GLOBAL_HOOK
    if global_hook is not None:
        global_hook(message)
    return message


__all__ = ["clear_global_hook", "get_global_hook", "run_hook_chain", "set_global_hook"]
