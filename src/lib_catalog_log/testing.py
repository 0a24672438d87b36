"""Testing helpers that keep dispatched messages observable.

Purpose
    Let applications assert on what their facilities emit without parsing sink
    text: install a :class:`CapturingHook` on a facility, a scope, or the
    process-wide slot and inspect the recorded messages.

Contents
    - ``CapturingHook``: records every message it sees and optionally rewrites
      it.
    - ``capture_global``: context manager that installs a capturing hook in
      the process-wide slot and restores the previous one afterwards.

System Integration
    Used by this package's own suites and safe to use from downstream tests.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator

from .application.hooks import set_global_hook
from .domain.message import Message


class CapturingHook:
    """Hook that records messages.

    Examples
    --------
    >>> from lib_catalog_log.domain.levels import Level
    >>> hook = CapturingHook(rewrite=lambda m: m.replace(desc=m.desc.upper()))
    >>> hook(Message("demo", Level.INFO, "ready", 1, "ready")).desc
    'READY'
    >>> hook.last.desc
    'ready'
    """

    def __init__(self, rewrite: Callable[[Message], Message] | None = None) -> None:
        self.messages: list[Message] = []
        self._rewrite = rewrite

    def __call__(self, message: Message) -> Message:
        self.messages.append(message)
        if self._rewrite is None:
            return message
        return self._rewrite(message)

    @property
    def last(self) -> Message | None:
        return self.messages[-1] if self.messages else None

    def clear(self) -> None:
        self.messages.clear()


@contextmanager
def capture_global() -> Iterator[CapturingHook]:
    """Capture every message dispatched by any facility inside the block."""

    hook = CapturingHook()
    previous = set_global_hook(hook)
    try:
        yield hook
    finally:
        set_global_hook(previous)


__all__ = ["CapturingHook", "capture_global"]
