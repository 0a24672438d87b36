"""Scoped operation context carrying a context-scoped hook.

Purpose
-------
Give callers an immutable, parent-linked context value they can thread through
an operation. A hook attached with :func:`catch` intercepts every message
dispatched with that scope (or any scope derived from it).

Contents
--------
* :class:`Scope` – immutable context node with typed value attach/lookup.
* :data:`BACKGROUND` – empty root scope.
* :func:`catch` / :func:`caught_hook` – attach and find a context-scoped hook.
* :data:`CURRENT_SCOPE` / :func:`current_scope` / :func:`use_scope` – bind a
  scope to the running ``contextvars`` context so calls that pass no scope
  still find it.

System Role
-----------
The hook is stored under a module-private token, so values callers attach
with their own keys can never shadow or read it. Lookups only walk parent
links and never mutate, which keeps scopes safe to share between readers.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final, Iterator

from .message import Hook

_MISSING: Final = object()


class _HookKey:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<scope hook key>"


_HOOK_KEY: Final = _HookKey()


class Scope:
    """Immutable context node: a parent link plus at most one key/value pair.

    Examples
    --------
    >>> root = Scope()
    >>> child = root.with_value("request", "r-1")
    >>> grandchild = child.with_value("user", "ada")
    >>> grandchild.value("request"), root.value("request")
    ('r-1', None)
    """

    __slots__ = ("_parent", "_key", "_value")

    def __init__(self, parent: "Scope | None" = None, key: object = _MISSING, value: Any = None) -> None:
        self._parent = parent
        self._key = key
        self._value = value

    @property
    def parent(self) -> "Scope | None":
        return self._parent

    def with_value(self, key: object, value: Any) -> "Scope":
        """Return a child scope that associates *value* with *key*."""

        return Scope(self, key, value)

    def value(self, key: object, default: Any = None) -> Any:
        """Return the value closest to this node for *key*, walking parents."""

        node: Scope | None = self
        while node is not None:
            if node._key is key:
                return node._value
            if key is _HOOK_KEY or node._key is _HOOK_KEY or node._key is _MISSING:
                node = node._parent
                continue
            if node._key == key:
                return node._value
            node = node._parent
        return default

    def ancestry(self) -> Iterator["Scope"]:
        """Yield this scope and each parent up to the root."""

        node: Scope | None = self
        while node is not None:
            yield node
            node = node._parent

    def __repr__(self) -> str:
        depth = sum(1 for _ in self.ancestry())
        return f"Scope(depth={depth})"


BACKGROUND: Final[Scope] = Scope()
"""Root scope with nothing attached."""


def catch(scope: Scope | None, hook: Hook) -> Scope:
    """Return a child of *scope* carrying *hook* as its context-scoped hook.

    Examples
    --------
    >>> def hook(message):
    ...     return message
    >>> caught_hook(catch(None, hook)) is hook
    True
    """

    return (scope or BACKGROUND).with_value(_HOOK_KEY, hook)


def caught_hook(scope: Scope | None) -> Hook | None:
    """Return the nearest context-scoped hook on *scope*'s ancestry, or ``None``."""

    if scope is None:
        return None
    for node in scope.ancestry():
        if node._key is _HOOK_KEY:
            return node._value
    return None


CURRENT_SCOPE: ContextVar[Scope | None] = ContextVar("lib_catalog_log_scope", default=None)
"""Scope bound to the running context; used when a call passes no scope."""


def current_scope() -> Scope | None:
    """Return the scope bound by :func:`use_scope`, if any."""

    return CURRENT_SCOPE.get()


@contextmanager
def use_scope(scope: Scope) -> Iterator[Scope]:
    """Bind *scope* for the duration of a ``with`` block.

    Examples
    --------
    >>> with use_scope(Scope()) as bound:
    ...     current_scope() is bound
    True
    >>> current_scope() is None
    True
    """

    token = CURRENT_SCOPE.set(scope)
    try:
        yield scope
    finally:
        CURRENT_SCOPE.reset(token)


__all__ = [
    "BACKGROUND",
    "CURRENT_SCOPE",
    "Scope",
    "catch",
    "caught_hook",
    "current_scope",
    "use_scope",
]
