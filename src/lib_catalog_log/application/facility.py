"""Facility: catalogued logger, dispatcher and error factory.

Purpose
-------
Turn a message name plus call arguments into a rendered sink line and a
:class:`~lib_catalog_log.domain.message.Message` that travels through the
hook chain, or into a :class:`~lib_catalog_log.domain.rich_error.RichError`
that is handed back to the caller.

Contents
--------
* :class:`Resolution` – everything a lookup plus argument split produces.
* :class:`Facility` – mask, sink and hook holder exposing ``info``/``warn``/
  ``err``/``log``/``printf``/``print``/``report``/``new_error``.

Call shape
----------
Arguments after the name fill the template's placeholders first. What remains
may start with a :class:`~lib_catalog_log.domain.scope.Scope`, then an
exception (the cause), then keyed data as ``key, value`` pairs, a single
mapping, or a single list/tuple of either. The keyword-only ``scope=``,
``cause=`` and ``data=`` parameters state the same things explicitly and take
precedence.

System Role
-----------
Built by :func:`lib_catalog_log.core.new_facility`. Mask, sink and hook are
plain attributes; callers that mutate them while other threads dispatch must
serialise that themselves.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Mapping

from ..domain.levels import ALL_LEVELS, Level, level_tag
from ..domain.message import Hook, Message
from ..domain.rich_error import RichError, iter_causes, rich
from ..domain.scope import Scope, current_scope
from ..observability import facility_context, log_debug
from .arguments import classify_data, merge_data, render_data
from .catalog import Catalog
from .formatting import interpolate, split_tail
from .hooks import run_hook_chain
from .ports import DataArgument, Sink


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving a message name against the catalog and arguments."""

    code: int
    desc: str
    link: str | None
    data: Mapping[str, Any] | None
    scope: Scope | None
    cause: BaseException | None


class Facility:
    """A named logging facility bound to one catalog.

    Parameters
    ----------
    name:
        Facility name copied onto every message.
    catalog:
        :class:`Catalog` or raw catalog text.
    mask:
        Levels written to the sink. Unleveled (``Level.NONE``) output is
        written whatever the mask; hooks see every level regardless.
    sink:
        Text writer; ``None`` writes to whatever ``sys.stderr`` is at call time.
    hook:
        Facility-scoped hook.

    Examples
    --------
    >>> import io
    >>> out = io.StringIO()
    >>> billing = Facility("billing", "late;42;invoice %s is late", sink=out)
    >>> billing.warn("late", "INV-7", "days", 3).code
    42
    >>> out.getvalue()
    '[WARN ] invoice INV-7 is late days=3\\n'
    """

    def __init__(
        self,
        name: str,
        catalog: Catalog | str,
        *,
        mask: Level = ALL_LEVELS,
        sink: Sink | None = None,
        hook: Hook | None = None,
    ) -> None:
        self.name = name
        self.catalog = catalog if isinstance(catalog, Catalog) else Catalog(catalog)
        self.mask = mask
        self.sink = sink
        self.hook = hook

    def __repr__(self) -> str:
        return f"Facility(name={self.name!r}, mask={self.mask!r})"

    # -- resolution -------------------------------------------------------

    def lookup(
        self,
        name: str,
        *args: Any,
        scope: Scope | None = None,
        cause: BaseException | None = None,
        data: DataArgument = None,
    ) -> Resolution:
        """Resolve *name* and *args* without dispatching anything."""

        entry = self.catalog.lookup(name)
        desc, tail = interpolate(entry.template, args)
        return self._resolve_tail(entry.code, desc, entry.link, tail, scope, cause, data)

    def new_error(
        self,
        name: str,
        *args: Any,
        scope: Scope | None = None,
        cause: BaseException | None = None,
        data: DataArgument = None,
    ) -> RichError:
        """Build, but do not dispatch, a :class:`RichError` for *name*.

        The error points back at this facility only when it carries data.
        """

        resolved = self.lookup(name, *args, scope=scope, cause=cause, data=data)
        return RichError(
            name,
            resolved.code,
            resolved.desc,
            resolved.link,
            data=resolved.data,
            caused_by=resolved.cause,
            facility=self if resolved.data else None,
        )

    # -- dispatch ---------------------------------------------------------

    def info(self, name: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message:
        return self.log(Level.INFO, name, *args, scope=scope, cause=cause, data=data)

    def warn(self, name: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message:
        return self.log(Level.WARN, name, *args, scope=scope, cause=cause, data=data)

    def err(self, name: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message:
        return self.log(Level.ERROR, name, *args, scope=scope, cause=cause, data=data)

    def log(
        self,
        level: Level,
        name: str,
        *args: Any,
        scope: Scope | None = None,
        cause: BaseException | None = None,
        data: DataArgument = None,
    ) -> Message:
        """Dispatch catalog message *name* at *level*."""

        level = Level(level)
        resolved = self.lookup(name, *args, scope=scope, cause=cause, data=data)
        return self._dispatch(resolved.scope, level, name, resolved.code, resolved.desc, resolved.link, resolved.data, resolved.cause)

    def printf(self, template: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message:
        """Dispatch uncatalogued text with placeholder interpolation at ``Level.NONE``."""

        desc, tail = interpolate(template, args)
        resolved = self._resolve_tail(0, desc, None, tail, scope, cause, data)
        return self._dispatch(resolved.scope, Level.NONE, "", 0, resolved.desc, None, resolved.data, resolved.cause)

    def print(self, text: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message:
        """Dispatch *text* verbatim at ``Level.NONE``; ``%`` is never interpreted."""

        resolved = self._resolve_tail(0, text, None, args, scope, cause, data)
        return self._dispatch(resolved.scope, Level.NONE, "", 0, text, None, resolved.data, resolved.cause)

    def report(self, err: BaseException | None) -> Message | None:
        """Dispatch an already resolved error at ``Level.ERROR``.

        The catalog is not consulted; plain exceptions are adapted through
        :func:`~lib_catalog_log.domain.rich_error.rich`. ``None`` is a no-op.
        """

        if err is None:
            return None
        resolved = rich(err)
        return self._dispatch(
            current_scope(),
            Level.ERROR,
            resolved.name,
            resolved.code,
            resolved.desc,
            resolved.link,
            resolved.data or None,
            resolved.caused_by,
        )

    # -- internals --------------------------------------------------------

    def _resolve_tail(
        self,
        code: int,
        desc: str,
        link: str | None,
        tail: Any,
        scope: Scope | None,
        cause: BaseException | None,
        data: Any,
    ) -> Resolution:
        found_scope, found_cause, rest = split_tail(tail)
        merged = merge_data(classify_data(rest), data)
        return Resolution(
            code=code,
            desc=desc,
            link=link,
            data=merged,
            scope=scope if scope is not None else found_scope if found_scope is not None else current_scope(),
            cause=cause if cause is not None else found_cause,
        )

    def _dispatch(
        self,
        scope: Scope | None,
        level: Level,
        name: str,
        code: int,
        desc: str,
        link: str | None,
        data: Mapping[str, Any] | None,
        cause: BaseException | None,
    ) -> Message:
        if level == Level.NONE or level & self.mask:
            self._write(self._render(level, desc, data, cause))
        else:
            log_debug("message_suppressed", facility=self.name, message_name=name, level=level.name)

        message = Message(
            facility=self.name,
            level=level,
            name=name,
            code=code,
            desc=desc,
            link=link,
            caused_by=cause,
            data=data,
        )
        with facility_context(self.name):
            return run_hook_chain(message, scope, self.hook)

    @staticmethod
    def _render(level: Level, desc: str, data: Mapping[str, Any] | None, cause: BaseException | None) -> str:
        parts = [level_tag(level), desc, render_data(data)]
        parts.extend(f" (caused by {link})" for link in iter_causes(cause))
        return "".join(parts)

    def _write(self, line: str) -> None:
        sink = self.sink if self.sink is not None else sys.stderr
        sink.write(line + "\n")


__all__ = ["Facility", "Resolution"]
