"""Application-layer ports describing collaborator responsibilities.

Purpose
-------
Define the structural contracts the facility depends on so sinks and catalog
sources stay swappable without touching dispatch logic.

Contents
--------
* :class:`Sink` – line-oriented text writer.
* :class:`CatalogSource` – yields catalog text from somewhere.
* :class:`Logger` – the dispatch surface a facility offers to call sites.
* :class:`SettingsLoader` – reads facility settings.

System Role
-----------
These protocols enforce Dependency Inversion (DIP). Adapters implement them;
:mod:`lib_catalog_log.core` wires adapters into a facility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

from ..domain.levels import Level
from ..domain.message import Message
from ..domain.scope import Scope

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..adapters.env.default import FacilitySettings


@runtime_checkable
class Sink(Protocol):
    """Accept rendered text. Each dispatch writes one line ending in ``\\n``."""

    def write(self, text: str) -> Any:
        """Write *text*; the return value is ignored."""


@runtime_checkable
class CatalogSource(Protocol):
    """Produce catalog text (file, package resource, database, ...)."""

    def load(self, path: str) -> str:
        """Return catalog text for *path* or raise a catalog configuration error."""


@runtime_checkable
class SettingsLoader(Protocol):
    """Produce facility settings from an outside source."""

    def load(self, prefix: str) -> "FacilitySettings":
        """Return settings for variables starting with *prefix*."""


@runtime_checkable
class Logger(Protocol):
    """Dispatch surface used by call sites.

    The keyword arguments accept an explicit scope, cause and data in place of
    the loose positional tail.
    """

    def info(self, name: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message: ...

    def warn(self, name: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message: ...

    def err(self, name: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message: ...

    def log(
        self,
        level: Level,
        name: str,
        *args: Any,
        scope: Scope | None = None,
        cause: BaseException | None = None,
        data: DataArgument = None,
    ) -> Message: ...

    def printf(self, template: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message: ...

    def print(self, text: str, *args: Any, scope: Scope | None = None, cause: BaseException | None = None, data: DataArgument = None) -> Message: ...

    def report(self, err: BaseException | None) -> Message | None: ...


DataArgument = Mapping[str, Any] | list[Any] | tuple[Any, ...] | None
"""Explicit ``data=`` argument: a mapping or a flat ``key, value`` sequence."""
