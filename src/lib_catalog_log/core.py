"""Composition root for ``lib_catalog_log``.

Purpose
-------
Provide the entry points that wire catalogs, sinks, settings and hooks into a
ready :class:`~lib_catalog_log.application.facility.Facility`.

Contents
--------
* :func:`new_facility` – build a facility from catalog text or a
  :class:`Catalog`, optionally validating every record up front.
* :func:`load_catalog` – read one or more catalog files into a
  :class:`Catalog`.
* :func:`read_settings` – read :class:`FacilitySettings` from the environment.
* :func:`facility_from_env` – settings + catalog file + facility in one call.

System Role
-----------
This module connects adapters (files, environment, sinks) with the
application layer while emitting structured observability signals. It is the
place to change defaults such as the stderr sink.
"""

from __future__ import annotations

from typing import Mapping

from .adapters.catalog_files.default import FileCatalogSource
from .adapters.env.default import DefaultEnvLoader, FacilitySettings, default_env_prefix
from .adapters.sinks.default import StreamSink
from .application.catalog import Catalog
from .application.facility import Facility
from .application.ports import Sink
from .domain.errors import CatalogConfigError, InvalidSettings
from .domain.levels import ALL_LEVELS, Level
from .domain.message import Hook
from .observability import log_debug, log_info, make_event

DEFAULT_SLUG = "lib-catalog-log"


def new_facility(
    name: str,
    catalog: Catalog | str,
    *,
    mask: Level = ALL_LEVELS,
    sink: Sink | None = None,
    hook: Hook | None = None,
    link_base: str | None = None,
    strict: bool = False,
) -> Facility:
    """Return a facility named *name* over *catalog*.

    Parameters
    ----------
    name:
        Facility name copied onto every message.
    catalog:
        Catalog text or a prepared :class:`Catalog`.
    mask:
        Levels written to the sink (default: all).
    sink:
        Text writer; defaults to a :class:`StreamSink` over ``sys.stderr``.
    hook:
        Facility-scoped hook.
    link_base:
        Documentation link prefix, applied when *catalog* is text.
    strict:
        Validate every record now so defects surface at construction time
        rather than at the first call that hits them.

    Raises
    ------
    CatalogConfigError
        Only when ``strict`` is set and the catalog is defective.

    Examples
    --------
    >>> from lib_catalog_log.adapters.sinks.default import MemorySink
    >>> sink = MemorySink()
    >>> facility = new_facility("demo", "ready;1;Ready after %d ms", sink=sink, strict=True)
    >>> _ = facility.info("ready", 12)
    >>> sink.lines
    ['[INFO ] Ready after 12 ms']
    """

    resolved = catalog if isinstance(catalog, Catalog) else Catalog(catalog, link_base=link_base)
    records = resolved.validate() if strict else None
    facility = Facility(name, resolved, mask=mask, sink=sink if sink is not None else StreamSink(), hook=hook)
    log_debug("facility_created", **make_event(name, None, {"strict": strict, "records": records, "mask": int(mask)}))
    return facility


def load_catalog(*paths: str, link_base: str | None = None) -> Catalog:
    """Read catalog files (concatenated in order) into a :class:`Catalog`.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> target = Path(tmp.name) / "messages.csv"
    >>> _ = target.write_text("ready;1;Ready\\n", encoding="utf-8")
    >>> load_catalog(str(target)).lookup("ready").code
    1
    >>> tmp.cleanup()
    """

    if not paths:
        raise CatalogConfigError("load_catalog needs at least one path")
    text = FileCatalogSource().load_many(paths)
    log_info("catalog_loaded", **make_event(None, paths[0], {"files": len(paths)}))
    return Catalog(text, link_base=link_base)


def read_settings(slug: str = DEFAULT_SLUG, *, environ: Mapping[str, str] | None = None) -> FacilitySettings:
    """Return facility settings from ``<SLUG>_*`` environment variables."""

    return DefaultEnvLoader(environ=environ).load(default_env_prefix(slug))


def facility_from_env(
    name: str | None = None,
    *,
    slug: str = DEFAULT_SLUG,
    environ: Mapping[str, str] | None = None,
    catalog: Catalog | str | None = None,
    sink: Sink | None = None,
    hook: Hook | None = None,
) -> Facility:
    """Build a facility whose mask, strictness, links and catalog come from the environment.

    An explicit *name* or *catalog* wins over ``<SLUG>_NAME`` /
    ``<SLUG>_CATALOG``.
    """

    settings = read_settings(slug, environ=environ)
    facility_name = name or settings.name
    if not facility_name:
        raise InvalidSettings(f"{default_env_prefix(slug)}_NAME is not set and no name was given")
    if catalog is None:
        if settings.catalog_path is None:
            raise InvalidSettings(f"{default_env_prefix(slug)}_CATALOG is not set and no catalog was given")
        catalog = load_catalog(settings.catalog_path, link_base=settings.link_base)
    return new_facility(
        facility_name,
        catalog,
        mask=settings.mask,
        sink=sink,
        hook=hook,
        link_base=settings.link_base,
        strict=settings.strict,
    )


__all__ = [
    "CatalogConfigError",
    "DEFAULT_SLUG",
    "FacilitySettings",
    "default_env_prefix",
    "facility_from_env",
    "load_catalog",
    "new_facility",
    "read_settings",
]
