"""Environment variable settings adapter.

Purpose
-------
Let operators tune a facility without code changes: which levels reach the
sink, whether the catalog is validated up front, and where documentation
links point.

Key behaviours
--------------
* Enforces a prefix (``default_env_prefix``) so only relevant keys are read.
* Recognised suffixes: ``NAME``, ``MASK``, ``STRICT``, ``LINK_BASE`` and
  ``CATALOG`` (path to a catalog file).
* Unset variables keep the :class:`FacilitySettings` defaults; unparsable
  values raise :class:`~lib_catalog_log.domain.errors.InvalidSettings`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Mapping

from ...domain.errors import InvalidSettings
from ...domain.levels import ALL_LEVELS, Level, parse_mask
from ...observability import log_debug

_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('lib-catalog-log')
    'LIB_CATALOG_LOG'
    """

    return slug.replace("-", "_").upper()


@dataclass(frozen=True, slots=True)
class FacilitySettings:
    """Construction-time configuration for a facility."""

    name: str | None = None
    mask: Level = ALL_LEVELS
    strict: bool = False
    link_base: str | None = None
    catalog_path: str | None = None


class DefaultEnvLoader:
    """Read :class:`FacilitySettings` from environment variables."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def load(self, prefix: str) -> FacilitySettings:
        """Return settings from variables named ``<prefix>_<SUFFIX>``.

        Examples
        --------
        >>> env = {'DEMO_MASK': 'warn,error', 'DEMO_STRICT': 'true'}
        >>> settings = DefaultEnvLoader(environ=env).load('DEMO')
        >>> settings.mask == Level.WARN | Level.ERROR, settings.strict
        (True, True)
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        values = {suffix: self._environ.get(prefix + suffix) for suffix in ("NAME", "MASK", "STRICT", "LINK_BASE", "CATALOG")}
        settings = FacilitySettings(
            name=values["NAME"] or None,
            mask=_coerce_mask(prefix + "MASK", values["MASK"]),
            strict=_coerce_bool(prefix + "STRICT", values["STRICT"]),
            link_base=values["LINK_BASE"] or None,
            catalog_path=values["CATALOG"] or None,
        )
        log_debug("settings_loaded", prefix=prefix, keys=sorted(k for k, v in values.items() if v is not None))
        return settings


def _coerce_mask(key: str, value: str | None) -> Level:
    if value is None:
        return ALL_LEVELS
    try:
        return parse_mask(value)
    except ValueError as exc:
        raise InvalidSettings(f"{key}: {exc}") from exc


def _coerce_bool(key: str, value: str | None) -> bool:
    """Parse a boolean flag.

    Examples
    --------
    >>> _coerce_bool('X', 'Yes'), _coerce_bool('X', None)
    (True, False)
    """

    if value is None:
        return False
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise InvalidSettings(f"{key}: expected a boolean, found {value!r}")


__all__ = ["DefaultEnvLoader", "FacilitySettings", "default_env_prefix"]
