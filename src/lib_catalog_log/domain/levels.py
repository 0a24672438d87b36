"""Severity levels and masks.

Purpose
-------
Define the bit-flag severities every message carries and the masks a facility
uses to decide which severities reach its sink.

Contents
--------
* :class:`Level` – ``IntFlag`` with ``NONE``, ``INFO``, ``WARN`` and ``ERROR``.
* :data:`ALL_LEVELS` – union of every level; the default facility mask.
* :func:`level_tag` – fixed-width tag rendered at the start of a sink line.
* :func:`parse_mask` – turn ``"warn,error"`` style text into a mask.

System Role
-----------
Pure domain values; used by the dispatcher, the settings adapter, and the CLI.
"""

from __future__ import annotations

from enum import IntFlag
from typing import Final


class Level(IntFlag):
    """Message severity.

    ``NONE`` marks unleveled output (``print``/``printf``). A facility writes
    it whatever its mask says.

    Examples
    --------
    >>> bool(Level.INFO & (Level.WARN | Level.ERROR))
    False
    >>> int(Level.ERROR)
    16
    """

    NONE = 2
    INFO = 4
    WARN = 8
    ERROR = 16


ALL_LEVELS: Final[Level] = Level.NONE | Level.INFO | Level.WARN | Level.ERROR

_TAGS: Final[dict[Level, str]] = {
    Level.ERROR: "[ERR  ] ",
    Level.WARN: "[WARN ] ",
    Level.INFO: "[INFO ] ",
}
_BLANK_TAG: Final[str] = "[     ] "

_NAMES: Final[dict[str, Level]] = {
    "none": Level.NONE,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "err": Level.ERROR,
    "error": Level.ERROR,
    "all": ALL_LEVELS,
}


def level_tag(level: Level) -> str:
    """Return the eight character tag for *level*.

    Anything that is not exactly one of ``INFO``/``WARN``/``ERROR`` renders
    blank.

    Examples
    --------
    >>> level_tag(Level.WARN)
    '[WARN ] '
    >>> level_tag(Level.NONE)
    '[     ] '
    """

    return _TAGS.get(level, _BLANK_TAG)


def parse_level(text: str) -> Level:
    """Return the single level named by *text* (case-insensitive).

    Raises
    ------
    ValueError
        When *text* names no level.

    Examples
    --------
    >>> parse_level("Warn")
    <Level.WARN: 8>
    """

    try:
        return _NAMES[text.strip().lower()]
    except KeyError as exc:
        raise ValueError(f"unknown level {text!r}") from exc


def parse_mask(text: str) -> Level:
    """Return the mask described by *text*.

    Accepts level names separated by ``,`` or ``|`` (``"warn|error"``),
    ``"all"``, or a decimal integer. An empty string yields an empty mask.

    Examples
    --------
    >>> parse_mask("warn, error") == Level.WARN | Level.ERROR
    True
    >>> parse_mask("24") == Level.WARN | Level.ERROR
    True
    >>> parse_mask("")
    <Level: 0>
    """

    stripped = text.strip()
    if stripped.isdigit():
        return Level(int(stripped) & ALL_LEVELS)
    mask = Level(0)
    for part in stripped.replace("|", ",").split(","):
        if part.strip():
            mask |= parse_level(part)
    return mask


__all__ = ["ALL_LEVELS", "Level", "level_tag", "parse_level", "parse_mask"]
