"""Dispatched message value and the hook signature.

Purpose
-------
Describe what a facility hands to its hook chain for every dispatch,
whether or not the severity passed the facility mask.

Contents
--------
* :class:`Message` – frozen dataclass with facility, level and catalog fields.
* :data:`Hook` – ``Callable[[Message], Message]``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping

from .levels import Level


@dataclass(frozen=True, slots=True)
class Message:
    """One dispatched event.

    Attributes
    ----------
    facility:
        Name of the facility that dispatched the message.
    level:
        Severity of the call (``Level.NONE`` for ``print``/``printf``).
    name:
        Catalog message name; empty for uncatalogued output.
    code:
        Catalog code; ``0`` for uncatalogued output.
    desc:
        Interpolated description.
    link:
        Documentation link or ``None``.
    caused_by:
        Causal error or ``None``.
    data:
        Keyed data or ``None``.

    Examples
    --------
    >>> msg = Message("billing", Level.WARN, "late", 42, "invoice late")
    >>> msg.replace(desc="rewritten").desc
    'rewritten'
    """

    facility: str
    level: Level
    name: str
    code: int
    desc: str
    link: str | None = None
    caused_by: BaseException | None = None
    data: Mapping[str, Any] | None = None

    def replace(self, **changes: Any) -> "Message":
        """Return a copy with *changes* applied; hooks use this to rewrite."""

        return replace(self, **changes)


Hook = Callable[[Message], Message]
"""Observe or rewrite a message. Return the input unchanged to only observe."""


__all__ = ["Hook", "Message"]
