"""Flat-text message catalog and its lookup grammar.

Purpose
-------
Resolve a message name to its code, description template and link from a
human-editable text blob.

Grammar
-------
One record per line::

    # comment
    name;code;description[;ignored...]

Lines starting with ``#`` and lines without a ``;`` are skipped. The code and
description are trimmed; anything after the third field is ignored.

Contents
--------
* :class:`CatalogEntry` – resolved record.
* :class:`Catalog` – scanning lookup plus whole-catalog validation.

System Role
-----------
:class:`~lib_catalog_log.application.facility.Facility` calls
:meth:`Catalog.lookup` on every catalogued dispatch. There is no index: the
text is scanned from the top each time, so catalogs are expected to be small.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Iterator

from ..domain.errors import DuplicateMessage, InvalidCode, MalformedRecord, MessageNotFound

_SEPARATOR: Final[str] = ";"
_COMMENT: Final[str] = "#"
_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A parsed catalog record."""

    name: str
    code: int
    template: str
    link: str | None = None


class Catalog:
    """Immutable catalog over a text blob.

    Parameters
    ----------
    text:
        Catalog text in the line grammar described in the module docstring.
    link_base:
        Optional prefix; when set, every entry links to ``link_base + name``.

    Examples
    --------
    >>> catalog = Catalog("# demo\\nX;123;msg %s\\n")
    >>> catalog.lookup("X")
    CatalogEntry(name='X', code=123, template='msg %s', link=None)
    >>> "Y" in catalog
    False
    """

    __slots__ = ("_text", "_link_base")

    def __init__(self, text: str, *, link_base: str | None = None) -> None:
        self._text = text
        self._link_base = link_base or None

    @property
    def text(self) -> str:
        return self._text

    @property
    def link_base(self) -> str | None:
        return self._link_base

    def lookup(self, name: str) -> CatalogEntry:
        """Return the first record named *name*.

        Raises
        ------
        MessageNotFound
            No record carries *name*.
        MalformedRecord
            The record has no separator after its code field.
        InvalidCode
            The code field is not a decimal integer.
        """

        for record_name, rest in _records(self._text):
            if record_name == name:
                return self._parse(name, rest)
        raise MessageNotFound(name)

    def entries(self) -> Iterator[CatalogEntry]:
        """Parse and yield every record in file order (duplicates included)."""

        for record_name, rest in _records(self._text):
            yield self._parse(record_name, rest)

    def names(self) -> list[str]:
        """Return record names in file order."""

        return [record_name for record_name, _ in _records(self._text)]

    def validate(self) -> int:
        """Parse every record and return how many there are.

        Raises the first defect found, including :class:`DuplicateMessage`
        when a name is repeated (only the first record would ever resolve).
        """

        seen: set[str] = set()
        count = 0
        for entry in self.entries():
            if entry.name in seen:
                raise DuplicateMessage(entry.name)
            seen.add(entry.name)
            count += 1
        return count

    def __contains__(self, name: object) -> bool:
        return any(record_name == name for record_name, _ in _records(self._text))

    def __repr__(self) -> str:
        return f"Catalog(records={len(self.names())}, link_base={self._link_base!r})"

    def _parse(self, name: str, rest: str) -> CatalogEntry:
        code_field, sep, remainder = rest.partition(_SEPARATOR)
        if not sep:
            raise MalformedRecord(name, f"{name}{_SEPARATOR}{rest}")
        code_text = code_field.strip()
        if not _CODE_PATTERN.fullmatch(code_text):
            raise InvalidCode(name, code_text)
        template = remainder.partition(_SEPARATOR)[0].strip()
        link = f"{self._link_base}{name}" if self._link_base else None
        return CatalogEntry(name=name, code=int(code_text), template=template, link=link)


def _records(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(name, rest)`` for every record line of *text*."""

    for line in text.split("\n"):
        if line.startswith(_COMMENT):
            continue
        name, sep, rest = line.partition(_SEPARATOR)
        if not sep:
            continue
        yield name, rest


__all__ = ["Catalog", "CatalogEntry"]
