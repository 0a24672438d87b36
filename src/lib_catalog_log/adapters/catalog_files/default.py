"""Catalog file loader.

Purpose
-------
Read catalog text from disk so facilities can be built from files shipped
next to an application (``messages.csv``, ``catalog.txt`` ...).

Contents
--------
* :class:`FileCatalogSource` – reads UTF-8 catalog files, optionally
  concatenating several of them.

System Role
-----------
Invoked by :func:`lib_catalog_log.core.load_catalog`. Missing files raise
:class:`CatalogFileNotFound`; undecodable files raise
:class:`InvalidCatalogFile`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ...domain.errors import CatalogFileNotFound, InvalidCatalogFile
from ...observability import log_debug, log_error


class FileCatalogSource:
    """Load catalog text from the filesystem."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def load(self, path: str) -> str:
        """Return the text stored at *path*.

        A leading UTF-8 byte order mark is dropped so the first record name
        matches.

        Examples
        --------
        >>> from tempfile import TemporaryDirectory
        >>> tmp = TemporaryDirectory()
        >>> target = Path(tmp.name) / "messages.csv"
        >>> _ = target.write_text("ready;1;Ready\\n", encoding="utf-8")
        >>> FileCatalogSource().load(str(target))
        'ready;1;Ready\\n'
        >>> tmp.cleanup()
        """

        file_path = Path(path)
        if not file_path.is_file():
            raise CatalogFileNotFound(f"Catalog file not found: {path}")
        payload = file_path.read_bytes()
        try:
            text = payload.decode(self._encoding)
        except UnicodeDecodeError as exc:
            log_error("catalog_file_invalid", path=path, error=str(exc))
            raise InvalidCatalogFile(f"Catalog file {path} is not valid {self._encoding} text: {exc}") from exc
        log_debug("catalog_file_read", path=path, size=len(payload))
        return text.removeprefix("\ufeff")

    def load_many(self, paths: Iterable[str]) -> str:
        """Concatenate several catalog files in the given order.

        Earlier files win on duplicate names because lookup returns the first
        matching record.
        """

        chunks = []
        for path in paths:
            text = self.load(path)
            chunks.append(text if text.endswith("\n") or not text else text + "\n")
        return "".join(chunks)


__all__ = ["FileCatalogSource"]
