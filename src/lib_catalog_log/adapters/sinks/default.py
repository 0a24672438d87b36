"""Text sinks a facility can write its rendered lines to.

Purpose
-------
Provide the two writers most hosts need: a stream writer (stderr by default)
and a bridge into a standard :mod:`logging` logger.

Contents
--------
* :class:`StreamSink` – writes to a text stream, resolving ``sys.stderr`` at
  write time when no stream is given.
* :class:`LoggingSink` – forwards each line (without its newline) to a
  :class:`logging.Logger` at a fixed level.
* :class:`MemorySink` – keeps lines in a list; handy in tests and the CLI.

System Role
-----------
All three satisfy :class:`lib_catalog_log.application.ports.Sink`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO


class StreamSink:
    """Write text to *stream*, or to the current ``sys.stderr`` when ``None``.

    With ``flush=True`` the stream is flushed after every line.
    """

    def __init__(self, stream: TextIO | None = None, *, flush: bool = False) -> None:
        self._stream = stream
        self._flush = flush

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def write(self, text: str) -> int:
        stream = self.stream
        written = stream.write(text)
        if self._flush:
            stream.flush()
        return written


class LoggingSink:
    """Forward rendered lines to a standard library logger.

    Examples
    --------
    >>> sink = LoggingSink(logging.getLogger("demo.sink"))
    >>> sink.write("[INFO ] ready\\n")
    """

    def __init__(self, logger: logging.Logger, level: int = logging.INFO) -> None:
        self._logger = logger
        self._level = level

    def write(self, text: str) -> None:
        line = text.rstrip("\n")
        if line:
            self._logger.log(self._level, line)


class MemorySink:
    """Collect rendered lines in memory.

    Examples
    --------
    >>> sink = MemorySink()
    >>> sink.write("[WARN ] low disk\\n")
    >>> sink.lines
    ['[WARN ] low disk']
    >>> sink.getvalue()
    '[WARN ] low disk\\n'
    """

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        self._chunks.append(text)

    @property
    def lines(self) -> list[str]:
        return self.getvalue().splitlines()

    def getvalue(self) -> str:
        return "".join(self._chunks)

    def clear(self) -> None:
        self._chunks.clear()


__all__ = ["LoggingSink", "MemorySink", "StreamSink"]
