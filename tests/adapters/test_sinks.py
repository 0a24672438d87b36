from __future__ import annotations

import io
import logging

import pytest

from lib_catalog_log.adapters.sinks.default import LoggingSink, MemorySink, StreamSink


def test_stream_sink_writes_to_given_stream() -> None:
    stream = io.StringIO()
    StreamSink(stream, flush=True).write("[INFO ] ready\n")
    assert stream.getvalue() == "[INFO ] ready\n"


def test_stream_sink_defaults_to_current_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    StreamSink().write("line\n")
    assert capsys.readouterr().err == "line\n"


def test_logging_sink_strips_newline(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="app.audit")
    LoggingSink(logging.getLogger("app.audit"), logging.WARNING).write("[WARN ] low disk\n")
    assert [record.getMessage() for record in caplog.records] == ["[WARN ] low disk"]


def test_memory_sink_lines_and_clear() -> None:
    sink = MemorySink()
    sink.write("a\n")
    sink.write("b\n")
    assert sink.lines == ["a", "b"]
    sink.clear()
    assert sink.getvalue() == ""
