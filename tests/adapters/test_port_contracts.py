"""Adapter contract tests for the application-layer ports.

Keeps dependency inversion enforceable: every default adapter must satisfy the
protocol the facility and composition root depend on.
"""

from __future__ import annotations

import io
import logging

import pytest

from lib_catalog_log.adapters.catalog_files.default import FileCatalogSource
from lib_catalog_log.adapters.env.default import DefaultEnvLoader
from lib_catalog_log.adapters.sinks.default import LoggingSink, MemorySink, StreamSink
from lib_catalog_log.application import ports
from lib_catalog_log.application.facility import Facility


@pytest.mark.parametrize(
    "sink",
    [StreamSink(io.StringIO()), LoggingSink(logging.getLogger("contract")), MemorySink(), io.StringIO()],
)
def test_sinks_satisfy_port(sink: object) -> None:
    assert isinstance(sink, ports.Sink)


def test_file_source_satisfies_port() -> None:
    assert isinstance(FileCatalogSource(), ports.CatalogSource)


def test_env_loader_satisfies_port() -> None:
    assert isinstance(DefaultEnvLoader(environ={}), ports.SettingsLoader)


def test_facility_satisfies_logger_port() -> None:
    assert isinstance(Facility("demo", "a;1;x", sink=MemorySink()), ports.Logger)
