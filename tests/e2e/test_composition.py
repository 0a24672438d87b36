"""Composition-root behaviour: building facilities from text, files and the environment."""

from __future__ import annotations

from pathlib import Path

import pytest

from lib_catalog_log import facility_from_env, load_catalog, new_facility, read_settings
from lib_catalog_log.adapters.sinks.default import MemorySink, StreamSink
from lib_catalog_log.domain.errors import CatalogConfigError, InvalidCode, InvalidSettings
from lib_catalog_log.domain.levels import Level


def test_new_facility_defaults_to_stderr_stream() -> None:
    facility = new_facility("demo", "a;1;x")
    assert isinstance(facility.sink, StreamSink)


def test_lenient_facility_defers_defects() -> None:
    facility = new_facility("demo", "fine;1;ok\nbroken;x;y\n", sink=MemorySink())
    assert facility.info("fine").code == 1
    with pytest.raises(InvalidCode):
        facility.info("broken")


def test_strict_facility_fails_at_construction() -> None:
    with pytest.raises(InvalidCode):
        new_facility("demo", "fine;1;ok\nbroken;x;y\n", strict=True)


def test_link_base_reaches_messages() -> None:
    facility = new_facility("demo", "a;1;x", sink=MemorySink(), link_base="https://d/")
    assert facility.info("a").link == "https://d/a"


def test_load_catalog_requires_paths() -> None:
    with pytest.raises(CatalogConfigError):
        load_catalog()


def test_load_catalog_concatenates(tmp_path: Path) -> None:
    (tmp_path / "a.csv").write_text("a;1;first\n", encoding="utf-8")
    (tmp_path / "b.csv").write_text("b;2;second\n", encoding="utf-8")
    catalog = load_catalog(str(tmp_path / "a.csv"), str(tmp_path / "b.csv"))
    assert catalog.names() == ["a", "b"]


def test_read_settings_uses_slug_prefix() -> None:
    settings = read_settings("billing-app", environ={"BILLING_APP_MASK": "error"})
    assert settings.mask == Level.ERROR


def test_facility_from_env(tmp_path: Path) -> None:
    path = tmp_path / "messages.csv"
    path.write_text("ready;1;Ready\nfailed;2;Failed\n", encoding="utf-8")
    sink = MemorySink()
    environ = {
        "LIB_CATALOG_LOG_NAME": "billing",
        "LIB_CATALOG_LOG_CATALOG": str(path),
        "LIB_CATALOG_LOG_MASK": "error",
        "LIB_CATALOG_LOG_STRICT": "yes",
    }
    facility = facility_from_env(environ=environ, sink=sink)

    facility.info("ready")
    facility.err("failed")

    assert facility.name == "billing"
    assert sink.lines == ["[ERR  ] Failed"]


def test_facility_from_env_explicit_arguments_win() -> None:
    facility = facility_from_env("api", environ={"LIB_CATALOG_LOG_NAME": "ignored"}, catalog="a;1;x", sink=MemorySink())
    assert facility.name == "api"


@pytest.mark.parametrize(
    ("environ", "missing"),
    [({}, "LIB_CATALOG_LOG_NAME"), ({"LIB_CATALOG_LOG_NAME": "x"}, "LIB_CATALOG_LOG_CATALOG")],
)
def test_facility_from_env_requires_name_and_catalog(environ: dict[str, str], missing: str) -> None:
    with pytest.raises(InvalidSettings, match=missing):
        facility_from_env(environ=environ)
