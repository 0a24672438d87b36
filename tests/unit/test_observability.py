"""Unit tests for the library diagnostics in ``observability``.

Validates the null handler, facility binding, and event construction the
package relies on for its own records.
"""

from __future__ import annotations

import logging

import pytest

from lib_catalog_log import get_logger
from lib_catalog_log.observability import ACTIVE_FACILITY, bind_facility, facility_context, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_facility_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured records should include the bound facility and contextual fields."""

    caplog.set_level(logging.INFO, logger="lib_catalog_log")
    with facility_context("billing"):
        log_info("catalog_loaded", path=None, files=1)
    record = caplog.records[-1]
    assert getattr(record, "context") == {"facility": "billing", "path": None, "files": 1}


def test_facility_context_restores_previous() -> None:
    bind_facility("outer")
    with facility_context("inner"):
        assert ACTIVE_FACILITY.get() == "inner"
    assert ACTIVE_FACILITY.get() == "outer"
    bind_facility(None)
    assert ACTIVE_FACILITY.get() is None


def test_disabled_level_emits_nothing(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="lib_catalog_log")
    log_info("quiet")
    assert not [record for record in caplog.records if record.getMessage() == "quiet"]


def test_make_event_merges_optional_payload() -> None:
    """make_event should merge optional metadata without mutating base keys."""

    event = make_event("billing", None, {"records": 3})
    assert event == {"facility": "billing", "path": None, "records": 3}
