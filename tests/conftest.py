"""Shared fixtures: a sample catalog, a memory sink and a clean global hook slot."""

from __future__ import annotations

from typing import Iterator

import pytest

from lib_catalog_log.adapters.sinks.default import MemorySink
from lib_catalog_log.application.facility import Facility
from lib_catalog_log.application.hooks import set_global_hook
from lib_catalog_log.domain.levels import ALL_LEVELS

MESSAGES = """# Messages used across the suite
test;123;This is a test message
test2;124;Second test message
test3;125;Some more tests over here.
greet;200;Hello %s, you have %d new messages
quota;300;Quota at 100%% for %s
spaced;  42 ;   padded description   ;ignored;also ignored
"""


@pytest.fixture()
def messages() -> str:
    return MESSAGES


@pytest.fixture()
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture()
def facility(sink: MemorySink) -> Facility:
    return Facility("module", MESSAGES, mask=ALL_LEVELS, sink=sink)


@pytest.fixture(autouse=True)
def _isolated_global_hook() -> Iterator[None]:
    """Keep the process-wide hook slot empty around every test."""

    previous = set_global_hook(None)
    try:
        yield
    finally:
        set_global_hook(previous)
