from __future__ import annotations

import dataclasses

import pytest

from lib_catalog_log.domain.levels import Level
from lib_catalog_log.domain.message import Message


def test_message_is_immutable() -> None:
    message = Message("demo", Level.INFO, "ready", 1, "ready")
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.desc = "changed"  # type: ignore[misc]


def test_replace_returns_new_message() -> None:
    message = Message("demo", Level.INFO, "ready", 1, "ready", data={"k": "v"})
    changed = message.replace(level=Level.ERROR)
    assert changed is not message
    assert changed.level is Level.ERROR
    assert changed.data == {"k": "v"}
    assert message.level is Level.INFO
