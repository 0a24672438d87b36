from __future__ import annotations

from lib_catalog_log.application.hooks import get_global_hook
from lib_catalog_log.domain.levels import Level
from lib_catalog_log.domain.message import Message
from lib_catalog_log.testing import CapturingHook, capture_global


def test_capturing_hook_records_and_rewrites() -> None:
    hook = CapturingHook(rewrite=lambda m: m.replace(code=m.code + 1))
    out = hook(Message("demo", Level.WARN, "late", 41, "late"))
    assert out.code == 42
    assert hook.last is not None and hook.last.code == 41
    hook.clear()
    assert hook.last is None


def test_capture_global_installs_and_removes() -> None:
    with capture_global() as hook:
        assert get_global_hook() is hook
    assert get_global_hook() is None
