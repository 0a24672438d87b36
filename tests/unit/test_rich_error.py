from __future__ import annotations

from lib_catalog_log.domain.rich_error import RichError, iter_causes, rich, unwrap


def test_str_renders_description_or_name() -> None:
    assert str(RichError("disk", 1, "disk full")) == "disk full"
    assert str(RichError("disk", 1, "")) == "disk"


def test_cause_is_linked_both_ways() -> None:
    root = OSError("io")
    err = RichError("save", 2, "cannot save", caused_by=root)
    assert err.unwrap() is root
    assert unwrap(err) is root
    assert err.__cause__ is root


def test_unwrap_plain_exception_uses_explicit_cause() -> None:
    try:
        try:
            raise KeyError("k")
        except KeyError as exc:
            raise ValueError("v") from exc
    except ValueError as outer:
        caught = outer
    assert isinstance(unwrap(caught), KeyError)


def test_iter_causes_walks_mixed_chain() -> None:
    root = RuntimeError("root")
    middle = RichError("mid", 2, "middle", caused_by=root)
    top = RichError("top", 3, "top", caused_by=middle)
    assert [str(e) for e in iter_causes(top)] == ["top", "middle", "root"]
    assert list(iter_causes(None)) == []


def test_iter_causes_cuts_cycles() -> None:
    first = RichError("a", 1, "a")
    second = RichError("b", 2, "b", caused_by=first)
    first.caused_by = second
    assert [e.name for e in iter_causes(second)] == ["b", "a"]


def test_rich_passes_rich_errors_through() -> None:
    err = RichError("x", 1, "x")
    assert rich(err) is err


def test_rich_adapts_plain_exceptions() -> None:
    root = OSError("io")
    err = ValueError("bad value")
    err.__cause__ = root
    adapted = rich(err)
    assert (adapted.name, adapted.code, adapted.desc) == ("ValueError", 0, "bad value")
    assert adapted.caused_by is root
    assert adapted.data is None and adapted.facility is None
