from __future__ import annotations

import pytest

from lib_catalog_log.application.catalog import Catalog, CatalogEntry
from lib_catalog_log.domain.errors import DuplicateMessage, InvalidCode, MalformedRecord, MessageNotFound


def test_lookup_returns_entry(messages: str) -> None:
    entry = Catalog(messages).lookup("greet")
    assert entry == CatalogEntry(name="greet", code=200, template="Hello %s, you have %d new messages", link=None)


def test_comments_and_separator_less_lines_are_skipped() -> None:
    catalog = Catalog("# a;1;comment\njust prose\nreal;2;Real\n")
    assert catalog.names() == ["real"]
    with pytest.raises(MessageNotFound):
        catalog.lookup("# a")


def test_fields_are_trimmed_and_extra_fields_ignored(messages: str) -> None:
    entry = Catalog(messages).lookup("spaced")
    assert entry.code == 42
    assert entry.template == "padded description"


def test_windows_line_endings() -> None:
    entry = Catalog("a;1;First\r\nb;2;Second\r\n").lookup("a")
    assert entry.template == "First"


def test_first_record_wins() -> None:
    catalog = Catalog("dup;1;first\ndup;2;second\n")
    assert catalog.lookup("dup").code == 1


def test_name_must_match_exactly() -> None:
    catalog = Catalog(" padded;1;x\n")
    with pytest.raises(MessageNotFound):
        catalog.lookup("padded")


def test_signed_codes() -> None:
    assert Catalog("neg;-5;x").lookup("neg").code == -5
    assert Catalog("pos;+5;x").lookup("pos").code == 5


@pytest.mark.parametrize("code", ["abc", "1.5", "", "1_000"])
def test_bad_code(code: str) -> None:
    with pytest.raises(InvalidCode) as info:
        Catalog(f"bad;{code};desc").lookup("bad")
    assert info.value.name == "bad"


def test_missing_code_terminator() -> None:
    with pytest.raises(MalformedRecord):
        Catalog("short;12").lookup("short")


def test_bad_record_elsewhere_does_not_affect_lookup() -> None:
    catalog = Catalog("broken;x;y\nfine;1;ok\n")
    assert catalog.lookup("fine").code == 1


def test_description_without_trailing_separator() -> None:
    assert Catalog("a;1;  the rest  ").lookup("a").template == "the rest"


def test_link_base() -> None:
    catalog = Catalog("a;1;x\n", link_base="https://docs.example.com/m/")
    assert catalog.lookup("a").link == "https://docs.example.com/m/a"


def test_validate_counts_records(messages: str) -> None:
    assert Catalog(messages).validate() == 6


def test_validate_reports_first_defect() -> None:
    with pytest.raises(InvalidCode):
        Catalog("fine;1;ok\nbroken;x;y\n").validate()


def test_validate_rejects_duplicates() -> None:
    with pytest.raises(DuplicateMessage):
        Catalog("dup;1;first\ndup;2;second\n").validate()


def test_membership(messages: str) -> None:
    catalog = Catalog(messages)
    assert "test" in catalog
    assert "missing" not in catalog
