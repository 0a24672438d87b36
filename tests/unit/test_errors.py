from __future__ import annotations

from lib_catalog_log.domain.errors import (
    ArityMismatch,
    CatalogConfigError,
    CatalogFileNotFound,
    DuplicateMessage,
    InvalidCatalogFile,
    InvalidCode,
    InvalidDataTail,
    InvalidSettings,
    MalformedRecord,
    MessageNotFound,
    TemplateError,
)
from lib_catalog_log.domain.rich_error import RichError


def test_error_hierarchy() -> None:
    defects = (
        MessageNotFound("x"),
        MalformedRecord("x", "x;1"),
        InvalidCode("x", "one"),
        DuplicateMessage("x"),
        ArityMismatch("%s", 0, 1),
        TemplateError(""),
        InvalidDataTail(""),
        CatalogFileNotFound(""),
        InvalidCatalogFile(""),
        InvalidSettings(""),
    )
    for exception in defects:
        assert isinstance(exception, CatalogConfigError)


def test_business_errors_are_not_defects() -> None:
    assert not issubclass(RichError, CatalogConfigError)


def test_messages_name_the_offender() -> None:
    assert "'login'" in str(MessageNotFound("login"))
    assert "bad code 'one'" in str(InvalidCode("login", "one"))
    assert str(ArityMismatch("%s %s", 1, 2)) == "template '%s %s' has 1 args for 2 placeholders"
