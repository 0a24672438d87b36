"""Domain-level exception hierarchy for configuration defects.

Purpose
-------
Expose the error taxonomy for defects that mean a catalog and its call sites
are out of sync. These are raised, never returned, and abort the current call
before anything reaches a sink or a hook.

Contents
--------
* :class:`CatalogConfigError` – umbrella base class for every defect.
* :class:`MessageNotFound` – lookup miss.
* :class:`MalformedRecord` – matching record lacks the code field terminator.
* :class:`InvalidCode` – code field is not an integer.
* :class:`DuplicateMessage` – two records share a name (strict validation).
* :class:`ArityMismatch` – fewer arguments than template placeholders.
* :class:`TemplateError` – arguments do not fit the template's conversions.
* :class:`InvalidDataTail` – trailing key/value data is malformed.
* :class:`CatalogFileNotFound` / :class:`InvalidCatalogFile` – file adapter.
* :class:`InvalidSettings` – environment settings cannot be parsed.

System Role
-----------
Business errors are *not* part of this hierarchy; they are
:class:`lib_catalog_log.domain.rich_error.RichError` values handed back to
callers. Catch :class:`CatalogConfigError` to handle every defect uniformly.
"""

from __future__ import annotations


class CatalogConfigError(Exception):
    """Base type for all configuration defects emitted by ``lib_catalog_log``.

    Why
    ----
    Provide a single catch-all type for hosts that turn defects into a startup
    failure.
    """


class MessageNotFound(CatalogConfigError):
    """Raised when no catalog record carries the requested message name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"message {name!r} not found in catalog")
        self.name = name


class MalformedRecord(CatalogConfigError):
    """Raised when a record stops after its name and code fields are missing."""

    def __init__(self, name: str, line: str) -> None:
        super().__init__(f"message {name!r}: bad line {line!r}")
        self.name = name
        self.line = line


class InvalidCode(CatalogConfigError):
    """Raised when the code field of a record does not parse as an integer."""

    def __init__(self, name: str, code: str) -> None:
        super().__init__(f"message {name!r}: bad code {code!r}")
        self.name = name
        self.code = code


class DuplicateMessage(CatalogConfigError):
    """Raised by strict validation when a name appears on more than one record."""

    def __init__(self, name: str) -> None:
        super().__init__(f"message {name!r} is defined more than once")
        self.name = name


class ArityMismatch(CatalogConfigError):
    """Raised when a template has more placeholders than supplied arguments."""

    def __init__(self, template: str, supplied: int, required: int) -> None:
        super().__init__(f"template {template!r} has {supplied} args for {required} placeholders")
        self.template = template
        self.supplied = supplied
        self.required = required


class TemplateError(CatalogConfigError):
    """Raised when printf-style interpolation rejects the supplied values.

    Typical sources are ``%d`` receiving text or an unsupported conversion.
    """


class InvalidDataTail(CatalogConfigError):
    """Raised when trailing data is neither a mapping nor ``key, value`` pairs."""


class CatalogFileNotFound(CatalogConfigError):
    """Raised by the file adapter when a catalog path does not exist."""


class InvalidCatalogFile(CatalogConfigError):
    """Raised by the file adapter when a catalog file is not valid UTF-8 text."""


class InvalidSettings(CatalogConfigError):
    """Raised when environment settings hold values that cannot be parsed."""


__all__ = [
    "ArityMismatch",
    "CatalogConfigError",
    "CatalogFileNotFound",
    "DuplicateMessage",
    "InvalidCatalogFile",
    "InvalidCode",
    "InvalidDataTail",
    "InvalidSettings",
    "MalformedRecord",
    "MessageNotFound",
    "TemplateError",
]
