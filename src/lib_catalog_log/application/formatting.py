"""Template interpolation and tail splitting.

Contents
    - ``count_placeholders``: number of arguments a template consumes.
    - ``interpolate``: resolve a template and return the unconsumed tail.
    - ``split_tail``: peel an optional scope, then an optional cause, off a tail.

System Role
-----------
Shared by catalogued dispatch, ``printf`` and the error factory. Errors raised
here are configuration defects: they mean a call site does not match the
template it names.
"""

from __future__ import annotations

import re
from typing import Any, Final, Sequence

from ..domain.errors import ArityMismatch, TemplateError
from ..domain.scope import Scope

_ESCAPE_OR_VERB: Final[re.Pattern[str]] = re.compile(r"%(%|v)")


def count_placeholders(template: str) -> int:
    """Count ``%`` signs that are not part of a ``%%`` escape.

    Examples
    --------
    >>> count_placeholders("%s of %d")
    2
    >>> count_placeholders("100%% sure")
    0
    >>> count_placeholders("%%%s")
    1
    """

    count = 0
    index = template.find("%")
    while index != -1:
        if template.startswith("%", index + 1):
            index = template.find("%", index + 2)
            continue
        count += 1
        index = template.find("%", index + 1)
    return count


def interpolate(template: str, args: Sequence[Any]) -> tuple[str, list[Any]]:
    """Return ``(description, tail)`` for *template* applied to *args*.

    With no placeholders the template is returned verbatim (``%%`` included)
    and every argument is tail.

    Raises
    ------
    ArityMismatch
        Fewer arguments than placeholders.
    TemplateError
        The values do not fit the conversions.

    Examples
    --------
    >>> interpolate("msg %s", ["hi", "key", 1])
    ('msg hi', ['key', 1])
    >>> interpolate("plain", ["key", 1])
    ('plain', ['key', 1])
    >>> interpolate("took %v ms", [12])
    ('took 12 ms', [])
    """

    required = count_placeholders(template)
    if len(args) < required:
        raise ArityMismatch(template, len(args), required)
    if required == 0:
        return template, list(args)
    pattern = _ESCAPE_OR_VERB.sub(_normalise_conversion, template)
    try:
        desc = pattern % tuple(args[:required])
    except (TypeError, ValueError, KeyError) as exc:
        raise TemplateError(f"template {template!r} rejected its arguments: {exc}") from exc
    return desc, list(args[required:])


def split_tail(tail: Sequence[Any]) -> tuple[Scope | None, BaseException | None, list[Any]]:
    """Strip a leading :class:`Scope`, then a leading exception, from *tail*.

    The order is fixed: a scope placed after the cause is not recognised and
    stays in the data tail. A leading ``None`` in the cause slot means "no
    cause" and is dropped, since it can never be a data key.

    Examples
    --------
    >>> scope = Scope()
    >>> cause = ValueError("boom")
    >>> split_tail([scope, cause, "k", 1]) == (scope, cause, ["k", 1])
    True
    >>> split_tail(["k", 1])
    (None, None, ['k', 1])
    >>> split_tail([scope, None, "k", 1]) == (scope, None, ["k", 1])
    True
    """

    rest = list(tail)
    scope: Scope | None = None
    cause: BaseException | None = None
    if rest and isinstance(rest[0], Scope):
        scope = rest.pop(0)
    if rest and isinstance(rest[0], BaseException):
        cause = rest.pop(0)
    elif rest and rest[0] is None:
        rest.pop(0)
    return scope, cause, rest


def _normalise_conversion(match: re.Match[str]) -> str:
    return "%%" if match.group(1) == "%" else "%s"


__all__ = ["count_placeholders", "interpolate", "split_tail"]
