"""Keyed data classification, rendering and log-value encoding.

Purpose
-------
Interpret whatever is left of a call's arguments once the template, scope and
cause have been taken, and render it as `` key=value`` pairs.

Contents
    - ``classify_data``: tail -> mapping (or ``None``).
    - ``merge_data``: combine positional data with an explicit ``data=``.
    - ``render_data``: mapping -> `` key=value`` text.
    - ``encode_log_value``: escape values that contain whitespace or quotes.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Final, Sequence

from ..domain.errors import InvalidDataTail

_UNSAFE: Final[re.Pattern[str]] = re.compile(r'[\s"]')
_ESCAPES: Final[dict[str, str]] = {"\\": "\\\\", '"': '\\"'}


def classify_data(tail: Sequence[Any]) -> Mapping[str, Any] | None:
    """Return the keyed data described by *tail*.

    Rules, in order: an empty tail is no data; a single list/tuple is
    classified recursively; a single mapping is used as is; anything else must
    be ``key, value`` pairs with ``str`` keys.

    Raises
    ------
    InvalidDataTail
        Odd length or a non-``str`` key.

    Examples
    --------
    >>> classify_data(["A", 1, "B", "foo"])
    {'A': 1, 'B': 'foo'}
    >>> classify_data([("A", 1)])
    {'A': 1}
    >>> classify_data([{"A": 1}])
    {'A': 1}
    >>> classify_data([]) is None
    True
    """

    if not tail:
        return None
    if len(tail) == 1:
        only = tail[0]
        if isinstance(only, (list, tuple)):
            return classify_data(only)
        if isinstance(only, Mapping):
            return only or None
    if len(tail) % 2 != 0:
        raise InvalidDataTail(f"bad argument count {len(tail)}, must be multiple of two")
    data: dict[str, Any] = {}
    for index in range(0, len(tail), 2):
        key = tail[index]
        if not isinstance(key, str):
            raise InvalidDataTail(f"bad argument {index}: expected str, found {type(key).__name__}")
        data[key] = tail[index + 1]
    return data


def merge_data(positional: Mapping[str, Any] | None, explicit: Any) -> Mapping[str, Any] | None:
    """Overlay an explicit ``data=`` argument on positionally supplied data.

    *explicit* may be a mapping or a flat ``key, value`` sequence.

    Examples
    --------
    >>> merge_data({"a": 1}, {"b": 2})
    {'a': 1, 'b': 2}
    >>> merge_data(None, ["a", 1])
    {'a': 1}
    """

    if explicit is None:
        return positional
    if isinstance(explicit, Mapping):
        extra: Mapping[str, Any] | None = explicit or None
    elif isinstance(explicit, (list, tuple)):
        extra = classify_data(explicit)
    else:
        raise InvalidDataTail(f"data must be a mapping or a key/value sequence, found {type(explicit).__name__}")
    if not positional:
        return extra
    if not extra:
        return positional
    return {**positional, **extra}


def render_data(data: Mapping[str, Any] | None) -> str:
    """Render *data* as `` key=value`` pairs in iteration order.

    Examples
    --------
    >>> render_data({"A": 1, "note": "two words"})
    ' A=1 note=two words'
    """

    if not data:
        return ""
    return "".join(f" {key}={encode_log_value(str(value))}" for key, value in data.items())


def encode_log_value(text: str) -> str:
    """Escape backslashes and double quotes in values that need it.

    Text without whitespace and without ``"`` is returned unchanged.

    Examples
    --------
    >>> encode_log_value("plain")
    'plain'
    >>> print(encode_log_value('He said "hi"'))
    He said \\"hi\\"
    >>> print(encode_log_value("C:\\\\tmp dir"))
    C:\\\\tmp dir
    """

    if not _UNSAFE.search(text):
        return text
    return "".join(_ESCAPES.get(char, char) for char in text)


__all__ = ["classify_data", "encode_log_value", "merge_data", "render_data"]
