"""Causal-chain capable business error value.

Purpose
-------
Carry a fully resolved catalog message (name, code, description, link, data)
together with the error that caused it, so it can be returned to callers,
chained into further errors, and reported later without touching the catalog
again.

Contents
--------
* :class:`RichError` – the error value produced by the error factory.
* :func:`rich` – view any exception as a :class:`RichError`.
* :func:`unwrap` – step one link down a causal chain.
* :func:`iter_causes` – walk a causal chain, cutting cycles.

System Role
-----------
This is the Tier B half of the error taxonomy: values are built by
:meth:`lib_catalog_log.application.facility.Facility.new_error` and only ever
surface through :meth:`~lib_catalog_log.application.facility.Facility.report`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Mapping

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..application.facility import Facility


class RichError(Exception):
    """Error value enriched with catalog metadata and an optional cause.

    Parameters
    ----------
    name:
        Catalog message name (empty for errors adapted by :func:`rich`).
    code:
        Numeric catalog code.
    desc:
        Resolved, interpolated description.
    link:
        Documentation link or ``None``.
    data:
        Keyed auxiliary data or ``None``.
    caused_by:
        Exception this error wraps, or ``None``.
    facility:
        Owning facility, set only when ``data`` is present so the error can be
        re-dispatched through :meth:`Facility.report`.

    Examples
    --------
    >>> root = RichError("disk", 7, "disk full")
    >>> err = RichError("save", 12, "cannot save", caused_by=root)
    >>> str(err), err.unwrap() is root
    ('cannot save', True)
    """

    def __init__(
        self,
        name: str,
        code: int,
        desc: str,
        link: str | None = None,
        data: Mapping[str, Any] | None = None,
        caused_by: BaseException | None = None,
        facility: "Facility | None" = None,
    ) -> None:
        super().__init__(desc)
        self.name = name
        self.code = code
        self.desc = desc
        self.link = link
        self.data = data
        self.caused_by = caused_by
        self.facility = facility
        if caused_by is not None:
            self.__cause__ = caused_by

    def __str__(self) -> str:
        return self.desc or self.name

    def __repr__(self) -> str:
        return f"RichError(name={self.name!r}, code={self.code!r}, desc={self.desc!r})"

    def unwrap(self) -> BaseException | None:
        """Return the directly wrapped cause, if any."""

        return self.caused_by


def unwrap(err: BaseException) -> BaseException | None:
    """Return the cause of *err*.

    :class:`RichError` answers with ``caused_by``; any other exception with its
    explicit ``__cause__`` (``raise ... from ...``).
    """

    if isinstance(err, RichError):
        return err.caused_by
    return err.__cause__


def iter_causes(err: BaseException | None) -> Iterator[BaseException]:
    """Yield *err* and every cause below it.

    Stops at the first missing cause and never yields the same object twice.

    Examples
    --------
    >>> inner = ValueError("bad")
    >>> outer = RichError("x", 1, "outer", caused_by=inner)
    >>> [str(e) for e in iter_causes(outer)]
    ['outer', 'bad']
    """

    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = unwrap(current)


def rich(err: BaseException) -> RichError:
    """Return *err* as a :class:`RichError`.

    Plain exceptions are adapted: the type name becomes the message name, the
    text becomes the description, code is ``0``, and ``__cause__`` becomes the
    cause.

    Examples
    --------
    >>> adapted = rich(KeyError("id"))
    >>> adapted.name, adapted.code
    ('KeyError', 0)
    """

    if isinstance(err, RichError):
        return err
    return RichError(type(err).__name__, 0, str(err), caused_by=err.__cause__)


__all__ = ["RichError", "iter_causes", "rich", "unwrap"]
