"""Starter catalog and settings files for a new facility.

``generate_examples`` writes ``<facility>.messages.csv`` (a catalog covering
plain, interpolated, escaped-percent and annotated records) and
``<facility>.env.example`` (the ``LIB_CATALOG_LOG_*`` variables read by
:func:`lib_catalog_log.core.facility_from_env`). Existing files are left alone
unless ``force`` is set. The CLI ``generate-example`` command is a thin
wrapper around it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from ..adapters.env.default import default_env_prefix
from ..core import DEFAULT_SLUG


@dataclass(frozen=True, slots=True)
class ExampleSpec:
    """One generated file: where it goes, relative to the destination, and its text."""

    relative_path: Path
    content: str


def generate_examples(destination: str | Path, *, facility: str, force: bool = False) -> list[Path]:
    """Write the starter files for *facility* under *destination*.

    Returns the paths actually written; files that already exist are skipped
    (and not returned) unless *force* is ``True``. Missing directories are
    created.

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> with TemporaryDirectory() as tmp:
    ...     first = generate_examples(tmp, facility='billing')
    ...     again = generate_examples(tmp, facility='billing')
    >>> sorted(path.name for path in first), again
    (['billing.env.example', 'billing.messages.csv'], [])
    """

    return list(_materialise(Path(destination), _build_specs(facility), force))


def _materialise(root: Path, specs: Iterable[ExampleSpec], force: bool) -> Iterator[Path]:
    for spec in specs:
        target = root / spec.relative_path
        if target.exists() and not force:
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(spec.content, encoding="utf-8")
        yield target


def _build_specs(facility: str) -> Iterator[ExampleSpec]:
    """Yield the catalog and the settings file for *facility*.

    Examples
    --------
    >>> [spec.relative_path.name for spec in _build_specs('demo')]
    ['demo.messages.csv', 'demo.env.example']
    """

    yield ExampleSpec(
        Path(f"{facility}.messages.csv"),
        f"""# Message catalog for the {facility} facility
# name;code;description[;notes ignored by lookup]
started;1000;Service started
listening;1001;Listening on %s:%d
request_failed;2000;Request %s failed;retried by the caller
config_reloaded;1002;Configuration reloaded
quota_exceeded;3000;Quota of 100%% exceeded for %s
""",
    )
    prefix = default_env_prefix(DEFAULT_SLUG)
    yield ExampleSpec(
        Path(f"{facility}.env.example"),
        f"""# Export these to configure the {facility} facility
{prefix}_NAME={facility}
{prefix}_CATALOG=./{facility}.messages.csv
{prefix}_MASK=info,warn,error
{prefix}_STRICT=true
{prefix}_LINK_BASE=https://docs.example.com/messages/
""",
    )
