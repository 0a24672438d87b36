"""Command line interface for ``lib_catalog_log``.

Operators use it to work with catalog files without writing Python: resolve a
message, validate a file, render a line exactly as a facility would, or
scaffold a starter catalog.

Commands
--------
* ``info`` – installed version and Python requirement.
* ``lookup`` – one entry plus its interpolated description, as JSON.
* ``check`` – validates every record of one or more catalog files.
* ``emit`` – dispatches a message and prints the rendered line.
* ``encode`` – shows what the log-value encoder does to a value.
* ``generate-example`` – writes a starter catalog and settings file.

:func:`main` is the console-script entry point. It runs :func:`cli` through
``lib_cli_exit_tools`` so catalog defects end as a short message and a
non-zero exit code instead of a traceback (unless ``--traceback`` is given).
The commands only use the composition root in :mod:`lib_catalog_log.core`.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Any, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.sinks.default import MemorySink
from .application.arguments import encode_log_value
from .core import load_catalog, new_facility
from .domain.levels import ALL_LEVELS, Level, parse_level, parse_mask
from .domain.message import Message
from .examples import generate_examples as _generate_examples

DIST_NAME: Final[str] = "lib_catalog_log"
CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
LEVEL_CHOICES: Final[tuple[str, ...]] = ("none", "info", "warn", "error")

# Characters of exception text printed by main(): short by default, long with --traceback.
_ERROR_TEXT_LIMITS: Final[dict[bool, int]] = {False: 500, True: 10_000}

_CATALOG_PATH = click.Path(path_type=Path, exists=True, dir_okay=False, readable=True)


def _installed_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(help="Catalogued, leveled diagnostics", context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=_installed_version(), prog_name=DIST_NAME, message="%(prog)s version %(version)s")
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full traceback when a catalog defect aborts a command",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root group; ``--traceback`` is forwarded to ``lib_cli_exit_tools.config``."""

    ctx.ensure_object(dict)["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show the installed distribution name, version and Python requirement."""

    try:
        meta = metadata.metadata(DIST_NAME)
    except metadata.PackageNotFoundError:
        click.echo(f"{DIST_NAME} (metadata unavailable)")
        return
    rows = [
        ("Version", meta.get("Version", _installed_version())),
        ("Requires-Python", meta.get("Requires-Python", ">=3.11")),
        ("Summary", meta.get("Summary")),
    ]
    click.echo(f"{meta.get('Name', DIST_NAME)}:")
    for label, value in rows:
        if value:
            click.echo(f"  {label:<16}: {value}")


@cli.command("lookup", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("catalog", type=_CATALOG_PATH)
@click.argument("name")
@click.argument("args", nargs=-1)
@click.option("--link-base", default=None, help="Documentation link prefix applied to every entry")
def cli_lookup(catalog: Path, name: str, args: Sequence[str], link_base: Optional[str]) -> None:
    """Resolve NAME in CATALOG, filling placeholders from ARGS, and print JSON.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> target = Path(tmp.name) / "messages.csv"
    >>> _ = target.write_text("X;123;msg %s\\n", encoding="utf-8")
    >>> result = CliRunner().invoke(cli, ["lookup", str(target), "X", "hi"])
    >>> json.loads(result.output)["description"]
    'msg hi'
    >>> tmp.cleanup()
    """

    facility = new_facility("cli", load_catalog(str(catalog), link_base=link_base), sink=MemorySink())
    entry = facility.catalog.lookup(name)
    resolved = facility.lookup(name, *_coerce_args(args))
    payload = {
        "name": entry.name,
        "code": entry.code,
        "template": entry.template,
        "description": resolved.desc,
        "link": entry.link,
        "data": _jsonable(resolved.data),
    }
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@cli.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("catalogs", nargs=-1, required=True, type=_CATALOG_PATH)
def cli_check(catalogs: Sequence[Path]) -> None:
    """Validate every record of CATALOGS; exit non-zero on the first defect."""

    catalog = load_catalog(*(str(path) for path in catalogs))
    records = catalog.validate()
    click.echo(json.dumps({"files": [str(path) for path in catalogs], "records": records}))


@cli.command("emit", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("catalog", type=_CATALOG_PATH)
@click.argument("name")
@click.argument("args", nargs=-1)
@click.option(
    "--level",
    default="info",
    show_default=True,
    type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
    help="Severity to dispatch at",
)
@click.option("--field", "fields", multiple=True, help="Keyed data as key=value (repeatable)")
@click.option("--mask", default=None, help="Levels written to output, e.g. 'warn,error' (default: all)")
@click.option("--facility", "facility_name", default="cli", show_default=True, help="Facility name")
@click.option("--json/--no-json", "as_json", default=False, help="Print the dispatched message as JSON too")
def cli_emit(
    catalog: Path,
    name: str,
    args: Sequence[str],
    level: str,
    fields: Sequence[str],
    mask: Optional[str],
    facility_name: str,
    as_json: bool,
) -> None:
    """Dispatch NAME from CATALOG and print the rendered line.

    ARGS fill the template's placeholders; numeric-looking values are passed
    as numbers so ``%d`` conversions work.
    """

    sink = MemorySink()
    facility = new_facility(
        facility_name,
        load_catalog(str(catalog)),
        mask=parse_mask(mask) if mask is not None else ALL_LEVELS,
        sink=sink,
    )
    message = facility.log(parse_level(level), name, *_coerce_args(args), data=_parse_fields(fields))
    if sink.getvalue():
        click.echo(sink.getvalue(), nl=False)
    if as_json:
        click.echo(json.dumps(_message_payload(message), ensure_ascii=False))


@cli.command("encode", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
def cli_encode(value: str) -> None:
    """Print VALUE as it would appear in a ``key=value`` pair.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> CliRunner().invoke(cli, ["encode", 'say "hi"']).output
    'say \\\\"hi\\\\"\\n'
    """

    click.echo(encode_log_value(value))


@cli.command("generate-example", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--destination",
    required=True,
    type=click.Path(path_type=Path, file_okay=False, resolve_path=True),
    help="Directory for <facility>.messages.csv and <facility>.env.example",
)
@click.option("--facility", required=True, help="Facility name used in file names and settings")
@click.option("--force/--no-force", default=False, show_default=True, help="Replace files that already exist")
def cli_generate_example(destination: Path, facility: str, force: bool) -> None:
    """Scaffold a starter catalog and settings file; prints the paths written."""

    written = _generate_examples(destination, facility=facility, force=force)
    click.echo(json.dumps([str(path) for path in written], indent=2))


def _coerce_args(values: Sequence[str]) -> list[Any]:
    """Turn CLI strings into ints/floats where they look numeric.

    Examples
    --------
    >>> _coerce_args(["10", "-3", "2.5", "host"])
    [10, -3, 2.5, 'host']
    """

    return [_coerce(value) for value in values]


def _coerce(value: str) -> Any:
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def _parse_fields(values: Sequence[str]) -> Optional[dict[str, Any]]:
    """Parse ``key=value`` options into a mapping (``None`` when empty).

    Examples
    --------
    >>> _parse_fields(["user=ada", "retries=3"])
    {'user': 'ada', 'retries': 3}
    """

    if not values:
        return None
    parsed: dict[str, Any] = {}
    for item in values:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, found {item!r}", param_hint="--field")
        parsed[key] = _coerce(raw)
    return parsed


def _message_payload(message: Message) -> dict[str, Any]:
    level = Level(message.level)
    return {
        "facility": message.facility,
        "level": level.name,
        "name": message.name,
        "code": message.code,
        "description": message.desc,
        "link": message.link,
        "caused_by": str(message.caused_by) if message.caused_by is not None else None,
        "data": _jsonable(message.data),
    }


def _jsonable(data: Any) -> Optional[dict[str, Any]]:
    if not data:
        return None
    return {str(key): value if isinstance(value, (str, int, float, bool)) or value is None else str(value) for key, value in data.items()}


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Run :func:`cli` and return its exit code instead of exiting.

    Catalog defects and other failures are printed through
    ``lib_cli_exit_tools`` and mapped to a non-zero code. With
    *restore_traceback* the traceback settings toggled by ``--traceback`` are
    put back afterwards, which keeps repeated in-process calls independent.
    """

    config = lib_cli_exit_tools.config
    saved = (getattr(config, "traceback", False), getattr(config, "traceback_force_color", False))
    try:
        return _run(argv)
    finally:
        if restore_traceback:
            config.traceback, config.traceback_force_color = saved


def _run(argv: Optional[Sequence[str]]) -> int:
    try:
        return lib_cli_exit_tools.run_cli(cli, argv=None if argv is None else list(argv), prog_name=DIST_NAME)
    except BaseException as exc:  # noqa: BLE001 - every failure becomes an exit code
        verbose = bool(lib_cli_exit_tools.config.traceback)
        lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=_ERROR_TEXT_LIMITS[verbose])
        return lib_cli_exit_tools.get_system_exit_code(exc)


if __name__ == "__main__":  # pragma: no cover - console entry point
    sys.exit(main(sys.argv[1:]))
