from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from record_store.config import get_settings
from record_store.errors import RecordStoreError
from record_store.infrastructure.json_files import export_records
from record_store.pipeline import run_pipeline
from record_store.reporter import print_groups, print_records, print_summary
from record_store.store import RecordStore
from record_store.utils.collation import configure_collation
from record_store.utils.logging import configure_logging

app = typer.Typer(help="Record Store CLI: filter, sort, group and summarize JSON records.")


def _path_argument() -> typer.models.ArgumentInfo:
    return typer.Argument(
        None, help="JSON file with a top-level 'data' array (default from settings)."
    )


def _out_option() -> typer.models.OptionInfo:
    return typer.Option(
        None, "--out", "-o", help="Write the result as JSON to this path (overwrites)."
    )


def _bootstrap() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    configure_collation(settings.sort_locale)


def _load_store(path: Optional[Path]) -> RecordStore:
    store = RecordStore()
    store.load(path if path is not None else get_settings().data_path)
    return store


def _fail(exc: RecordStoreError) -> NoReturn:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | data={settings.data_path} | output_dir={settings.output_dir} | "
        f"min_value={settings.min_value} | locale={settings.sort_locale or '<environment>'} | "
        f"log={settings.log_level}{' (json)' if settings.log_json else ''}"
    )


@app.command()
def summary(path: Optional[Path] = _path_argument()) -> None:
    """
    Print record count, average, minimum and maximum value.
    """
    _bootstrap()
    try:
        store = _load_store(path)
    except RecordStoreError as exc:
        _fail(exc)
    print_summary(store.summary())


@app.command("filter")
def filter_records(
    path: Optional[Path] = _path_argument(),
    min_value: Optional[float] = typer.Option(
        None,
        "--min-value",
        "-m",
        help="Keep records with value >= this threshold (default from settings).",
    ),
    out: Optional[Path] = _out_option(),
) -> None:
    """
    Show records whose value is at least the threshold, in load order.
    """
    _bootstrap()
    threshold = min_value if min_value is not None else get_settings().min_value
    try:
        store = _load_store(path)
        records = store.filter_by_value(threshold)
        if out is not None:
            export_records(out, records)
    except RecordStoreError as exc:
        _fail(exc)
    print_records(records, title=f"Records with value >= {threshold:g}")


@app.command("sort")
def sort_records(
    path: Optional[Path] = _path_argument(), out: Optional[Path] = _out_option()
) -> None:
    """
    Show records ordered by name.
    """
    _bootstrap()
    try:
        store = _load_store(path)
        records = store.sort_by_name()
        if out is not None:
            export_records(out, records)
    except RecordStoreError as exc:
        _fail(exc)
    print_records(records, title="Records by Name")


@app.command("group")
def group_records(
    path: Optional[Path] = _path_argument(), out: Optional[Path] = _out_option()
) -> None:
    """
    Show records grouped by name.
    """
    _bootstrap()
    try:
        store = _load_store(path)
        groups = store.group_by_name()
        if out is not None:
            export_records(out, groups)
    except RecordStoreError as exc:
        _fail(exc)
    print_groups(groups)


@app.command()
def run(
    path: Optional[Path] = _path_argument(),
    min_value: Optional[float] = typer.Option(
        None,
        "--min-value",
        "-m",
        help="Threshold for the filtered view (default from settings).",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-d",
        help="Directory for filteredData.json, sortedData.json and groupedData.json.",
    ),
    persist: bool = typer.Option(
        True,
        "--persist/--no-persist",
        help="Write the derived views to the output directory.",
    ),
) -> None:
    """
    Load, filter, sort, group, summarize and export in one pass.
    """
    _bootstrap()
    try:
        result = run_pipeline(
            data_path=path, min_value=min_value, output_dir=output_dir, persist=persist
        )
    except RecordStoreError as exc:
        _fail(exc)

    print_records(result.filtered, title=f"Records with value >= {result.min_value:g}")
    print_records(result.ordered, title="Records by Name")
    print_groups(result.grouped)
    print_summary(result.summary)
    for name, written in result.outputs.items():
        typer.echo(f"Wrote {name} view to {written}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
