"""
Sample data generator for the record store.

Writes a deterministic pseudo-random `{"data": [...]}` document that the
CLI and the pipeline can load directly.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path

import typer

from record_store.domain.models import Record
from record_store.infrastructure.json_files import export_records

app = typer.Typer(help="Generate a synthetic record file (JSON with a top-level 'data' array).")

NAMES = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta"]


def _generate_records(rows: int, seed: int) -> list[Record]:
    rng = random.Random(seed)
    return [
        Record(
            id=i,
            name=rng.choice(NAMES),
            value=round(rng.uniform(-50, 100), 2),
        )
        for i in range(1, rows + 1)
    ]


def _write_records_json(json_path: Path, rows: int, seed: int) -> Path:
    return export_records(json_path, _generate_records(rows, seed))


@app.callback()
def cli() -> None:
    """
    Generate synthetic record files for the record store.
    """


@app.command("generate")
def generate(
    rows: int = typer.Option(
        20,
        "--rows",
        "-r",
        help="Number of records to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data.json"),
        "--out",
        "--output",
        "-o",
        help="Output JSON path (overwritten if present).",
    ),
) -> None:
    """
    Generate synthetic records and write them as JSON.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {rows:,} records -> {output} (seed={seed})")
    written = _write_records_json(output, rows=rows, seed=seed)
    duration = time.perf_counter() - start
    typer.echo(f"Wrote {written} in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
