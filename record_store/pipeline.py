"""
End-to-end processing pipeline: load, derive views, summarize, export.

Usage (example from CLI):
    from record_store.pipeline import run_pipeline

    result = run_pipeline(data_path="data.json", min_value=10, output_dir="out")
    print(result.summary)

Outputs are written to `output_dir` when `persist` is true:
- `filteredData.json` (records with value >= min_value, load order)
- `sortedData.json` (all records ordered by name)
- `groupedData.json` (records grouped by name, in sorted order)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from record_store.config import get_settings
from record_store.domain.models import Grouping, Record
from record_store.infrastructure.json_files import ExportPayload, export_records
from record_store.store import RecordStore, StoreSummary
from record_store.utils.logging import get_logger

log = get_logger(__name__)

# Export order matters: "sorted" reorders the store before "grouped" runs.
VIEW_FILENAMES: Dict[str, str] = {
    "filtered": "filteredData.json",
    "sorted": "sortedData.json",
    "grouped": "groupedData.json",
}


@dataclass
class PipelineResult:
    """Views, statistics and written files of one pipeline run."""

    source: Path
    min_value: float
    filtered: List[Record]
    ordered: Tuple[Record, ...]
    grouped: Grouping
    summary: StoreSummary
    outputs: Dict[str, Path] = field(default_factory=dict)


def _view_builders(min_value: float) -> Dict[str, Callable[[RecordStore], ExportPayload]]:
    """Registry of exportable views, in execution order."""
    return {
        "filtered": lambda store: store.filter_by_value(min_value),
        "sorted": lambda store: store.sort_by_name(),
        "grouped": lambda store: store.group_by_name(),
    }


def available_views() -> List[str]:
    """List exportable view names."""
    return sorted(VIEW_FILENAMES)


def _persist_views(views: Dict[str, ExportPayload], output_dir: Path) -> Dict[str, Path]:
    written: Dict[str, Path] = {}
    for name, payload in views.items():
        written[name] = export_records(output_dir / VIEW_FILENAMES[name], payload)
    log.info("Views persisted", extra={"output_dir": str(output_dir), "files": len(written)})
    return written


def run_pipeline(
    data_path: Optional[Path | str] = None,
    min_value: Optional[float] = None,
    output_dir: Optional[Path | str] = None,
    persist: bool = True,
    store: Optional[RecordStore] = None,
) -> PipelineResult:
    """
    Load `data_path`, derive the filtered/sorted/grouped views and statistics.

    Parameters
    ----------
    data_path : Path | str | None
        Input JSON file. Defaults to settings.data_path.
    min_value : float | None
        Threshold for the filtered view. Defaults to settings.min_value.
    output_dir : Path | str | None
        Directory for the exported views. Defaults to settings.output_dir.
    persist : bool
        Whether to write the views to disk.
    store : RecordStore | None
        Store to load into. A fresh one is created when omitted.

    Returns
    -------
    PipelineResult
        The derived views, the summary statistics and any written paths.

    Raises
    ------
    MalformedInputError
        If the input file cannot be loaded.
    ExportError
        If a view cannot be written to `output_dir`.
    """
    settings = get_settings()
    source = Path(data_path if data_path is not None else settings.data_path)
    threshold = min_value if min_value is not None else settings.min_value
    target_dir = Path(output_dir if output_dir is not None else settings.output_dir)

    log.info("[PIPELINE START]", extra={"source": str(source), "min_value": threshold})
    store = store if store is not None else RecordStore()
    store.load(source)

    views: Dict[str, ExportPayload] = {}
    for name, build in _view_builders(threshold).items():
        views[name] = build(store)
        log.info(f"[VIEW] {name}", extra={"view": name})

    summary = store.summary()
    if summary.count == 0:
        log.warning(
            "Store is empty; minimum and maximum are undefined", extra={"source": str(source)}
        )
    log.info(
        "[SUMMARY]",
        extra={
            "rows": summary.count,
            "average": summary.average,
            "minimum": summary.minimum,
            "maximum": summary.maximum,
        },
    )

    result = PipelineResult(
        source=source,
        min_value=threshold,
        filtered=views["filtered"],  # type: ignore[arg-type]
        ordered=views["sorted"],  # type: ignore[arg-type]
        grouped=views["grouped"],  # type: ignore[arg-type]
        summary=summary,
    )

    if persist:
        result.outputs = _persist_views(views, target_dir)

    log.info("[PIPELINE COMPLETE]", extra={"rows": summary.count, "persisted": persist})
    return result


__all__ = [
    "PipelineResult",
    "VIEW_FILENAMES",
    "available_views",
    "run_pipeline",
]
