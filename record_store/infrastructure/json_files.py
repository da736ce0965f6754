"""
JSON file loader and exporter.

Both sides use the `{"data": ...}` envelope. Loading validates every element
against the `Record` schema; exporting accepts either an ordered sequence of
records or a name-keyed grouping.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Sequence, Union

from pydantic import ValidationError

from record_store.domain.models import GroupedRecordDocument, Grouping, Record, RecordDocument
from record_store.errors import ExportError, MalformedInputError
from record_store.utils.logging import get_logger

log = get_logger(__name__)

ExportPayload = Union[Sequence[Record], Mapping[str, Sequence[Record]]]


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    extra = exc.error_count() - 1
    suffix = f" (+{extra} more)" if extra else ""
    return f"{location}: {first['msg']}{suffix}"


def load_records(path: Path | str) -> List[Record]:
    """
    Read `path` and return the records under its `data` key, in file order.

    Raises
    ------
    MalformedInputError
        If the file cannot be read, is not valid JSON, lacks a `data` array,
        or contains an element that is not a valid record.
    """
    file_path = Path(path).resolve()
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(f"cannot read file ({exc})", path=file_path) from exc

    try:
        document = RecordDocument.model_validate_json(content)
    except ValidationError as exc:
        raise MalformedInputError(
            f"invalid record document: {_describe_validation_error(exc)}", path=file_path
        ) from exc

    log.info(
        f"Loaded {len(document.data)} records",
        extra={"path": str(file_path), "rows": len(document.data)},
    )
    return document.data


def export_records(path: Path | str, data: ExportPayload) -> Path:
    """
    Write `{"data": data}` as JSON to `path`, overwriting any existing file.

    `data` is either a sequence of records or a mapping of name to records.
    Missing parent directories are created. Returns the resolved path.

    Raises
    ------
    ExportError
        If the directory or the file cannot be written.
    """
    file_path = Path(path).resolve()

    document: Union[RecordDocument, GroupedRecordDocument]
    if isinstance(data, Mapping):
        grouping: Grouping = {name: list(records) for name, records in data.items()}
        document = GroupedRecordDocument(data=grouping)
        rows = sum(len(records) for records in grouping.values())
    else:
        document = RecordDocument(data=list(data))
        rows = len(document.data)

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"cannot write file ({exc})", path=file_path) from exc

    log.info(
        f"Exported {rows} records",
        extra={"path": str(file_path), "rows": rows, "grouped": isinstance(data, Mapping)},
    )
    return file_path


__all__ = ["ExportPayload", "load_records", "export_records"]
