"""
Record Store - in-memory filtering, sorting, grouping and statistics for JSON records.

This package loads a flat list of `{id, name, value}` records from a JSON file
with a top-level `data` array and provides:

- Threshold filtering by value
- Locale-aware sorting by name
- Grouping by name
- Average, minimum and maximum of values
- JSON export of any derived view

Strict validation, structured logging, environment-driven settings and a
small CLI are included.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from record_store.config import Settings, get_settings
from record_store.domain.models import Grouping, Record
from record_store.errors import (
    EmptyStoreError,
    ExportError,
    MalformedInputError,
    RecordStoreError,
)
from record_store.infrastructure.json_files import export_records, load_records
from record_store.pipeline import PipelineResult, run_pipeline
from record_store.store import RecordStore, StoreSummary
from record_store.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "Grouping",
    # Store
    "RecordStore",
    "StoreSummary",
    # Errors
    "RecordStoreError",
    "MalformedInputError",
    "ExportError",
    "EmptyStoreError",
    # File I/O
    "load_records",
    "export_records",
    # Pipeline
    "PipelineResult",
    "run_pipeline",
    # Logging
    "configure_logging",
    "get_logger",
]
