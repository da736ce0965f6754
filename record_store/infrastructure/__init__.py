"""
Infrastructure package for the record store.

Exposes the JSON file loader and exporter used by the store, the pipeline
and the CLI.
"""

from record_store.infrastructure.json_files import ExportPayload, export_records, load_records

__all__ = [
    "ExportPayload",
    "export_records",
    "load_records",
]
