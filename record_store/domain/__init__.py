"""
Domain package for the record store.

Exports the record model and file envelopes used by the store and by the
JSON loader/exporter. Keep this package focused on data definitions and
validation concerns.
"""

from record_store.domain.models import GroupedRecordDocument, Grouping, Record, RecordDocument

__all__ = [
    "Record",
    "Grouping",
    "RecordDocument",
    "GroupedRecordDocument",
]
