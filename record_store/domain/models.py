"""
Domain models for the record store.

Defines the record schema and the `{"data": ...}` envelopes used when reading
and writing JSON files. Validation is strict: a record missing `id`, `name` or
`value`, or carrying the wrong type for one of them, is rejected.
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    A single data item.
    """

    id: int = Field(..., description="Identity of the record (not enforced unique).")
    name: str = Field(..., description="Text label used for grouping and sorting.")
    value: float = Field(..., description="Numeric measure.")

    model_config = {
        "frozen": True,
        "strict": True,
        "extra": "ignore",
    }


Grouping = Dict[str, List[Record]]


class RecordDocument(BaseModel):
    """File envelope holding an ordered list of records."""

    data: List[Record]

    model_config = {"strict": True}


class GroupedRecordDocument(BaseModel):
    """File envelope holding records grouped by name."""

    data: Grouping

    model_config = {"strict": True}


__all__ = ["Record", "Grouping", "RecordDocument", "GroupedRecordDocument"]
