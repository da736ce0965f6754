"""
In-memory record store.

`RecordStore` holds one ordered sequence of records, replaced wholesale on
each load. Queries (filter, group, aggregates) never change that sequence.
`sort_by_name` is the one command: it reorders the store in place, so every
later query sees the sorted order.

Usage:
    from record_store.store import RecordStore

    store = RecordStore()
    store.load("data.json")
    high = store.filter_by_value(10)
    store.sort_by_name()
    groups = store.group_by_name()
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from record_store.domain.models import Grouping, Record
from record_store.errors import EmptyStoreError
from record_store.infrastructure.json_files import load_records
from record_store.utils.collation import collation_key
from record_store.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class StoreSummary:
    """
    Aggregate statistics over a store.

    `minimum` and `maximum` are None for an empty store.
    """

    count: int
    average: float
    minimum: Optional[float]
    maximum: Optional[float]


class RecordStore:
    """
    Single-owner, single-threaded collection of records.

    Parameters
    ----------
    records : iterable[Record], optional
        Initial contents. Defaults to empty.
    sort_key : callable, optional
        Maps a name to its sort key. Defaults to locale-aware collation.
    """

    def __init__(
        self,
        records: Optional[Iterable[Record]] = None,
        sort_key: Callable[[str], object] = collation_key,
    ) -> None:
        self._records: List[Record] = list(records) if records is not None else []
        self._sort_key = sort_key

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(tuple(self._records))

    def __repr__(self) -> str:
        return f"RecordStore(records={len(self._records)})"

    @property
    def records(self) -> Tuple[Record, ...]:
        """Snapshot of the current contents in store order."""
        return tuple(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def replace(self, records: Iterable[Record]) -> None:
        """Discard the current contents and hold `records` instead."""
        self._records = list(records)
        log.debug("Store contents replaced", extra={"rows": len(self._records)})

    def load(self, path: Path | str) -> None:
        """
        Replace the contents with the records read from `path`.

        On `MalformedInputError` the previous contents are kept.
        """
        self.replace(load_records(path))

    def filter_by_value(self, min_value: float) -> List[Record]:
        """Records with `value >= min_value`, in store order."""
        result = [record for record in self._records if record.value >= min_value]
        log.debug(
            "Filtered by value",
            extra={"min_value": min_value, "matched": len(result), "rows": len(self._records)},
        )
        return result

    def sort_by_name(self) -> Tuple[Record, ...]:
        """
        Reorder the store ascending by name and return the new order.

        The store itself is reordered (stable, locale-aware). The returned
        tuple equals `self.records` right after the call.
        """
        self._records.sort(key=lambda record: self._sort_key(record.name))
        log.debug("Store sorted by name", extra={"rows": len(self._records)})
        return self.records

    def group_by_name(self) -> Grouping:
        """Records keyed by name; keys in first-seen order, groups in store order."""
        groups: Grouping = {}
        for record in self._records:
            groups.setdefault(record.name, []).append(record)
        return groups

    def average_value(self) -> float:
        """Mean of all values, or 0 when the store is empty."""
        if not self._records:
            return 0
        return sum(record.value for record in self._records) / len(self._records)

    def min_value(self) -> float:
        if not self._records:
            raise EmptyStoreError("minimum")
        return min(record.value for record in self._records)

    def max_value(self) -> float:
        if not self._records:
            raise EmptyStoreError("maximum")
        return max(record.value for record in self._records)

    def summary(self) -> StoreSummary:
        """Count, average and min/max without raising on an empty store."""
        if not self._records:
            return StoreSummary(count=0, average=0, minimum=None, maximum=None)
        return StoreSummary(
            count=len(self._records),
            average=self.average_value(),
            minimum=self.min_value(),
            maximum=self.max_value(),
        )


__all__ = ["RecordStore", "StoreSummary"]
