"""
Error types raised by the record store.

Library code raises these and lets them propagate; only the CLI layer catches
`RecordStoreError`, reports it and exits.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class RecordStoreError(Exception):
    """Base class for all record store failures."""


class MalformedInputError(RecordStoreError, ValueError):
    """
    Input file is unreadable or does not match the `{"data": [...]}` shape.
    """

    def __init__(self, message: str, path: Optional[Path | str] = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class ExportError(RecordStoreError):
    """Output file or its parent directory could not be written."""

    def __init__(self, message: str, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class EmptyStoreError(RecordStoreError, ValueError):
    """Minimum or maximum requested while the store holds no records."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot compute {operation} of an empty store; load records first.")


__all__ = ["RecordStoreError", "MalformedInputError", "ExportError", "EmptyStoreError"]
