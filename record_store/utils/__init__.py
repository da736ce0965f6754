"""
Utilities package for the record store.

Exports shared helpers for logging and collation. Keep this package
lightweight and free of domain-specific logic.
"""

from record_store.utils.collation import collation_key, configure_collation
from record_store.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "collation_key",
    "configure_collation",
]
