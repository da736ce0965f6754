"""
Locale selection for name ordering.

The store sorts names with `collation_key`, which follows the process-wide
`LC_COLLATE` category. `configure_collation` is called once at CLI start-up;
library callers that never call it get the interpreter default ("C").

Under C/POSIX collation `locale.strxfrm` is plain code-point order, so the key
falls back to accent-stripped, case-folded text with the raw text as tie-break.
"""

from __future__ import annotations

import locale
import unicodedata
from typing import Tuple

from record_store.utils.logging import get_logger

log = get_logger(__name__)


def configure_collation(locale_name: str = "") -> str:
    """
    Set `LC_COLLATE` and return the locale actually in effect.

    An empty name selects the locale from the environment (LANG / LC_ALL).
    If the requested locale is not installed, the current collation is kept
    and a warning is logged.
    """
    try:
        active = locale.setlocale(locale.LC_COLLATE, locale_name)
    except locale.Error as exc:
        active = locale.setlocale(locale.LC_COLLATE)
        log.warning(
            f"Collation locale '{locale_name}' unavailable, keeping '{active}'",
            extra={"requested_locale": locale_name, "error": str(exc)},
        )
        return active

    log.debug("Collation locale set", extra={"locale": active})
    return active


def _is_code_point_collation(active: str) -> bool:
    return active.split(".")[0] in ("C", "POSIX")


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def collation_key(text: str) -> Tuple[str, str]:
    """Sort key for locale-aware comparison of `text`."""
    if _is_code_point_collation(locale.setlocale(locale.LC_COLLATE)):
        return (_fold(text), text)
    return (locale.strxfrm(text), text)


__all__ = ["configure_collation", "collation_key"]
