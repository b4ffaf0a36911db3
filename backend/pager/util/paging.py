"""
pager/util/paging.py — Rechenhilfen für Pagination

Ziele:
- Einheitliche Normalisierung roher Request-Werte (abs, int)
- Offset-Berechnung für SQL-Queries (LIMIT offset, page_size)
- Seitenanzahl und aktuelle Seite aus Offset/Seitengröße
"""

import logging
import math
import re

# ────────────────────────────────────────────────────────────────────────────────
# Logging
# ────────────────────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

_SIGNED_DIGITS = re.compile(r"-?[0-9]+")


def abs_int(value) -> int:
    """Wandelt einen rohen Request-Wert in eine nicht-negative Ganzzahl.

    "-3" -> 3, "" / None / "abc" / "٣" -> 0. Ungültige Werte werden nicht
    abgelehnt; der Redirect-Check im InputValidator kümmert sich darum.
    """
    if value is None:
        return 0
    if isinstance(value, str) and not _SIGNED_DIGITS.fullmatch(value):
        logger.debug("Ungültiger Zahlenwert %r, fallback=0", value)
        return 0
    try:
        return abs(int(value))
    except (TypeError, ValueError):
        logger.debug("Ungültiger Zahlenwert %r, fallback=0", value)
        return 0


def resolve_page_size(raw: int, default: int, hi: int) -> int:
    """Seitengröße: raw falls > 0, sonst default; nie größer als hi."""
    size = raw if raw > 0 else default
    return min(size, hi)


def offset_for(page: int, page_size: int) -> int:
    """
    Liefert SQL-kompatiblen Offset für einen 1-basierten Seitenindex.
    Beispiel: page=0/1 -> 0, page=3, page_size=10 -> 20.
    """
    if page > 1:
        return (page * page_size) - page_size
    return 0


def total_pages_for(total_records, page_size: int) -> int:
    """ceil(total_records / page_size), mindestens 1."""
    if not total_records or page_size <= 0:
        return 1
    return max(1, math.ceil(total_records / page_size))


def current_page_for(offset: int, page_size: int) -> int:
    """1-basierte Seite zu einem Offset."""
    if page_size <= 0:
        return 1
    return max(1, offset // page_size + 1)
