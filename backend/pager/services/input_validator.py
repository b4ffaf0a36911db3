"""\
pager/services/input_validator.py — Sicherheitsprüfung der Pager-Parameter

Ziele:
- Rohwerte für Seitenindex (`s`) und Seitengröße (`ss`) gegen Grenzen prüfen
- Ungültige Werte NICHT als Fehler behandeln, sondern per Redirect kanonisieren:
    * zu groß            → 307 auf den größten gültigen Wert (nicht cachen)
    * negativ ("-3")     → 301 auf den Betrag
    * leer/"0"/kein Int  → 301 ohne den Parameter
- Kein I/O: Ergebnis ist `None` (Accept) oder ein `RedirectEffect`
"""

from __future__ import annotations

# ── Standardbibliothek
import logging
import re
from typing import Iterable, Optional

# ── Lokale Module
from pager.models.paging import RedirectEffect
from pager.util.query import prepare_query, strip_location, with_param


# ----------------------------------------------------------------------------
# Logger
# ----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# nur ASCII-Ziffern; "²" oder "٣" gelten als ungültig
_DIGITS = re.compile(r"[0-9]+")


def _to_int(raw: str) -> Optional[int]:
    """ASCII-Ziffernfolge → int; alles andere (auch zu lange Zahlen) → None."""
    if not _DIGITS.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _check_one(
    raw: Optional[str],
    key: str,
    upper: int,
    request_uri: str,
    exclude: Iterable[str],
    arg_sep: str,
) -> Optional[RedirectEffect]:
    """Die drei Regeln für einen einzelnen Parameter."""
    if raw is None:
        return None

    raw = str(raw)
    value = _to_int(raw)
    negative = _to_int(raw[1:]) if raw.startswith("-") else None
    prefix = prepare_query(request_uri, exclude, arg_sep, escape=False)

    if value is not None and value > upper:
        effect = RedirectEffect(location=with_param(prefix, key, upper), status_code=307)
    elif negative is not None:
        effect = RedirectEffect(location=with_param(prefix, key, negative), status_code=301)
    elif value is None or raw == "0":
        effect = RedirectEffect(location=strip_location(prefix, arg_sep), status_code=301)
    else:
        return None

    logger.info("pager: %s=%r -> redirect %s (%s)", key, raw, effect.location, effect.status_code)
    return effect


def check(
    start_value: Optional[str],
    stop_value: Optional[str],
    total_pages: int,
    page_size_max: int,
    request_uri: str = "/",
    start_key: str = "s",
    stop_key: str = "ss",
    arg_sep: str = "&",
) -> Optional[RedirectEffect]:
    """Prüft beide Parameter; der Seitenindex hat Vorrang.

    Redirects für die Seitengröße entfernen auch den Seitenindex, weil eine
    neue Seitengröße die alte Seitennummer bedeutungslos macht.

    Returns:
        None (Accept) oder den auszuführenden RedirectEffect.
    """
    effect = _check_one(start_value, start_key, total_pages, request_uri, {start_key}, arg_sep)
    if effect is not None:
        return effect

    return _check_one(
        stop_value, stop_key, page_size_max, request_uri, {start_key, stop_key}, arg_sep
    )
