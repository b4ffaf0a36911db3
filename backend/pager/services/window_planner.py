"""\
pager/services/window_planner.py — Berechnung des Link-Fensters

Ziele:
- Aus aktueller Seite, Seitenanzahl und Link-Limit die anzuzeigenden Seiten wählen
- Fenster möglichst um die aktuelle Seite zentrieren
- Am Ende ein "Tail-Fenster" bilden, das exakt auf der letzten Seite endet
- First/Prev nur ab Seite 2, Next/Last nur vor der letzten Seite

Ergebnis ist eine geordnete Liste von `LinkDescriptor`; das Markup entsteht
erst im Renderer.

Beispiel (10 Seiten, Limit 5):
    Seite 1  → 1 2 3 4 5 › »
    Seite 5  → « ‹ 3 4 5 6 7 › »
    Seite 10 → « ‹ 6 7 8 9 10
"""

from __future__ import annotations

# ── Standardbibliothek
import logging
import math
from typing import Dict, List, Mapping, Optional, Tuple

# ── Lokale Module
from pager.exceptions import NotReady
from pager.models.paging import DEFAULT_LINKS_TEMPLATE, LinkDescriptor, LinkKind


# ----------------------------------------------------------------------------
# Logger
# ----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Hilfsfunktionen
# ────────────────────────────────────────────────────────────────────────────────

def _labels(labels: Optional[Mapping[str, str]]) -> Dict[str, str]:
    merged = dict(DEFAULT_LINKS_TEMPLATE)
    if labels:
        merged.update(labels)
    return merged


def _single_page() -> List[LinkDescriptor]:
    return [LinkDescriptor(kind=LinkKind.CURRENT, page_number=1, label="1")]


def _head(current_page: int, first_label: str, prev_label: str) -> List[LinkDescriptor]:
    """First/Prev-Links (nur wenn es eine vorherige Seite gibt)."""
    if current_page <= 1:
        return []
    return [
        LinkDescriptor(kind=LinkKind.FIRST, page_number=1, label=first_label),
        LinkDescriptor(kind=LinkKind.PREV, page_number=current_page - 1, label=prev_label),
    ]


def _tail(current_page: int, total_pages: int, next_label: str, last_label: str) -> List[LinkDescriptor]:
    """Next/Last-Links."""
    return [
        LinkDescriptor(kind=LinkKind.NEXT, page_number=current_page + 1, label=next_label),
        LinkDescriptor(kind=LinkKind.LAST, page_number=total_pages, label=last_label),
    ]


def window_bounds(current_page: int, limit: int) -> Tuple[int, int]:
    """Start (inklusiv) und Ende (exklusiv) des zentrierten Fensters.

    `limit` ist bereits auf die Seitenanzahl begrenzt. Das Ende kann hinter
    der letzten Seite liegen; dann greift das Tail-Fenster.
    """
    middle = math.ceil(limit / 2)
    shift = middle - 1
    if current_page >= middle:
        return current_page - shift, current_page + limit - shift
    # nahe am Anfang: immer die ersten `limit` Seiten
    return 1, limit + 1


def tail_window_start(current_page: int, total_pages: int, limit: int) -> int:
    """Erste Seite des Tail-Fensters, so dass es `limit` Seiten breit auf `total_pages` endet."""
    extra = total_pages - current_page
    if extra < limit - 1:
        return current_page - ((limit - 1) - extra)
    return current_page


def _numbered(current_page: int, total_pages: int, limit: int) -> List[LinkDescriptor]:
    """Nummerierte Links des Fensters."""
    start, loop = window_bounds(current_page, limit)

    if loop > total_pages:
        first = tail_window_start(current_page, total_pages, limit)
        logger.debug("pager: tail window %s..%s (current=%s)", first, total_pages, current_page)
        return [
            LinkDescriptor(kind=LinkKind.CURRENT, page_number=p, label=str(p))
            if p == current_page
            else LinkDescriptor(kind=LinkKind.PAGE, page_number=p, label=str(p), rel="next")
            for p in range(first, total_pages + 1)
        ]

    logger.debug("pager: window %s..%s (current=%s)", start, loop - 1, current_page)
    links: List[LinkDescriptor] = []
    for p in range(start, loop):
        if p == current_page:
            links.append(LinkDescriptor(kind=LinkKind.CURRENT, page_number=p, label=str(p)))
            continue
        rel = None
        if p == current_page - 1:
            rel = "prev"
        elif p == current_page + 1:
            rel = "next"
        links.append(LinkDescriptor(kind=LinkKind.PAGE, page_number=p, label=str(p), rel=rel))
    return links


# ────────────────────────────────────────────────────────────────────────────────
# Öffentliche API
# ────────────────────────────────────────────────────────────────────────────────

def plan(
    current_page: int,
    total_pages: Optional[int],
    link_limit: int,
    numerate_first_last: bool = False,
    labels: Optional[Mapping[str, str]] = None,
) -> List[LinkDescriptor]:
    """Vollständige Navigation: First/Prev, nummeriertes Fenster, Next/Last.

    Args:
        current_page: 1-basierte aktuelle Seite
        total_pages: Seitenanzahl aus run(); None → NotReady
        link_limit: max. Anzahl nummerierter Links
        numerate_first_last: First/Last mit Seitenzahl statt Pfeil beschriften
        labels: Beschriftungen (first, prev, next, last)
    """
    if total_pages is None:
        raise NotReady()
    if total_pages == 1:
        return _single_page()

    tpl = _labels(labels)
    first_label = "1" if numerate_first_last else tpl["first"]
    last_label = str(total_pages) if numerate_first_last else tpl["last"]
    limit = min(max(1, link_limit), total_pages)

    links = _head(current_page, first_label, tpl["prev"])
    links.extend(_numbered(current_page, total_pages, limit))
    if current_page != total_pages:
        links.extend(_tail(current_page, total_pages, tpl["next"], last_label))
    return links


def plan_center(
    current_page: int,
    total_pages: Optional[int],
    page_word: Optional[str] = None,
    labels: Optional[Mapping[str, str]] = None,
) -> List[LinkDescriptor]:
    """Kompakte Navigation ohne Fenster: « ‹ "Page 3" › »."""
    if total_pages is None:
        raise NotReady()
    if total_pages == 1:
        return _single_page()

    tpl = _labels(labels)
    word = tpl["page"] if page_word is None else page_word

    links = _head(current_page, tpl["first"], tpl["prev"])
    links.append(
        LinkDescriptor(kind=LinkKind.CURRENT, page_number=current_page, label=f"{word} {current_page}")
    )
    if current_page < total_pages:
        links.extend(_tail(current_page, total_pages, tpl["next"], tpl["last"]))
    return links
