"""\
pager/models/paging.py — Datenmodelle des Pagers (pydantic v2)

Ziele:
- PagerOptions: explizite, validierte Konfiguration (statt dynamischer Properties)
- LinkDescriptor: Ergebnis der Fensterberechnung, unabhängig vom Markup
- RedirectEffect: reine Beschreibung eines Redirects (keine I/O im Kern)
"""

from __future__ import annotations

# ── Standardbibliothek
from enum import Enum
from typing import Any, Dict, Literal, Optional

# ── Drittanbieter
from pydantic import BaseModel, ConfigDict, Field, field_validator

# ── Lokale Module
from pager.config import Settings, settings


# Optionen, die als nicht-negative Ganzzahl gesetzt werden (abs(int(v)))
INT_OPTIONS = ("page_size_max", "page_size_default", "link_limit", "total_records", "total_pages")
# Optionen, die als bool gesetzt werden
BOOL_OPTIONS = ("autorun", "numerate_first_last")
# Strings, die als False gelten
FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})
# Optionen, deren Wert mindestens 1 sein muss
MIN_ONE_OPTIONS = ("page_size_max", "page_size_default", "link_limit", "total_pages")

DEFAULT_LINKS_TEMPLATE: Dict[str, str] = {
    "page": "Page",
    "first": "«",
    "prev": "‹",
    "next": "›",
    "last": "»",
}


# ────────────────────────────────────────────────────────────────────────────────
# Konfiguration
# ────────────────────────────────────────────────────────────────────────────────
class PagerOptions(BaseModel):
    """Setzbare Optionen eines PagingState.

    Zuweisungen werden validiert (``validate_assignment``), d. h. auch
    ``options.link_limit = -7`` landet als ``7`` im Modell.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    start_key: str = "s"
    stop_key: str = "ss"
    page_size_max: int = 1000
    page_size_default: int = 10
    link_limit: int = 5
    total_records: Optional[int] = None
    total_pages: Optional[int] = None
    autorun: bool = True
    numerate_first_last: bool = False
    links_class_name: str = "pager"
    links_template: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_LINKS_TEMPLATE))
    arg_sep: str = "&"

    @field_validator(*INT_OPTIONS, mode="before")
    @classmethod
    def _abs_int(cls, v: Any) -> Optional[int]:
        if v is None:
            return None
        return abs(int(v))

    @field_validator(*MIN_ONE_OPTIONS)
    @classmethod
    def _at_least_one(cls, v: Optional[int]) -> Optional[int]:
        if v is None:
            return None
        return max(1, v)

    @field_validator(*BOOL_OPTIONS, mode="before")
    @classmethod
    def _to_bool(cls, v: Any) -> bool:
        # jeder andere nicht-leere String zählt als True
        if isinstance(v, str):
            return v.strip().lower() not in FALSE_STRINGS
        return bool(v)

    @field_validator("links_template", mode="before")
    @classmethod
    def _merge_template(cls, v: Any) -> Dict[str, str]:
        """Teil-Templates mit den Defaults auffüllen."""
        merged = dict(DEFAULT_LINKS_TEMPLATE)
        merged.update({str(k): str(val) for k, val in dict(v or {}).items()})
        return merged

    @classmethod
    def from_settings(cls, conf: Settings = settings) -> "PagerOptions":
        """Defaults aus den ENV-Settings übernehmen."""
        template = dict(DEFAULT_LINKS_TEMPLATE, page=conf.PAGER_PAGE_WORD)
        return cls(
            start_key=conf.PAGER_START_KEY,
            stop_key=conf.PAGER_STOP_KEY,
            page_size_max=conf.PAGER_PAGE_SIZE_MAX,
            page_size_default=conf.PAGER_PAGE_SIZE_DEFAULT,
            link_limit=conf.PAGER_LINK_LIMIT,
            numerate_first_last=conf.PAGER_NUMERATE_FIRST_LAST,
            links_class_name=conf.PAGER_LINKS_CLASS_NAME,
            links_template=template,
            arg_sep=conf.PAGER_ARG_SEP,
        )


# ────────────────────────────────────────────────────────────────────────────────
# Link-Beschreibung
# ────────────────────────────────────────────────────────────────────────────────
class LinkKind(str, Enum):
    FIRST = "first"
    PREV = "prev"
    PAGE = "page"
    CURRENT = "current"
    NEXT = "next"
    LAST = "last"


class LinkDescriptor(BaseModel):
    """Ein Navigations-Link: Art, Zielseite, Beschriftung, optionaler rel-Hinweis."""

    model_config = ConfigDict(frozen=True)

    kind: LinkKind
    page_number: int
    label: str
    # nur für kind=page: direkter Nachbar der aktuellen Seite
    rel: Optional[Literal["prev", "next"]] = None


# ────────────────────────────────────────────────────────────────────────────────
# Redirect-Effekt
# ────────────────────────────────────────────────────────────────────────────────
class RedirectEffect(BaseModel):
    """Redirect, den der Aufrufer ausführen muss (301 permanent, 307 temporär)."""

    model_config = ConfigDict(frozen=True)

    location: str
    status_code: Literal[301, 307]
