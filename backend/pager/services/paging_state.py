"""\
pager/services/paging_state.py — Pager-Zustand pro Request

Ziele:
- Optionen setzen/lesen (snake_case oder camelCase, historische Aliasse)
- run(): Seitenindex/-größe aus den Request-Parametern in (LIMIT, OFFSET) übersetzen
- Sicherheitsprüfung der Parameter → RedirectEffect statt Exception
- Navigation als HTML erzeugen (volles Fenster oder kompakt/zentriert), gecacht

Lebenszyklus:
    state = PagingState(request_uri="/items?s=3")
    state.configure("link_limit", 7)
    result = state.run(total_records=95)
    if isinstance(result, RedirectEffect):
        ...  # Aufrufer leitet um
    limit, offset = result
    html = state.generate_links()
"""

from __future__ import annotations

# ── Standardbibliothek
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

# ── Lokale Module
from pager.exceptions import ForbiddenOption, NotReady, UnknownOption
from pager.models.paging import LinkDescriptor, PagerOptions, RedirectEffect
from pager.services import input_validator, renderer, window_planner
from pager.util.paging import abs_int, current_page_for, offset_for, resolve_page_size, total_pages_for
from pager.util.query import KeySpec, key_set, parse_params, prepare_query, split_request_uri


# ----------------------------------------------------------------------------
# Logger
# ----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# run()-abgeleitet, nie direkt setzbar
FORBIDDEN_OPTIONS = frozenset({"start", "stop", "offset", "page_size", "limit"})

# historische Namen → aktuelle Optionen
OPTION_ALIASES: Dict[str, str] = {
    "stop_max": "page_size_max",
    "stop_default": "page_size_default",
    "links_limit": "link_limit",
}

# Lesezugriff auf abgeleitete Werte
READ_ALIASES: Dict[str, str] = {
    "start": "offset",
    "stop": "page_size",
    "limit": "page_size",
}

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_name(name: str) -> str:
    """"linksLimit" / "LINK_LIMIT" / "stop_max" → kanonischer Optionsname."""
    snake = _CAMEL.sub("_", name.strip()).lower() if not name.isupper() else name.lower()
    return OPTION_ALIASES.get(snake, snake)


RunResult = Union[Tuple[int, int], RedirectEffect]


class PagingState:
    """Konfiguration + abgeleiteter Zustand eines Pagers (ein Objekt pro Request)."""

    def __init__(
        self,
        options: Optional[PagerOptions] = None,
        request_uri: str = "/",
        **properties: Any,
    ) -> None:
        self.options = options.model_copy(deep=True) if options else PagerOptions.from_settings()
        self.request_uri = request_uri
        self.redirect: Optional[RedirectEffect] = None

        # Rohwerte aus dem Request (1-basierter Index, Seitengröße)
        self._page_index = 0
        self._raw_page_size = 0
        # abgeleitet in run()
        self._offset = 0
        self._page_size = 0

        self._links: Optional[Tuple[tuple, List[str]]] = None
        self._links_center: Optional[Tuple[tuple, List[str]]] = None

        for name, value in properties.items():
            self.configure(name, value)

    # ── Optionen ───────────────────────────────────────────────────────────────
    def configure(self, name: str, value: Any) -> "PagingState":
        """Setzt eine Option; Ganzzahlen werden zu abs(int), Flags zu bool."""
        key = normalize_name(name)
        if key in FORBIDDEN_OPTIONS:
            raise ForbiddenOption(key)
        if key not in PagerOptions.model_fields:
            raise UnknownOption(key)

        setattr(self.options, key, value)
        return self

    def get(self, name: str) -> Any:
        """Liest eine Option oder einen abgeleiteten Wert (offset, page_size, limit)."""
        key = normalize_name(name)
        key = READ_ALIASES.get(key, key)
        if key == "offset":
            return self.offset
        if key == "page_size":
            return self.page_size
        if key not in PagerOptions.model_fields:
            raise UnknownOption(key)
        return getattr(self.options, key)

    # ── Abgeleitete Werte ──────────────────────────────────────────────────────
    @property
    def offset(self) -> int:
        return self._offset

    @property
    def page_size(self) -> int:
        return self._page_size

    # Alias für DB-Aufrufe: LIMIT offset, limit
    limit = page_size

    @property
    def total_pages(self) -> Optional[int]:
        return self.options.total_pages

    @property
    def total_records(self) -> Optional[int]:
        return self.options.total_records

    @property
    def current_page(self) -> int:
        return current_page_for(self._offset, self._page_size)

    # ── Berechnung ─────────────────────────────────────────────────────────────
    def run(
        self,
        params: Optional[Mapping[str, str]] = None,
        total_records: Optional[int] = None,
        page_size: Optional[int] = None,
        start_key: Optional[str] = None,
        stop_key: Optional[str] = None,
    ) -> RunResult:
        """Berechnet (page_size, offset) oder liefert einen RedirectEffect.

        Args:
            params: Request-Parameter; Default ist die Query von `request_uri`
            total_records: Gesamtanzahl der Datensätze (vom Aufrufer gezählt)
            page_size: explizites Limit, ersetzt den Request-Parameter
            start_key / stop_key: abweichende Parameter-Namen
        """
        opts = self.options
        if total_records is not None:
            opts.total_records = total_records
        if start_key:
            opts.start_key = start_key
        if stop_key:
            opts.stop_key = stop_key

        if params is None:
            params = parse_params(split_request_uri(self.request_uri)[1])

        start_value = params.get(opts.start_key)
        if page_size is not None:
            stop_value: Any = page_size
            checked_stop = None  # explizites Limit wird nicht umgeleitet
        else:
            stop_value = params.get(opts.stop_key)
            checked_stop = stop_value

        # autorun=False: Request ignorieren, zuvor gesetzte Werte behalten
        if opts.autorun:
            self._page_index = abs_int(start_value)
            self._raw_page_size = abs_int(stop_value)

        self._page_size = resolve_page_size(
            self._raw_page_size, opts.page_size_default, opts.page_size_max
        )
        self._offset = offset_for(self._page_index, self._page_size)
        opts.total_pages = total_pages_for(opts.total_records, self._page_size)

        self._links = None
        self._links_center = None

        self.redirect = input_validator.check(
            start_value,
            checked_stop,
            total_pages=opts.total_pages,
            page_size_max=opts.page_size_max,
            request_uri=self.request_uri,
            start_key=opts.start_key,
            stop_key=opts.stop_key,
            arg_sep=opts.arg_sep,
        )
        if self.redirect is not None:
            return self.redirect

        if opts.total_records == 1:
            self._page_size = 1
            self._offset = 0

        logger.debug(
            "pager: run total_records=%s page_size=%s offset=%s total_pages=%s",
            opts.total_records, self._page_size, self._offset, opts.total_pages,
        )
        return self._page_size, self._offset

    # ── Links ──────────────────────────────────────────────────────────────────
    def _require_pages(self) -> int:
        if self.options.total_pages is None:
            raise NotReady()
        return self.options.total_pages

    def _cache_key(self, *extra: Any) -> tuple:
        return (self._offset, self._page_size, self.options.total_pages) + extra

    def _prefix(self, ignored: frozenset) -> str:
        exclude = key_set(self.options.start_key, ignored)
        return prepare_query(self.request_uri, exclude, self.options.arg_sep)

    def plan_links(self, link_limit: Optional[int] = None) -> List[LinkDescriptor]:
        """LinkDescriptor-Liste des vollen Fensters."""
        total_pages = self._require_pages()
        return window_planner.plan(
            self.current_page,
            total_pages,
            link_limit if link_limit is not None else self.options.link_limit,
            self.options.numerate_first_last,
            self.options.links_template,
        )

    def plan_center_links(self, page_word: Optional[str] = None) -> List[LinkDescriptor]:
        """LinkDescriptor-Liste der kompakten Variante."""
        total_pages = self._require_pages()
        return window_planner.plan_center(
            self.current_page, total_pages, page_word, self.options.links_template
        )

    def links(self, link_limit: Optional[int] = None, ignored_keys: KeySpec = None) -> List[str]:
        """Anchors des vollen Fensters (gecacht bis zum nächsten run())."""
        self._require_pages()
        ignored = frozenset(key_set(ignored_keys))
        key = self._cache_key(link_limit, ignored)
        if self._links is not None and self._links[0] == key:
            return self._links[1]

        items = renderer.render_links(
            self.plan_links(link_limit), self._prefix(ignored), self.options.start_key
        )
        self._links = (key, items)
        return items

    def links_center(self, page_word: Optional[str] = None, ignored_keys: KeySpec = None) -> List[str]:
        """Anchors der kompakten Variante (separat gecacht)."""
        self._require_pages()
        ignored = frozenset(key_set(ignored_keys))
        key = self._cache_key(page_word, ignored)
        if self._links_center is not None and self._links_center[0] == key:
            return self._links_center[1]

        items = renderer.render_links(
            self.plan_center_links(page_word), self._prefix(ignored), self.options.start_key
        )
        self._links_center = (key, items)
        return items

    def generate_links(
        self,
        link_limit: Optional[int] = None,
        ignored_keys: KeySpec = None,
        class_name: Optional[str] = None,
    ) -> str:
        """<ul class="pager">…</ul> mit First/Prev, Fenster und Next/Last."""
        items = self.links(link_limit, ignored_keys)
        return renderer.template(items, class_name or self.options.links_class_name)

    def generate_links_center(
        self,
        page_word: Optional[str] = None,
        ignored_keys: KeySpec = None,
        class_name: Optional[str] = None,
    ) -> str:
        """<ul class="pager center">…</ul> mit « ‹ "Page n" › »."""
        items = self.links_center(page_word, ignored_keys)
        return renderer.template(items, class_name or self.options.links_class_name, center=True)
