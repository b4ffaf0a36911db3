"""
pager/util/query.py — Query-String-Hilfen

Ziele:
- Request-URI in Pfad und Query zerlegen
- Query neu aufbauen, ohne bestimmte Keys (z. B. den Seitenindex)
- Link-/Redirect-Präfixe der Form "/pfad?a=1&" erzeugen
"""

from __future__ import annotations

# ── Standardbibliothek
import html
import logging
from typing import Dict, Iterable, Optional, Set, Tuple, Union
from urllib.parse import parse_qsl, urlencode

# ────────────────────────────────────────────────────────────────────────────────
# Logging
# ────────────────────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

KeySpec = Union[str, Iterable[str], None]


def split_request_uri(request_uri: str) -> Tuple[str, str]:
    """"/liste?a=1" -> ("/liste", "a=1")."""
    path, _, query = (request_uri or "/").partition("?")
    return path or "/", query.strip()


def parse_params(query: str) -> Dict[str, str]:
    """Query-String als flaches Dict; bei doppelten Keys gewinnt der letzte Wert."""
    return dict(parse_qsl(query, keep_blank_values=True))


def key_set(*specs: KeySpec) -> Set[str]:
    """Keys aus "a,b"-Strings und/oder Iterables einsammeln."""
    keys: Set[str] = set()
    for spec in specs:
        if not spec:
            continue
        if isinstance(spec, str):
            spec = spec.split(",")
        keys.update(k.strip() for k in spec if k and k.strip())
    return keys


def build_query(query: str, exclude: Iterable[str] = (), arg_sep: str = "&") -> str:
    """Baut den Query-String ohne die Keys aus `exclude` neu auf."""
    excluded = set(exclude)
    pairs = [(k, v) for k, v in parse_qsl(query, keep_blank_values=True) if k not in excluded]
    return arg_sep.join(urlencode([pair]) for pair in pairs)


def prepare_query(
    request_uri: str,
    exclude: Iterable[str] = (),
    arg_sep: str = "&",
    escape: bool = True,
) -> str:
    """Präfix für Links/Redirects: "/pfad?" oder "/pfad?rest<arg_sep>".

    Mit `escape=True` ist das Ergebnis für HTML-Attribute kodiert (hrefs);
    Redirect-Locations werden unkodiert gebaut.
    """
    path, query = split_request_uri(request_uri)
    rest = build_query(query, exclude, arg_sep) if query else ""
    if rest:
        rest += arg_sep
    if escape:
        return html.escape(path) + "?" + html.escape(rest)
    return path + "?" + rest


def strip_location(location: str, arg_sep: str = "&") -> str:
    """Hängende Trennzeichen und ein leeres "?" entfernen."""
    while arg_sep and location.endswith(arg_sep):
        location = location[: -len(arg_sep)]
    if location.endswith("?"):
        location = location[:-1]
    return location or "/"


def with_param(prefix: str, key: str, value: Optional[int]) -> str:
    """Präfix aus prepare_query() um "key=value" ergänzen."""
    return f"{prefix}{key}={value}"
