"""\
pager/services/renderer.py — LinkDescriptor → HTML

Erzeugt die <a>-Elemente und die umschließende <ul>-Liste. Reine Formatierung.
"""

from __future__ import annotations

# ── Standardbibliothek
import html
from typing import Iterable, List

# ── Lokale Module
from pager.models.paging import LinkDescriptor, LinkKind


def render_link(link: LinkDescriptor, prefix: str, start_key: str) -> str:
    """Ein Anchor; `prefix` ist das bereits kodierte "/pfad?rest&"."""
    label = html.escape(link.label)
    if link.kind is LinkKind.CURRENT:
        return f'<a class="current" href="#">{label}</a>'

    href = f"{prefix}{html.escape(start_key)}={link.page_number}"
    if link.kind is LinkKind.PAGE:
        rel = f' rel="{link.rel}"' if link.rel else ""
        return f'<a{rel} href="{href}">{label}</a>'

    kind = link.kind.value
    return f'<a class="{kind}" rel="{kind}" href="{href}">{label}</a>'


def render_links(links: Iterable[LinkDescriptor], prefix: str, start_key: str) -> List[str]:
    return [render_link(link, prefix, start_key) for link in links]


def template(items: Iterable[str], class_name: str = "pager", center: bool = False) -> str:
    """<ul class="pager[ center]"><li>…</li>…</ul>"""
    if center:
        class_name += " center"
    body = "".join(f"<li>{item}</li>" for item in items)
    return f'<ul class="{html.escape(class_name)}">{body}</ul>'
