"""\
pager/api/routes_pager.py — Routen zur Pager-Berechnung

Ziele:
- /pager/plan: (LIMIT, OFFSET), Seitenanzahl und Link-Beschreibungen als JSON
- /pager/preview: HTML-Vorschau mit synthetischen Datensätzen und beiden Link-Varianten
- Ungültige `s`/`ss`-Parameter werden per Redirect kanonisiert (301/307)
"""

from __future__ import annotations

# ── Standardbibliothek
import html
import logging
from typing import Any, Dict, Optional, Union

# ── Drittanbieter
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

# ── Lokale Module
from pager.api.deps import get_paging_state, redirect_response
from pager.config import settings
from pager.exceptions import PagerError
from pager.models.paging import RedirectEffect
from pager.services.paging_state import PagingState


# ----------------------------------------------------------------------------
# Logger
# ----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------------
# Router-Definition
# ----------------------------------------------------------------------------
router = APIRouter(prefix="/pager", tags=["pager"])


# ────────────────────────────────────────────────────────────────────────────────
# JSON
# ────────────────────────────────────────────────────────────────────────────────
@router.get("/plan", response_model=None)
async def pager_plan(
    request: Request,
    total: int = Query(..., ge=0, description="Gesamtanzahl der Datensätze"),
    link_limit: Optional[int] = Query(None, ge=1, le=50, description="Max. nummerierte Links"),
    state: PagingState = Depends(get_paging_state),
) -> Union[Dict[str, Any], RedirectResponse]:
    """Berechnet die Pagination für `total` Datensätze.

    Rückgabeformat:
      - page_size / offset: Werte für LIMIT/OFFSET
      - total_pages / current_page
      - links / center: LinkDescriptor-Listen (volles Fenster / kompakt)
      - markup: fertige <ul>-Liste des vollen Fensters
    """
    logger.info("GET /pager/plan: total=%s query=%s", total, request.url.query)

    result = state.run(request.query_params, total_records=total)
    if isinstance(result, RedirectEffect):
        return redirect_response(result)

    page_size, offset = result
    try:
        links = state.plan_links(link_limit)
        center = state.plan_center_links()
        markup = state.generate_links(link_limit)
    except PagerError:
        logger.exception("GET /pager/plan: Link-Berechnung fehlgeschlagen")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="pager_failed")

    logger.debug("GET /pager/plan: %s Links geliefert", len(links))
    return {
        "page_size": page_size,
        "offset": offset,
        "total_records": state.total_records,
        "total_pages": state.total_pages,
        "current_page": state.current_page,
        "links": [link.model_dump(mode="json") for link in links],
        "center": [link.model_dump(mode="json") for link in center],
        "markup": markup,
    }


# ────────────────────────────────────────────────────────────────────────────────
# HTML-Vorschau
# ────────────────────────────────────────────────────────────────────────────────
@router.get("/preview", response_class=HTMLResponse, response_model=None)
async def pager_preview(
    request: Request,
    total: Optional[int] = Query(None, ge=0, description="Gesamtanzahl (Default: DEMO_TOTAL_RECORDS)"),
    state: PagingState = Depends(get_paging_state),
) -> Union[HTMLResponse, RedirectResponse]:
    """Rendert eine Seite synthetischer Datensätze samt Navigation."""
    total_records = settings.DEMO_TOTAL_RECORDS if total is None else total
    logger.info("GET /pager/preview: total=%s query=%s", total_records, request.url.query)

    result = state.run(request.query_params, total_records=total_records)
    if isinstance(result, RedirectEffect):
        return redirect_response(result)

    page_size, offset = result
    rows = "".join(
        f"<li>Record {html.escape(str(n))}</li>"
        for n in range(offset + 1, min(offset + page_size, total_records) + 1)
    )
    body = (
        "<!doctype html><html><head><title>Pager preview</title></head><body>"
        f"<ol start=\"{offset + 1}\">{rows}</ol>"
        f"{state.generate_links()}"
        f"{state.generate_links_center()}"
        "</body></html>"
    )
    return HTMLResponse(content=body)
