"""\
pager/api/deps.py — FastAPI-Dependencies rund um den Pager

Ziele:
- Pro Request einen frischen PagingState mit den ENV-Defaults liefern
- RedirectEffect → RedirectResponse übersetzen (der Kern macht kein I/O)
"""

from __future__ import annotations

# ── Standardbibliothek
import logging

# ── Drittanbieter
from fastapi import Request
from fastapi.responses import RedirectResponse

# ── Lokale Module
from pager.config import settings
from pager.models.paging import PagerOptions, RedirectEffect
from pager.services.paging_state import PagingState


# ----------------------------------------------------------------------------
# Logger
# ----------------------------------------------------------------------------
logger = logging.getLogger(__name__)

# Einmalig aus den Settings; jeder PagingState arbeitet auf einer Kopie
_default_options = PagerOptions.from_settings(settings)


def request_uri(request: Request) -> str:
    """Pfad + Roh-Query wie im REQUEST_URI."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def get_paging_state(request: Request) -> PagingState:
    """FastAPI-Dependency: PagingState für genau diesen Request.

    Beispiel:
        def endpoint(state: PagingState = Depends(get_paging_state)):
            ...
    """
    return PagingState(_default_options, request_uri=request_uri(request))


def redirect_response(effect: RedirectEffect) -> RedirectResponse:
    """Führt den vom Pager beschriebenen Redirect aus."""
    logger.info("redirect %s -> %s", effect.status_code, effect.location)
    return RedirectResponse(url=effect.location, status_code=effect.status_code)
