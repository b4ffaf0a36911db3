"""\
pager/api/routes_admin.py — Admin-Endpunkte

Funktionen:
- GET  /admin/status    → Pager-Defaults & aktuelles Log-Level
- POST /admin/loglevel  → Globales Logging-Level zur Laufzeit ändern
"""
from __future__ import annotations

# ── Standardbibliothek
import logging
from typing import Any, Dict

# ── Drittanbieter
from fastapi import APIRouter, Body, HTTPException

# ── Lokale Module
from pager.config import settings


# ----------------------------------------------------------------------------
# Logger
# ----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


router = APIRouter(prefix="/admin", tags=["admin"])

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


# ────────────────────────────────────────────────────────────────────────────────
# Status
# ────────────────────────────────────────────────────────────────────────────────
@router.get("/status")
async def admin_status() -> Dict[str, Any]:
    """Aktive Pager-Konfiguration und Log-Level."""
    logger.info("GET /admin/status")

    level_name = logging.getLevelName(logging.getLogger().getEffectiveLevel())
    return {
        "pager": {
            "start_key": settings.PAGER_START_KEY,
            "stop_key": settings.PAGER_STOP_KEY,
            "page_size_max": settings.PAGER_PAGE_SIZE_MAX,
            "page_size_default": settings.PAGER_PAGE_SIZE_DEFAULT,
            "link_limit": settings.PAGER_LINK_LIMIT,
            "numerate_first_last": settings.PAGER_NUMERATE_FIRST_LAST,
            "links_class_name": settings.PAGER_LINKS_CLASS_NAME,
            "arg_sep": settings.PAGER_ARG_SEP,
        },
        "logging": {"level": level_name},
    }


# ────────────────────────────────────────────────────────────────────────────────
# Log-Level
# ────────────────────────────────────────────────────────────────────────────────
@router.post("/loglevel")
async def set_loglevel(payload: Dict[str, Any] = Body(...)) -> Dict[str, str]:
    """Ändert das globale Logging-Level zur Laufzeit.

    Payload: {"level": "DEBUG"}  # oder INFO, WARNING, ERROR, CRITICAL
    """
    level_name = str(payload.get("level", "INFO")).upper()
    logger.info("POST /admin/loglevel: level=%s", level_name)

    if level_name not in _LEVELS:
        logger.warning("/admin/loglevel: invalid_level=%s", level_name)
        raise HTTPException(status_code=400, detail="invalid_level")

    logging.getLogger().setLevel(getattr(logging, level_name))
    logger.debug("/admin/loglevel: global level gesetzt")
    return {"status": "ok", "new_level": level_name}
