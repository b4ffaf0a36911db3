"""\
pager/main.py — Einstiegspunkt der FastAPI-Anwendung

Ziele dieses Moduls:
- Logging deterministisch beim Start konfigurieren (lifespan)
- Router registrieren
- CORS sauber konfigurieren
"""

from __future__ import annotations

# ── Standardbibliothek
import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

# ── Drittanbieter
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# ── Lokale Module
from pager.api import routes_admin, routes_pager
from pager.config import settings


# ────────────────────────────────────────────────────────────────────────────────
# Lifespan-Manager: zentraler Ort für Startup/Shutdown-Logik
# ────────────────────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Richtet Logging beim Start ein und meldet die aktiven Pager-Defaults."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger(__name__).info(
        "pager ready (keys=%s/%s, page_size_default=%s, link_limit=%s)",
        settings.PAGER_START_KEY,
        settings.PAGER_STOP_KEY,
        settings.PAGER_PAGE_SIZE_DEFAULT,
        settings.PAGER_LINK_LIMIT,
    )

    yield


# ────────────────────────────────────────────────────────────────────────────────
# FastAPI-App erstellen und konfigurieren
# ────────────────────────────────────────────────────────────────────────────────
app = FastAPI(title="Pager API", version="0.1.0", lifespan=lifespan)

allowed_origins = [o for o in settings.FRONTEND_ORIGINS if o]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(routes_pager.router)
app.include_router(routes_admin.router)  # /admin/*


@app.get("/health", tags=["meta"])  # pragma: no cover
async def health() -> dict[str, str]:
    """Einfache Lebenszeichenprüfung für Load-Balancer/Probes."""
    return {"status": "ok"}
