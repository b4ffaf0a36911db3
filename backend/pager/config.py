"""\
pager/config.py — zentrale Konfiguration via pydantic-settings (v2)

Ziele:
- Saubere ENV-Überschreibung mit Defaults
- Typisierung/Validierung (Literal, PositiveInt)
- Defaults für Parameter-Keys, Seitengrößen und Link-Fenster des Pagers
- Komfort-Helfer (FRONTEND_ORIGINS als Liste)
"""

from __future__ import annotations

# ── Standardbibliothek
from typing import Literal

# ── Drittanbieter
from pydantic import AnyHttpUrl, Field, NonNegativeInt, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Projektweite Settings.

    Werte werden automatisch aus der Umgebung (ENV) gelesen; Defaults greifen,
    wenn die jeweilige Variable nicht gesetzt ist. `.env` wird ebenfalls geladen.
    """

    # === Logging ===
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        description="Globale Log-Stufe",
    )

    # === Frontend CORS ===
    FRONTEND_ORIGIN: AnyHttpUrl | str = Field(
        default="http://localhost:3000",
        description="Erlaubter Origin für CORS (optional: mehrere, komma-separiert)",
    )

    # === Request-Parameter ===
    PAGER_START_KEY: str = Field(
        default="s", description="Name des Query-Parameters für den Seitenindex"
    )
    PAGER_STOP_KEY: str = Field(
        default="ss", description="Name des Query-Parameters für die Seitengröße"
    )

    # === Seitengrößen ===
    PAGER_PAGE_SIZE_MAX: PositiveInt = Field(
        default=1000, description="Obergrenze für die Seitengröße"
    )
    PAGER_PAGE_SIZE_DEFAULT: PositiveInt = Field(
        default=10, description="Seitengröße, falls der Request keine liefert"
    )

    # === Link-Darstellung ===
    PAGER_LINK_LIMIT: PositiveInt = Field(
        default=5, description="Max. Anzahl nummerierter Links im Fenster"
    )
    PAGER_NUMERATE_FIRST_LAST: bool = Field(
        default=False, description="First/Last als Seitenzahlen statt Pfeilen"
    )
    PAGER_LINKS_CLASS_NAME: str = Field(
        default="pager", description="CSS-Klasse der <ul>-Liste"
    )
    PAGER_ARG_SEP: str = Field(
        default="&", description="Trennzeichen zwischen Query-Argumenten"
    )
    PAGER_PAGE_WORD: str = Field(
        default="Page", description="Beschriftung im zentrierten Modus (\"Page 3\")"
    )

    # === Demo ===
    DEMO_TOTAL_RECORDS: NonNegativeInt = Field(
        default=95, description="Anzahl synthetischer Datensätze für /pager/preview"
    )

    # ── Model Config (pydantic v2) ────────────────────────────────────────────
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # ── Validatoren / Helper ─────────────────────────────────────────────────
    @field_validator("PAGER_START_KEY", "PAGER_STOP_KEY", mode="before")
    @classmethod
    def _strip_key(cls, v: str) -> str:
        """Parameter-Namen ohne Leerzeichen; leere Namen sind nicht erlaubt."""
        key = str(v).strip()
        if not key:
            raise ValueError("parameter key must not be empty")
        return key

    @property
    def FRONTEND_ORIGINS(self) -> list[str]:  # noqa: N802 (bewusst all caps)
        value = str(self.FRONTEND_ORIGIN)
        return [o.strip() for o in value.split(",") if o and o.strip()]


# Singleton-Settings-Objekt
settings = Settings()  # type: ignore[var-annotated]
