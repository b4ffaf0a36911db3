"""\
pager/exceptions.py — Fehlerklassen des Pagers

Alle Fehler hier sind Programmierfehler (falsche Konfiguration oder falsche
Aufrufreihenfolge). Ungültige Request-Parameter landen NICHT hier, sondern
werden als Redirect-Effekt normalisiert (siehe services/input_validator.py).
"""

from __future__ import annotations


class PagerError(Exception):
    """Basisklasse für alle Pager-Fehler."""


class UnknownOption(PagerError):
    """Option existiert nicht."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No option found such '{name}'")
        self.name = name


class ForbiddenOption(PagerError):
    """Option ist run()-abgeleitet und darf nicht gesetzt werden."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Option '{name}' is not allowed to set")
        self.name = name


class NotReady(PagerError):
    """Links wurden vor run() angefordert."""

    def __init__(self) -> None:
        super().__init__("No pages to generate links, call run() first")
