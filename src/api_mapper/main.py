"""
Entry point für den API Mapper.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys

from .config import load_settings
from .controller import MenuController
from .logging_config import setup_logging
from .persistence import JsonControllerRepository
from .view import ConsoleMenuView

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Settings laden
    - Logging einrichten
    - Komponenten erstellen
    - Controller starten
    """
    try:
        settings = load_settings()
    except ValueError as e:
        # Fehlerhafte Umgebung. Logging ist noch nicht eingerichtet.
        print(f"ERROR: {e}")
        sys.exit(1)

    try:
        setup_logging(settings.log_level_value, settings.log_file)

        # Bausteine der App erstellen.
        repo = JsonControllerRepository()
        view = ConsoleMenuView()
        controller = MenuController(repo, view, settings)

        # App starten.
        controller.starte_app()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        print("\nExiting ...")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unerwarteter Fehler")
        print(f"\nERROR: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
