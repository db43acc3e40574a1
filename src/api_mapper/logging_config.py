"""
Logging Konfiguration
Richtet den Logger für den Namespace 'api_mapper' ein.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: int = logging.WARNING, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Konfiguriert den Logger für das Paket.

    - Konsole (stderr), damit die Menü-Ausgabe auf stdout sauber bleibt
    - optional zusätzlich eine Datei
    Bestehende Handler werden entfernt, damit bei erneutem Aufruf nichts doppelt geloggt wird.
    """
    logger = logging.getLogger("api_mapper")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialisiert.")
    return logger
