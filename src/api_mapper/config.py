"""
Konfiguration der Anwendung.

Alle Werte haben Defaults. Optional können sie über Umgebungsvariablen
überschrieben werden:
- API_MAPPER_SNAPSHOT: Standard-Datei für Laden/Speichern
- API_MAPPER_LOG_LEVEL: z.B. DEBUG, INFO, WARNING
- API_MAPPER_LOG_FILE: Log zusätzlich in diese Datei schreiben
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_SYSTEM_NAME = "New System"


@dataclass(frozen=True)
class AppSettings:
    default_system_name: str = DEFAULT_SYSTEM_NAME
    default_snapshot_file: Path = Path("data/system.json")
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @property
    def log_level_value(self) -> int:
        """Log-Level als Zahl für das logging-Modul."""
        return parse_log_level(self.log_level)


def parse_log_level(name: str) -> int:
    """
    Wandelt einen Level-Namen in die Zahl aus dem logging-Modul.
    Unbekannte Namen ergeben ValueError.
    """
    value = logging.getLevelName(name.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unbekanntes Log-Level: {name!r}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    """
    Baut die Settings aus Defaults und Umgebung.
    Leere Variablen werden ignoriert.
    """
    env = os.environ if environ is None else environ
    defaults = AppSettings()

    snapshot = env.get("API_MAPPER_SNAPSHOT", "").strip()
    level = env.get("API_MAPPER_LOG_LEVEL", "").strip()
    log_file = env.get("API_MAPPER_LOG_FILE", "").strip()

    if level:
        # Früh prüfen, damit ein Tippfehler nicht erst beim Logging auffällt.
        parse_log_level(level)

    return AppSettings(
        default_snapshot_file=Path(snapshot) if snapshot else defaults.default_snapshot_file,
        log_level=level.upper() if level else defaults.log_level,
        log_file=Path(log_file) if log_file else None,
    )
