"""
Persistence layer (JSON)

Hier liegt die Speicherung des Systems als JSON-Snapshot. Die Domain selbst bleibt frei von JSON-Details.
- ControllerRepository: Schnittstelle (load / save)
- JsonControllerRepository: Datei-Repository
- JsonSerializer: Mapping zwischen Controller und JSON

Für eine bessere Fehlerbehandlung:
- Das Laden ist strikt. Ein fehlerhafter Snapshot ergibt immer SnapshotReadError.
- Ein Snapshot wird immer komplett ersetzt, nie teilweise.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Type, TypeVar, Union

from .domain import Application, Controller, DataPoint

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
R = TypeVar("R", DataPoint, Application)


class SnapshotError(Exception):
    """Basis für Fehler beim Lesen oder Schreiben eines Snapshots."""

    def __init__(self, path: PathLike, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason


class SnapshotReadError(SnapshotError):
    """Datei fehlt, ist nicht lesbar oder hat nicht die erwartete Form."""


class SnapshotWriteError(SnapshotError):
    """Datei konnte nicht geschrieben werden."""


class ControllerRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    def load(self, path: PathLike) -> Controller:
        """Lädt einen Controller."""
        ...

    def save(self, controller: Controller, path: PathLike) -> None:
        """Speichert einen Controller."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim Laden und Speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    """

    def read_text(self, path: PathLike) -> str:
        """
        Liest eine Datei als Text.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei sonstigen Leseproblemen
        """
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def write_text(self, path: PathLike, content: str) -> None:
        """
        Schreibt Text in eine Datei.
        Fehlende Ordner werden angelegt.
        """
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)


class JsonSerializer:
    """
    Wandelt Controller <-> JSON.
    - Feldnamen entsprechen genau dem Controller.
    - Reihenfolge der Records bleibt erhalten.
    - Parsing ist strikt: falsche Typen werden nicht umgewandelt.
    """

    def to_json(self, controller: Controller) -> str:
        """
        Macht aus dem Controller einen JSON-String.
        Der String ist formatiert indent = 2.
        """
        payload = self._controller_to_dict(controller)
        return json.dumps(payload, ensure_ascii=False, indent=2)

    def from_json(self, raw: str) -> Controller:
        """
        Baut einen Controller aus JSON.

        Fehlerbehandlung:
        - json.JSONDecodeError (ein ValueError) bei kaputtem JSON
        - KeyError, wenn ein Feld fehlt
        - TypeError bei falschen Typen
        - ValueError, wenn die Register-Regeln verletzt sind
        - RecursionError bei extrem tief verschachteltem JSON
        """
        payload = json.loads(raw)
        if not isinstance(payload, dict):
            raise TypeError(f"Snapshot muss ein JSON-Objekt sein, ist aber {type(payload).__name__}.")
        return self._controller_from_dict(payload)

    def _controller_to_dict(self, controller: Controller) -> Dict[str, Any]:
        """Controller Mapping für JSON."""
        return {
            "system_name": controller.system_name,
            "data_points": [self._record_to_dict(d) for d in controller.get_data_points()],
            "next_data_point_id": controller.next_data_point_id,
            "applications": [self._record_to_dict(a) for a in controller.get_applications()],
            "next_application_id": controller.next_application_id,
        }

    def _record_to_dict(self, r: Union[DataPoint, Application]) -> Dict[str, Any]:
        """DataPoint/Application Mapping für JSON."""
        return {
            "id": r.id,
            "name": r.name,
            "description": r.description,
        }

    def _controller_from_dict(self, d: Dict[str, Any]) -> Controller:
        """
        Mapping für Controller.
        Es gibt keine Defaults: alte oder unvollständige Snapshots werden abgelehnt.
        """
        return Controller.restore(
            system_name=self._expect_str(d, "system_name"),
            data_points=self._records_from_list(DataPoint, d["data_points"], "data_points"),
            next_data_point_id=self._expect_int(d, "next_data_point_id"),
            applications=self._records_from_list(Application, d["applications"], "applications"),
            next_application_id=self._expect_int(d, "next_application_id"),
        )

    def _records_from_list(self, record_cls: Type[R], raw: Any, label: str) -> List[R]:
        """Mapping für eine Liste von Records."""
        if not isinstance(raw, list):
            raise TypeError(f"'{label}' muss eine Liste sein.")

        records = []
        for item in raw:
            if not isinstance(item, dict):
                raise TypeError(f"Einträge in '{label}' müssen Objekte sein.")
            record_id = self._expect_int(item, "id")
            if record_id < 1:
                raise ValueError(f"IDs in '{label}' müssen >= 1 sein, ist aber {record_id}.")
            records.append(
                record_cls(
                    id=record_id,
                    name=self._expect_str(item, "name"),
                    description=self._expect_str(item, "description"),
                )
            )
        return records

    def _expect_int(self, d: Dict[str, Any], key: str) -> int:
        """Liest ein Ganzzahl-Feld. bool zählt nicht als Zahl."""
        value = d[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"'{key}' muss eine Ganzzahl sein, ist aber {value!r}.")
        return value

    def _expect_str(self, d: Dict[str, Any], key: str) -> str:
        """Liest ein Text-Feld."""
        value = d[key]
        if not isinstance(value, str):
            raise TypeError(f"'{key}' muss Text sein, ist aber {value!r}.")
        return value


class JsonControllerRepository:
    """
    Repository für JSON-Dateien.
    - FileStorage für Datei-Zugriff
    - JsonSerializer für Mapping
    Der Pfad wird pro Aufruf übergeben, da der Nutzer ihn im Menü wählt.
    """

    def __init__(
        self,
        storage: Optional[FileStorage] = None,
        serializer: Optional[JsonSerializer] = None
    ) -> None:
        """
        Erstellt das Repository.
        """
        self._storage = storage or FileStorage()
        self._serializer = serializer or JsonSerializer()

    def load(self, path: PathLike) -> Controller:
        """
        Lädt die Datei und baut einen neuen Controller.
        Der bestehende Controller des Aufrufers wird nicht angefasst.

        Fehlerbehandlung:
        - SnapshotReadError bei Lese- oder Parse-Fehlern
        """
        try:
            raw = self._storage.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Snapshot %s nicht lesbar: %s", path, e)
            raise SnapshotReadError(path, str(e)) from e

        try:
            controller = self._serializer.from_json(raw)
        except KeyError as e:
            logger.warning("Snapshot %s unvollständig: %s", path, e)
            raise SnapshotReadError(path, f"missing field {e}") from e
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning("Snapshot %s ungültig: %s", path, e)
            raise SnapshotReadError(path, str(e)) from e

        logger.info(
            "Snapshot geladen: %s (%d data points, %d applications)",
            path, len(controller.get_data_points()), len(controller.get_applications()),
        )
        return controller

    def save(self, controller: Controller, path: PathLike) -> None:
        """
        Serialisiert und schreibt in die Datei.
        Erst wird serialisiert, dann die Datei geöffnet.

        Fehlerbehandlung:
        - SnapshotWriteError bei Schreibfehlern
        """
        raw = self._serializer.to_json(controller)
        try:
            self._storage.write_text(path, raw)
        except OSError as e:
            logger.warning("Snapshot %s nicht schreibbar: %s", path, e)
            raise SnapshotWriteError(path, str(e)) from e

        logger.info("Snapshot gespeichert: %s", path)
