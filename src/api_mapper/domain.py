"""
Domain beinhaltet die Records + den Controller

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder JSON-Logik.

- DataPoint und Application sind Dataclasses.
- Beide sind unabhängig voneinander (keine gemeinsame Basisklasse).
- Der Controller vergibt die IDs und verwaltet beide Register.
- IDs werden nie wiederverwendet, auch nicht nach dem Löschen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class DataPoint:
    """
    Ein Datenpunkt im System.
    Die ID kommt immer vom Controller.
    Name und Beschreibung werden unverändert gespeichert.
    """
    id: int
    name: str
    description: str


@dataclass(frozen=True, slots=True)
class Application:
    """
    Eine Applikation im System.
    Gleiche Form wie DataPoint, aber ein eigener Typ mit eigenem ID-Zähler.
    """
    id: int
    name: str
    description: str


class RecordNotFoundError(LookupError):
    """
    Wird geworfen, wenn eine ID im Register nicht existiert.
    - record_id: die angefragte ID
    - kind: "Data point" oder "Application"
    """

    def __init__(self, kind: str, record_id: int) -> None:
        super().__init__(f"{kind} with ID {record_id} doesn't exist")
        self.kind = kind
        self.record_id = record_id


class Controller:
    """
    Register für Datenpunkte und Applikationen eines Systems.

    Regeln:
    - Reihenfolge = Einfügereihenfolge
    - Löschen verschiebt nur die nachfolgenden Einträge nach vorne
    - next_*_id ist immer größer als jede je vergebene ID
    - Beide Register und Zähler sind unabhängig
    """

    def __init__(self, system_name: str) -> None:
        """Erstellt ein leeres System. Beide Zähler starten bei 1."""
        self._system_name = system_name
        self._data_points: List[DataPoint] = []
        self._next_data_point_id = 1
        self._applications: List[Application] = []
        self._next_application_id = 1

    @classmethod
    def restore(
        cls,
        system_name: str,
        data_points: Iterable[DataPoint],
        next_data_point_id: int,
        applications: Iterable[Application],
        next_application_id: int,
    ) -> Controller:
        """
        Baut einen Controller aus gespeicherten Werten wieder auf.

        Fehlerbehandlung:
        - ValueError bei doppelten IDs
        - ValueError, wenn ein Zähler nicht größer als alle IDs ist
        """
        controller = cls(system_name)
        controller._data_points = list(data_points)
        controller._applications = list(applications)
        controller._next_data_point_id = next_data_point_id
        controller._next_application_id = next_application_id

        _check_registry("data_points", controller._data_points, next_data_point_id)
        _check_registry("applications", controller._applications, next_application_id)
        return controller

    @property
    def system_name(self) -> str:
        return self._system_name

    @property
    def next_data_point_id(self) -> int:
        return self._next_data_point_id

    @property
    def next_application_id(self) -> int:
        return self._next_application_id

    def change_name(self, new_name: str) -> None:
        """Ersetzt den Systemnamen. Auch ein leerer Name ist erlaubt."""
        self._system_name = new_name

    # Datenpunkte

    def add_data_point(self, name: str, description: str) -> int:
        """Legt einen Datenpunkt an und gibt die neue ID zurück."""
        new_id = self._next_data_point_id
        self._data_points.append(DataPoint(new_id, name, description))
        self._next_data_point_id += 1
        return new_id

    def get_data_point_index(self, data_point_id: int) -> Optional[int]:
        """Position des Datenpunkts im Register oder None."""
        for index, d in enumerate(self._data_points):
            if d.id == data_point_id:
                return index
        return None

    def remove_data_point(self, data_point_id: int) -> int:
        """
        Löscht einen Datenpunkt und gibt dessen ID zurück.
        Der Zähler wird nicht zurückgesetzt.

        Fehlerbehandlung:
        - RecordNotFoundError, wenn die ID fehlt. Das Register bleibt unverändert.
        """
        index = self.get_data_point_index(data_point_id)
        if index is None:
            raise RecordNotFoundError("Data point", data_point_id)
        del self._data_points[index]
        return data_point_id

    def get_data_points(self) -> Tuple[DataPoint, ...]:
        """Alle Datenpunkte in Einfügereihenfolge (nur lesend)."""
        return tuple(self._data_points)

    # Applikationen

    def add_application(self, name: str, description: str) -> int:
        """Legt eine Applikation an und gibt die neue ID zurück."""
        new_id = self._next_application_id
        self._applications.append(Application(new_id, name, description))
        self._next_application_id += 1
        return new_id

    def get_application_index(self, application_id: int) -> Optional[int]:
        """Position der Applikation im Register oder None."""
        for index, a in enumerate(self._applications):
            if a.id == application_id:
                return index
        return None

    def remove_application(self, application_id: int) -> int:
        """
        Löscht eine Applikation und gibt deren ID zurück.

        Fehlerbehandlung:
        - RecordNotFoundError, wenn die ID fehlt. Das Register bleibt unverändert.
        """
        index = self.get_application_index(application_id)
        if index is None:
            raise RecordNotFoundError("Application", application_id)
        del self._applications[index]
        return application_id

    def get_applications(self) -> Tuple[Application, ...]:
        """Alle Applikationen in Einfügereihenfolge (nur lesend)."""
        return tuple(self._applications)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Controller):
            return NotImplemented
        return (
            self._system_name == other._system_name
            and self._data_points == other._data_points
            and self._next_data_point_id == other._next_data_point_id
            and self._applications == other._applications
            and self._next_application_id == other._next_application_id
        )

    def __repr__(self) -> str:
        return (
            f"Controller(system_name={self._system_name!r}, "
            f"data_points={len(self._data_points)}, "
            f"applications={len(self._applications)})"
        )


def _check_registry(label: str, records: List, next_id: int) -> None:
    """Prüft die Register-Regeln nach dem Wiederherstellen."""
    if next_id < 1:
        raise ValueError(f"next id für {label} muss >= 1 sein, ist aber {next_id}.")

    ids = [r.id for r in records]
    if len(set(ids)) != len(ids):
        raise ValueError(f"{label} enthält doppelte IDs.")

    # Der Zähler muss über jeder vergebenen ID liegen.
    if ids and max(ids) >= next_id:
        raise ValueError(
            f"next id für {label} ({next_id}) muss größer als die höchste ID ({max(ids)}) sein."
        )
