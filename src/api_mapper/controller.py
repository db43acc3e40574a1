"""
Controller layer

Der MenuController steuert die App. Er verbindet Repository, Domain-Controller und View.

Aufgaben:
- Menüs anzeigen und Eingaben verarbeiten
- Eingaben in Aufrufe am Domain-Controller übersetzen
- Snapshots laden und speichern
- Fehler als Nachricht anzeigen
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from .config import AppSettings
from .domain import Application, Controller, DataPoint, RecordNotFoundError
from .persistence import ControllerRepository, SnapshotError
from .view import (
    APPLICATION_MENU,
    DATA_POINT_MENU,
    MAIN_MENU,
    SYSTEM_MENU,
    ConsoleMenuView,
    MenuEntry,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordMenu:
    """
    Beschreibt das Untermenü für eine Record-Art.
    Datenpunkte und Applikationen nutzen dieselbe Menü-Schleife,
    aber eigene Methoden am Domain-Controller.
    """
    title: str
    label: str
    entries: Sequence[MenuEntry]
    list_records: Callable[[Controller], Sequence[Union[DataPoint, Application]]]
    add_record: Callable[[Controller, str, str], int]
    remove_record: Callable[[Controller, int], int]


DATA_POINTS = RecordMenu(
    title="Datapoint Menu",
    label="datapoint",
    entries=DATA_POINT_MENU,
    list_records=Controller.get_data_points,
    add_record=Controller.add_data_point,
    remove_record=Controller.remove_data_point,
)

APPLICATIONS = RecordMenu(
    title="Application Menu",
    label="application",
    entries=APPLICATION_MENU,
    list_records=Controller.get_applications,
    add_record=Controller.add_application,
    remove_record=Controller.remove_application,
)


class MenuController:
    """
    Hauptcontroller für die Konsole.

    Aufgaben:
    - Menü-Schleifen (Haupt-, System- und Record-Menüs)
    - Aufrufe an den Domain-Controller
    - Laden/Speichern über das Repository
    """

    def __init__(
        self,
        repo: ControllerRepository,
        view: ConsoleMenuView,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Erstellt den Controller.

        - repo: Laden/Speichern
        - view: Ein-/Ausgabe
        - settings: Defaults für Systemname und Dateipfad
        """
        self._repo = repo
        self._view = view
        self._settings = settings or AppSettings()
        self._controller = Controller(self._settings.default_system_name)
        self._aenderungen_seit_speicherung: bool = False

    @property
    def controller(self) -> Controller:
        """Der aktuell bearbeitete Domain-Controller."""
        return self._controller

    @property
    def has_unsaved_changes(self) -> bool:
        return self._aenderungen_seit_speicherung

    def starte_app(self) -> None:
        """
        Startet die Anwendung.
        Endlosschleife im Hauptmenü bis 0 gewählt wird.
        """
        while True:
            self._view.render_menu("API Mapper - Main Menu", MAIN_MENU, self._controller.system_name)
            choice = self._view.prompt("Choice: ").strip()

            if choice == "1":
                self.load_from_file()
            elif choice == "2":
                self.save_to_file()
            elif choice == "3":
                self.change_system_name()
            elif choice == "4":
                self.new_system()
            elif choice == "5":
                self.system_menu()
            elif choice == "0":
                if self._beenden():
                    break
            else:
                self._view.show_message("Invalid choice.")

    def load_from_file(self) -> None:
        """
        Lädt einen Snapshot.
        Der aktuelle Stand wird nur bei Erfolg ersetzt.
        """
        path = self._prompt_filename()
        try:
            loaded = self._repo.load(path)
        except SnapshotError as e:
            self._view.show_message(f"Load failed: {e}")
        else:
            self._controller = loaded
            self._aenderungen_seit_speicherung = False
            self._view.show_message(f"Load successful: {path}")
        self._view.pause()

    def save_to_file(self) -> bool:
        """
        Speichert den aktuellen Stand.
        Gibt zurück, ob das Speichern geklappt hat.
        """
        path = self._prompt_filename()
        try:
            self._repo.save(self._controller, path)
        except SnapshotError as e:
            self._view.show_message(f"Save failed: {e}")
            self._view.pause()
            return False

        self._aenderungen_seit_speicherung = False
        self._view.show_message(f"Saved to: {path}")
        self._view.pause()
        return True

    def change_system_name(self) -> None:
        """Setzt einen neuen Systemnamen. Leere Eingabe ist erlaubt."""
        new_name = self._view.prompt("Enter new system name: ").strip()
        self._controller.change_name(new_name)
        self._aenderungen_seit_speicherung = True
        logger.debug("Systemname geändert: %r", new_name)

    def new_system(self) -> None:
        """Verwirft den aktuellen Stand und startet ein leeres System."""
        self._controller = Controller(self._settings.default_system_name)
        self._aenderungen_seit_speicherung = False
        self._view.show_message(f"Starting new system: {self._controller.system_name}")
        self._view.pause()

    def system_menu(self) -> None:
        """Auswahl zwischen Datenpunkten und Applikationen."""
        while True:
            self._view.render_menu("System Menu", SYSTEM_MENU)
            choice = self._view.prompt("Choice: ").strip()

            if choice == "1":
                self.record_menu(DATA_POINTS)
            elif choice == "2":
                self.record_menu(APPLICATIONS)
            elif choice == "0":
                break
            else:
                self._view.show_message("Invalid choice.")

    def record_menu(self, menu: RecordMenu) -> None:
        """Listen, Anlegen und Löschen für eine Record-Art."""
        while True:
            self._view.render_menu(menu.title, menu.entries)
            choice = self._view.prompt("Choice: ").strip()

            if choice == "1":
                self.list_records(menu)
            elif choice == "2":
                self.add_record(menu)
            elif choice == "3":
                self.delete_record(menu)
            elif choice == "0":
                break
            else:
                self._view.show_message("Invalid choice.")

    def list_records(self, menu: RecordMenu) -> None:
        """Zeigt alle Records in Einfügereihenfolge."""
        records = menu.list_records(self._controller)
        self._view.render_records(f"{menu.label.capitalize()}s", records)
        self._view.pause()

    def add_record(self, menu: RecordMenu) -> int:
        """
        Legt einen Record an.
        Name und Beschreibung werden nur außen von Leerzeichen befreit.
        """
        name = self._view.prompt(f"Enter {menu.label} name: ").strip()
        description = self._view.prompt(f"Enter {menu.label} description: ").strip()

        new_id = menu.add_record(self._controller, name, description)
        self._aenderungen_seit_speicherung = True
        logger.debug("%s angelegt: id=%d name=%r", menu.label, new_id, name)
        self._view.show_message(f"Added {menu.label} with ID: {new_id}")
        self._view.pause()
        return new_id

    def delete_record(self, menu: RecordMenu) -> Optional[int]:
        """
        Löscht einen Record per ID.
        Ungültige oder unbekannte IDs ändern nichts.
        """
        raw = self._view.prompt(f"Enter {menu.label} ID: ").strip()
        record_id = self._parse_id(raw)
        if record_id is None:
            self._view.show_message(f"Invalid ID: {raw!r}")
            self._view.pause()
            return None

        try:
            removed = menu.remove_record(self._controller, record_id)
        except RecordNotFoundError as e:
            self._view.show_message(str(e))
            self._view.pause()
            return None

        self._aenderungen_seit_speicherung = True
        logger.debug("%s gelöscht: id=%d", menu.label, removed)
        self._view.show_message(f"Deleted {menu.label} with ID: {removed}")
        self._view.pause()
        return removed

    def _prompt_filename(self) -> Path:
        """
        Fragt nach dem Dateinamen.
        Leere Eingabe bedeutet: Standard-Datei aus den Settings.
        """
        default = self._settings.default_snapshot_file
        raw = self._view.prompt(f"Enter filename (empty = {default}): ").strip()
        return Path(raw) if raw else default

    def _parse_id(self, raw: str) -> Optional[int]:
        """IDs sind Ganzzahlen >= 0. Alles andere ist ungültig."""
        try:
            value = int(raw)
        except ValueError:
            return None
        return value if value >= 0 else None

    def _beenden(self) -> bool:
        """
        Beendet das Programm.
        Bei Änderungen wird gefragt, ob gespeichert werden soll.
        Schlägt das Speichern fehl, geht es zurück ins Hauptmenü (False).
        """
        if self._aenderungen_seit_speicherung:
            antwort = self._view.prompt(
                "There are unsaved changes! Save now? (y/n): "
            ).strip().lower()
            if antwort in ('y', 'yes', 'j', 'ja') and not self.save_to_file():
                return False

        self._view.show_message("Exiting ...")
        return True
