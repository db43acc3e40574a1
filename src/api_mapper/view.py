"""
UI layer für die Console

Diese View zeigt die Menüs in der Konsole.
- Menüs als ASCII-Kasten ausgeben
- Records auflisten
- Eingaben lesen
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, Union

from .domain import Application, DataPoint

MenuEntry = Tuple[str, str]


MAIN_MENU: List[MenuEntry] = [
    ("1", "Load from file"),
    ("2", "Save to file"),
    ("3", "Change system name"),
    ("4", "New system"),
    ("5", "System menu"),
    ("0", "Exit"),
]

SYSTEM_MENU: List[MenuEntry] = [
    ("1", "Manage datapoints"),
    ("2", "Manage applications"),
    ("0", "Main menu"),
]

DATA_POINT_MENU: List[MenuEntry] = [
    ("1", "List datapoints"),
    ("2", "Add datapoint"),
    ("3", "Delete datapoint"),
    ("0", "System menu"),
]

APPLICATION_MENU: List[MenuEntry] = [
    ("1", "List applications"),
    ("2", "Add application"),
    ("3", "Delete application"),
    ("0", "System menu"),
]


class ConsoleMenuView:
    """
    View für die Konsole.
    Alle Ausgaben laufen über print, alle Eingaben über input.
    """

    def __init__(self, width: int = 40) -> None:
        """Erstellt die View. width ist die Breite der Menü-Kästen."""
        self._width = max(30, width)

    def render_menu(self, title: str, entries: Sequence[MenuEntry], system_name: str | None = None) -> None:
        """Zeigt ein Menü mit Titel und Einträgen."""
        print()
        for line in self.build_menu(title, entries, system_name):
            print(line)

    def build_menu(self, title: str, entries: Sequence[MenuEntry], system_name: str | None = None) -> List[str]:
        """
        Baut das Menü als Zeilen.
        Der Systemname steht nur im Hauptmenü.
        """
        inner = self._width - 2
        lines = [
            "╔" + "═" * inner + "╗",
            "║" + title.center(inner) + "║",
            "╠" + "═" * inner + "╣",
        ]
        if system_name is not None:
            lines.append(self._row(f"System: {system_name}"))
            lines.append("╟" + "─" * inner + "╢")
        for key, label in entries:
            lines.append(self._row(f"{key}) {label}"))
        lines.append("╚" + "═" * inner + "╝")
        return lines

    def render_records(self, title: str, records: Iterable[Union[DataPoint, Application]]) -> None:
        """Listet Records in Einfügereihenfolge."""
        print(f"\n{title}:")
        lines = self.format_records(records)
        if not lines:
            print("  (no entries)")
            return
        for line in lines:
            print(line)

    def format_records(self, records: Iterable[Union[DataPoint, Application]]) -> List[str]:
        """Eine Zeile pro Record."""
        return [
            f"  Name: {r.name}. Description: {r.description}. ID: {r.id}"
            for r in records
        ]

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def pause(self) -> None:
        """Wartet auf Enter, bevor das Menü wieder erscheint."""
        self.prompt("Press enter to return to menu ...")

    def _row(self, text: str) -> str:
        """Eine Zeile im Kasten. Zu lange Texte werden gekürzt."""
        inner = self._width - 2
        content = f"  {text}"
        if len(content) > inner:
            content = content[: inner - 1] + "…"
        return "║" + content.ljust(inner) + "║"
