from __future__ import annotations

from typing import List, Optional

import pytest

from api_mapper.config import AppSettings
from api_mapper.controller import MenuController
from api_mapper.persistence import JsonControllerRepository
from api_mapper.view import ConsoleMenuView


class ScriptedView(ConsoleMenuView):
    """View mit vorgegebenen Eingaben. Ausgaben werden gesammelt statt gedruckt."""

    def __init__(self, inputs: List[str]) -> None:
        super().__init__()
        self._inputs = list(inputs)
        self.messages: List[str] = []
        self.menus: List[tuple] = []
        self.listings: List[tuple] = []

    def prompt(self, frage: str) -> str:
        if not self._inputs:
            raise AssertionError(f"Keine Eingabe mehr für {frage!r}")
        return self._inputs.pop(0)

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    def render_menu(self, title, entries, system_name: Optional[str] = None) -> None:
        self.menus.append((title, system_name))

    def render_records(self, title, records) -> None:
        self.listings.append((title, self.format_records(records)))

    @property
    def remaining_inputs(self) -> List[str]:
        return list(self._inputs)


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(default_snapshot_file=tmp_path / "default.json")


@pytest.fixture
def make_app(settings):
    """Baut einen MenuController mit echtem JSON-Repository und Skript-Eingaben."""

    def _make(inputs: List[str]):
        view = ScriptedView(inputs)
        app = MenuController(JsonControllerRepository(), view, settings)
        return app, view

    return _make
