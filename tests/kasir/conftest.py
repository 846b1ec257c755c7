"""Shared pytest fixtures for kasir tests."""

from decimal import Decimal
from pathlib import Path

import pytest

from kasir.catalog import MenuCatalog
from kasir.config import Settings
from kasir.models import Order

# Path to the warung menu JSON relative to project root
MENU_JSON_PATH = Path(__file__).resolve().parents[2] / "menus" / "warung" / "menu.json"


class ScriptedConsole:
    """Console that replays canned input lines and records everything shown.

    Raises EOFError once the script runs out, like input() at end of stdin.
    """

    def __init__(self, inputs: list[str]) -> None:
        self._inputs = list(inputs)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self._inputs:
            raise EOFError
        return self._inputs.pop(0)

    def emit(self, text: str) -> None:
        self.output.append(text)

    @property
    def remaining(self) -> int:
        return len(self._inputs)


@pytest.fixture
def menu() -> MenuCatalog:
    """Load the warung menu from JSON."""
    return MenuCatalog.from_json_file(MENU_JSON_PATH)


@pytest.fixture
def small_menu() -> MenuCatalog:
    """Two-item menu used by the end-to-end scenarios."""
    catalog = MenuCatalog()
    catalog.add_item("Nasi Goreng", Decimal("25000"))
    catalog.add_item("Mie Goreng", Decimal("22000"))
    return catalog


@pytest.fixture
def empty_order() -> Order:
    """Create a fresh empty order."""
    return Order()


@pytest.fixture
def make_console():
    """Factory for scripted consoles."""
    return ScriptedConsole


@pytest.fixture
def settings() -> Settings:
    """Settings with no processing delay and no log file."""
    return Settings(processing_delay_seconds=0.0, log_to_file=False, menu_json_path=None)


@pytest.fixture
def menu_json_path() -> Path:
    return MENU_JSON_PATH
