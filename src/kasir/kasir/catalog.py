"""In-memory restaurant menu.

The catalog is populated once at startup and only read while an order is
being collected, so it needs no locking.
"""

import json
from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from .errors import MenuLoadError
from .models import MenuItem

DEFAULT_MENU: tuple[tuple[str, int], ...] = (
    ("Nasi Goreng", 25000),
    ("Mie Goreng", 22000),
    ("Ayam Bakar", 30000),
)


class MenuMetadata(BaseModel):
    menu_id: str
    menu_name: str
    restaurant: str = ""


class MenuDocument(BaseModel):
    """Shape of a menu JSON file."""

    metadata: MenuMetadata
    items: list[MenuItem] = Field(default_factory=list)


class MenuCatalog:
    """Ordered, append-only list of menu items.

    Names are not required to be unique; lookups return the first
    case-insensitive match in insertion order.
    """

    def __init__(self, name: str = "Menu") -> None:
        self.name = name
        self._items: list[MenuItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.list_all())

    def add_item(self, name: str, price: Decimal | int | str) -> MenuItem:
        item = MenuItem(name=name, price=price)
        if item.price < 0:
            logger.warning("Menu item {} added with negative price {}", name, item.price)
        self._items.append(item)
        return item

    def find_by_name(self, query: str) -> MenuItem | None:
        """Return the first item whose name equals ``query`` ignoring case, else None."""
        for item in self._items:
            if item.matches(query):
                return item
        return None

    def list_all(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    @classmethod
    def default(cls) -> "MenuCatalog":
        """Build the house menu."""
        catalog = cls(name="Menu")
        for name, price in DEFAULT_MENU:
            catalog.add_item(name, price)
        return catalog

    @classmethod
    def from_dict(cls, data: dict) -> "MenuCatalog":
        """Load a catalog from a dictionary matching the menu JSON structure."""
        try:
            document = MenuDocument.model_validate(data)
        except ValidationError as exc:
            raise MenuLoadError(f"Invalid menu document: {exc}") from exc

        catalog = cls(name=document.metadata.menu_name)
        for item in document.items:
            catalog.add_item(item.name, item.price)
        return catalog

    @classmethod
    def from_json_file(cls, path: str | Path) -> "MenuCatalog":
        """Load a catalog from a JSON file path."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise MenuLoadError(f"Could not read menu file {path}: {exc}") from exc
        return cls.from_dict(data)
