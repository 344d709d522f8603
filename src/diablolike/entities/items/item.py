"""
item.py
-------
Inventory items and the item catalog loaded from items.json.
"""

from dataclasses import dataclass, field
from typing import Optional

import pygame

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.services.config_manager import load_config


ICON_SIZE = (32, 32)


@dataclass(eq=False)
class Item:
    """
    One stack of one item kind.

    Items compare by identity: two potions with the same id are still two
    distinct stacks until the inventory merges them.
    """
    item_id: str
    name: str
    quantity: int = 1
    max_stack: int = 1
    description: str = ""
    icon: Optional[pygame.Surface] = field(default=None, repr=False)

    def can_merge(self, other: "Item") -> bool:
        """True if `other` may be stacked onto this item."""
        return self.item_id == other.item_id and self.quantity < self.max_stack


def make_icon(color, size=ICON_SIZE) -> pygame.Surface:
    icon = pygame.Surface(size)
    icon.fill(tuple(color))
    return icon


# ===========================================================
# Catalog
# ===========================================================

def load_item_catalog() -> dict:
    """{item_id: definition} from items.json."""
    catalog = load_config("items.json", {"items": {}}).get("items", {})
    if not catalog:
        DebugLogger.warn("items.json defines no items", category="inventory")
    return catalog


def create_item(item_id: str, catalog: dict, quantity: int = 1) -> Item:
    """
    Build an Item from its catalog definition.

    Raises:
        KeyError: Unknown item_id.
    """
    data = catalog[item_id]
    color = data.get("icon_color")
    return Item(
        item_id=item_id,
        name=data.get("name", item_id),
        quantity=quantity,
        max_stack=data.get("max_stack", 1),
        description=data.get("description", ""),
        icon=make_icon(color) if color else None,
    )


def create_test_item(rng, catalog: dict) -> Item:
    """Pick a random catalog entry (the debug 'add item' key)."""
    return create_item(rng.choice(sorted(catalog)), catalog)
