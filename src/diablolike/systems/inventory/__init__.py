"""
Inventory system exports.

Provides the slot grid and its screen layout.
"""

from diablolike.systems.inventory.inventory import Inventory, Slot
from diablolike.systems.inventory.inventory_layout import InventoryLayout, load_inventory_layout

__all__ = [
    'Inventory',
    'Slot',
    'InventoryLayout',
    'load_inventory_layout',
]
