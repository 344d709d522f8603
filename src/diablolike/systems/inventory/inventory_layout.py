"""
inventory_layout.py
-------------------
Screen-space geometry of the inventory grid and its tooltip, read from
ui/inventory.yaml.
"""

from dataclasses import dataclass, fields

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.services.config_manager import load_config


DEFAULT_LAYOUT = {
    "inventory": {
        "rows": 4,
        "cols": 6,
        "origin": [50, 50],
        "slot_size": 32,
        "spacing": 36,
        "tooltip": {
            "width": 150,
            "wrap_width": 140,
            "glyph_width": 7,
            "line_height": 14,
            "cursor_offset": 10,
            "padding": 4,
        },
    }
}


@dataclass(frozen=True)
class TooltipLayout:
    width: int = 150
    wrap_width: int = 140
    glyph_width: int = 7
    line_height: int = 14
    cursor_offset: int = 10
    padding: int = 4


@dataclass(frozen=True)
class InventoryLayout:
    rows: int = 4
    cols: int = 6
    origin_x: int = 50
    origin_y: int = 50
    slot_size: int = 32
    spacing: int = 36
    tooltip: TooltipLayout = TooltipLayout()

    def slot_origin(self, row: int, col: int):
        """Top-left screen position of a slot."""
        return self.origin_x + col * self.spacing, self.origin_y + row * self.spacing

    def cell_at(self, px: int, py: int):
        """
        (row, col) of the slot whose square contains the point, or None.

        The gaps between slots belong to no slot.
        """
        for row in range(self.rows):
            for col in range(self.cols):
                sx, sy = self.slot_origin(row, col)
                if sx <= px < sx + self.slot_size and sy <= py < sy + self.slot_size:
                    return row, col
        return None

    @classmethod
    def from_config(cls, data: dict) -> "InventoryLayout":
        inv = data["inventory"]
        origin = inv.get("origin", [50, 50])
        return cls(
            rows=int(inv["rows"]),
            cols=int(inv["cols"]),
            origin_x=int(origin[0]),
            origin_y=int(origin[1]),
            slot_size=int(inv.get("slot_size", 32)),
            spacing=int(inv.get("spacing", 36)),
            tooltip=_tooltip_from_config(inv.get("tooltip", {})),
        )


def _tooltip_from_config(raw: dict) -> TooltipLayout:
    known = {f.name for f in fields(TooltipLayout)}
    for key in sorted(set(raw) - known):
        DebugLogger.warn(f"Unknown tooltip key '{key}' in inventory.yaml, ignored", category="loading")
    return TooltipLayout(**{k: int(v) for k, v in raw.items() if k in known})


def load_inventory_layout() -> InventoryLayout:
    return InventoryLayout.from_config(load_config("inventory.yaml", DEFAULT_LAYOUT))
