"""
inventory_view.py
-----------------
Draws the inventory grid, the carried stack and the item tooltip.

All positions here are screen space; the inventory is not affected by the
camera.
"""

from diablolike.core.runtime.game_settings import InventorySettings, Layers


QUANTITY_OFFSET = (16, 18)


def wrap_text(text: str, max_width: int, glyph_width: int) -> list:
    """
    Greedy word wrap measured with a fixed-width glyph metric.

    A single word wider than `max_width` gets a line of its own rather
    than being split.
    """
    lines = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if line and len(candidate) * glyph_width > max_width:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


class InventoryView:
    """Queues inventory draw calls on the DrawManager each frame."""

    def __init__(self, inventory):
        self.inventory = inventory

    @property
    def layout(self):
        return self.inventory.layout

    def draw(self, draw_manager, pointer):
        if not self.inventory.is_open:
            return

        self._draw_grid(draw_manager)
        self._draw_carried(draw_manager, pointer)
        self._draw_tooltip(draw_manager, pointer)

    def _draw_grid(self, draw_manager):
        size = self.layout.slot_size
        for slot in self.inventory.iter_slots():
            sx, sy = self.layout.slot_origin(slot.row, slot.col)
            draw_manager.queue_shape("rect", (sx, sy, size, size), InventorySettings.SLOT_COLOR, Layers.UI)

            item = slot.item
            if item is None:
                continue
            if item.icon is not None:
                draw_manager.queue_draw(item.icon, (sx, sy), Layers.UI)
            if item.quantity > 1:
                draw_manager.queue_text(
                    str(item.quantity),
                    (sx + QUANTITY_OFFSET[0], sy + QUANTITY_OFFSET[1]),
                    InventorySettings.NAME_COLOR, Layers.UI
                )

    def _draw_carried(self, draw_manager, pointer):
        item = self.inventory.dragging_item
        if item is None or item.icon is None:
            return
        ox, oy = self.inventory.drag_offset
        draw_manager.queue_draw(item.icon, (pointer[0] - ox, pointer[1] - oy), Layers.TOOLTIP)

    def _draw_tooltip(self, draw_manager, pointer):
        item = self.inventory.hovered_item(*pointer)
        if item is None:
            return

        tip = self.layout.tooltip
        lines = wrap_text(item.description, tip.wrap_width, tip.glyph_width)
        x = pointer[0] + tip.cursor_offset
        y = pointer[1] + tip.cursor_offset
        height = 20 + len(lines) * tip.line_height

        draw_manager.queue_shape("rect", (x, y, tip.width, height), InventorySettings.TOOLTIP_COLOR, Layers.TOOLTIP)
        draw_manager.queue_text(item.name, (x + tip.padding, y + tip.padding),
                                InventorySettings.NAME_COLOR, Layers.TOOLTIP)
        for i, line in enumerate(lines):
            draw_manager.queue_text(
                line,
                (x + tip.padding, y + tip.padding + (i + 1) * tip.line_height),
                InventorySettings.DESCRIPTION_COLOR, Layers.TOOLTIP
            )
