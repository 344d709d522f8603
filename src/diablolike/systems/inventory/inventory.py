"""
inventory.py
------------
Grid inventory with stacking, a toggle key and pointer drag-and-drop.

Responsibilities
----------------
- Hold a rows x cols grid of slots, each empty or holding one Item stack
- Merge new items into matching stacks, then fill the first empty slot
- Open/close on the toggle action with a debounce cooldown
- Pick up, drop and swap stacks with the pointer while open

Item conservation: every Item lives either in exactly one slot or in
`dragging_item`, never both and never nowhere.
"""

from dataclasses import replace

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import InventorySettings
from diablolike.core.services.event_manager import ItemAddedEvent
from .inventory_layout import InventoryLayout


class Slot:
    __slots__ = ("row", "col", "item")

    def __init__(self, row, col, item=None):
        self.row = row
        self.col = col
        self.item = item

    @property
    def is_empty(self) -> bool:
        return self.item is None

    def __repr__(self):
        return f"<Slot ({self.row}, {self.col}) item={self.item!r}>"


class Inventory:
    """Fixed-size slot grid plus the stack currently carried by the pointer."""

    def __init__(self, rows=None, cols=None, layout=None, events=None,
                 toggle_cooldown=InventorySettings.TOGGLE_COOLDOWN):
        """
        Args:
            rows, cols: Grid size (overrides the layout's when given)
            layout: InventoryLayout giving slot geometry
            events: EventManager notified with ItemAddedEvent (optional)
            toggle_cooldown: Ticks the toggle key is ignored after a toggle
        """
        layout = layout or InventoryLayout()
        if rows is not None or cols is not None:
            layout = replace(
                layout,
                rows=layout.rows if rows is None else rows,
                cols=layout.cols if cols is None else cols,
            )
        self.layout = layout
        self.events = events
        self.rows = self.layout.rows
        self.cols = self.layout.cols
        self.slots = [[Slot(r, c) for c in range(self.cols)] for r in range(self.rows)]

        self.is_open = False
        self.toggle_cooldown_max = toggle_cooldown
        self.toggle_cooldown = 0
        self.dragging_item = None
        self.drag_offset = (0, 0)

        DebugLogger.init_entry("Inventory")
        DebugLogger.init_sub(f"{self.rows}x{self.cols} slots")

    # ===========================================================
    # Per-tick Update
    # ===========================================================

    def update(self, snapshot):
        """Handle the toggle key and, while open, pointer presses."""
        if self.toggle_cooldown > 0:
            self.toggle_cooldown -= 1

        if snapshot.is_held("toggle_inventory") and self.toggle_cooldown == 0:
            self.toggle()

        if self.is_open and snapshot.pointer_pressed:
            self.handle_pointer_press(*snapshot.pointer)

    def toggle(self):
        self.is_open = not self.is_open
        self.toggle_cooldown = self.toggle_cooldown_max
        DebugLogger.state(f"Inventory {'opened' if self.is_open else 'closed'}", category="inventory")

    def handle_pointer_press(self, px, py) -> bool:
        """
        Pick up, drop or swap at the pointer.

        Returns:
            bool: False if the press hit no slot or there was nothing to move.
        """
        slot = self.slot_at(px, py)
        if slot is None:
            return False

        if self.dragging_item is None:
            if slot.is_empty:
                return False
            self.dragging_item, slot.item = slot.item, None
            sx, sy = self.layout.slot_origin(slot.row, slot.col)
            self.drag_offset = (px - sx, py - sy)
            DebugLogger.action(f"Picked up {self.dragging_item.name} from ({slot.row}, {slot.col})",
                               category="inventory")
            return True

        # Drop onto empty slot or swap with its occupant
        self.dragging_item, slot.item = slot.item, self.dragging_item
        DebugLogger.action(f"Placed {slot.item.name} at ({slot.row}, {slot.col})", category="inventory")
        return True

    # ===========================================================
    # Adding Items
    # ===========================================================

    def add_item(self, item) -> bool:
        """
        Store an item stack.

        Stacks of the same id that are below max_stack absorb the whole
        quantity, clamped to max_stack (any excess is discarded). Otherwise
        the item takes the first empty slot in row-major order.

        Returns:
            bool: False if the inventory is full and nothing was stored.
        """
        for slot in self.iter_slots():
            if slot.item is not None and slot.item.can_merge(item):
                before = slot.item.quantity
                slot.item.quantity = min(before + item.quantity, slot.item.max_stack)
                self._notify_added(item, slot.item.quantity - before)
                return True

        for slot in self.iter_slots():
            if slot.is_empty:
                slot.item = item
                self._notify_added(item, item.quantity)
                return True

        DebugLogger.warn(f"Inventory full, dropped {item.name}", category="inventory")
        return False

    def _notify_added(self, item, stored):
        DebugLogger.action(f"Added {item.name} x{stored}", category="inventory")
        if self.events is not None:
            self.events.dispatch(ItemAddedEvent(item_id=item.item_id, quantity=stored))

    # ===========================================================
    # Queries
    # ===========================================================

    def iter_slots(self):
        """Slots in row-major order."""
        for row in self.slots:
            yield from row

    def slot_at(self, px, py):
        cell = self.layout.cell_at(px, py)
        if cell is None:
            return None
        row, col = cell
        return self.slots[row][col]

    def hovered_item(self, px, py):
        """Item under the pointer while open, else None."""
        if not self.is_open:
            return None
        slot = self.slot_at(px, py)
        return slot.item if slot is not None else None

    def all_items(self) -> list:
        """Every stored stack, including the carried one."""
        items = [slot.item for slot in self.iter_slots() if slot.item is not None]
        if self.dragging_item is not None:
            items.append(self.dragging_item)
        return items

    @property
    def is_full(self) -> bool:
        return all(not slot.is_empty for slot in self.iter_slots())

    def __repr__(self):
        return (
            f"<Inventory {self.rows}x{self.cols} open={self.is_open} "
            f"items={len(self.all_items())} dragging={self.dragging_item is not None}>"
        )
