"""
event_manager.py
----------------
Pub-sub dispatcher so the player, enemies and inventory can report what
happened without knowing who listens (HUD stats, logging).

The World owns one EventManager; there is no module-level singleton.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from diablolike.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class EnemyDiedEvent(BaseEvent):
    """Dispatched once when an enemy's health reaches zero."""
    position: tuple
    enemy_type: str


@dataclass(frozen=True)
class PlayerDamagedEvent(BaseEvent):
    """Dispatched whenever the player loses health."""
    amount: int
    health: int


@dataclass(frozen=True)
class ItemAddedEvent(BaseEvent):
    """Dispatched when an item lands in the inventory."""
    item_id: str
    quantity: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Register a callback for an event type. Duplicate callbacks are ignored."""
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        DebugLogger.system(
            f"Subscribed '{getattr(callback, '__name__', repr(callback))}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        callbacks = self._subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped so the remaining
        listeners still receive the event.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    def clear_all(self) -> None:
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
