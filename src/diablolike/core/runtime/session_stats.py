"""
session_stats.py
----------------
Tracks statistics for the current play session.
"""

from diablolike.core.services.event_manager import (
    EnemyDiedEvent, PlayerDamagedEvent, ItemAddedEvent
)


class SessionStats:
    """Counters fed by world events. Lives as long as its World."""

    def __init__(self):
        self.enemies_killed = 0
        self.damage_taken = 0
        self.items_added = 0
        self.ticks = 0

    def bind(self, events):
        """Subscribe to the events this tracker counts."""
        events.subscribe(EnemyDiedEvent, self.on_enemy_died)
        events.subscribe(PlayerDamagedEvent, self.on_player_damaged)
        events.subscribe(ItemAddedEvent, self.on_item_added)

    def on_enemy_died(self, event: EnemyDiedEvent):
        self.enemies_killed += 1

    def on_player_damaged(self, event: PlayerDamagedEvent):
        self.damage_taken += event.amount

    def on_item_added(self, event: ItemAddedEvent):
        self.items_added += event.quantity

    def add_tick(self):
        self.ticks += 1

    def __repr__(self):
        return (
            f"<SessionStats kills={self.enemies_killed} "
            f"damage={self.damage_taken} items={self.items_added} ticks={self.ticks}>"
        )
