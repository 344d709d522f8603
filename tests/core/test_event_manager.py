"""
test_event_manager.py
---------------------
Tests for event dispatch and the session counters fed by it.
"""

from diablolike.core.runtime.session_stats import SessionStats
from diablolike.core.services.event_manager import (
    EnemyDiedEvent, EventManager, ItemAddedEvent, PlayerDamagedEvent
)


def test_dispatch_reaches_only_matching_subscribers():
    events = EventManager()
    died, damaged = [], []
    events.subscribe(EnemyDiedEvent, died.append)
    events.subscribe(PlayerDamagedEvent, damaged.append)

    events.dispatch(EnemyDiedEvent(position=(0, 0), enemy_type="bat"))

    assert len(died) == 1
    assert damaged == []


def test_duplicate_subscribe_is_ignored():
    events = EventManager()
    events.subscribe(EnemyDiedEvent, print)
    events.subscribe(EnemyDiedEvent, print)
    assert events.get_subscriber_count(EnemyDiedEvent) == 1


def test_failing_callback_does_not_block_others():
    events = EventManager()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    events.subscribe(ItemAddedEvent, broken)
    events.subscribe(ItemAddedEvent, received.append)
    events.dispatch(ItemAddedEvent(item_id="potion-0", quantity=1))

    assert len(received) == 1


def test_unsubscribe_and_clear():
    events = EventManager()
    events.subscribe(EnemyDiedEvent, print)
    events.unsubscribe(EnemyDiedEvent, print)
    assert events.get_subscriber_count() == 0

    events.subscribe(EnemyDiedEvent, print)
    events.clear_all()
    assert events.get_subscriber_count() == 0


def test_session_stats_count_events():
    events = EventManager()
    stats = SessionStats()
    stats.bind(events)

    events.dispatch(EnemyDiedEvent(position=(0, 0), enemy_type="bat"))
    events.dispatch(PlayerDamagedEvent(amount=2, health=8))
    events.dispatch(ItemAddedEvent(item_id="potion-1", quantity=3))

    assert (stats.enemies_killed, stats.damage_taken, stats.items_added) == (1, 2, 3)
