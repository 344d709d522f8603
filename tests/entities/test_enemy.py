"""
test_enemy.py
-------------
Unit tests for Enemy seeking, damage and the template catalog.
"""

import pytest

from diablolike.entities.enemies.base_enemy import Enemy
from diablolike.entities.enemies.enemy_catalog import EnemyTemplate, load_enemy_templates
from diablolike.entities.entity_state import LifecycleState


# ===========================================================
# Movement
# ===========================================================

def test_enemy_steps_toward_target_at_speed():
    enemy = Enemy(0, 0, speed=2.0)
    enemy.update(3, 4)

    assert enemy.x == pytest.approx(1.2)
    assert enemy.y == pytest.approx(1.6)


def test_enemy_holds_position_within_one_unit():
    enemy = Enemy(10, 10, speed=5.0)
    enemy.update(10.5, 10)

    assert (enemy.x, enemy.y) == (10, 10)


def test_dead_enemy_does_not_move():
    enemy = Enemy(0, 0, health=1)
    enemy.take_damage(1)
    enemy.update(100, 0)

    assert enemy.x == 0


def test_enemy_animation_loops_within_frame_count():
    enemy = Enemy(0, 0, frames=["a", "b", "c"], frame_delay=2)
    for _ in range(50):
        enemy.update(0, 0)
        assert 0 <= enemy.animator.frame_index < 3


# ===========================================================
# Damage
# ===========================================================

def test_take_damage_reports_kill_exactly_once():
    enemy = Enemy(0, 0, health=2)

    assert enemy.take_damage(1) is False
    assert enemy.take_damage(1) is True
    assert enemy.death_state == LifecycleState.DEAD
    assert enemy.take_damage(1) is False
    assert enemy.health == 0


def test_overkill_clamps_health():
    enemy = Enemy(0, 0, health=3)
    assert enemy.take_damage(10)
    assert enemy.health == 0


def test_draw_without_frames_is_skipped(mock_draw_manager):
    enemy = Enemy(0, 0, frames=[])
    enemy.draw(mock_draw_manager, camera=None)
    mock_draw_manager.queue_sprite.assert_not_called()


# ===========================================================
# Templates
# ===========================================================

def test_template_creates_configured_enemy():
    template = EnemyTemplate(name="red_slime", health=2, speed=1.0, frame_delay=7, frames=("x",))
    enemy = template.create(5, 6)

    assert enemy.health == 2
    assert enemy.enemy_type == "red_slime"
    assert enemy.animator.frame_delay == 7
    assert enemy.frames == ["x"]


def test_shipped_templates_have_expected_health():
    templates = load_enemy_templates()

    assert {name: t.health for name, t in templates.items()} == {
        "green_slime": 1,
        "red_slime": 2,
        "bat": 5,
    }
    assert all(t.frames == () for t in templates.values())


def test_frame_loader_receives_raw_template():
    seen = []

    def loader(raw):
        seen.append(raw["sheet"]["path"])
        return ["frame"]

    templates = load_enemy_templates(loader, config={"templates": {
        "bat": {"hp": 5, "sheet": {"path": "bat/default.png"}},
    }})

    assert seen == ["bat/default.png"]
    assert templates["bat"].frames == ("frame",)


def test_template_without_hp_is_rejected():
    with pytest.raises(ValueError):
        load_enemy_templates(config={"templates": {"ghost": {"speed": 1.0}}})
