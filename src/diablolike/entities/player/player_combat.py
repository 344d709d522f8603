"""
player_combat.py
----------------
Handles player combat:
- Melee attack start and cooldown gating
- Hit resolution against every enemy in range
- Contact damage taken from enemies
"""

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import Combat
from diablolike.core.services.event_manager import EnemyDiedEvent, PlayerDamagedEvent
from diablolike.entities.player.player_state import PlayerState


# ===========================================================
# Melee Attack
# ===========================================================

def can_attack(player) -> bool:
    return (
        not player.dead
        and player.attack_timer == 0
        and player.state != PlayerState.ATTACKING
    )


def try_attack(player, world) -> int:
    """
    Start an attack if the cooldown allows it and resolve the hit at once.

    Returns:
        int: Number of enemies hit (0 when the attack did not start).
    """
    if not can_attack(player):
        return 0

    player.set_state(PlayerState.ATTACKING)
    player.attack_timer = player.attack_cooldown
    return resolve_melee_hit(player, world)


def resolve_melee_hit(player, world) -> int:
    """Damage every live enemy within attack_range (inclusive) of the player."""
    hits = 0
    for enemy in world.enemies:
        if enemy.dead:
            continue
        if player.distance_to(enemy) > player.attack_range:
            continue

        killed = enemy.take_damage(Combat.HIT_DAMAGE)
        world.spawn_floating_text(
            enemy.x, enemy.y, f"-{Combat.HIT_DAMAGE}", Combat.ENEMY_TEXT_COLOR
        )
        hits += 1

        if killed:
            world.events.dispatch(EnemyDiedEvent(
                position=(enemy.x, enemy.y),
                enemy_type=enemy.enemy_type,
            ))

    DebugLogger.action(f"Attack hit {hits} enemies", category="combat")
    return hits


# ===========================================================
# Damage Taken
# ===========================================================

def hurt_player(player, amount: int, world):
    """Apply damage to the player with floating feedback above its head."""
    if player.dead:
        return

    prev = player.health
    player.take_damage(amount)
    DebugLogger.action(f"Player took {amount} damage ({prev} -> {player.health})", category="combat")

    world.events.dispatch(PlayerDamagedEvent(amount=amount, health=player.health))
    world.spawn_floating_text(
        player.x, player.y - Combat.PLAYER_TEXT_OFFSET,
        f"-{amount}", Combat.PLAYER_TEXT_COLOR
    )


def apply_contact_damage(player, enemies, world) -> bool:
    """
    Hurt the player once if any live enemy is touching it.

    Only the first touching enemy counts; damage_cooldown then blocks
    further contact damage for Combat.CONTACT_COOLDOWN ticks.
    """
    if player.dead or player.damage_cooldown > 0:
        return False

    for enemy in enemies:
        if not enemy.dead and player.distance_to(enemy) < Combat.CONTACT_RANGE:
            hurt_player(player, Combat.CONTACT_DAMAGE, world)
            player.damage_cooldown = Combat.CONTACT_COOLDOWN
            return True
    return False
