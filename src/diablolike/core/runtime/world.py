"""
world.py
--------
The explicitly owned world context: every entity collection plus the
systems that act on them for one play session.

Responsibilities
----------------
- Own the player, enemies, spawners, floating texts, camera and inventory
- Run one fixed-order update pass per tick from an InputSnapshot
- Be the only place collection members are added or removed
- Queue all world and UI draw calls on the DrawManager
"""

import random
from functools import partial

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import (
    Assets, CameraSettings, Combat, Debug, Display, Layers
)
from diablolike.core.runtime.session_stats import SessionStats
from diablolike.core.services.config_manager import load_config
from diablolike.core.services.event_manager import EventManager
from diablolike.entities.enemies.base_enemy import Enemy
from diablolike.entities.enemies.enemy_catalog import load_enemy_templates
from diablolike.entities.items.item import create_test_item, load_item_catalog
from diablolike.entities.player.player_combat import apply_contact_damage, hurt_player
from diablolike.entities.player.player_config import load_player_config
from diablolike.entities.player.player_core import Player
from diablolike.graphics.animations.animation_data import load_enemy_frames, load_player_animations
from diablolike.graphics.camera import Camera
from diablolike.systems.inventory.inventory import Inventory
from diablolike.systems.inventory.inventory_layout import load_inventory_layout
from diablolike.systems.spawn_manager import Spawner
from diablolike.ui.floating_text import FloatingText
from diablolike.ui.hud_manager import HUDManager
from diablolike.ui.inventory_view import InventoryView


DEFAULT_WORLD = {
    "seed": None,
    "asset_root": Assets.ROOT,
    "camera": {"zoom": CameraSettings.START_ZOOM},
    "initial_enemies": [],
    "spawners": [],
}


class World:
    """All mutable game state for one session."""

    def __init__(self, player, camera=None, inventory=None, spawners=None,
                 item_catalog=None, rng=None, events=None):
        """
        Args:
            player: The Player
            camera: Camera (viewport-sized, default zoom if None)
            inventory: Inventory (default layout if None)
            spawners: Iterable of Spawner
            item_catalog: {item_id: definition} for the debug add-item key
            rng: random.Random used for test items
            events: EventManager (a fresh one if None)
        """
        self.events = events or EventManager()
        self.stats = SessionStats()
        self.stats.bind(self.events)

        self.player = player
        self.camera = camera or Camera(Display.WIDTH, Display.HEIGHT)
        self.inventory = inventory or Inventory()
        if self.inventory.events is None:
            self.inventory.events = self.events

        self.enemies = []
        self.spawners = list(spawners or ())
        self.floating_texts = []
        self.item_catalog = item_catalog or {}
        self.rng = rng or random.Random()

        self.pointer = (0, 0)
        self.hud = HUDManager()
        self.inventory_view = InventoryView(self.inventory)

        self.camera.center_on(self.player.x, self.player.y)

    # ===========================================================
    # Collection Membership
    # ===========================================================

    def add_enemy(self, enemy):
        self.enemies.append(enemy)
        return enemy

    def spawn_floating_text(self, x, y, text, color=Combat.ENEMY_TEXT_COLOR):
        floating = FloatingText(x, y, text, color)
        self.floating_texts.append(floating)
        return floating

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, snapshot):
        """
        Advance the whole world by one tick.

        Order: spawners, enemies, contact damage, zoom, floating texts,
        player, camera, inventory, debug keys.
        """
        self.stats.add_tick()
        self.pointer = snapshot.pointer

        for spawner in self.spawners:
            spawner.tick(self)

        # Enemies killed last tick leave the live list here
        self.enemies = [e for e in self.enemies if not e.dead]
        for enemy in self.enemies:
            enemy.update(self.player.x, self.player.y)

        apply_contact_damage(self.player, self.enemies, self)

        self._update_zoom(snapshot)

        for floating in self.floating_texts:
            floating.update()
        self.floating_texts = [t for t in self.floating_texts if not t.expired]

        self.player.update(snapshot, self)
        self.camera.center_on(self.player.x, self.player.y)

        self.inventory.update(snapshot)

        if Debug.HOTKEYS_ENABLED:
            self._handle_debug_keys(snapshot)

    def _update_zoom(self, snapshot):
        if snapshot.is_held("zoom_in"):
            self.camera.zoom_by(CameraSettings.ZOOM_STEP)
        if snapshot.is_held("zoom_out"):
            self.camera.zoom_by(-CameraSettings.ZOOM_STEP)

    def _handle_debug_keys(self, snapshot):
        if snapshot.was_pressed("debug_add_item"):
            if self.item_catalog:
                self.inventory.add_item(create_test_item(self.rng, self.item_catalog))
            else:
                DebugLogger.warn_once("no_item_catalog", "No items configured for debug add", category="inventory")

        if snapshot.was_pressed("debug_damage"):
            hurt_player(self.player, Debug.SELF_DAMAGE, self)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        for enemy in self.enemies:
            if not enemy.dead:
                enemy.draw(draw_manager, self.camera)

        self.player.draw(draw_manager, self.camera)
        if self.player.attack_just_started:
            self._draw_attack_range(draw_manager)

        for floating in self.floating_texts:
            floating.draw(draw_manager, self.camera)

        self.inventory_view.draw(draw_manager, self.pointer)
        self.hud.draw(draw_manager, self.player, self.camera, self.stats)

    def _draw_attack_range(self, draw_manager):
        sx, sy = self.camera.world_to_screen(self.player.x, self.player.y)
        radius = self.player.attack_range * self.camera.zoom
        draw_manager.queue_shape(
            "circle",
            (sx - radius, sy - radius, radius * 2, radius * 2),
            Combat.RANGE_CIRCLE_COLOR,
            Layers.EFFECTS,
        )

    def __repr__(self):
        return (
            f"<World enemies={len(self.enemies)} texts={len(self.floating_texts)} "
            f"spawners={len(self.spawners)} {self.stats!r}>"
        )


# ===========================================================
# Construction
# ===========================================================

def build_world(load_assets=True, rng=None, world_cfg=None):
    """
    Load every config file and asset and assemble a ready World.

    Args:
        load_assets: False builds a frameless world (no image decoding)
        rng: random.Random shared by spawners and test items
        world_cfg: Pre-loaded world config; read from world.json if None

    Raises:
        AssetLoadError: A required sprite sheet is missing or unreadable.
        KeyError: world.json references an unknown enemy template.
    """
    DebugLogger.section("Building World")

    if world_cfg is None:
        world_cfg = load_config("world.json", DEFAULT_WORLD)
    if rng is None:
        rng = random.Random(world_cfg.get("seed"))
    asset_root = world_cfg.get("asset_root", Assets.ROOT)

    player_cfg = load_player_config()
    animations = load_player_animations(player_cfg["animation"], asset_root) if load_assets else {}
    player = Player(animations=animations, cfg=player_cfg)

    frame_loader = partial(load_enemy_frames, asset_root=asset_root) if load_assets else None
    templates = load_enemy_templates(frame_loader)

    spawners = [
        Spawner(
            cfg["x"], cfg["y"],
            interval=cfg["interval"],
            max_enemies=cfg["max_enemies"],
            templates=[templates[name] for name in cfg.get("templates", templates)],
            rng=rng,
        )
        for cfg in world_cfg.get("spawners", [])
    ]

    world = World(
        player,
        camera=Camera(Display.WIDTH, Display.HEIGHT, world_cfg.get("camera", {}).get("zoom", CameraSettings.START_ZOOM)),
        inventory=Inventory(layout=load_inventory_layout()),
        spawners=spawners,
        item_catalog=load_item_catalog(),
        rng=rng,
    )

    for cfg in world_cfg.get("initial_enemies", []):
        world.add_enemy(_initial_enemy(cfg, templates))

    DebugLogger.init_sub(f"{len(world.enemies)} initial enemies, {len(spawners)} spawners")
    return world


def _initial_enemy(cfg, templates):
    """Create a hand-placed enemy; per-entry stats override its template's."""
    template = templates[cfg["template"]]
    return Enemy(
        cfg["x"], cfg["y"],
        speed=cfg.get("speed", template.speed),
        health=cfg.get("hp", template.health),
        frames=template.frames,
        frame_delay=cfg.get("frame_delay", template.frame_delay),
        enemy_type=template.name,
    )
