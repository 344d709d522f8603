"""
main_loop.py
------------
Core game loop orchestrating timing, input, updates, and rendering.

Responsibilities:
- Initialize pygame and the window
- Maintain fixed timestep update loop
- Capture one InputSnapshot per update step
- Render once per frame after all updates
"""

import sys

import pygame

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import Display, Physics
from diablolike.core.runtime.world import build_world
from diablolike.core.services.input_manager import InputManager
from diablolike.graphics.draw_manager import DrawManager
from diablolike.graphics.sprite_sheet import AssetLoadError


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Implements a fixed timestep for game logic with variable rendering.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, world=None):
        """
        Initialize pygame and all core systems.

        Args:
            world: Prebuilt World; built from config and assets if None.

        Raises:
            AssetLoadError: Required art could not be loaded.
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        # Sprite sheets convert against the display, so the window comes first
        self.world = world or build_world()

        self.clock = pygame.time.Clock()
        self.running = True
        DebugLogger.init_entry("Main Loop Runtime")

    def _init_pygame(self):
        pygame.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} '{Display.CAPTION}'")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Execute main game loop until quit.

        Uses fixed timestep for updates with accumulator pattern.
        Rendering happens once per frame after all updates.
        """
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            # Frame timing with safety clamp
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()

            while accumulator >= fixed_dt:
                self.world.update(self.input_manager.capture())
                accumulator -= fixed_dt

            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")
        DebugLogger.system(f"Session: {self.world.stats!r}")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

    def _draw(self):
        self.draw_manager.clear()
        self.world.draw(self.draw_manager)
        self.draw_manager.render(self.screen)
        pygame.display.flip()


def main():
    """Process entry point. Missing art is fatal."""
    try:
        MainLoop().run()
    except AssetLoadError as e:
        DebugLogger.fail(f"Asset loading failed: {e}", category="loading")
        pygame.quit()
        sys.exit(f"Fatal: {e}")
