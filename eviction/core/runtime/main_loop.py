"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and the window
- Load assets before the first tick
- Run one simulation tick per displayed frame with a clamped delta
- Coordinate event handling, updates, and rendering
"""

import random

import pygame

from eviction.core.debug.debug_logger import DebugLogger
from eviction.core.runtime.game_settings import Display, Physics
from eviction.core.services.event_manager import EventManager
from eviction.core.services.input_manager import InputManager
from eviction.graphics.asset_manager import AssetManager
from eviction.graphics.renderer import Renderer
from eviction.scenes.game_scene import GameScene
from eviction.systems.simulation import Simulation
from eviction.ui.hud_manager import HudManager


def clamp_frame_time(frame_time: float, limit: float = Physics.MAX_FRAME_TIME) -> float:
    """Cap a frame delta so a stalled window cannot trigger a burst of spawns."""
    return max(0.0, min(frame_time, limit))


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    One tick per frame: the simulation integrates physics per tick, so the
    frame rate sets the game speed, as a browser animation-frame loop would.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config, assets: AssetManager, seed=None, fps: int = Display.FPS):
        """
        Args:
            config (SimulationConfig): Validated tunables
            assets (AssetManager): Unloaded asset store (loaded after the window exists)
            seed: Optional RNG seed for reproducible spawn patterns
            fps: Target frame rate
        """
        DebugLogger.section("Initializing MainLoop")
        self.config = config
        self.fps = fps

        self._init_pygame()
        assets.load_all()
        self._init_scene(assets, seed)

        self.clock = pygame.time.Clock()
        self.running = True

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((self.config.viewport_width, self.config.viewport_height))
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {self.config.viewport_width}x{self.config.viewport_height}")

    def _init_scene(self, assets, seed):
        events = EventManager()
        simulation = Simulation(self.config, rng=random.Random(seed), events=events)
        self.scene = GameScene(
            simulation,
            InputManager(),
            Renderer(assets, self.config),
            HudManager(),
        )
        DebugLogger.init_sub(f"{events.get_subscriber_count()} event subscribers")
        if seed is not None:
            DebugLogger.init_sub(f"RNG seed {seed}")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute main game loop until quit."""
        self.scene.on_enter()

        # First tick gets no elapsed time, like the first animation frame
        self.clock.tick(self.fps)

        while self.running:
            self._handle_events()
            if not self.running:
                break

            frame_time = clamp_frame_time(self.clock.tick(self.fps) / 1000.0)
            self.scene.update(frame_time)
            if self.scene.finished:
                self.running = False
                break

            self.scene.draw(self.screen)
            pygame.display.flip()

        self.scene.on_exit()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break
            if event.type == pygame.WINDOWFOCUSLOST:
                self.scene.input_manager.clear()
                continue
            self.scene.handle_event(event)
