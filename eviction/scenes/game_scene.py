"""
game_scene.py
-------------
Thin orchestrator: feeds queued input to the simulation, steps it once per
frame and hands the resulting state to the renderer and HUD.
"""

from eviction.core.debug.debug_logger import DebugLogger
from eviction.core.runtime.base_scene import BaseScene
from eviction.core.services.input_manager import Action


class GameScene(BaseScene):
    """The running game. Owns no state of its own beyond its collaborators."""

    def __init__(self, simulation, input_manager, renderer, hud):
        super().__init__()
        self.simulation = simulation
        self.input_manager = input_manager
        self.renderer = renderer
        self.hud = hud

        self.hud.bind(simulation.events)

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def on_enter(self):
        DebugLogger.section("Game Loop")
        self.simulation.start()

    def on_exit(self):
        self.hud.unbind(self.simulation.events)

    # ===========================================================
    # Frame
    # ===========================================================

    def handle_event(self, event) -> bool:
        return self.input_manager.handle_event(event)

    def update(self, dt: float):
        """Drain queued actions into the simulation, then run one tick."""
        for action in self.input_manager.drain_actions():
            if action == Action.QUIT:
                DebugLogger.action("Quit requested")
                self.finished = True
                return
            self.simulation.apply_action(action)

        self.simulation.step(dt)

    def draw(self, surface):
        self.renderer.draw(surface, self.simulation.state)
        self.hud.draw(surface)
