"""
game_state.py
-------------
Container for everything one run mutates: player, camera and the three
entity collections. Owned by a single Simulation; renderers only read it.
"""

from eviction.entities.player.player_core import Player
from eviction.systems.world.camera import Camera


class GameState:
    """Mutable state of the current run."""

    def __init__(self, config, camera=None):
        """
        Args:
            config (SimulationConfig): Initial player placement and lives
            camera (Camera, optional): Reused across restarts; must be reset
        """
        self.config = config
        self.player = Player(
            x=config.hero_screen_x,
            ground_y=config.hero_ground_y,
            size=config.hero_size,
            lives=config.start_lives,
        )
        self.camera = camera or Camera()

        self.tenants = []
        self.envelopes = []
        self.letters = []

        self.ticks = 0
        self.elapsed = 0.0

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def game_over(self) -> bool:
        return not self.player.is_alive

    @property
    def score(self) -> int:
        return self.player.score

    @property
    def lives(self) -> int:
        return self.player.lives

    def entity_counts(self) -> dict:
        return {
            "tenants": len(self.tenants),
            "envelopes": len(self.envelopes),
            "letters": len(self.letters),
        }

    def __repr__(self) -> str:
        counts = ", ".join(f"{k}={v}" for k, v in self.entity_counts().items())
        return f"<GameState tick={self.ticks} camera={self.camera.offset:.0f} {counts}>"
