"""
player_core.py
--------------
Defines the Player entity: position, vertical motion, animation phase and
the lives/score counters.

The player is screen-fixed horizontally (``x``) while ``world_x`` tracks how
far it has run; the camera advances in lockstep so the two stay aligned.
"""

from eviction.core.debug.debug_logger import DebugLogger
from eviction.entities.player.player_state import GroundState, LifeState


class Player:
    """Represents the controllable hero."""

    __slots__ = (
        'world_x', 'x', 'y', 'vy', 'on_ground',
        'frame_index', 'frame_timer',
        'lives', 'score', 'size',
    )

    def __init__(self, x: float, ground_y: float, size: float, lives: int = 3):
        """
        Args:
            x: Fixed screen x of the player's left edge
            ground_y: Screen y of the player's top edge when standing
            size: Square sprite/hitbox size
            lives: Starting lives
        """
        self.world_x = 0.0
        self.x = x
        self.y = ground_y
        self.vy = 0.0
        self.on_ground = True

        self.frame_index = 0
        self.frame_timer = 0.0

        self.lives = lives
        self.score = 0
        self.size = size

    # ===========================================================
    # State Queries
    # ===========================================================

    @property
    def ground_state(self) -> GroundState:
        return GroundState.GROUNDED if self.on_ground else GroundState.AIRBORNE

    @property
    def life_state(self) -> LifeState:
        return LifeState.ALIVE if self.lives > 0 else LifeState.DEFEATED

    @property
    def is_alive(self) -> bool:
        return self.lives > 0

    @property
    def rect(self) -> tuple:
        """Screen-space (x, y, w, h) hitbox."""
        return (self.x, self.y, self.size, self.size)

    # ===========================================================
    # Transitions
    # ===========================================================

    def jump(self, velocity: float) -> bool:
        """
        Launch from the ground.

        Args:
            velocity: Initial vertical velocity (negative is upwards)

        Returns:
            bool: True if the jump happened (Grounded and Alive)
        """
        if not self.is_alive or not self.on_ground:
            return False

        self.vy = velocity
        self.on_ground = False
        DebugLogger.trace(f"Jump vy={velocity}", category="player")
        return True

    def take_hit(self, amount: int = 1) -> int:
        """
        Lose lives, never going below zero.

        Returns:
            int: Remaining lives
        """
        if not self.is_alive:
            return self.lives

        self.lives = max(0, self.lives - amount)
        DebugLogger.action(f"Player hit -> {self.lives} lives left", category="player")
        if not self.is_alive:
            DebugLogger.state("Player -> DEFEATED", category="player")
        return self.lives

    def add_score(self, points: int) -> int:
        """
        Award points.

        Returns:
            int: New score
        """
        if points < 0:
            raise ValueError("Score awards must not be negative")
        self.score += points
        return self.score

    def advance(self, distance: float):
        """Move forward in world space (lockstep with the camera)."""
        self.world_x += distance

    def letter_origin(self, gap: float, letter_size: float) -> tuple:
        """
        World position for a freshly thrown letter.

        Returns:
            tuple: (world_x, screen_y) just in front of the player,
                   vertically centred on it
        """
        return (
            self.world_x + self.size + gap,
            self.y + self.size / 2 - letter_size / 2,
        )

    def __repr__(self) -> str:
        return (
            f"<Player world_x={self.world_x:.1f} y={self.y:.1f} vy={self.vy:.2f} "
            f"{self.ground_state.name} {self.life_state.name} "
            f"lives={self.lives} score={self.score}>"
        )
