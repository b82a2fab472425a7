"""
letter_manager.py
-----------------
System responsible for the letters the player throws.

Responsibilities
----------------
- Spawn letters in front of the player on a fire action.
- Optionally rate-limit throwing (disabled by default).
- Move letters each tick and drop those past either viewport edge.
"""

from eviction.core.debug.debug_logger import DebugLogger
from eviction.entities.bullets.letter import Letter


class LetterManager:
    """Handles spawning, movement and culling of live letters."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config):
        """
        Args:
            config (SimulationConfig): Letter size, speed, margins, cooldown
        """
        self.config = config
        self._cooldown_left = 0.0

    # ===========================================================
    # Spawning
    # ===========================================================

    def can_fire(self) -> bool:
        return self._cooldown_left <= 0.0

    def fire(self, player, letters: list):
        """
        Throw a letter from the player's current position.

        Args:
            player (Player): Thrower; must be alive
            letters: Live letter collection

        Returns:
            Letter or None if the player is defeated or still cooling down
        """
        if not player.is_alive or not self.can_fire():
            return None

        cfg = self.config
        x, y = player.letter_origin(cfg.letter_spawn_gap, cfg.letter_size)
        letter = Letter(x, y, cfg.letter_size, cfg.letter_speed)
        letters.append(letter)
        self._cooldown_left = cfg.fire_cooldown

        DebugLogger.trace(f"Letter thrown at x={x:.0f} ({len(letters)} in flight)", category="letter")
        return letter

    # ===========================================================
    # Update Loop
    # ===========================================================

    def tick_cooldown(self, dt: float):
        if self._cooldown_left > 0.0:
            self._cooldown_left = max(0.0, self._cooldown_left - dt)

    def update(self, letters: list, camera) -> int:
        """
        Move every letter and remove those past the leading edge margin, or
        behind the trailing edge when letters fly slower than the scroll.

        Returns:
            int: Number of letters removed
        """
        cfg = self.config
        removed = 0
        for i in range(len(letters) - 1, -1, -1):
            letter = letters[i]
            letter.update()
            if (letter.is_past_leading_edge(camera, cfg.viewport_width, cfg.letter_cleanup_margin)
                    or letter.is_past_trailing_edge(camera)):
                del letters[i]
                removed += 1

        if removed:
            DebugLogger.trace(f"Culled {removed} letters", category="letter")
        return removed

    def reset(self):
        self._cooldown_left = 0.0
