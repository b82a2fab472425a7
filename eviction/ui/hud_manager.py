"""
hud_manager.py
--------------
On-screen score and lives readout.

Receives values through set_score()/set_lives(), either directly or via
the simulation's ScoreChangedEvent / LivesChangedEvent / RunStartedEvent,
and re-renders its text only when a value actually changes.
"""

import pygame

from eviction.core.debug.debug_logger import DebugLogger
from eviction.core.runtime.game_settings import Colors
from eviction.core.services.event_manager import (
    LivesChangedEvent,
    RunStartedEvent,
    ScoreChangedEvent,
)


class HudManager:
    """Text sink for score and lives."""

    def __init__(self, font_size: int = 28, position=(16, 12), color=Colors.TEXT):
        self.font_size = font_size
        self.position = position
        self.color = color

        self.score = 0
        self.lives = 0
        self._font = None
        self._surface = None
        self._dirty = True

    # ===========================================================
    # Event Wiring
    # ===========================================================

    def bind(self, events):
        """Subscribe to the simulation's change events."""
        events.subscribe(RunStartedEvent, self._on_run_started)
        events.subscribe(ScoreChangedEvent, self._on_score_changed)
        events.subscribe(LivesChangedEvent, self._on_lives_changed)

    def unbind(self, events):
        """Detach from the simulation (scene shutdown)."""
        events.unsubscribe(RunStartedEvent, self._on_run_started)
        events.unsubscribe(ScoreChangedEvent, self._on_score_changed)
        events.unsubscribe(LivesChangedEvent, self._on_lives_changed)

    def _on_run_started(self, event):
        self.set_score(event.score)
        self.set_lives(event.lives)

    def _on_score_changed(self, event):
        self.set_score(event.score)

    def _on_lives_changed(self, event):
        self.set_lives(event.lives)

    # ===========================================================
    # Sink API
    # ===========================================================

    def set_score(self, score: int):
        if score != self.score:
            self.score = score
            self._dirty = True
            DebugLogger.trace(f"Score -> {score}", category="ui")

    def set_lives(self, lives: int):
        if lives != self.lives:
            self.lives = lives
            self._dirty = True
            DebugLogger.trace(f"Lives -> {lives}", category="ui")

    @property
    def text(self) -> str:
        return f"Score: {self.score}    Lives: {self.lives}"

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface):
        """Blit the cached readout, rebuilding it only after a change."""
        if self._dirty or self._surface is None:
            if self._font is None:
                if not pygame.font.get_init():
                    pygame.font.init()
                self._font = pygame.font.Font(None, self.font_size)
            self._surface = self._font.render(self.text, True, self.color)
            self._dirty = False
        surface.blit(self._surface, self.position)
