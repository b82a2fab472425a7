"""
renderer.py
-----------
Draws one frame of the current GameState onto a pygame surface.

Render order:
- Tiled background scrolled by the camera
- Ground strip
- Player (run frame picked by animation phase)
- Tenants (mirrored to face the player), envelopes, letters
- Optional hitbox outlines
- Game-over overlay with the final score

The renderer is a pure consumer: it never touches simulation state.
"""

import math

import pygame

from eviction.core.debug.debug_logger import DebugLogger
from eviction.core.runtime.game_settings import Colors, Debug


RUN_FRAMES = ("run1", "run2")


class Renderer:
    """Stateless-with-respect-to-gameplay frame painter with a sprite cache."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, assets, config, restart_hint: str = "Press R to play again"):
        """
        Args:
            assets (AssetManager): Loaded images
            config (SimulationConfig): Viewport and ground geometry
            restart_hint: Last line of the game-over overlay
        """
        self.assets = assets
        self.config = config
        self.restart_hint = restart_hint

        self._scaled = {}      # {(key, w, h, flip): Surface}
        self._bg_tile = None
        self._overlay = None
        self._fonts = {}

        DebugLogger.init_entry("Renderer")

    # ===========================================================
    # Caches
    # ===========================================================

    def sprite(self, key: str, width: int, height: int, flip: bool = False):
        """Scaled (and optionally mirrored) copy of an asset, cached per size."""
        cache_key = (key, int(width), int(height), flip)
        cached = self._scaled.get(cache_key)
        if cached is not None:
            return cached

        image = pygame.transform.scale(self.assets.get(key), (int(width), int(height)))
        if flip:
            image = pygame.transform.flip(image, True, False)
        self._scaled[cache_key] = image
        return image

    def background_tile(self):
        """Background scaled to the viewport height, aspect preserved."""
        if self._bg_tile is None:
            bg = self.assets.get("bg")
            height = self.config.viewport_height
            width = max(1, round(bg.get_width() * height / bg.get_height()))
            self._bg_tile = pygame.transform.scale(bg, (width, height))
        return self._bg_tile

    def font(self, size: int):
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    # ===========================================================
    # Frame
    # ===========================================================

    def draw(self, surface, state):
        """
        Paint the full frame for state onto surface.

        Args:
            surface: Target pygame.Surface (viewport sized)
            state (GameState): Current simulation state (read only)
        """
        camera = state.camera

        self._draw_background(surface, camera.offset)
        self._draw_ground(surface)
        self._draw_player(surface, state.player)

        for tenant in state.tenants:
            image = self.sprite("enemy", tenant.width, tenant.height, flip=True)
            surface.blit(image, (tenant.screen_x(camera), tenant.y))

        for envelope in state.envelopes:
            image = self.sprite("letter", envelope.width, envelope.height)
            surface.blit(image, (envelope.screen_x(camera), envelope.y))

        for letter in state.letters:
            image = self.sprite("letter", letter.width, letter.height)
            surface.blit(image, (letter.screen_x(camera), letter.y))

        if Debug.HITBOX_VISIBLE:
            self._draw_hitboxes(surface, state)

        if state.game_over:
            self._draw_game_over(surface, state.score)

        return surface

    # ===========================================================
    # Layers
    # ===========================================================

    def _draw_background(self, surface, offset):
        tile = self.background_tile()
        tile_width = tile.get_width()
        start = -(offset % tile_width)
        count = math.ceil(self.config.viewport_width / tile_width) + 1
        for i in range(count):
            surface.blit(tile, (start + i * tile_width, 0))

    def _draw_ground(self, surface):
        cfg = self.config
        ground = pygame.Rect(0, cfg.ground_line, cfg.viewport_width, cfg.ground_height)
        pygame.draw.rect(surface, Colors.GROUND, ground)

    def _draw_player(self, surface, player):
        key = RUN_FRAMES[player.frame_index % len(RUN_FRAMES)]
        surface.blit(self.sprite(key, player.size, player.size), (player.x, player.y))

    def _draw_hitboxes(self, surface, state):
        camera = state.camera
        width = Debug.HITBOX_LINE_WIDTH
        pygame.draw.rect(surface, (0, 255, 0), pygame.Rect(state.player.rect), width)
        for entity in (*state.tenants, *state.envelopes, *state.letters):
            pygame.draw.rect(surface, (255, 0, 0), pygame.Rect(entity.screen_rect(camera)), width)

    def _draw_game_over(self, surface, score):
        cfg = self.config
        if self._overlay is None:
            self._overlay = pygame.Surface((cfg.viewport_width, cfg.viewport_height), pygame.SRCALPHA)
            self._overlay.fill(Colors.OVERLAY)
        surface.blit(self._overlay, (0, 0))

        cx = cfg.viewport_width / 2
        cy = cfg.viewport_height / 2
        lines = (
            ("Game Over", 48, cy - 20),
            (f"Final Score: {score}", 32, cy + 20),
            (self.restart_hint, 32, cy + 60),
        )
        for text, size, y in lines:
            rendered = self.font(size).render(text, True, Colors.TEXT)
            surface.blit(rendered, rendered.get_rect(center=(cx, y)))
