"""
test_renderer.py
----------------
Render smoke tests against placeholder assets and the dummy video driver.
"""

import pygame
import pytest

from eviction.core.runtime.game_settings import Colors
from eviction.entities.bullets.letter import Letter
from eviction.entities.enemies.tenant import Tenant
from eviction.entities.items.envelope import Envelope
from eviction.graphics.asset_manager import AssetManager
from eviction.graphics.renderer import Renderer


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def renderer(tmp_path, config, headless_pygame):
    assets = AssetManager(str(tmp_path)).load_all()
    return Renderer(assets, config)


@pytest.fixture
def surface(config):
    return pygame.Surface((config.viewport_width, config.viewport_height))


@pytest.fixture
def busy_state(simulation):
    """A state with one of each entity on screen."""
    state = simulation.state
    simulation.step(1 / 60)
    state.tenants.append(Tenant.on_ground(600, 460, 80))
    state.envelopes.append(Envelope.above_ground(400, 460, 50, 40))
    state.letters.append(Letter(300, 410, 20, 8))
    return state


# ===========================================================
# Frame Rendering
# ===========================================================

class TestRenderer:

    def test_draw_returns_surface_and_paints_ground(self, renderer, surface, busy_state):
        assert renderer.draw(surface, busy_state) is surface
        assert tuple(surface.get_at((10, 500)))[:3] == Colors.GROUND

    def test_draw_does_not_touch_state(self, renderer, surface, busy_state):
        before = (busy_state.camera.offset, busy_state.entity_counts(),
                  [(t.x, t.y) for t in busy_state.tenants])
        renderer.draw(surface, busy_state)
        after = (busy_state.camera.offset, busy_state.entity_counts(),
                 [(t.x, t.y) for t in busy_state.tenants])
        assert before == after

    def test_background_scaled_to_viewport_height(self, renderer):
        tile = renderer.background_tile()
        assert tile.get_height() == 540
        assert tile.get_width() == 810

    def test_sprite_cache(self, renderer):
        first = renderer.sprite("enemy", 80, 80, flip=True)
        assert renderer.sprite("enemy", 80, 80, flip=True) is first
        assert renderer.sprite("enemy", 80, 80) is not first
        assert first.get_size() == (80, 80)

    def test_game_over_overlay(self, renderer, surface, busy_state):
        busy_state.player.take_hit(busy_state.lives)
        renderer.draw(surface, busy_state)
        ground = tuple(surface.get_at((10, 500)))[:3]
        assert ground != Colors.GROUND
