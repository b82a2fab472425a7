"""
conftest.py
-----------
Shared pytest configuration and fixtures for the Eviction tests.

Contains:
- Headless SDL setup so pygame surfaces work without a window
- Common fixtures used across multiple test modules
- Pytest configuration and hooks
"""

import os
import random

# Must be set before pygame initializes its display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from eviction.core.runtime.game_settings import SimulationConfig
from eviction.core.services.event_manager import EventManager
from eviction.systems.simulation import Simulation


# ===========================================================
# Pygame
# ===========================================================

@pytest.fixture(scope="session")
def headless_pygame():
    """Initialize pygame once against the dummy video driver."""
    pygame.init()
    pygame.font.init()
    yield pygame
    pygame.quit()


# ===========================================================
# Simulation Fixtures
# ===========================================================

@pytest.fixture
def config():
    """Default tunables (960x540 viewport, 3 lives, speed 3)."""
    return SimulationConfig()


@pytest.fixture
def quiet_config():
    """Default tunables with spawning pushed out of reach."""
    return SimulationConfig(tenant_base_ms=1e12, envelope_base_ms=1e12)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def recorder(events):
    """
    Collect every dispatched event of the requested types.

    Usage:
        seen = recorder(ScoreChangedEvent, GameOverEvent)
        ...
        assert isinstance(seen[0], ScoreChangedEvent)
    """
    def _record(*event_types):
        seen = []
        for event_type in event_types:
            events.subscribe(event_type, seen.append)
        return seen
    return _record


@pytest.fixture
def simulation(quiet_config, rng, events):
    """A simulation that never spawns on its own; tests place entities by hand."""
    return Simulation(quiet_config, rng=rng, events=events)


class FixedRandom:
    """random.Random stand-in returning one value forever, counting calls."""

    def __init__(self, value=0.5):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "render: marks tests that draw onto pygame surfaces")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)

        if "/graphics/" in item.nodeid.replace("\\", "/"):
            item.add_marker(pytest.mark.render)
