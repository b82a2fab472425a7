"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from eviction.core.runtime.game_settings import (
    Display,
    Physics,
    World,
    Hero,
    Sizes,
    Spawning,
    Scoring,
    Bounds,
    Assets,
    Debug,
    SimulationConfig,
)

__all__ = [
    'Display',
    'Physics',
    'World',
    'Hero',
    'Sizes',
    'Spawning',
    'Scoring',
    'Bounds',
    'Assets',
    'Debug',
    'SimulationConfig',
]
