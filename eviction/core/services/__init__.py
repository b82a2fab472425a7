"""
Core services exports.

Provides the event system, configuration loading and input mapping.
"""

from eviction.core.services.config_manager import load_config
from eviction.core.services.event_manager import (
    EventManager,
    BaseEvent,
    RunStartedEvent,
    ScoreChangedEvent,
    LivesChangedEvent,
    GameOverEvent,
    EntitySpawnedEvent,
)
from eviction.core.services.input_manager import InputManager, Action

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'RunStartedEvent',
    'ScoreChangedEvent',
    'LivesChangedEvent',
    'GameOverEvent',
    'EntitySpawnedEvent',
    # Input
    'InputManager',
    'Action',
]
