"""
Entity exports.

Usage:
    from eviction.entities import Player, Tenant, Envelope, Letter
"""

from eviction.entities.entity_types import EntityCategory
from eviction.entities.base_entity import BaseEntity
from eviction.entities.enemies.tenant import Tenant
from eviction.entities.items.envelope import Envelope
from eviction.entities.bullets.letter import Letter
from eviction.entities.player.player_core import Player
from eviction.entities.player.player_state import GroundState, LifeState

__all__ = [
    'EntityCategory',
    'BaseEntity',
    'Tenant',
    'Envelope',
    'Letter',
    'Player',
    'GroundState',
    'LifeState',
]
