"""
letter.py
---------
The projectile entity: an eviction letter thrown by the player.

Letters fly right at a constant world speed, so on screen they move at
(speed - world_speed) pixels per tick.
"""

from eviction.entities.base_entity import BaseEntity
from eviction.entities.entity_types import EntityCategory


class Letter(BaseEntity):
    """Straight-flying projectile."""

    category = EntityCategory.LETTER

    __slots__ = ('speed',)

    def __init__(self, x: float, y: float, size: float, speed: float):
        super().__init__(x, y, size, size)
        self.speed = speed

    def update(self):
        """Advance one tick."""
        self.x += self.speed
