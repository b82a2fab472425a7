"""
envelope.py
-----------
The collectible entity: an eviction notice floating above the street.
"""

from eviction.entities.base_entity import BaseEntity
from eviction.entities.entity_types import EntityCategory


class Envelope(BaseEntity):
    """Bonus pickup. Awards score on contact, never damages."""

    category = EntityCategory.ENVELOPE

    __slots__ = ()

    @classmethod
    def above_ground(cls, world_x: float, ground_line: float, size: float, lift: float = 0.0) -> "Envelope":
        """
        Create an envelope resting ``lift`` pixels above the ground line.

        Args:
            world_x: World-space left edge
            ground_line: Screen y of the ground strip
            size: Square size in pixels
            lift: Extra height above the ground (>= 0)
        """
        return cls(world_x, ground_line - size - lift, size, size)
