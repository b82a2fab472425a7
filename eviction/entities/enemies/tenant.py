"""
tenant.py
---------
The hostile entity: an angry tenant standing on the ground line.
Tenants never move in world space; the scrolling camera brings them in.
"""

from eviction.entities.base_entity import BaseEntity
from eviction.entities.entity_types import EntityCategory


class Tenant(BaseEntity):
    """Ground-aligned enemy. Damages the player on contact."""

    category = EntityCategory.TENANT

    __slots__ = ()

    @classmethod
    def on_ground(cls, world_x: float, ground_line: float, size: float) -> "Tenant":
        """Create a tenant whose bottom edge sits on the ground line."""
        return cls(world_x, ground_line - size, size, size)
