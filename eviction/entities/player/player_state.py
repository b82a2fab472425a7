"""
player_state.py
---------------
Defines the two independent axes of the player state machine.

Responsibilities
----------------
- Ground contact (GROUNDED / AIRBORNE)
- Life status (ALIVE / DEFEATED, terminal)
"""

from enum import IntEnum


class GroundState(IntEnum):
    """Vertical contact with the ground line."""

    GROUNDED = 0
    AIRBORNE = 1


class LifeState(IntEnum):
    """DEFEATED is terminal: no physics, spawning or scoring afterwards."""

    ALIVE = 0
    DEFEATED = 1
