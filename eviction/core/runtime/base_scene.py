"""
base_scene.py
-------------
Abstract base class for all scenes.
Defines the interface and common lifecycle management.
"""

from abc import ABC, abstractmethod


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        finished: Set by the scene to ask the main loop to exit
    """

    def __init__(self):
        self.finished = False

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_exit(self):
        """Called before the main loop shuts down."""
        pass

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Update scene logic."""
        pass

    @abstractmethod
    def draw(self, surface):
        """Render the scene."""
        pass

    @abstractmethod
    def handle_event(self, event) -> bool:
        """Handle input events. Return True if consumed."""
        pass
