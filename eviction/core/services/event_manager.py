"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets the simulation publish score, lives and game-over changes without
knowing who displays them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from eviction.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class RunStartedEvent(BaseEvent):
    """Dispatched when a fresh run begins (startup or restart)."""
    score: int
    lives: int


@dataclass(frozen=True)
class ScoreChangedEvent(BaseEvent):
    """Dispatched whenever the player's score changes."""
    score: int
    delta: int


@dataclass(frozen=True)
class LivesChangedEvent(BaseEvent):
    """Dispatched whenever the player loses a life."""
    lives: int


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched once when the player is defeated."""
    final_score: int
    distance: float


@dataclass(frozen=True)
class EntitySpawnedEvent(BaseEvent):
    """Dispatched when a spawn channel creates an entity."""
    category: str
    world_x: float
    y: float


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped so one broken listener
        cannot stall the simulation tick.

        Args:
            event: Event instance to dispatch
        """
        subscribers = self._subscribers.get(type(event))
        if not subscribers:
            return

        for callback in list(subscribers):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}", category="event")

    # ===========================================================
    # Introspection
    # ===========================================================

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Count subscribers for one event type, or all of them."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
