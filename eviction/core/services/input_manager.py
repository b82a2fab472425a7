"""
input_manager.py
----------------
Maps raw key events to discrete game actions.

Provides:
- Key binding lookup (key identifier -> action)
- An action queue filled asynchronously by the event pump and drained
  once per simulation tick
- Key-repeat detection for bound keys
"""

from collections import deque

import pygame

from eviction.core.debug.debug_logger import DebugLogger


# ===========================================================
# Actions & Default Key Bindings
# ===========================================================

class Action:
    JUMP = "jump"
    FIRE = "fire"
    RESTART = "restart"
    QUIT = "quit"


DEFAULT_KEY_BINDINGS = {
    Action.JUMP: [pygame.K_SPACE, pygame.K_UP],
    Action.FIRE: [pygame.K_e],
    Action.RESTART: [pygame.K_r],
    Action.QUIT: [pygame.K_ESCAPE],
}


class InputManager:
    """
    Translates KEYDOWN/KEYUP events into queued actions.

    Every KEYDOWN of a bound key enqueues its action, key-repeat included.
    Jump is harmless to repeat since the player only launches from the
    ground; fire repeats on purpose.

    Usage:
        for event in pygame.event.get():
            input_manager.handle_event(event)

        for action in input_manager.drain_actions():
            simulation.apply_action(action)
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Initialize input system.

        Args:
            key_bindings: {action: [key, ...]} (uses DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._key_to_action = {}
        self._held_keys = set()
        self._queue = deque()

        self._init_lookup_table()
        DebugLogger.init_entry("InputManager")

    def _init_lookup_table(self):
        """Build key -> action lookup. A key may only drive one action."""
        for action, keys in self.key_bindings.items():
            for key in keys:
                if key in self._key_to_action:
                    DebugLogger.warn(
                        f"Key {key} bound to both '{self._key_to_action[key]}' and '{action}'",
                        category="input"
                    )
                    continue
                self._key_to_action[key] = action

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event) -> bool:
        """
        Record a key event.

        Args:
            event: pygame event (anything with ``type`` and ``key``)

        Returns:
            bool: True if the event hit a bound key
        """
        if event.type == pygame.KEYDOWN:
            return self.press(event.key)
        if event.type == pygame.KEYUP:
            return self.release(event.key)
        return False

    def press(self, key) -> bool:
        """Register a key-down for the given key identifier."""
        action = self.action_for_key(key)
        if action is None:
            return False

        repeat = key in self._held_keys
        self._held_keys.add(key)
        self._queue.append(action)
        DebugLogger.trace(
            f"Key {key} -> {action}{' (repeat)' if repeat else ''}",
            category="input"
        )
        return True

    def release(self, key) -> bool:
        """Register a key-up for the given key identifier."""
        if key not in self._key_to_action:
            return False
        self._held_keys.discard(key)
        return True

    # ===========================================================
    # Queries
    # ===========================================================

    def action_for_key(self, key):
        """Return the action bound to a key, or None."""
        return self._key_to_action.get(key)

    def drain_actions(self) -> list:
        """Return all queued actions in arrival order and empty the queue."""
        actions = list(self._queue)
        self._queue.clear()
        return actions

    def clear(self):
        """Forget queued actions and held keys (e.g. on focus loss)."""
        self._queue.clear()
        self._held_keys.clear()
