"""
simulation.py
-------------
The per-tick simulation controller.

Tick order (skipped entirely once the player is defeated):
    1. Scroll camera and player world position
    2. Player physics and run animation
    3. Spawn channels
    4. Tenants: cull, player contact, letter hits
    5. Envelopes: cull, pickup
    6. Letters: move, cull

Input is applied between ticks through apply_action(); nothing else
mutates the GameState.
"""

import random

from eviction.core.debug.debug_logger import DebugLogger
from eviction.core.runtime.game_state import GameState
from eviction.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    LivesChangedEvent,
    RunStartedEvent,
    ScoreChangedEvent,
)
from eviction.core.services.input_manager import Action
from eviction.entities.player.player_movement import update_animation, update_physics
from eviction.systems.collision.collision_manager import CollisionManager, CollisionReport
from eviction.systems.entity_management.letter_manager import LetterManager
from eviction.systems.world.spawn_manager import SpawnManager


class Simulation:
    """Owns the GameState and advances it one tick at a time."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config, rng=None, events=None):
        """
        Args:
            config (SimulationConfig): Validated tunables
            rng (random.Random, optional): Spawn randomness; seeded for replays
            events (EventManager, optional): Shared dispatcher for HUD updates
        """
        self.config = config
        self.rng = rng or random.Random()
        self.events = events or EventManager()

        self.spawn_manager = SpawnManager(config, self.rng, self.events)
        self.letter_manager = LetterManager(config)
        self.collision_manager = CollisionManager(config)

        self.state = GameState(config)
        self._game_over_sent = False

        DebugLogger.init_entry("Simulation")

    def start(self):
        """Publish the opening score/lives so listeners can draw the HUD."""
        self.events.dispatch(RunStartedEvent(self.state.score, self.state.lives))
        DebugLogger.state(
            f"Run started: lives={self.state.lives} score={self.state.score}",
            category="game_state"
        )

    def reset(self):
        """Throw away the current run and start a fresh one."""
        camera = self.state.camera
        camera.reset()
        self.state = GameState(self.config, camera=camera)
        self.spawn_manager.reset()
        self.letter_manager.reset()
        self._game_over_sent = False
        DebugLogger.section("Restart")
        self.start()

    # ===========================================================
    # Input
    # ===========================================================

    def apply_action(self, action: str) -> bool:
        """
        Apply one input action to the state machine.

        Returns:
            bool: True if the action changed anything
        """
        player = self.state.player

        if action == Action.JUMP:
            return player.jump(self.config.jump_velocity)
        if action == Action.FIRE:
            return self.letter_manager.fire(player, self.state.letters) is not None
        if action == Action.RESTART:
            if not self.state.game_over:
                return False
            self.reset()
            return True

        DebugLogger.trace(f"Ignored action '{action}'", category="input")
        return False

    # ===========================================================
    # Tick
    # ===========================================================

    def step(self, dt: float) -> CollisionReport:
        """
        Advance the simulation by one tick.

        Args:
            dt: Wall-clock seconds since the previous tick

        Returns:
            CollisionReport: Outcome of this tick's collision pass
        """
        state = self.state
        report = CollisionReport()
        if state.game_over:
            return report

        cfg = self.config
        player = state.player
        camera = state.camera

        state.ticks += 1
        state.elapsed += dt

        # 1. Scroll
        camera.advance(cfg.world_speed)
        player.advance(cfg.world_speed)

        # 2. Player
        update_physics(player, cfg.gravity, cfg.hero_ground_y)
        update_animation(player, dt, cfg.frame_time)
        self.letter_manager.tick_cooldown(dt)

        # 3. Spawning
        self.spawn_manager.update(dt, camera.offset, state.tenants, state.envelopes)

        # 4-5. Collisions
        self.collision_manager.resolve_tenants(player, state.tenants, state.letters, camera, report)
        self.collision_manager.resolve_envelopes(player, state.envelopes, camera, report)

        # 6. Letters
        self.letter_manager.update(state.letters, camera)

        if report.any_change:
            self._publish(report)
        return report

    # ===========================================================
    # Notifications
    # ===========================================================

    def _publish(self, report: CollisionReport):
        """Dispatch change events for whatever this tick's collisions altered."""
        state = self.state

        if report.score_gained:
            self.events.dispatch(ScoreChangedEvent(state.score, report.score_gained))

        if report.player_hits:
            self.events.dispatch(LivesChangedEvent(state.lives))

        if state.game_over and not self._game_over_sent:
            self._game_over_sent = True
            state.camera.freeze()
            DebugLogger.state(
                f"GAME OVER - score {state.score}, distance {state.camera.offset:.0f} "
                f"after {state.elapsed:.1f}s",
                category="game_state"
            )
            self.events.dispatch(GameOverEvent(state.score, state.camera.offset))
