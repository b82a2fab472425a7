"""
spawn_manager.py
----------------
Timer-driven spawning of tenants and envelopes ahead of the camera.

Responsibilities
----------------
- Keep one millisecond accumulator per spawn channel.
- Fire a channel when its accumulator exceeds base interval + random jitter
  (jitter re-rolled on every check).
- Place new entities just beyond the leading edge of the viewport, with a
  per-channel random forward offset.
"""

from eviction.core.debug.debug_logger import DebugLogger
from eviction.core.services.event_manager import EntitySpawnedEvent
from eviction.entities.enemies.tenant import Tenant
from eviction.entities.items.envelope import Envelope


class SpawnChannel:
    """One randomized-interval spawn timer."""

    __slots__ = ("name", "base_interval_ms", "jitter_ms", "factory", "accumulator")

    def __init__(self, name: str, base_interval_ms: float, jitter_ms: float, factory):
        """
        Args:
            name: Channel label for logging
            base_interval_ms: Minimum time between spawns
            jitter_ms: Upper bound of the uniform extra delay
            factory: Callable(rng) -> entity, invoked when the channel fires
        """
        self.name = name
        self.base_interval_ms = base_interval_ms
        self.jitter_ms = jitter_ms
        self.factory = factory
        self.accumulator = 0.0

    def tick(self, dt: float, rng):
        """
        Advance the timer.

        Args:
            dt: Elapsed time in seconds
            rng: random.Random-compatible source

        Returns:
            The spawned entity, or None
        """
        self.accumulator += dt * 1000
        threshold = self.base_interval_ms + rng.random() * self.jitter_ms
        if self.accumulator <= threshold:
            return None

        self.accumulator = 0.0
        return self.factory(rng)

    def reset(self):
        self.accumulator = 0.0


class SpawnManager:
    """
    Owns the tenant and envelope spawn channels.

    The manager does not hold the entity lists; it appends to whatever
    collections the simulation hands it each tick.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config, rng, events=None):
        """
        Args:
            config (SimulationConfig): Spawn intervals, offsets and sizes
            rng: random.Random-compatible source
            events (EventManager, optional): Receives EntitySpawnedEvent
        """
        self.config = config
        self.rng = rng
        self.events = events
        self._camera_offset = 0.0

        self.tenant_channel = SpawnChannel(
            "tenant", config.tenant_base_ms, config.tenant_jitter_ms, self._make_tenant
        )
        self.envelope_channel = SpawnChannel(
            "envelope", config.envelope_base_ms, config.envelope_jitter_ms, self._make_envelope
        )

        DebugLogger.init_entry("SpawnManager")

    # ===========================================================
    # Factories
    # ===========================================================

    def _spawn_x(self, forward_jitter: float) -> float:
        """World x just past the leading edge, plus a random lead."""
        return self._camera_offset + self.config.viewport_width + self.rng.random() * forward_jitter

    def _make_tenant(self, rng) -> Tenant:
        cfg = self.config
        return Tenant.on_ground(self._spawn_x(cfg.tenant_forward_jitter), cfg.ground_line, cfg.tenant_size)

    def _make_envelope(self, rng) -> Envelope:
        cfg = self.config
        x = self._spawn_x(cfg.envelope_forward_jitter)
        lift = rng.random() * cfg.envelope_height_band
        return Envelope.above_ground(x, cfg.ground_line, cfg.envelope_size, lift)

    # ===========================================================
    # Update Loop
    # ===========================================================

    def update(self, dt: float, camera_offset: float, tenants: list, envelopes: list) -> list:
        """
        Tick both channels and append anything they spawn.

        Args:
            dt: Elapsed time in seconds
            camera_offset: Current camera offset (world distance)
            tenants: Live tenant collection
            envelopes: Live envelope collection

        Returns:
            list: Entities spawned this tick
        """
        self._camera_offset = camera_offset
        spawned = []

        for channel, collection in ((self.tenant_channel, tenants),
                                    (self.envelope_channel, envelopes)):
            entity = channel.tick(dt, self.rng)
            if entity is None:
                continue
            collection.append(entity)
            spawned.append(entity)
            DebugLogger.trace(
                f"Spawned {channel.name} at x={entity.x:.0f} y={entity.y:.0f}",
                category="spawn"
            )
            if self.events:
                self.events.dispatch(EntitySpawnedEvent(entity.category, entity.x, entity.y))

        return spawned

    def reset(self):
        """Zero both accumulators (new run)."""
        self.tenant_channel.reset()
        self.envelope_channel.reset()
        self._camera_offset = 0.0
