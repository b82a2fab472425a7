"""
game_settings.py
----------------
Centralized constants for all game systems, plus the SimulationConfig
snapshot handed to the simulation core.
"""

from dataclasses import dataclass, field, fields


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 960
    HEIGHT: int = 540
    FPS: int = 60
    CAPTION: str = "Eviction"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Per-tick physics and frame timing."""
    GRAVITY: float = 0.5
    JUMP_VELOCITY: float = -12.0
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# World Scrolling
# ===========================================================

class World:
    """Scrolling world parameters."""
    SPEED: float = 3.0           # pixels per tick
    GROUND_HEIGHT: int = 80


# ===========================================================
# Hero Defaults
# ===========================================================

class Hero:
    """Player configuration defaults."""
    SCREEN_X: int = 100
    LIVES: int = 3
    FRAME_TIME: float = 0.15     # seconds per run-cycle frame
    FIRE_COOLDOWN: float = 0.0   # 0 disables rate limiting


# ===========================================================
# Entity Sizes
# ===========================================================

class Sizes:
    """Square sprite sizes in pixels."""
    HERO: int = 80
    TENANT: int = 80
    ENVELOPE: int = 50
    LETTER: int = 20


# ===========================================================
# Spawning
# ===========================================================

class Spawning:
    """Randomized interval spawning (milliseconds / pixels)."""
    TENANT_BASE_MS: float = 3500
    TENANT_JITTER_MS: float = 1000
    TENANT_FORWARD_JITTER: float = 600

    ENVELOPE_BASE_MS: float = 2500
    ENVELOPE_JITTER_MS: float = 800
    ENVELOPE_FORWARD_JITTER: float = 400
    ENVELOPE_HEIGHT_BAND: float = 120


# ===========================================================
# Scoring
# ===========================================================

class Scoring:
    TENANT_HIT: int = 20
    ENVELOPE_PICKUP: int = 10
    DAMAGE_PER_HIT: int = 1


# ===========================================================
# Bounds & Margins
# ===========================================================

class Bounds:
    """Margin values for entity lifecycle management."""
    LETTER_SPAWN_GAP: int = 10
    LETTER_SPEED: float = 8.0
    LETTER_CLEANUP_MARGIN: int = 50


# ===========================================================
# Rendering
# ===========================================================

class Colors:
    GROUND = (34, 34, 34)
    OVERLAY = (0, 0, 0, 153)
    TEXT = (255, 255, 255)
    PLACEHOLDER_BG = (40, 36, 48)
    PLACEHOLDER_SPRITE = (255, 0, 255)


# ===========================================================
# Assets
# ===========================================================

class Assets:
    DIR: str = "assets"
    FILES = {
        "bg": "bg_gritty.png",
        "run1": "hero_run1.png",
        "run2": "hero_run2.png",
        "enemy": "enemy.png",
        "letter": "envelope.png",
    }
    STRICT: bool = False
    REMOVE_DARK_BACKGROUND: bool = False
    DARK_THRESHOLD: int = 40


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    HITBOX_LINE_WIDTH: int = 2


# ===========================================================
# Simulation Snapshot
# ===========================================================

# Config file section -> {file key: SimulationConfig field}
_SECTION_FIELDS = {
    "display": {
        "width": "viewport_width",
        "height": "viewport_height",
    },
    "world": {
        "speed": "world_speed",
        "ground_height": "ground_height",
        "gravity": "gravity",
        "jump_velocity": "jump_velocity",
    },
    "hero": {
        "screen_x": "hero_screen_x",
        "lives": "start_lives",
        "frame_time": "frame_time",
        "fire_cooldown": "fire_cooldown",
    },
    "sizes": {
        "hero": "hero_size",
        "tenant": "tenant_size",
        "envelope": "envelope_size",
        "letter": "letter_size",
    },
    "spawning": {
        "tenant_base_ms": "tenant_base_ms",
        "tenant_jitter_ms": "tenant_jitter_ms",
        "tenant_forward_jitter": "tenant_forward_jitter",
        "envelope_base_ms": "envelope_base_ms",
        "envelope_jitter_ms": "envelope_jitter_ms",
        "envelope_forward_jitter": "envelope_forward_jitter",
        "envelope_height_band": "envelope_height_band",
    },
    "scoring": {
        "tenant_hit": "tenant_score",
        "envelope_pickup": "envelope_score",
        "damage_per_hit": "damage_per_hit",
    },
    "letters": {
        "spawn_gap": "letter_spawn_gap",
        "speed": "letter_speed",
        "cleanup_margin": "letter_cleanup_margin",
    },
}


@dataclass
class SimulationConfig:
    """Every tunable the simulation core reads, frozen at run start."""

    viewport_width: int = Display.WIDTH
    viewport_height: int = Display.HEIGHT

    world_speed: float = World.SPEED
    ground_height: int = World.GROUND_HEIGHT
    gravity: float = Physics.GRAVITY
    jump_velocity: float = Physics.JUMP_VELOCITY

    hero_screen_x: int = Hero.SCREEN_X
    start_lives: int = Hero.LIVES
    frame_time: float = Hero.FRAME_TIME
    fire_cooldown: float = Hero.FIRE_COOLDOWN

    hero_size: int = Sizes.HERO
    tenant_size: int = Sizes.TENANT
    envelope_size: int = Sizes.ENVELOPE
    letter_size: int = Sizes.LETTER

    tenant_base_ms: float = Spawning.TENANT_BASE_MS
    tenant_jitter_ms: float = Spawning.TENANT_JITTER_MS
    tenant_forward_jitter: float = Spawning.TENANT_FORWARD_JITTER
    envelope_base_ms: float = Spawning.ENVELOPE_BASE_MS
    envelope_jitter_ms: float = Spawning.ENVELOPE_JITTER_MS
    envelope_forward_jitter: float = Spawning.ENVELOPE_FORWARD_JITTER
    envelope_height_band: float = Spawning.ENVELOPE_HEIGHT_BAND

    tenant_score: int = Scoring.TENANT_HIT
    envelope_score: int = Scoring.ENVELOPE_PICKUP
    damage_per_hit: int = Scoring.DAMAGE_PER_HIT

    letter_spawn_gap: int = Bounds.LETTER_SPAWN_GAP
    letter_speed: float = Bounds.LETTER_SPEED
    letter_cleanup_margin: int = Bounds.LETTER_CLEANUP_MARGIN

    extras: dict = field(default_factory=dict)

    # ===========================================================
    # Derived Values
    # ===========================================================

    @property
    def ground_line(self) -> float:
        """Screen y of the top of the ground strip."""
        return self.viewport_height - self.ground_height

    @property
    def hero_ground_y(self) -> float:
        """Screen y of the hero's top edge when standing."""
        return self.ground_line - self.hero_size

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def from_dict(cls, data: dict = None) -> "SimulationConfig":
        """
        Build a config from a nested settings dict.

        Args:
            data: Mapping of section name -> {key: value}. Unknown sections
                  are kept in ``extras``; unknown keys inside a known section
                  raise ValueError.

        Returns:
            SimulationConfig: Validated configuration
        """
        kwargs = {}
        extras = {}

        for section, values in (data or {}).items():
            if section == "_notes":
                continue
            mapping = _SECTION_FIELDS.get(section)
            if mapping is None:
                extras[section] = values
                continue
            if not isinstance(values, dict):
                raise ValueError(f"Config section '{section}' must be a mapping")
            for key, value in values.items():
                if key == "_notes":
                    continue
                if key not in mapping:
                    raise ValueError(f"Unknown setting '{section}.{key}'")
                kwargs[mapping[key]] = value

        config = cls(**kwargs, extras=extras)
        config.validate()
        return config

    def validate(self):
        """Raise ValueError if any value would break the simulation invariants."""
        sizes = ("hero_size", "tenant_size", "envelope_size", "letter_size",
                 "viewport_width", "viewport_height")
        for name in sizes:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

        for name in ("tenant_base_ms", "envelope_base_ms", "frame_time", "letter_speed"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

        non_negative = ("tenant_jitter_ms", "envelope_jitter_ms",
                        "tenant_forward_jitter", "envelope_forward_jitter",
                        "envelope_height_band", "tenant_score", "envelope_score",
                        "fire_cooldown", "world_speed", "letter_cleanup_margin")
        for name in non_negative:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

        if self.start_lives < 1:
            raise ValueError("start_lives must be at least 1")
        if self.damage_per_hit < 1:
            raise ValueError("damage_per_hit must be at least 1")
        if self.jump_velocity >= 0:
            raise ValueError("jump_velocity must be negative (upwards)")
        if self.ground_height >= self.viewport_height:
            raise ValueError("ground_height must be smaller than viewport_height")

    def as_dict(self) -> dict:
        """Flat field -> value mapping, mainly for logging."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extras"}
