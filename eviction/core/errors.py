"""
errors.py
---------
Exception types raised at the edges of the game (assets, configuration).
The simulation core itself never raises during normal play.
"""


class EvictionError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(EvictionError):
    """A configuration file could not be read or contains invalid values."""


class AssetLoadError(EvictionError):
    """One or more required image assets could not be loaded."""

    def __init__(self, missing):
        self.missing = dict(missing)
        details = ", ".join(f"{key} ({reason})" for key, reason in self.missing.items())
        super().__init__(f"Failed to load assets: {details}")
