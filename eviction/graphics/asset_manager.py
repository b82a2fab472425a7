"""
asset_manager.py
----------------
Loads and caches the game's sprite images before the simulation starts.

Responsibilities:
- Resolve asset keys ("bg", "run1", "run2", "enemy", "letter") to files
- Fail fast (strict) or substitute flat placeholders (lenient)
- Optionally strip near-black backgrounds from sprite images
"""

import os

import pygame

from eviction.core.debug.debug_logger import DebugLogger
from eviction.core.errors import AssetLoadError
from eviction.core.runtime.game_settings import Assets, Colors


SPRITE_KEYS = ("run1", "run2", "enemy", "letter")
PLACEHOLDER_SIZES = {
    "bg": (1536, 1024),
}
DEFAULT_PLACEHOLDER_SIZE = (64, 64)


def remove_dark_background(surface, threshold: int = Assets.DARK_THRESHOLD):
    """
    Return a copy of surface where every pixel darker than threshold on all
    three RGB channels is fully transparent.

    Args:
        surface: Source pygame.Surface (left untouched)
        threshold: Channel value below which a pixel counts as background
    """
    result = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    # Additive blit onto a cleared surface is an exact RGBA copy
    result.blit(surface, (0, 0), special_flags=pygame.BLEND_RGBA_ADD)

    dark = pygame.mask.from_threshold(
        result, (0, 0, 0, 255), (threshold, threshold, threshold, 255)
    )
    if dark.count() == 0:
        return result

    # Zero where dark, identity elsewhere
    cutout = dark.to_surface(setcolor=(0, 0, 0, 0), unsetcolor=(255, 255, 255, 255))
    result.blit(cutout, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
    return result


class AssetManager:
    """Keyed image store. Loaded once, read every frame."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, asset_dir: str = Assets.DIR, files: dict = None,
                 strict: bool = Assets.STRICT,
                 remove_dark: bool = Assets.REMOVE_DARK_BACKGROUND,
                 dark_threshold: int = Assets.DARK_THRESHOLD):
        """
        Args:
            asset_dir: Directory holding the image files
            files: {key: filename}; defaults to Assets.FILES
            strict: Raise AssetLoadError instead of using placeholders
            remove_dark: Apply remove_dark_background to sprite keys
            dark_threshold: Threshold passed to remove_dark_background
        """
        self.asset_dir = asset_dir
        self.files = dict(files or Assets.FILES)
        self.strict = strict
        self.remove_dark = remove_dark
        self.dark_threshold = dark_threshold

        self.images = {}
        self.placeholders = set()

    # ===========================================================
    # Loading
    # ===========================================================

    def load_all(self) -> "AssetManager":
        """
        Load every configured asset.

        Raises:
            AssetLoadError: In strict mode, listing every key that failed
        """
        DebugLogger.init_entry("AssetManager", "LOADING")
        missing = {}

        for key, filename in self.files.items():
            path = os.path.join(self.asset_dir, filename)
            try:
                image = self._load_image(path)
            except (FileNotFoundError, pygame.error) as e:
                missing[key] = str(e) or "not found"
                continue

            if self.remove_dark and key in SPRITE_KEYS:
                image = remove_dark_background(image, self.dark_threshold)
            self.images[key] = image
            DebugLogger.init_sub(f"Loaded '{key}' from {path}")

        if missing and self.strict:
            raise AssetLoadError(missing)

        for key, reason in missing.items():
            DebugLogger.warn(f"Missing asset '{key}' ({reason}), using placeholder", category="loading")
            self.images[key] = self._make_placeholder(key)
            self.placeholders.add(key)

        return self

    def _load_image(self, path):
        if not os.path.exists(path):
            raise FileNotFoundError(f"no file at {path}")
        image = pygame.image.load(path)
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def _make_placeholder(self, key):
        size = PLACEHOLDER_SIZES.get(key, DEFAULT_PLACEHOLDER_SIZE)
        surface = pygame.Surface(size, pygame.SRCALPHA)
        color = Colors.PLACEHOLDER_BG if key == "bg" else Colors.PLACEHOLDER_SPRITE
        surface.fill(color)
        return surface

    # ===========================================================
    # Lookup
    # ===========================================================

    def get(self, key: str):
        """
        Return the surface for key.

        Raises:
            KeyError: If the key was never configured or load_all() not run
        """
        return self.images[key]
