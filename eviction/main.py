"""
main.py
-------
Command-line entry point.

Usage:
    python -m eviction                          # Defaults from config/game.yaml
    python -m eviction --config my_game.yaml    # Custom settings file
    python -m eviction --seed 42                # Reproducible spawns
    python -m eviction --log-level VERBOSE      # Trace every spawn and hit
"""

import argparse
import os
import sys

from eviction.core.debug.debug_logger import DebugLogger
from eviction.core.errors import ConfigError, EvictionError
from eviction.core.runtime.game_settings import Assets, SimulationConfig
from eviction.core.services.config_manager import load_config

DEFAULT_CONFIG_FILE = "game.yaml"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="eviction-platformer",
        description="Side-scrolling arcade game: dodge tenants, grab envelopes, throw letters."
    )
    parser.add_argument("--config", help="Settings file (.yaml, .json or .py)")
    parser.add_argument("--seed", type=int, help="Seed for spawn randomness")
    parser.add_argument("--log-level", choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    parser.add_argument("--assets-dir", help="Directory containing the sprite images")
    parser.add_argument("--strict-assets", action="store_true",
                        help="Exit instead of using placeholders for missing images")
    return parser.parse_args(argv)


def build_config(config_path=None):
    """
    Load settings and build the simulation config.

    Args:
        config_path: Explicit file; missing or invalid files are fatal.
                     Without it the bundled game.yaml is used leniently.

    Returns:
        tuple: (SimulationConfig, raw settings dict)
    """
    strict = config_path is not None
    raw = load_config(config_path or DEFAULT_CONFIG_FILE, {}, strict=strict)
    try:
        config = SimulationConfig.from_dict(raw)
    except (ValueError, TypeError) as e:
        raise ConfigError(f"Invalid settings: {e}") from e

    for name, value in config.as_dict().items():
        DebugLogger.trace(f"{name} = {value}", category="loading")
    return config, raw


def build_assets(raw, args, base_dir="."):
    """
    Create the AssetManager from the 'assets' settings section and CLI flags.

    Raises:
        ConfigError: If the section or its file table is not a mapping
    """
    from eviction.graphics.asset_manager import AssetManager

    section = raw.get("assets") or {}
    if not isinstance(section, dict):
        raise ConfigError("Config section 'assets' must be a mapping")
    files = section.get("files")
    if files is not None and not isinstance(files, dict):
        raise ConfigError("Config key 'assets.files' must map asset keys to filenames")

    asset_dir = args.assets_dir or section.get("dir", Assets.DIR)
    if not os.path.isabs(asset_dir):
        asset_dir = os.path.join(base_dir, asset_dir)

    return AssetManager(
        asset_dir=asset_dir,
        files=files,
        strict=args.strict_assets or section.get("strict", Assets.STRICT),
        remove_dark=section.get("remove_dark_background", Assets.REMOVE_DARK_BACKGROUND),
        dark_threshold=section.get("dark_threshold", Assets.DARK_THRESHOLD),
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.log_level:
        DebugLogger.set_level(args.log_level)

    try:
        config, raw = build_config(args.config)
        assets = build_assets(raw, args)

        from eviction.core.runtime.main_loop import MainLoop
        MainLoop(config, assets, seed=args.seed).run()
    except EvictionError as e:
        DebugLogger.fail(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
