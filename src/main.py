"""
main.py
-------
Command-line entry point.

Usage:
    python -m src.main --placeholders        # Colored rectangles, no image files needed
    python -m src.main                       # Load your own images from assets/images
    python -m src.main --config my.json      # Alternate configuration file
    python -m src.main --max-projectiles 40  # Cap concurrent fireballs
"""

import argparse
import sys

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.main_loop import MainLoop
from src.core.runtime.game_config import DEFAULT_CONFIG_FILE, GameConfig
from src.graphics.draw_manager import AssetLoadError


def build_parser():
    parser = argparse.ArgumentParser(description="Fireball Dodge - survive as long as you can")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE,
                        help="JSON configuration file (default: %(default)s)")
    parser.add_argument("--max-projectiles", type=int, default=None,
                        help="Maximum fireballs alive at once (default: unbounded)")
    parser.add_argument("--placeholders", action="store_true",
                        help="Draw colored rectangles instead of loading images")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable verbose trace logging")
    return parser


def build_config(args) -> GameConfig:
    """Load the config file and apply command-line overrides."""
    config = GameConfig.load(args.config)
    if args.max_projectiles is not None:
        if args.max_projectiles < 0:
            raise SystemExit("--max-projectiles must be >= 0")
        config = config.with_overrides(max_projectiles=args.max_projectiles)
    return config


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        DebugLogger.set_level("VERBOSE")
        DebugLogger.enable_category("entity_cleanup")
        DebugLogger.enable_category("input")

    config = build_config(args)

    try:
        loop = MainLoop(config, placeholders=args.placeholders)
    except AssetLoadError as e:
        pygame.quit()
        DebugLogger.fail(str(e))
        DebugLogger.fail(
            f"No images are bundled: put {config.character_image}, {config.projectile_image} "
            f"and {config.background_image} in {config.asset_dir}, or run with --placeholders"
        )
        return 1

    loop.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
