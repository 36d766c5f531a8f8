"""
Command line entry point for the controller visualizer.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from show_controller.config import ConfigError, load_config
from show_controller.mapping import PreferencesError

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_PATH = Path.home() / ".show-controller" / "preferences.yaml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="show-controller",
        description="Show gamepad/joystick input as sprites for streaming overlays"
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Overlay configuration file (default: config.yaml)"
    )

    parser.add_argument(
        "-p", "--preferences",
        type=Path,
        default=DEFAULT_PREFERENCES_PATH,
        help=f"Saved bindings file (default: {DEFAULT_PREFERENCES_PATH})"
    )

    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Target frames per second (default: 60)"
    )

    parser.add_argument(
        "--deadzone",
        type=float,
        default=0.15,
        help="Minimum axis travel from neutral that counts as pushed (0 to below 1, default: 0.15)"
    )

    parser.add_argument(
        "--headless",
        action="store_true",
        help="Render to memory instead of a window"
    )

    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Stop after this many frames (default: 0, run until quit)"
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )

    return parser


def parse_args(argv=None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate arguments
    if args.fps < 1 or args.fps > 240:
        parser.error("--fps must be between 1 and 240")
    if args.deadzone < 0 or args.deadzone >= 1:
        parser.error("--deadzone must be at least 0 and below 1")
    if args.frames < 0:
        parser.error("--frames must not be negative")

    return args


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.headless:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

    import pygame
    from show_controller.controller import ShowController
    from show_controller.input import PygameKeyboard

    # Print startup banner
    print("=" * 60)
    print("SHOW CONTROLLER")
    print("=" * 60)
    print(f"Config: {args.config}")
    print(f"Preferences: {args.preferences}")
    print(f"Target FPS: {args.fps}")
    print("F1: bind sprites / next   F2: reset axes   ESC: cancel / quit")
    print("=" * 60)
    print()

    controller = None
    try:
        config = load_config(args.config)

        if args.headless:
            pygame.init()
            controller = ShowController(
                config, args.preferences, fps=args.fps, deadzone=args.deadzone,
                backend='headless', pygame_module=pygame, keyboard=PygameKeyboard(pygame),
            )
        else:
            controller = ShowController(
                config, args.preferences, fps=args.fps, deadzone=args.deadzone,
                backend='pygame', pygame_module=pygame,
            )

        controller.run(max_frames=args.frames)

    except KeyboardInterrupt:
        print("\n\nShutting down...")
    except (ConfigError, PreferencesError, FileNotFoundError, pygame.error) as e:
        logger.error("%s", e)
        return 1
    finally:
        # Always cleanup, even on error
        if controller:
            controller.cleanup()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
