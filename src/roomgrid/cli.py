from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import FloorSettings
from .exceptions import FloorConfigError, GenerationError
from .logging_config import configure_logging
from .render import render_legend

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="roomgrid",
        description="Generate a dungeon floor and print its layout",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-r", "--rooms", type=int, default=None, help="Number of rooms to generate (>= 3)")
    parser.add_argument("-s", "--seed", type=int, default=None, help="Seed for a reproducible floor")
    parser.add_argument(
        "--max-distance",
        type=int,
        default=None,
        help="Maximum distance of any room from the starting room on each axis",
    )
    attempts = parser.add_mutually_exclusive_group()
    attempts.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Growth attempts allowed before giving up",
    )
    attempts.add_argument(
        "--no-attempt-cap",
        action="store_true",
        help="Retry generation until a valid floor is found",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a settings YAML file overriding the defaults",
    )
    parser.add_argument("--no-legend", action="store_true", help="Do not print the symbol legend")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> FloorSettings:
    """Defaults, then the settings file and environment, then command line flags."""
    settings = FloorSettings.load(user_path=args.settings_path)
    overrides = {}
    if args.rooms is not None:
        overrides["rooms"] = args.rooms
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.max_distance is not None:
        overrides["max_distance"] = args.max_distance
    if args.no_attempt_cap:
        overrides["max_attempts"] = None
    elif args.max_attempts is not None:
        overrides["max_attempts"] = args.max_attempts
    settings = dataclasses.replace(settings, **overrides)
    settings.validate()
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = build_settings(args)
        floor = settings.build_floor()
    except (FloorConfigError, FileNotFoundError) as exc:
        print(f"roomgrid: configuration error: {exc}", file=sys.stderr)
        return 2
    except GenerationError as exc:
        print(f"roomgrid: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(floor.render())
    if not args.no_legend:
        print(render_legend())
    logger.debug("Floor stats: %s", floor.stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
