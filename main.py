"""Entry point for playing Sky Bomber."""

import argparse
import logging

from skybomber import ConfigurationError, ControlMode, WorldSettings, run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Sky Bomber arcade game")
    parser.add_argument("--width", type=int, default=900, help="world width in pixels")
    parser.add_argument("--height", type=int, default=600, help="world height in pixels")
    parser.add_argument(
        "--segments", type=int, default=35, help="number of terrain line segments"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed for the world")
    parser.add_argument(
        "--pointer", action="store_true", help="start with mouse-follow controls"
    )
    parser.add_argument("--fps", type=int, default=60, help="frame rate cap")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    settings = WorldSettings(
        width=args.width, height=args.height, segments=args.segments, seed=args.seed
    )
    try:
        settings.validate()
    except ConfigurationError as exc:
        parser.error(str(exc))
    if args.fps < 1:
        parser.error("--fps must be at least 1")

    mode = ControlMode.POINTER if args.pointer else ControlMode.DIRECTIONAL
    run_pygame(settings=settings, control_mode=mode, fps=args.fps)


if __name__ == "__main__":
    main()
