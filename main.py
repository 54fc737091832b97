"""Entry point for playing Battle City."""

import argparse
import logging

from battle_city import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Battle City tank defence")
    parser.add_argument("--seed", type=int, default=None, help="seed for map generation and AI")
    parser.add_argument("--fps", type=int, default=60, help="target frame rate")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument(
        "--volume", type=float, default=1.0, help="master sound volume between 0 and 1"
    )
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
    run_pygame(seed=args.seed, fps=args.fps, muted=args.mute, volume=args.volume)


if __name__ == "__main__":
    main()
