"""
Play the smash simulation with the keyboard.

Usage:
    python -m game.smash.play [--seed 42] [--targets 13]

Controls:
    SPACE (hold): stop walking and charge the swing
    SPACE (release): swing - breaks every target under the strike region
                     once the charge is armed
    R: respawn targets
    Escape: quit
"""

import argparse
import logging
import random

import arcade

from .config import SmashConfig
from .simulation import Simulation
from .window import PlayWindow


def main():
    parser = argparse.ArgumentParser(description="Play the smash simulation")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for target placement (default: random)",
    )
    parser.add_argument(
        "--targets",
        type=int,
        default=SmashConfig.target_count,
        help=f"Number of targets (default: {SmashConfig.target_count})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every swing",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = SmashConfig(target_count=args.targets)
    sim = Simulation(config=config, rng=random.Random(args.seed))

    PlayWindow(sim, title="beyonce smash")
    arcade.run()


if __name__ == "__main__":
    main()
