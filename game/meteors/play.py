"""
Play the meteor shooter with the keyboard.

    meteors --assets ./assets
    python -m game.meteors.play --seed 7

Left/A and Right/D rotate, Space fires, Esc quits.
"""

import argparse
from pathlib import Path

import arcade

from .assets import load_assets
from .config import GameConfig
from .simulation import Simulation
from .utils import make_rng
from .window import MeteorWindow


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the meteor shooter")
    parser.add_argument(
        "--assets",
        type=Path,
        default=None,
        help="Assets directory (default: nearest ./assets up the tree)",
    )
    parser.add_argument(
        "--tps",
        type=int,
        default=GameConfig.tps,
        help=f"Simulation ticks per second (default: {GameConfig.tps})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for meteor spawns (default: random)",
    )
    args = parser.parse_args(argv)

    # Missing assets raise here and end the process
    assets = load_assets(args.assets)
    config = GameConfig(tps=args.tps)
    sim = Simulation(assets, config=config, rng=make_rng(args.seed))

    print(f"[meteors] {config.width}x{config.height} @ {config.tps} tps, "
          f"{len(assets.meteors)} meteor sprites")

    MeteorWindow(sim)
    arcade.run()
    print(f"[meteors] Final score: {sim.score_text}")


if __name__ == "__main__":
    main()
