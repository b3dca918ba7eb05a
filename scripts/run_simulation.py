#!/usr/bin/env python3
"""Run a rent game headlessly.

The game is driven in simulation time, one player turn per step, and every
event is printed to stdout as a JSON line. Without ``--autoplay`` nobody
acts, which shows the market and the houses' wear on their own.

Examples::

    python scripts/run_simulation.py --seconds 120 --seed 7 --autoplay
    python scripts/run_simulation.py --realtime --seconds 30
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rent_game.autoplay import GreedyLandlord
from rent_game.config import GameConfig
from rent_game.logging import setup_logging
from rent_game.simulation import RentGame
from rent_game.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def run_virtual(game: RentGame, seconds: int, step_ms: int, player: GreedyLandlord | None) -> None:
    """Advance simulation time in fixed steps, letting the player act between them."""
    remaining = seconds * 1000
    while remaining > 0:
        step = min(step_ms, remaining)
        game.advance(step)
        remaining -= step
        if player is not None:
            player.play(game)


def run_realtime(game: RentGame, seconds: int, step_ms: int, player: GreedyLandlord | None) -> None:
    """Follow the wall clock, letting the player act every step."""
    deadline = time.monotonic() + seconds
    with game:
        while time.monotonic() < deadline:
            time.sleep(step_ms / 1000)
            if player is not None:
                player.play(game)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run a headless rent game")
    parser.add_argument(
        "--seconds",
        type=int,
        default=60,
        help="Simulation time to run (default: 60)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: SEED env var, else unseeded)",
    )
    parser.add_argument(
        "--step-ms",
        type=int,
        default=1000,
        help="Player turn interval in milliseconds (default: 1000)",
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Let the greedy landlord play",
    )
    parser.add_argument(
        "--reserve",
        type=int,
        default=5000,
        help="Money the landlord keeps when buying (default: 5000)",
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Follow the wall clock instead of simulated time",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON",
    )

    args = parser.parse_args()

    if args.seconds <= 0:
        parser.error("--seconds must be positive")
    if args.step_ms <= 0:
        parser.error("--step-ms must be positive")

    config = GameConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed

    setup_logging(level=config.log_level, format_type="json" if args.json_logs else "standard")

    game = RentGame(config)
    sink = ConsoleSink(pretty=args.pretty)
    game.subscribe(sink)
    player = GreedyLandlord(reserve=args.reserve) if args.autoplay else None

    logger.info("=" * 60)
    logger.info("Rent Game - %s mode", "real-time" if args.realtime else "simulated")
    logger.info("Duration: %d s, seed: %s, autoplay: %s", args.seconds, config.seed, args.autoplay)
    logger.info("=" * 60)

    sink.write_snapshot(game.snapshot())
    if args.realtime:
        run_realtime(game, args.seconds, args.step_ms, player)
    else:
        run_virtual(game, args.seconds, args.step_ms, player)
    sink.write_snapshot(game.snapshot())
    sink.close()

    logger.info("Final state: %s", game.summary())
    logger.info("Events written: %s", sink.counts)


if __name__ == "__main__":
    main()
