from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import config
from .models import GameSettings, TowerType
from .simulation import Simulation

logger = logging.getLogger(__name__)

# Build order for the scripted headless defense; every spot clears the default path.
HEADLESS_BUILD_ORDER = [
    ((440, 140), TowerType.BASIC),
    ((300, 260), TowerType.SPLASH),
    ((600, 260), TowerType.BEAM),
    ((200, 140), TowerType.BASIC),
    ((700, 140), TowerType.BASIC),
    ((440, 400), TowerType.SPLASH),
    ((200, 400), TowerType.BEAM),
]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Geometry TD tower defense")
    parser.add_argument("--auto-wave", action="store_true", help="Start the next wave automatically after a countdown")
    parser.add_argument("--turbo", action="store_true", help="Run the simulation at double speed")
    parser.add_argument("--mute", action="store_true", help="Disable sound effects")
    parser.add_argument("--money", type=int, default=config.INITIAL_MONEY, help="Starting money")
    parser.add_argument("--lives", type=int, default=config.INITIAL_LIVES, help="Starting lives")
    parser.add_argument(
        "--headless",
        type=float,
        metavar="SECONDS",
        help="Run a scripted defense without a window for this many simulated seconds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = GameSettings(
        auto_wave=args.auto_wave,
        turbo=args.turbo,
        sound=not args.mute,
        starting_money=args.money,
        starting_lives=args.lives,
    )
    if args.headless is not None:
        return run_headless(settings, args.headless)

    from .game import TowerDefenseGame

    game = TowerDefenseGame(settings)
    game.run()
    return 0


def autoplay_step(simulation: Simulation) -> None:
    """Spend money the way the scripted defense does: build first, then upgrade."""
    built = len(simulation.towers)
    if built < len(HEADLESS_BUILD_ORDER):
        position, tower_type = HEADLESS_BUILD_ORDER[built]
        if simulation.money >= tower_type.cost:
            simulation.place_tower(position, tower_type)
        return
    cheapest = min(simulation.towers, key=lambda tower: tower.upgrade_cost)
    if simulation.money >= cheapest.upgrade_cost:
        simulation.select_tower(cheapest.id)
        simulation.upgrade_selected_tower()


def run_headless(settings: GameSettings, seconds: float) -> int:
    settings.auto_wave = True
    simulation = Simulation(settings)
    step = 1.0 / config.FPS
    frames = int(seconds / step)

    for _ in range(frames):
        autoplay_step(simulation)
        simulation.tick(step)
        if "wave_complete" in simulation.drain_events():
            report = simulation.wave_report
            print(
                f"Wave {report.wave_number:>3} cleared | +{report.reward} +{report.bonus} bonus | "
                f"money {simulation.money} | lives {simulation.lives} | towers {len(simulation.towers)}"
            )
        if simulation.game_over:
            break

    outcome = "defeated" if simulation.game_over else "still standing"
    print(
        f"=== {outcome} after {simulation.time:.1f}s: wave {simulation.wave_number}, "
        f"{simulation.combat.kills} kills, {simulation.lives} lives, {simulation.money} money ==="
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
