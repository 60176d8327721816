#!/usr/bin/env python3
"""Grid Combat - Main entry point.

Runs an elves-versus-goblins battle from a text map and reports the
number of completed rounds, the surviving hit points and their product.
"""

import argparse
import logging
import sys

from grid_combat.engine.map_loader import MapParseError, load_battle
from grid_combat.engine.power_search import find_flawless_attack_power
from grid_combat.engine.round_executor import RoundExecutor
from grid_combat.errors import StalemateError
from grid_combat.interface.renderer import MapRenderer
from grid_combat.models.unit import Faction
from grid_combat.schemas.config import BattleConfig
from grid_combat.schemas.reports import BattleReport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grid Combat - turn-based elves vs goblins battle simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s input/battle.txt                     # Run battle with default powers
  %(prog)s input/battle.txt --elf-power 15      # Stronger elves
  %(prog)s input/battle.txt --find-power        # Smallest elf power with no elf deaths
  %(prog)s input/battle.txt --render --json     # Show final map, JSON report
        """,
    )

    parser.add_argument("map_file", metavar="MAP", help="Battle map text file")
    parser.add_argument(
        "--hit-points",
        type=int,
        default=None,
        help="Starting hit points of every unit (default: 200)",
    )
    parser.add_argument(
        "--elf-power", type=int, default=None, help="Elf attack power (default: 3)"
    )
    parser.add_argument(
        "--goblin-power", type=int, default=None, help="Goblin attack power (default: 3)"
    )
    parser.add_argument(
        "--find-power",
        action="store_true",
        help="Search for the smallest elf attack power that wins without losing an elf",
    )
    parser.add_argument(
        "--render", action="store_true", help="Print the final map with hit points"
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging (renders every round)"
    )
    return parser


def build_config(args: argparse.Namespace) -> BattleConfig:
    """Collect explicitly given options into a validated config."""
    overrides = {
        "initial_hit_points": args.hit_points,
        "elf_attack_power": args.elf_power,
        "goblin_attack_power": args.goblin_power,
    }
    return BattleConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Keep stdout parseable when printing JSON
    if args.json:
        log_level = logging.WARNING
    else:
        log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        with open(args.map_file) as f:
            text = f.read()
    except OSError as e:
        print(f"Error: cannot read {args.map_file}: {e}")
        sys.exit(1)

    executor = RoundExecutor()
    attack_power = None
    try:
        if args.find_power:
            search = find_flawless_attack_power(text, Faction.ELF, config, executor)
            outcome = search.outcome
            attack_power = search.attack_power
            final_battle = search.battle
        else:
            final_battle = load_battle(text, config)
            outcome = executor.run(final_battle)
    except MapParseError as e:
        print(f"Error: invalid map {args.map_file}: {e}")
        sys.exit(1)
    except (StalemateError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    report = BattleReport.from_outcome(outcome, attack_power=attack_power)
    if args.render:
        print(MapRenderer().render(final_battle))
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        if attack_power is not None:
            print(f"Elf attack power: {attack_power}")
        print(f"Winner: {report.winner}")
        print(
            f"Outcome: {report.completed_rounds} * {report.remaining_hit_points} = {report.outcome}"
        )


if __name__ == "__main__":
    main()
