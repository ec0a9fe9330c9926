"""CLI entry point: python -m birds_and_cliffs play."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import msgspec

from birds_and_cliffs.chart import make_position_chart
from birds_and_cliffs.config import GameConfig
from birds_and_cliffs.errors import GameError
from birds_and_cliffs.log import configure_logging
from birds_and_cliffs.runner import RandomDice, play_game


def _load_config(args: argparse.Namespace) -> GameConfig:
    """File values first, then any flags given on the command line."""
    config = GameConfig.from_toml(args.config) if args.config else GameConfig()

    overrides = {
        "roster": args.roster,
        "track_length": args.squares,
        "charge_squares": args.charges,
        "cliff_squares": args.cliffs,
        "seed": args.seed,
        "max_turns": args.max_turns,
    }
    changes = {key: value for key, value in overrides.items() if value is not None}
    return msgspec.structs.replace(config, **changes)


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> int:
    """Play one game with random dice and report the outcome."""
    if args.config and not Path(args.config).exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = _load_config(args)
        game = config.build_game()
    except (GameError, msgspec.ValidationError, msgspec.DecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = play_game(game, RandomDice(config.seed), max_turns=config.max_turns)

    print()
    if result.winner is None:
        print(f"No winner after {result.turns} turns.")
    else:
        print(f"Player {result.winner} wins after {result.turns} turns!")
    print("=" * 40)
    for player in game.players:
        print(f"  {player.name:3s} square {player.square:4d}")

    if args.chart:
        make_position_chart(game.history, game.track_length, output_path=args.chart)
        print(f"Chart saved to {args.chart}")
    return 0


# ── main ─────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="birds_and_cliffs",
        description="Birds & Cliffs board-game rule engine",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped turns too")
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play one game with random dice")
    p_play.add_argument("--config", "-c", help="TOML file with the game setup")
    p_play.add_argument("--roster", help="One character per player, in play order")
    p_play.add_argument("--squares", type=int, help="Track length (10–150)")
    p_play.add_argument("--charges", type=int, nargs="*", help="Charge squares")
    p_play.add_argument("--cliffs", type=int, nargs="*", help="Cliff squares")
    p_play.add_argument("--seed", type=int, help="Seed for the dice")
    p_play.add_argument("--max-turns", type=int, help="Stop after this many rolls")
    p_play.add_argument("--chart", help="Save a position chart to this PNG path")

    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "play":
        return cmd_play(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
