"""Print per-round scores and final standings for a saved Paplu scoresheet.

Usage:
    uv run python bin/settle_game.py path/to/game.json
    uv run python bin/settle_game.py path/to/game.json --log-level DEBUG
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from paplu.logic.exceptions import ConfigError, SheetLoadError
from paplu.logic.scoresheet import Scoresheet, incomplete_rounds, standings, total_scores
from paplu.sheet_loader import load_scoresheet_from_file
from shared.logging import resolve_log_level, setup_logging


def _signed(value: int) -> str:
    return f"{value:+d}" if value else "0"


def print_report(sheet: Scoresheet) -> None:
    """Print the round-by-round table followed by the standings."""
    names = [player.name for player in sheet.players]
    width = max(8, *(len(name) for name in names))

    print("Round  " + "".join(f"{name:>{width}}" for name in names))
    for game_round in sheet.rounds:
        cells = "".join(f"{_signed(game_round.scores[player.id]):>{width}}" for player in sheet.players)
        flag = "  (no single winner)" if game_round.is_null_round else ""
        print(f"{game_round.number:>5}  {cells}{flag}")

    totals = total_scores(sheet)
    print("Total  " + "".join(f"{_signed(totals[player.id]):>{width}}" for player in sheet.players))
    print()

    print("Standings:")
    for standing in standings(sheet):
        print(f"  {standing.rank}. {standing.player.name}: {_signed(standing.total)}")

    incomplete = incomplete_rounds(sheet)
    if incomplete:
        print()
        print(f"Incomplete rounds: {', '.join(str(number) for number in incomplete)}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Settle a Paplu scoresheet and print the standings")
    parser.add_argument("sheet", type=Path, help="Path to a scoresheet JSON file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)",
    )
    args = parser.parse_args()

    setup_logging(level=resolve_log_level(args.log_level))

    try:
        sheet = load_scoresheet_from_file(args.sheet)
    except (SheetLoadError, ConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print_report(sheet)
    return 0


if __name__ == "__main__":
    sys.exit(main())
