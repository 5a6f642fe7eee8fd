"""Scoresheet loader: build a settled Scoresheet from a JSON document.

Document shape::

    {
        "players": [{"id": "a", "name": "Asha"}, ...],
        "rules": {"scoot": 10, ...},          # optional, defaults apply
        "threeCardGame": true,                 # optional
        "rounds": [
            {"a": "DG", "b": "25", "c": {"outcome": "Scoot"}},
            ...
        ]
    }

Each round maps player ids to either a shorthand code or a status object.
Rounds are settled in order as they are loaded.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from paplu.logic.exceptions import ScoresheetError, SheetLoadError, ShorthandError
from paplu.logic.scoresheet import Scoresheet, add_round, create_scoresheet
from paplu.logic.shorthand import parse_status_code
from paplu.logic.types import Player, PlayerStatus

# Safety limit against runaway documents.
_MAX_ROUNDS = 10_000


def _parse_players(raw: Any) -> list[Player]:  # noqa: ANN401
    if not raw or not isinstance(raw, list):
        raise SheetLoadError("Scoresheet must contain a non-empty 'players' list")
    try:
        return [Player.model_validate(entry) for entry in raw]
    except ValidationError as exc:
        raise SheetLoadError(f"Invalid player entry: {exc}") from exc


def _parse_status(player_id: str, raw: Any, round_number: int) -> PlayerStatus:  # noqa: ANN401
    try:
        if isinstance(raw, str):
            return parse_status_code(raw)
        return PlayerStatus.model_validate(raw)
    except (ShorthandError, ValidationError) as exc:
        raise SheetLoadError(f"Round {round_number}, player {player_id!r}: {exc}") from exc


def _parse_round(raw: Any, round_number: int) -> dict[str, PlayerStatus]:  # noqa: ANN401
    if not isinstance(raw, dict):
        raise SheetLoadError(f"Round {round_number} must be an object keyed by player id")
    return {player_id: _parse_status(player_id, value, round_number) for player_id, value in raw.items()}


def load_scoresheet_from_string(content: str) -> Scoresheet:
    """Parse a JSON scoresheet document and settle its rounds.

    Raises SheetLoadError for malformed documents and ConfigError for an
    invalid rule table.
    """
    content = content.strip()
    if not content:
        raise SheetLoadError("Empty scoresheet content")

    try:
        document = json.loads(content)
    except ValueError as exc:  # JSONDecodeError, or an integer past the digit limit
        raise SheetLoadError(f"Malformed JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise SheetLoadError("Scoresheet document must be a JSON object")

    rounds = document.get("rounds", [])
    if not isinstance(rounds, list):
        raise SheetLoadError("'rounds' must be a list")
    if len(rounds) > _MAX_ROUNDS:
        raise SheetLoadError(f"Scoresheet exceeds maximum round count ({_MAX_ROUNDS})")

    three_card_game = document.get("threeCardGame", True)
    if not isinstance(three_card_game, bool):
        raise SheetLoadError("'threeCardGame' must be true or false")

    try:
        sheet = create_scoresheet(
            _parse_players(document.get("players")),
            document.get("rules"),
            three_card_game=three_card_game,
        )
    except ScoresheetError as exc:
        raise SheetLoadError(str(exc)) from exc
    for round_number, raw_round in enumerate(rounds, start=1):
        sheet = add_round(sheet, _parse_round(raw_round, round_number))
    return sheet


def load_scoresheet_from_file(path: Path | str) -> Scoresheet:
    """Read and parse a scoresheet JSON file."""
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SheetLoadError(f"Cannot read scoresheet file {file_path}: {exc}") from exc
    return load_scoresheet_from_string(content)
