"""
Scoresheet for a Paplu game: the ordered rounds and the running totals.

A Scoresheet is immutable. Every operation returns a new sheet and never
mutates its input. Each stored round keeps the statuses it was settled from,
so it can be re-settled after a roster or rule change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import Field

from paplu.logic.exceptions import RoundNotFoundError, ScoresheetError
from paplu.logic.rules import DEFAULT_RULES, RuleTable, validate_rules
from paplu.logic.settlement import settle_round_breakdown
from paplu.logic.types import CamelModel, Player, PlayerStatus, Standing

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from typing import Any

logger = structlog.get_logger()


class GameRound(CamelModel):
    """One settled round."""

    number: int = Field(ge=1)
    statuses: dict[str, PlayerStatus]
    scores: dict[str, int]
    is_null_round: bool


class Scoresheet(CamelModel):
    """Roster, active rules and settled rounds of one game."""

    players: tuple[Player, ...]
    rules: RuleTable = DEFAULT_RULES
    three_card_game: bool = True
    rounds: tuple[GameRound, ...] = ()


def _validate_roster(players: Sequence[Player]) -> tuple[Player, ...]:
    roster = tuple(players)
    ids = [player.id for player in roster]
    if len(set(ids)) != len(ids):
        raise ScoresheetError(f"duplicate player ids in roster: {ids}")
    return roster


def _settle(sheet: Scoresheet, number: int, statuses: Mapping[str, PlayerStatus]) -> GameRound:
    """Settle statuses against the sheet's roster and rules."""
    settled_statuses = dict(statuses)
    if not sheet.three_card_game:
        settled_statuses = {
            player_id: status.model_copy(update={"has_three_card_bonus": False})
            for player_id, status in settled_statuses.items()
        }

    breakdown = settle_round_breakdown(settled_statuses, sheet.players, sheet.rules)
    if breakdown.is_null_round:
        logger.debug("null round settled, no single winner", round_number=number)
    return GameRound(
        number=number,
        statuses=dict(statuses),
        scores=breakdown.scores,
        is_null_round=breakdown.is_null_round,
    )


def _resettle_all(sheet: Scoresheet) -> tuple[GameRound, ...]:
    return tuple(_settle(sheet, game_round.number, game_round.statuses) for game_round in sheet.rounds)


def _round_index(sheet: Scoresheet, number: int) -> int:
    if not (1 <= number <= len(sheet.rounds)):
        raise RoundNotFoundError(number)
    return number - 1


def create_scoresheet(
    players: Sequence[Player],
    rules: RuleTable | Mapping[str, Any] | None = None,
    *,
    three_card_game: bool = True,
) -> Scoresheet:
    """Start an empty scoresheet. Rules default to DEFAULT_RULES.

    Raises ScoresheetError for duplicate player ids and ConfigError for an
    invalid rule table.
    """
    return Scoresheet(
        players=_validate_roster(players),
        rules=DEFAULT_RULES if rules is None else validate_rules(rules),
        three_card_game=three_card_game,
    )


def add_round(sheet: Scoresheet, statuses: Mapping[str, PlayerStatus]) -> Scoresheet:
    """Settle a new round and append it to the sheet."""
    game_round = _settle(sheet, len(sheet.rounds) + 1, statuses)
    return sheet.model_copy(update={"rounds": (*sheet.rounds, game_round)})


def update_round(sheet: Scoresheet, number: int, statuses: Mapping[str, PlayerStatus]) -> Scoresheet:
    """Replace a round's statuses and settle it again from scratch."""
    index = _round_index(sheet, number)
    rounds = list(sheet.rounds)
    rounds[index] = _settle(sheet, number, statuses)
    return sheet.model_copy(update={"rounds": tuple(rounds)})


def remove_round(sheet: Scoresheet, number: int) -> Scoresheet:
    """Drop a round and renumber the ones after it."""
    index = _round_index(sheet, number)
    remaining = sheet.rounds[:index] + sheet.rounds[index + 1 :]
    renumbered = tuple(
        game_round.model_copy(update={"number": position})
        for position, game_round in enumerate(remaining, start=1)
    )
    return sheet.model_copy(update={"rounds": renumbered})


def change_rules(
    sheet: Scoresheet,
    rules: RuleTable | Mapping[str, Any],
    *,
    recompute: bool = False,
) -> Scoresheet:
    """
    Switch the sheet to a new rule table.

    Rounds already on the sheet keep their scores unless `recompute` is set,
    in which case every round is settled again under the new rules.
    """
    updated = sheet.model_copy(update={"rules": validate_rules(rules)})
    if recompute:
        logger.info("re-settling rounds after rule change", rounds=len(updated.rounds))
        updated = updated.model_copy(update={"rounds": _resettle_all(updated)})
    return updated


def change_players(sheet: Scoresheet, players: Sequence[Player]) -> Scoresheet:
    """Replace the roster and settle every round again against it."""
    updated = sheet.model_copy(update={"players": _validate_roster(players)})
    return updated.model_copy(update={"rounds": _resettle_all(updated)})


def total_scores(sheet: Scoresheet) -> dict[str, int]:
    """Running total per rostered player across all rounds."""
    totals = {player.id: 0 for player in sheet.players}
    for game_round in sheet.rounds:
        for player_id, score in game_round.scores.items():
            if player_id in totals:
                totals[player_id] += score
    return totals


def standings(sheet: Scoresheet) -> list[Standing]:
    """
    Rank players by running total, highest first.

    Tied players share a rank and the next rank is skipped (1, 1, 3).
    Ties keep roster order.
    """
    totals = total_scores(sheet)
    ordered = sorted(sheet.players, key=lambda player: -totals[player.id])

    result: list[Standing] = []
    for position, player in enumerate(ordered, start=1):
        total = totals[player.id]
        rank = result[-1].rank if result and result[-1].total == total else position
        result.append(Standing(player=player, total=total, rank=rank))
    return result


def incomplete_rounds(sheet: Scoresheet) -> list[int]:
    """Numbers of rounds settled without a single winner."""
    return [game_round.number for game_round in sheet.rounds if game_round.is_null_round]
