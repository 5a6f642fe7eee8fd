"""
Round settlement for Paplu.

A settlement pass turns every player's round status into a signed score. Two
stages accumulate onto the same score map:

Stage A pays the side bonuses. A sole three-card claimant, and every paplu
holder, collects the bonus from each other player. These payments do not
depend on who won.

Stage B pays the pot. With exactly one winner, each other player pays the
winner for their outcome, doubled for Playing and Full losers when the winner
went gate. With no winner or several winners the round is null and this stage
is skipped.

Every payment moves points between two players, so the scores of a round
always sum to zero.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paplu.logic.enums import RoundOutcome
from paplu.logic.rules import DEFAULT_RULES
from paplu.logic.types import PlayerStatus, RoundBreakdown

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from paplu.logic.rules import RuleTable
    from paplu.logic.types import Player

DEFAULT_STATUS = PlayerStatus()
MIN_PLAYERS_FOR_PAYMENTS = 2
GATE_MULTIPLIER = 2

# gate never doubles scoot or mid scoot payments
_GATE_DOUBLED_OUTCOMES = frozenset({RoundOutcome.PLAYING, RoundOutcome.FULL})


def _resolve_statuses(
    statuses: Mapping[str, PlayerStatus],
    players: Sequence[Player],
) -> dict[str, PlayerStatus]:
    """Map each roster id to its status, in roster order, defaulting missing entries."""
    return {player.id: statuses.get(player.id, DEFAULT_STATUS) for player in players}


def _collect_from_each(scores: dict[str, int], collector_id: str, amount: int) -> None:
    """Move `amount` from every other player to the collector."""
    for player_id in scores:
        if player_id != collector_id:
            scores[player_id] -= amount
            scores[collector_id] += amount


def paplu_value(paplu_count: int, rules: RuleTable) -> int:
    """Return the bonus a player collects from each opponent for holding paplus."""
    return (0, rules.single_paplu, rules.double_paplu, rules.triple_paplu)[paplu_count]


def find_winner(statuses: Mapping[str, PlayerStatus]) -> str | None:
    """Return the id of the only Winner, or None when there are zero or several."""
    winners = [player_id for player_id, status in statuses.items() if status.is_winner]
    if len(winners) != 1:
        return None
    return winners[0]


def loser_payment(status: PlayerStatus, rules: RuleTable, *, gate: bool) -> int:
    """
    Return what a non-winning player owes the winner.

    Scoot, MidScoot and Full pay their flat rule value; a Playing hand pays
    its points times the per-point rate. A gate winner doubles the Playing
    and Full amounts only.
    """
    if status.outcome == RoundOutcome.SCOOT:
        amount = rules.scoot
    elif status.outcome == RoundOutcome.MID_SCOOT:
        amount = rules.mid_scoot
    elif status.outcome == RoundOutcome.FULL:
        amount = rules.full
    elif status.outcome == RoundOutcome.PLAYING:
        amount = status.points * rules.per_point
    else:
        return 0

    if gate and status.outcome in _GATE_DOUBLED_OUTCOMES:
        amount *= GATE_MULTIPLIER
    return amount


def _apply_three_card_bonus(
    scores: dict[str, int],
    statuses: dict[str, PlayerStatus],
    rules: RuleTable,
) -> None:
    claimants = [player_id for player_id, status in statuses.items() if status.has_three_card_bonus]
    # several claims cannot all be right, so nobody collects
    if len(claimants) != 1:
        return
    _collect_from_each(scores, claimants[0], rules.three_card_bonus)


def _apply_paplu_bonuses(
    scores: dict[str, int],
    statuses: dict[str, PlayerStatus],
    rules: RuleTable,
) -> None:
    for player_id, status in statuses.items():
        if status.paplu_count > 0:
            _collect_from_each(scores, player_id, paplu_value(status.paplu_count, rules))


def _apply_winner_settlement(
    scores: dict[str, int],
    statuses: dict[str, PlayerStatus],
    winner_id: str,
    rules: RuleTable,
) -> None:
    gate = statuses[winner_id].is_gate
    for player_id, status in statuses.items():
        if player_id == winner_id:
            continue
        amount = loser_payment(status, rules, gate=gate)
        scores[player_id] -= amount
        scores[winner_id] += amount


def settle_round_breakdown(
    statuses: Mapping[str, PlayerStatus],
    players: Sequence[Player],
    rules: RuleTable = DEFAULT_RULES,
) -> RoundBreakdown:
    """
    Settle one round and return the scores together with their per-stage parts.

    Players missing from `statuses` are treated as Playing with no points and
    no bonuses; statuses for ids outside `players` are ignored. With fewer
    than two players nobody pays anybody.
    """
    resolved = _resolve_statuses(statuses, players)
    bonus_scores = dict.fromkeys(resolved, 0)
    pot_scores = dict.fromkeys(resolved, 0)
    winner_id = find_winner(resolved)

    if len(resolved) >= MIN_PLAYERS_FOR_PAYMENTS:
        _apply_three_card_bonus(bonus_scores, resolved, rules)
        _apply_paplu_bonuses(bonus_scores, resolved, rules)
        if winner_id is not None:
            _apply_winner_settlement(pot_scores, resolved, winner_id, rules)

    return RoundBreakdown(
        scores={player_id: bonus_scores[player_id] + pot_scores[player_id] for player_id in resolved},
        bonus_scores=bonus_scores,
        pot_scores=pot_scores,
        winner_id=winner_id,
        is_null_round=winner_id is None,
    )


def settle_round(
    statuses: Mapping[str, PlayerStatus],
    players: Sequence[Player],
    rules: RuleTable = DEFAULT_RULES,
) -> dict[str, int]:
    """Settle one round and return each player's signed score for it."""
    return settle_round_breakdown(statuses, players, rules).scores
