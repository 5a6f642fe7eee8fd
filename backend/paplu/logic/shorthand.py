"""
Shorthand status codes: the compact notation scorers type during play.

A code is a run of tokens, case-insensitive, optionally separated by
whitespace, ``-``, ``,`` or ``/``:

    3C        three-card bonus
    1P 2P 3P  paplu count
    D / W     declared (winner)
    G         gate winner (implies D)
    S MS F    scoot, mid scoot, full
    25        still playing, holding 25 points

Examples: ``"3C2P-MS"``, ``"DG"``, ``"1P 25"``. An empty code is a plain
Playing status with no points.

This module only translates notation. Settlement works on PlayerStatus and
never sees codes.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from paplu.logic.enums import RoundOutcome
from paplu.logic.exceptions import ShorthandError
from paplu.logic.types import PlayerStatus

if TYPE_CHECKING:
    from collections.abc import Mapping

MAX_POINTS_DIGITS = 6

# order matters: "3C" and "2P" must win over bare digits, "MS" over "S"
_TOKEN_RE = re.compile(
    r"(?P<three_card>3C)|(?P<paplu>[123])P|(?P<mid_scoot>MS)|(?P<points>\d+)"
    r"|(?P<winner>[DW])|(?P<gate>G)|(?P<scoot>S)|(?P<full>F)|(?P<separator>[\s,/-]+)|(?P<unknown>.)",
)

_OUTCOME_TOKENS = {
    "winner": RoundOutcome.WINNER,
    "gate": RoundOutcome.WINNER,
    "mid_scoot": RoundOutcome.MID_SCOOT,
    "scoot": RoundOutcome.SCOOT,
    "full": RoundOutcome.FULL,
    "points": RoundOutcome.PLAYING,
}

_OUTCOME_CODES = {
    RoundOutcome.SCOOT: "S",
    RoundOutcome.MID_SCOOT: "MS",
    RoundOutcome.FULL: "F",
}


def parse_status_code(code: str) -> PlayerStatus:
    """Parse one shorthand code into a PlayerStatus.

    Raises ShorthandError for unknown characters, repeated bonuses or
    outcomes, conflicting outcomes, and oversized point values.
    """
    has_three_card_bonus = False
    paplu_count = 0
    outcome: RoundOutcome | None = None
    points = 0
    is_gate = False
    outcome_kinds: set[str] = set()

    for match in _TOKEN_RE.finditer(code.upper()):
        kind = match.lastgroup
        if kind == "separator":
            continue
        if kind == "unknown":
            raise ShorthandError(code=code, reason=f"unexpected character {match.group()!r}")

        if kind == "three_card":
            if has_three_card_bonus:
                raise ShorthandError(code=code, reason="three-card bonus given twice")
            has_three_card_bonus = True
            continue
        if kind == "paplu":
            if paplu_count:
                raise ShorthandError(code=code, reason="paplu count given twice")
            paplu_count = int(match.group("paplu"))
            continue

        token_outcome = _OUTCOME_TOKENS[kind]
        if outcome is not None and outcome != token_outcome:
            raise ShorthandError(
                code=code,
                reason=f"conflicting outcomes {outcome.value} and {token_outcome.value}",
            )
        if kind == "points" and outcome is not None:
            raise ShorthandError(code=code, reason="points given twice")
        # only the D + G pair may spell one outcome with two tokens
        if kind in outcome_kinds:
            raise ShorthandError(code=code, reason=f"outcome {token_outcome.value} given twice")
        outcome_kinds.add(kind)
        outcome = token_outcome
        if kind == "gate":
            is_gate = True
        elif kind == "points":
            digits = match.group("points")
            if len(digits) > MAX_POINTS_DIGITS:
                raise ShorthandError(code=code, reason="points value too large")
            points = int(digits)

    return PlayerStatus(
        has_three_card_bonus=has_three_card_bonus,
        paplu_count=paplu_count,
        outcome=outcome or RoundOutcome.PLAYING,
        points=points,
        is_gate=is_gate,
    )


def format_status_code(status: PlayerStatus) -> str:
    """Render the canonical shorthand code for a status."""
    parts = []
    if status.has_three_card_bonus:
        parts.append("3C")
    if status.paplu_count:
        parts.append(f"{status.paplu_count}P")

    if status.outcome == RoundOutcome.WINNER:
        parts.append("G" if status.is_gate else "D")
    elif status.outcome == RoundOutcome.PLAYING:
        if status.points or not parts:
            parts.append(str(status.points))
    else:
        parts.append(_OUTCOME_CODES[status.outcome])

    return "-".join(parts)


def parse_round_codes(codes: Mapping[str, str]) -> dict[str, PlayerStatus]:
    """Parse a whole round of codes keyed by player id."""
    return {player_id: parse_status_code(code) for player_id, code in codes.items()}
