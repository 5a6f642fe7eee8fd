"""Builders for settlement and scoresheet tests."""

import random

from paplu.logic.enums import RoundOutcome
from paplu.logic.types import Player, PlayerStatus

# ============================================================================
# Test Builder Helpers
# ============================================================================


def create_players(*ids: str) -> list[Player]:
    """Create players whose names are the capitalized ids."""
    return [Player(id=player_id, name=player_id.capitalize()) for player_id in ids]


def winner(*, gate: bool = False, three_card: bool = False, paplu: int = 0) -> PlayerStatus:
    return PlayerStatus(
        outcome=RoundOutcome.WINNER,
        is_gate=gate,
        has_three_card_bonus=three_card,
        paplu_count=paplu,
    )


def playing(points: int = 0, *, three_card: bool = False, paplu: int = 0) -> PlayerStatus:
    return PlayerStatus(points=points, has_three_card_bonus=three_card, paplu_count=paplu)


def finished(outcome: RoundOutcome, *, three_card: bool = False, paplu: int = 0) -> PlayerStatus:
    """Status for a Scoot, MidScoot or Full loser."""
    return PlayerStatus(outcome=outcome, has_three_card_bonus=three_card, paplu_count=paplu)


def random_round(rng: random.Random, num_players: int) -> tuple[list[Player], dict[str, PlayerStatus]]:
    """Generate a random roster and round, with any number of winners and claims."""
    players = create_players(*(f"p{i}" for i in range(num_players)))
    statuses = {}
    for player in players:
        # leave some players out entirely to exercise the default status
        if rng.random() < 0.1:
            continue
        statuses[player.id] = PlayerStatus(
            has_three_card_bonus=rng.random() < 0.2,
            paplu_count=rng.choice((0, 0, 0, 1, 2, 3)),
            outcome=rng.choice(list(RoundOutcome)),
            points=rng.randint(0, 80),
            is_gate=rng.random() < 0.3,
        )
    return players, statuses
