"""
Pydantic models for Paplu round data.

Models are frozen. Field names are snake_case; the camelCase spellings used by
the web client's stored games are accepted on input and emitted on
``model_dump(by_alias=True)``.
"""

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from paplu.logic.enums import RoundOutcome

MAX_PAPLU_COUNT = 3


def _name_or_camel(name: str) -> AliasChoices:
    return AliasChoices(name, to_camel(name))


class CamelModel(BaseModel):
    """Frozen model accepting snake_case or camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=AliasGenerator(validation_alias=_name_or_camel, serialization_alias=to_camel),
    )


class Player(CamelModel):
    """Player identity for one game."""

    id: str
    name: str


class PlayerStatus(CamelModel):
    """
    One player's outcome for one round.

    ``points`` only matters for a Playing outcome and ``is_gate`` only for a
    Winner; the settlement ignores them otherwise.
    """

    has_three_card_bonus: bool = Field(
        default=False,
        validation_alias=AliasChoices("has_three_card_bonus", "hasThreeCardBonus", "is3C"),
        serialization_alias="hasThreeCardBonus",
    )
    paplu_count: int = Field(default=0, ge=0, le=MAX_PAPLU_COUNT)
    outcome: RoundOutcome = RoundOutcome.PLAYING
    points: int = Field(default=0, ge=0)
    is_gate: bool = False

    @property
    def is_winner(self) -> bool:
        return self.outcome == RoundOutcome.WINNER


class RoundBreakdown(CamelModel):
    """Result of a settlement pass, split by stage."""

    scores: dict[str, int]
    bonus_scores: dict[str, int]  # three-card and paplu side payments
    pot_scores: dict[str, int]  # winner settlement, all zero for a null round
    winner_id: str | None = None
    is_null_round: bool


class Standing(CamelModel):
    """Player position in the running totals."""

    player: Player
    total: int
    rank: int
