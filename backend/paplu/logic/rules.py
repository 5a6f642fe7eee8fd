"""Rule table for Paplu: the point value of every bonus and penalty category."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, Field, ValidationError

from paplu.logic.exceptions import ConfigError
from paplu.logic.types import CamelModel


class RuleTable(CamelModel):
    """
    Point values used by round settlement.

    Every value is required and must be a non-negative integer. Values are
    strict: booleans, floats and numeric strings are rejected. The table is
    read-only during settlement; editing rules means building a new table.
    """

    # Older saved games call this "threeCardHand" or "attaKasu".
    three_card_bonus: int = Field(
        strict=True,
        ge=0,
        validation_alias=AliasChoices("three_card_bonus", "threeCardBonus", "threeCardHand", "attaKasu"),
        serialization_alias="threeCardBonus",
    )
    scoot: int = Field(strict=True, ge=0)
    mid_scoot: int = Field(strict=True, ge=0)
    full: int = Field(strict=True, ge=0)
    per_point: int = Field(strict=True, ge=0)
    single_paplu: int = Field(strict=True, ge=0)
    double_paplu: int = Field(strict=True, ge=0)
    triple_paplu: int = Field(strict=True, ge=0)


DEFAULT_RULES = RuleTable(
    three_card_bonus=10,
    scoot=10,
    mid_scoot=20,
    full=40,
    per_point=1,
    single_paplu=10,
    double_paplu=30,
    triple_paplu=50,
)


def _describe_errors(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "rules"
        problems.append(f"{location}: {error['msg']}")
    return "invalid rule table: " + "; ".join(problems)


def validate_rules(table: RuleTable | Mapping[str, Any]) -> RuleTable:
    """Validate a rule table given as a RuleTable or a plain mapping.

    Accepts snake_case or camelCase keys and ignores unknown ones.
    Raises ConfigError naming every missing, negative or non-integer value.
    """
    if isinstance(table, RuleTable):
        data: dict[str, Any] = table.model_dump()
    elif isinstance(table, Mapping):
        data = dict(table)
    else:
        raise ConfigError(f"invalid rule table: expected a mapping, got {type(table).__name__}")

    try:
        return RuleTable.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(_describe_errors(exc)) from exc
