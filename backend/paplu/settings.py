"""Rule configuration via environment variables.

Each rule can be overridden with a ``PAPLU_RULE_`` variable, e.g.
``PAPLU_RULE_SCOOT=15`` or ``PAPLU_RULE_PER_POINT=2``. Unset rules keep their
default values.
"""

from typing import Any

import structlog
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from paplu.logic.exceptions import ConfigError
from paplu.logic.rules import DEFAULT_RULES, RuleTable, validate_rules

logger = structlog.get_logger()


class RuleSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAPLU_RULE_")

    three_card_bonus: int = Field(default=DEFAULT_RULES.three_card_bonus, ge=0)
    scoot: int = Field(default=DEFAULT_RULES.scoot, ge=0)
    mid_scoot: int = Field(default=DEFAULT_RULES.mid_scoot, ge=0)
    full: int = Field(default=DEFAULT_RULES.full, ge=0)
    per_point: int = Field(default=DEFAULT_RULES.per_point, ge=0)
    single_paplu: int = Field(default=DEFAULT_RULES.single_paplu, ge=0)
    double_paplu: int = Field(default=DEFAULT_RULES.double_paplu, ge=0)
    triple_paplu: int = Field(default=DEFAULT_RULES.triple_paplu, ge=0)


def load_rules(**overrides: Any) -> RuleTable:  # noqa: ANN401
    """Build the active rule table from defaults, environment and explicit overrides.

    Explicit keyword overrides win over environment variables.
    Raises ConfigError if any resulting value is negative or not an integer.
    """
    try:
        settings = RuleSettings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigError(f"invalid rule settings: {problems}") from exc

    rules = validate_rules(settings.model_dump())
    logger.debug("rules loaded", **rules.model_dump())
    return rules
