"""Typed domain exceptions for Paplu scorekeeping.

Settlement itself never raises: incomplete or contradictory rounds degrade
to defined zero-payment behavior. Errors are reserved for configuration and
for the adapters and ledger operations around the engine.
"""


class PapluError(Exception):
    """Base exception for all scorekeeping errors."""


class ConfigError(PapluError):
    """Rule table is missing a value or holds a negative or non-integer value."""


class ShorthandError(PapluError):
    """Raised when a shorthand status code cannot be parsed.

    Attributes:
        code: The raw code as entered.
        reason: Human-readable explanation of what is wrong with it.

    """

    def __init__(self, *, code: str, reason: str) -> None:
        self.code = code
        self.reason = reason
        super().__init__(f"invalid status code {code!r}: {reason}")


class ScoresheetError(PapluError):
    """Scoresheet operation cannot be applied."""


class RoundNotFoundError(ScoresheetError):
    """Referenced round number does not exist on the scoresheet."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"round {number} does not exist")


class SheetLoadError(PapluError):
    """Raised when a scoresheet document cannot be loaded or parsed."""
