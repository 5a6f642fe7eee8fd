"""
String enum definitions for Paplu round concepts.
"""

from enum import Enum


class RoundOutcome(str, Enum):
    """How a player finished the round. Exactly one applies per player."""

    WINNER = "Winner"  # declared the round
    PLAYING = "Playing"  # still holding cards, pays per point
    SCOOT = "Scoot"
    MID_SCOOT = "MidScoot"
    FULL = "Full"
