# src/video_poker/evaluation/types.py
"""Common types for hand evaluation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet


class HandCategory(str, Enum):
    """Paying hand categories, best first, plus the losing outcome."""
    ROYAL_FLUSH = 'Royal Flush'
    STRAIGHT_FLUSH = 'Straight Flush'
    FOUR_OF_A_KIND = 'Four of a Kind'
    FULL_HOUSE = 'Full House'
    FLUSH = 'Flush'
    STRAIGHT = 'Straight'
    THREE_OF_A_KIND = 'Three of a Kind'
    TWO_PAIR = 'Two Pair'
    JACKS_OR_BETTER = 'Jacks or Better'
    NO_WIN = 'No Win'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EvaluationResult:
    """
    Result of evaluating a five-card hand.

    Attributes:
        category: Best matching hand category
        multiplier: Payout factor applied to the bet (0 for no win)
        winning_positions: Hand positions (0-4) of the cards that make the win
    """
    category: HandCategory
    multiplier: int
    winning_positions: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def is_win(self) -> bool:
        return self.multiplier > 0
