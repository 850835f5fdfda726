"""Constants for video poker hand evaluation."""
from video_poker.evaluation.types import HandCategory

# Jacks or Better pay schedule (multiplier x bet), best hand first.
# The order doubles as the evaluation priority.
PAYOUT_TABLE = {
    HandCategory.ROYAL_FLUSH: 250,
    HandCategory.STRAIGHT_FLUSH: 50,
    HandCategory.FOUR_OF_A_KIND: 25,
    HandCategory.FULL_HOUSE: 9,
    HandCategory.FLUSH: 6,
    HandCategory.STRAIGHT: 4,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.TWO_PAIR: 2,
    HandCategory.JACKS_OR_BETTER: 1,
}

# Lowest pair value that still pays (Jacks)
MIN_PAYING_PAIR = 11

# A-2-3-4-5, the only straight where the ace plays low
WHEEL = [2, 3, 4, 5, 14]

# Lowest card of an ace-high straight
ROYAL_LOW_CARD = 10


def multiplier_for(category: HandCategory) -> int:
    """Payout multiplier for a category (0 for no win)."""
    return PAYOUT_TABLE.get(category, 0)
