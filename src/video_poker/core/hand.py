"""Five-card video poker hand."""

import logging
from typing import Iterable, List

from .card import Card
from .containers import CardContainer

logger = logging.getLogger(__name__)

HAND_SIZE = 5


class Hand(CardContainer):
    """
    A player's five-card hand.

    Positions are significant: position 0-4 is the card shown in slot 1-5.
    A hand is never resized, only individual positions are replaced.

    Attributes:
        cards: The five cards, in slot order
    """

    def __init__(self, cards: Iterable[Card]):
        """
        Create a hand.

        Raises:
            ValueError: If not given exactly five cards
        """
        cards = list(cards)
        if len(cards) != HAND_SIZE:
            raise ValueError(f"A hand holds exactly {HAND_SIZE} cards, got {len(cards)}")
        self.cards: List[Card] = cards

    def replace(self, position: int, card: Card) -> Card:
        """
        Replace the card at a position.

        Returns:
            The card that was replaced

        Raises:
            IndexError: If position is outside 0-4
        """
        if not 0 <= position < HAND_SIZE:
            raise IndexError(f"Hand position out of range: {position}")
        old = self.cards[position]
        self.cards[position] = card
        logger.debug(f"Replaced {old} with {card} at position {position}")
        return old

    def __getitem__(self, position: int) -> Card:
        return self.cards[position]

    def get_cards(self) -> List[Card]:
        """Get all cards in the hand."""
        return self.cards.copy()

    @classmethod
    def from_string(cls, hand_str: str) -> 'Hand':
        """
        Create a Hand from a string representation.

        Args:
            hand_str: Concatenated card strings, e.g. "AsAhJs9s5s"

        Raises:
            ValueError: If the string is not exactly five valid cards
        """
        if len(hand_str) % 2 != 0:
            raise ValueError(f"Invalid hand string length: {hand_str} (must be multiple of 2)")

        card_strings = [hand_str[i : i + 2] for i in range(0, len(hand_str), 2)]

        cards = []
        for i, card_str in enumerate(card_strings):
            try:
                cards.append(Card.from_string(card_str))
            except ValueError as e:
                raise ValueError(f"Invalid card at position {i + 1} in hand string '{hand_str}': {e}")

        return cls(cards)

    @property
    def size(self) -> int:
        """Number of cards in the hand."""
        return len(self.cards)

    def __str__(self) -> str:
        return f"Hand: {' '.join(str(c) for c in self.cards)}"
