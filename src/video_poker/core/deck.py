"""Deck implementation."""
import logging
import random
from typing import List, Optional

from video_poker.errors import DeckExhausted

from .card import Card, Rank, Suit
from .containers import CardContainer

logger = logging.getLogger(__name__)


class Deck(CardContainer):
    """
    A standard 52-card deck.

    Cards are dealt from the front of the deck, so the first card in
    ``get_cards()`` is the next one dealt.

    Attributes:
        cards: List of cards in the deck
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a new, unshuffled deck.

        Args:
            rng: Random generator used for shuffling. Defaults to the
                 process-wide generator of the ``random`` module.
        """
        self.cards: List[Card] = []
        self._rng = rng or random
        self.reset()

    def reset(self) -> None:
        """Restore all 52 cards in canonical order (suit-major, rank ascending)."""
        self.cards = [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the deck in place (Fisher-Yates)."""
        cards = self.cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def deal(self, count: int) -> List[Card]:
        """
        Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal

        Returns:
            The dealt cards, in deck order

        Raises:
            DeckExhausted: If fewer than ``count`` cards remain
            ValueError: If ``count`` is negative
        """
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        if count > len(self.cards):
            raise DeckExhausted(count, len(self.cards))

        dealt, self.cards = self.cards[:count], self.cards[count:]
        logger.debug(f"Dealt {' '.join(str(c) for c in dealt)} ({len(self.cards)} left)")
        return dealt

    def add_cards(self, cards: List[Card]) -> None:
        """Return cards to the bottom of the deck."""
        self.cards.extend(cards)

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
