"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits, in canonical deck order."""
    HEARTS = 'h'
    DIAMONDS = 'd'
    CLUBS = 'c'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value

    @property
    def is_red(self) -> bool:
        """Hearts and diamonds are red, clubs and spades black."""
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(Enum):
    """Card ranks, lowest first."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def number(self) -> int:
        """Numeric value of the rank (2-10, J=11, Q=12, K=13, A=14)."""
        return RANK_NUMBERS[self]

    @property
    def label(self) -> str:
        """Rank as printed on the card face ('10' rather than 'T')."""
        return '10' if self == Rank.TEN else self.value


RANK_NUMBERS = {rank: number for number, rank in enumerate(Rank, start=2)}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values; two cards are equal when rank and suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (hearts, diamonds, clubs, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)
