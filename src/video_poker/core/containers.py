"""Interfaces for card containers."""

from abc import ABC, abstractmethod

from .card import Card


class CardContainer(ABC):
    """Interface for any ordered collection of cards (deck, hand)."""

    @abstractmethod
    def get_cards(self) -> list[Card]:
        """Get a copy of all cards in the container, in order."""
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of cards in the container."""
        pass

    def __len__(self) -> int:
        return self.size

    def __iter__(self):
        return iter(self.get_cards())
