"""Exceptions raised by the video poker engine."""


class VideoPokerError(Exception):
    """Base class for all video poker errors."""


class DeckExhausted(VideoPokerError):
    """Raised when more cards are requested than the deck holds."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Cannot deal {requested} cards, only {remaining} remain")


class InvalidTransition(VideoPokerError):
    """Raised when a game operation is called in the wrong phase."""


class InputClosed(VideoPokerError):
    """Raised by a player interface when its input stream has ended."""
