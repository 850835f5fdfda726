"""Jacks or Better video poker engine."""

from video_poker.core.card import Card, Rank, Suit
from video_poker.core.deck import Deck
from video_poker.core.hand import Hand
from video_poker.errors import DeckExhausted, InputClosed, InvalidTransition, VideoPokerError
from video_poker.evaluation.evaluator import HandCategory, evaluate_hand
from video_poker.game.game import VideoPokerGame

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "Hand",
    "HandCategory",
    "evaluate_hand",
    "VideoPokerGame",
    "VideoPokerError",
    "DeckExhausted",
    "InvalidTransition",
    "InputClosed",
]
