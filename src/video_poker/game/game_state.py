from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set

from video_poker.core.hand import Hand
from video_poker.evaluation.types import EvaluationResult


class GamePhase(Enum):
    """Phases of a video poker session."""
    AWAITING_BET = "awaiting_bet"      # Bet not chosen yet
    ROUND_START = "round_start"        # Ready to take the wager for a new hand
    DEALT = "dealt"                    # Wager taken, hand not dealt yet
    HOLD_SELECTION = "hold_selection"  # Five cards dealt, waiting for holds
    FINAL_HAND = "final_hand"          # Redraw done and hand evaluated
    GAMBLE = "gamble"                  # Double-or-nothing in progress
    PAYOUT = "payout"                  # Crediting the win
    GAME_OVER = "game_over"            # Terminal


@dataclass
class GameState:
    """
    Mutable state of one session.

    Only ``credits`` carries over from round to round; the bet is chosen once.
    """
    credits: int
    bet: Optional[int] = None
    phase: GamePhase = GamePhase.AWAITING_BET
    current_hand: Optional[Hand] = None
    held_positions: Set[int] = field(default_factory=set)
    last_result: Optional[EvaluationResult] = None
    win_amount: int = 0
    rounds_played: int = 0
    biggest_win: int = 0


@dataclass(frozen=True)
class SessionSummary:
    """What the player is told when the session ends."""
    rounds_played: int
    final_credits: int
    biggest_win: int
