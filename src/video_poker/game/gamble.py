"""Double-or-nothing gamble played on a winning hand."""
import logging
import random
from enum import Enum
from typing import List, Optional

from video_poker.errors import InvalidTransition

logger = logging.getLogger(__name__)

RED = "red"
BLACK = "black"
COLORS = (RED, BLACK)


class GamblePhase(Enum):
    """States of a gamble."""
    OFFERED = "offered"      # Win at stake, no guess made yet
    WON = "won"              # Last guess was right, player may go again
    LOST = "lost"            # Wrong guess, win is gone
    COLLECTED = "collected"  # Player stopped and kept the amount


class GambleRound:
    """
    A sequence of red/black guesses on a winning amount.

    A right guess doubles the amount and lets the player guess again; a wrong
    guess zeroes it and ends the gamble. Stopping keeps the current amount.

    Attributes:
        amount: Current amount at stake
        phase: Current GamblePhase
        outcomes: Colours drawn so far, in order
    """

    def __init__(self, stake: int, rng: Optional[random.Random] = None):
        if stake <= 0:
            raise ValueError(f"Can only gamble a positive win, got {stake}")
        self.amount = stake
        self.phase = GamblePhase.OFFERED
        self.outcomes: List[str] = []
        self._rng = rng or random

    @property
    def can_guess(self) -> bool:
        return self.phase in (GamblePhase.OFFERED, GamblePhase.WON)

    @property
    def is_finished(self) -> bool:
        return not self.can_guess

    @property
    def last_outcome(self) -> Optional[str]:
        return self.outcomes[-1] if self.outcomes else None

    def guess(self, color: str) -> bool:
        """
        Guess the colour of the next card.

        Returns:
            True if the guess was right

        Raises:
            ValueError: If color is not 'red' or 'black'
            InvalidTransition: If the gamble is already finished
        """
        if color not in COLORS:
            raise ValueError(f"Guess must be one of {COLORS}, got {color!r}")
        if not self.can_guess:
            raise InvalidTransition(f"Cannot guess in gamble phase {self.phase.value}")

        outcome = self._rng.choice(COLORS)
        self.outcomes.append(outcome)

        if color == outcome:
            self.amount *= 2
            self.phase = GamblePhase.WON
            logger.debug(f"Gamble won ({color}), amount now {self.amount}")
            return True

        logger.debug(f"Gamble lost (guessed {color}, drew {outcome}), {self.amount} forfeited")
        self.amount = 0
        self.phase = GamblePhase.LOST
        return False

    def collect(self) -> int:
        """Stop gambling and return the amount kept (0 after a loss)."""
        if self.phase != GamblePhase.LOST:
            self.phase = GamblePhase.COLLECTED
        return self.amount
