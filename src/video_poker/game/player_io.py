"""Interface between the game loop and whatever shows it to the player."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Set

from video_poker.core.card import Card
from video_poker.core.hand import HAND_SIZE
from video_poker.evaluation.types import HandCategory


@dataclass(frozen=True)
class TableView:
    """
    Everything a display needs to draw one screen.

    Attributes:
        credits: Current credit total
        hand: Cards to show, in slot order (None before the deal)
        highlight_category: Payout table row to highlight
        win_amount: Win for this hand, shown when positive
        message: Extra message line
        show_position_labels: Show (1)-(5) under the cards for hold selection
        highlighted_positions: Slots to highlight as winning cards
    """
    credits: int
    hand: Optional[List[Card]] = None
    highlight_category: Optional[HandCategory] = None
    win_amount: int = 0
    message: str = ""
    show_position_labels: bool = False
    highlighted_positions: FrozenSet[int] = field(default_factory=frozenset)


class PlayerIO(ABC):
    """
    Display and input collaborator of the game loop.

    Every ``request_*`` method blocks until the player answers. When the
    input stream ends, implementations raise ``InputClosed``.
    """

    @abstractmethod
    def request_bet_choice(self, options: Sequence[int]) -> int:
        """Return one of the allowed bets."""
        pass

    @abstractmethod
    def request_continue(self, message: str = "Press Enter to continue...") -> None:
        """Wait for the player to acknowledge."""
        pass

    @abstractmethod
    def request_hold_selection(self, hand_size: int = HAND_SIZE) -> Set[int]:
        """Return the 0-based positions to hold; empty means hold nothing."""
        pass

    @abstractmethod
    def request_yes_no(self, prompt: str) -> bool:
        pass

    @abstractmethod
    def request_choice(self, prompt: str, options: Sequence[str]) -> str:
        """Return one of the options."""
        pass

    @abstractmethod
    def render(self, view: TableView) -> None:
        """Draw the table."""
        pass
