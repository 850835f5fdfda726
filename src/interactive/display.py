"""Rich based rendering of the video poker table."""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from rich.console import Console
from rich.text import Text

from video_poker.core.card import Card, Suit
from video_poker.evaluation.constants import PAYOUT_TABLE
from video_poker.evaluation.types import HandCategory
from video_poker.game.player_io import TableView

WELCOME_BANNER = r"""
  ____   ___  _  _______ ____     ____ _     ___ 
 |  _ \ / _ \| |/ / ____|  _ \   / ___| |   |_ _|
 | |_) | | | | ' /|  _| | |_) | | |   | |    | | 
 |  __/| |_| | . \| |___|  _ <  | |___| |___ | | 
 |_|    \___/|_|\_\_____|_| \_\  \____|_____|___|
"""

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

CARD_WIDTH = 11
SEPARATOR = "-" * 51


@dataclass(frozen=True)
class RenderConfig:
    """Colours and layout used when drawing the table."""
    red_suit_style: str = "bright_red"
    black_suit_style: str = "bright_blue"
    win_highlight_style: str = "black on green"
    payout_highlight_style: str = "green"
    card_gap: int = 2
    clear_screen: bool = True


def card_art(card: Card) -> List[str]:
    """Seven lines of box-drawing art for one card."""
    label = card.rank.label
    left = label if len(label) == 2 else label + " "
    right = label if len(label) == 2 else " " + label
    symbol = SUIT_SYMBOLS[card.suit]
    return [
        "┌─────────┐",
        f"│{left}       │",
        "│         │",
        f"│    {symbol}    │",
        "│         │",
        f"│       {right}│",
        "└─────────┘",
    ]


def render_hand(
    cards: List[Card],
    config: RenderConfig,
    highlighted: Iterable[int] = (),
    show_labels: bool = False,
) -> Text:
    """Cards side by side, winning cards highlighted, optional (1)-(5) labels."""
    highlighted = set(highlighted)
    arts = [card_art(card) for card in cards]
    styles = [
        config.win_highlight_style if i in highlighted
        else config.red_suit_style if card.suit.is_red
        else config.black_suit_style
        for i, card in enumerate(cards)
    ]
    gap = " " * config.card_gap

    text = Text()
    for row in range(len(arts[0])):
        for art, style in zip(arts, styles):
            text.append(art[row], style=style)
            text.append(gap)
        text.append("\n")

    if show_labels:
        text.append(gap.join(f"({i + 1})".center(CARD_WIDTH) for i in range(len(cards))))
        text.append("\n")
    return text


def render_payout_table(config: RenderConfig, highlight: Optional[HandCategory] = None) -> Text:
    """The pay schedule, with the achieved hand's row highlighted."""
    text = Text("Payout Table (Multiplier x Bet):\n")
    for category, multiplier in PAYOUT_TABLE.items():
        line = f"{category.value:<18} : {multiplier}"
        style = config.payout_highlight_style if category == highlight else None
        text.append(line, style=style)
        text.append("\n")
    text.append(SEPARATOR + "\n")
    return text


def render_table(console: Console, view: TableView, config: RenderConfig) -> None:
    """Draw a full screen: banner, credits, payout table, hand and messages."""
    if config.clear_screen and console.is_terminal:
        console.clear()
    console.print(Text(WELCOME_BANNER))
    console.print(f"Credits: {view.credits}\n", markup=False)
    console.print(render_payout_table(config, view.highlight_category))

    if view.hand:
        console.print("Your Hand:")
        console.print(render_hand(
            view.hand,
            config,
            highlighted=view.highlighted_positions,
            show_labels=view.show_position_labels,
        ))

    if view.message:
        console.print(view.message + "\n", markup=False)
    if view.win_amount > 0:
        console.print(f"Win for this hand: {view.win_amount} credits.\n", markup=False)
