"""Parsing of the player's hold selection."""
import logging
import re
from typing import FrozenSet

from video_poker.core.hand import HAND_SIZE

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


def parse_hold_selection(text: str, hand_size: int = HAND_SIZE) -> FrozenSet[int]:
    """
    Turn free-form hold text into 0-based hand positions.

    Card numbers are 1-based. When the text contains commas or whitespace it
    is split on them ("1, 3 4"), otherwise every character is a card number
    ("134"). Non-numeric and out-of-range tokens are dropped, duplicates
    collapse. Empty text means hold nothing.

    Args:
        text: Raw input from the player (None is treated as empty)
        hand_size: Number of card slots

    Returns:
        Frozen set of positions in range 0..hand_size-1
    """
    text = (text or "").strip()
    if not text:
        return frozenset()

    if _SEPARATORS.search(text):
        tokens = [t for t in _SEPARATORS.split(text) if t]
    else:
        tokens = list(text)

    positions = set()
    for token in tokens:
        try:
            number = int(token)
        except ValueError:
            logger.debug(f"Ignoring hold token {token!r}")
            continue
        if 1 <= number <= hand_size:
            positions.add(number - 1)
        else:
            logger.debug(f"Ignoring out of range hold {number}")

    return frozenset(positions)
