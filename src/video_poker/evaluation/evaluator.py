"""Jacks or Better hand evaluation."""
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Union
import logging

from video_poker.core.card import Card, Rank
from video_poker.core.hand import HAND_SIZE, Hand
from video_poker.evaluation.constants import (
    MIN_PAYING_PAIR, ROYAL_LOW_CARD, WHEEL, multiplier_for
)
from video_poker.evaluation.types import EvaluationResult, HandCategory

logger = logging.getLogger(__name__)

ALL_POSITIONS = frozenset(range(HAND_SIZE))


@dataclass
class RankGroup:
    """Cards of one rank within a hand."""
    count: int = 0
    positions: List[int] = field(default_factory=list)


class HandEvaluator:
    """
    Scores five-card hands against the fixed pay schedule.

    Evaluation is a pure function of the cards; the evaluator keeps no state.
    """

    def evaluate(self, hand: Union[Hand, Sequence[Card]]) -> EvaluationResult:
        """
        Evaluate a hand.

        Categories are checked from best to worst and the first match wins,
        so a hand is never counted in two categories.

        Args:
            hand: A Hand or exactly five cards, in slot order

        Returns:
            EvaluationResult naming the category, its multiplier and the
            positions of the cards that make it

        Raises:
            ValueError: If not given exactly five cards
        """
        cards = hand.get_cards() if isinstance(hand, Hand) else list(hand)
        if len(cards) != HAND_SIZE:
            raise ValueError(f"Expected {HAND_SIZE} cards, got {len(cards)}")

        numbers = sorted(card.rank.number for card in cards)
        is_flush = len({card.suit for card in cards}) == 1
        is_straight = self._is_straight(numbers)
        groups = self._group_by_rank(cards)

        result = self._classify(numbers, is_flush, is_straight, groups)
        logger.debug(
            f"Evaluated {' '.join(str(c) for c in cards)}: "
            f"{result.category} x{result.multiplier} {sorted(result.winning_positions)}"
        )
        return result

    @staticmethod
    def _is_straight(numbers: List[int]) -> bool:
        """Five consecutive values, or the ace-low wheel."""
        if numbers == WHEEL:
            return True
        return all(numbers[i] == numbers[i - 1] + 1 for i in range(1, len(numbers)))

    @staticmethod
    def _group_by_rank(cards: List[Card]) -> Dict[Rank, RankGroup]:
        """Positions of each rank present, keyed in ascending rank order."""
        groups = {rank: RankGroup() for rank in Rank}
        for position, card in enumerate(cards):
            group = groups[card.rank]
            group.count += 1
            group.positions.append(position)
        return {rank: group for rank, group in groups.items() if group.count}

    def _classify(
        self,
        numbers: List[int],
        is_flush: bool,
        is_straight: bool,
        groups: Dict[Rank, RankGroup]
    ) -> EvaluationResult:
        if is_flush and is_straight and numbers[0] == ROYAL_LOW_CARD:
            return self._result(HandCategory.ROYAL_FLUSH, ALL_POSITIONS)
        if is_flush and is_straight:
            return self._result(HandCategory.STRAIGHT_FLUSH, ALL_POSITIONS)

        for group in groups.values():
            if group.count == 4:
                return self._result(HandCategory.FOUR_OF_A_KIND, group.positions)

        counts = [group.count for group in groups.values()]
        if 3 in counts and 2 in counts:
            return self._result(HandCategory.FULL_HOUSE, ALL_POSITIONS)
        if is_flush:
            return self._result(HandCategory.FLUSH, ALL_POSITIONS)
        if is_straight:
            return self._result(HandCategory.STRAIGHT, ALL_POSITIONS)

        for group in groups.values():
            if group.count == 3:
                return self._result(HandCategory.THREE_OF_A_KIND, group.positions)

        pairs = [(rank, group) for rank, group in groups.items() if group.count == 2]
        if len(pairs) == 2:
            positions = [p for _, group in pairs for p in group.positions]
            return self._result(HandCategory.TWO_PAIR, positions)

        for rank, group in pairs:
            if rank.number >= MIN_PAYING_PAIR:
                return self._result(HandCategory.JACKS_OR_BETTER, group.positions)

        return self._result(HandCategory.NO_WIN, ())

    @staticmethod
    def _result(category: HandCategory, positions) -> EvaluationResult:
        return EvaluationResult(
            category=category,
            multiplier=multiplier_for(category),
            winning_positions=frozenset(positions),
        )


# Shared evaluator instance
evaluator = HandEvaluator()


def evaluate_hand(hand: Union[Hand, Sequence[Card]]) -> EvaluationResult:
    """Evaluate a five-card hand with the shared evaluator."""
    return evaluator.evaluate(hand)
