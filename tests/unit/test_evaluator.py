"""Tests for Jacks or Better hand evaluation."""
import pytest
from video_poker.core.hand import Hand
from video_poker.evaluation.constants import PAYOUT_TABLE
from video_poker.evaluation.evaluator import HandEvaluator, evaluate_hand
from video_poker.evaluation.types import HandCategory

from tests.test_helpers import cards


@pytest.mark.parametrize("hand,category,multiplier,positions", [
    ("Ts Js Qs Ks As", HandCategory.ROYAL_FLUSH, 250, {0, 1, 2, 3, 4}),
    ("Ah Kh Th Qh Jh", HandCategory.ROYAL_FLUSH, 250, {0, 1, 2, 3, 4}),
    ("9c Tc Jc Qc Kc", HandCategory.STRAIGHT_FLUSH, 50, {0, 1, 2, 3, 4}),
    ("Ad 2d 3d 4d 5d", HandCategory.STRAIGHT_FLUSH, 50, {0, 1, 2, 3, 4}),
    ("7s 7h 2c 7d 7c", HandCategory.FOUR_OF_A_KIND, 25, {0, 1, 3, 4}),
    ("7s 7h 7d 4c 4s", HandCategory.FULL_HOUSE, 9, {0, 1, 2, 3, 4}),
    ("2h 9h 4h Jh Kh", HandCategory.FLUSH, 6, {0, 1, 2, 3, 4}),
    ("6c 7d 8h 9s Tc", HandCategory.STRAIGHT, 4, {0, 1, 2, 3, 4}),
    ("2c 3d 4h 5s Ac", HandCategory.STRAIGHT, 4, {0, 1, 2, 3, 4}),
    ("Tc Jd Qh Ks Ac", HandCategory.STRAIGHT, 4, {0, 1, 2, 3, 4}),
    ("8c 2d 8h 8s Kc", HandCategory.THREE_OF_A_KIND, 3, {0, 2, 3}),
    ("As Ah Kc Kd 2s", HandCategory.TWO_PAIR, 2, {0, 1, 2, 3}),
    ("3s 4h 3c 9d 4s", HandCategory.TWO_PAIR, 2, {0, 1, 2, 4}),
    ("Jh Jd 3s 5c 9h", HandCategory.JACKS_OR_BETTER, 1, {0, 1}),
    ("2s Ah 7c Ad 9h", HandCategory.JACKS_OR_BETTER, 1, {1, 3}),
    ("9s 9d 3h 5c 2s", HandCategory.NO_WIN, 0, set()),
    ("Ts Td 3h 5c 2s", HandCategory.NO_WIN, 0, set()),
    ("2s 5d 9h Jc Kh", HandCategory.NO_WIN, 0, set()),
])
def test_evaluate_categories(hand, category, multiplier, positions):
    result = evaluate_hand(cards(hand))
    assert result.category == category
    assert result.multiplier == multiplier
    assert result.winning_positions == frozenset(positions)


def test_full_house_is_not_three_of_a_kind():
    result = evaluate_hand(cards("7s 4d 7h 4c 7d"))
    assert result.category == HandCategory.FULL_HOUSE
    assert result.multiplier == 9


def test_two_pair_with_high_pair_is_not_jacks_or_better():
    result = evaluate_hand(cards("Qs Qd 3h 3c 9s"))
    assert result.category == HandCategory.TWO_PAIR


def test_wheel_is_not_royal():
    result = evaluate_hand(cards("As 2s 3s 4s 5s"))
    assert result.category == HandCategory.STRAIGHT_FLUSH


@pytest.mark.parametrize("hand", ["Qs Ks As 2s 3s", "Jd Qc Kh As 2c"])
def test_no_wraparound_straight(hand):
    assert evaluate_hand(cards(hand)).category in (HandCategory.FLUSH, HandCategory.NO_WIN)


def test_evaluate_is_pure():
    hand = Hand.from_string("AsAhKcKd2s")
    before = hand.get_cards()
    first = evaluate_hand(hand)
    second = evaluate_hand(hand)
    assert first == second
    assert hand.get_cards() == before


def test_evaluate_accepts_hand_and_card_list():
    hand = Hand.from_string("JhJd3s5c9h")
    assert evaluate_hand(hand) == HandEvaluator().evaluate(hand.get_cards())


@pytest.mark.parametrize("count", [4, 6])
def test_wrong_card_count(count):
    deck_cards = cards("2s 3s 4s 5s 6s 7s")
    with pytest.raises(ValueError):
        evaluate_hand(deck_cards[:count])


def test_payout_table_order_and_values():
    assert list(PAYOUT_TABLE.items()) == [
        (HandCategory.ROYAL_FLUSH, 250),
        (HandCategory.STRAIGHT_FLUSH, 50),
        (HandCategory.FOUR_OF_A_KIND, 25),
        (HandCategory.FULL_HOUSE, 9),
        (HandCategory.FLUSH, 6),
        (HandCategory.STRAIGHT, 4),
        (HandCategory.THREE_OF_A_KIND, 3),
        (HandCategory.TWO_PAIR, 2),
        (HandCategory.JACKS_OR_BETTER, 1),
    ]
    assert HandCategory.NO_WIN not in PAYOUT_TABLE


def test_category_names():
    assert str(HandCategory.JACKS_OR_BETTER) == "Jacks or Better"
    assert HandCategory.NO_WIN.value == "No Win"
