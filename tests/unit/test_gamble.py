"""Tests for the double-or-nothing gamble."""
import pytest
from video_poker.errors import InvalidTransition
from video_poker.game.gamble import BLACK, RED, GamblePhase, GambleRound

from tests.test_helpers import FixedRandom


def test_gamble_starts_offered():
    gamble = GambleRound(20, rng=FixedRandom())
    assert gamble.phase == GamblePhase.OFFERED
    assert gamble.amount == 20
    assert gamble.can_guess
    assert gamble.last_outcome is None


def test_correct_guess_doubles():
    gamble = GambleRound(20, rng=FixedRandom([RED]))
    assert gamble.guess(RED) is True
    assert gamble.amount == 40
    assert gamble.phase == GamblePhase.WON
    assert gamble.last_outcome == RED


def test_wrong_guess_loses_everything_and_ends():
    gamble = GambleRound(20, rng=FixedRandom([BLACK]))
    assert gamble.guess(RED) is False
    assert gamble.amount == 0
    assert gamble.phase == GamblePhase.LOST
    assert gamble.is_finished
    with pytest.raises(InvalidTransition):
        gamble.guess(RED)


def test_win_win_lose_pays_nothing():
    gamble = GambleRound(20, rng=FixedRandom([RED, BLACK, BLACK]))
    assert gamble.guess(RED)
    assert gamble.guess(BLACK)
    assert gamble.amount == 80
    assert not gamble.guess(RED)
    assert gamble.collect() == 0
    assert gamble.phase == GamblePhase.LOST


def test_collect_keeps_current_amount():
    gamble = GambleRound(15, rng=FixedRandom([BLACK]))
    gamble.guess(BLACK)
    assert gamble.collect() == 30
    assert gamble.phase == GamblePhase.COLLECTED
    assert not gamble.can_guess


def test_collect_without_guessing():
    gamble = GambleRound(15, rng=FixedRandom())
    assert gamble.collect() == 15


def test_invalid_guess():
    gamble = GambleRound(10, rng=FixedRandom([RED]))
    with pytest.raises(ValueError):
        gamble.guess("green")
    assert gamble.phase == GamblePhase.OFFERED


@pytest.mark.parametrize("stake", [0, -5])
def test_stake_must_be_positive(stake):
    with pytest.raises(ValueError):
        GambleRound(stake)


def test_default_generator_draws_both_colors():
    seen = set()
    for _ in range(200):
        gamble = GambleRound(1)
        gamble.guess(RED)
        seen.add(gamble.last_outcome)
    assert seen == {RED, BLACK}
