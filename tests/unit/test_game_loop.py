"""Tests for the interactive session loop."""
from video_poker.evaluation.types import HandCategory
from video_poker.game.game import GAME_OVER_MESSAGE, HOLD_INSTRUCTIONS
from video_poker.game.game_state import GamePhase

from tests.test_helpers import ScriptedIO, create_test_game

NO_WIN_DEAL = "2s 5d 9h Jc Kh 3c 7s 8d 4h Qc"
TWO_PAIR_DEAL = "As Ah Kc Kd 2s 3c 7s 8d 4h Qc"


def test_bet_is_requested_once():
    game = create_test_game(NO_WIN_DEAL, bet=None)
    io = ScriptedIO(bets=[10], holds=[{0, 1, 2, 3, 4}])
    summary = game.run(io)

    assert game.state.bet == 10
    assert io.calls.count("bet") == 1
    # Second hold request finds the script empty and closes the session
    assert summary.rounds_played == 2
    assert game.is_over


def test_no_win_round_then_input_closes():
    game = create_test_game(NO_WIN_DEAL)
    io = ScriptedIO(holds=[{0, 1, 2, 3, 4}])
    summary = game.run(io)

    assert io.views[0].message == "Bet: 10 credits per hand"
    assert io.views[0].hand is None
    assert io.views[1].message == HOLD_INSTRUCTIONS
    assert io.views[1].show_position_labels
    assert io.views[2].message == "Final Hand: No winning combination."
    assert io.views[2].highlight_category is None
    assert "yes_no" not in io.calls
    # Round 2 took its wager before input closed
    assert summary.final_credits == 80


def test_win_declined_gamble_is_paid():
    game = create_test_game(TWO_PAIR_DEAL)
    io = ScriptedIO(holds=[{0, 1, 2, 3}], answers=[False])
    game.run(io)

    final_view = io.views[2]
    assert final_view.message == "Final Hand: Two Pair!"
    assert final_view.highlight_category == HandCategory.TWO_PAIR
    assert final_view.win_amount == 20
    assert final_view.highlighted_positions == frozenset({0, 1, 2, 3})
    assert "choice" not in io.calls
    # 100 - 10 + 20, then round 2 wager
    assert game.state.credits == 100


def test_gamble_win_win_lose_ends_without_further_prompts():
    game = create_test_game(TWO_PAIR_DEAL, gamble_outcomes=["red", "black", "black"])
    io = ScriptedIO(
        holds=[{0, 1, 2, 3}],
        answers=[True, True, True],
        guesses=["red", "black", "red"],
    )
    game.run(io)

    assert io.calls.count("choice") == 3
    # Offer, then one "again?" after each of the two wins, none after the loss
    assert io.calls.count("yes_no") == 3
    assert any(m.startswith("Gamble successful! The card was black. Your win is now 80")
               for m in io.messages)
    assert any(m.startswith("Gamble failed! The card was black.") for m in io.messages)
    # Lost the win; round 2 took another wager before input closed
    assert game.state.credits == 80


def test_gamble_stop_keeps_doubled_win():
    game = create_test_game(TWO_PAIR_DEAL, gamble_outcomes=["red"])
    io = ScriptedIO(holds=[{0, 1, 2, 3}], answers=[True, False], guesses=["red"])
    game.run(io)

    assert game.state.biggest_win == 40
    assert game.state.credits == 90 + 40 - 10


def test_empty_hold_asks_for_acknowledgement():
    game = create_test_game(NO_WIN_DEAL, credits=10)
    io = ScriptedIO(holds=[set()])
    game.run(io)

    hold_index = io.calls.index("hold")
    assert io.calls[hold_index + 1] == "continue"
    assert io.calls.count("continue") == 3


def test_game_over_when_credits_run_out():
    game = create_test_game(NO_WIN_DEAL, credits=10)
    io = ScriptedIO(holds=[{0, 1, 2, 3, 4}])
    summary = game.run(io)

    assert game.state.phase == GamePhase.GAME_OVER
    assert io.views[-1].message == GAME_OVER_MESSAGE
    assert io.calls.count("hold") == 1
    assert summary.rounds_played == 1
    assert summary.final_credits == 0


def test_no_round_without_credits():
    game = create_test_game(NO_WIN_DEAL, credits=5, bet=10)
    io = ScriptedIO()
    summary = game.run(io)

    assert io.calls == []
    assert io.views == []
    assert summary.rounds_played == 0
    assert summary.final_credits == 5


def test_input_closed_during_gamble_pays_current_win():
    game = create_test_game(TWO_PAIR_DEAL, gamble_outcomes=["red"])
    io = ScriptedIO(holds=[{0, 1, 2, 3}], answers=[True], guesses=["red"])
    game.run(io)

    # Won once (40), then the "again?" prompt found no input
    assert game.is_over
    assert game.state.credits == 90 + 40
