"""Core video poker session: betting, dealing, holding, payout and gamble."""
import logging
import random
from typing import Callable, Iterable, Optional, Sequence

from video_poker.core.deck import Deck
from video_poker.core.hand import HAND_SIZE, Hand
from video_poker.errors import InputClosed, InvalidTransition
from video_poker.evaluation.evaluator import evaluate_hand
from video_poker.evaluation.types import EvaluationResult, HandCategory
from video_poker.game.gamble import COLORS, GambleRound
from video_poker.game.game_state import GamePhase, GameState, SessionSummary
from video_poker.game.player_io import PlayerIO, TableView

logger = logging.getLogger(__name__)

BET_OPTIONS = (5, 10, 20, 30)
STARTING_CREDITS = 100

HOLD_INSTRUCTIONS = (
    "Select cards to hold by entering their numbers (e.g. 134 for cards 1, 3, and 4).\n"
    "Press Enter to hold none."
)
NO_HOLDS_MESSAGE = "No cards selected to hold. All cards will be replaced."
GAME_OVER_MESSAGE = "Not enough credits to play. Game over!"


class VideoPokerGame:
    """
    Credit-based Jacks or Better session.

    The session moves through the phases of ``GamePhase``:

        AWAITING_BET -> ROUND_START -> DEALT -> HOLD_SELECTION -> FINAL_HAND
        -> (GAMBLE) -> PAYOUT -> ROUND_START | GAME_OVER

    Each public method performs one transition and raises
    ``InvalidTransition`` when called in the wrong phase. ``run`` drives the
    whole session against a ``PlayerIO``.

    Attributes:
        state: Current GameState
        bet_options: Bets the player may choose from
        deck: Deck of the current round (None before the first deal)
        gamble: Gamble of the current round, if one was started
    """

    def __init__(
        self,
        credits: int = STARTING_CREDITS,
        bet_options: Sequence[int] = BET_OPTIONS,
        rng: Optional[random.Random] = None,
        deck_factory: Optional[Callable[[], Deck]] = None,
    ):
        """
        Initialize a session.

        Args:
            credits: Starting credits
            bet_options: Allowed bets, in display order
            rng: Random generator for shuffles and gamble flips; defaults to
                 the process-wide generator
            deck_factory: Builds the deck for each round; defaults to a
                 standard deck using ``rng``
        """
        if credits < 0:
            raise ValueError(f"Credits cannot be negative: {credits}")
        if not bet_options or any(b <= 0 for b in bet_options):
            raise ValueError(f"Bet options must be positive: {bet_options}")

        self.state = GameState(credits=credits)
        self.bet_options = tuple(bet_options)
        self._rng = rng or random
        self._deck_factory = deck_factory or (lambda: Deck(rng=self._rng))
        self.deck: Optional[Deck] = None
        self.gamble: Optional[GambleRound] = None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _require(self, *phases: GamePhase) -> None:
        if self.state.phase not in phases:
            expected = ", ".join(p.value for p in phases)
            raise InvalidTransition(
                f"Cannot do this in phase {self.state.phase.value} (expected {expected})"
            )

    def choose_bet(self, bet: int) -> None:
        """
        Fix the bet for the rest of the session.

        Raises:
            ValueError: If bet is not one of the allowed options
        """
        self._require(GamePhase.AWAITING_BET)
        if bet not in self.bet_options:
            raise ValueError(f"Bet must be one of {self.bet_options}, got {bet}")
        self.state.bet = bet
        self.state.phase = GamePhase.ROUND_START
        logger.info(f"Session started with {self.state.credits} credits, betting {bet}")

    @property
    def can_afford_round(self) -> bool:
        return self.state.bet is not None and self.state.credits >= self.state.bet

    def start_round(self) -> bool:
        """
        Take the wager for a new hand.

        Returns:
            True if the round started, False if credits ran out (the
            session is then over)
        """
        self._require(GamePhase.ROUND_START)
        if not self.can_afford_round:
            logger.info(f"Only {self.state.credits} credits left for a bet of {self.state.bet}")
            self.state.phase = GamePhase.GAME_OVER
            return False

        self.state.credits -= self.state.bet
        self.state.rounds_played += 1
        self.state.current_hand = None
        self.state.held_positions = set()
        self.state.last_result = None
        self.state.win_amount = 0
        self.gamble = None
        self.state.phase = GamePhase.DEALT
        logger.debug(f"Round {self.state.rounds_played}: wagered {self.state.bet}, "
                     f"{self.state.credits} credits left")
        return True

    def deal(self) -> Hand:
        """Deal the opening five cards from a freshly shuffled deck."""
        self._require(GamePhase.DEALT)
        self.deck = self._deck_factory()
        self.deck.shuffle()
        hand = Hand(self.deck.deal(HAND_SIZE))
        self.state.current_hand = hand
        self.state.phase = GamePhase.HOLD_SELECTION
        logger.debug(f"Dealt {hand}")
        return hand

    def hold(self, positions: Iterable[int]) -> None:
        """
        Choose which positions survive the redraw.

        Raises:
            ValueError: If any position is outside 0-4
        """
        self._require(GamePhase.HOLD_SELECTION)
        held = set(positions)
        invalid = [p for p in held if not 0 <= p < HAND_SIZE]
        if invalid:
            raise ValueError(f"Hold positions out of range: {sorted(invalid)}")
        self.state.held_positions = held
        logger.debug(f"Holding positions {sorted(held)}")

    def draw(self) -> EvaluationResult:
        """
        Replace every card that is not held and score the final hand.

        Returns:
            Evaluation of the final hand
        """
        self._require(GamePhase.HOLD_SELECTION)
        hand = self.state.current_hand
        for position in range(HAND_SIZE):
            if position not in self.state.held_positions:
                hand.replace(position, self.deck.deal(1)[0])

        result = evaluate_hand(hand)
        self.state.last_result = result
        self.state.win_amount = self.state.bet * result.multiplier
        self.state.phase = GamePhase.FINAL_HAND
        logger.debug(f"Final {hand}: {result.category}, win {self.state.win_amount}")
        return result

    def start_gamble(self) -> GambleRound:
        """Put the current win up for double-or-nothing."""
        self._require(GamePhase.FINAL_HAND)
        if self.state.win_amount <= 0:
            raise InvalidTransition("Nothing to gamble without a win")
        self.gamble = GambleRound(self.state.win_amount, rng=self._rng)
        self.state.phase = GamePhase.GAMBLE
        logger.debug(f"Gambling {self.state.win_amount}")
        return self.gamble

    def gamble_guess(self, color: str) -> bool:
        """
        Guess red or black on the current gamble.

        Returns:
            True if the guess was right (win doubled)
        """
        self._require(GamePhase.GAMBLE)
        won = self.gamble.guess(color)
        self.state.win_amount = self.gamble.amount
        return won

    def payout(self) -> int:
        """
        Credit the win and decide whether another round can be played.

        Returns:
            Amount credited (0 for a losing hand or a lost gamble)
        """
        self._require(GamePhase.FINAL_HAND, GamePhase.GAMBLE)
        if self.gamble is not None:
            self.state.win_amount = self.gamble.collect()

        self.state.phase = GamePhase.PAYOUT
        amount = self.state.win_amount
        self.state.credits += amount
        self.state.biggest_win = max(self.state.biggest_win, amount)
        logger.debug(f"Paid {amount}, credits now {self.state.credits}")

        self.state.phase = GamePhase.ROUND_START if self.can_afford_round else GamePhase.GAME_OVER
        return amount

    def end(self) -> None:
        """
        End the session early.

        A win that was already decided (final hand or gamble in progress) is
        credited first.
        """
        if self.state.phase == GamePhase.GAME_OVER:
            return
        if self.state.phase in (GamePhase.FINAL_HAND, GamePhase.GAMBLE):
            self.payout()
        self.state.phase = GamePhase.GAME_OVER
        logger.info("Session ended early")

    @property
    def is_over(self) -> bool:
        return self.state.phase == GamePhase.GAME_OVER

    def summary(self) -> SessionSummary:
        return SessionSummary(
            rounds_played=self.state.rounds_played,
            final_credits=self.state.credits,
            biggest_win=self.state.biggest_win,
        )

    # ------------------------------------------------------------------
    # Interactive loop
    # ------------------------------------------------------------------

    def _view(self, message: str = "", **kwargs) -> TableView:
        return TableView(credits=self.state.credits, message=message, **kwargs)

    def run(self, io: PlayerIO) -> SessionSummary:
        """
        Play the session to the end.

        Stops when credits no longer cover the bet, or when the player's
        input closes.

        Returns:
            Summary of the finished session
        """
        try:
            if self.state.phase == GamePhase.AWAITING_BET:
                self.choose_bet(io.request_bet_choice(self.bet_options))
            while self.state.phase == GamePhase.ROUND_START:
                self._play_round(io)
        except InputClosed:
            logger.info("Player input closed")
            self.end()

        summary = self.summary()
        logger.info(f"Session over after {summary.rounds_played} rounds "
                    f"with {summary.final_credits} credits")
        return summary

    def _play_round(self, io: PlayerIO) -> None:
        if not self.can_afford_round:
            self.start_round()
            return

        io.render(self._view(f"Bet: {self.state.bet} credits per hand"))
        io.request_continue("Press Enter to deal a hand...")

        self.start_round()
        hand = self.deal()

        io.render(self._view(HOLD_INSTRUCTIONS, hand=hand.get_cards(), show_position_labels=True))
        held = io.request_hold_selection(HAND_SIZE)
        self.hold(held)
        if not held:
            io.request_continue(f"{NO_HOLDS_MESSAGE} Press Enter to continue drawing new cards.")

        result = self.draw()
        category = result.category if result.is_win else None
        message = (f"Final Hand: {result.category}!" if result.is_win
                   else "Final Hand: No winning combination.")
        io.render(self._view(
            message,
            hand=hand.get_cards(),
            highlight_category=category,
            win_amount=self.state.win_amount,
            highlighted_positions=result.winning_positions,
        ))
        io.request_continue("Press Enter to continue...")

        if self.state.win_amount > 0 and io.request_yes_no(
            f"You won {self.state.win_amount} credits! Do you want to gamble your win to double it?"
        ):
            self._play_gamble(io, category)

        self.payout()
        if self.is_over:
            io.render(self._view(GAME_OVER_MESSAGE, hand=hand.get_cards()))

    def _play_gamble(self, io: PlayerIO, category: Optional[HandCategory]) -> None:
        self.start_gamble()
        hand = self.state.current_hand.get_cards()
        while self.gamble.can_guess:
            guess = io.request_choice("Gamble: Guess the card color:", COLORS)
            if self.gamble_guess(guess):
                io.render(self._view(
                    f"Gamble successful! The card was {self.gamble.last_outcome}. "
                    f"Your win is now {self.state.win_amount} credits.",
                    hand=hand,
                    highlight_category=category,
                    win_amount=self.state.win_amount,
                ))
                if not io.request_yes_no(
                    f"Do you want to gamble your win of {self.state.win_amount} credits again?"
                ):
                    break
            else:
                io.render(self._view(
                    f"Gamble failed! The card was {self.gamble.last_outcome}. "
                    "You lose your win for this hand.",
                    hand=hand,
                ))
                io.request_continue("Press Enter to continue...")
