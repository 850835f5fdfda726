"""Console front end for the video poker game."""
import logging
import sys
from contextlib import contextmanager
from typing import Optional, Sequence, Set

import click
from rich.console import Console
from rich.text import Text

from video_poker.config import config as configs, get_config
from video_poker.core.hand import HAND_SIZE
from video_poker.errors import InputClosed
from video_poker.game.game import VideoPokerGame
from video_poker.game.game_state import SessionSummary
from video_poker.game.holds import parse_hold_selection
from video_poker.game.player_io import PlayerIO, TableView

from .display import RenderConfig, WELCOME_BANNER, render_table

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Set up logging for the game.

    Logs go to a file when one is given, otherwise to stderr, so they never
    mix with the table drawn on stdout.
    """
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler],
        force=True  # Force reconfiguration of logging
    )
    logging.getLogger('video_poker').setLevel(level)


@contextmanager
def _prompting():
    """Turn an aborted prompt (EOF or Ctrl-C) into InputClosed."""
    try:
        yield
    except click.Abort:
        raise InputClosed("Player input closed")


class ConsoleIO(PlayerIO):
    """PlayerIO drawing with rich and prompting with click."""

    def __init__(
        self,
        console: Optional[Console] = None,
        render_config: Optional[RenderConfig] = None,
        default_bet: Optional[int] = None,
    ):
        self.console = console or Console()
        self.render_config = render_config or RenderConfig()
        self.default_bet = default_bet

    def request_bet_choice(self, options: Sequence[int]) -> int:
        default = self.default_bet if self.default_bet in options else options[0]
        with _prompting():
            choice = click.prompt(
                "Select your bet",
                type=click.Choice([str(o) for o in options]),
                default=str(default),
            )
        return int(choice)

    def request_continue(self, message: str = "Press Enter to continue...") -> None:
        with _prompting():
            click.prompt(message, default="", show_default=False, prompt_suffix=" ")

    def request_hold_selection(self, hand_size: int = HAND_SIZE) -> Set[int]:
        with _prompting():
            text = click.prompt("Enter card numbers to hold", default="", show_default=False)
        return set(parse_hold_selection(text, hand_size))

    def request_yes_no(self, prompt: str) -> bool:
        with _prompting():
            return click.confirm(prompt, default=False)

    def request_choice(self, prompt: str, options: Sequence[str]) -> str:
        with _prompting():
            choice = click.prompt(prompt, type=click.Choice(list(options), case_sensitive=False))
        return choice.lower()

    def render(self, view: TableView) -> None:
        render_table(self.console, view, self.render_config)


def print_summary(console: Console, summary: SessionSummary, bet: Optional[int]) -> None:
    """Closing lines shown after the session ends."""
    if bet is not None and summary.final_credits < bet:
        console.print(Text("*** YOU LOSE! ***", style="bold"))
    console.print(
        f"Rounds played: {summary.rounds_played} | "
        f"Final credits: {summary.final_credits} | "
        f"Biggest win: {summary.biggest_win}",
        markup=False,
    )
    console.print("Game Over. Thanks for playing!")


@click.command()
@click.option('--config', 'config_name', default='default', type=click.Choice(sorted(configs)),
              help='Configuration to use')
@click.option('--credits', type=click.IntRange(min=0), default=None, help='Starting credits')
@click.option('--bet', type=int, default=None, help='Bet per hand (skips the bet prompt)')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help='Logging level')
@click.option('--log-file', type=click.Path(dir_okay=False), default=None,
              help='Write logs to this file instead of stderr')
def main(config_name, credits, bet, log_level, log_file):
    """Play Jacks or Better video poker in the terminal."""
    try:
        settings = get_config(config_name)
    except ValueError as e:
        raise click.UsageError(str(e))

    if bet is not None and bet not in settings.BET_OPTIONS:
        raise click.BadParameter(f"must be one of {list(settings.BET_OPTIONS)}", param_hint="--bet")

    setup_logging((log_level or settings.LOG_LEVEL).upper(), log_file or settings.LOG_FILE)

    game = VideoPokerGame(
        credits=settings.STARTING_CREDITS if credits is None else credits,
        bet_options=settings.BET_OPTIONS,
    )
    io = ConsoleIO(default_bet=settings.DEFAULT_BET)

    io.console.print(Text(WELCOME_BANNER))
    io.console.print("Welcome to POKER CLI!")
    if bet is not None:
        game.choose_bet(bet)

    summary = game.run(io)
    print_summary(io.console, summary, game.state.bet)
