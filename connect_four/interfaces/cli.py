"""
cli.py - Command-line front end for a hot-seat Connect Four game

This module is a presentation layer only: it reads a column from the active
player, hands it to ConnectFourGame.attempt_move(), and prints whatever came
back. The end-of-game notice is printed by a timer shortly after the final
board, so the last piece is on screen before the announcement.
"""

import argparse
import threading
from typing import Callable, Dict, List, Optional, Union

from connect_four.debug import debug, DebugLevel
from connect_four.game.rules import ConnectFourGame, MoveResult, RejectReason
from connect_four.utils import ANNOUNCE_DELAY, GameStatus, Player

QUIT = "quit"
RESTART = "restart"

REJECT_MESSAGES: Dict[RejectReason, str] = {
    RejectReason.INVALID_COLUMN: "Column {column} is not on the board.",
    RejectReason.COLUMN_FULL: "Column {column} is full. Pick another one.",
    RejectReason.GAME_OVER: "The game is over. Press 'r' to play again.",
}


def end_game_message(status: GameStatus) -> str:
    """Text announced when a session reaches a terminal status."""
    if status == GameStatus.TIED:
        return "Game is a tie!"
    return f"Player {status.winner.value} won!"


def describe_move(result: MoveResult) -> str:
    """One-line summary of an attempt_move() result."""
    if not result.accepted:
        return REJECT_MESSAGES[result.reason].format(column=result.column)
    return f"Player {result.player.value} dropped into column {result.column} (row {result.row})."


class EndGameAnnouncer:
    """Deferred, fire-and-forget end-of-game notice."""

    def __init__(self, delay: float = ANNOUNCE_DELAY, output: Callable[[str], None] = print):
        self.delay = delay
        self.output = output
        self._timer: Optional[threading.Timer] = None

    def schedule(self, message: str) -> threading.Timer:
        """Print a message after the configured delay without blocking."""
        self.cancel()
        debug.debug(f"Scheduling announcement in {self.delay}s: {message}", "cli")
        self._timer = threading.Timer(self.delay, self.output, args=(message,))
        self._timer.daemon = True
        self._timer.start()
        return self._timer

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until the pending announcement, if any, has been printed."""
        if self._timer is not None:
            self._timer.join(timeout)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


class SimpleCLI:
    """Simple command-line interface for two players sharing a terminal."""

    def __init__(self, game: ConnectFourGame = None,
                 announcer: EndGameAnnouncer = None,
                 input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        """Initialize the CLI."""
        self.game = game if game is not None else ConnectFourGame()
        self.output = output
        self.announcer = announcer if announcer is not None else EndGameAnnouncer(output=output)
        self.input_func = input_func
        self.args = None

    def parse_args(self, argv: List[str] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four for two players')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level when --debug is not given')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.configure(level=DebugLevel[self.args.debug_level.upper()])
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: List[str] = None) -> Optional[GameStatus]:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)
        return self.play_game()

    def play_game(self) -> Optional[GameStatus]:
        """
        Play one game interactively.

        Returns:
            The final status, or None if the players quit first
        """
        self.output("Starting a new Connect Four game!")
        self.output(f"Enter a column number (0-{self.game.width - 1}) to drop a piece.")
        self.output("Other commands: 'q' to quit, 'r' to restart.")
        self.output(self.game.render())

        while True:
            move = self.get_human_move(self.game.current_player)

            if move is None:
                continue
            if move == QUIT:
                self.output("Quitting game.")
                return None
            if move == RESTART:
                self.game.reset()
                self.output("Game restarted.")
                self.output(self.game.render())
                continue

            result = self.game.attempt_move(move)
            if not result.accepted:
                self.output(describe_move(result))
                continue

            self.output(describe_move(result))
            self.output(self.game.render())

            if result.status.is_game_over():
                self.announcer.schedule(end_game_message(result.status))
                self.announcer.wait()
                return result.status

    def get_human_move(self, player: Player) -> Union[int, str, None]:
        """
        Get a move from the active player.

        Returns:
            Column index, QUIT, RESTART, or None if the input was unusable
        """
        try:
            user_input = self.input_func(f"Player {player.value} ({player}) move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            self.output("Invalid input. Please enter a column number, 'q' or 'r'.")
            return None


def main(argv: List[str] = None):
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.run(argv)


if __name__ == "__main__":
    main()
