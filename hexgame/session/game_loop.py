"""
Game Loop - The turn-by-turn input loop.

The loop:
1. Greets the active session
2. If the current player is a bot and the game is not won,
   asks its policy for the next command
3. Otherwise reads the next line of input
4. Executes the command and writes its output
5. Repeat until quit or end of input

Exactly one actor produces a command at a time; each command runs to
completion before the next one is requested.
"""

from __future__ import annotations
from enum import Enum
import logging
import sys
from typing import Iterable, Iterator, TextIO

from .commands import CommandHandler, CommandOutcome
from .manager import GameManager


logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    WAITING_INPUT = "waiting_input"
    RUNNING_AUTOMA = "running_automa"
    STOPPED = "stopped"


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(manager)
        loop.run(sys.stdin)
    """

    def __init__(
        self,
        manager: GameManager,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self.manager = manager
        self.handler = CommandHandler(manager)
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.state = LoopState.STOPPED

    def greet(self) -> CommandOutcome:
        """Welcome message for the default session."""
        game = self.manager.current_game
        outcome = CommandOutcome(output=[f"Welcome to {game.name}"])
        if self.manager.auto_print:
            outcome.print_board(game)
        outcome.print_turn(game)
        return outcome

    def next_command(self, lines: Iterator[str]) -> str | None:
        """Next command from the current bot, or the next input line."""
        game = self.manager.current_game
        player = game.current_player
        if player.policy is not None and game.is_active():
            self.state = LoopState.RUNNING_AUTOMA
            decision = player.policy.select_command()
            logger.debug("%s: %s", player.name, decision.explanation)
            return decision.command

        self.state = LoopState.WAITING_INPUT
        return next(lines, None)

    def run(self, lines: Iterable[str]):
        """Run until quit or until input is exhausted."""
        iterator = iter(lines)
        self.write(self.greet())

        while True:
            line = self.next_command(iterator)
            if line is None:
                break
            outcome = self.handler.execute(line)
            self.write(outcome)
            if outcome.quit:
                break

        self.state = LoopState.STOPPED

    def write(self, outcome: CommandOutcome):
        for line in outcome.output:
            print(line, file=self.out)
        for line in outcome.errors:
            print(line, file=self.err)
