"""
Commands - The text command surface over a GameManager.

Each command receives already-tokenized arguments and returns a
CommandOutcome instead of printing:
- output: lines for standard output
- errors: lines for standard error
- quit: whether the input loop should stop

Commands:
    place <x> <y>        Place the current player's token
    swap                 Apply the pie rule
    new-game <name>      Create and activate a session
    switch-game <name>   Activate another session
    history [count]      Recent moves, newest first
    list-games           Sessions still in progress
    print                Render the active board
    help                 List commands
    quit                 Stop the input loop
"""

from __future__ import annotations
from dataclasses import dataclass, field
import re
from typing import Callable

from ..engine_core.game import HexGame
from ..engine_core.result import ErrorCode
from .manager import GameManager, SwitchOutcome


ERROR_PREFIX = "Error: "
INVALID_ARGUMENTS_ERROR = "Given arguments are invalid."
EXPECTED_INNER_ARGUMENTS_ERROR = "Invalid number of arguments."
COMMAND_NOT_FOUND_ERROR = "Command '{name}' not found"
QUIT_WITH_ARGUMENTS_ERROR = "quit does not allow args."
INVALID_GAME_NAME_ERROR = "Game name is invalid"
SWITCH_TO_CURRENT_ERROR = "Switch to current game not allowed."

GAME_NAME_PATTERN = re.compile(r"\S+")
DEFAULT_HISTORY_COUNT = 1

HELP_LINES = [
    "* help: Prints this help message",
    "* history: Shows the move history of the current game",
    "* list-games: Lists all active games being managed",
    "* new-game: Starts a new game with the given name",
    "* place: Places the current player's token on the board at the specified (x, y) coordinates",
    "* print: Displays the current state of the game board",
    "* quit: Quit all games and end program",
    "* swap: Swaps the players",
    "* switch-game: Switches to another game session with the provided name",
]


@dataclass
class CommandOutcome:
    """Result of executing one command."""
    success: bool = True
    output: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    error_code: ErrorCode | None = None
    quit: bool = False

    @classmethod
    def failure(cls, message: str, error_code: ErrorCode | None = None) -> CommandOutcome:
        return cls(success=False, errors=[ERROR_PREFIX + message], error_code=error_code)

    def print_board(self, game: HexGame):
        self.output.extend(game.board.render().splitlines())

    def print_turn(self, game: HexGame):
        self.output.append(f"{game.current_player.name}'s turn")


@dataclass(frozen=True)
class CommandSpec:
    """A registered command and its accepted argument counts."""
    name: str
    handler: Callable[[list[str]], CommandOutcome]
    min_args: int
    max_args: int


class CommandHandler:
    """
    Dispatches command lines to handlers.

    Usage:
        handler = CommandHandler(manager)
        outcome = handler.execute("place 2 3")
        print("\\n".join(outcome.output))
    """

    def __init__(self, manager: GameManager):
        self.manager = manager
        self.commands: dict[str, CommandSpec] = {}
        self._init_commands()

    def _init_commands(self):
        self._add("place", self._handle_place, 2, 2)
        self._add("history", self._handle_history, 0, 1)
        self._add("swap", self._handle_swap, 0, 0)
        self._add("print", self._handle_print, 0, 0)
        self._add("list-games", self._handle_list_games, 0, 0)
        self._add("new-game", self._handle_new_game, 1, 1)
        self._add("switch-game", self._handle_switch_game, 1, 1)
        self._add("help", self._handle_help, 0, 0)
        self._add("quit", self._handle_quit, 0, 0)

    def _add(self, name: str, handler: Callable[[list[str]], CommandOutcome], min_args: int, max_args: int):
        self.commands[name] = CommandSpec(name, handler, min_args, max_args)

    def execute(self, line: str) -> CommandOutcome:
        """Tokenize a command line and run it."""
        tokens = line.split()
        if not tokens:
            return CommandOutcome()
        return self.dispatch(tokens[0], tokens[1:])

    def dispatch(self, name: str, arguments: list[str]) -> CommandOutcome:
        """Run a command with already-tokenized arguments."""
        spec = self.commands.get(name)
        if spec is None:
            return CommandOutcome.failure(
                COMMAND_NOT_FOUND_ERROR.format(name=name), ErrorCode.COMMAND_NOT_FOUND
            )
        if name == "quit" and arguments:
            return CommandOutcome.failure(QUIT_WITH_ARGUMENTS_ERROR, ErrorCode.INVALID_ARGUMENTS)
        if not spec.min_args <= len(arguments) <= spec.max_args:
            return CommandOutcome.failure(EXPECTED_INNER_ARGUMENTS_ERROR, ErrorCode.INVALID_ARGUMENTS)
        return spec.handler(arguments)

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _handle_place(self, arguments: list[str]) -> CommandOutcome:
        x = _parse_int(arguments[0])
        y = _parse_int(arguments[1])
        if x is None or y is None:
            return CommandOutcome.failure(INVALID_ARGUMENTS_ERROR, ErrorCode.INVALID_ARGUMENTS)

        game = self.manager.current_game
        mover = game.current_player
        result = game.place_token(x, y)
        if not result.success:
            return CommandOutcome.failure(result.error, result.error_code)

        outcome = CommandOutcome()
        if not mover.is_human:
            outcome.output.append(f"{mover.name} places at {x} {y}")

        winner = game.winner
        if winner is not None:
            outcome.output.append(f"{winner.name} wins!")
            outcome.output.extend(game.board.win_path_representation(winner.token).splitlines())
            return outcome

        if self.manager.auto_print:
            outcome.print_board(game)
        outcome.print_turn(game)
        return outcome

    def _handle_swap(self, arguments: list[str]) -> CommandOutcome:
        game = self.manager.current_game
        swapper = game.current_player
        result = game.swap_tokens()
        if not result.success:
            return CommandOutcome.failure(result.error, result.error_code)

        outcome = CommandOutcome(output=[f"{swapper.name} swaps"])
        if self.manager.auto_print:
            outcome.print_board(game)
        outcome.print_turn(game)
        return outcome

    def _handle_new_game(self, arguments: list[str]) -> CommandOutcome:
        name = arguments[0]
        if not GAME_NAME_PATTERN.fullmatch(name):
            return CommandOutcome.failure(INVALID_GAME_NAME_ERROR, ErrorCode.INVALID_ARGUMENTS)

        result = self.manager.add_new_game(name)
        if not result.success:
            return CommandOutcome.failure(result.error, result.error_code)

        game = self.manager.current_game
        outcome = CommandOutcome(output=[f"Welcome to {name}"])
        if self.manager.auto_print:
            outcome.print_board(game)
        outcome.print_turn(game)
        return outcome

    def _handle_switch_game(self, arguments: list[str]) -> CommandOutcome:
        name = arguments[0]
        result = self.manager.switch_game(name)
        if not result.success:
            return CommandOutcome.failure(result.error, result.error_code)
        if result.value is SwitchOutcome.NO_OP:
            return CommandOutcome.failure(SWITCH_TO_CURRENT_ERROR)
        return CommandOutcome(output=[f"Switched to {name}"])

    def _handle_history(self, arguments: list[str]) -> CommandOutcome:
        count = DEFAULT_HISTORY_COUNT
        if arguments:
            count = _parse_int(arguments[0])
            if count is None or count < 1:
                return CommandOutcome.failure(INVALID_ARGUMENTS_ERROR, ErrorCode.INVALID_ARGUMENTS)

        result = self.manager.current_game.retrieve_recent_moves(count)
        if not result.success:
            return CommandOutcome.failure(result.error, result.error_code)

        return CommandOutcome(output=[
            f"{move.player.name}: {move.position.x} {move.position.y}"
            for move in result.value
        ])

    def _handle_list_games(self, arguments: list[str]) -> CommandOutcome:
        # An empty listing still prints one blank line
        return CommandOutcome(output=self.manager.format_game_list().split("\n"))

    def _handle_print(self, arguments: list[str]) -> CommandOutcome:
        outcome = CommandOutcome()
        outcome.print_board(self.manager.current_game)
        return outcome

    def _handle_help(self, arguments: list[str]) -> CommandOutcome:
        return CommandOutcome(output=list(HELP_LINES))

    def _handle_quit(self, arguments: list[str]) -> CommandOutcome:
        return CommandOutcome(quit=True)


def _parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None
