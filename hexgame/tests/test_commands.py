"""
Tests for the command surface and the game loop.
"""

import io

import pytest

from ..config import GameConfig
from ..engine_core.result import ErrorCode
from ..session.commands import HELP_LINES, CommandHandler
from ..session.game_loop import GameLoop, LoopState
from ..session.manager import GameManager


WIN_LINES = [
    "place 0 0", "place 4 4",
    "place 0 1", "place 4 3",
    "place 0 2", "place 4 2",
    "place 0 3", "place 4 1",
    "place 0 4",
]


@pytest.fixture
def handler(manager):
    return CommandHandler(manager)


def run_loop(manager, lines):
    out, err = io.StringIO(), io.StringIO()
    loop = GameLoop(manager, out=out, err=err)
    loop.run(lines)
    return out.getvalue().splitlines(), err.getvalue().splitlines(), loop


class TestDispatch:
    """Tests for parsing and argument checks."""

    def test_unknown_command(self, handler):
        """Unknown commands are reported by name."""
        outcome = handler.execute("jump 1 2")

        assert not outcome.success
        assert outcome.errors == ["Error: Command 'jump' not found"]
        assert outcome.error_code == ErrorCode.COMMAND_NOT_FOUND

    def test_blank_line(self, handler):
        """Blank lines do nothing."""
        outcome = handler.execute("   ")

        assert outcome.success
        assert outcome.output == []
        assert outcome.errors == []

    @pytest.mark.parametrize("line", ["place 1", "place 1 2 3", "swap now", "new-game", "print board"])
    def test_wrong_argument_count(self, handler, line):
        """Argument counts are checked before running a command."""
        outcome = handler.execute(line)

        assert outcome.errors == ["Error: Invalid number of arguments."]

    def test_quit_with_arguments(self, handler):
        """quit takes no arguments."""
        outcome = handler.execute("quit now")

        assert outcome.errors == ["Error: quit does not allow args."]
        assert not outcome.quit

    def test_quit(self, handler):
        assert handler.execute("quit").quit

    def test_help(self, handler):
        """Help lists every command."""
        outcome = handler.execute("help")

        assert outcome.output == HELP_LINES
        assert len(outcome.output) == 9


class TestPlaceCommand:
    """Tests for place."""

    def test_place_prints_turn(self, handler):
        """A placement hands the turn over."""
        outcome = handler.execute("place 2 2")

        assert outcome.output == ["Bob's turn"]

    @pytest.mark.parametrize("line", ["place a 1", "place 1 1.5"])
    def test_non_integer(self, handler, line):
        """Coordinates must be integers."""
        outcome = handler.execute(line)

        assert outcome.errors == ["Error: Given arguments are invalid."]

    def test_out_of_bounds(self, handler):
        outcome = handler.execute("place 5 5")

        assert outcome.errors == ["Error: The given location lies outside of the boundaries"]

    def test_occupied(self, handler):
        handler.execute("place 2 2")

        outcome = handler.execute("place 2 2")

        assert outcome.errors == ["Error: Tile already placed."]

    def test_auto_print(self):
        """With auto-print the board is printed after each move."""
        manager = GameManager(
            GameConfig(size=5, first_player="Alice", second_player="Bob", auto_print=True)
        )
        outcome = CommandHandler(manager).execute("place 1 0")

        assert outcome.output[0] == ". X . . ."
        assert len(outcome.output) == 6
        assert outcome.output[-1] == "Bob's turn"

    def test_win_prints_path(self, handler):
        """The winner is announced with the winning chain marked."""
        outcomes = [handler.execute(line) for line in WIN_LINES]

        assert outcomes[-1].output == [
            "Alice wins!",
            "* . . . .",
            " * . . . O",
            "  * . . . O",
            "   * . . . O",
            "    * . . . O",
        ]

    def test_place_after_win(self, handler):
        for line in WIN_LINES:
            handler.execute(line)

        outcome = handler.execute("place 3 3")

        assert outcome.errors == [
            "Error: The game has already been won by Alice. No further moves allowed."
        ]


class TestSessionCommands:
    """Tests for swap, history and session commands."""

    def test_swap(self, handler):
        handler.execute("place 2 2")

        outcome = handler.execute("swap")

        assert outcome.output == ["Bob swaps", "Alice's turn"]

    def test_swap_not_allowed(self, handler):
        outcome = handler.execute("swap")

        assert outcome.errors == ["Error: Swap not allowed."]

    def test_history(self, handler):
        """History lists the newest moves first, one per line."""
        for line in ["place 0 0", "place 1 2", "place 3 4"]:
            handler.execute(line)

        assert handler.execute("history").output == ["Alice: 3 4"]
        assert handler.execute("history 2").output == ["Alice: 3 4", "Bob: 1 2"]

    @pytest.mark.parametrize("count", ["0", "-2", "x"])
    def test_history_invalid_count(self, handler, count):
        handler.execute("place 0 0")

        outcome = handler.execute(f"history {count}")

        assert outcome.errors == ["Error: Given arguments are invalid."]

    def test_history_exceeded(self, handler):
        outcome = handler.execute("history")

        assert outcome.errors == [
            "Error: The requested number of recent moves exceeds the available history."
        ]

    def test_new_game(self, handler):
        outcome = handler.execute("new-game second")

        assert outcome.output == ["Welcome to second", "Alice's turn"]
        assert handler.execute("list-games").output == ["Prime: 0", "second: 0"]

    def test_list_games_without_active_session(self, handler):
        """With every session won, the listing is a single blank line."""
        for line in WIN_LINES:
            handler.execute(line)

        assert handler.execute("list-games").output == [""]

    def test_new_game_duplicate(self, handler):
        outcome = handler.execute("new-game Prime")

        assert outcome.errors == ["Error: A game with the name Prime already exists."]

    def test_switch_game(self, handler):
        handler.execute("new-game second")

        outcome = handler.execute("switch-game Prime")

        assert outcome.output == ["Switched to Prime"]

    def test_switch_to_current(self, handler):
        outcome = handler.execute("switch-game Prime")

        assert outcome.errors == ["Error: Switch to current game not allowed."]

    def test_switch_to_unknown(self, handler):
        outcome = handler.execute("switch-game nowhere")

        assert outcome.errors == ["Error: No game session found with the name nowhere."]

    def test_print(self, handler):
        handler.execute("place 0 1")

        outcome = handler.execute("print")

        assert outcome.output[1] == " X . . . ."


class TestGameLoop:
    """Tests for the input loop."""

    def test_greets_and_quits(self, manager):
        out, err, loop = run_loop(manager, ["place 0 0", "history", "quit", "place 1 1"])

        assert out == ["Welcome to Prime", "Alice's turn", "Bob's turn", "Alice: 0 0"]
        assert err == []
        assert loop.state == LoopState.STOPPED
        assert manager.current_game.move_count == 1

    def test_stops_at_end_of_input(self, manager):
        out, _, _ = run_loop(manager, ["place 0 0"])

        assert out[-1] == "Bob's turn"

    def test_errors_go_to_error_stream(self, manager):
        out, err, _ = run_loop(manager, ["swap", "quit"])

        assert err == ["Error: Swap not allowed."]
        assert out == ["Welcome to Prime", "Alice's turn"]

    def test_bogo_swaps_even_opening(self, bogo_manager):
        """The bot answers without waiting for input."""
        out, _, _ = run_loop(bogo_manager, ["place 0 0", "quit"])

        assert out == [
            "Welcome to Prime",
            "Alice's turn",
            "BogoAI's turn",
            "BogoAI swaps",
            "Alice's turn",
        ]

    def test_hero_opening(self, hero_manager):
        out, _, _ = run_loop(hero_manager, ["place 2 2", "quit"])

        assert out[-2:] == ["HeroAI places at 0 0", "Alice's turn"]

    def test_bot_finishes_game(self, bogo_manager):
        """The bot plays its winning move, then the loop waits for input."""
        game = bogo_manager.current_game
        for x, y in [(0, 4), (0, 2), (1, 4), (1, 2), (2, 4), (2, 2), (3, 4), (3, 2), (4, 4)]:
            game.place_token(x, y)

        out, _, _ = run_loop(bogo_manager, ["quit"])

        assert "BogoAI wins!" in out
        assert game.winner is game.players[1]
