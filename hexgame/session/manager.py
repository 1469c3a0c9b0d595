"""
Game Manager - Creates and tracks named game sessions.

LIFECYCLE:
1. Process starts → manager created from a validated GameConfig
2. Default session "Prime" is created eagerly and becomes active
3. During play:
   - new-game creates another session and makes it active
   - switch-game moves the active pointer between sessions
   - Commands always act on the active session
4. A won session drops out of the active listing but stays retrievable
5. Sessions are never destroyed; everything lives for the process run

PLAYER TEMPLATES:
- The manager keeps two template players (first: X, second: O)
- Every session gets fresh copies, so a pie-rule swap in one session
  never changes tokens in another
- A reserved second-player name (BogoAI, HeroAI) attaches a bot policy
"""

from __future__ import annotations
from enum import Enum
import logging

from ..bots import create_policy
from ..config import GameConfig
from ..engine_core.board import Cell
from ..engine_core.game import HexGame, Player
from ..engine_core.geometry import Position
from ..engine_core.result import (
    ErrorCode,
    MoveResult,
    GAME_ALREADY_EXISTS_ERROR,
    GAME_NOT_FOUND_ERROR,
)


logger = logging.getLogger(__name__)

DEFAULT_GAME_NAME = "Prime"


class SwitchOutcome(Enum):
    """Non-error outcomes of switching sessions."""
    SWITCHED = "switched"
    NO_OP = "no_op"  # Target is already the active session


class GameManager:
    """
    Registry of named HexGame sessions.

    Usage:
        manager = GameManager(config)
        manager.current_game.place_token(0, 0)
        manager.add_new_game("rematch")
        manager.switch_game("Prime")
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self._players = self._initialize_players(config)
        self._sessions: dict[str, HexGame] = {}
        self._current_game = self._create_game(DEFAULT_GAME_NAME)

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def auto_print(self) -> bool:
        return self.config.auto_print

    @property
    def players(self) -> tuple[Player, Player]:
        """The player templates every new session is seeded from."""
        return self._players

    @property
    def current_game(self) -> HexGame:
        return self._current_game

    @property
    def current_player(self) -> Player:
        return self._current_game.current_player

    def _initialize_players(self, config: GameConfig) -> tuple[Player, Player]:
        first = Player(name=config.first_player, token=Cell.X)
        second = Player(
            name=config.second_player,
            token=Cell.O,
            policy=create_policy(config.second_player, self),
        )
        return first, second

    def _create_game(self, name: str) -> HexGame:
        players = [player.copy() for player in self._players]
        game = HexGame(name, self.config.size, players)
        self._sessions[name] = game
        logger.debug("Created session %s (size %d)", name, self.config.size)
        return game

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    def add_new_game(self, name: str) -> MoveResult:
        """Create a session and make it active."""
        if name in self._sessions:
            return MoveResult.failure(
                ErrorCode.GAME_ALREADY_EXISTS, GAME_ALREADY_EXISTS_ERROR.format(name=name)
            )
        self._current_game = self._create_game(name)
        return MoveResult.ok(self._current_game)

    def switch_game(self, name: str) -> MoveResult:
        """
        Make another session active.

        The result value is a SwitchOutcome; switching to the session that
        is already active succeeds with NO_OP and changes nothing.
        """
        game = self._sessions.get(name)
        if game is None:
            return MoveResult.failure(
                ErrorCode.GAME_NOT_FOUND, GAME_NOT_FOUND_ERROR.format(name=name)
            )
        if game is self._current_game:
            return MoveResult.ok(SwitchOutcome.NO_OP)

        self._current_game = game
        logger.debug("Switched to session %s", name)
        return MoveResult.ok(SwitchOutcome.SWITCHED)

    def get_game(self, name: str) -> HexGame | None:
        """Any registered session, won or not."""
        return self._sessions.get(name)

    def get_game_list(self) -> list[tuple[str, int]]:
        """(name, move count) of sessions still in progress, oldest first."""
        return [
            (name, game.move_count)
            for name, game in self._sessions.items()
            if game.is_active()
        ]

    def format_game_list(self) -> str:
        return "\n".join(f"{name}: {count}" for name, count in self.get_game_list())

    # -------------------------------------------------------------------------
    # History lookups
    # -------------------------------------------------------------------------

    def get_last_move_for_player(self, player: Player, skip: int = 0) -> Position | None:
        """
        Position of player's skip-th most recent move in the active game.

        skip=0 is the newest move. Returns None when the player has made
        fewer than skip + 1 moves.
        """
        counter = 0
        for move in reversed(self._current_game.move_history):
            if move.player is not player:
                continue
            if counter == skip:
                return move.position
            counter += 1
        return None

    def count_moves_for_player(self, player: Player) -> int:
        """Number of moves in the active game credited to player."""
        return sum(1 for move in self._current_game.move_history if move.player is player)
