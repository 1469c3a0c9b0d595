"""
Hex Game - Turn-based state machine for a single session.

A HexGame composes one Board and exactly two Players. It owns:
- The current turn index (first player moves first)
- The append-only move history
- The one-shot pie-rule swap flag
- The winner (set at most once, never cleared)

Coordinates passed to place_token are command coordinates: x is the
position within a printed line, y is the line. The board stores them
transposed (see Board), so the game converts on the way in.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import TYPE_CHECKING

from .board import Board, Cell
from .geometry import Position
from .result import (
    ErrorCode,
    MoveResult,
    GAME_ALREADY_WON_ERROR,
    HISTORY_EXCEEDED_ERROR,
    SWAP_NOT_ALLOWED_ERROR,
)

if TYPE_CHECKING:
    from ..bots.policy import BotPolicy


logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """High-level game phases."""
    IN_PROGRESS = "in_progress"
    WON = "won"


@dataclass(eq=False)
class Player:
    """
    A contestant in a game.

    Players compare by identity: each session holds its own copies, so a
    token swap in one session never leaks into another.

    The policy is the player's decision capability. Humans have none;
    scripted opponents carry the BotPolicy that computes their commands.
    """
    name: str
    token: Cell
    policy: BotPolicy | None = None

    @property
    def is_human(self) -> bool:
        return self.policy is None

    def switch_token(self):
        """Take the other token."""
        self.token = self.token.opposite()

    def copy(self) -> Player:
        return Player(name=self.name, token=self.token, policy=self.policy)

    def __str__(self) -> str:
        return self.token.symbol


@dataclass(frozen=True)
class Move:
    """A recorded placement, in command coordinates."""
    player: Player
    position: Position


class HexGame:
    """
    One independently tracked game of Hex.

    Usage:
        game = HexGame("Prime", 5, [alice, bob])
        result = game.place_token(0, 0)
        if game.winner:
            ...
    """

    def __init__(self, name: str, size: int, players: list[Player]):
        if len(players) != 2:
            raise ValueError("A game of Hex needs exactly two players")
        if players[0].token is players[1].token:
            raise ValueError("Players must hold distinct tokens")

        self.name = name
        self.board = Board(size)
        self.players = players
        self.current_player_idx = 0

        self._move_history: list[Move] = []
        self._has_swapped = False
        self._winner: Player | None = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return GamePhase.WON if self._winner is not None else GamePhase.IN_PROGRESS

    @property
    def winner(self) -> Player | None:
        return self._winner

    @property
    def has_swapped(self) -> bool:
        return self._has_swapped

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_idx]

    @property
    def opponent(self) -> Player:
        return self.players[1 - self.current_player_idx]

    @property
    def move_history(self) -> tuple[Move, ...]:
        return tuple(self._move_history)

    @property
    def move_count(self) -> int:
        return len(self._move_history)

    def is_active(self) -> bool:
        """Check the game still accepts moves."""
        return self.phase == GamePhase.IN_PROGRESS

    def _advance_turn(self):
        self.current_player_idx = (self.current_player_idx + 1) % len(self.players)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def place_token(self, x: int, y: int) -> MoveResult:
        """
        Place the current player's token at command coordinates (x, y).

        On a win the turn does not advance; the winner keeps the move.
        """
        if self._winner is not None:
            return MoveResult.failure(
                ErrorCode.GAME_ALREADY_WON,
                GAME_ALREADY_WON_ERROR.format(name=self._winner.name),
            )

        player = self.current_player
        result = self.board.place(y, x, player.token)
        if not result.success:
            return result

        move = Move(player=player, position=Position(x, y))
        self._move_history.append(move)

        if self.board.has_won(player.token):
            self._winner = player
            logger.debug("Game %s won by %s after %d moves", self.name, player.name, self.move_count)
        else:
            self._advance_turn()

        return MoveResult.ok(move)

    def can_swap(self) -> bool:
        """Swap is allowed after exactly one move, once per game."""
        return len(self._move_history) == 1 and not self._has_swapped

    def swap_tokens(self) -> MoveResult:
        """
        Apply the pie rule.

        Both players exchange tokens, the opening move is credited to the
        player who did not make it, and the turn passes on.
        """
        if not self.can_swap() or self._winner is not None:
            return MoveResult.failure(ErrorCode.SWAP_NOT_ALLOWED, SWAP_NOT_ALLOWED_ERROR)

        self._has_swapped = True
        for player in self.players:
            player.switch_token()

        opening = self._move_history[0]
        other = next(p for p in self.players if p is not opening.player)
        self._move_history[0] = Move(player=other, position=opening.position)
        self._advance_turn()

        return MoveResult.ok(self._move_history[0])

    def retrieve_recent_moves(self, count: int) -> MoveResult:
        """The last count moves, newest first."""
        if count < 1:
            return MoveResult.failure(ErrorCode.INVALID_ARGUMENTS, "Given arguments are invalid.")
        if count > len(self._move_history):
            return MoveResult.failure(ErrorCode.HISTORY_EXCEEDED, HISTORY_EXCEEDED_ERROR)

        recent = self._move_history[-count:]
        return MoveResult.ok(list(reversed(recent)))
