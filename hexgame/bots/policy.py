"""
Bot Policy - Interface for scripted opponents.

A BotPolicy looks at the active session of a GameManager and returns the
next command, exactly as a human would type it:
- "place <x> <y>" to put a token on the board
- "swap" to take over the opening move (pie rule)

Policies are read-only consumers of game state. Every speculative search
runs on a board snapshot; the live game only changes when the returned
command is executed.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..engine_core.board import Board
from ..engine_core.geometry import Position

if TYPE_CHECKING:
    from ..engine_core.game import HexGame, Player
    from ..session.manager import GameManager


PLACE_COMMAND = "place"
SWAP_COMMAND = "swap"


class DecisionRule(Enum):
    """Which step of a policy's priority ladder produced the command."""
    WIN = "win"
    BLOCK = "block"
    SWAP = "swap"
    MIRROR = "mirror"
    OPENING = "opening"
    PATH = "path"
    FALLBACK = "fallback"


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    Contains:
    - The command to execute
    - The rule that produced it
    - Explanation (for logging/debugging)
    """
    command: str
    rule: DecisionRule
    explanation: str = ""
    details: dict[str, Any] = field(default_factory=dict)


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    A policy holds a back-reference to the manager it plays in and reads
    the active session whenever it is asked for a move.
    """

    NAME = "Bot"

    def __init__(self, manager: GameManager):
        self.manager = manager

    @abstractmethod
    def select_command(self) -> BotDecision:
        """
        Compute the next command for the current player of the active game.

        Returns:
            BotDecision with a command that is legal in the current state
        """
        pass

    def _decide(self, rule: DecisionRule, command: str, explanation: str) -> BotDecision:
        return BotDecision(command=command, rule=rule, explanation=explanation)


# -----------------------------------------------------------------------------
# Shared strategy helpers
# -----------------------------------------------------------------------------

def convert_move_to_command(position: Position) -> str:
    """Board position to a place command (command order is y, then x)."""
    return f"{PLACE_COMMAND} {position.y} {position.x}"


def determine_winning_move(board: Board, player: Player) -> Position | None:
    """Cell that wins the game for player right now, if any."""
    return board.winning_location(player.token)


def determine_blocking_move(board: Board, game: HexGame) -> Position | None:
    """Cell that would let the opponent win next turn, if any."""
    return board.winning_location(game.opponent.token)


def first_empty_cell(board: Board) -> Position:
    """First empty cell, line by line."""
    empty = board.empty_positions()
    if not empty:
        raise ValueError("No empty cell available")
    return empty[0]
