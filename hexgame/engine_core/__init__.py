"""
Engine Core - Board model, win detection and the turn state machine.

The engine is the runtime that:
1. Stores the hexagonal grid (Board)
2. Detects connections between a token's edges (ConnectivityChecker)
3. Runs turns, swaps and history for one session (HexGame)
4. Reports recoverable failures as values (MoveResult)
"""

from .geometry import Position, Direction, neighbors
from .result import ErrorCode, MoveResult
from .board import Board, Cell
from .connectivity import ConnectivityChecker
from .game import GamePhase, HexGame, Move, Player

__all__ = [
    "Position",
    "Direction",
    "neighbors",
    "ErrorCode",
    "MoveResult",
    "Board",
    "Cell",
    "ConnectivityChecker",
    "GamePhase",
    "HexGame",
    "Move",
    "Player",
]
