"""
Results - Outcome values for engine operations.

Recoverable failures (occupied cell, unknown session, ...) are returned,
not raised. Every engine operation that can fail for user input reports:
- Whether it succeeded
- The produced value (if succeeded)
- An error message and structured error code (if failed)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Structured error codes."""
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    OCCUPIED = "OCCUPIED"
    GAME_ALREADY_WON = "GAME_ALREADY_WON"
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    GAME_ALREADY_EXISTS = "GAME_ALREADY_EXISTS"
    HISTORY_EXCEEDED = "HISTORY_EXCEEDED"
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
    SWAP_NOT_ALLOWED = "SWAP_NOT_ALLOWED"
    COMMAND_NOT_FOUND = "COMMAND_NOT_FOUND"


# Messages shown to the player for each failure
OUT_OF_BOUNDS_ERROR = "The given location lies outside of the boundaries"
OCCUPIED_ERROR = "Tile already placed."
GAME_ALREADY_WON_ERROR = "The game has already been won by {name}. No further moves allowed."
GAME_NOT_FOUND_ERROR = "No game session found with the name {name}."
GAME_ALREADY_EXISTS_ERROR = "A game with the name {name} already exists."
HISTORY_EXCEEDED_ERROR = "The requested number of recent moves exceeds the available history."
SWAP_NOT_ALLOWED_ERROR = "Swap not allowed."


@dataclass
class MoveResult:
    """
    Result of an engine operation.

    Usage:
        result = game.place_token(2, 3)
        if not result.success:
            report(result.error)
    """
    success: bool
    value: Any | None = None
    error: str | None = None
    error_code: ErrorCode | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, value: Any | None = None) -> MoveResult:
        """Create a success result."""
        return cls(success=True, value=value)

    @classmethod
    def failure(cls, error_code: ErrorCode, error: str) -> MoveResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)
