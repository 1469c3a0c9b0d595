"""
Session Module - Manages named game sessions and the command surface.

A session is one independently tracked HexGame:
- Created eagerly ("Prime") or by new-game
- Activated by switch-game
- Never destroyed; a won session only leaves the active listing

Sessions are in-memory only and live for the duration of the process.
"""

from .manager import GameManager, SwitchOutcome, DEFAULT_GAME_NAME
from .commands import CommandHandler, CommandOutcome
from .game_loop import GameLoop, LoopState

__all__ = [
    "GameManager",
    "SwitchOutcome",
    "DEFAULT_GAME_NAME",
    "CommandHandler",
    "CommandOutcome",
    "GameLoop",
    "LoopState",
]
