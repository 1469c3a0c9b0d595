"""
Game Configuration - Validated startup settings.

A GameConfig is built once per process and handed to the GameManager.
It is immutable: every session created by the manager shares it.

Validates that:
1. The board size is odd and within [MIN_SIZE, MAX_SIZE]
2. Player names are non-empty and free of forbidden characters
3. Player names are distinct
4. Only the second player may use a reserved AI name
"""

from __future__ import annotations
import re
from typing import Any, Sequence

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from .bots import AI_NAMES


MIN_SIZE = 5
MAX_SIZE = 12345
AUTO_PRINT = "auto-print"

NAME_PATTERN = re.compile(r"[^;\r\n]*")

INVALID_ARGUMENTS_ERROR = "Invalid arguments provided!"
INVALID_NUMBER_OF_ARGUMENTS_ERROR = (
    "Incorrect number of arguments. Expected between 3 and 4 arguments."
)
NAME_FORMAT_ERROR = "Player names are in an invalid format."
NAME_EMPTY_ERROR = "Player names cannot be empty."
FIRST_PLAYER_AI_ERROR = "The first player's name cannot be the name of an AI."
SAME_NAME_ERROR = "The names of the players cannot be the same."
INVALID_BOARD_SIZE_ERROR = "Invalid Argument for board size."


class ConfigError(Exception):
    """Raised when startup configuration is invalid."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(errors[0] if len(errors) == 1 else f"{len(errors)} configuration errors")


class GameConfig(BaseModel):
    """Board size, player names and the auto-print flag."""
    size: int
    first_player: str
    second_player: str
    auto_print: bool = False

    model_config = {"frozen": True}

    @field_validator("size", mode="before")
    @classmethod
    def _parse_size(cls, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(INVALID_BOARD_SIZE_ERROR)
        try:
            size = int(value)
        except (TypeError, ValueError):
            raise ValueError(INVALID_BOARD_SIZE_ERROR) from None
        if size < MIN_SIZE or size > MAX_SIZE or size % 2 != 1:
            raise ValueError(INVALID_BOARD_SIZE_ERROR)
        return size

    @model_validator(mode="after")
    def _check_names(self) -> GameConfig:
        if self.first_player == self.second_player:
            raise ValueError(SAME_NAME_ERROR)
        if self.first_player in AI_NAMES:
            raise ValueError(FIRST_PLAYER_AI_ERROR)
        if not self.first_player or not self.second_player:
            raise ValueError(NAME_EMPTY_ERROR)
        if not NAME_PATTERN.fullmatch(self.first_player) or not NAME_PATTERN.fullmatch(self.second_player):
            raise ValueError(NAME_FORMAT_ERROR)
        return self

    @classmethod
    def create(cls, **kwargs: Any) -> GameConfig:
        """Validate settings, raising ConfigError with readable messages."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise ConfigError(_messages(e)) from None

    @classmethod
    def from_args(cls, args: Sequence[str]) -> GameConfig:
        """
        Build a config from positional arguments.

        Accepts: <size> <first player> <second player> [auto-print]
        """
        if len(args) not in (3, 4):
            raise ConfigError([INVALID_NUMBER_OF_ARGUMENTS_ERROR])

        config = cls.create(
            size=args[0],
            first_player=args[1],
            second_player=args[2],
            auto_print=len(args) == 4 and args[3] == AUTO_PRINT,
        )
        if len(args) == 4 and args[3] != AUTO_PRINT:
            raise ConfigError([INVALID_ARGUMENTS_ERROR])
        return config


def _messages(error: ValidationError) -> list[str]:
    messages = []
    for detail in error.errors():
        ctx = detail.get("ctx") or {}
        if "error" in ctx:
            messages.append(str(ctx["error"]))
        else:
            messages.append(detail["msg"])
    return messages
