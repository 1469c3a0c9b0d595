"""
Pytest fixtures for Hexgame tests.
"""

import pytest

from ..config import GameConfig
from ..engine_core.board import Board, Cell
from ..engine_core.game import HexGame, Player
from ..session.manager import GameManager


def play(game: HexGame, *moves: tuple[int, int]) -> HexGame:
    """Place tokens for alternating players, asserting each move succeeds."""
    for x, y in moves:
        result = game.place_token(x, y)
        assert result.success, result.error
    return game


def parse_place(command: str) -> tuple[int, int]:
    """Coordinates of a 'place <x> <y>' command."""
    name, x, y = command.split()
    assert name == "place"
    return int(x), int(y)


@pytest.fixture
def board() -> Board:
    """An empty 5x5 board."""
    return Board(5)


@pytest.fixture
def players() -> list[Player]:
    """Two human players holding X and O."""
    return [Player(name="Alice", token=Cell.X), Player(name="Bob", token=Cell.O)]


@pytest.fixture
def game(players) -> HexGame:
    """A fresh 5x5 game between two humans."""
    return HexGame("test_game", 5, players)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(size=5, first_player="Alice", second_player="Bob")


@pytest.fixture
def manager(config) -> GameManager:
    """Manager for two humans on a 5x5 board."""
    return GameManager(config)


@pytest.fixture
def bogo_manager() -> GameManager:
    """Manager with BogoAI as the second player."""
    return GameManager(GameConfig(size=5, first_player="Alice", second_player="BogoAI"))


@pytest.fixture
def hero_manager() -> GameManager:
    """Manager with HeroAI as the second player."""
    return GameManager(GameConfig(size=5, first_player="Alice", second_player="HeroAI"))
