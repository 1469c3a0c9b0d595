"""
Geometry - Integer coordinates and hexagonal adjacency.

A Hex board is a rhombus of hexagons stored on a square array.
Each cell has up to six neighbours; the offsets below encode that
adjacency on the square indexing.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


@dataclass(frozen=True)
class Position:
    """An integer 2D coordinate."""
    x: int
    y: int

    def add(self, other: Position) -> Position:
        """Return the sum of this position and another."""
        return Position(self.x + other.x, self.y + other.y)

    def lies_within(self, minimum: int, maximum: int) -> bool:
        """Check both coordinates lie in [minimum, maximum]."""
        return minimum <= self.x <= maximum and minimum <= self.y <= maximum

    def swapped(self) -> Position:
        """Return the position with x and y exchanged."""
        return Position(self.y, self.x)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


class Direction(Enum):
    """The six hex-adjacency offsets, in search order."""
    UP_LEFT = Position(0, -1)
    UP_RIGHT = Position(1, -1)
    LEFT = Position(-1, 0)
    RIGHT = Position(1, 0)
    DOWN_LEFT = Position(-1, 1)
    DOWN_RIGHT = Position(0, 1)

    @property
    def offset(self) -> Position:
        return self.value


def neighbors(position: Position) -> list[Position]:
    """All six adjacent positions (unchecked against any board)."""
    return [position.add(direction.offset) for direction in Direction]
