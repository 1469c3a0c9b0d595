"""
Connectivity - Breadth-first reachability over same-token cells.

Win detection only needs to know whether a chain of a token's cells
joins a start cell to the token's goal edge:
- X reaches its goal on the last row (x == size - 1)
- O reaches its goal on the last column (y == size - 1)
"""

from __future__ import annotations
from collections import deque
from typing import TYPE_CHECKING

from .geometry import Position, neighbors

if TYPE_CHECKING:
    from .board import Board, Cell


class ConnectivityChecker:
    """
    Checks whether a token's cells connect a start cell to its goal edge.

    Usage:
        checker = ConnectivityChecker(board)
        if checker.is_connected(Position(0, 3), Cell.X):
            ...
    """

    def __init__(self, board: Board):
        self.board = board
        self.size = board.size

    def is_connected(self, start: Position, token: Cell) -> bool:
        """
        BFS from start over cells holding token.

        Returns True as soon as a visited cell lies on the goal edge.
        """
        visited: set[Position] = set()
        queue: deque[Position] = deque([start])

        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)

            if token.is_goal_edge(current, self.size):
                return True

            for neighbor in neighbors(current):
                if neighbor in visited:
                    continue
                if self.board.entry_at(neighbor) is token:
                    queue.append(neighbor)

        return False
