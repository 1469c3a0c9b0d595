"""
Board - The Hex grid and its win conditions.

The board is a size x size grid of cells addressed as Position(x, y):
- x selects the printed line
- y selects the cell within the line

Each token owns a pair of opposite edges, independent of seating order:
- X connects the first line (x == 0) to the last line (x == size - 1)
- O connects the first column (y == 0) to the last column (y == size - 1)

Copies are independent snapshots, so speculative search never touches
the live game.
"""

from __future__ import annotations
from collections import deque
from enum import Enum

from .connectivity import ConnectivityChecker
from .geometry import Position, neighbors
from .result import ErrorCode, MoveResult, OCCUPIED_ERROR, OUT_OF_BOUNDS_ERROR


WIN_PATH_MARK = "*"


class Cell(Enum):
    """State of a single board cell."""
    EMPTY = "."
    X = "X"
    O = "O"

    @property
    def symbol(self) -> str:
        return self.value

    def opposite(self) -> Cell:
        """Return the other player token."""
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        raise ValueError("EMPTY has no opposite token")

    def is_goal_edge(self, position: Position, size: int) -> bool:
        """Check position lies on the edge a winning chain must reach."""
        if self is Cell.X:
            return position.x == size - 1
        if self is Cell.O:
            return position.y == size - 1
        return False


class Board:
    """
    A square grid of cells with hexagonal adjacency.

    Usage:
        board = Board(5)
        board.place(0, 2, Cell.X)
        if board.has_won(Cell.X):
            print(board.win_path_representation(Cell.X))
    """

    def __init__(self, size: int):
        self.size = size
        self._entries: list[list[Cell]] = [
            [Cell.EMPTY] * size for _ in range(size)
        ]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_position_valid(self, position: Position) -> bool:
        """Check position lies within the board."""
        return position.lies_within(0, self.size - 1)

    def entry_at(self, position: Position) -> Cell | None:
        """Cell at position, or None when position is off the board."""
        if not self.is_position_valid(position):
            return None
        return self._entries[position.x][position.y]

    def is_empty(self, x: int, y: int) -> bool:
        """Check the cell is on the board and unoccupied."""
        return self.entry_at(Position(x, y)) is Cell.EMPTY

    def empty_positions(self) -> list[Position]:
        """All empty positions, line by line."""
        return [
            Position(x, y)
            for x in range(self.size)
            for y in range(self.size)
            if self._entries[x][y] is Cell.EMPTY
        ]

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def place(self, x: int, y: int, token: Cell) -> MoveResult:
        """
        Place token at (x, y).

        Fails with OUT_OF_BOUNDS off the board and OCCUPIED on a taken cell.
        """
        position = Position(x, y)
        if not self.is_position_valid(position):
            return MoveResult.failure(ErrorCode.OUT_OF_BOUNDS, OUT_OF_BOUNDS_ERROR)
        if not self.is_empty(x, y):
            return MoveResult.failure(ErrorCode.OCCUPIED, OCCUPIED_ERROR)

        self._entries[x][y] = token
        return MoveResult.ok(position)

    def copy(self) -> Board:
        """Independent snapshot of this board."""
        board = Board(self.size)
        board._entries = [row[:] for row in self._entries]
        return board

    # -------------------------------------------------------------------------
    # Win detection
    # -------------------------------------------------------------------------

    def _start_edge(self, token: Cell) -> list[Position]:
        if token is Cell.X:
            return [Position(0, y) for y in range(self.size)]
        if token is Cell.O:
            return [Position(x, 0) for x in range(self.size)]
        return []

    def winning_start(self, token: Cell) -> Position | None:
        """Start-edge cell from which token's winning chain was found."""
        checker = ConnectivityChecker(self)
        for position in self._start_edge(token):
            if self.entry_at(position) is token and checker.is_connected(position, token):
                return position
        return None

    def has_won(self, token: Cell) -> bool:
        """Check token connects its two edges."""
        return self.winning_start(token) is not None

    def winning_location(self, token: Cell) -> Position | None:
        """
        First empty cell where placing token wins immediately.

        Tries every empty cell on a fresh copy of the board. Cells are
        scanned column by column (outer loop over y).
        """
        for y in range(self.size):
            for x in range(self.size):
                if self._entries[x][y] is not Cell.EMPTY:
                    continue
                simulated = self.copy()
                simulated.place(x, y, token)
                if simulated.has_won(token):
                    return Position(x, y)
        return None

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _symbols(self) -> list[list[str]]:
        return [[cell.symbol for cell in row] for row in self._entries]

    def win_path_representation(self, token: Cell) -> str:
        """Render the board with token's winning chain marked."""
        representation = self._symbols()
        start = self.winning_start(token)
        if start is None:
            return self._to_string(representation)

        visited: set[Position] = set()
        queue: deque[Position] = deque([start])
        while queue:
            current = queue.popleft()
            if current in visited or not self.is_position_valid(current):
                continue
            representation[current.x][current.y] = WIN_PATH_MARK
            visited.add(current)
            queue.extend(
                neighbor for neighbor in neighbors(current)
                if self.entry_at(neighbor) is token
            )

        return self._to_string(representation)

    def _to_string(self, representation: list[list[str]]) -> str:
        lines = []
        for x, row in enumerate(representation):
            lines.append(" " * x + " ".join(row) + "\n")
        return "".join(lines)

    def render(self) -> str:
        """Printable grid, one indented line per row."""
        return self._to_string(self._symbols())

    def __str__(self) -> str:
        return self.render()
