"""
HeroAI - A pathfinding opponent.

Priority ladder (first applicable rule wins):
1. Win immediately
2. Block the opponent's immediate win
3. Answer the opening move in the leftmost column
4. Extend towards the goal edge along a shortest path, starting from the
   most recent own move
5. Retry step 4 from progressively older own moves
6. Take the first empty cell

The retry in step 5 is bounded by the number of moves this player has
made, so the search always terminates.
"""

from __future__ import annotations
from collections import deque
import logging

from ..engine_core.board import Board, Cell
from ..engine_core.game import HexGame, Player
from ..engine_core.geometry import Position, neighbors
from .policy import (
    BotPolicy,
    BotDecision,
    DecisionRule,
    convert_move_to_command,
    determine_blocking_move,
    determine_winning_move,
    first_empty_cell,
)


logger = logging.getLogger(__name__)


class HeroPolicy(BotPolicy):
    """Win, block, open west, then follow the shortest path to the goal edge."""

    NAME = "HeroAI"

    def select_command(self, past_moves: int = 0) -> BotDecision:
        """
        Compute the next command.

        Args:
            past_moves: How many of the player's own recent moves to skip
                before picking the path anchor (0 = most recent)
        """
        game = self.manager.current_game
        player = game.current_player
        board = game.board.copy()

        decision = self._select(game, board, player, past_moves)
        logger.debug("%s chose %r (%s)", self.NAME, decision.command, decision.rule.value)
        return decision

    def _select(self, game: HexGame, board: Board, player: Player, past_moves: int) -> BotDecision:
        winning = determine_winning_move(board, player)
        if winning is not None:
            return self._decide(
                DecisionRule.WIN, convert_move_to_command(winning), "Completes a winning chain"
            )

        blocking = determine_blocking_move(board, game)
        if blocking is not None:
            return self._decide(
                DecisionRule.BLOCK, convert_move_to_command(blocking), "Blocks the opponent's win"
            )

        if game.move_count == 1:
            opening = self._north_most_west_move(board)
            if opening is not None:
                return self._decide(
                    DecisionRule.OPENING, convert_move_to_command(opening), "Leftmost column opening"
                )

        own_moves = self.manager.count_moves_for_player(player)
        for skip in range(past_moves, own_moves):
            anchor = self.manager.get_last_move_for_player(player, skip)
            if anchor is None:
                break
            # History holds command coordinates; search runs on board coordinates
            step = self.find_shortest_path_move(board, anchor.swapped(), player.token)
            if step is not None:
                decision = self._decide(
                    DecisionRule.PATH,
                    convert_move_to_command(step),
                    f"Shortest path from own move {skip} back",
                )
                decision.details["anchor"] = anchor
                decision.details["past_moves"] = skip
                return decision
            logger.debug("%s found no path from %s, retrying from an older move", self.NAME, anchor)

        return self._decide(
            DecisionRule.FALLBACK,
            convert_move_to_command(first_empty_cell(board)),
            "No path found from any own move",
        )

    def _north_most_west_move(self, board: Board) -> Position | None:
        for x in range(board.size):
            if board.is_empty(x, 0):
                return Position(x, 0)
        return None

    def find_shortest_path_move(self, board: Board, start: Position, token: Cell) -> Position | None:
        """
        First step of a shortest path from start to token's goal edge.

        Empty cells and cells holding token are traversable. When the first
        step of a found path is already taken, the search carries on with
        the remaining frontier.
        """
        if token.is_goal_edge(start, board.size):
            return None

        visited = {start}
        parents: dict[Position, Position] = {}
        queue: deque[Position] = deque([start])

        while queue:
            current = queue.popleft()

            if token.is_goal_edge(current, board.size):
                step = self._backtrack(start, current, parents)
                if board.entry_at(step) is Cell.EMPTY:
                    return step
                continue

            for neighbor in neighbors(current):
                if neighbor in visited or not board.is_position_valid(neighbor):
                    continue
                entry = board.entry_at(neighbor)
                if entry is Cell.EMPTY or entry is token:
                    visited.add(neighbor)
                    parents[neighbor] = current
                    queue.append(neighbor)

        return None

    def _backtrack(self, start: Position, destination: Position, parents: dict[Position, Position]) -> Position:
        """Walk back from destination to the cell right after start."""
        current = destination
        while parents[current] != start:
            current = parents[current]
        return current
