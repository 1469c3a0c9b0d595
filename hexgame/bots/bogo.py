"""
BogoAI - A simple heuristic opponent.

Priority ladder (first applicable rule wins):
1. Win immediately
2. Block the opponent's immediate win
3. Swap when the opening move has an even coordinate sum
4. Mirror the opponent's last move through the board centre
5. Take the first empty cell
"""

from __future__ import annotations
import logging

from ..engine_core.board import Board
from ..engine_core.game import HexGame, Player
from ..engine_core.geometry import Position
from .policy import (
    BotPolicy,
    BotDecision,
    DecisionRule,
    SWAP_COMMAND,
    convert_move_to_command,
    determine_blocking_move,
    determine_winning_move,
    first_empty_cell,
)


logger = logging.getLogger(__name__)


class BogoPolicy(BotPolicy):
    """Win, block, swap, mirror, or the first free cell."""

    NAME = "BogoAI"

    def select_command(self) -> BotDecision:
        game = self.manager.current_game
        player = game.current_player
        board = game.board.copy()

        decision = self._select(game, board, player)
        logger.debug("%s chose %r (%s)", self.NAME, decision.command, decision.rule.value)
        return decision

    def _select(self, game: HexGame, board: Board, player: Player) -> BotDecision:
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

        if self._should_swap(game):
            return self._decide(DecisionRule.SWAP, SWAP_COMMAND, "Opening move has even parity")

        mirrored = self._mirror_move(game, board)
        if mirrored is not None:
            return self._decide(
                DecisionRule.MIRROR, convert_move_to_command(mirrored), "Mirrors the last move"
            )

        return self._decide(
            DecisionRule.FALLBACK,
            convert_move_to_command(first_empty_cell(board)),
            "First empty cell",
        )

    def _should_swap(self, game: HexGame) -> bool:
        # Fixed parity rule, not a position evaluation
        if not game.can_swap():
            return False
        opening = game.move_history[0].position
        return (opening.x + opening.y) % 2 == 0

    def _mirror_move(self, game: HexGame, board: Board) -> Position | None:
        """Board position reflecting the latest move through the centre."""
        if not game.move_history:
            return None
        last = game.move_history[-1].position
        size = board.size
        # last is in command coordinates; the board stores them transposed
        mirrored = Position(size - 1 - last.y, size - 1 - last.x)
        if board.is_empty(mirrored.x, mirrored.y):
            return mirrored
        return None
