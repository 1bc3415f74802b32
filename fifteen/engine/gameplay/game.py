"""A single game session: one board plus its move counter and clock."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fifteen.engine.gamestate import GameState
from fifteen.engine.shuffle import Shuffle
from fifteen.models.board import Board, Move

logger = logging.getLogger(__name__)

# Offset from the blank to the tile a move slides, as (row, col).
_TILE_OFFSETS: dict[tuple[int, int], Move] = {
    (0, 1): Move.LEFT,
    (0, -1): Move.RIGHT,
    (1, 0): Move.UP,
    (-1, 0): Move.DOWN,
}


class GamePlay:
    """Orchestrates a game session on top of a :class:`Board`.

    The board only says whether a move applied; counting the applied
    moves and timing the session happens here.
    """

    def __init__(self, size: int, shuffle: Shuffle | None = None) -> None:
        self.size = size
        self.state = GameState(Board.new(size, shuffle))
        logger.info("New %dx%d game", size, size)

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = GameState(board)
        return obj

    @property
    def board(self) -> Board:
        return self.state.board

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> bool:
        """Slide a tile in *move*'s direction. Returns True if it applied."""
        if not self.board.move_once(move):
            return False
        self.state.record_moves()
        return True

    def move_many(self, moves: Iterable[Move]) -> int:
        applied = self.board.move_many(moves)
        self.state.record_moves(applied)
        return applied

    def move_tile(self, row: int, col: int) -> bool:
        """Slide the tile at (row, col) into the blank, click style.

        Returns False unless the tile is orthogonally adjacent to the blank.
        """
        br, bc = self.board.blank_pos
        move = _TILE_OFFSETS.get((row - br, col - bc))
        if move is None:
            return False
        return self.move(move)

    def reset(self, shuffle: Shuffle | None = None) -> None:
        """Start a new game on the same board object."""
        self.board.reset(shuffle)
        self.state.restart_clock()
        logger.info("Reset %dx%d game", self.size, self.size)

    def deal(self, shuffle: Shuffle, attempts: int = 100) -> None:
        """Reset with *shuffle*, reshuffling while the board reads as solved.

        A board can only start unsolved from 2×2 up. A shuffle that never
        scrambles (e.g. IdentityShuffle) gives up after *attempts* tries.
        """
        self.reset(shuffle)
        if self.size < 2:
            return
        for _ in range(attempts - 1):
            if not self.is_won:
                return
            logger.debug("Shuffle left the board solved, reshuffling")
            self.reset(shuffle)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
