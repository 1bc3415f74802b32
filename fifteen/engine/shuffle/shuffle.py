"""Shuffle strategies handed to :meth:`Board.new` and :meth:`Board.reset`."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod

from fifteen.models.board import Board, Move

logger = logging.getLogger(__name__)

_MOVES = tuple(Move)


class Shuffle(ABC):
    """Randomizes (or leaves alone) a freshly built, solved board.

    Implementations must only mutate the board through legal moves so
    the result stays solvable.
    """

    @abstractmethod
    def randomize(self, board: Board) -> None:
        ...


class IdentityShuffle(Shuffle):
    """Leaves the board solved. Used for deterministic games and tests."""

    def randomize(self, board: Board) -> None:
        pass


class RandomWalkShuffle(Shuffle):
    """Scrambles a board by walking the blank along random legal moves.

    Walking from the solved state keeps every result reachable, unlike
    drawing a random permutation (only half of those are solvable).

    The walk takes ``size ** 4`` accepted moves unless *walk_length* is
    given. A drawn move that hits a wall is discarded and redrawn; it
    does not count towards the walk.

    The default grows fast: a 255×255 board would take about 4.2e9
    moves, so callers shuffling large boards should pass *walk_length*.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        seed: int | None = None,
        walk_length: int | None = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        if walk_length is not None and walk_length < 0:
            raise ValueError(f"walk_length must be non-negative, got {walk_length}.")
        self.rng = rng if rng is not None else random.Random(seed)
        self.walk_length = walk_length
        self.history: list[Move] = []

    def randomize(self, board: Board) -> None:
        """Scramble *board* in-place; accepted moves end up in ``history``."""
        self.history = []
        # A 1x1 board has no legal move at all.
        if board.size < 2:
            return

        target = self.walk_length if self.walk_length is not None else board.size ** 4
        logger.debug("Random walk of %d moves on %dx%d board", target, board.size, board.size)

        choice = self.rng.choice
        history = self.history
        while len(history) < target:
            move = choice(_MOVES)
            if board.move_once(move):
                history.append(move)
