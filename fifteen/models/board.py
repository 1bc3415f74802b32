"""Board model for the fifteen puzzle.

Cells are stored flat in row-major order; ``None`` marks the blank.
The blank starts in the last cell, and a :class:`Move` names the
direction the *tile* slides into the blank.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fifteen.engine.shuffle import Shuffle

logger = logging.getLogger(__name__)

# Tile values must fit an unsigned 16-bit integer.
MAX_SIZE = 255


class BoardError(ValueError):
    """Base class for boards that cannot be constructed."""


class BoardSizeError(BoardError):
    """Raised for a size that is not a positive integer up to MAX_SIZE."""

    def __init__(self, size: object) -> None:
        super().__init__(
            f"Board size must be an integer between 1 and {MAX_SIZE}, got {size!r}."
        )
        self.size = size


class BoardLayoutError(BoardError):
    """Raised when cells do not hold every tile exactly once plus one blank."""


class Move(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Move:
        return _OPPOSITES[self]


_OPPOSITES = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}


def _check_size(size: object) -> int:
    # bool is an int subclass.
    if isinstance(size, bool) or not isinstance(size, int):
        raise BoardSizeError(size)
    if not 1 <= size <= MAX_SIZE:
        raise BoardSizeError(size)
    return size


@dataclass
class Board:
    """Represents the puzzle grid.

    ``blank_index`` caches the flat position of the sole ``None`` cell
    and is kept in step by every mutating method.
    """

    size: int
    cells: list[int | None]
    blank_index: int

    # -- construction ---------------------------------------------------------

    @classmethod
    def new(cls, size: int, shuffle: Shuffle | None = None) -> Board:
        """Build the solved layout and hand it to *shuffle* before returning.

        Raises :class:`BoardSizeError` for an invalid *size*.
        """
        size = _check_size(size)
        board = cls(size=size, cells=[], blank_index=0)
        board.reset(shuffle)
        return board

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int | None]) -> Board:
        """Create a board from a flat row-major tile list.

        Both ``0`` and ``None`` are accepted for the blank.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        size = _check_size(size)
        cells: list[int | None] = [v or None for v in flat]
        if len(cells) != size * size:
            raise BoardLayoutError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(cells)}."
            )
        blank_index = cells.index(None) if None in cells else -1
        board = cls(size=size, cells=cells, blank_index=blank_index)
        board.validate()
        return board

    def reset(self, shuffle: Shuffle | None = None) -> None:
        """Restore the solved layout in place, then apply *shuffle*."""
        self._fill_solved()

        if shuffle is not None:
            logger.debug(
                "Shuffling %dx%d board with %s",
                self.size, self.size, type(shuffle).__name__,
            )
            try:
                shuffle.randomize(self)
                self.validate()
            except BoardLayoutError:
                logger.error("%s corrupted the board", type(shuffle).__name__)
                self._fill_solved()
                raise

    def _fill_solved(self) -> None:
        num_cells = self.size * self.size
        self.cells[:] = range(1, num_cells)
        self.cells.append(None)
        self.blank_index = num_cells - 1

    def validate(self) -> None:
        """Raise :class:`BoardLayoutError` unless the board is well formed."""
        num_cells = self.size * self.size
        if len(self.cells) != num_cells:
            raise BoardLayoutError(
                f"Board of size {self.size} must hold {num_cells} cells, "
                f"got {len(self.cells)}."
            )
        blanks = [i for i, v in enumerate(self.cells) if v is None]
        if len(blanks) != 1:
            raise BoardLayoutError(
                f"Board must have exactly one blank, found {len(blanks)}."
            )
        if blanks[0] != self.blank_index:
            raise BoardLayoutError(
                f"Blank is at {blanks[0]} but blank_index is {self.blank_index}."
            )
        tiles = [v for v in self.cells if v is not None]
        if any(isinstance(v, bool) or not isinstance(v, int) for v in tiles):
            raise BoardLayoutError("Tiles must be integers.")
        tiles.sort()
        if tiles != list(range(1, num_cells)):
            raise BoardLayoutError(
                f"Tiles must be 1..{num_cells - 1}, each exactly once."
            )

    # -- movement (direction = where the *tile* moves) ------------------------

    def target_index(self, move: Move) -> int | None:
        """Return the flat index of the tile *move* would slide, if any.

        LEFT  → tile right of the blank moves left  → blank shifts right
        RIGHT → tile left of the blank moves right  → blank shifts left
        UP    → tile below the blank moves up       → blank shifts down
        DOWN  → tile above the blank moves down     → blank shifts up
        """
        move = Move(move)
        blank = self.blank_index
        size = self.size
        if move is Move.LEFT:
            target = blank + 1
            return target if target % size != 0 else None
        if move is Move.RIGHT:
            return blank - 1 if blank % size != 0 else None
        if move is Move.UP:
            target = blank + size
            return target if target < len(self.cells) else None
        target = blank - size
        return target if target >= 0 else None

    def move_once(self, move: Move) -> bool:
        """Slide one tile into the blank.

        Returns False, leaving the board untouched, when the move would
        push a tile through the wall.
        """
        target = self.target_index(move)
        if target is None:
            return False
        blank = self.blank_index
        self.cells[blank], self.cells[target] = self.cells[target], None
        self.blank_index = target
        return True

    def move_many(self, moves: Iterable[Move]) -> int:
        """Attempt every move in order and return how many were applied."""
        return sum(1 for move in moves if self.move_once(move))

    # -- queries --------------------------------------------------------------

    def rows(self) -> list[list[int | None]]:
        size = self.size
        return [self.cells[i : i + size] for i in range(0, len(self.cells), size)]

    def get(self, row: int, col: int) -> int | None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size}×{self.size} board.")
        return self.cells[row * self.size + col]

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, self.size)

    def is_ordered(self) -> bool:
        """Check that tiles ascend in reading order, skipping the blank.

        Where the blank sits does not matter.
        """
        prev = 0
        for val in self.cells:
            if val is None:
                continue
            if val <= prev:
                return False
            prev = val
        return True

    def is_solved(self) -> bool:
        return self.is_ordered()

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its home cell."""
        val = self.get(row, col)
        index = row * self.size + col
        if val is None:
            return index == len(self.cells) - 1
        return index == val - 1

    def copy(self) -> Board:
        return Board(
            size=self.size,
            cells=self.cells[:],
            blank_index=self.blank_index,
        )
