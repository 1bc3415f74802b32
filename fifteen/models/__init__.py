from fifteen.models.board import (
    MAX_SIZE,
    Board,
    BoardError,
    BoardLayoutError,
    BoardSizeError,
    Move,
)

__all__ = [
    "MAX_SIZE",
    "Board",
    "BoardError",
    "BoardLayoutError",
    "BoardSizeError",
    "Move",
]
