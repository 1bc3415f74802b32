"""Per-session bookkeeping the board itself does not track."""

from __future__ import annotations

import time

from fifteen.models.board import Board


class GameState:
    """Holds the current board, the count of applied moves, and elapsed time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self._start_time: float = time.monotonic()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.monotonic() - self._start_time)
        return self._elapsed_banked

    @property
    def running(self) -> bool:
        return self._running

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.monotonic() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.monotonic()
            self._running = True

    def restart_clock(self) -> None:
        self.moves = 0
        self._elapsed_banked = 0.0
        self._start_time = time.monotonic()
        self._running = True

    # -- moves ----------------------------------------------------------------

    def record_moves(self, count: int = 1) -> None:
        self.moves += count

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
