"""Line-mode frontend — one command line per turn, plain text output.

Each line may carry several moves (``w``/``a``/``s``/``d``); ``q``
anywhere on the line quits. The output format is fixed so transcripts
stay comparable between versions.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from fifteen.config import DEFAULT_SIZE, GameConfig
from fifteen.engine.gameplay import GamePlay
from fifteen.engine.shuffle import Shuffle
from fifteen.models.board import Board, Move

logger = logging.getLogger(__name__)

PROMPT = "Slide into direction [w, a, s, d], q - for quit: "
SOLVED_MESSAGE = "Puzzle is solved!\n\n"

_CELL_WIDTH = 4

_COMMANDS: dict[str, Move] = {
    "w": Move.UP,
    "a": Move.LEFT,
    "s": Move.DOWN,
    "d": Move.RIGHT,
}


def render_board(board: Board) -> str:
    """Right-align every tile in a 4-char field; blank rows between rows."""
    lines: list[str] = []
    for row in board.rows():
        cells = (
            " " * _CELL_WIDTH if val is None else f"{val:>{_CELL_WIDTH}}"
            for val in row
        )
        lines.append("".join(cells) + "\n\n")
    return "".join(lines)


def parse_command(line: str) -> list[Move] | None:
    """Return the moves on *line*, or None if it asks to quit.

    Unknown characters are skipped.
    """
    moves: list[Move] = []
    for ch in line:
        if ch == "q":
            return None
        move = _COMMANDS.get(ch)
        if move is not None:
            moves.append(move)
    return moves


def run(
    input: TextIO,
    output: TextIO,
    shuffle: Shuffle | None = None,
    size: int = DEFAULT_SIZE,
) -> GamePlay:
    """Play one game reading commands from *input* until quit or EOF."""
    game = GamePlay(size, shuffle)
    output.write(render_board(game.board))

    while True:
        output.write(PROMPT)
        output.flush()
        line = input.readline()
        if not line:
            logger.info("Input closed after %d moves", game.state.moves)
            return game

        moves = parse_command(line)
        if moves is None:
            logger.info("Quit after %d moves", game.state.moves)
            return game

        applied = game.move_many(moves)
        logger.debug("Applied %d of %d moves", applied, len(moves))
        output.write(render_board(game.board))
        if game.is_won:
            output.write(SOLVED_MESSAGE)


def launch(config: GameConfig) -> None:
    """Run against the process's stdin and stdout."""
    run(sys.stdin, sys.stdout, config.make_shuffle(), config.size)
