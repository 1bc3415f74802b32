"""Line-mode frontend tests — output must match the historic transcripts."""

from __future__ import annotations

import io

import pytest

from fifteen.engine.shuffle import IdentityShuffle, RandomWalkShuffle
from fifteen.frontend.cli.line.app import (
    PROMPT,
    SOLVED_MESSAGE,
    parse_command,
    render_board,
    run,
)
from fifteen.models.board import Board, Move

SOLVED_4x4_TEXT = (
    "   1   2   3   4\n\n"
    "   5   6   7   8\n\n"
    "   9  10  11  12\n\n"
    "  13  14  15    \n\n"
)


# -- helpers ------------------------------------------------------------------


def _play(commands: str, shuffle=None, size: int = 4) -> str:
    output = io.StringIO()
    run(io.StringIO(commands), output, shuffle or IdentityShuffle(), size)
    return output.getvalue()


# -- rendering ----------------------------------------------------------------


def test_render_board() -> None:
    assert render_board(Board.new(4)) == SOLVED_4x4_TEXT


def test_render_board_last_row_of_10x10() -> None:
    board = Board.new(10)
    last_row = render_board(board).split("\n\n")[-2]
    assert last_row == "".join(f"{v:>4}" for v in range(91, 100)) + "    "
    assert last_row.endswith("  98  99    ")


def test_render_1x1() -> None:
    assert render_board(Board.new(1)) == "    \n\n"


# -- parsing ------------------------------------------------------------------


@pytest.mark.parametrize(
    "line, expected",
    [
        ("dds\n", [Move.RIGHT, Move.RIGHT, Move.DOWN]),
        ("w a s d", [Move.UP, Move.LEFT, Move.DOWN, Move.RIGHT]),
        ("xyz\n", []),
        ("", []),
        ("WASD", []),
    ],
    ids=["moves", "spaces", "unknown", "empty", "uppercase-ignored"],
)
def test_parse_command(line: str, expected: list[Move]) -> None:
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["q\n", "ddq", "qdd"])
def test_parse_quit(line: str) -> None:
    assert parse_command(line) is None


# -- sessions -----------------------------------------------------------------


def test_run_moves() -> None:
    assert _play("dds\nq\n") == (
        SOLVED_4x4_TEXT
        + PROMPT
        + "   1   2   3   4\n\n"
        "   5   6   7   8\n\n"
        "   9      11  12\n\n"
        "  13  10  14  15\n\n"
        + PROMPT
    )


def test_run_solved() -> None:
    assert _play("da\nq\n") == (
        SOLVED_4x4_TEXT + PROMPT + SOLVED_4x4_TEXT + SOLVED_MESSAGE + PROMPT
    )


def test_run_solved_message_text() -> None:
    assert SOLVED_MESSAGE == "Puzzle is solved!\n\n"
    assert PROMPT == "Slide into direction [w, a, s, d], q - for quit: "


def test_run_ends_on_eof() -> None:
    assert _play("") == SOLVED_4x4_TEXT + PROMPT


def test_run_wall_push_leaves_board() -> None:
    # Blank is bottom-right; LEFT and UP push against walls.
    output = _play("aw\nq\n")
    assert output == (
        SOLVED_4x4_TEXT + PROMPT + SOLVED_4x4_TEXT + SOLVED_MESSAGE + PROMPT
    )


def test_run_returns_game() -> None:
    output = io.StringIO()
    game = run(io.StringIO("ddsx\n"), output, IdentityShuffle(), 4)
    assert game.state.moves == 3
    assert not game.is_won


def test_run_with_random_walk_is_reproducible() -> None:
    first = _play("q\n", RandomWalkShuffle(seed=11), size=3)
    second = _play("q\n", RandomWalkShuffle(seed=11), size=3)
    assert first == second
    assert first.endswith(PROMPT)
