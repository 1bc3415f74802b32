"""Keypress mapping and Rich rendering tests."""

from __future__ import annotations

import pytest
from rich.console import Console

from fifteen.frontend.cli import input_handler
from fifteen.frontend.cli.input_handler import action_to_move, resolve
from fifteen.frontend.cli.rich.app import render_board
from fifteen.models.board import Board, Move


# -- key mapping ----------------------------------------------------------------


@pytest.mark.parametrize(
    "ch, action",
    [
        ("w", "up"),
        ("A", "left"),
        ("s", "down"),
        ("D", "right"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("R", "restart"),
        ("\r", "enter"),
        ("2", "2"),
        ("\x07", ""),
        ("left", "left"),
    ],
    ids=repr,
)
def test_resolve(ch: str, action: str) -> None:
    assert resolve(ch) == action


@pytest.mark.parametrize(
    "action, move",
    [
        ("up", Move.UP),
        ("down", Move.DOWN),
        ("left", Move.LEFT),
        ("right", Move.RIGHT),
        ("quit", None),
        ("", None),
        (None, None),
    ],
)
def test_action_to_move(action: str | None, move: Move | None) -> None:
    assert action_to_move(action) is move


def test_get_key_arrow_sequence(monkeypatch: pytest.MonkeyPatch) -> None:
    keys = iter(["\x1b", "[", "C"])
    monkeypatch.setattr(input_handler, "_getch", lambda: next(keys))
    assert input_handler.get_key() == "right"


def test_get_key_bare_escape(monkeypatch: pytest.MonkeyPatch) -> None:
    keys = iter(["\x1b", "x"])
    monkeypatch.setattr(input_handler, "_getch", lambda: next(keys))
    assert input_handler.get_key() == "quit"


def test_get_key_plain(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(input_handler, "_getch", lambda: "a")
    assert input_handler.get_key() == "left"


# -- rich rendering -------------------------------------------------------------


def _render_text(board: Board) -> str:
    console = Console(record=True, width=80, color_system=None)
    console.print(render_board(board))
    return console.export_text()


def test_render_board_rows() -> None:
    board = Board.new(3)
    table = render_board(board)
    assert table.row_count == 3
    assert len(table.columns) == 3


def test_render_board_text() -> None:
    board = Board.new(4)
    board.move_once(Move.DOWN)
    text = _render_text(board)
    for val in range(1, 16):
        assert str(val) in text
    assert "·" in text
