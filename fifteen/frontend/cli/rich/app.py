"""Rich terminal frontend — tables, colours, and panels.

Reads single keypresses through the shared input handler. Includes a
menu for size selection, a timed play mode and a study mode that starts
from the solved board.
"""

from __future__ import annotations

import logging
import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.config import GameConfig
from fifteen.engine.gameplay import GamePlay
from fifteen.engine.shuffle import IdentityShuffle
from fifteen.frontend.cli.input_handler import action_to_move, get_key, get_key_timeout
from fifteen.models.board import Board

logger = logging.getLogger(__name__)

console = Console()

MENU_SIZES = range(2, 9)


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _controls(*pairs: tuple[str, str]) -> Text:
    text = Text()
    for i, (key, label) in enumerate(pairs):
        text.append("  " if i == 0 else "   ")
        text.append(key, style="bold cyan")
        text.append(f"  {label}", style="dim")
    return text


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val is None:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for s in MENU_SIZES:
        if s > MENU_SIZES.start:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Study    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(Text("  ← →  change size", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    console.print()
    console.print(
        Align.center(
            Panel(
                body,
                title="[bold]F I F T E E N[/bold]",
                border_style="bright_blue",
                padding=(1, 4),
            )
        )
    )


def _draw_game(game: GamePlay) -> None:
    """Draw the play screen; the stats line is the last thing printed."""
    console.clear()
    size = game.size
    panel = Panel(
        Align.center(render_board(game.board)),
        title=f"[bold cyan]Fifteen  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(
            _controls(("↑↓←→/WASD", "move"), ("R", "restart"), ("Q", "back"))
        )
    )
    # Save the cursor so _update_time() can repaint only the stats line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)), end="")


def _update_time(game: GamePlay) -> None:
    sys.stdout.write("\033[u\033[K")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)), end="")


def _draw_study(game: GamePlay, status: str = "") -> None:
    console.clear()
    size = game.size
    panel = Panel(
        Align.center(render_board(game.board)),
        title=f"[bold yellow]Study  {size}×{size}[/bold yellow]",
        border_style="yellow",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(
        Align.center(
            _controls(("↑↓←→/WASD", "move"), ("R", "scramble"), ("Q", "back"))
        )
    )


def _draw_win(game: GamePlay) -> None:
    console.clear()
    size = game.size

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SOLVED!", style="bold green")
    congrats.append(f"  {game.state.moves} moves  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(render_board(game.board)),
        Align.center(congrats),
        Align.center(_stats(game)),
    )
    console.print()
    console.print(
        Align.center(
            Panel(
                group,
                title=f"[bold green]Fifteen  {size}×{size}[/bold green]",
                border_style="bold green",
                padding=(1, 2),
            )
        )
    )
    console.print(Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim")))


# -- game loops ---------------------------------------------------------------


def _play_game(size: int, config: GameConfig) -> None:
    """Play mode — shuffled board, moves and time counted."""
    game = GamePlay(size)
    game.deal(config.make_shuffle())
    while True:
        while not game.is_won:
            _draw_game(game)

            # Short timeout so the clock keeps ticking.
            while (key := get_key_timeout(0.5)) is None:
                _update_time(game)

            move = action_to_move(key)
            if move is not None:
                game.move(move)
            elif key == "restart":
                game.deal(config.make_shuffle())
            elif key == "quit":
                return

        game.state.pause()
        logger.info("Solved %dx%d in %d moves", size, size, game.state.moves)
        _draw_win(game)

        while True:
            key = get_key()
            if key == "restart":
                game.deal(config.make_shuffle())
                break
            if key == "quit":
                return


def _study_game(size: int, config: GameConfig) -> None:
    """Study mode — starts solved, scrambles on request."""
    game = GamePlay(size, IdentityShuffle())
    status = ""

    while True:
        _draw_study(game, status)
        status = ""
        key = get_key()

        move = action_to_move(key)
        if move is not None:
            if game.move(move) and game.is_won:
                status = "[green]Solved.[/green]"
        elif key == "restart":
            game.deal(config.make_shuffle())
            status = "[yellow]Scrambled![/yellow]"
        elif key == "quit":
            return


def _menu_loop(config: GameConfig) -> None:
    sel_size = min(max(config.size, MENU_SIZES.start), MENU_SIZES.stop - 1)

    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MENU_SIZES.start, sel_size - 1)
        elif key == "right":
            sel_size = min(MENU_SIZES.stop - 1, sel_size + 1)
        elif key in ("1", "enter"):
            _play_game(sel_size, config)
        elif key == "2":
            _study_game(sel_size, config)


# -- public entry point -------------------------------------------------------


def launch(config: GameConfig) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(config)
