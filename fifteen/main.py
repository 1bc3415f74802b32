"""Fifteen puzzle.

Usage::

    fifteen                       # line mode, 4×4, shuffled
    fifteen --no-shuffle -s 3     # line mode, 3×3, starts solved
    fifteen -f rich               # Rich terminal with menu
    fifteen --seed 7              # reproducible shuffle
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from typing import Optional

import typer

from fifteen.config import DEFAULT_SIZE, ENV_PREFIX, MAX_PLAY_SIZE, GameConfig
from fifteen.models.board import BoardError

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    line = "line"
    rich = "rich"


_RUNNERS = {
    Frontend.line: "fifteen.frontend.cli.line.app",
    Frontend.rich: "fifteen.frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.line, "-f", "--frontend",
        envvar=f"{ENV_PREFIX}FRONTEND",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=1, max=MAX_PLAY_SIZE,
        envvar=f"{ENV_PREFIX}SIZE",
        help=f"Grid size (1-{MAX_PLAY_SIZE}).",
    ),
    no_shuffle: bool = typer.Option(
        False, "--no-shuffle",
        envvar=f"{ENV_PREFIX}NO_SHUFFLE",
        help="Start from the solved board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar=f"{ENV_PREFIX}SEED",
        help="Seed for the shuffle's random generator.",
    ),
    walk_length: Optional[int] = typer.Option(
        None, "--walk-length",
        min=0,
        envvar=f"{ENV_PREFIX}WALK_LENGTH",
        help="Number of random moves used to shuffle (default: size^4).",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar=f"{ENV_PREFIX}LOG_LEVEL",
        help="Logging level; records go to stderr.",
    ),
) -> None:
    """Fifteen puzzle."""
    config = GameConfig(
        size=size,
        shuffle=not no_shuffle,
        seed=seed,
        walk_length=walk_length,
        log_level=log_level,
    )
    try:
        config.configure_logging()
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    logger.debug("Starting %s frontend with %s", frontend.value, config)
    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        mod.launch(config)
    except BoardError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


if __name__ == "__main__":
    app()
