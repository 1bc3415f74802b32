"""Command line tests — option handling and the line-mode frontend end to end."""

from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from fifteen.config import GameConfig
from fifteen.engine.shuffle import IdentityShuffle, RandomWalkShuffle
from fifteen.frontend.cli.line.app import PROMPT, SOLVED_MESSAGE
from fifteen.main import app

runner = CliRunner()

SOLVED_3x3_TEXT = "   1   2   3\n\n   4   5   6\n\n   7   8    \n\n"


# -- cli ----------------------------------------------------------------------


def test_no_shuffle_line_session() -> None:
    result = runner.invoke(app, ["--no-shuffle", "-s", "3"], input="da\nq\n")
    assert result.exit_code == 0, result.output
    assert result.stdout == (
        SOLVED_3x3_TEXT + PROMPT + SOLVED_3x3_TEXT + SOLVED_MESSAGE + PROMPT
    )


def test_size_one() -> None:
    result = runner.invoke(app, ["--no-shuffle", "--size", "1"], input="q\n")
    assert result.exit_code == 0, result.output
    assert result.stdout == "    \n\n" + PROMPT


def test_zero_walk_length_is_unshuffled() -> None:
    result = runner.invoke(app, ["--walk-length", "0", "-s", "3"], input="q\n")
    assert result.exit_code == 0, result.output
    assert result.stdout == SOLVED_3x3_TEXT + PROMPT


def test_seed_is_reproducible() -> None:
    first = runner.invoke(app, ["--seed", "7"], input="q\n")
    second = runner.invoke(app, ["--seed", "7"], input="q\n")
    assert first.exit_code == 0, first.output
    assert first.stdout == second.stdout


def test_env_vars() -> None:
    result = runner.invoke(
        app,
        [],
        input="q\n",
        env={"FIFTEEN_SIZE": "3", "FIFTEEN_NO_SHUFFLE": "1"},
    )
    assert result.exit_code == 0, result.output
    assert result.stdout == SOLVED_3x3_TEXT + PROMPT


@pytest.mark.parametrize(
    "args",
    [["-s", "0"], ["-s", "16"], ["--walk-length", "-1"], ["-f", "pygame"]],
    ids=["size-zero", "size-too-big", "negative-walk", "unknown-frontend"],
)
def test_bad_options(args: list[str]) -> None:
    result = runner.invoke(app, args, input="q\n")
    assert result.exit_code == 2


def test_bad_log_level() -> None:
    result = runner.invoke(app, ["--log-level", "chatty"], input="q\n")
    assert result.exit_code == 2


# -- config -------------------------------------------------------------------


def test_config_defaults() -> None:
    config = GameConfig()
    assert config.size == 4
    assert config.shuffle
    assert isinstance(config.make_shuffle(), RandomWalkShuffle)


def test_config_no_shuffle() -> None:
    assert isinstance(GameConfig(shuffle=False).make_shuffle(), IdentityShuffle)


def test_config_passes_walk_settings() -> None:
    shuffle = GameConfig(seed=3, walk_length=12).make_shuffle()
    assert isinstance(shuffle, RandomWalkShuffle)
    assert shuffle.walk_length == 12


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        GameConfig(log_level="chatty").configure_logging()


def test_configure_logging_accepts_lowercase(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    GameConfig(log_level="debug").configure_logging()
    assert calls[0]["level"] == logging.DEBUG
