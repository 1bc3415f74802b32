"""Runtime settings collected from the command line and environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fifteen.engine.shuffle import IdentityShuffle, RandomWalkShuffle, Shuffle

DEFAULT_SIZE = 4
# Largest board the terminal frontends lay out; the engine allows more.
MAX_PLAY_SIZE = 15
ENV_PREFIX = "FIFTEEN_"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class GameConfig:
    size: int = DEFAULT_SIZE
    shuffle: bool = True
    seed: int | None = None
    walk_length: int | None = None
    log_level: str = "WARNING"

    def make_shuffle(self) -> Shuffle:
        if not self.shuffle:
            return IdentityShuffle()
        return RandomWalkShuffle(seed=self.seed, walk_length=self.walk_length)

    def configure_logging(self) -> None:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        logging.basicConfig(level=level, format=LOG_FORMAT)
