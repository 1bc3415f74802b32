from fifteen.engine.shuffle.shuffle import IdentityShuffle, RandomWalkShuffle, Shuffle

__all__ = ["IdentityShuffle", "RandomWalkShuffle", "Shuffle"]
