
"""Uniform piece randomizer module"""
import random
from typing import Optional

class UniformRandom:
    """Independent uniform draw per piece. No bag, repeats allowed."""
    PIECES = ["I","O","T","S","Z","J","L"]
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
