import random
from typing import Optional


class RandomSource:
    """
    Seeded source of uniform integers and reals.

    Every component that needs randomness takes one of these explicitly, so a
    fixed seed and call sequence always reproduces the same tours.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, bound: int) -> int:
        """Uniform integer in [0, bound)."""
        return self._rng.randrange(bound)

    def random(self) -> float:
        """Uniform real in [0, 1)."""
        return self._rng.random()

    def spawn(self, offset: int) -> "RandomSource":
        # Independent runs get seed + offset, like the per-island generators.
        if self.seed is None:
            return RandomSource(self._rng.getrandbits(64))
        return RandomSource(self.seed + offset)
