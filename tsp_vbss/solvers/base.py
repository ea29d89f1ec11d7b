import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..errors import InvalidInput
from ..field import CityField
from ..random_source import RandomSource


Tour = List[int]


def is_permutation(tour: Sequence[int], n: int) -> bool:
    return len(tour) == n and sorted(tour) == list(range(n))


def tour_length(field: CityField, tour: Sequence[int]) -> int:
    dist = 0
    n = len(tour)
    for i in range(n):
        a = tour[i]
        b = tour[(i + 1) % n]
        dist += field.distance(a, b)
    return dist


def random_tour(n: int, rng: RandomSource) -> Tour:
    # n random transpositions of the identity; not a uniform shuffle.
    tour = list(range(n))
    for _ in range(n):
        i = rng.randint(n)
        j = rng.randint(n)
        tour[i], tour[j] = tour[j], tour[i]
    return tour


class TourState:
    """Current permutation of city indices with its cached cyclic cost."""

    def __init__(self, field: CityField, tour: Optional[Sequence[int]] = None):
        self.field = field
        self._tour: Tour = list(range(len(field)))
        self._cost: Optional[int] = None
        if tour is not None:
            self.replace(tour)

    @property
    def tour(self) -> Tour:
        return list(self._tour)

    @property
    def cost(self) -> int:
        if self._cost is None:
            self._cost = tour_length(self.field, self._tour)
        return self._cost

    def replace(self, tour: Sequence[int]) -> None:
        tour = list(tour)
        if not is_permutation(tour, len(self.field)):
            raise InvalidInput(f"tour is not a permutation of 0..{len(self.field) - 1}: {tour}")
        self._tour = tour
        self._cost = None

    def __len__(self) -> int:
        return len(self._tour)


@dataclass
class SolveResult:
    tour: Tour
    length: float
    solver_name: str
    optimum: Optional[float] = None

    @property
    def gap(self) -> float:
        if self.optimum is None or math.isclose(self.optimum, 0.0):
            return float("inf")
        return (self.length - self.optimum) / self.optimum
