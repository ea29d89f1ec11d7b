from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..errors import InvalidInput
from ..field import CityField
from ..random_source import RandomSource
from .base import SolveResult, Tour, TourState, is_permutation, random_tour, tour_length
from .heuristics import (
    NORMALIZATIONS,
    TIE_POLICIES,
    distances_from_reference,
    rank_distances,
    selection_probabilities,
)
from .sampling import SAMPLERS


@dataclass
class VBSSConfig:
    confidence: float = 1.0
    seed: Optional[int] = None
    sampler: str = "cdf"
    normalization: str = "symmetric"
    tie_policy: str = "ordinal"
    rank_offset: int = 1
    retry_factor: int = 100

    def __post_init__(self):
        if self.confidence < 0:
            raise InvalidInput(f"confidence must be non-negative, got {self.confidence}")
        if self.sampler not in SAMPLERS:
            raise InvalidInput(f"unknown sampler {self.sampler!r}; expected one of {sorted(SAMPLERS)}")
        if self.normalization not in NORMALIZATIONS:
            raise InvalidInput(f"unknown normalization {self.normalization!r}")
        if self.tie_policy not in TIE_POLICIES:
            raise InvalidInput(f"unknown tie policy {self.tie_policy!r}")
        if self.retry_factor <= 0:
            raise InvalidInput(f"retry_factor must be positive, got {self.retry_factor}")
        if self.confidence > 0 and self.rank_offset < 1:
            raise InvalidInput(
                f"rank_offset must be at least 1 when confidence > 0, got {self.rank_offset}"
            )


@dataclass
class RunReport:
    initial_cost: int
    final_cost: int
    tour: Tour
    costs: List[int] = field(default_factory=list)
    best_tour: Tour = field(default_factory=list)
    best_cost: Optional[int] = None


class VBSSSolver:
    """
    Value-Based Stochastic Sampling over a fixed city field.

    Each sampling pass ranks every city by its distance from the first city of
    the current tour, turns the ranks into selection probabilities biased by
    ``confidence`` and draws a complete replacement tour from them.
    """

    name = "vbss"

    def __init__(self, field: CityField, config: VBSSConfig = None, rng: RandomSource = None):
        self.field = field
        self.cfg = config or VBSSConfig()
        self.rng = rng or RandomSource(self.cfg.seed)
        self.state = TourState(field)

    @property
    def tour(self) -> Tour:
        return self.state.tour

    @property
    def max_draws(self) -> int:
        return self.cfg.retry_factor * len(self.field)

    def cost(self, tour: Optional[Sequence[int]] = None) -> int:
        if tour is None:
            return self.state.cost
        if not is_permutation(tour, len(self.field)):
            raise InvalidInput(f"tour is not a permutation of 0..{len(self.field) - 1}")
        return tour_length(self.field, tour)

    def reset(self) -> Tour:
        self.state.replace(random_tour(len(self.field), self.rng))
        return self.state.tour

    def run(self) -> Tuple[Tour, int]:
        tour = self.reset()
        return tour, self.state.cost

    def probabilities(self) -> np.ndarray:
        # Recomputed from scratch every pass.
        reference = self.state.tour[0]
        distances = distances_from_reference(self.field, reference)
        ranks = rank_distances(distances, self.cfg.tie_policy)
        return selection_probabilities(
            ranks,
            self.cfg.confidence,
            rank_offset=self.cfg.rank_offset,
            normalization=self.cfg.normalization,
        )

    def sample(self) -> Tour:
        sampler = SAMPLERS[self.cfg.sampler]
        new_tour = sampler(self.probabilities(), self.rng, self.max_draws)
        self.state.replace(new_tour)
        return self.state.tour

    def run_iterations(self, iterations: int) -> RunReport:
        if iterations < 0:
            raise InvalidInput(f"iterations must be non-negative, got {iterations}")
        self.sample()
        initial = self.state.cost
        costs = [initial]
        best_tour, best_cost = self.state.tour, initial
        for _ in range(iterations):
            self.sample()
            cost = self.state.cost
            costs.append(cost)
            if cost < best_cost:
                best_tour, best_cost = self.state.tour, cost
        return RunReport(
            initial_cost=initial,
            final_cost=self.state.cost,
            tour=self.state.tour,
            costs=costs,
            best_tour=best_tour,
            best_cost=best_cost,
        )

    def solve(self, iterations: int = 0, optimum: Optional[float] = None) -> SolveResult:
        report = self.run_iterations(iterations)
        return SolveResult(
            tour=report.tour,
            length=float(report.final_cost),
            solver_name=self.name,
            optimum=optimum,
        )
