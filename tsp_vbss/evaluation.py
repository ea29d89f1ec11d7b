import time
from dataclasses import dataclass
from typing import Dict, List

from .data import Instance
from .random_source import RandomSource
from .solvers.vbss import VBSSConfig, VBSSSolver


@dataclass
class Fitness:
    length: float
    initial_length: float
    best_length: float
    runtime: float
    gap: float
    instance: str


def evaluate_instance(
    instance: Instance,
    config: VBSSConfig,
    iterations: int = 0,
    rng: RandomSource = None,
) -> Fitness:
    solver = VBSSSolver(instance.field, config, rng=rng)
    solver.reset()
    start = time.perf_counter()
    report = solver.run_iterations(iterations)
    runtime = time.perf_counter() - start
    length = float(report.final_cost)
    optimum = instance.optimum
    gap = float("inf") if not optimum else (length - optimum) / optimum
    return Fitness(
        length=length,
        initial_length=float(report.initial_cost),
        best_length=float(report.best_cost),
        runtime=runtime,
        gap=gap,
        instance=instance.name,
    )


def aggregate_fitness(fitnesses: List[Fitness]) -> Dict[str, float]:
    if not fitnesses:
        return {"length": float("inf"), "gap": float("inf"), "runtime": float("inf")}
    length = sum(f.length for f in fitnesses) / len(fitnesses)
    gap = sum(f.gap for f in fitnesses if f.gap != float("inf")) / max(
        1, sum(1 for f in fitnesses if f.gap != float("inf"))
    )
    runtime = sum(f.runtime for f in fitnesses) / len(fitnesses)
    return {"length": length, "gap": gap, "runtime": runtime}
