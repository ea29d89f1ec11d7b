import random

from tsp_vbss.field import CityField
from tsp_vbss.random_source import RandomSource
from tsp_vbss.solvers.vbss import VBSSConfig, VBSSSolver


def main():
    rng = random.Random(7)
    points = [(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(30)]
    field = CityField.from_points(points)

    root = RandomSource(123)
    for idx, confidence in enumerate((0.0, 1.0, 2.0, 4.0)):
        cfg = VBSSConfig(confidence=confidence)
        solver = VBSSSolver(field, cfg, rng=root.spawn(idx))
        solver.reset()
        report = solver.run_iterations(50)
        print(
            f"B={confidence}: first={report.initial_cost} final={report.final_cost} "
            f"best={report.best_cost}"
        )


if __name__ == "__main__":
    main()
