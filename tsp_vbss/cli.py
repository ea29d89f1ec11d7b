import argparse
import sys
import time
from pathlib import Path

from tsp_vbss.data import load_instance, load_tsplib_instances
from tsp_vbss.errors import VBSSError
from tsp_vbss.evaluation import aggregate_fitness, evaluate_instance
from tsp_vbss.random_source import RandomSource
from tsp_vbss.solvers.heuristics import NORMALIZATIONS, TIE_POLICIES
from tsp_vbss.solvers.sampling import SAMPLERS
from tsp_vbss.solvers.vbss import VBSSConfig, VBSSSolver


def log(msg: str) -> None:
    ts = time.strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", flush=True)


def _config(args) -> VBSSConfig:
    return VBSSConfig(
        confidence=args.confidence,
        seed=args.seed,
        sampler=args.sampler,
        normalization=args.normalization,
        tie_policy=args.tie_policy,
        rank_offset=args.rank_offset,
        retry_factor=args.retry_factor,
    )


def solve(args) -> None:
    t0 = time.perf_counter()
    instance = load_instance(Path(args.tsp))
    log(f"loaded {instance.name} ({len(instance.field)} cities) in {time.perf_counter() - t0:.2f}s")
    solver = VBSSSolver(instance.field, _config(args))
    _, cost = solver.run()
    log(f"initial tour cost={cost}")
    report = solver.run_iterations(args.iterations)
    print(report.initial_cost)
    print(report.final_cost)
    log(f"best cost over {len(report.costs)} passes={report.best_cost}")
    if instance.optimum:
        log(f"optimum={instance.optimum:.0f} gap={(report.final_cost - instance.optimum) / instance.optimum:.2%}")
    if args.show_tour:
        print(" ".join(str(n) for n in instance.labels(report.tour)))


def bench(args) -> None:
    data_root = Path(args.data_root)
    log(f"loading data from {data_root}")
    instances = load_tsplib_instances(data_root, max_nodes=args.max_nodes)
    if not instances:
        raise RuntimeError(
            f"No coordinate TSPLIB instances found in {data_root}. "
            "Place .tsp (and optional .opt.tour) files there before running."
        )
    cfg = _config(args)
    root_rng = RandomSource(cfg.seed)
    fitnesses = []
    for idx, inst in enumerate(instances):
        fit = evaluate_instance(inst, cfg, args.iterations, rng=root_rng.spawn(idx))
        fitnesses.append(fit)
        log(
            f"{inst.name}: first={fit.initial_length:.0f} final={fit.length:.0f} "
            f"best={fit.best_length:.0f} gap={fit.gap:.2%} runtime={fit.runtime:.2f}s"
        )
    agg = aggregate_fitness(fitnesses)
    log(f"mean length={agg['length']:.1f} mean gap={agg['gap']:.2%} mean runtime={agg['runtime']:.2f}s")


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--confidence", "-B", type=float, default=1.0)
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--sampler", choices=sorted(SAMPLERS), default="cdf")
    parser.add_argument("--normalization", choices=NORMALIZATIONS, default="symmetric")
    parser.add_argument("--tie-policy", choices=TIE_POLICIES, default="ordinal")
    parser.add_argument("--rank-offset", type=int, default=1)
    parser.add_argument("--retry-factor", type=int, default=100)


def main(argv=None):
    parser = argparse.ArgumentParser(description="VBSS TSP CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    solve_parser = subparsers.add_parser("solve", help="Sample tours for one TSPLIB instance")
    solve_parser.add_argument("--tsp", required=True)
    solve_parser.add_argument("--show-tour", action="store_true")
    _add_common(solve_parser)
    solve_parser.set_defaults(func=solve)

    bench_parser = subparsers.add_parser("bench", help="Run VBSS over every instance in a directory")
    bench_parser.add_argument("--data-root", default="data/tsplib")
    bench_parser.add_argument("--max-nodes", type=int, default=None)
    _add_common(bench_parser)
    bench_parser.set_defaults(func=bench)

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except VBSSError as exc:
        log(f"error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
