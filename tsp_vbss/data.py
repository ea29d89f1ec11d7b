from dataclasses import dataclass
from pathlib import Path
from typing import Hashable, Iterable, List, Optional

import tsplib95

from .errors import InvalidInput
from .field import CityField


@dataclass
class Instance:
    name: str
    path: Path
    field: CityField
    nodes: List[Hashable]
    optimum: Optional[float]

    def labels(self, tour: Iterable[int]) -> List[Hashable]:
        """Map a tour of city indices back to the file's node labels."""
        return [self.nodes[i] for i in tour]


def _solution_candidates(path: Path) -> Iterable[Path]:
    yield path.with_suffix(".opt.tour")
    for ext in (".opt.tour", ".opt", ".tour"):
        yield path.parent / "solutions" / f"{path.stem}{ext}"


def _read_dimension(path: Path) -> Optional[int]:
    try:
        with path.open("r") as f:
            for line in f:
                if "DIMENSION" in line.upper():
                    parts = line.replace(":", " ").split()
                    for token in parts:
                        if token.isdigit():
                            return int(token)
        return None
    except OSError:
        return None


def _load_optimum(problem, path: Path) -> Optional[float]:
    for candidate in _solution_candidates(path):
        if not candidate.exists():
            continue
        try:
            tour_file = tsplib95.parse(candidate.read_text())
            nodes = list(tour_file.tours[0])
        except Exception:
            continue
        dist = 0.0
        for i in range(len(nodes)):
            a = nodes[i]
            b = nodes[(i + 1) % len(nodes)]
            dist += problem.get_weight(a, b)
        return float(dist)
    return None


def load_instance(path: Path) -> Instance:
    path = Path(path)
    problem = tsplib95.load(path)
    if not problem.node_coords:
        raise InvalidInput(f"{path} has no NODE_COORD_SECTION")
    if problem.edge_weight_type != "EUC_2D":
        raise InvalidInput(f"{path} uses {problem.edge_weight_type} distances; only EUC_2D is supported")
    graph = problem.get_graph()
    field, nodes = CityField.from_graph(graph)
    optimum = _load_optimum(problem, path)
    return Instance(name=problem.name, path=path, field=field, nodes=nodes, optimum=optimum)


def load_tsplib_instances(
    root: Path, max_nodes: Optional[int] = None, max_instances: Optional[int] = None
) -> List[Instance]:
    tsp_files = sorted(Path(root).glob("*.tsp"))
    instances: List[Instance] = []
    for p in tsp_files:
        if max_nodes is not None:
            dim = _read_dimension(p)
            if dim is not None and dim > max_nodes:
                continue
        try:
            instances.append(load_instance(p))
        except InvalidInput:
            # explicit-weight instances carry no coordinates
            continue
        if max_instances is not None and len(instances) >= max_instances:
            break
    return instances
