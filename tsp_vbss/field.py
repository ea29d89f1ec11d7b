import math
from typing import Hashable, List, Sequence, Tuple

import networkx as nx
import numpy as np

from .errors import InvalidInput


def nint(value: float) -> int:
    # TSPLIB rounding: halves go up, unlike Python's round().
    return int(math.floor(value + 0.5))


class CityField:
    """
    Read-only 2D city coordinates with an on-demand integer Euclidean distance.
    """

    def __init__(self, n: int, xs: Sequence[float], ys: Sequence[float]):
        if n <= 0:
            raise InvalidInput(f"number of cities must be positive, got {n}")
        if len(xs) != n or len(ys) != n:
            raise InvalidInput(
                f"coordinate arrays must have length {n}, got {len(xs)} and {len(ys)}"
            )
        self.xs = np.array(xs, dtype=float)
        self.ys = np.array(ys, dtype=float)
        self.xs.setflags(write=False)
        self.ys.setflags(write=False)

    def __len__(self) -> int:
        return self.xs.shape[0]

    def distance(self, i: int, j: int) -> int:
        if i == j:
            return 0
        dx = self.xs[i] - self.xs[j]
        dy = self.ys[i] - self.ys[j]
        return nint(math.sqrt(dx * dx + dy * dy))

    def distances_from(self, i: int) -> np.ndarray:
        dx = self.xs - self.xs[i]
        dy = self.ys - self.ys[i]
        d = np.sqrt(dx * dx + dy * dy)
        out = np.floor(d + 0.5).astype(np.int64)
        out[i] = 0
        return out

    @classmethod
    def from_points(cls, points: Sequence[Tuple[float, float]]) -> "CityField":
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return cls(len(points), xs, ys)

    @classmethod
    def from_graph(cls, graph: nx.Graph) -> Tuple["CityField", List[Hashable]]:
        nodes = sorted(graph.nodes())
        points = []
        for node in nodes:
            coord = graph.nodes[node].get("coord")
            if coord is None:
                raise InvalidInput(f"node {node!r} has no 'coord' attribute")
            points.append((coord[0], coord[1]))
        return cls.from_points(points), nodes
