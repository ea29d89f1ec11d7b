import random

import pytest

from tsp_vbss.field import CityField


SQUARE_TSP = """NAME: square4
TYPE: TSP
DIMENSION: 4
EDGE_WEIGHT_TYPE: EUC_2D
NODE_COORD_SECTION
1 0 0
2 0 10
3 10 10
4 10 0
EOF
"""

SQUARE_OPT_TOUR = """NAME: square4.opt.tour
TYPE: TOUR
DIMENSION: 4
TOUR_SECTION
1
2
3
4
-1
EOF
"""

EXPLICIT_TSP = """NAME: explicit3
TYPE: TSP
DIMENSION: 3
EDGE_WEIGHT_TYPE: EXPLICIT
EDGE_WEIGHT_FORMAT: FULL_MATRIX
EDGE_WEIGHT_SECTION
0 1 2
1 0 3
2 3 0
EOF
"""

GEO_TSP = """NAME: geo3
TYPE: TSP
DIMENSION: 3
EDGE_WEIGHT_TYPE: GEO
NODE_COORD_SECTION
1 38.24 20.42
2 39.57 26.15
3 40.56 25.32
EOF
"""


@pytest.fixture
def unit_square():
    return CityField(4, [0.0, 0.0, 1.0, 1.0], [0.0, 1.0, 1.0, 0.0])


@pytest.fixture
def random_field():
    rng = random.Random(42)
    points = [(rng.uniform(0, 1000), rng.uniform(0, 1000)) for _ in range(15)]
    return CityField.from_points(points)


@pytest.fixture
def tsplib_dir(tmp_path):
    (tmp_path / "square4.tsp").write_text(SQUARE_TSP)
    (tmp_path / "square4.opt.tour").write_text(SQUARE_OPT_TOUR)
    return tmp_path
