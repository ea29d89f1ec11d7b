import networkx as nx
import pytest

from tsp_vbss.errors import InvalidInput
from tsp_vbss.field import CityField, nint


def test_unit_square_distances_round_to_one(unit_square):
    assert unit_square.distance(0, 1) == 1
    assert unit_square.distance(0, 2) == 1  # sqrt(2) rounds down
    assert unit_square.distance(3, 3) == 0


def test_distance_is_symmetric_with_zero_diagonal(random_field):
    n = len(random_field)
    for i in range(n):
        assert random_field.distance(i, i) == 0
        for j in range(n):
            assert random_field.distance(i, j) == random_field.distance(j, i)
            assert random_field.distance(i, j) >= 0


def test_distances_from_matches_pairwise(random_field):
    for i in range(len(random_field)):
        row = random_field.distances_from(i)
        assert list(row) == [random_field.distance(i, j) for j in range(len(random_field))]


def test_halves_round_up():
    assert nint(0.5) == 1
    assert nint(2.5) == 3
    field = CityField(2, [0.0, 0.5], [0.0, 0.0])
    assert field.distance(0, 1) == 1


@pytest.mark.parametrize(
    "n,xs,ys",
    [
        (0, [], []),
        (-1, [], []),
        (3, [0.0, 1.0], [0.0, 1.0, 2.0]),
        (2, [0.0, 1.0], [0.0]),
    ],
)
def test_invalid_construction(n, xs, ys):
    with pytest.raises(InvalidInput):
        CityField(n, xs, ys)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        CityField(0, [], [])


def test_coordinates_are_read_only(unit_square):
    with pytest.raises(ValueError):
        unit_square.xs[0] = 5.0


def test_from_graph_orders_by_node_label():
    g = nx.Graph()
    g.add_node(2, coord=(3.0, 4.0))
    g.add_node(1, coord=(0.0, 0.0))
    field, nodes = CityField.from_graph(g)
    assert nodes == [1, 2]
    assert field.distance(0, 1) == 5


def test_from_graph_requires_coordinates():
    g = nx.Graph()
    g.add_node(1)
    with pytest.raises(InvalidInput):
        CityField.from_graph(g)
