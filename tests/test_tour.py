import math

import pytest

from tsp_vbss.errors import InvalidInput
from tsp_vbss.field import CityField
from tsp_vbss.random_source import RandomSource
from tsp_vbss.solvers.base import SolveResult, TourState, is_permutation, random_tour, tour_length


def test_random_tour_is_permutation():
    rng = RandomSource(3)
    for n in (1, 2, 5, 40):
        assert is_permutation(random_tour(n, rng), n)


def test_random_tour_uses_two_draws_per_city():
    a = RandomSource(11)
    b = RandomSource(11)
    tour = random_tour(6, a)
    expected = list(range(6))
    for _ in range(6):
        i, j = b.randint(6), b.randint(6)
        expected[i], expected[j] = expected[j], expected[i]
    assert tour == expected
    assert a.random() == b.random()


def test_single_city_tour():
    assert random_tour(1, RandomSource(0)) == [0]
    field = CityField(1, [5.0], [7.0])
    assert tour_length(field, [0]) == 0


def test_unit_square_perimeter(unit_square):
    assert tour_length(unit_square, [0, 1, 2, 3]) == 4
    assert tour_length(unit_square, [0, 2, 1, 3]) == 4


def test_cost_invariant_under_rotation_and_reversal(random_field):
    tour = random_tour(len(random_field), RandomSource(5))
    base = tour_length(random_field, tour)
    for k in range(len(tour)):
        assert tour_length(random_field, tour[k:] + tour[:k]) == base
    assert tour_length(random_field, tour[::-1]) == base


def test_tour_state_replace_validates(unit_square):
    state = TourState(unit_square)
    assert state.tour == [0, 1, 2, 3]
    with pytest.raises(InvalidInput):
        state.replace([0, 1, 1, 3])
    with pytest.raises(InvalidInput):
        state.replace([0, 1, 2])
    assert state.tour == [0, 1, 2, 3]


def test_tour_state_cost_follows_replacement(random_field):
    state = TourState(random_field)
    identity_cost = state.cost
    new = list(reversed(range(len(random_field))))
    new[0], new[3] = new[3], new[0]
    state.replace(new)
    assert state.cost == tour_length(random_field, new)
    assert identity_cost == tour_length(random_field, list(range(len(random_field))))


def test_tour_property_is_a_copy(unit_square):
    state = TourState(unit_square)
    state.tour.append(99)
    assert len(state) == 4


def test_solve_result_gap():
    assert SolveResult([0], 110.0, "vbss", optimum=100.0).gap == pytest.approx(0.1)
    assert math.isinf(SolveResult([0], 110.0, "vbss").gap)
