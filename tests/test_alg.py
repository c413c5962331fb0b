import math

import pytest

from src.pathfinding.alg import astar, dijkstra, fewest_hops
from src.pathfinding.geo import haversine_km
from src.pathfinding.network import Airport, Route, build_network


# -------------------------
# Helpers
# -------------------------

def make_network(edges, codes=None):
    """Build a network from (from, to, distance) triples."""
    codes = codes or sorted({c for e in edges for c in e[:2]})
    airports = [Airport(code=c) for c in codes]
    routes = [Route(from_code=a, to_code=b, distance_km=d) for a, b, d in edges]
    return build_network(airports, routes)


ALL_SEARCHES = [dijkstra, fewest_hops, astar]
DISTANCE_SEARCHES = [dijkstra, astar]


# -------------------------
# Concrete scenario
# -------------------------

@pytest.fixture
def equator_network():
    airports = [
        Airport(code="A", lat=0.0, lon=0.0),
        Airport(code="B", lat=0.0, lon=1.0),
        Airport(code="C", lat=0.0, lon=2.0),
    ]
    routes = [Route("A", "B"), Route("B", "C")]
    return build_network(airports, routes)


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_two_hop_equator_scenario(equator_network, search):
    result = search(equator_network, "A", "C")

    assert result.path == ("A", "B", "C")
    assert result.total_distance == pytest.approx(222.39, abs=0.01)
    assert [(leg.from_code, leg.to_code) for leg in result.legs] == [("A", "B"), ("B", "C")]


def test_one_degree_leg_is_about_111_km(equator_network):
    result = dijkstra(equator_network, "A", "B")
    assert result.total_distance == pytest.approx(111.19, abs=0.01)


# -------------------------
# Degenerate and no-result cases
# -------------------------

@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_origin_equals_destination(search):
    network = make_network([("A", "B", 5.0)])

    result = search(network, "A", "A")

    assert result.path == ("A",)
    assert result.legs == ()
    assert result.total_distance == 0.0


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_origin_equals_destination_isolated_airport(search):
    network = make_network([("A", "B", 5.0)], codes=["A", "B", "Z"])
    result = search(network, "Z", "Z")
    assert result.path == ("Z",)


@pytest.mark.parametrize("search", ALL_SEARCHES)
@pytest.mark.parametrize("origin,destination", [("X", "A"), ("A", "X"), ("X", "X")])
def test_unknown_airport_returns_none(search, origin, destination):
    network = make_network([("A", "B", 5.0)])
    assert search(network, origin, destination) is None


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_disconnected_returns_none(search):
    network = make_network([("A", "B", 5.0), ("C", "D", 1.0)])
    assert search(network, "A", "D") is None


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_routes_are_directed(search):
    network = make_network([("A", "B", 5.0)])

    assert search(network, "A", "B").path == ("A", "B")
    assert search(network, "B", "A") is None


# -------------------------
# Shortest path behaviour
# -------------------------

@pytest.mark.parametrize("search", DISTANCE_SEARCHES)
def test_prefers_cheaper_multi_hop_over_direct(search):
    network = make_network(
        [("A", "C", 10.0), ("A", "B", 3.0), ("B", "C", 4.0)]
    )

    result = search(network, "A", "C")

    assert result.path == ("A", "B", "C")
    assert result.total_distance == 7.0


def test_fewest_hops_prefers_direct_leg():
    network = make_network(
        [("A", "B", 3.0), ("B", "C", 4.0), ("A", "C", 10.0)]
    )

    result = fewest_hops(network, "A", "C")

    assert result.path == ("A", "C")
    assert result.total_distance == 10.0


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_parallel_edges_use_cheapest(search):
    network = make_network([("A", "B", 10.0), ("A", "B", 4.0), ("A", "B", 7.0)])

    result = search(network, "A", "B")

    assert result.total_distance == 4.0
    assert result.legs[0].distance_km == 4.0


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_self_loops_do_not_loop_forever(search):
    network = make_network([("A", "A", 0.0), ("A", "A", 2.0), ("A", "B", 3.0), ("B", "B", 1.0)])

    result = search(network, "A", "B")

    assert result.path == ("A", "B")
    assert result.total_distance == 3.0


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_zero_weight_cycle_terminates(search):
    network = make_network([("A", "B", 0.0), ("B", "A", 0.0), ("B", "C", 1.0)])

    result = search(network, "A", "C")

    assert result.path == ("A", "B", "C")
    assert result.total_distance == 1.0


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_negative_zero_weight_not_in_output(search):
    network = make_network([("A", "B", -0.0)])

    result = search(network, "A", "B")

    assert result.total_distance == 0.0
    assert math.copysign(1.0, result.total_distance) == 1.0
    assert math.copysign(1.0, result.legs[0].distance_km) == 1.0


# -------------------------
# Tie-breaking
# -------------------------

@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_equal_cost_tie_broken_by_discovery_order(search):
    via_b = make_network(
        [("A", "B", 1.0), ("A", "C", 1.0), ("B", "D", 1.0), ("C", "D", 1.0)],
        codes=["A", "B", "C", "D"],
    )
    via_c = make_network(
        [("A", "C", 1.0), ("A", "B", 1.0), ("C", "D", 1.0), ("B", "D", 1.0)],
        codes=["A", "B", "C", "D"],
    )

    assert search(via_b, "A", "D").path == ("A", "B", "D")
    assert search(via_c, "A", "D").path == ("A", "C", "D")


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_repeated_calls_are_identical(search):
    network = make_network(
        [
            ("A", "B", 2.0), ("A", "C", 1.0), ("C", "B", 1.0),
            ("B", "D", 1.5), ("C", "D", 2.5), ("D", "E", 0.5),
        ]
    )

    first = search(network, "A", "E")
    second = search(network, "A", "E")

    assert first == second
    assert first.total_distance == second.total_distance


# -------------------------
# Properties over a larger network
# -------------------------

@pytest.fixture
def grid_network():
    """5x5 grid, bidirectional, weights = great-circle distance."""
    airports = [
        Airport(code=f"G{r}{c}", lat=float(r), lon=float(c))
        for r in range(5)
        for c in range(5)
    ]
    routes = []
    for r in range(5):
        for c in range(5):
            for dr, dc in ((0, 1), (1, 0), (1, 1)):
                nr, nc = r + dr, c + dc
                if nr < 5 and nc < 5:
                    routes.append(Route(f"G{r}{c}", f"G{nr}{nc}"))
                    routes.append(Route(f"G{nr}{nc}", f"G{r}{c}"))
    return build_network(airports, routes)


@pytest.mark.parametrize("search", ALL_SEARCHES)
def test_path_endpoints_and_total_match_segments(grid_network, search):
    codes = list(grid_network.airports)
    for origin in codes[::4]:
        for destination in codes[::3]:
            result = search(grid_network, origin, destination)
            assert result.path[0] == origin
            assert result.path[-1] == destination
            assert len(result.legs) == len(result.path) - 1
            assert result.total_distance == pytest.approx(
                sum(leg.distance_km for leg in result.legs)
            )
            for leg, (a, b) in zip(result.legs, zip(result.path, result.path[1:])):
                assert (leg.from_code, leg.to_code) == (a, b)
                assert grid_network.has_route(a, b)


def test_astar_matches_dijkstra_distance(grid_network):
    codes = list(grid_network.airports)
    for origin in codes:
        for destination in codes[::2]:
            expected = dijkstra(grid_network, origin, destination).total_distance
            actual = astar(grid_network, origin, destination).total_distance
            assert actual == pytest.approx(expected)


def test_dijkstra_follows_diagonal_chain_on_grid(grid_network):
    origin = grid_network.airports["G00"]
    destination = grid_network.airports["G44"]

    result = dijkstra(grid_network, "G00", "G44")

    # Diagonal edges make the straight chain available
    assert result.path == ("G00", "G11", "G22", "G33", "G44")
    assert result.total_distance >= haversine_km(
        origin.lat, origin.lon, destination.lat, destination.lon
    ) - 1e-9
