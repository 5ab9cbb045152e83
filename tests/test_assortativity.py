import pytest

from netstats.assortativity import degree_assortativity
from netstats.graph_builder import build_graph
from netstats.results import UNDEFINED, is_undefined


def test_regular_graphs_are_undefined(square, triangle):
    assert degree_assortativity(square) is UNDEFINED
    assert degree_assortativity(triangle) is UNDEFINED


def test_no_edges_is_undefined(lonely):
    assert is_undefined(degree_assortativity(lonely))
    assert is_undefined(degree_assortativity(build_graph([])))


def test_star_is_disassortative(star):
    # mean degree 1.5: sum(xy) = 6 * (1.5 * -0.5), sum(x^2) = 3 * 2.25 + 3 * 0.25
    assert degree_assortativity(star) == pytest.approx(-0.6)


def test_path_of_three():
    G = build_graph([(0, 1), (1, 2)])
    # mean 4/3: sum(xy) = -8/9, sum(x^2) = 10/9
    assert degree_assortativity(G) == pytest.approx(-0.8)


def test_hubs_with_hubs_is_assortative():
    # K4 (all degree 3) next to a lone edge (degree 1): every edge joins equal degrees
    G = build_graph([(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4), (5, 6)])
    assert degree_assortativity(G) == pytest.approx(1.0)


def test_bridged_triangles_are_slightly_disassortative():
    G = build_graph([(1, 2), (2, 3), (1, 3), (4, 5), (5, 6), (4, 6), (3, 4)])
    r = degree_assortativity(G)

    assert -1.0 <= r < 0


def test_undefined_is_distinguishable_from_zero():
    assert UNDEFINED != 0.0
    assert not UNDEFINED
    assert repr(UNDEFINED) == 'UNDEFINED'
