import threading

import networkx as nx
import pytest

from netstats.graph_builder import build_graph
from netstats.parallel import AnalysisCancelled
from netstats.results import UNDEFINED, SimilarPair, is_undefined
from netstats.similarity import (
    jaccard,
    jaccard_similarity,
    most_dissimilar_pair,
    most_similar_pair,
    rank_similarity,
)


def test_jaccard_basic():
    assert jaccard({1, 2}, {2, 3}) == pytest.approx(1 / 3)
    assert jaccard({1, 2}, {1, 2}) == 1.0
    assert jaccard({1}, {2}) == 0.0
    assert jaccard(set(), {2}) == 0.0


def test_jaccard_of_two_empty_sets_is_undefined():
    assert jaccard(set(), set()) is UNDEFINED


def test_triangle_pairs(triangle):
    # every pair shares exactly the third node: 1 / |{1, 2, 3}|
    for u, v in [(1, 2), (1, 3), (2, 3)]:
        assert jaccard_similarity(triangle, u, v) == pytest.approx(1 / 3)

    # all tied -> smallest pair wins both searches
    assert most_similar_pair(triangle) == SimilarPair(1, 2, pytest.approx(1 / 3))
    assert most_dissimilar_pair(triangle) == SimilarPair(1, 2, pytest.approx(1 / 3))


def test_square_extremes_and_tie_break(square):
    ext = rank_similarity(square)

    # (1, 3) and (2, 4) both have identical neighbourhoods
    assert ext.most_similar == SimilarPair(1, 3, 1.0)
    # four pairs share nothing, (1, 2) is the smallest
    assert ext.most_dissimilar == SimilarPair(1, 2, 0.0)
    assert ext.pairs_compared == 6
    assert ext.undefined_pairs == 0
    assert ext.exact


def test_result_does_not_depend_on_edge_order(square):
    flipped = build_graph([(1, 4), (4, 3), (3, 2), (2, 1)])
    assert rank_similarity(flipped) == rank_similarity(square)


def test_undefined_pairs_skipped():
    G = build_graph([(1, 2)], nodes=[5, 6])
    ext = rank_similarity(G)

    assert ext.pairs_compared == 6
    assert ext.undefined_pairs == 1  # (5, 6)
    assert ext.most_similar == SimilarPair(1, 2, 0.0)
    assert ext.most_dissimilar == SimilarPair(1, 2, 0.0)


def test_all_pairs_undefined():
    G = build_graph([], nodes=[1, 2, 3])
    ext = rank_similarity(G)

    assert is_undefined(ext.most_similar)
    assert is_undefined(ext.most_dissimilar)
    assert ext.undefined_pairs == 3


def test_fewer_than_two_nodes(lonely):
    assert most_similar_pair(lonely) is UNDEFINED
    assert most_dissimilar_pair(build_graph([])) is UNDEFINED


def test_unknown_node_rejected(triangle):
    with pytest.raises(ValueError):
        jaccard_similarity(triangle, 1, 99)
    with pytest.raises(ValueError):
        rank_similarity(triangle, nodes=[1, 99])


def test_scores_in_unit_interval():
    G = build_graph(nx.gnm_random_graph(25, 50, seed=3).edges())
    nodes = sorted(G.nodes())
    for i, u in enumerate(nodes):
        for v in nodes[i + 1:]:
            score = jaccard_similarity(G, u, v)
            assert is_undefined(score) or 0.0 <= score <= 1.0


def test_matches_brute_force():
    G = build_graph(nx.gnm_random_graph(20, 45, seed=11).edges())

    scored = []
    for u in G:
        for v in G:
            if u != v:
                s = jaccard_similarity(G, u, v)
                if not is_undefined(s):
                    scored.append((s, min(u, v), max(u, v)))

    best = max(s for s, _, _ in scored)
    worst = min(s for s, _, _ in scored)
    expected_hi = min((a, b) for s, a, b in scored if s == best)
    expected_lo = min((a, b) for s, a, b in scored if s == worst)

    ext = rank_similarity(G)
    assert (ext.most_similar.u, ext.most_similar.v) == expected_hi
    assert (ext.most_dissimilar.u, ext.most_dissimilar.v) == expected_lo


def test_restricted_to_subset(square):
    ext = rank_similarity(square, nodes=[2, 4, 3])

    assert not ext.exact
    assert ext.nodes_compared == 3
    assert ext.pairs_compared == 3
    assert ext.most_similar == SimilarPair(2, 4, 1.0)
    assert ext.most_dissimilar == SimilarPair(2, 3, 0.0)


def test_sampling_is_deterministic():
    G = build_graph(nx.gnm_random_graph(60, 150, seed=5).edges())

    a = rank_similarity(G, sample=20, seed=9)
    b = rank_similarity(G, sample=20, seed=9)

    assert a == b
    assert not a.exact
    assert a.nodes_compared == 20


def test_chunking_does_not_change_answer():
    G = build_graph(nx.gnm_random_graph(40, 90, seed=2).edges())

    expected = rank_similarity(G, chunk_size=1000)
    for size in (1, 3, 7):
        assert rank_similarity(G, chunk_size=size) == expected


def test_process_pool_matches_sequential():
    G = build_graph(nx.gnm_random_graph(30, 70, seed=4).edges())

    assert rank_similarity(G, workers=2, chunk_size=5) == rank_similarity(G)


def test_cancel(square):
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(AnalysisCancelled):
        rank_similarity(square, cancel=cancel)
