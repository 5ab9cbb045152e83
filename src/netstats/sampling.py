# deterministic sampling. same seed + same input = same sample, every time,
# regardless of the order the edges or nodes came in

import random

from netstats.constants import DEFAULT_SEED


def _check_size(k):
    if isinstance(k, bool) or not isinstance(k, int) or k < 0:
        raise ValueError(f"sample size must be a non-negative integer, got {k!r}")


def sample_nodes(graph, k, seed=DEFAULT_SEED) -> list:

    # sorted first so the pick doesnt depend on insertion order
    _check_size(k)

    nodes = sorted(graph.nodes())
    if k >= len(nodes):
        return nodes
    return sorted(random.Random(seed).sample(nodes, k))


def sample_edges(edges, k, seed=DEFAULT_SEED) -> list:
    """
    k edges picked with a seeded rng, kept in their original relative order.
    k >= len(edges) returns a copy of the whole list
    """
    _check_size(k)

    edges = list(edges)
    if k >= len(edges):
        return edges

    keep = sorted(random.Random(seed).sample(range(len(edges)), k))
    return [edges[i] for i in keep]
