# global clustering coefficient (a.k.a. transitivity)
#
#   closed triplets   = for every node, how many pairs of its neighbours are connected
#   possible triplets = for every node with degree >= 2, deg * (deg - 1) / 2
#
# LIMITATION: counting connected neighbour pairs costs ~sum(deg^2), so a handful
# of huge hubs dominate the runtime on power-law-ish social graphs

import logging

import networkx as nx # pyright: ignore[reportMissingModuleSource]

logger = logging.getLogger(__name__)


def clustering_counts(graph):

    # nx.triangles(v) is exactly the number of connected neighbour pairs of v
    triangles = nx.triangles(graph)

    closed = 0
    possible = 0
    for node, deg in graph.degree():
        if deg < 2:
            continue
        closed += triangles[node]
        possible += deg * (deg - 1) // 2

    return closed, possible


def global_clustering_coefficient(graph) -> float:
    """closed / possible triplets, 0.0 when no node has two neighbours"""

    closed, possible = clustering_counts(graph)
    logger.debug("closed triplets=%d possible=%d", closed, possible)

    if possible == 0:
        return 0.0
    return closed / possible
