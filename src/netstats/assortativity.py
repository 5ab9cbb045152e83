# degree assortativity: do popular people befriend popular people?
#
# pearson correlation between the degrees at the two ends of every edge, counted
# in both directions, with the graph's mean degree as the centre for both ends.
# a regular graph (everyone has the same degree) has nothing to correlate, that
# comes back as UNDEFINED instead of a 0/0 nan

import logging

import numpy as np # pyright: ignore[reportMissingImports]

from netstats.results import UNDEFINED

logger = logging.getLogger(__name__)


def degree_assortativity(graph):

    if graph.number_of_edges() == 0:
        return UNDEFINED

    degree = dict(graph.degree())
    mean_degree = np.mean(list(degree.values()))

    # every undirected edge contributes (u, v) and (v, u)
    ends = np.array([(degree[u], degree[v]) for u, v in graph.edges()], dtype=float)
    x = np.concatenate([ends[:, 0], ends[:, 1]]) - mean_degree
    y = np.concatenate([ends[:, 1], ends[:, 0]]) - mean_degree

    numerator = float(np.sum(x * y))
    denominator = float(np.sqrt(np.sum(x * x) * np.sum(y * y)))

    if denominator == 0.0:
        logger.debug("zero degree variance across edge ends, assortativity undefined")
        return UNDEFINED

    # clip away float noise just past +-1
    return float(np.clip(numerator / denominator, -1.0, 1.0))
