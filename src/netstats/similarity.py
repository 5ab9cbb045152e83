# jaccard similarity between neighbour sets, and the most / least similar pair of users.
#
# jaccard is symmetric so each unordered pair is scored once and reported as (min, max).
# pairs of two isolated nodes have an empty union -> UNDEFINED, those are counted but
# never win the max/min search.
#
# ties go to the lexicographically smallest (u, v). the search is a plain min() over
# (-score, u, v) for the max and (score, u, v) for the min, so chunks can be reduced
# in any order and still agree with the sequential run.
#
# LIMITATION: O(V^2) pairs. restrict with nodes=... or sample=k for big graphs

import logging
from functools import partial

from netstats.constants import DEFAULT_CHUNK_SIZE, DEFAULT_SEED
from netstats.graph_builder import adjacency
from netstats.parallel import check_cancel, interleaved, map_chunks
from netstats.results import UNDEFINED, SimilarityExtremes, SimilarPair
from netstats.sampling import sample_nodes

logger = logging.getLogger(__name__)


def jaccard(set_a, set_b):

    inter = len(set_a & set_b)
    union = len(set_a) + len(set_b) - inter
    if union == 0:
        return UNDEFINED
    return inter / union


def jaccard_similarity(graph, u, v):

    if u not in graph or v not in graph:
        raise ValueError(f"both nodes must be in the graph, got ({u}, {v})")
    return jaccard(set(graph[u]), set(graph[v]))


def _similarity_chunk(shared, positions, cancel=None):
    """
    scores every pair (order[i], order[j]) with i in positions and j > i.
    shared is (neighbours, order), sent to each worker once.

    returns (max_key, min_key, pairs, undefined), keys are None when nothing defined was seen
    """
    neighbours, order = shared
    max_key = None
    min_key = None
    pairs = 0
    undefined = 0

    for i in positions:
        check_cancel(cancel)
        u = order[i]
        nu = neighbours[u]

        for j in range(i + 1, len(order)):
            v = order[j]
            pairs += 1
            score = jaccard(nu, neighbours[v])
            if score is UNDEFINED:
                undefined += 1
                continue

            hi = (-score, u, v)
            lo = (score, u, v)
            if max_key is None or hi < max_key:
                max_key = hi
            if min_key is None or lo < min_key:
                min_key = lo

    return max_key, min_key, pairs, undefined


def _reduce_keys(keys):

    keys = [k for k in keys if k is not None]
    return min(keys) if keys else None


def rank_similarity(graph, nodes=None, sample=None, seed=DEFAULT_SEED,
                    workers=1, cancel=None, chunk_size=DEFAULT_CHUNK_SIZE) -> SimilarityExtremes:
    """
    most similar and most dissimilar pair of nodes by jaccard similarity.

    nodes:  only compare pairs inside this subset (neighbour sets still come from the full graph)
    sample: compare a seeded random subset of this many nodes
    """
    if nodes is not None:
        order = sorted(set(nodes))
        missing = [n for n in order if n not in graph]
        if missing:
            raise ValueError(f"nodes not in graph: {missing[:10]}")
    elif sample is not None:
        order = sample_nodes(graph, sample, seed)
    else:
        order = sorted(graph.nodes())

    exact = len(order) == graph.number_of_nodes()
    if not exact:
        logger.info("comparing %d of %d nodes", len(order), graph.number_of_nodes())

    neighbours = adjacency(graph, order)

    # position i scans every j > i, so early positions cost the most.
    # interleaving spreads them over all chunks
    inline = workers is None or workers <= 1
    fn = partial(_similarity_chunk, cancel=cancel if inline else None)
    chunks = interleaved(range(len(order)), chunk_size)
    partials = map_chunks(fn, chunks, workers=workers, cancel=cancel, shared=(neighbours, order))

    max_key = _reduce_keys(p[0] for p in partials)
    min_key = _reduce_keys(p[1] for p in partials)

    if max_key is None:
        most_similar = UNDEFINED
        most_dissimilar = UNDEFINED
    else:
        score, u, v = max_key
        most_similar = SimilarPair(u, v, -score)
        score, u, v = min_key
        most_dissimilar = SimilarPair(u, v, score)

    return SimilarityExtremes(
        most_similar=most_similar,
        most_dissimilar=most_dissimilar,
        nodes_compared=len(order),
        pairs_compared=sum(p[2] for p in partials),
        undefined_pairs=sum(p[3] for p in partials),
        exact=exact,
    )


def most_similar_pair(graph, **kwargs):
    return rank_similarity(graph, **kwargs).most_similar


def most_dissimilar_pair(graph, **kwargs):
    return rank_similarity(graph, **kwargs).most_dissimilar
