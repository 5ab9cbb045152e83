# average shortest path length for the small-world check.
#
# one bfs per source, sum the hop counts to every reachable node, divide by the
# number of reachable ordered pairs. unreachable pairs are simply not counted,
# so separate components never get "bridged" or penalised.
#
# TRADEOFF: exact is O(V * (V + E)), which is a lot for 10k+ nodes.
# pass sample=k to bfs from k seeded random sources instead; result.exact says which one u got

import logging
from functools import partial

import networkx as nx # pyright: ignore[reportMissingModuleSource]

from netstats.constants import DEFAULT_CHUNK_SIZE, DEFAULT_SEED
from netstats.parallel import check_cancel, chunked, map_chunks
from netstats.results import PathLengthResult
from netstats.sampling import sample_nodes

logger = logging.getLogger(__name__)


def _path_chunk(graph, sources, cancel=None):

    # partial for one chunk of sources: (distance_sum, pair_count, longest)
    distance_sum = 0
    pair_count = 0
    longest = 0

    for source in sources:
        check_cancel(cancel)
        lengths = nx.single_source_shortest_path_length(graph, source)
        for target, dist in lengths.items():
            if target == source:
                continue
            distance_sum += dist
            pair_count += 1
            if dist > longest:
                longest = dist

    return distance_sum, pair_count, longest


def combine_partials(partials):

    # sum / sum / max, order doesnt matter
    distance_sum, pair_count, longest = 0, 0, 0
    for d, p, far in partials:
        distance_sum += d
        pair_count += p
        longest = max(longest, far)
    return distance_sum, pair_count, longest


def average_shortest_path_length(graph, sample=None, seed=DEFAULT_SEED, sources=None,
                                 workers=1, cancel=None, chunk_size=DEFAULT_CHUNK_SIZE) -> PathLengthResult:
    """
    average hop distance over all ordered (s, t) pairs, s != t, t reachable from s.

    sample:  bfs from this many seeded random sources instead of all of them
    sources: explicit source nodes (wins over sample)
    workers: > 1 spreads the sources over a process pool, same answer either way

    0.0 when there are no reachable pairs at all (empty graph, single node, only isolated nodes)
    """
    n_nodes = graph.number_of_nodes()

    if sources is not None:
        sources = sorted(set(sources))
        missing = [s for s in sources if s not in graph]
        if missing:
            raise ValueError(f"source nodes not in graph: {missing[:10]}")
    elif sample is not None:
        sources = sample_nodes(graph, sample, seed)
    else:
        sources = sorted(graph.nodes())

    exact = len(sources) == n_nodes
    if not exact:
        logger.info("sampling %d of %d nodes as bfs sources (seed=%s)", len(sources), n_nodes, seed)

    inline = workers is None or workers <= 1
    fn = partial(_path_chunk, cancel=cancel if inline else None)
    partials = map_chunks(fn, chunked(sources, chunk_size), workers=workers, cancel=cancel, shared=graph)

    distance_sum, pair_count, longest = combine_partials(partials)
    average = distance_sum / pair_count if pair_count else 0.0

    return PathLengthResult(
        average=average,
        total_distance=distance_sum,
        pair_count=pair_count,
        n_sources=len(sources),
        n_nodes=n_nodes,
        longest=longest,
        exact=exact,
        seed=None if exact else seed,
    )
