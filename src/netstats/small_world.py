# small-world check against an erdos-renyi graph with the same n and mean degree.
#
#   L_rand ~ ln(N) / ln(k)      C_rand ~ k / N
#
# small world (Humphries & Gurney 2008): L / L_rand <= 1.5 and C / C_rand >= 2.0
# sigma = (C / C_rand) / (L / L_rand), well above 1 means small world
#
# the analytic baselines are cheap, no random graphs get generated here.
# anything that would divide by zero (k <= 1, N < 2, L == 0) is UNDEFINED and the verdict is None

import math

from netstats.constants import SMALL_WORLD_CLUSTERING_RATIO, SMALL_WORLD_PATH_RATIO
from netstats.results import UNDEFINED, SmallWorldSummary


def small_world_summary(graph, path_result, clustering) -> SmallWorldSummary:

    n = graph.number_of_nodes()
    k = 2 * graph.number_of_edges() / n if n else 0.0
    L = float(path_result.average)
    notes = []

    if n >= 2 and k > 1:
        random_path = math.log(n) / math.log(k)
    else:
        random_path = UNDEFINED
        notes.append("mean degree <= 1, no random-graph path baseline")

    random_clustering = k / n if n and k > 0 else UNDEFINED

    if random_path is not UNDEFINED and random_path > 0 and L > 0:
        path_ratio = L / random_path
    else:
        path_ratio = UNDEFINED

    if random_clustering is not UNDEFINED and random_clustering > 0:
        clustering_ratio = clustering / random_clustering
    else:
        clustering_ratio = UNDEFINED

    if path_ratio is UNDEFINED or clustering_ratio is UNDEFINED:
        sigma = UNDEFINED
        verdict = None
    else:
        sigma = clustering_ratio / path_ratio
        verdict = path_ratio <= SMALL_WORLD_PATH_RATIO and clustering_ratio >= SMALL_WORLD_CLUSTERING_RATIO

    if not path_result.exact:
        notes.append(f"path length estimated from {path_result.n_sources} of {path_result.n_nodes} sources")

    return SmallWorldSummary(
        n_nodes=n,
        mean_degree=k,
        path_length=L,
        clustering=clustering,
        random_path_length=random_path,
        random_clustering=random_clustering,
        path_ratio=path_ratio,
        clustering_ratio=clustering_ratio,
        sigma=sigma,
        is_small_world=verdict,
        path_exact=path_result.exact,
        notes=notes,
    )
