# console presentation of run_analysis() output.
# everything that prints lives here, the metric modules just return values

from netstats.constants import INTERCONNECTED_PATH_LENGTH
from netstats.results import is_undefined


def _fmt(value, spec='.4f'):
    if is_undefined(value):
        return 'undefined'
    return format(value, spec)


def print_summary(summary, source=None):

    print("=== GRAPH ===")
    if source:
        print(f"source: {source['path']}")
        print(f"edges read: {source['edges_read']} (skipped lines: {source['skipped_lines']})")
    print(f"nodes: {summary['n_nodes']}")
    print(f"edges (undirected): {summary['n_edges']}")
    print(f"density: {summary['density']:.6f}")
    print(f"connected components: {summary['n_components']} (largest: {summary['largest_component']})")
    print(f"isolated nodes: {summary['isolated']}")


def print_degree(dist):

    print("\n=== DEGREE DISTRIBUTION ===")
    print(f"mean: {dist.mean:.2f}")
    print(f"std dev: {dist.std:.2f}")
    print(f"degree range: {dist.min} - {dist.max}")

    for b in dist.bins:
        print(f"  {b.count} people have {b.label} friends")

    print("\ndistribution (degree: count):")
    for d, count in list(dist.histogram.items())[:20]:
        bar = '#' * min(50, count // 2)
        print(f"  {d:3}: {count:4} {bar}")
    if len(dist.histogram) > 20:
        print(f"  ... (max degree: {dist.max})")


def print_similarity(extremes):

    print("\n=== JACCARD SIMILARITY ===")
    if not extremes.exact:
        print(f"NOTE: compared {extremes.nodes_compared} sampled nodes, not the whole graph")
    print(f"pairs compared: {extremes.pairs_compared} (undefined: {extremes.undefined_pairs})")

    if is_undefined(extremes.most_similar):
        print("no pair has a defined similarity (every compared node is isolated)")
        return

    u, v, score = extremes.most_similar
    print(f"most similar: users ({u}, {v}), jaccard={score:.4f}")
    if score == 1.0:
        print(f"  users ({u}, {v}) have the same set of friends")

    u, v, score = extremes.most_dissimilar
    print(f"most dissimilar: users ({u}, {v}), jaccard={score:.4f}")
    if score == 0.0:
        print(f"  users ({u}, {v}) have no friends in common")


def print_clustering(coefficient):

    print("\n=== CLUSTERING COEFFICIENT ===")
    print(f"global clustering: {coefficient:.4f}")
    print(f"  INSIGHT: {'tight friend circles' if coefficient > 0.3 else 'more spread out structure'}")


def print_assortativity(r):

    print("\n=== DEGREE ASSORTATIVITY ===")
    if is_undefined(r):
        print("assortativity: undefined (every edge joins nodes of the same degree)")
        return

    print(f"assortativity r: {r:.4f}")
    if r > 0:
        print("  INSIGHT: well connected people tend to befriend other well connected people")
    elif r < 0:
        print("  INSIGHT: hubs mostly connect to low degree people")


def print_paths(paths):

    print("\n=== SHORTEST PATHS ===")
    if not paths.exact:
        print(f"  NOTE: bfs from {paths.n_sources} of {paths.n_nodes} sources (seed={paths.seed}), estimate only")
    print(f"reachable ordered pairs: {paths.pair_count}")
    print(f"avg shortest path length: {paths.average:.4f}")
    print(f"longest shortest path seen: {paths.longest}")
    if paths.pair_count == 0:
        print("  INSIGHT: no two users are connected at all")
    elif paths.average <= INTERCONNECTED_PATH_LENGTH:
        print("  INSIGHT: users are extremely interconnected, everyone reachable is a direct friend")
    else:
        print(f"  INSIGHT: users are {paths.average:.2f} hops apart on average, not really interconnected")


def print_small_world(sw):

    print("\n=== SMALL WORLD ===")
    print(f"mean degree: {sw.mean_degree:.2f}")
    print(f"L = {sw.path_length:.4f}   L_random = {_fmt(sw.random_path_length)}   L/L_random = {_fmt(sw.path_ratio)}")
    print(f"C = {sw.clustering:.4f}   C_random = {_fmt(sw.random_clustering)}   C/C_random = {_fmt(sw.clustering_ratio)}")
    print(f"sigma: {_fmt(sw.sigma)}")

    for note in sw.notes:
        print(f"  NOTE: {note}")

    if sw.is_small_world is None:
        print("  not enough structure to test the small world hypothesis")
    elif sw.is_small_world:
        print("  INSIGHT: short paths + high clustering, this dataset supports the small world hypothesis")
    else:
        print("  INSIGHT: this dataset does not look like a small world")


SECTIONS = [
    ('degree', print_degree),
    ('similarity', print_similarity),
    ('clustering', print_clustering),
    ('assortativity', print_assortativity),
    ('paths', print_paths),
    ('small_world', print_small_world),
]


def print_report(results):

    print("=" * 60)
    print("NETWORK STATISTICS")
    print("=" * 60)

    print_summary(results['summary'], results.get('source'))

    for name, printer in SECTIONS:
        if name in results:
            printer(results[name])

    print("\n" + "=" * 60)
    print("ANALYSIS COMPLETE")
    print("=" * 60)
