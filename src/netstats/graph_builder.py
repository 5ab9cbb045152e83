import logging
import numbers

import networkx as nx # pyright: ignore[reportMissingModuleSource]

logger = logging.getLogger(__name__)


def _check_node(node):

    # bools are ints in python, but (True, False) is not an edge
    if isinstance(node, bool) or not isinstance(node, numbers.Integral):
        raise ValueError(f"node ids must be integers, got {node!r}")
    if node < 0:
        raise ValueError(f"node ids must be non-negative, got {node}")
    return int(node)


def build_graph(edges, nodes=()) -> nx.Graph:
    """
    undirected simple graph from (u, v) pairs.

    - both orientations of a pair end up as the same edge
    - duplicates collapse (adjacency sets)
    - (a, a) pairs are dropped, no self loops
    - extra `nodes` are added as isolated nodes

    the graph comes back frozen, every metric treats it as a read-only snapshot
    """
    G = nx.Graph()

    for node in nodes:
        G.add_node(_check_node(node))

    dropped = 0
    for pair in edges:
        try:
            u, v = pair
        except (TypeError, ValueError):
            raise ValueError(f"edges must be (u, v) pairs, got {pair!r}") from None

        u, v = _check_node(u), _check_node(v)

        if u == v:
            dropped += 1
            continue
        G.add_edge(u, v)

    if dropped:
        logger.debug("dropped %d self-loop pairs", dropped)
    logger.info("built graph: %d nodes, %d edges", G.number_of_nodes(), G.number_of_edges())

    return nx.freeze(G)


def adjacency(graph, nodes=None) -> dict:

    # {node: frozenset(neighbours)} snapshot for set algebra, all nodes unless told otherwise.
    # plain dict of frozensets, so it pickles much smaller than the graph
    if nodes is None:
        nodes = graph.nodes()
    return {node: frozenset(graph[node]) for node in nodes}


def graph_summary(graph) -> dict:

    n_nodes = graph.number_of_nodes()
    n_edges = graph.number_of_edges()

    if n_nodes:
        components = sorted((len(c) for c in nx.connected_components(graph)), reverse=True)
    else:
        components = []

    return {
        'n_nodes': n_nodes,
        'n_edges': n_edges,
        'density': nx.density(graph) if n_nodes > 1 else 0.0,
        'isolated': sum(1 for _, d in graph.degree() if d == 0),
        'n_components': len(components),
        'largest_component': components[0] if components else 0,
    }
