# structural statistics over an undirected edge list: degree distribution,
# jaccard similarity extremes, clustering, assortativity, average shortest path length

from netstats.assortativity import degree_assortativity
from netstats.clustering import global_clustering_coefficient
from netstats.degree_distribution import degree_distribution, degree_histogram
from netstats.graph_builder import build_graph
from netstats.parallel import AnalysisCancelled
from netstats.results import UNDEFINED, is_undefined
from netstats.shortest_paths import average_shortest_path_length
from netstats.similarity import jaccard_similarity, most_dissimilar_pair, most_similar_pair, rank_similarity

__version__ = '0.1.0'

__all__ = [
    'AnalysisCancelled',
    'UNDEFINED',
    'average_shortest_path_length',
    'build_graph',
    'degree_assortativity',
    'degree_distribution',
    'degree_histogram',
    'global_clustering_coefficient',
    'is_undefined',
    'jaccard_similarity',
    'most_dissimilar_pair',
    'most_similar_pair',
    'rank_similarity',
]
