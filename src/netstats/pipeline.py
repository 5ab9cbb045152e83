# one configurable pipeline: edges in, dict of metric results out.
# the data source is injected (any iterable of pairs), the metrics are picked by name.

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional, Tuple

import yaml

from netstats.assortativity import degree_assortativity
from netstats.clustering import global_clustering_coefficient
from netstats.constants import (
    ALL_METRICS,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DEGREE_BINS,
    DEFAULT_PATH_SAMPLE,
    DEFAULT_SEED,
    DEFAULT_SIMILARITY_SAMPLE,
    EXACT_PATH_LIMIT,
    EXACT_SIMILARITY_LIMIT,
)
from netstats.data_loader import EdgeListLoader
from netstats.degree_distribution import bin_histogram, degree_distribution
from netstats.graph_builder import build_graph, graph_summary
from netstats.parallel import check_cancel
from netstats.sampling import sample_edges
from netstats.shortest_paths import average_shortest_path_length
from netstats.similarity import rank_similarity
from netstats.small_world import small_world_summary

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AnalysisConfig:
    metrics: Tuple[str, ...] = ALL_METRICS
    bins: Tuple[int, ...] = DEFAULT_DEGREE_BINS
    seed: int = DEFAULT_SEED
    path_sample: Optional[int] = None
    similarity_sample: Optional[int] = None
    edge_sample: Optional[int] = None
    workers: int = 1
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @classmethod
    def from_dict(cls, data):

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"config must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

        values = dict(data)
        for key in ('metrics', 'bins'):
            if key in values and values[key] is not None:
                value = values[key]
                if isinstance(value, str):
                    value = (value,)
                elif not isinstance(value, (list, tuple)):
                    raise ConfigError(f"'{key}' must be a list, got {value!r}")
                values[key] = tuple(value)

        config = cls(**{k: v for k, v in values.items() if v is not None})
        config.validate()
        return config

    def validate(self):

        unknown = [m for m in self.metrics if m not in METRICS]
        if unknown:
            raise ConfigError(f"unknown metrics: {', '.join(unknown)} (choose from {', '.join(ALL_METRICS)})")

        for name in ('path_sample', 'similarity_sample', 'edge_sample'):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
                raise ConfigError(f"'{name}' must be a non-negative integer, got {value!r}")

        if isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers < 1:
            raise ConfigError(f"'workers' must be >= 1, got {self.workers!r}")
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int) or self.chunk_size < 1:
            raise ConfigError(f"'chunk_size' must be >= 1, got {self.chunk_size!r}")
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ConfigError(f"'seed' must be an integer, got {self.seed!r}")

        try:
            bin_histogram({}, self.bins)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        return True

    def override(self, **changes):

        # cli flags win over the file, None means "not given"
        changes = {k: v for k, v in changes.items() if v is not None}
        config = replace(self, **changes)
        config.validate()
        return config


def load_config(config_path) -> AnalysisConfig:
    """Loads an AnalysisConfig from a YAML file."""

    if not os.path.exists(config_path):
        raise ConfigError(f"configuration file not found at '{config_path}'")

    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"could not parse configuration file '{config_path}': {e}") from e

    logger.info("configuration loaded from '%s'", config_path)
    return AnalysisConfig.from_dict(data)


# ==================== METRICS ====================

def _resolve_sample(configured, n_nodes, limit, default):

    # explicit setting wins, otherwise only sample when the graph is too big for exact
    if configured is not None:
        return configured
    if n_nodes > limit:
        return default
    return None


def _run_degree(graph, config, cancel, results):
    return degree_distribution(graph, config.bins)


def _run_similarity(graph, config, cancel, results):

    sample = _resolve_sample(config.similarity_sample, graph.number_of_nodes(),
                             EXACT_SIMILARITY_LIMIT, DEFAULT_SIMILARITY_SAMPLE)
    return rank_similarity(graph, sample=sample, seed=config.seed, workers=config.workers,
                           cancel=cancel, chunk_size=config.chunk_size)


def _run_clustering(graph, config, cancel, results):
    return global_clustering_coefficient(graph)


def _run_assortativity(graph, config, cancel, results):
    return degree_assortativity(graph)


def _run_paths(graph, config, cancel, results):

    sample = _resolve_sample(config.path_sample, graph.number_of_nodes(),
                             EXACT_PATH_LIMIT, DEFAULT_PATH_SAMPLE)
    return average_shortest_path_length(graph, sample=sample, seed=config.seed, workers=config.workers,
                                        cancel=cancel, chunk_size=config.chunk_size)


def _run_small_world(graph, config, cancel, results):
    return small_world_summary(graph, results['paths'], results['clustering'])


METRICS = {
    'degree': _run_degree,
    'similarity': _run_similarity,
    'clustering': _run_clustering,
    'assortativity': _run_assortativity,
    'paths': _run_paths,
    'small_world': _run_small_world,
}

# metrics that read other metrics' results
DEPENDS_ON = {
    'small_world': ('paths', 'clustering'),
}


def _execution_order(selected):

    order = []
    for name in ALL_METRICS:
        if name in selected:
            for dep in DEPENDS_ON.get(name, ()):
                if dep not in order:
                    order.append(dep)
            if name not in order:
                order.append(name)
    return order


def run_analysis(edges, metrics=None, config=None, cancel=None, nodes=()) -> dict:
    """
    builds the graph once and runs the selected metrics over it.

    returns {'summary': graph_summary, 'config': config, <metric name>: result, ...}
    dependencies (paths + clustering for small_world) are computed and returned too
    """
    config = config or AnalysisConfig()
    if metrics is not None:
        config = config.override(metrics=tuple(metrics))
    config.validate()

    edges = list(edges)
    if config.edge_sample is not None and config.edge_sample < len(edges):
        logger.info("sampling %d of %d edges (seed=%d)", config.edge_sample, len(edges), config.seed)
        edges = sample_edges(edges, config.edge_sample, config.seed)

    graph = build_graph(edges, nodes=nodes)

    results = {
        'summary': graph_summary(graph),
        'config': config,
    }

    for name in _execution_order(config.metrics):
        check_cancel(cancel)
        logger.info("computing %s...", name)
        results[name] = METRICS[name](graph, config, cancel, results)

    return results


def analyze_file(data_path, config=None, cancel=None) -> dict:

    loader = EdgeListLoader(data_path)
    edges = loader.load()

    results = run_analysis(edges, config=config, cancel=cancel)
    results['source'] = {
        'path': str(data_path),
        'edges_read': len(edges),
        'skipped_lines': loader.skipped_lines,
    }
    return results
