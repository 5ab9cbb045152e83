# result records returned by the metric functions.
# nothing in here computes anything, it just holds values for the report layer

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Union


class Undefined:
    """
    marker for a metric that has no mathematical value on this graph
    (jaccard of two isolated nodes, assortativity of a regular graph, ...)

    its falsy and only equal to itself so callers can tell it apart from 0.0
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'UNDEFINED'

    def __reduce__(self):
        # keep it a singleton across process pools
        return (Undefined, ())


UNDEFINED = Undefined()


def is_undefined(value) -> bool:
    return value is UNDEFINED


Score = Union[float, Undefined]


class SimilarPair(NamedTuple):
    u: int
    v: int
    score: float


@dataclass(frozen=True)
class SimilarityExtremes:
    most_similar: Union[SimilarPair, Undefined]
    most_dissimilar: Union[SimilarPair, Undefined]
    nodes_compared: int
    pairs_compared: int
    undefined_pairs: int
    exact: bool


class DegreeBin(NamedTuple):
    low: int
    high: Optional[int]  # None = open ended last bucket
    count: int

    @property
    def label(self) -> str:
        if self.high is None and self.low == 0:
            return "any"
        if self.high is None:
            return f">{self.low - 1}"
        if self.low == 0:
            return f"<={self.high}"
        return f"{self.low}-{self.high}"


@dataclass(frozen=True)
class DegreeDistribution:
    histogram: Dict[int, int]
    bins: List[DegreeBin]
    n_nodes: int
    mean: float
    std: float
    min: int
    max: int


@dataclass(frozen=True)
class PathLengthResult:
    """
    average shortest path length over reachable ordered pairs

    exact = every node was used as a bfs source. when sampled, seed is the
    seed the sources were drawn with so the run can be repeated
    """
    average: float
    total_distance: int
    pair_count: int
    n_sources: int
    n_nodes: int
    longest: int
    exact: bool
    seed: Optional[int] = None

    def __float__(self):
        return float(self.average)


@dataclass(frozen=True)
class SmallWorldSummary:
    n_nodes: int
    mean_degree: float
    path_length: float
    clustering: float
    random_path_length: Score
    random_clustering: Score
    path_ratio: Score
    clustering_ratio: Score
    sigma: Score
    is_small_world: Optional[bool]
    path_exact: bool = True
    notes: List[str] = field(default_factory=list)
