# degree histogram + bucketed summary ("N people have <=10 friends" etc)

from collections import Counter

import numpy as np # pyright: ignore[reportMissingImports]

from netstats.constants import DEFAULT_DEGREE_BINS
from netstats.results import DegreeBin, DegreeDistribution


def degree_histogram(graph) -> dict:

    # degree -> how many nodes have it, ascending by degree
    counts = Counter(d for _, d in graph.degree())
    return {d: counts[d] for d in sorted(counts)}


def _check_bins(bins):

    bins = list(bins)
    for b in bins:
        if isinstance(b, bool) or not isinstance(b, int) or b < 0:
            raise ValueError(f"bin bounds must be non-negative integers, got {b!r}")
    if any(a >= b for a, b in zip(bins, bins[1:])):
        raise ValueError(f"bin bounds must be strictly increasing, got {bins}")
    return bins


def bin_histogram(histogram, bins=DEFAULT_DEGREE_BINS) -> list:
    """
    sums histogram counts into buckets. bins are inclusive upper bounds:
    (10, 25) -> [0, 10], [11, 25], [26, inf)
    """
    bins = _check_bins(bins)

    result = []
    low = 0
    for high in bins:
        count = sum(c for d, c in histogram.items() if low <= d <= high)
        result.append(DegreeBin(low, high, count))
        low = high + 1

    result.append(DegreeBin(low, None, sum(c for d, c in histogram.items() if d >= low)))
    return result


def degree_distribution(graph, bins=DEFAULT_DEGREE_BINS) -> DegreeDistribution:

    histogram = degree_histogram(graph)
    degrees = np.array([d for _, d in graph.degree()], dtype=float)

    if degrees.size:
        mean, std = float(degrees.mean()), float(degrees.std())
        lo, hi = int(degrees.min()), int(degrees.max())
    else:
        mean, std, lo, hi = 0.0, 0.0, 0, 0

    return DegreeDistribution(
        histogram=histogram,
        bins=bin_histogram(histogram, bins),
        n_nodes=graph.number_of_nodes(),
        mean=mean,
        std=std,
        min=lo,
        max=hi,
    )
