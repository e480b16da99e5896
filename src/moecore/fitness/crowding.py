# fitness/crowding.py
"""Crowding-distance fitness (NSGA-II style); larger is better."""
from __future__ import annotations

import numpy as np

from moecore.fitness.base import FitnessEvaluator
from moecore.foundation.core.population import Population


def crowding_distance(F: np.ndarray) -> np.ndarray:
    """
    Crowding distance of a single front, shape (N,).

    Boundary members of every objective get ``inf``; objectives with zero
    span contribute nothing.
    """
    n = F.shape[0]
    if n == 0:
        return np.empty(0, dtype=float)
    if n <= 2:
        return np.full(n, np.inf)

    d = np.zeros(n, dtype=float)
    for m in range(F.shape[1]):
        order = np.argsort(F[:, m], kind="mergesort")
        sorted_vals = F[order, m]

        d[order[0]] = np.inf
        d[order[-1]] = np.inf

        span = sorted_vals[-1] - sorted_vals[0]
        if span <= 0.0:
            continue

        contrib = (sorted_vals[2:] - sorted_vals[:-2]) / span
        d[order[1:-1]] += contrib

    return d


class CrowdingDistanceFitnessEvaluator(FitnessEvaluator):
    larger_values_preferred = True

    def compute(self, population: Population) -> np.ndarray:
        return crowding_distance(population.objectives())


__all__ = ["crowding_distance", "CrowdingDistanceFitnessEvaluator"]
