# fitness/epsilon.py
"""
Indicator-based fitness (IBEA) using the additive epsilon indicator.

References:
    E. Zitzler and S. Kunzli, "Indicator-Based Selection in Multiobjective
    Search," PPSN VIII, 2004.
"""
from __future__ import annotations

import numpy as np

from moecore.fitness.base import FitnessEvaluator
from moecore.foundation.core.population import Population
from moecore.foundation.exceptions import ContractViolationError


def normalize_objectives(F: np.ndarray) -> np.ndarray:
    """Rescale each objective to [0, 1] over the population; flat objectives map to 0."""
    lo = np.min(F, axis=0)
    span = np.max(F, axis=0) - lo
    span = np.where(span > 0.0, span, 1.0)
    return (F - lo) / span


def epsilon_indicator(F: np.ndarray) -> np.ndarray:
    """Additive epsilon indicator matrix, shape (N, N).

    ``ind[i, j] = max_k (F[j, k] - F[i, k])`` is the smallest shift making
    member j weakly dominate member i.
    """
    diff = F[None, :, :] - F[:, None, :]
    return np.asarray(np.max(diff, axis=2), dtype=float)


def ibea_fitness(indicator: np.ndarray, kappa: float) -> np.ndarray:
    """IBEA fitness from an indicator matrix; larger (closer to 0) is better."""
    n = indicator.shape[0]
    if n <= 1:
        return np.zeros(n, dtype=float)
    scale = float(np.max(np.abs(indicator)))
    if scale == 0.0:
        scale = 1.0
    mat = indicator.copy()
    np.fill_diagonal(mat, np.inf)
    contrib = np.exp(-mat / (scale * kappa))
    return np.asarray(-np.sum(contrib, axis=1), dtype=float)


class AdditiveEpsilonIndicatorFitnessEvaluator(FitnessEvaluator):
    """
    IBEA fitness with the additive epsilon indicator on normalized objectives.

    Parameters
    ----------
    kappa : float
        Scaling factor controlling selection pressure; must be > 0.
    """

    larger_values_preferred = True

    def __init__(self, kappa: float = 0.05) -> None:
        if not kappa > 0.0:
            raise ContractViolationError(f"kappa must be > 0, got {kappa}.")
        self.kappa = float(kappa)

    def compute(self, population: Population) -> np.ndarray:
        F = normalize_objectives(population.objectives())
        return ibea_fitness(epsilon_indicator(F), self.kappa)


__all__ = [
    "normalize_objectives",
    "epsilon_indicator",
    "ibea_fitness",
    "AdditiveEpsilonIndicatorFitnessEvaluator",
]
