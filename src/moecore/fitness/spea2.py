# fitness/spea2.py
"""
SPEA2 strength/density fitness and environmental truncation.

This module contains:
- Dominance matrix computation (constraint domination, then Pareto)
- Objective-space distance matrix
- SPEA2 fitness (raw strength fitness + k-th nearest neighbour density)
- Distance-based iterative truncation
- Environmental selection

References:
    E. Zitzler, M. Laumanns, and L. Thiele, "SPEA2: Improving the Strength
    Pareto Evolutionary Algorithm," TIK-Report 103, ETH Zurich, 2001.
"""
from __future__ import annotations

import logging

import numpy as np
from scipy.spatial.distance import pdist, squareform

from moecore.fitness.base import FitnessEvaluator
from moecore.foundation.constraints.utils import compute_violation
from moecore.foundation.core.comparators import Dominance, DominanceComparator
from moecore.foundation.core.population import Population
from moecore.foundation.exceptions import CapacityError, ContractViolationError, DensityBoundsError


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _objectives(source: Population | np.ndarray) -> np.ndarray:
    if isinstance(source, Population):
        return source.objectives()
    return np.asarray(source, dtype=float)


def dominance_matrix(
    F: np.ndarray, G: np.ndarray | None = None, *, violation: np.ndarray | None = None
) -> np.ndarray:
    """Compute ``dom[i, j] = True`` when solution i dominates solution j.

    Parameters
    ----------
    F : np.ndarray
        Objective values, shape (N, n_obj).
    G : np.ndarray | None
        Constraint values, shape (N, n_con) or None. A strictly smaller
        aggregate violation dominates regardless of objectives.
    violation : np.ndarray | None
        Precomputed aggregate violation per solution, shape (N,); takes
        precedence over ``G``.

    Returns
    -------
    np.ndarray
        Boolean matrix, shape (N, N), with a False diagonal.
    """
    n = F.shape[0]
    if n == 0:
        return np.zeros((0, 0), dtype=bool)
    le = np.all(F[:, None, :] <= F[None, :, :], axis=2)
    lt = np.any(F[:, None, :] < F[None, :, :], axis=2)
    pareto = le & lt
    if violation is not None:
        cv = np.asarray(violation, dtype=float)
    elif G is not None:
        cv = compute_violation(G, n=n)
    else:
        return pareto
    return (cv[:, None] < cv[None, :]) | ((cv[:, None] == cv[None, :]) & pareto)


def _comparator_dominance_matrix(population: Population, comparator: DominanceComparator) -> np.ndarray:
    n = len(population)
    dom = np.zeros((n, n), dtype=bool)
    members = list(population)
    for i in range(n):
        for j in range(i + 1, n):
            flag = comparator.compare(members[i], members[j])
            if flag == Dominance.A_DOMINATES:
                dom[i, j] = True
            elif flag == Dominance.B_DOMINATES:
                dom[j, i] = True
    return dom


def compute_distance_matrix(source: Population | np.ndarray) -> np.ndarray:
    """Euclidean objective-space distances, shape (N, N).

    The result is exactly symmetric with a zero diagonal.
    """
    F = _objectives(source)
    n = F.shape[0]
    if n == 0:
        return np.zeros((0, 0), dtype=float)
    if n == 1:
        return np.zeros((1, 1), dtype=float)
    return squareform(pdist(F, metric="euclidean"))


def default_k(n: int) -> int:
    """SPEA2 neighbour index, ``max(1, floor(sqrt(n)))``."""
    return max(1, int(np.sqrt(n)))


def spea2_fitness(dom: np.ndarray, dist: np.ndarray, k: int | None = None) -> np.ndarray:
    """Compute SPEA2 fitness from a dominance and a distance matrix.

    SPEA2 fitness consists of:
    1. Raw fitness: sum of strengths of all dominators
    2. Density: ``1 / (sigma_k + 2)`` where ``sigma_k`` is the distance to
       the k-th nearest other member

    Parameters
    ----------
    dom : np.ndarray
        Dominance matrix, shape (N, N).
    dist : np.ndarray
        Distance matrix, shape (N, N).
    k : int | None
        Neighbour index. ``None`` selects ``max(1, floor(sqrt(N)))`` clipped
        to ``N - 1``; an explicit value must satisfy ``k < N``.

    Returns
    -------
    np.ndarray
        Fitness values, shape (N,). Lower is better.

    Raises
    ------
    DensityBoundsError
        When an explicit ``k`` is not smaller than the population size.
    """
    n = dom.shape[0]
    if n == 0:
        return np.empty(0, dtype=float)

    if k is None:
        k = min(default_k(n), n - 1)
    elif k >= n:
        raise DensityBoundsError(k, n)

    # Strength: number of solutions each solution dominates
    strength = dom.sum(axis=1)
    # Raw fitness: sum of strengths of all dominators
    raw_fitness = (dom * strength[:, None]).sum(axis=0).astype(float)

    if k == 0:
        # single member, no neighbour to measure
        density = np.zeros(n, dtype=float)
    else:
        sigma_k = np.sort(dist, axis=1)[:, k]
        density = 1.0 / (sigma_k + 2.0)

    return raw_fitness + density


def truncate_by_distance(dist_matrix: np.ndarray, keep: int) -> np.ndarray:
    """Iteratively remove the member closest to its neighbours.

    At each step every remaining member's distances to the other remaining
    members are sorted ascending; the member whose sorted vector is
    lexicographically smallest is removed (nearest neighbour first, then
    2nd nearest, and so on). When all levels tie, the lowest remaining
    index is removed. Distances are re-ranked after every removal since
    nearest-neighbour relations change.

    Parameters
    ----------
    dist_matrix : np.ndarray
        Distance matrix, shape (N, N).
    keep : int
        Number of members to retain.

    Returns
    -------
    np.ndarray
        Indices of retained members, ascending.
    """
    if keep < 0:
        raise CapacityError(keep, "keep")
    n = dist_matrix.shape[0]
    if keep >= n:
        return np.arange(n, dtype=int)
    if keep == 0:
        return np.empty(0, dtype=int)

    dist = np.array(dist_matrix, dtype=float)
    np.fill_diagonal(dist, np.inf)
    candidates = list(range(n))
    while len(candidates) > keep:
        sub = dist[np.ix_(candidates, candidates)]
        # self distance (inf) sorts last and is dropped
        ranked = np.sort(sub, axis=1)[:, :-1]
        # lexsort treats the last key as primary and is stable on full ties
        order = np.lexsort(ranked.T[::-1])
        del candidates[int(order[0])]

    return np.asarray(candidates, dtype=int)


def truncate_population(population: Population, size: int) -> Population:
    """Return a new population holding the members kept by :func:`truncate_by_distance`."""
    members = list(population)
    kept = truncate_by_distance(compute_distance_matrix(population), size)
    _logger().debug("SPEA2 truncation kept %d of %d members", kept.size, len(members))
    return Population(members[i] for i in kept)


class StrengthFitnessEvaluator(FitnessEvaluator):
    """
    SPEA2 strength/density fitness; lower is better.

    Nondominated members get fitness in ``[0, 1)``; a dominated member gets at
    least the strength of one dominator on top of its density.

    Parameters
    ----------
    k : int | None
        Neighbour index used for density. ``None`` selects
        ``max(1, floor(sqrt(n)))`` for each evaluated population. An explicit
        ``k`` that is not smaller than the population size raises
        :class:`DensityBoundsError` at evaluation time.
    comparator : DominanceComparator | None
        Optional dominance comparator; by default constraint domination then
        Pareto dominance is computed in vectorized form.
    """

    larger_values_preferred = False

    def __init__(self, k: int | None = None, comparator: DominanceComparator | None = None) -> None:
        if k is not None and int(k) < 1:
            raise ContractViolationError(f"k must be >= 1, got {k}.", "Use k=None for the sqrt(n) default")
        self.k = None if k is None else int(k)
        self.comparator = comparator

    def check_capacity(self, capacity: int) -> None:
        if self.k is not None and self.k > capacity:
            raise DensityBoundsError(self.k, capacity + 1)

    def dominance(self, population: Population) -> np.ndarray:
        if self.comparator is not None:
            return _comparator_dominance_matrix(population, self.comparator)
        return dominance_matrix(population.objectives(), violation=population.violations())

    def compute(self, population: Population) -> np.ndarray:
        dom = self.dominance(population)
        dist = compute_distance_matrix(population)
        return spea2_fitness(dom, dist, self.k)

    def truncate(self, population: Population, size: int) -> Population:
        return truncate_population(population, size)


def environmental_selection(population: Population, size: int, evaluator: StrengthFitnessEvaluator) -> Population:
    """SPEA2 environmental selection.

    Members with fitness below 1 (nondominated) are selected; an excess is
    removed with distance truncation, a shortfall is filled with the best
    dominated members by fitness.
    """
    if size < 0:
        raise CapacityError(size, "size")
    evaluator.evaluate(population)
    members = list(population)
    fitness = population.fitness()

    selected = np.flatnonzero(fitness < 1.0)
    if selected.size > size:
        dist = compute_distance_matrix(population.objectives()[selected])
        selected = selected[truncate_by_distance(dist, size)]
    elif selected.size < size:
        remaining = np.setdiff1d(np.arange(len(members)), selected, assume_unique=True)
        if remaining.size:
            order = remaining[np.argsort(fitness[remaining], kind="stable")]
            selected = np.concatenate([selected, order[: size - selected.size]])

    return Population(members[i] for i in selected)


__all__ = [
    "dominance_matrix",
    "compute_distance_matrix",
    "default_k",
    "spea2_fitness",
    "truncate_by_distance",
    "truncate_population",
    "StrengthFitnessEvaluator",
    "environmental_selection",
]
