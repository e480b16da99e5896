# foundation/core/comparators.py
"""
Dominance and ordering comparators.

Dominance comparators answer "who dominates whom" between two solutions and
drive nondominated insertion. Ordering comparators (objective, lexicographic,
fitness) are plain ``cmp``-style callables returning a negative number, zero
or a positive number, usable with :func:`functools.cmp_to_key`.
"""
from __future__ import annotations

import math
from enum import IntEnum
from typing import Protocol, Sequence

import numpy as np

from moecore.foundation.core.solution import Solution
from moecore.foundation.exceptions import DimensionMismatchError, InvalidEpsilonError


class Dominance(IntEnum):
    """Outcome of a dominance comparison between ``a`` and ``b``."""

    A_DOMINATES = -1
    NONDOMINATED = 0
    B_DOMINATES = 1


class DominanceComparator(Protocol):
    def compare(self, a: Solution, b: Solution) -> Dominance: ...


def _check_dimensions(a: Solution, b: Solution) -> None:
    if a.n_obj != b.n_obj:
        raise DimensionMismatchError(a.n_obj, b.n_obj)


def pareto_dominance(fa: np.ndarray, fb: np.ndarray) -> Dominance:
    """Pareto dominance between two objective vectors (minimization)."""
    a_better = bool(np.any(fa < fb))
    b_better = bool(np.any(fb < fa))
    if a_better and not b_better:
        return Dominance.A_DOMINATES
    if b_better and not a_better:
        return Dominance.B_DOMINATES
    return Dominance.NONDOMINATED


class ParetoObjectiveComparator:
    """Pareto dominance on objectives only; constraints are ignored."""

    def compare(self, a: Solution, b: Solution) -> Dominance:
        _check_dimensions(a, b)
        return pareto_dominance(a.objectives, b.objectives)


class AggregateConstraintComparator:
    """The solution with strictly smaller total violation dominates."""

    def compare(self, a: Solution, b: Solution) -> Dominance:
        va, vb = a.violation, b.violation
        if va < vb:
            return Dominance.A_DOMINATES
        if vb < va:
            return Dominance.B_DOMINATES
        return Dominance.NONDOMINATED


class ParetoDominanceComparator:
    """
    Constraint domination first, Pareto dominance otherwise.

    This is the default comparator of every population in moecore.
    """

    def __init__(self) -> None:
        self._constraints = AggregateConstraintComparator()
        self._objectives = ParetoObjectiveComparator()

    def compare(self, a: Solution, b: Solution) -> Dominance:
        _check_dimensions(a, b)
        if a.n_con or b.n_con:
            result = self._constraints.compare(a, b)
            if result != Dominance.NONDOMINATED:
                return result
        return self._objectives.compare(a, b)


def resolve_epsilon(epsilon: float | Sequence[float] | np.ndarray, n_obj: int | None = None) -> np.ndarray:
    """Validate epsilon values and return them as a 1D float array."""
    eps = np.atleast_1d(np.asarray(epsilon, dtype=float))
    if eps.ndim != 1 or eps.size == 0:
        raise InvalidEpsilonError("epsilon must be a scalar or a 1D sequence.", epsilon)
    if not np.all(np.isfinite(eps)) or np.any(eps <= 0.0):
        raise InvalidEpsilonError("epsilon values must be finite and > 0.", epsilon)
    if n_obj is not None and eps.size not in (1, n_obj):
        raise InvalidEpsilonError(f"expected 1 or {n_obj} epsilon values, got {eps.size}.", epsilon)
    return eps


class EpsilonBoxObjectiveComparator:
    """
    Pareto dominance between epsilon boxes.

    Objective ``i`` is mapped to box index ``floor(f_i / eps_i)``. When the
    epsilon vector is shorter than the objective vector, the last value is
    reused for the remaining objectives.
    """

    def __init__(self, epsilon: float | Sequence[float] | np.ndarray) -> None:
        self.epsilon = resolve_epsilon(epsilon)
        self.same_box = False

    def epsilons_for(self, n_obj: int) -> np.ndarray:
        if self.epsilon.size >= n_obj:
            return self.epsilon[:n_obj]
        pad = np.full(n_obj - self.epsilon.size, self.epsilon[-1])
        return np.concatenate([self.epsilon, pad])

    def box_index(self, solution: Solution) -> np.ndarray:
        return np.floor(solution.objectives / self.epsilons_for(solution.n_obj))

    def corner_distance(self, solution: Solution) -> float:
        """Distance to the box's lower corner, in epsilon-scaled units."""
        eps = self.epsilons_for(solution.n_obj)
        scaled = solution.objectives / eps
        return float(np.linalg.norm(scaled - np.floor(scaled)))

    def compare(self, a: Solution, b: Solution) -> Dominance:
        """Compare the boxes of ``a`` and ``b``.

        Sets :attr:`same_box` as a side channel; when both solutions share a
        box the result favours the one closer to the box corner (ties favour
        ``b``, the incumbent).
        """
        _check_dimensions(a, b)
        box_a = self.box_index(a)
        box_b = self.box_index(b)
        result = pareto_dominance(box_a, box_b)
        self.same_box = bool(np.array_equal(box_a, box_b))
        if not self.same_box:
            return result
        if self.corner_distance(a) < self.corner_distance(b):
            return Dominance.A_DOMINATES
        return Dominance.B_DOMINATES


# ---------------------------------------------------------------------------
# Ordering comparators
# ---------------------------------------------------------------------------


class ObjectiveComparator:
    """Orders solutions by a single objective, ascending."""

    def __init__(self, objective: int) -> None:
        self.objective = int(objective)

    def __call__(self, a: Solution, b: Solution) -> int:
        fa = float(a.objectives[self.objective])
        fb = float(b.objectives[self.objective])
        return (fa > fb) - (fa < fb)


class LexicographicalComparator:
    """Orders solutions by objective vector, first objective most significant."""

    def __call__(self, a: Solution, b: Solution) -> int:
        _check_dimensions(a, b)
        for fa, fb in zip(a.objectives, b.objectives):
            if fa < fb:
                return -1
            if fa > fb:
                return 1
        return 0


class FitnessComparator:
    """
    Orders solutions best-first by fitness.

    ``larger_values_preferred`` gives the direction. Missing fitness values
    are treated as the worst possible value.
    """

    def __init__(self, larger_values_preferred: bool) -> None:
        self.larger_values_preferred = bool(larger_values_preferred)

    def _key(self, solution: Solution) -> float:
        if solution.fitness is None:
            return math.inf
        value = float(solution.fitness)
        if math.isnan(value):
            return math.inf
        return -value if self.larger_values_preferred else value

    def __call__(self, a: Solution, b: Solution) -> int:
        ka, kb = self._key(a), self._key(b)
        return (ka > kb) - (ka < kb)


__all__ = [
    "Dominance",
    "DominanceComparator",
    "pareto_dominance",
    "ParetoObjectiveComparator",
    "AggregateConstraintComparator",
    "ParetoDominanceComparator",
    "resolve_epsilon",
    "EpsilonBoxObjectiveComparator",
    "ObjectiveComparator",
    "LexicographicalComparator",
    "FitnessComparator",
]
