# fitness/hypervolume.py
"""
Hypervolume and per-member hypervolume contributions.

Both are computed exactly by moocore for any number of objectives.
"""
from __future__ import annotations

from typing import Sequence

import moocore
import numpy as np

from moecore.fitness.base import FitnessEvaluator
from moecore.foundation.core.population import Population
from moecore.foundation.exceptions import ContractViolationError


def _validate(F: np.ndarray, ref: np.ndarray) -> None:
    if F.ndim != 2 or F.shape[1] != ref.shape[0]:
        raise ContractViolationError(
            f"front of shape {F.shape} does not match reference point of length {ref.shape[0]}."
        )
    if not np.isfinite(F).all() or not np.isfinite(ref).all():
        raise ContractViolationError("F and ref_point must contain finite numbers.")


def hypervolume(F: np.ndarray, ref_point: Sequence[float] | np.ndarray) -> float:
    """Hypervolume dominated by ``F`` (minimization) and bounded by ``ref_point``.

    Points that do not strictly improve on the reference point in every
    objective contribute nothing.
    """
    F = np.asarray(F, dtype=float)
    ref = np.asarray(ref_point, dtype=float)
    if F.size == 0:
        return 0.0
    _validate(F, ref)
    inside = np.all(F < ref, axis=1)
    if not inside.any():
        return 0.0
    return float(moocore.hypervolume(F[inside], ref=ref))


def hv_contributions(F: np.ndarray, ref_point: Sequence[float] | np.ndarray) -> np.ndarray:
    """Exclusive hypervolume contribution of each point, shape (N,).

    Dominated points and points outside the reference box contribute 0.
    """
    F = np.asarray(F, dtype=float)
    ref = np.asarray(ref_point, dtype=float)
    n = F.shape[0]
    if n == 0:
        return np.empty(0, dtype=float)
    _validate(F, ref)
    contrib = np.zeros(n, dtype=float)
    inside = np.all(F < ref, axis=1)
    if inside.any():
        contrib[inside] = np.asarray(moocore.hv_contributions(F[inside], ref=ref), dtype=float)
    return contrib


class HypervolumeContributionFitnessEvaluator(FitnessEvaluator):
    """
    Fitness equal to each member's exclusive hypervolume contribution.

    The reference point is the per-objective maximum of the evaluated
    population plus ``offset``. Larger is better.
    """

    larger_values_preferred = True

    def __init__(self, offset: float = 100.0) -> None:
        if not offset > 0.0:
            raise ContractViolationError(f"offset must be > 0, got {offset}.")
        self.offset = float(offset)

    def compute(self, population: Population) -> np.ndarray:
        F = population.objectives()
        ref = np.max(F, axis=0) + self.offset
        return hv_contributions(F, ref)


__all__ = ["hypervolume", "hv_contributions", "HypervolumeContributionFitnessEvaluator"]
