# indicators/normalizer.py
"""
Objective-space normalization for indicators.

Bounds are taken from a reference set; normalized copies map the reference
set into [0, 1] per objective. Infeasible solutions are left out of both the
bounds and the normalized output.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from moecore.foundation.constraints.utils import is_feasible
from moecore.foundation.core.population import Population
from moecore.foundation.exceptions import ContractViolationError, DimensionMismatchError, EmptyReferenceSetError


def feasible_front(source: Population | np.ndarray) -> np.ndarray:
    """Objectives of the feasible members only (arrays are taken as feasible)."""
    if isinstance(source, Population):
        mask = is_feasible(source.constraints(), n=len(source))
        if not mask.any():
            return np.empty((0, 0), dtype=float)
        return source.objectives()[mask]
    F = np.asarray(source, dtype=float)
    if F.ndim == 1:
        return F[None, :] if F.size else np.empty((0, 0), dtype=float)
    return F


class Normalizer:
    """
    Rescales objectives using the bounds of a reference set.

    Parameters
    ----------
    reference_set : Population | np.ndarray
        Set providing the per-objective minimum and maximum.
    minimum, maximum : Sequence[float] | None
        Explicit bounds; when both are given the reference set is only used
        for its dimension and may be empty.
    """

    def __init__(
        self,
        reference_set: Population | np.ndarray,
        *,
        minimum: Sequence[float] | None = None,
        maximum: Sequence[float] | None = None,
    ) -> None:
        if (minimum is None) != (maximum is None):
            raise ContractViolationError("minimum and maximum must be given together.")
        if minimum is not None and maximum is not None:
            self.minimum = np.asarray(minimum, dtype=float)
            self.maximum = np.asarray(maximum, dtype=float)
            if self.minimum.shape != self.maximum.shape or self.minimum.ndim != 1:
                raise ContractViolationError("minimum and maximum must be 1D with the same length.")
        else:
            F = feasible_front(reference_set)
            if F.shape[0] == 0:
                raise EmptyReferenceSetError()
            self.minimum = np.min(F, axis=0)
            self.maximum = np.max(F, axis=0)
        span = self.maximum - self.minimum
        # flat objectives are shifted but not scaled
        self._span = np.where(span > 0.0, span, 1.0)

    @property
    def n_obj(self) -> int:
        return int(self.minimum.shape[0])

    def normalize(self, source: Population | np.ndarray) -> np.ndarray:
        """Normalized objectives of the feasible members of ``source``."""
        F = feasible_front(source)
        if F.shape[0] == 0:
            return np.empty((0, self.n_obj), dtype=float)
        if F.shape[1] != self.n_obj:
            raise DimensionMismatchError(self.n_obj, F.shape[1])
        return (F - self.minimum) / self._span

    def normalize_population(self, population: Population) -> Population:
        """Copies of the feasible members with normalized objectives."""
        out = Population()
        for solution in population:
            if not solution.is_feasible:
                continue
            if solution.n_obj != self.n_obj:
                raise DimensionMismatchError(self.n_obj, solution.n_obj)
            clone = solution.copy()
            clone.objectives = (clone.objectives - self.minimum) / self._span
            out.add(clone)
        return out


__all__ = ["Normalizer", "feasible_front"]
