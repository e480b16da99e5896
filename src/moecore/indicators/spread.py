# indicators/spread.py
"""
Generalized Spread indicator.

Scores how evenly an approximation set is spaced and how well it reaches the
extremes of a reference front. 0 means even spacing that touches every
extreme; larger values mean uneven spacing and/or missed extremes. Degenerate
inputs (empty sets, a set collapsed onto one point) score 1.0.

References:
    A. Zhou, Y. Jin, Q. Zhang, B. Sendhoff and E. Tsang, "Combining
    Model-based and Genetics-based Offspring Generation for Multi-objective
    Optimization Using a Convergence Criterion," CEC 2006.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from moecore.foundation.core.comparators import LexicographicalComparator
from moecore.foundation.core.population import Population
from moecore.indicators.base import IndicatorResult
from moecore.indicators.normalizer import Normalizer, feasible_front
from moecore.indicators.utils import (
    as_front,
    check_same_dimension,
    distance_to_nearest,
    euclidean_distance,
    nearest_neighbour_distances,
)

WORST_SPREAD = 1.0


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def extreme_points(reference: np.ndarray) -> np.ndarray:
    """For each objective, the reference member with the largest value.

    Ties pick the last such member, shape (n_obj, n_obj).
    """
    n = reference.shape[0]
    last_max = n - 1 - np.argmax(reference[::-1], axis=0)
    return reference[last_max]


def lexicographic_order(F: np.ndarray) -> np.ndarray:
    """Stable lexicographic order of the rows of ``F`` (first column most significant)."""
    if F.shape[0] == 0:
        return np.empty(0, dtype=int)
    return np.lexsort(F.T[::-1])


def generalized_spread(
    approximation_set: Population | np.ndarray,
    reference_set: Population | np.ndarray,
    *,
    sort_in_place: bool = False,
) -> float:
    """Generalized Spread of ``approximation_set`` against ``reference_set``.

    Both sets are expected on a common scale (see :class:`Normalizer`).

    Parameters
    ----------
    approximation_set : Population | np.ndarray
        Set to score, shape (n, n_obj) when given as an array.
    reference_set : Population | np.ndarray
        Reference front.
    sort_in_place : bool
        When True and ``approximation_set`` is a Population, it is sorted
        lexicographically in place; otherwise inputs are never mutated.

    Returns
    -------
    float
        ``(d_extremes + sum_i |d_i - d_mean|) / (d_extremes + n * d_mean)``,
        or 1.0 for degenerate inputs.
    """
    if sort_in_place and isinstance(approximation_set, Population):
        approximation_set.sort(LexicographicalComparator())
        F = approximation_set.objectives()
    else:
        F = as_front(approximation_set)
        F = F[lexicographic_order(F)]
    R = as_front(reference_set)

    n = F.shape[0]
    if n == 0:
        _logger().debug("generalized spread: empty approximation set")
        return WORST_SPREAD
    if R.shape[0] == 0:
        _logger().debug("generalized spread: empty reference set")
        return WORST_SPREAD
    check_same_dimension(F, R)

    if euclidean_distance(F[0], F[-1]) == 0.0:
        _logger().debug("generalized spread: approximation set collapsed to a single point")
        return WORST_SPREAD

    distances = nearest_neighbour_distances(F)
    mean_distance = float(np.mean(distances))
    dist_extremes = float(np.sum(distance_to_nearest(extreme_points(R), F)))
    normalized_sum = float(np.sum(np.abs(distances - mean_distance)))

    denominator = dist_extremes + n * mean_distance
    if denominator == 0.0:
        # duplicated points sitting exactly on the extremes
        return WORST_SPREAD
    return (dist_extremes + normalized_sum) / denominator


class GeneralizedSpread:
    """
    Generalized Spread bound to a reference set.

    Approximation and reference sets are normalized with the reference set's
    bounds before scoring, and infeasible approximation members are ignored.

    Parameters
    ----------
    reference_set : Population | np.ndarray
        Reference front; may be empty, in which case every score is 1.0.
    normalize : bool
        Disable to score raw objectives.
    """

    name = "generalized_spread"

    def __init__(self, reference_set: Population | np.ndarray, *, normalize: bool = True) -> None:
        self.reference_front = feasible_front(reference_set)
        self._normalize = normalize
        self.normalizer: Normalizer | None = None
        if normalize and self.reference_front.shape[0] > 0:
            self.normalizer = Normalizer(self.reference_front)
            self.normalized_reference = self.normalizer.normalize(self.reference_front)
        else:
            self.normalized_reference = self.reference_front

    def evaluate(self, approximation_set: Population | np.ndarray) -> float:
        if self.normalizer is not None:
            F = self.normalizer.normalize(approximation_set)
        else:
            F = feasible_front(approximation_set)
        return generalized_spread(F, self.normalized_reference)

    def compute(
        self,
        front: np.ndarray,
        reference_front: Optional[np.ndarray] = None,
        **_: Any,
    ) -> IndicatorResult:
        indicator = self if reference_front is None else GeneralizedSpread(reference_front, normalize=self._normalize)
        value = indicator.evaluate(front)
        return IndicatorResult(value=value, details={"reference_front": indicator.reference_front})


__all__ = ["WORST_SPREAD", "extreme_points", "lexicographic_order", "generalized_spread", "GeneralizedSpread"]
