# indicators/utils.py
"""Objective-space distance helpers shared by indicators."""
from __future__ import annotations

import numpy as np
from scipy.spatial.distance import cdist

from moecore.foundation.core.population import Population
from moecore.foundation.exceptions import DimensionMismatchError


def as_front(source: Population | np.ndarray) -> np.ndarray:
    """Objective matrix of a population or array-like, shape (n, n_obj)."""
    if isinstance(source, Population):
        return source.objectives()
    F = np.asarray(source, dtype=float)
    if F.size == 0:
        return F.reshape(0, F.shape[-1] if F.ndim == 2 else 0)
    if F.ndim == 1:
        return F[None, :]
    return F


def check_same_dimension(A: np.ndarray, B: np.ndarray) -> None:
    if A.size and B.size and A.shape[1] != B.shape[1]:
        raise DimensionMismatchError(A.shape[1], B.shape[1])


def euclidean_distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.linalg.norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)))


def nearest_neighbour_distances(F: np.ndarray) -> np.ndarray:
    """Distance from each row of ``F`` to its nearest other row; ``inf`` for a single row."""
    n = F.shape[0]
    if n == 0:
        return np.empty(0, dtype=float)
    dist = cdist(F, F)
    np.fill_diagonal(dist, np.inf)
    return np.min(dist, axis=1)


def distance_to_nearest(points: np.ndarray, F: np.ndarray) -> np.ndarray:
    """Distance from each point to its nearest row of ``F``."""
    points = np.atleast_2d(np.asarray(points, dtype=float))
    if F.shape[0] == 0:
        return np.full(points.shape[0], np.inf)
    return np.min(cdist(points, F), axis=1)


__all__ = [
    "as_front",
    "check_same_dimension",
    "euclidean_distance",
    "nearest_neighbour_distances",
    "distance_to_nearest",
]
