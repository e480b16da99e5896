"""
Utility helpers for constraint handling.
"""

from __future__ import annotations

import numpy as np


def compute_violation(G: np.ndarray | None, *, n: int | None = None) -> np.ndarray:
    """Sum of positive parts per-solution; assumes G shape (N, n_constr), g<=0 satisfied.

    When *G* is ``None`` (unconstrained), returns an array of zeros of length
    *n* (0 when *n* is not given).
    """
    if G is None:
        return np.zeros(n or 0, dtype=float)
    G = np.asarray(G, dtype=float)
    if G.ndim == 1:
        G = G[None, :]
    positive = np.maximum(G, 0.0)
    return np.asarray(np.sum(positive, axis=1), dtype=float)


def is_feasible(G: np.ndarray | None, *, n: int | None = None, eps: float = 0.0) -> np.ndarray:
    """Boolean feasibility mask; assumes G shape (N, n_constr).

    When *G* is ``None`` (unconstrained), returns an all-``True`` mask of
    length *n*.

    *eps* is a feasibility tolerance: constraints with ``g(x) <= eps`` are
    treated as satisfied (default ``0.0``).
    """
    if G is None:
        return np.ones(n or 0, dtype=bool)
    G = np.asarray(G, dtype=float)
    if G.ndim == 1:
        G = G[None, :]
    return np.asarray(np.all(G <= eps, axis=1), dtype=bool)


def solution_violation(constraints: np.ndarray) -> float:
    """Aggregate violation of a single constraint vector (0.0 when empty)."""
    if constraints.size == 0:
        return 0.0
    return float(np.sum(np.maximum(constraints, 0.0)))


__all__ = ["compute_violation", "is_feasible", "solution_violation"]
