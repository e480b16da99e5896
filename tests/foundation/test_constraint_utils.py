from __future__ import annotations

import numpy as np

from moecore.foundation.constraints.utils import compute_violation, is_feasible, solution_violation


def test_compute_violation_sums_positive_parts() -> None:
    G = np.array([[-1.0, 0.0], [0.2, -0.1], [0.5, 0.5]])
    assert np.allclose(compute_violation(G), [0.0, 0.2, 1.0])
    assert is_feasible(G).tolist() == [True, False, False]


def test_unconstrained_defaults() -> None:
    assert compute_violation(None, n=3).tolist() == [0.0, 0.0, 0.0]
    assert is_feasible(None, n=2).tolist() == [True, True]


def test_feasibility_tolerance() -> None:
    G = np.array([[1e-9]])
    assert not is_feasible(G)[0]
    assert is_feasible(G, eps=1e-6)[0]


def test_single_vector_violation() -> None:
    assert solution_violation(np.empty(0)) == 0.0
    assert solution_violation(np.array([0.3, -2.0, 0.2])) == 0.5
