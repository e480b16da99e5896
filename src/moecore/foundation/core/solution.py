# foundation/core/solution.py
"""
Solution record shared by populations, archives and fitness evaluators.

Objectives are minimized; maximized objectives must be negated by the
caller before a solution is stored. Constraints follow the ``g <= 0``
convention of :func:`compute_violation`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from moecore.foundation.constraints.utils import solution_violation


def _as_vector(values: Sequence[float] | np.ndarray | None) -> np.ndarray:
    if values is None:
        return np.empty(0, dtype=float)
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError("solution vectors must be 1D.")
    return arr


@dataclass(eq=False)
class Solution:
    """
    One evaluated candidate.

    Attributes:
        objectives: Objective values, shape (n_obj,).
        constraints: Constraint values, shape (n_con,); empty when unconstrained.
        fitness: Scalar assigned by a fitness evaluator, ``None`` until computed
            or after it has been invalidated by a structural change.
        variables: Optional decision vector carried along for the caller.
    """

    objectives: np.ndarray
    constraints: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=float))
    fitness: float | None = None
    variables: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.objectives = _as_vector(self.objectives)
        self.constraints = _as_vector(self.constraints)
        if self.variables is not None:
            self.variables = np.array(self.variables)

    @classmethod
    def of(cls, *objectives: float, constraints: Sequence[float] | None = None) -> "Solution":
        """Build a solution from objective values, e.g. ``Solution.of(0.5, 0.5)``."""
        return cls(np.asarray(objectives, dtype=float), _as_vector(constraints))

    @property
    def n_obj(self) -> int:
        return int(self.objectives.shape[0])

    @property
    def n_con(self) -> int:
        return int(self.constraints.shape[0])

    @property
    def violation(self) -> float:
        return solution_violation(self.constraints)

    @property
    def is_feasible(self) -> bool:
        return self.violation == 0.0

    def copy(self) -> "Solution":
        """Return an independent copy (fitness included)."""
        return Solution(
            self.objectives.copy(),
            self.constraints.copy(),
            self.fitness,
            None if self.variables is None else self.variables.copy(),
        )

    def __repr__(self) -> str:
        objs = ", ".join(f"{v:.6g}" for v in self.objectives)
        extra = f", fitness={self.fitness:.6g}" if self.fitness is not None else ""
        return f"Solution(objectives=[{objs}]{extra})"


__all__ = ["Solution"]
