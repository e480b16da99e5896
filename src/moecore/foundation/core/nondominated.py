# foundation/core/nondominated.py
"""
Populations that keep only mutually nondominated members.

Insertion is transactional: a candidate dominated by any member leaves the
population untouched; otherwise every member it dominates is removed and the
candidate is appended.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from moecore.foundation.core.comparators import (
    AggregateConstraintComparator,
    Dominance,
    DominanceComparator,
    EpsilonBoxObjectiveComparator,
    ParetoDominanceComparator,
)
from moecore.foundation.core.population import Population
from moecore.foundation.core.solution import Solution

DUPLICATE_TOLERANCE = 1e-10


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class NondominatedPopulation(Population):
    """
    Population whose members never dominate one another.

    Parameters
    ----------
    comparator : DominanceComparator | None
        Dominance test; defaults to :class:`ParetoDominanceComparator`.
    solutions : Iterable[Solution] | None
        Initial candidates, inserted one by one.
    allow_duplicates : bool
        When False (default), a candidate whose objective vector lies within
        ``DUPLICATE_TOLERANCE`` of a member is rejected.
    """

    def __init__(
        self,
        comparator: DominanceComparator | None = None,
        solutions: Iterable[Solution] | None = None,
        *,
        allow_duplicates: bool = False,
    ) -> None:
        self.comparator = comparator if comparator is not None else ParetoDominanceComparator()
        self.allow_duplicates = allow_duplicates
        super().__init__(solutions)

    def add(self, solution: Solution) -> bool:
        dominated: list[int] = []
        for i, member in enumerate(self._data):
            flag = self.comparator.compare(solution, member)
            if flag == Dominance.B_DOMINATES:
                return False
            if flag == Dominance.A_DOMINATES:
                dominated.append(i)
            elif not self.allow_duplicates and _is_duplicate(solution, member):
                return False
        self._replace(dominated, solution)
        return True

    def _replace(self, doomed: list[int], solution: Solution) -> None:
        for i in reversed(doomed):
            del self._data[i]
        self._data.append(solution)

    def is_nondominated(self) -> bool:
        """Check the invariant over every pair; O(n^2), meant for tests/diagnostics."""
        for i, a in enumerate(self._data):
            for b in self._data[i + 1 :]:
                if self.comparator.compare(a, b) != Dominance.NONDOMINATED:
                    return False
        return True


def _is_duplicate(a: Solution, b: Solution) -> bool:
    return float(np.linalg.norm(a.objectives - b.objectives)) < DUPLICATE_TOLERANCE


class EpsilonBoxDominanceArchive(NondominatedPopulation):
    """
    Nondominated archive over epsilon boxes.

    Objective space is split into boxes of width ``epsilon[i]``. At most one
    member per occupied box is kept (the one closest to the box's lower
    corner, the incumbent on ties) and dominance is decided on box indices,
    which bounds the archive size without a capacity parameter.

    Attributes:
        improvements: Accepted insertions that occupied a new box.
        dominating_improvements: Accepted insertions that evicted members
            from other boxes.
    """

    def __init__(
        self,
        epsilon: float | Sequence[float] | np.ndarray,
        solutions: Iterable[Solution] | None = None,
    ) -> None:
        self.box_comparator = EpsilonBoxObjectiveComparator(epsilon)
        self._constraints = AggregateConstraintComparator()
        self.improvements = 0
        self.dominating_improvements = 0
        super().__init__(self.box_comparator, solutions, allow_duplicates=True)

    @property
    def epsilon(self) -> np.ndarray:
        return self.box_comparator.epsilon

    def _compare(self, solution: Solution, member: Solution) -> tuple[Dominance, bool]:
        if solution.n_con or member.n_con:
            flag = self._constraints.compare(solution, member)
            if flag != Dominance.NONDOMINATED:
                return flag, False
        flag = self.box_comparator.compare(solution, member)
        return flag, self.box_comparator.same_box

    def add(self, solution: Solution) -> bool:
        dominated: list[int] = []
        same_box = False
        evicted_other_box = False
        for i, member in enumerate(self._data):
            flag, shares_box = self._compare(solution, member)
            if flag == Dominance.B_DOMINATES:
                return False
            if flag == Dominance.A_DOMINATES:
                dominated.append(i)
                if shares_box:
                    same_box = True
                else:
                    evicted_other_box = True

        if not same_box:
            self.improvements += 1
        if evicted_other_box:
            self.dominating_improvements += 1
        _logger().debug(
            "epsilon archive accepted %s (evicted=%d, same_box=%s)", solution, len(dominated), same_box
        )
        self._replace(dominated, solution)
        return True


__all__ = ["NondominatedPopulation", "EpsilonBoxDominanceArchive", "DUPLICATE_TOLERANCE"]
