# foundation/core/population.py
"""
Ordered container of solutions.

Insertion order carries no dominance meaning; it only gives members a
stable index used by deterministic tie breaks.
"""
from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, Iterator

import numpy as np

from moecore.foundation.core.solution import Solution
from moecore.foundation.exceptions import CapacityError

SolutionComparator = Callable[[Solution, Solution], int]


class Population:
    def __init__(self, solutions: Iterable[Solution] | None = None) -> None:
        self._data: list[Solution] = []
        if solutions is not None:
            self.add_all(solutions)

    def add(self, solution: Solution) -> bool:
        self._data.append(solution)
        return True

    def add_all(self, solutions: Iterable[Solution]) -> bool:
        """Add each solution in turn; True when at least one was added."""
        changed = False
        for solution in solutions:
            changed = self.add(solution) or changed
        return changed

    def get(self, index: int) -> Solution:
        return self._data[index]

    def remove(self, solution: Solution) -> bool:
        for i, member in enumerate(self._data):
            if member is solution:
                del self._data[i]
                return True
        return False

    def remove_all(self, solutions: Iterable[Solution]) -> bool:
        doomed = {id(s) for s in solutions}
        before = len(self._data)
        self._data = [s for s in self._data if id(s) not in doomed]
        return len(self._data) != before

    def clear(self) -> None:
        self._data.clear()

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def sort(self, comparator: SolutionComparator) -> None:
        """Stable in-place sort using a cmp-style comparator."""
        self._data.sort(key=cmp_to_key(comparator))

    def truncate(self, size: int, comparator: SolutionComparator) -> None:
        """Sort with ``comparator`` and drop trailing members until ``size`` remain."""
        if size < 0:
            raise CapacityError(size, "size")
        self.sort(comparator)
        del self._data[size:]

    def objectives(self) -> np.ndarray:
        """Snapshot of member objectives, shape (n, n_obj)."""
        if not self._data:
            return np.empty((0, 0), dtype=float)
        return np.vstack([s.objectives for s in self._data])

    def constraints(self) -> np.ndarray | None:
        """Snapshot of member constraints, or None when no member has any.

        Members with fewer constraints are padded with 0.0 (satisfied).
        """
        if not self._data or all(s.n_con == 0 for s in self._data):
            return None
        width = max(s.n_con for s in self._data)
        G = np.zeros((len(self._data), width), dtype=float)
        for i, s in enumerate(self._data):
            G[i, : s.n_con] = s.constraints
        return G

    def violations(self) -> np.ndarray:
        """Aggregate constraint violation per member, shape (n,)."""
        return np.array([s.violation for s in self._data], dtype=float)

    def fitness(self) -> np.ndarray:
        """Member fitness values; stale/missing values are NaN."""
        return np.array([np.nan if s.fitness is None else s.fitness for s in self._data], dtype=float)

    def copy(self) -> "Population":
        """Deep copy into a plain Population (solutions copied by value)."""
        return Population(s.copy() for s in self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Solution]:
        return iter(list(self._data))

    def __getitem__(self, index: int) -> Solution:
        return self._data[index]

    def __contains__(self, solution: object) -> bool:
        return any(member is solution for member in self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._data)})"


__all__ = ["Population", "SolutionComparator"]
