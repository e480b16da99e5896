# fitness/archive.py
"""
Bounded nondominated archive pruned by fitness.

Nondominance is maintained eagerly on every insertion. Fitness is only
computed when an insertion pushes the archive over capacity (or when
:meth:`FitnessBasedArchive.update` is called); it is then recomputed for all
members, and the worst-ranked members are dropped until the archive is back
at capacity.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator

import numpy as np

from moecore.fitness.base import FitnessEvaluator
from moecore.foundation.core.comparators import DominanceComparator, FitnessComparator
from moecore.foundation.core.nondominated import NondominatedPopulation
from moecore.foundation.core.population import Population, SolutionComparator
from moecore.foundation.core.solution import Solution
from moecore.foundation.exceptions import CapacityError


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class FitnessBasedArchive:
    """
    Nondominated archive with a maximum capacity.

    Parameters
    ----------
    evaluator : FitnessEvaluator
        Fitness strategy, fixed for the archive's lifetime.
    capacity : int
        Maximum number of members; must be >= 0.
    comparator : DominanceComparator | None
        Dominance test for insertion; defaults to constraint-then-Pareto.
    solutions : Iterable[Solution] | None
        Initial candidates, added one by one.
    copy : bool
        When True (default) inserted solutions are copied, so the archive
        exclusively owns its members.
    """

    def __init__(
        self,
        evaluator: FitnessEvaluator,
        capacity: int,
        comparator: DominanceComparator | None = None,
        solutions: Iterable[Solution] | None = None,
        *,
        copy: bool = True,
    ) -> None:
        if capacity < 0:
            raise CapacityError(capacity)
        evaluator.check_capacity(int(capacity))
        self.capacity = int(capacity)
        self.evaluator = evaluator
        self.fitness_comparator = FitnessComparator(evaluator.are_larger_values_preferred())
        self.copy = copy
        self._members = NondominatedPopulation(comparator)
        self.prune_events = 0
        if solutions is not None:
            self.add_all(solutions)

    def add(self, solution: Solution) -> bool:
        """Insert ``solution``; returns False when a member dominates it."""
        candidate = solution.copy() if self.copy else solution
        if not self._members.add(candidate):
            return False

        if len(self._members) > self.capacity:
            self.update()
            before = len(self._members)
            self.truncate(self.capacity)
            self.prune_events += 1
            _logger().debug(
                "archive over capacity: pruned %d member(s) to %d", before - len(self._members), self.capacity
            )
        else:
            self._invalidate_fitness()
        return True

    def add_all(self, solutions: Iterable[Solution]) -> bool:
        changed = False
        for solution in solutions:
            changed = self.add(solution) or changed
        return changed

    def update(self) -> None:
        """Recompute the fitness of every member."""
        self.evaluator.evaluate(self._members)

    def truncate(self, size: int, comparator: SolutionComparator | None = None) -> None:
        """Drop the worst-ranked members until ``size`` remain.

        ``comparator`` defaults to the archive's fitness comparator; fitness
        values must be current (see :meth:`update`).
        """
        if size < 0:
            raise CapacityError(size, "size")
        self._members.truncate(size, comparator or self.fitness_comparator)

    def _invalidate_fitness(self) -> None:
        for member in self._members:
            member.fitness = None

    def size(self) -> int:
        return len(self._members)

    def get(self, index: int) -> Solution:
        return self._members.get(index)

    def is_empty(self) -> bool:
        return self._members.is_empty()

    def clear(self) -> None:
        self._members.clear()

    def objectives(self) -> np.ndarray:
        return self._members.objectives()

    def fitness(self) -> np.ndarray:
        return self._members.fitness()

    def to_population(self) -> Population:
        """Copy of the members as a plain population."""
        return self._members.copy()

    @property
    def population(self) -> NondominatedPopulation:
        """The underlying member collection (read-only use)."""
        return self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Solution]:
        return iter(self._members)

    def __getitem__(self, index: int) -> Solution:
        return self._members[index]

    def __contains__(self, solution: object) -> bool:
        return solution in self._members

    def __repr__(self) -> str:
        return f"FitnessBasedArchive(size={len(self._members)}, capacity={self.capacity}, evaluator={type(self.evaluator).__name__})"


__all__ = ["FitnessBasedArchive"]
