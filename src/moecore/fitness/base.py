# fitness/base.py
"""
Fitness evaluator capability.

An evaluator is stateless apart from its construction parameters: it reads
the objectives (and constraints) of every member of a population and writes
one scalar into each member's ``fitness`` field.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from moecore.foundation.core.population import Population


class FitnessEvaluator(ABC):
    """Base class for fitness assignment strategies."""

    #: Direction of the scalar written by :meth:`evaluate`.
    larger_values_preferred: bool = False

    def are_larger_values_preferred(self) -> bool:
        return self.larger_values_preferred

    def check_capacity(self, capacity: int) -> None:
        """Reject a bounded archive this evaluator could not prune.

        A bounded archive evaluates at most ``capacity + 1`` members. The
        default accepts any capacity.
        """

    def evaluate(self, population: Population) -> None:
        """Overwrite the fitness of every member of ``population``."""
        if len(population) == 0:
            return
        values = self.compute(population)
        for solution, value in zip(population, values):
            solution.fitness = float(value)

    @abstractmethod
    def compute(self, population: Population) -> np.ndarray:
        """Return one fitness value per member, in population order."""


__all__ = ["FitnessEvaluator"]
