"""Core data structures: solutions, comparators and populations."""

from .comparators import (
    AggregateConstraintComparator,
    Dominance,
    DominanceComparator,
    EpsilonBoxObjectiveComparator,
    FitnessComparator,
    LexicographicalComparator,
    ObjectiveComparator,
    ParetoDominanceComparator,
    ParetoObjectiveComparator,
    pareto_dominance,
)
from .nondominated import EpsilonBoxDominanceArchive, NondominatedPopulation
from .population import Population
from .solution import Solution

__all__ = [
    "AggregateConstraintComparator",
    "Dominance",
    "DominanceComparator",
    "EpsilonBoxObjectiveComparator",
    "FitnessComparator",
    "LexicographicalComparator",
    "ObjectiveComparator",
    "ParetoDominanceComparator",
    "ParetoObjectiveComparator",
    "pareto_dominance",
    "EpsilonBoxDominanceArchive",
    "NondominatedPopulation",
    "Population",
    "Solution",
]
