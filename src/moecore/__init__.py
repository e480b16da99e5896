"""
moecore: bounded nondominated archives, fitness assignment and quality
indicators for multi-objective evolutionary algorithms.
"""

from .config import ArchiveConfig, EpsilonArchiveConfig, build_archive, build_epsilon_archive, build_fitness_evaluator
from .fitness import (
    AdditiveEpsilonIndicatorFitnessEvaluator,
    CrowdingDistanceFitnessEvaluator,
    FitnessBasedArchive,
    FitnessEvaluator,
    HypervolumeContributionFitnessEvaluator,
    StrengthFitnessEvaluator,
    compute_distance_matrix,
    environmental_selection,
    truncate_population,
)
from .foundation.core import (
    Dominance,
    EpsilonBoxDominanceArchive,
    FitnessComparator,
    LexicographicalComparator,
    NondominatedPopulation,
    ObjectiveComparator,
    ParetoDominanceComparator,
    ParetoObjectiveComparator,
    Population,
    Solution,
)
from .foundation.logging import configure_moecore_logging
from .foundation.version import __version__
from .indicators import GeneralizedSpread, Normalizer, generalized_spread

__all__ = [
    "__version__",
    # Data model
    "Solution",
    "Population",
    "NondominatedPopulation",
    "EpsilonBoxDominanceArchive",
    # Comparators
    "Dominance",
    "ParetoDominanceComparator",
    "ParetoObjectiveComparator",
    "ObjectiveComparator",
    "LexicographicalComparator",
    "FitnessComparator",
    # Fitness
    "FitnessEvaluator",
    "StrengthFitnessEvaluator",
    "CrowdingDistanceFitnessEvaluator",
    "HypervolumeContributionFitnessEvaluator",
    "AdditiveEpsilonIndicatorFitnessEvaluator",
    "FitnessBasedArchive",
    "compute_distance_matrix",
    "environmental_selection",
    "truncate_population",
    # Indicators
    "GeneralizedSpread",
    "Normalizer",
    "generalized_spread",
    # Config
    "ArchiveConfig",
    "EpsilonArchiveConfig",
    "build_archive",
    "build_epsilon_archive",
    "build_fitness_evaluator",
    # Logging
    "configure_moecore_logging",
]
