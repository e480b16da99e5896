"""
Fitness assignment strategies and the fitness-based archive.

- `base.py`: FitnessEvaluator capability
- `spea2.py`: strength/density fitness, distance matrix, truncation
- `crowding.py`: crowding-distance fitness
- `hypervolume.py`: hypervolume contribution fitness
- `epsilon.py`: additive-epsilon indicator (IBEA) fitness
- `archive.py`: capacity-bounded FitnessBasedArchive
"""

from .archive import FitnessBasedArchive
from .base import FitnessEvaluator
from .crowding import CrowdingDistanceFitnessEvaluator, crowding_distance
from .epsilon import AdditiveEpsilonIndicatorFitnessEvaluator
from .hypervolume import HypervolumeContributionFitnessEvaluator, hv_contributions, hypervolume
from .spea2 import (
    StrengthFitnessEvaluator,
    compute_distance_matrix,
    dominance_matrix,
    environmental_selection,
    spea2_fitness,
    truncate_by_distance,
    truncate_population,
)

__all__ = [
    "FitnessBasedArchive",
    "FitnessEvaluator",
    # Evaluators
    "StrengthFitnessEvaluator",
    "CrowdingDistanceFitnessEvaluator",
    "HypervolumeContributionFitnessEvaluator",
    "AdditiveEpsilonIndicatorFitnessEvaluator",
    # Helpers
    "compute_distance_matrix",
    "crowding_distance",
    "dominance_matrix",
    "environmental_selection",
    "hv_contributions",
    "hypervolume",
    "spea2_fitness",
    "truncate_by_distance",
    "truncate_population",
]
