from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Union

from moecore.fitness.archive import FitnessBasedArchive
from moecore.fitness.base import FitnessEvaluator
from moecore.fitness.crowding import CrowdingDistanceFitnessEvaluator
from moecore.fitness.epsilon import AdditiveEpsilonIndicatorFitnessEvaluator
from moecore.fitness.hypervolume import HypervolumeContributionFitnessEvaluator
from moecore.fitness.spea2 import StrengthFitnessEvaluator
from moecore.foundation.core.comparators import resolve_epsilon
from moecore.foundation.core.nondominated import EpsilonBoxDominanceArchive
from moecore.foundation.exceptions import CapacityError, ContractViolationError, InvalidFitnessEvaluatorError

FitnessName = Literal["spea2", "crowding", "hypervolume", "epsilon"]
FITNESS_EVALUATORS: tuple[str, ...] = ("spea2", "crowding", "hypervolume", "epsilon")


@dataclass(frozen=True)
class ArchiveConfig:
    capacity: int = 100
    fitness: FitnessName = "spea2"

    k: Optional[int] = None  # spea2 density neighbour; None -> sqrt(n)
    hv_offset: float = 100.0  # hypervolume reference point offset
    kappa: float = 0.05  # epsilon indicator scaling

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise CapacityError(self.capacity)
        if self.fitness not in FITNESS_EVALUATORS:
            raise InvalidFitnessEvaluatorError(self.fitness, list(FITNESS_EVALUATORS))
        if self.k is not None and self.k < 1:
            raise ContractViolationError(f"k must be >= 1 when given, got {self.k}.")
        if not self.hv_offset > 0.0:
            raise ContractViolationError(f"hv_offset must be > 0, got {self.hv_offset}.")
        if not self.kappa > 0.0:
            raise ContractViolationError(f"kappa must be > 0, got {self.kappa}.")


@dataclass(frozen=True)
class EpsilonArchiveConfig:
    epsilon: Union[float, Sequence[float]] = 0.01

    def __post_init__(self) -> None:
        resolve_epsilon(self.epsilon)


def build_fitness_evaluator(cfg: ArchiveConfig) -> FitnessEvaluator:
    if cfg.fitness == "spea2":
        return StrengthFitnessEvaluator(k=cfg.k)
    if cfg.fitness == "crowding":
        return CrowdingDistanceFitnessEvaluator()
    if cfg.fitness == "hypervolume":
        return HypervolumeContributionFitnessEvaluator(offset=cfg.hv_offset)
    if cfg.fitness == "epsilon":
        return AdditiveEpsilonIndicatorFitnessEvaluator(kappa=cfg.kappa)
    raise InvalidFitnessEvaluatorError(cfg.fitness, list(FITNESS_EVALUATORS))


def build_archive(cfg: ArchiveConfig) -> FitnessBasedArchive:
    return FitnessBasedArchive(build_fitness_evaluator(cfg), cfg.capacity)


def build_epsilon_archive(cfg: EpsilonArchiveConfig) -> EpsilonBoxDominanceArchive:
    return EpsilonBoxDominanceArchive(cfg.epsilon)


__all__ = [
    "ArchiveConfig",
    "EpsilonArchiveConfig",
    "FITNESS_EVALUATORS",
    "build_fitness_evaluator",
    "build_archive",
    "build_epsilon_archive",
]
