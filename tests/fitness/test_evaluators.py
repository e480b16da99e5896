from __future__ import annotations

import numpy as np
import pytest

from moecore.fitness.crowding import CrowdingDistanceFitnessEvaluator, crowding_distance
from moecore.fitness.epsilon import AdditiveEpsilonIndicatorFitnessEvaluator, epsilon_indicator
from moecore.fitness.hypervolume import HypervolumeContributionFitnessEvaluator, hv_contributions, hypervolume
from moecore.foundation.core.population import Population
from moecore.foundation.core.solution import Solution
from moecore.foundation.exceptions import ContractViolationError


def test_crowding_boundaries_are_infinite() -> None:
    F = np.array([[0.0, 1.0], [0.25, 0.75], [0.5, 0.5], [1.0, 0.0]])
    d = crowding_distance(F)
    assert np.isinf(d[0]) and np.isinf(d[3])
    assert d[1] == pytest.approx(1.0)
    assert d[2] == pytest.approx(1.5)
    assert np.isinf(crowding_distance(F[:2])).all()


def test_crowding_evaluator_writes_fitness() -> None:
    pop = Population(Solution(row) for row in [[0.0, 1.0], [0.4, 0.6], [1.0, 0.0]])
    evaluator = CrowdingDistanceFitnessEvaluator()
    evaluator.evaluate(pop)
    assert evaluator.are_larger_values_preferred()
    assert np.isfinite(pop.get(1).fitness)
    assert np.isinf(pop.get(0).fitness)


def test_hypervolume_2d() -> None:
    F = np.array([[0.5, 1.5], [1.5, 0.5]])
    assert hypervolume(F, [2.0, 2.0]) == pytest.approx(1.25)
    assert hypervolume(np.array([[3.0, 3.0]]), [2.0, 2.0]) == 0.0
    assert hypervolume(np.empty((0, 2)), [1.0, 1.0]) == 0.0


def test_hypervolume_3d_matches_box_union() -> None:
    F = np.array([[0.0, 0.0, 1.0], [1.0, 1.0, 0.0]])
    # boxes 2x2x1 and 1x1x2 overlap in a 1x1x1 cube
    assert hypervolume(F, [2.0, 2.0, 2.0]) == pytest.approx(4.0 + 2.0 - 1.0)


def test_hypervolume_ignores_dominated_points() -> None:
    F = np.array([[0.0, 1.0], [1.0, 0.0], [1.5, 1.5]])
    assert hypervolume(F, [2.0, 2.0]) == pytest.approx(3.0)


def test_hypervolume_dimension_mismatch() -> None:
    with pytest.raises(ContractViolationError):
        hypervolume(np.array([[0.0, 1.0]]), [2.0, 2.0, 2.0])


def test_hv_contributions() -> None:
    F = np.array([[0.0, 1.0], [1.0, 0.0]])
    assert hv_contributions(F, [2.0, 2.0]) == pytest.approx([1.0, 1.0])


def test_hv_contributions_zero_for_dominated_and_outside_points() -> None:
    F = np.array([[0.0, 1.0], [1.0, 0.0], [1.5, 1.5], [3.0, 0.5]])
    contrib = hv_contributions(F, [2.0, 2.0])
    assert contrib.tolist()[2:] == [0.0, 0.0]
    assert contrib[:2] == pytest.approx([1.0, 1.0])


def test_hypervolume_many_objectives() -> None:
    F = np.array([[0.0, 0.0, 0.0, 0.0], [0.5, 0.5, 0.5, 0.5]])
    assert hypervolume(F, [1.0, 1.0, 1.0, 1.0]) == pytest.approx(1.0)
    assert hv_contributions(F, [1.0, 1.0, 1.0, 1.0]).tolist()[1] == pytest.approx(0.0)


def test_hypervolume_evaluator_reference_offset() -> None:
    pop = Population(Solution(row) for row in [[0.0, 1.0], [1.0, 0.0]])
    HypervolumeContributionFitnessEvaluator(offset=1.0).evaluate(pop)
    assert pop.fitness() == pytest.approx([1.0, 1.0])
    with pytest.raises(ContractViolationError):
        HypervolumeContributionFitnessEvaluator(offset=0.0)


def test_epsilon_indicator_definition() -> None:
    F = np.array([[0.0, 0.0], [1.0, 2.0]])
    ind = epsilon_indicator(F)
    assert ind.shape == (2, 2)
    assert np.isclose(ind[0, 1], 2.0)
    assert np.isclose(ind[1, 0], -1.0)


def test_epsilon_evaluator_ranks_dominated_member_last() -> None:
    pop = Population(Solution(row) for row in [[0.0, 1.0], [1.0, 0.0], [0.9, 0.9]])
    evaluator = AdditiveEpsilonIndicatorFitnessEvaluator()
    evaluator.evaluate(pop)
    fitness = pop.fitness()
    assert evaluator.larger_values_preferred
    assert np.all(fitness <= 0.0)
    assert int(np.argmin(fitness)) == 2
    with pytest.raises(ContractViolationError):
        AdditiveEpsilonIndicatorFitnessEvaluator(kappa=0.0)


def test_evaluating_empty_population_is_a_no_op() -> None:
    for evaluator in (
        CrowdingDistanceFitnessEvaluator(),
        HypervolumeContributionFitnessEvaluator(),
        AdditiveEpsilonIndicatorFitnessEvaluator(),
    ):
        evaluator.evaluate(Population())
