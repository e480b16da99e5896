from __future__ import annotations

import numpy as np
import pytest

from moecore.foundation.core.population import Population
from moecore.foundation.core.solution import Solution
from moecore.foundation.exceptions import DimensionMismatchError
from moecore.indicators.base import QualityIndicator
from moecore.indicators.spread import GeneralizedSpread, extreme_points, generalized_spread

EPS = 1e-9
REFERENCE = np.array([[0.0, 1.0], [1.0, 0.0]])


def _population(*rows: tuple[float, ...]) -> Population:
    return Population(Solution.of(*row) for row in rows)


def test_empty_approximation_set_scores_worst() -> None:
    assert generalized_spread(np.empty((0, 2)), REFERENCE) == 1.0
    assert generalized_spread(Population(), REFERENCE) == 1.0


def test_empty_reference_set_scores_worst() -> None:
    assert generalized_spread(REFERENCE, np.empty((0, 2))) == 1.0


def test_single_point_is_collapsed() -> None:
    assert generalized_spread(np.array([[0.5, 0.5]]), REFERENCE) == 1.0


def test_duplicate_points_are_collapsed() -> None:
    assert generalized_spread(np.array([[0.5, 0.5], [0.5, 0.5]]), REFERENCE) == 1.0


def test_extremes_only_is_perfect() -> None:
    assert generalized_spread(REFERENCE, REFERENCE) == pytest.approx(0.0, abs=EPS)


def test_even_spacing_is_perfect() -> None:
    approx = np.array([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]])
    assert generalized_spread(approx, REFERENCE) == pytest.approx(0.0, abs=EPS)


def test_uneven_spacing_is_penalized() -> None:
    approx = np.array([[0.0, 1.0], [0.25, 0.75], [1.0, 0.0]])
    assert generalized_spread(approx, REFERENCE) > 0.0


def test_missing_extremes_are_penalized() -> None:
    approx = np.array([[0.25, 0.75], [0.5, 0.5], [0.75, 0.25]])
    value = generalized_spread(approx, REFERENCE)
    # evenly spaced, so only the extreme distances count
    d_ext = 2 * np.hypot(0.25, 0.25)
    mean = np.hypot(0.25, 0.25)
    assert value == pytest.approx(d_ext / (d_ext + 3 * mean))


def test_input_order_does_not_matter() -> None:
    approx = np.array([[1.0, 0.0], [0.25, 0.75], [0.0, 1.0], [0.6, 0.4]])
    shuffled = approx[[2, 0, 3, 1]]
    assert generalized_spread(approx, REFERENCE) == pytest.approx(generalized_spread(shuffled, REFERENCE))


def test_caller_population_is_not_reordered_unless_requested() -> None:
    pop = _population((1.0, 0.0), (0.0, 1.0))
    generalized_spread(pop, REFERENCE)
    assert pop.objectives().tolist() == [[1.0, 0.0], [0.0, 1.0]]

    generalized_spread(pop, REFERENCE, sort_in_place=True)
    assert pop.objectives().tolist() == [[0.0, 1.0], [1.0, 0.0]]


def test_dimension_mismatch_raises() -> None:
    with pytest.raises(DimensionMismatchError):
        generalized_spread(np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0]]), REFERENCE)


def test_extreme_points_pick_max_per_objective() -> None:
    R = np.array([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]])
    assert extreme_points(R).tolist() == [[1.0, 0.0], [0.0, 1.0]]


def test_indicator_class_simple_cases() -> None:
    gs = GeneralizedSpread(_population((0.0, 1.0), (1.0, 0.0)))

    assert gs.evaluate(Population()) == pytest.approx(1.0, abs=EPS)
    assert gs.evaluate(_population((0.5, 0.5))) == pytest.approx(1.0, abs=EPS)
    assert gs.evaluate(_population((0.0, 1.0), (1.0, 0.0))) == pytest.approx(0.0, abs=EPS)
    assert gs.evaluate(_population((0.0, 1.0), (0.5, 0.5), (1.0, 0.0))) == pytest.approx(0.0, abs=EPS)
    assert gs.evaluate(_population((0.0, 1.0), (0.25, 0.75), (1.0, 0.0))) > 0.0


def test_indicator_normalizes_with_reference_bounds() -> None:
    raw = GeneralizedSpread(np.array([[0.0, 10.0], [10.0, 0.0]]))
    approx = np.array([[0.0, 10.0], [5.0, 5.0], [10.0, 0.0]])
    assert raw.evaluate(approx) == pytest.approx(0.0, abs=EPS)
    assert raw.normalizer is not None
    assert raw.normalized_reference.tolist() == [[0.0, 1.0], [1.0, 0.0]]


def test_indicator_ignores_infeasible_members() -> None:
    gs = GeneralizedSpread(REFERENCE)
    infeasible = Population([Solution.of(0.5, 0.5, constraints=[10.0])])
    assert gs.evaluate(infeasible) == pytest.approx(1.0, abs=EPS)

    mixed = _population((0.0, 1.0), (1.0, 0.0))
    mixed.add(Solution.of(0.25, 0.75, constraints=[1.0]))
    assert gs.evaluate(mixed) == pytest.approx(0.0, abs=EPS)


def test_indicator_with_empty_reference_set_scores_worst() -> None:
    gs = GeneralizedSpread(Population())
    assert gs.normalizer is None
    assert gs.evaluate(REFERENCE) == 1.0


def test_compute_protocol_returns_result() -> None:
    gs: QualityIndicator = GeneralizedSpread(REFERENCE)
    result = gs.compute(REFERENCE)
    assert result.value == pytest.approx(0.0, abs=EPS)
    other = gs.compute(REFERENCE, reference_front=np.array([[0.0, 2.0], [2.0, 0.0]]))
    assert other.value > 0.0
    assert gs.name == "generalized_spread"


def test_spread_is_bounded_for_random_sets() -> None:
    rng = np.random.default_rng(0)
    x = np.linspace(0.0, 1.0, 50)
    reference = np.column_stack([x, 1.0 - x])
    for _ in range(20):
        t = rng.random(10)
        approx = np.column_stack([t, 1.0 - t])
        value = generalized_spread(approx, reference)
        assert value >= 0.0
