"""Tests for alignment of interval and point distributions."""

import warnings

import numpy as np
import pytest

from probdisc.core.errors import (
    ConfigurationError,
    DomainError,
    NumericInstabilityError,
    UnsupportedInputWarning,
)
from probdisc.core.types import Interval
from probdisc.discretisation.alignment import (
    centre,
    check_equal_widths,
    left_align,
    remove_infinite_tails,
    right_align,
    unbiased_points,
)
from probdisc.distributions import Cauchy, DiscreteNonParametric, IntervalDistribution, Poisson, Uniform


@pytest.fixture
def unit_intervals():
    intervals = [Interval(0.0, 1.0), Interval(1.0, 2.0), Interval(2.0, 3.0)]
    return IntervalDistribution(intervals, [0.2, 0.5, 0.3])


@pytest.fixture
def tailed():
    intervals = [Interval(-np.inf, 0.0), Interval(0.0, 1.0), Interval(1.0, np.inf)]
    return IntervalDistribution(intervals, [0.25, 0.5, 0.25])


@pytest.fixture
def four_points():
    return DiscreteNonParametric([1.0, 2.0, 3.0, 4.0], [0.25] * 4)


# ---------------------------------------------------------------------------
# remove_infinite_tails
# ---------------------------------------------------------------------------


class TestRemoveInfiniteTails:
    def test_warns_for_each_tail(self, tailed):
        with pytest.warns(UnsupportedInputWarning) as record:
            finite = remove_infinite_tails(tailed)
        messages = [str(w.message) for w in record]
        assert any("negative infinity" in m for m in messages)
        assert any("positive infinity" in m for m in messages)
        assert finite.intervals == (Interval(0.0, 1.0),)
        np.testing.assert_allclose(finite.probs, [1.0])

    def test_finite_distribution_unchanged(self, unit_intervals):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert remove_infinite_tails(unit_intervals) is unit_intervals

    def test_one_sided_tail_renormalised(self):
        d = IntervalDistribution(
            [Interval(0.0, 1.0), Interval(1.0, 2.0), Interval(2.0, np.inf)],
            [0.3, 0.3, 0.4],
        )
        with pytest.warns(UnsupportedInputWarning, match="positive infinity"):
            finite = remove_infinite_tails(d)
        np.testing.assert_allclose(finite.probs, [0.5, 0.5])

    @pytest.mark.filterwarnings("ignore::probdisc.core.errors.UnsupportedInputWarning")
    def test_nothing_finite_left(self):
        d = IntervalDistribution(
            [Interval(-np.inf, 0.0), Interval(0.0, np.inf)], [0.5, 0.5]
        )
        with pytest.raises(DomainError):
            remove_infinite_tails(d)

    @pytest.mark.filterwarnings("ignore::probdisc.core.errors.UnsupportedInputWarning")
    def test_finite_part_without_mass(self):
        d = IntervalDistribution(
            [Interval(-np.inf, 0.0), Interval(0.0, 1.0)], [1.0, 0.0]
        )
        with pytest.raises(NumericInstabilityError):
            remove_infinite_tails(d)


# ---------------------------------------------------------------------------
# Interval inputs
# ---------------------------------------------------------------------------


class TestIntervalAlignment:
    def test_left(self, unit_intervals):
        d = left_align(unit_intervals)
        np.testing.assert_array_equal(d.points, [0.0, 1.0, 2.0])
        np.testing.assert_allclose(d.probs, [0.2, 0.5, 0.3])

    def test_centre(self, unit_intervals):
        d = centre(unit_intervals)
        np.testing.assert_array_equal(d.points, [0.5, 1.5, 2.5])
        np.testing.assert_allclose(d.probs, [0.2, 0.5, 0.3])

    def test_right(self, unit_intervals):
        d = right_align(unit_intervals)
        np.testing.assert_array_equal(d.points, [1.0, 2.0, 3.0])

    def test_tails_removed_before_aligning(self, tailed):
        with pytest.warns(UnsupportedInputWarning):
            d = centre(tailed)
        np.testing.assert_array_equal(d.points, [0.5])
        np.testing.assert_allclose(d.probs, [1.0])

    def test_width_ignored_for_intervals(self, unit_intervals):
        np.testing.assert_array_equal(right_align(unit_intervals, 10.0).points, [1.0, 2.0, 3.0])


# ---------------------------------------------------------------------------
# Point inputs
# ---------------------------------------------------------------------------


class TestPointAlignment:
    def test_left_is_identity(self, four_points):
        assert left_align(four_points) is four_points

    def test_centre_uses_neighbour_midpoints(self, four_points):
        d = centre(four_points)
        np.testing.assert_allclose(d.points, [1.5, 2.5, 3.5])
        np.testing.assert_allclose(d.probs, [0.25, 0.25, 0.25])
        # the last mass is dropped, not redistributed
        assert d.total == pytest.approx(0.75)

    def test_right_uses_next_point(self, four_points):
        d = right_align(four_points)
        np.testing.assert_allclose(d.points, [2.0, 3.0, 4.0])
        np.testing.assert_allclose(d.probs, [0.25, 0.25, 0.25])

    def test_single_point_needs_width(self):
        single = DiscreteNonParametric([1.0], [1.0])
        with pytest.raises(DomainError):
            centre(single)
        with pytest.raises(DomainError):
            right_align(single)

    def test_explicit_width_shifts_points(self, four_points):
        np.testing.assert_allclose(centre(four_points, 1.0).points, [1.5, 2.5, 3.5, 4.5])
        np.testing.assert_allclose(right_align(four_points, 1.0).points, [2.0, 3.0, 4.0, 5.0])
        assert centre(four_points, 1.0).total == pytest.approx(1.0)

    def test_width_handles_single_point(self):
        single = DiscreteNonParametric([1.0], [1.0])
        np.testing.assert_allclose(centre(single, 2.0).points, [2.0])

    @pytest.mark.parametrize("align", [left_align, centre, right_align])
    def test_unsupported_type(self, align):
        with pytest.raises(TypeError):
            align([0.5, 0.5])


# ---------------------------------------------------------------------------
# Unbiased
# ---------------------------------------------------------------------------


class TestUnbiased:
    def test_uniform_masses(self):
        edges = np.linspace(0.0, 4.0, 9)
        d = unbiased_points(Uniform(0, 4), edges, 10000)
        np.testing.assert_allclose(d.points, edges)
        expected = np.array([0.0625] + [0.125] * 7 + [0.0625])
        np.testing.assert_allclose(d.probs, expected, atol=1e-9)
        assert d.mean() == pytest.approx(2.0)

    def test_infinite_edges_ignored(self):
        edges = np.array([-np.inf, 0.0, 1.0, 2.0, np.inf])
        d = unbiased_points(Uniform(0, 2), edges, 10000)
        np.testing.assert_allclose(d.points, [0.0, 1.0, 2.0])

    def test_unequal_widths_rejected(self):
        with pytest.raises(ConfigurationError, match="equal interval widths"):
            unbiased_points(Uniform(0, 3), np.array([0.0, 1.0, 3.0]), 10000)

    def test_single_finite_edge(self):
        with pytest.raises(DomainError):
            unbiased_points(Uniform(0, 3), np.array([-np.inf, 1.0, np.inf]), 10000)

    def test_mean_must_exist(self):
        with pytest.raises(NumericInstabilityError):
            unbiased_points(Cauchy(), np.linspace(-5.0, 5.0, 11), 10000)

    def test_discrete_lowest_edge_mass_shifted_up(self):
        # P(X = 0) is not placed on the first edge, so the mean is overstated
        d = unbiased_points(Poisson(3.0), np.arange(0.0, 11.0), 10000)
        assert d.probs.sum() == pytest.approx(1.0)
        assert d.mean() > 3.1

    def test_check_equal_widths_tolerates_round_off(self):
        check_equal_widths(np.arange(0, 11) * 0.1)
