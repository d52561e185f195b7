"""Tests for safe_mean and limited_expectation."""

import math

import numpy as np
import pytest

from probdisc.core.errors import NumericInstabilityError
from probdisc.discretisation.expectation import (
    MIN_TRAPEZOID_POINTS,
    limited_expectation,
    numerical_mean,
    safe_mean,
)
from probdisc.distributions import (
    Cauchy,
    Exponential,
    Gamma,
    Normal,
    Pareto,
    Poisson,
    Truncated,
    Uniform,
)


class TestSafeMean:
    def test_closed_form(self):
        assert safe_mean(Normal(1.0, 2.0)) == 1.0
        assert safe_mean(Gamma(2.0, 7.0)) == pytest.approx(14.0)

    def test_cauchy_has_no_mean(self):
        with pytest.raises(NumericInstabilityError, match="no finite mean"):
            safe_mean(Cauchy())

    def test_infinite_mean_rejected(self):
        with pytest.raises(NumericInstabilityError):
            safe_mean(Pareto(1.0, 1.0))

    def test_truncated_uniform_integrated(self):
        assert safe_mean(Truncated(Uniform(0, 4), 0.0, 2.0)) == pytest.approx(1.0)

    def test_half_normal_integrated(self):
        d = Truncated(Normal(), lower=0.0)
        assert safe_mean(d) == pytest.approx(math.sqrt(2.0 / math.pi), rel=1e-6)

    def test_too_few_points_raise(self):
        with pytest.raises(NumericInstabilityError, match="trapezoid points"):
            safe_mean(Truncated(Normal(), lower=0.0), n_samples=10)

    def test_minimum_points_accepted(self):
        d = Truncated(Uniform(0, 4), 0.0, 2.0)
        assert safe_mean(d, n_samples=MIN_TRAPEZOID_POINTS) == pytest.approx(1.0)

    def test_truncated_discrete_is_exact(self):
        d = Truncated(Poisson(3.0), upper=5)
        assert safe_mean(d) == pytest.approx(d.mean())


def test_numerical_mean_of_discrete_distribution():
    assert numerical_mean(Poisson(3.0)) == pytest.approx(3.0, rel=1e-9)


def test_numerical_mean_matches_closed_form():
    assert numerical_mean(Exponential(2.0)) == pytest.approx(2.0, rel=1e-4)


class TestLimitedExpectation:
    def test_limit_above_support_is_mean(self):
        assert limited_expectation(Uniform(0, 4), 5.0) == pytest.approx(2.0)

    def test_limit_below_support_is_limit(self):
        assert limited_expectation(Uniform(0, 4), -1.0) == -1.0

    def test_interior_limit(self):
        # E[min(X, u)] = u - u^2 / 8 for X ~ U(0, 4)
        assert limited_expectation(Uniform(0, 4), 2.0) == pytest.approx(1.5, rel=1e-6)

    def test_exponential(self):
        result = limited_expectation(Exponential(1.0), 1.0)
        assert result == pytest.approx(1.0 - math.exp(-1.0), rel=1e-6)

    def test_far_lower_tail_returns_limit(self):
        assert limited_expectation(Normal(), -40.0) == -40.0

    def test_far_upper_tail_returns_mean(self):
        assert limited_expectation(Normal(), 40.0) == 0.0

    def test_increasing_in_limit(self):
        values = [limited_expectation(Gamma(2.0, 1.0), u) for u in np.linspace(0.5, 6, 8)]
        assert np.all(np.diff(values) > 0)
