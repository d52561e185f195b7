"""Tests for interval mass assignment."""

import numpy as np
import pytest

from probdisc.core.errors import ConfigurationError, NumericInstabilityError
from probdisc.core.types import Interval
from probdisc.discretisation.mass import assign_mass, interval_masses
from probdisc.distributions import Normal, Poisson, Uniform


def test_uniform_masses_are_equal():
    probs = interval_masses(Uniform(0, 1), np.linspace(0.0, 1.0, 11))
    np.testing.assert_allclose(probs, 0.1)


def test_masses_normalised_over_truncated_range():
    # outside mass is spread proportionally over the intervals
    probs = interval_masses(Normal(), [-1.0, 0.0, 1.0])
    np.testing.assert_allclose(probs, [0.5, 0.5])
    assert probs.sum() == pytest.approx(1.0)


def test_discrete_masses_on_integer_edges():
    edges = np.arange(0.0, 30.0)
    probs = interval_masses(Poisson(3.0), edges)
    assert probs[2] == pytest.approx(Poisson(3.0).pmf(2), rel=1e-9)


def test_no_mass_raises():
    with pytest.raises(NumericInstabilityError, match="no usable probability"):
        interval_masses(Uniform(0, 1), [2.0, 3.0])


def test_decreasing_edges_raise():
    with pytest.raises(ConfigurationError, match="non-decreasing"):
        interval_masses(Uniform(0, 1), [0.0, 0.5, 0.2])


def test_single_edge_raises():
    with pytest.raises(ConfigurationError):
        interval_masses(Uniform(0, 1), [0.5])


def test_zero_width_intervals_pruned():
    d = assign_mass(Uniform(0, 2), [0.0, 1.0, 1.0, 2.0])
    assert d.intervals == (Interval(0.0, 1.0), Interval(1.0, 2.0))
    np.testing.assert_allclose(d.probs, [0.5, 0.5])


def test_zero_probability_interval_kept():
    d = assign_mass(Uniform(0, 1), [0.0, 1.0, 2.0])
    assert len(d) == 2
    np.testing.assert_allclose(d.probs, [1.0, 0.0])
