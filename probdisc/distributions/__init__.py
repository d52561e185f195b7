"""Distribution implementations for ProbDisc.

This module contains the scipy-backed families that can be discretised,
the truncation wrapper, and the discrete value objects that discretisation
produces.
"""

from .wrapped import ScipyDist, as_dist
from .continuous import (
    Beta,
    Cauchy,
    Exponential,
    Gamma,
    Gumbel,
    LogNormal,
    Normal,
    Pareto,
    Uniform,
)
from .discrete import Bernoulli, Binomial, Geometric, Poisson
from .truncated import Truncated
from .nonparametric import DiscreteNonParametric, IntervalDistribution

__all__ = [
    "ScipyDist",
    "as_dist",
    "Normal",
    "LogNormal",
    "Beta",
    "Uniform",
    "Exponential",
    "Gamma",
    "Cauchy",
    "Pareto",
    "Gumbel",
    "Bernoulli",
    "Poisson",
    "Binomial",
    "Geometric",
    "Truncated",
    "DiscreteNonParametric",
    "IntervalDistribution",
]
