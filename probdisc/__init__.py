"""ProbDisc: discretisation of univariate probability distributions.

This package converts continuous or integer-valued discrete distributions
into discrete approximations over a partition of their support, and
re-expresses the interval-indexed result as point masses using left,
centred, right or mean-preserving ("unbiased") alignment.
"""

import logging

try:
    from probdisc._version import version as __version__
except ImportError:
    __version__ = "0.1.0"

from .core.types import Dist, Interval
from .core.methods import Method
from .core.context import Settings
from .core.errors import (
    ConfigurationError,
    DiscretisationError,
    DomainError,
    NumericInstabilityError,
    UnsupportedInputWarning,
)
from .distributions import (
    Bernoulli,
    Beta,
    Binomial,
    Cauchy,
    DiscreteNonParametric,
    Exponential,
    Gamma,
    Geometric,
    Gumbel,
    IntervalDistribution,
    LogNormal,
    Normal,
    Pareto,
    Poisson,
    ScipyDist,
    Truncated,
    Uniform,
    as_dist,
)
from .discretisation import (
    centre,
    discretise,
    discretize,
    left_align,
    remove_infinite_tails,
    right_align,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Dist",
    "Interval",
    "Method",
    "Settings",
    "DiscretisationError",
    "ConfigurationError",
    "DomainError",
    "NumericInstabilityError",
    "UnsupportedInputWarning",
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
    "discretise",
    "discretize",
    "left_align",
    "centre",
    "right_align",
    "remove_infinite_tails",
]
