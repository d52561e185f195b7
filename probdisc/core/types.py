"""Core types for ProbDisc discretisation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np


# ---------------------------------------------------------------------------
# Distribution ABC
# ---------------------------------------------------------------------------

class Dist(ABC):
    """Abstract base class for univariate probability distributions.

    This class defines the interface a distribution must implement to be
    discretised: sampling, density/mass, cumulative distribution and quantile
    functions, plus the bounds of its support.

    The class attribute ``discrete`` is the runtime tag that tells the
    discretisation engine whether to treat the distribution as continuous or
    as integer-valued discrete. Discrete distributions are assumed to place
    mass on integers only.
    """

    discrete: bool = False

    @abstractmethod
    def sample(self, n: int) -> np.ndarray:
        """Draw random samples from the distribution."""
        pass

    @abstractmethod
    def pdf(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Compute the probability density/mass function at x."""
        pass

    @abstractmethod
    def cdf(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Compute the cumulative distribution function at x."""
        pass

    @abstractmethod
    def quantile(self, q: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Compute the quantile function (inverse CDF) at q."""
        pass

    @abstractmethod
    def support(self) -> Tuple[float, float]:
        """Return ``(lower, upper)`` bounds of the support, possibly infinite."""
        pass

    def mean(self) -> float:
        """Return the closed-form mean.

        Raises:
            NotImplementedError: If no closed form is available. Callers
                needing a mean anyway fall back to numerical integration.
        """
        raise NotImplementedError(
            f"{type(self).__name__} has no closed-form mean"
        )

    def ccdf(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Survival function ``1 - cdf(x)``."""
        return 1.0 - self.cdf(x)

    def cdf_left(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Left limit ``P(X < x)`` of the CDF.

        Equal to :meth:`cdf` for distributions with a density. Point masses
        override it so that a mass at ``x`` belongs to the interval
        ``[x, x + w)``.
        """
        return self.cdf(x)


# ---------------------------------------------------------------------------
# Intervals
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Interval:
    """A range of real numbers ``[lower, upper)``.

    ``lower`` may be ``-inf`` and ``upper`` may be ``+inf``; this is how the
    semi-infinite tail intervals of a discretisation are represented.
    """

    lower: float
    upper: float

    def __post_init__(self) -> None:
        if np.isnan(self.lower) or np.isnan(self.upper):
            raise ValueError("Interval bounds must not be NaN")
        if self.lower > self.upper:
            raise ValueError(
                f"Interval lower bound {self.lower} exceeds upper bound {self.upper}"
            )

    @property
    def inf(self) -> float:
        """Infimum (lower bound) of the interval."""
        return self.lower

    @property
    def sup(self) -> float:
        """Supremum (upper bound) of the interval."""
        return self.upper

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2.0

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.lower) and np.isfinite(self.upper))

    def __contains__(self, x: float) -> bool:
        return self.lower <= x < self.upper

    def __repr__(self) -> str:
        return f"[{self.lower}, {self.upper})"
