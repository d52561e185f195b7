"""Discrete distributions produced by discretisation.

Two immutable value objects live here:

- :class:`IntervalDistribution`: probability masses indexed by contiguous
  :class:`~probdisc.core.types.Interval` objects.
- :class:`DiscreteNonParametric`: probability masses on explicit,
  strictly increasing support points.

Both store read-only numpy arrays; every transformation (shifting, scaling,
alignment) builds a new object instead of mutating an existing one.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.errors import DomainError
from ..core.types import Dist, Interval

#: Allowed deviation of the total probability from one.
PROBABILITY_TOLERANCE = 1e-8


def _frozen_array(values, name: str) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


def _check_probs(probs: np.ndarray, check: bool) -> None:
    if probs.size == 0:
        raise ValueError("A discrete distribution needs at least one support value")
    if np.any(~np.isfinite(probs)) or np.any(probs < 0):
        raise ValueError("All probabilities must be finite and non-negative.")
    if not probs.sum() > 0:
        raise ValueError("Probabilities must not all be zero")
    if check and not abs(probs.sum() - 1.0) <= PROBABILITY_TOLERANCE:
        raise ValueError(f"Probabilities must sum to 1, got {probs.sum()}")


# ---------------------------------------------------------------------------
# Interval-indexed distribution
# ---------------------------------------------------------------------------


class IntervalDistribution:
    """Probability masses over contiguous intervals ``[a_i, a_{i+1})``.

    Parameters
    ----------
    intervals : sequence of Interval
        Ascending, gap-free intervals: ``intervals[i].upper`` must equal
        ``intervals[i + 1].lower`` exactly.
    probs : array-like
        Non-negative probability of each interval.
    check : bool
        If True, require the probabilities to sum to one.
    """

    def __init__(
        self,
        intervals: Sequence[Interval],
        probs: Sequence[float],
        *,
        check: bool = True,
    ) -> None:
        self._intervals: Tuple[Interval, ...] = tuple(intervals)
        self._probs = _frozen_array(probs, "probs")
        if len(self._intervals) != self._probs.size:
            raise ValueError(
                f"Got {len(self._intervals)} intervals but {self._probs.size} probabilities"
            )
        _check_probs(self._probs, check)
        for left, right in zip(self._intervals, self._intervals[1:]):
            if left.upper != right.lower:
                raise ValueError(f"Intervals {left} and {right} are not contiguous")

    @property
    def intervals(self) -> Tuple[Interval, ...]:
        return self._intervals

    @property
    def probs(self) -> np.ndarray:
        return self._probs

    @property
    def edges(self) -> np.ndarray:
        """All interval boundaries, ``len(self) + 1`` values in ascending order."""
        return np.array([i.lower for i in self._intervals] + [self._intervals[-1].upper])

    @property
    def lower_bounds(self) -> np.ndarray:
        return np.array([i.lower for i in self._intervals])

    @property
    def upper_bounds(self) -> np.ndarray:
        return np.array([i.upper for i in self._intervals])

    def is_finite(self) -> bool:
        """Whether every interval has finite bounds."""
        return all(i.is_finite() for i in self._intervals)

    def mean(self) -> float:
        """Mean of the interval midpoints weighted by their probabilities.

        Raises:
            DomainError: If a tail interval is unbounded.
        """
        if not self.is_finite():
            raise DomainError("Mean is undefined for unbounded tail intervals")
        mids = np.array([i.midpoint for i in self._intervals])
        return float(np.dot(mids, self._probs) / self._probs.sum())

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Tuple[Interval, float]]:
        return iter(zip(self._intervals, self._probs.tolist()))

    def __repr__(self) -> str:
        return (
            f"IntervalDistribution(n={len(self)}, "
            f"range=[{self._intervals[0].lower}, {self._intervals[-1].upper}))"
        )


# ---------------------------------------------------------------------------
# Point-indexed distribution
# ---------------------------------------------------------------------------


class DiscreteNonParametric(Dist):
    """Finite discrete distribution on explicit support points.

    Parameters
    ----------
    support : array-like
        Strictly increasing support points.
    probs : array-like
        Non-negative probabilities, one per support point.
    check : bool
        If True (default), require the probabilities to sum to one. Point
        transforms that intentionally drop mass pass ``check=False``;
        statistics (mean, variance, sampling, quantiles) are then taken
        relative to the remaining total.
    """

    discrete = True

    def __init__(
        self,
        support: Sequence[float],
        probs: Sequence[float],
        *,
        check: bool = True,
    ) -> None:
        self._xs = _frozen_array(support, "support")
        self._probs = _frozen_array(probs, "probs")
        if self._xs.size != self._probs.size:
            raise ValueError(
                f"Got {self._xs.size} support points but {self._probs.size} probabilities"
            )
        _check_probs(self._probs, check)
        if np.any(~np.isfinite(self._xs)):
            raise ValueError("Support points must be finite")
        if np.any(np.diff(self._xs) <= 0):
            raise ValueError("Support points must be strictly increasing")

    @property
    def points(self) -> np.ndarray:
        return self._xs

    @property
    def probs(self) -> np.ndarray:
        return self._probs

    @property
    def total(self) -> float:
        """Total probability carried, one unless built with ``check=False``."""
        return float(self._probs.sum())

    # ---------- core API ----------

    def sample(self, n: int = 1, rng: Optional[np.random.Generator] = None) -> np.ndarray:
        """Draw n random samples from the distribution."""
        if rng is None:
            rng = np.random.default_rng()
        return rng.choice(self._xs, size=n, p=self._probs / self.total)

    def pmf(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Probability mass function evaluated at x."""
        x = np.asarray(x, dtype=float)
        idx = np.clip(np.searchsorted(self._xs, x), 0, self._xs.size - 1)
        result = np.where(self._xs[idx] == x, self._probs[idx], 0.0)
        return float(result) if result.ndim == 0 else result

    def pdf(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Alias for pmf() to satisfy Dist ABC interface."""
        return self.pmf(x)

    def cdf(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Cumulative distribution function evaluated at x."""
        cum = np.concatenate([[0.0], np.cumsum(self._probs)]) / self.total
        result = cum[np.searchsorted(self._xs, np.asarray(x, dtype=float), side="right")]
        return float(result) if np.ndim(result) == 0 else result

    def quantile(self, q: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Quantile function (inverse CDF) at q."""
        q = np.asarray(q, dtype=float)
        cum = np.cumsum(self._probs) / self.total
        idx = np.clip(np.searchsorted(cum, q, side="left"), 0, self._xs.size - 1)
        result = self._xs[idx]
        return float(result) if result.ndim == 0 else result

    def support(self) -> Tuple[float, float]:
        return float(self._xs[0]), float(self._xs[-1])

    def mean(self) -> float:
        return float(np.dot(self._xs, self._probs) / self.total)

    def variance(self) -> float:
        centred = self._xs - self.mean()
        return float(np.dot(centred**2, self._probs) / self.total)

    def median(self) -> float:
        return self.quantile(0.5)

    # ---------- transforms ----------

    def shift(self, delta: float) -> DiscreteNonParametric:
        """Return a copy with every support point moved by *delta*."""
        return DiscreteNonParametric(self._xs + float(delta), self._probs, check=False)

    def scale(self, factor: float) -> DiscreteNonParametric:
        """Return a copy with every support point multiplied by *factor* (> 0)."""
        if not factor > 0:
            raise ValueError(f"factor must be positive, got {factor}")
        return DiscreteNonParametric(self._xs * float(factor), self._probs, check=False)

    def __truediv__(self, divisor: float) -> DiscreteNonParametric:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return self.scale(1.0 / divisor)

    def __len__(self) -> int:
        return self._xs.size

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return iter(zip(self._xs.tolist(), self._probs.tolist()))

    def __repr__(self) -> str:
        return f"DiscreteNonParametric(support={self._xs}, probs={self._probs})"
