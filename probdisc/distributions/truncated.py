"""Truncation of an arbitrary distribution to a sub-range of its support."""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple

import numpy as np

from ..core.errors import ConfigurationError, NumericInstabilityError
from ..core.types import Dist
from .wrapped import as_dist


class Truncated(Dist):
    """Distribution of *dist* conditioned on ``lower <= X <= upper``.

    Either bound may be omitted; it then defaults to the corresponding bound
    of the base support. Truncating a :class:`Truncated` flattens into a
    single truncation of the original base distribution.

    Continuous truncations have no closed-form :meth:`mean`; consumers fall
    back to numerical integration. Discrete truncations with a finite range
    sum their mean exactly.

    Args:
        dist: Base distribution (a :class:`Dist` or frozen scipy distribution).
        lower: Lower truncation point.
        upper: Upper truncation point.

    Raises:
        ConfigurationError: If ``lower > upper``.
        NumericInstabilityError: If the base assigns no mass to the window.
    """

    def __init__(
        self,
        dist: Any,
        lower: Optional[float] = None,
        upper: Optional[float] = None,
    ) -> None:
        base = as_dist(dist)
        if isinstance(base, Truncated):
            lower = base.lower if lower is None else max(float(lower), base.lower)
            upper = base.upper if upper is None else min(float(upper), base.upper)
            base = base.base

        base_lower, base_upper = base.support()
        self.lower = base_lower if lower is None else max(float(lower), base_lower)
        self.upper = base_upper if upper is None else min(float(upper), base_upper)
        if self.lower > self.upper:
            raise ConfigurationError(
                f"Truncation bounds are empty: lower={self.lower}, upper={self.upper}"
            )
        self.base = base
        self.discrete = base.discrete

        if self.discrete:
            # mass on the integers ceil(lower)..floor(upper)
            below = math.ceil(self.lower) - 1 if np.isfinite(self.lower) else -np.inf
            top = math.floor(self.upper) if np.isfinite(self.upper) else np.inf
            self._cdf_lower = _cdf_at(base, below)
            self._cdf_upper = _cdf_at(base, top)
        else:
            self._cdf_lower = _cdf_at(base, self.lower)
            self._cdf_upper = _cdf_at(base, self.upper)
        self._mass = self._cdf_upper - self._cdf_lower
        if not self._mass > 0:
            raise NumericInstabilityError(
                f"{base!r} has no probability mass on [{self.lower}, {self.upper}]"
            )

    # ---------- core API ----------

    def sample(self, n: int = 1) -> np.ndarray:
        return np.asarray(self.quantile(np.random.uniform(size=n)))

    def pdf(self, x: float | np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        inside = (x >= self.lower) & (x <= self.upper)
        return np.where(inside, self.base.pdf(x) / self._mass, 0.0)

    def pmf(self, x: float | np.ndarray) -> np.ndarray:
        if not self.discrete:
            raise TypeError(f"{self!r} is continuous and has no pmf")
        return self.pdf(x)

    def cdf(self, x: float | np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        return np.clip((self.base.cdf(x) - self._cdf_lower) / self._mass, 0.0, 1.0)

    def quantile(self, q: float | np.ndarray) -> np.ndarray:
        q = np.asarray(q, dtype=float)
        lower, upper = self.support()
        x = self.base.quantile(self._cdf_lower + q * self._mass)
        return np.clip(x, lower, upper)

    def support(self) -> Tuple[float, float]:
        if self.discrete:
            return float(np.ceil(self.lower)), float(np.floor(self.upper))
        return self.lower, self.upper

    def mean(self) -> float:
        lower, upper = self.support()
        if self.discrete and np.isfinite(lower) and np.isfinite(upper):
            ks = np.arange(lower, upper + 1)
            return float(np.sum(ks * self.pdf(ks)))
        return super().mean()

    def __repr__(self) -> str:
        return f"Truncated({self.base!r}, lower={self.lower}, upper={self.upper})"


def _cdf_at(dist: Dist, x: float) -> float:
    if x == np.inf:
        return 1.0
    if x == -np.inf:
        return 0.0
    return float(dist.cdf(x))
