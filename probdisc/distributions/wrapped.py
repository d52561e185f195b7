"""Adapter turning frozen :mod:`scipy.stats` distributions into :class:`Dist`."""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np
from scipy import stats

from ..core.types import Dist


class ScipyDist(Dist):
    """Wrap a frozen scipy distribution (``stats.norm(0, 1)``, ``stats.poisson(3)``, ...).

    Continuous and discrete scipy distributions are both accepted; the
    ``discrete`` tag is set from the underlying generator type. Concrete
    families in :mod:`probdisc.distributions` subclass this wrapper.
    """

    def __init__(self, frozen: Any) -> None:
        if not hasattr(frozen, "dist") or not isinstance(
            frozen.dist, (stats.rv_continuous, stats.rv_discrete)
        ):
            raise TypeError(
                f"Expected a frozen scipy.stats distribution, got {type(frozen).__name__}"
            )
        self._dist = frozen
        self.discrete = isinstance(frozen.dist, stats.rv_discrete)

    # ---------- core API ----------

    def sample(self, n: int = 1) -> np.ndarray:
        return np.asarray(self._dist.rvs(size=n))

    def pmf(self, x: float | np.ndarray) -> np.ndarray:
        if not self.discrete:
            raise TypeError(f"{self!r} is continuous and has no pmf")
        return self._dist.pmf(x)

    def pdf(self, x: float | np.ndarray) -> np.ndarray:
        if self.discrete:
            return self._dist.pmf(x)
        return self._dist.pdf(x)

    def cdf(self, x: float | np.ndarray) -> np.ndarray:
        return self._dist.cdf(x)

    def ccdf(self, x: float | np.ndarray) -> np.ndarray:
        return self._dist.sf(x)

    def quantile(self, q: float | np.ndarray) -> np.ndarray:
        return self._dist.ppf(q)

    def support(self) -> Tuple[float, float]:
        lower, upper = self._dist.support()
        return float(lower), float(upper)

    def mean(self) -> float:
        return float(self._dist.mean())

    def variance(self) -> float:
        return float(self._dist.var())

    def __repr__(self) -> str:
        args = ", ".join(str(a) for a in self._dist.args)
        kwds = ", ".join(f"{k}={v}" for k, v in self._dist.kwds.items())
        inner = ", ".join(part for part in (args, kwds) if part)
        return f"ScipyDist({self._dist.dist.name}({inner}))"


def as_dist(obj: Any) -> Dist:
    """Return *obj* as a :class:`Dist`.

    Instances of :class:`Dist` pass through unchanged, frozen scipy
    distributions are wrapped in :class:`ScipyDist`.

    Raises:
        TypeError: If *obj* is neither.
    """
    if isinstance(obj, Dist):
        return obj
    return ScipyDist(obj)
