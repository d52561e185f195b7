"""Continuous probability distributions backed by scipy.stats."""

from __future__ import annotations

from typing import Tuple

import numpy as np
from scipy import stats

from .wrapped import ScipyDist


class Normal(ScipyDist):
    """Gaussian distribution parameterised by *mu* (mean) and *sigma* (std dev).

    ``sigma == 0`` gives the degenerate point mass at *mu*.
    """

    def __init__(self, mu: float = 0.0, sigma: float = 1.0) -> None:
        if sigma < 0:
            raise ValueError("sigma must be non-negative")
        self.mu = float(mu)
        self.sigma = float(sigma)
        self._degenerate = self.sigma == 0.0
        self.discrete = False
        if not self._degenerate:
            super().__init__(stats.norm(loc=self.mu, scale=self.sigma))

    def sample(self, n: int = 1) -> np.ndarray:
        if self._degenerate:
            return np.full(n, self.mu)
        return super().sample(n)

    def pdf(self, x: float | np.ndarray) -> np.ndarray:
        if self._degenerate:
            x = np.asarray(x, dtype=float)
            return np.where(x == self.mu, np.inf, 0.0)
        return super().pdf(x)

    def cdf(self, x: float | np.ndarray) -> np.ndarray:
        if self._degenerate:
            x = np.asarray(x, dtype=float)
            return np.where(x >= self.mu, 1.0, 0.0)
        return super().cdf(x)

    def cdf_left(self, x: float | np.ndarray) -> np.ndarray:
        if self._degenerate:
            x = np.asarray(x, dtype=float)
            return np.where(x > self.mu, 1.0, 0.0)
        return super().cdf_left(x)

    def ccdf(self, x: float | np.ndarray) -> np.ndarray:
        if self._degenerate:
            return 1.0 - self.cdf(x)
        return super().ccdf(x)

    def quantile(self, q: float | np.ndarray) -> np.ndarray:
        if self._degenerate:
            return np.full_like(np.asarray(q, dtype=float), self.mu)
        return super().quantile(q)

    def support(self) -> Tuple[float, float]:
        # the point mass is treated as the limit of a normal, not as a bounded support
        return -np.inf, np.inf

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma**2

    def __repr__(self) -> str:
        return f"Normal(mu={self.mu}, sigma={self.sigma})"


class LogNormal(ScipyDist):
    """Log-normal distribution parameterised by *mu* and *sigma* of the
    underlying normal (i.e. ``ln(X) ~ N(mu, sigma)``).
    """

    def __init__(self, mu: float = 0.0, sigma: float = 1.0) -> None:
        if sigma <= 0:
            raise ValueError("sigma must be positive")
        self.mu = float(mu)
        self.sigma = float(sigma)
        # scipy's lognorm: s=sigma, scale=exp(mu)
        super().__init__(stats.lognorm(s=self.sigma, scale=np.exp(self.mu)))

    def __repr__(self) -> str:
        return f"LogNormal(mu={self.mu}, sigma={self.sigma})"


class Beta(ScipyDist):
    """Beta distribution with shape parameters *alpha* and *beta* on
    ``[loc, loc + scale]``.
    """

    def __init__(
        self,
        alpha: float = 1.0,
        beta: float = 1.0,
        *,
        loc: float = 0.0,
        scale: float = 1.0,
    ) -> None:
        if alpha <= 0 or beta <= 0:
            raise ValueError("alpha and beta must be positive")
        self.alpha = float(alpha)
        self.beta = float(beta)
        self.loc = float(loc)
        self.scale = float(scale)
        super().__init__(
            stats.beta(self.alpha, self.beta, loc=self.loc, scale=self.scale)
        )

    def __repr__(self) -> str:
        return f"Beta(alpha={self.alpha}, beta={self.beta})"


class Uniform(ScipyDist):
    """Continuous uniform distribution on ``[a, b]``."""

    def __init__(self, a: float = 0.0, b: float = 1.0) -> None:
        if not b > a:
            raise ValueError(f"b must exceed a, got a={a}, b={b}")
        self.a = float(a)
        self.b = float(b)
        super().__init__(stats.uniform(loc=self.a, scale=self.b - self.a))

    def __repr__(self) -> str:
        return f"Uniform(a={self.a}, b={self.b})"


class Exponential(ScipyDist):
    """Exponential distribution with mean *scale*."""

    def __init__(self, scale: float = 1.0) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self.scale = float(scale)
        super().__init__(stats.expon(scale=self.scale))

    def __repr__(self) -> str:
        return f"Exponential(scale={self.scale})"


class Gamma(ScipyDist):
    """Gamma distribution with *shape* and *scale* (mean ``shape * scale``)."""

    def __init__(self, shape: float = 1.0, scale: float = 1.0) -> None:
        if shape <= 0 or scale <= 0:
            raise ValueError("shape and scale must be positive")
        self.shape = float(shape)
        self.scale = float(scale)
        super().__init__(stats.gamma(self.shape, scale=self.scale))

    def __repr__(self) -> str:
        return f"Gamma(shape={self.shape}, scale={self.scale})"


class Cauchy(ScipyDist):
    """Cauchy distribution. Its mean is undefined."""

    def __init__(self, loc: float = 0.0, scale: float = 1.0) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self.loc = float(loc)
        self.scale = float(scale)
        super().__init__(stats.cauchy(loc=self.loc, scale=self.scale))

    def __repr__(self) -> str:
        return f"Cauchy(loc={self.loc}, scale={self.scale})"


class Pareto(ScipyDist):
    """Pareto distribution with shape *alpha* on ``[scale, inf)``.

    The mean is infinite for ``alpha <= 1``.
    """

    def __init__(self, alpha: float = 1.0, scale: float = 1.0) -> None:
        if alpha <= 0 or scale <= 0:
            raise ValueError("alpha and scale must be positive")
        self.alpha = float(alpha)
        self.scale = float(scale)
        super().__init__(stats.pareto(self.alpha, scale=self.scale))

    def __repr__(self) -> str:
        return f"Pareto(alpha={self.alpha}, scale={self.scale})"


class Gumbel(ScipyDist):
    """Gumbel (maximum) extreme value distribution."""

    def __init__(self, loc: float = 0.0, scale: float = 1.0) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self.loc = float(loc)
        self.scale = float(scale)
        super().__init__(stats.gumbel_r(loc=self.loc, scale=self.scale))

    def __repr__(self) -> str:
        return f"Gumbel(loc={self.loc}, scale={self.scale})"
