"""CDF evaluation shared by continuous and discrete distributions.

Discrete distributions are treated as if the mass of each integer ``k`` were
spread uniformly over ``[k, k + 1)``. The resulting piecewise-linear
"pseudo-CDF" lets interval edges fall between integers while keeping the
mass assignment identical for both kinds of distribution.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from ..core.types import Dist


def continuous_pseudo_cdf(dist: Dist, x: np.ndarray) -> np.ndarray:
    """``P(X < x)``, with ``0``/``1`` at ``-inf``/``+inf``."""
    out = np.where(x > 0, 1.0, 0.0)
    finite = np.isfinite(x)
    out[finite] = dist.cdf_left(x[finite])
    return out


def discrete_pseudo_cdf(dist: Dist, x: np.ndarray) -> np.ndarray:
    """``cdf(floor(x) - 1) + pmf(floor(x)) * (x - floor(x))`` for integer-valued *dist*."""
    out = np.where(x > 0, 1.0, 0.0)
    finite = np.isfinite(x)
    xf = x[finite]
    k = np.floor(xf)
    out[finite] = dist.cdf(k - 1) + dist.pdf(k) * (xf - k)
    return out


def pseudo_cdf(dist: Dist, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Evaluate the pseudo-CDF of *dist* at *x* (scalar or array)."""
    arr = np.atleast_1d(np.asarray(x, dtype=float))
    if dist.discrete:
        out = discrete_pseudo_cdf(dist, arr)
    else:
        out = continuous_pseudo_cdf(dist, arr)
    return float(out[0]) if np.ndim(x) == 0 else out.reshape(np.shape(x))
