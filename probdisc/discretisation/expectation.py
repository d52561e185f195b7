"""Means and limited expectations ``E[min(X, u)]``.

Closed-form means are used whenever the distribution provides one. When it
does not (signalled by :class:`NotImplementedError` from ``mean()``, as for
continuous :class:`~probdisc.distributions.Truncated` distributions), the
mean is integrated numerically with the trapezoidal rule over the
``[TAIL_QUANTILE, 1 - TAIL_QUANTILE]`` quantile range.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from scipy.integrate import trapezoid

from ..core.context import DEFAULT_TRAPEZOID_POINTS
from ..core.errors import NumericInstabilityError
from ..core.types import Dist
from ..distributions.truncated import Truncated

logger = logging.getLogger(__name__)

#: Fewest trapezoid samples accepted for numerical mean integration.
MIN_TRAPEZOID_POINTS = 100

#: Tail probability excluded on each side of an unbounded integration range.
TAIL_QUANTILE = 1e-12

# survival probabilities this close to 0 or 1 take the direct shortcuts
_SURVIVAL_TOLERANCE = math.sqrt(np.finfo(float).eps)


def _integration_range(dist: Dist):
    lower, upper = dist.support()
    if np.isinf(lower):
        lower = float(dist.quantile(TAIL_QUANTILE))
    if np.isinf(upper):
        upper = float(dist.quantile(1.0 - TAIL_QUANTILE))
    return lower, upper


def numerical_mean(dist: Dist, n_samples: int = DEFAULT_TRAPEZOID_POINTS) -> float:
    """Approximate ``E[X]`` without a closed form.

    Continuous distributions integrate ``x * pdf(x)`` with the trapezoidal
    rule on *n_samples* equally spaced points. Discrete distributions sum
    ``k * pmf(k)`` over the integers of the same quantile range.

    Raises:
        NumericInstabilityError: If *n_samples* is below
            :data:`MIN_TRAPEZOID_POINTS` or the result is not finite.
    """
    lower, upper = _integration_range(dist)
    if dist.discrete:
        ks = np.arange(math.ceil(lower), math.floor(upper) + 1)
        result = float(np.sum(ks * dist.pdf(ks)))
    else:
        if n_samples < MIN_TRAPEZOID_POINTS:
            raise NumericInstabilityError(
                f"{n_samples} trapezoid points cannot resolve the mean of {dist!r}; "
                f"use at least {MIN_TRAPEZOID_POINTS}"
            )
        xs = np.linspace(lower, upper, int(n_samples))
        result = float(trapezoid(xs * dist.pdf(xs), xs))
    if not np.isfinite(result):
        raise NumericInstabilityError(f"Numerical mean of {dist!r} is not finite")
    return result


def safe_mean(dist: Dist, n_samples: int = DEFAULT_TRAPEZOID_POINTS) -> float:
    """Mean of *dist*, exact when available, numerical otherwise.

    Args:
        dist: Distribution whose mean is wanted.
        n_samples: Trapezoid sample count for the numerical fallback.

    Returns:
        The mean.

    Raises:
        NumericInstabilityError: If the distribution reports a non-finite
            mean (the expectation does not exist) or the numerical fallback
            fails.
    """
    try:
        mean = dist.mean()
    except NotImplementedError:
        logger.debug("No closed-form mean for %r, integrating numerically", dist)
        return numerical_mean(dist, n_samples)
    if not np.isfinite(mean):
        raise NumericInstabilityError(f"{dist!r} has no finite mean (got {mean})")
    return float(mean)


def limited_expectation(
    dist: Dist, limit: float, n_samples: int = DEFAULT_TRAPEZOID_POINTS
) -> float:
    """Limited expectation ``E[min(X, limit)]``.

    Uses ``E[X | X <= u] * P(X <= u) + u * P(X > u)``, with the conditional
    mean taken from the distribution truncated to ``[min, u]``.
    """
    lower, upper = dist.support()
    if limit >= upper:
        return safe_mean(dist, n_samples)
    if limit <= lower:
        return float(limit)

    survival = float(dist.ccdf(limit))
    if survival >= 1.0 - _SURVIVAL_TOLERANCE:
        return float(limit)
    if survival <= _SURVIVAL_TOLERANCE:
        return safe_mean(dist, n_samples)

    truncated = Truncated(dist, lower=lower, upper=limit)
    truncated_mean = safe_mean(truncated, n_samples)
    return truncated_mean * (1.0 - survival) + limit * survival
