"""Construction of interval edges for a discretisation.

All three ways of describing a partition reduce to one ascending array of
edges ``e_0 <= e_1 <= ... <= e_n``; interval ``i`` is ``[e_i, e_{i+1})``.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

import numpy as np

from ..core.errors import ConfigurationError
from ..core.types import Dist, Interval

logger = logging.getLogger(__name__)

_SNAP_TOLERANCE = 1e-9


def fixed_width_edges(
    dist: Dist,
    width: float,
    min_quantile: float,
    max_quantile: float,
) -> np.ndarray:
    """Edges at multiples of *width* covering the support of *dist*.

    An infinite support bound is replaced by the multiple of *width* one full
    interval beyond the ``min_quantile`` (or ``max_quantile``) quantile, so
    the quantile mass is always captured. A finite bound that is not a
    multiple of *width* becomes an edge itself, making the first or last
    interval narrower than *width*.

    Args:
        dist: Distribution whose support is partitioned.
        width: Positive interval width.
        min_quantile: Quantile used when the lower bound is infinite.
        max_quantile: Quantile used when the upper bound is infinite.

    Returns:
        Ascending array of finite edges.

    Raises:
        ConfigurationError: If *width* is not a positive finite number or a
            quantile is not finite.
    """
    width = float(width)
    if not (np.isfinite(width) and width > 0):
        raise ConfigurationError(f"interval width must be positive and finite, got {width}")

    lower, upper = dist.support()
    if np.isinf(lower):
        q = float(dist.quantile(min_quantile))
        if not np.isfinite(q):
            raise ConfigurationError(f"quantile {min_quantile} of {dist!r} is not finite")
        lower = (math.floor(q / width) - 1) * width
    if np.isinf(upper):
        q = float(dist.quantile(max_quantile))
        if not np.isfinite(q):
            raise ConfigurationError(f"quantile {max_quantile} of {dist!r} is not finite")
        upper = (math.floor(q / width) + 1) * width

    grid = np.arange(math.floor(lower / width), math.ceil(upper / width) + 1) * width
    # grid points within round-off of a bound would create sliver intervals
    tol = width * _SNAP_TOLERANCE
    inner = grid[(grid > lower + tol) & (grid < upper - tol)]
    edges = np.concatenate([[lower], inner, [upper]])
    logger.debug(
        "Resolved %d fixed-width edges on [%g, %g] for %r", edges.size, lower, upper, dist
    )
    return edges


def boundary_edges(dist: Dist, boundaries: Sequence[float]) -> np.ndarray:
    """Edges from caller-supplied boundary values.

    The boundaries are sorted and de-duplicated, those outside the open
    support of *dist* are dropped, and the support bounds are added as the
    outermost edges. Infinite support bounds stay infinite, which yields
    semi-infinite tail intervals.

    Raises:
        ConfigurationError: If *boundaries* is empty or contains NaN.
    """
    values = np.asarray(boundaries, dtype=float).ravel()
    if values.size == 0:
        raise ConfigurationError("at least one boundary value is required")
    if np.any(np.isnan(values)):
        raise ConfigurationError("boundary values must not be NaN")

    lower, upper = dist.support()
    values = np.unique(values)
    inner = values[(values > lower) & (values < upper)]
    if inner.size < values.size:
        logger.debug(
            "Dropped %d boundaries outside the support [%g, %g]",
            values.size - inner.size, lower, upper,
        )
    return np.concatenate([[lower], inner, [upper]])


def intervals_to_edges(intervals: Sequence[Interval]) -> np.ndarray:
    """Flatten contiguous intervals into their edge array.

    Raises:
        ConfigurationError: If *intervals* is empty, unordered or has gaps.
    """
    intervals = list(intervals)
    if not intervals:
        raise ConfigurationError("at least one interval is required")
    for left, right in zip(intervals, intervals[1:]):
        if left.upper != right.lower:
            raise ConfigurationError(
                f"intervals must be ascending and contiguous, got {left} followed by {right}"
            )
    return np.array([i.lower for i in intervals] + [intervals[-1].upper], dtype=float)


def edges_to_intervals(edges: np.ndarray) -> List[Interval]:
    """Pair adjacent edges into intervals."""
    return [Interval(float(a), float(b)) for a, b in zip(edges[:-1], edges[1:])]
