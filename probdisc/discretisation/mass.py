"""Assignment of probability mass to intervals."""

from __future__ import annotations

import logging

import numpy as np

from ..core.errors import ConfigurationError, NumericInstabilityError
from ..core.types import Dist
from ..distributions.nonparametric import IntervalDistribution
from .bounds import edges_to_intervals
from .pseudo_cdf import pseudo_cdf

logger = logging.getLogger(__name__)


def interval_masses(dist: Dist, edges: np.ndarray) -> np.ndarray:
    """Normalised probability of each interval ``[edges[i], edges[i+1])``.

    Masses are pseudo-CDF differences at the edges, divided by their total.
    That single normalisation redistributes any mass lying outside
    ``[edges[0], edges[-1]]`` proportionally over the intervals.

    Raises:
        ConfigurationError: If fewer than two edges are given or they
            decrease.
        NumericInstabilityError: If the captured mass is zero or not finite.
    """
    edges = np.asarray(edges, dtype=float)
    if edges.ndim != 1 or edges.size < 2:
        raise ConfigurationError("at least two interval edges are required")
    if np.any(np.diff(edges) < 0):
        raise ConfigurationError("interval edges must be non-decreasing")

    raw = np.diff(pseudo_cdf(dist, edges))
    # CDF round-off can make an empty interval very slightly negative
    raw = np.maximum(raw, 0.0)
    total = raw.sum()
    if not (np.isfinite(total) and total > 0):
        raise NumericInstabilityError(
            f"Intervals on [{edges[0]}, {edges[-1]}] capture no usable probability "
            f"mass of {dist!r} (total={total})"
        )
    logger.debug("Intervals capture %.12g of the probability mass", total)
    return raw / total


def assign_mass(dist: Dist, edges: np.ndarray) -> IntervalDistribution:
    """Build the interval-indexed distribution of *dist* over *edges*.

    Zero-width intervals carry no mass and are pruned; this keeps the
    remaining intervals contiguous. Positive-width intervals are kept even
    when their probability is zero.
    """
    edges = np.asarray(edges, dtype=float)
    probs = interval_masses(dist, edges)
    keep = np.diff(edges) > 0
    if not keep.all():
        logger.debug("Pruning %d zero-width intervals", int((~keep).sum()))
    intervals = [iv for iv, k in zip(edges_to_intervals(edges), keep) if k]
    return IntervalDistribution(intervals, probs[keep])
