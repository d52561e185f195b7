"""Alignment of discretised distributions onto support points.

Interval-indexed distributions collapse each interval to one representative
point: its lower bound (:func:`left_align`), midpoint (:func:`centre`) or
upper bound (:func:`right_align`). Unbounded tail intervals have no such
point and are dropped first by :func:`remove_infinite_tails`.

The same functions accept point-indexed distributions. Points are read as
left-aligned, i.e. a point ``x`` stands for the interval starting at ``x``:

- with an explicit ``width`` every point is shifted by ``width / 2``
  (centre) or ``width`` (right align); this is always well defined.
- without a width the neighbouring point is taken as the interval end, so
  the last mass has nowhere to go and is dropped without renormalising.
  At least two points are required.

:func:`unbiased_points` implements the mean-preserving alternative, which
places masses on the interval edges themselves.
"""

from __future__ import annotations

import logging
import warnings
from typing import Optional, Union

import numpy as np

from ..core.errors import (
    ConfigurationError,
    DomainError,
    NumericInstabilityError,
    UnsupportedInputWarning,
)
from ..core.types import Dist
from ..distributions.nonparametric import DiscreteNonParametric, IntervalDistribution
from .expectation import limited_expectation, safe_mean

logger = logging.getLogger(__name__)

AlignableDist = Union[IntervalDistribution, DiscreteNonParametric]

# unbiased masses below this are reported rather than clipped
_NEGATIVE_MASS_TOLERANCE = 1e-8


def remove_infinite_tails(dist: IntervalDistribution) -> IntervalDistribution:
    """Drop a ``-inf`` first interval and a ``+inf`` last interval.

    Each dropped tail emits an :class:`UnsupportedInputWarning`; the
    remaining probabilities are renormalised to sum to one.

    Raises:
        DomainError: If no finite interval remains.
        NumericInstabilityError: If the finite intervals carry no mass.
    """
    intervals = list(dist.intervals)
    probs = dist.probs
    if np.isinf(intervals[0].lower):
        warnings.warn(
            "Support contains an interval with negative infinity, removing.",
            UnsupportedInputWarning,
            stacklevel=2,
        )
        intervals, probs = intervals[1:], probs[1:]
    if intervals and np.isinf(intervals[-1].upper):
        warnings.warn(
            "Support contains an interval with positive infinity, removing.",
            UnsupportedInputWarning,
            stacklevel=2,
        )
        intervals, probs = intervals[:-1], probs[:-1]

    if not intervals:
        raise DomainError("No finite intervals remain after removing infinite tails")
    total = probs.sum()
    if not total > 0:
        raise NumericInstabilityError("Finite intervals carry no probability mass")
    if len(intervals) == len(dist):
        return dist
    return IntervalDistribution(intervals, probs / total)


def _check_points(dist: DiscreteNonParametric, operation: str) -> None:
    if len(dist) < 2:
        raise DomainError(
            f"Cannot {operation} a distribution with {len(dist)} support point(s) "
            "without an explicit interval width"
        )


def left_align(dist: AlignableDist, width: Optional[float] = None) -> DiscreteNonParametric:
    """Place each mass on the lower bound of its interval.

    Point-indexed distributions are already left-aligned and are returned
    unchanged, whether or not a *width* is given.
    """
    if isinstance(dist, IntervalDistribution):
        finite = remove_infinite_tails(dist)
        return DiscreteNonParametric(finite.lower_bounds, finite.probs)
    if isinstance(dist, DiscreteNonParametric):
        return dist
    raise TypeError(f"Cannot align {type(dist).__name__}")


def centre(dist: AlignableDist, width: Optional[float] = None) -> DiscreteNonParametric:
    """Place each mass on the midpoint of its interval.

    Raises:
        DomainError: For a point-indexed distribution with fewer than two
            points when no *width* is given.
    """
    if isinstance(dist, IntervalDistribution):
        finite = remove_infinite_tails(dist)
        mids = (finite.lower_bounds + finite.upper_bounds) / 2.0
        return DiscreteNonParametric(mids, finite.probs)
    if isinstance(dist, DiscreteNonParametric):
        if width is not None:
            return dist.shift(float(width) / 2.0)
        _check_points(dist, "centre")
        xs = dist.points
        return DiscreteNonParametric((xs[:-1] + xs[1:]) / 2.0, dist.probs[:-1], check=False)
    raise TypeError(f"Cannot align {type(dist).__name__}")


def right_align(dist: AlignableDist, width: Optional[float] = None) -> DiscreteNonParametric:
    """Place each mass on the upper bound of its interval.

    Raises:
        DomainError: For a point-indexed distribution with fewer than two
            points when no *width* is given.
    """
    if isinstance(dist, IntervalDistribution):
        finite = remove_infinite_tails(dist)
        return DiscreteNonParametric(finite.upper_bounds, finite.probs)
    if isinstance(dist, DiscreteNonParametric):
        if width is not None:
            return dist.shift(float(width))
        _check_points(dist, "right align")
        return DiscreteNonParametric(dist.points[1:], dist.probs[:-1], check=False)
    raise TypeError(f"Cannot align {type(dist).__name__}")


centred_distribution = centre
right_align_distribution = right_align
left_align_distribution = left_align


def check_equal_widths(edges: np.ndarray) -> None:
    """Require all adjacent *edges* to be equally spaced.

    Raises:
        ConfigurationError: If any width differs from the first one.
    """
    widths = np.diff(edges)
    if widths.size and not np.all(np.isclose(widths, widths[0], rtol=1e-9, atol=0.0)):
        raise ConfigurationError(
            "The unbiased method requires equal interval widths, "
            f"got widths between {widths.min()} and {widths.max()}"
        )


def unbiased_points(
    dist: Dist, edges: np.ndarray, trapezoid_points: int
) -> DiscreteNonParametric:
    """Mean-preserving masses on the finite interval edges.

    With limited expectations ``L(u) = E[min(X, u)]``, equal spacing ``h``
    and finite edges ``e_0 < ... < e_m``::

        p_0 = (L(e_0) - L(e_1)) / h + P(X > e_0)
        p_j = (2 L(e_j) - L(e_{j-1}) - L(e_{j+1})) / h
        p_m = (L(e_m) - L(e_{m-1})) / h - P(X > e_m)

    followed by normalisation to one. For integer-valued distributions
    the mass ``P(X = e_0)`` is left out of ``p_0``, which biases the mean
    upwards.

    Raises:
        DomainError: If fewer than two finite edges exist.
        ConfigurationError: If the finite edges are unequally spaced.
        NumericInstabilityError: If the mean of *dist* does not exist,
            numerical integration fails, or the masses come out negative.
    """
    edges = np.asarray(edges, dtype=float)
    xs = edges[np.isfinite(edges)]
    if xs.size < 2:
        raise DomainError("The unbiased method needs at least two finite interval edges")
    check_equal_widths(xs)

    # the scheme preserves E[X], which must exist
    safe_mean(dist, trapezoid_points)

    lev = np.array([limited_expectation(dist, u, trapezoid_points) for u in xs])
    h = np.diff(xs)
    probs = np.empty(xs.size)
    probs[0] = (lev[0] - lev[1]) / h[0] + float(dist.ccdf(xs[0]))
    probs[-1] = (lev[-1] - lev[-2]) / h[-1] - float(dist.ccdf(xs[-1]))
    probs[1:-1] = (2.0 * lev[1:-1] - lev[:-2] - lev[2:]) / h[1:]

    total = probs.sum()
    if not (np.isfinite(total) and total > 0):
        raise NumericInstabilityError(
            f"Unbiased masses of {dist!r} do not have a usable total (total={total})"
        )
    probs = probs / total
    if np.any(probs < -_NEGATIVE_MASS_TOLERANCE):
        raise NumericInstabilityError(
            f"Unbiased discretisation of {dist!r} produced negative masses "
            f"(min={probs.min():.3g}); increase trapezoid_points"
        )
    probs = np.clip(probs, 0.0, None)
    logger.debug("Unbiased discretisation on %d edges", xs.size)
    return DiscreteNonParametric(xs, probs / probs.sum())
