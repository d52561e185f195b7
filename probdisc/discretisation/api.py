"""Public entry point: :func:`discretise`."""

from __future__ import annotations

import logging
import numbers
from typing import Any, Optional, Sequence, Union

import numpy as np

from ..core.context import Settings, validate_quantiles
from ..core.errors import ConfigurationError
from ..core.methods import Method
from ..core.types import Interval
from ..distributions.nonparametric import DiscreteNonParametric, IntervalDistribution
from ..distributions.wrapped import as_dist
from .alignment import centre, left_align, right_align, unbiased_points
from .bounds import boundary_edges, fixed_width_edges, intervals_to_edges
from .mass import assign_mass

logger = logging.getLogger(__name__)

IntervalSpec = Union[float, Sequence[float], Sequence[Interval], np.ndarray]

_ALIGNERS = {
    Method.LEFT_ALIGNED: left_align,
    Method.CENTRED: centre,
    Method.RIGHT_ALIGNED: right_align,
}


def _resolve_edges(dist, spec: Any, min_quantile: float, max_quantile: float) -> np.ndarray:
    if isinstance(spec, bool):
        raise ConfigurationError("interval specification must be a number or a sequence")
    if isinstance(spec, numbers.Real) or (isinstance(spec, np.ndarray) and spec.ndim == 0):
        return fixed_width_edges(dist, float(spec), min_quantile, max_quantile)
    if isinstance(spec, (str, bytes)):
        raise ConfigurationError("interval specification must be a number or a sequence")
    try:
        values = list(spec)
    except TypeError:
        raise ConfigurationError(
            f"interval specification must be a number or a sequence, got {type(spec).__name__}"
        ) from None
    if values and all(isinstance(v, Interval) for v in values):
        return intervals_to_edges(values)
    if any(isinstance(v, Interval) for v in values):
        raise ConfigurationError("cannot mix Interval objects and boundary values")
    return boundary_edges(dist, values)


def discretise(
    dist: Any,
    intervals: IntervalSpec,
    *,
    method: Union[Method, str, None] = None,
    min_quantile: Optional[float] = None,
    max_quantile: Optional[float] = None,
    trapezoid_points: Optional[int] = None,
) -> Union[IntervalDistribution, DiscreteNonParametric]:
    """Discretise a univariate distribution over a partition of its support.

    Keyword arguments left as ``None`` are read from the active
    :class:`~probdisc.core.context.Settings`.

    Args:
        dist: A :class:`~probdisc.core.types.Dist` or a frozen
            ``scipy.stats`` distribution, continuous or integer-valued
            discrete.
        intervals: How to partition the support. One of

            - a positive number: fixed interval width. Edges sit at
              multiples of the width; infinite support bounds are replaced
              using *min_quantile* / *max_quantile*.
            - a sequence of boundary values (any order): edges are the
              sorted values inside the support plus the support bounds,
              which may be infinite.
            - a sequence of contiguous :class:`~probdisc.core.types.Interval`
              objects, used as given.

        method: Output representation, a :class:`Method` or its string
            value. Unknown values warn and fall back to ``"interval"``.
        min_quantile: Lower quantile for an infinite lower bound
            (fixed-width mode only, default 0.001).
        max_quantile: Upper quantile for an infinite upper bound
            (fixed-width mode only, default 0.999).
        trapezoid_points: Samples for numerical mean integration, only used
            by ``Method.UNBIASED`` (default 10000).

    Returns:
        An :class:`IntervalDistribution` for ``Method.INTERVAL``, otherwise
        a :class:`DiscreteNonParametric` on points.

    Raises:
        ConfigurationError: For invalid widths, quantiles, boundaries, or
            unequal widths with ``Method.UNBIASED``.
        NumericInstabilityError: If the intervals capture no probability
            mass, or the unbiased masses cannot be computed reliably.
        DomainError: If no finite interval is left to align.

    Example:
        >>> d = discretise(Uniform(0, 10), 1.0, method="left_aligned")
        >>> d.points
        array([0., 1., 2., 3., 4., 5., 6., 7., 8., 9.])
    """
    settings = Settings.current()
    method = Method.coerce(settings.method if method is None else method)
    min_quantile = settings.min_quantile if min_quantile is None else float(min_quantile)
    max_quantile = settings.max_quantile if max_quantile is None else float(max_quantile)
    trapezoid_points = (
        settings.trapezoid_points if trapezoid_points is None else int(trapezoid_points)
    )
    validate_quantiles(min_quantile, max_quantile)
    if trapezoid_points < 2:
        raise ConfigurationError(
            f"trapezoid_points must be at least 2, got {trapezoid_points}"
        )

    dist = as_dist(dist)
    edges = _resolve_edges(dist, intervals, min_quantile, max_quantile)
    logger.debug("Discretising %r on %d edges with method %s", dist, edges.size, method.value)

    if method is Method.UNBIASED:
        return unbiased_points(dist, edges, trapezoid_points)

    result = assign_mass(dist, edges)
    if method is Method.INTERVAL:
        return result
    return _ALIGNERS[method](result)


discretize = discretise
