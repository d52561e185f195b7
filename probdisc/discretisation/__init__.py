"""Discretisation engine for ProbDisc.

Provides:
- discretise: partition a distribution's support and assign interval masses
- left_align / centre / right_align: collapse intervals onto points
- remove_infinite_tails: drop unbounded tail intervals
- safe_mean / limited_expectation: (truncated) means used by the
  mean-preserving ``unbiased`` method
"""

from probdisc.discretisation.alignment import (
    centre,
    centred_distribution,
    left_align,
    left_align_distribution,
    remove_infinite_tails,
    right_align,
    right_align_distribution,
)
from probdisc.discretisation.api import discretise, discretize
from probdisc.discretisation.expectation import limited_expectation, safe_mean
from probdisc.discretisation.pseudo_cdf import pseudo_cdf

__all__ = [
    "discretise",
    "discretize",
    "left_align",
    "centre",
    "right_align",
    "left_align_distribution",
    "centred_distribution",
    "right_align_distribution",
    "remove_infinite_tails",
    "safe_mean",
    "limited_expectation",
    "pseudo_cdf",
]
