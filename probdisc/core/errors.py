"""Error and warning taxonomy for ProbDisc.

Fatal conditions are exceptions that always reach the caller; no partially
built distribution is ever returned. Non-fatal conditions are reported through
:mod:`warnings` with :class:`UnsupportedInputWarning` so callers can observe,
filter or escalate them without the library changing control flow.
"""


class DiscretisationError(Exception):
    """Base error for this package."""


class ConfigurationError(DiscretisationError, ValueError):
    """Arguments violate the contract: widths, quantiles, unequal intervals."""


class NumericInstabilityError(DiscretisationError, FloatingPointError):
    """Probability mass or an estimate could not be computed reliably."""


class DomainError(DiscretisationError, ValueError):
    """Operation undefined for the given distribution, e.g. too few points."""


class UnsupportedInputWarning(UserWarning):
    """Input was not understood and a documented fallback was used."""
