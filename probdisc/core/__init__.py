"""Core module for ProbDisc.

This module contains the distribution interface, the interval type, the
alignment method enumeration, the error taxonomy and the settings context
used throughout the discretisation engine.
"""

from .types import Dist, Interval
from .methods import Method
from .context import Settings
from .errors import (
    ConfigurationError,
    DiscretisationError,
    DomainError,
    NumericInstabilityError,
    UnsupportedInputWarning,
)

__all__ = [
    "Dist",
    "Interval",
    "Method",
    "Settings",
    "DiscretisationError",
    "ConfigurationError",
    "DomainError",
    "NumericInstabilityError",
    "UnsupportedInputWarning",
]
