"""Context manager for discretisation defaults."""

from contextvars import ContextVar, Token
from typing import List, Optional, Union

from .errors import ConfigurationError
from .methods import Method

DEFAULT_MIN_QUANTILE = 0.001
DEFAULT_MAX_QUANTILE = 0.999
DEFAULT_TRAPEZOID_POINTS = 10000

# innermost active Settings of the current thread or task
_active_settings: ContextVar[Optional['Settings']] = ContextVar(
    "probdisc_settings", default=None
)


def validate_quantiles(min_quantile: float, max_quantile: float) -> None:
    """Check that ``0 < min_quantile < max_quantile < 1``.

    Raises:
        ConfigurationError: If the quantiles are out of order or range.
    """
    if not 0.0 < min_quantile < max_quantile < 1.0:
        raise ConfigurationError(
            "Quantiles must satisfy 0 < min_quantile < max_quantile < 1, "
            f"got min_quantile={min_quantile}, max_quantile={max_quantile}"
        )


class Settings:
    """Context manager holding the defaults used by ``discretise``.

    Any keyword that ``discretise`` receives as ``None`` is read from the
    innermost active :class:`Settings`; outside every context the module
    defaults apply. Contexts nest and restore their parent on exit. The
    active context is local to the current thread or asyncio task.

    Example:
        >>> with Settings(trapezoid_points=50000, method="unbiased"):
        ...     d = discretise(Gamma(2.0, 7.0), 0.5)
    """

    def __init__(
        self,
        *,
        min_quantile: float = DEFAULT_MIN_QUANTILE,
        max_quantile: float = DEFAULT_MAX_QUANTILE,
        trapezoid_points: int = DEFAULT_TRAPEZOID_POINTS,
        method: Union[Method, str] = Method.INTERVAL,
    ):
        """Initialize a new settings context.

        Args:
            min_quantile: Lower truncation quantile for unbounded supports.
            max_quantile: Upper truncation quantile for unbounded supports.
            trapezoid_points: Sample count for numerical mean integration.
            method: Default alignment method.

        Raises:
            ConfigurationError: If the quantiles or sample count are invalid.
        """
        validate_quantiles(min_quantile, max_quantile)
        if int(trapezoid_points) < 2:
            raise ConfigurationError(
                f"trapezoid_points must be at least 2, got {trapezoid_points}"
            )
        self.min_quantile = float(min_quantile)
        self.max_quantile = float(max_quantile)
        self.trapezoid_points = int(trapezoid_points)
        self.method = Method.coerce(method)
        self._tokens: List[Token] = []

    def __enter__(self) -> 'Settings':
        """Enter the settings context.

        Returns:
            The Settings instance.
        """
        self._tokens.append(_active_settings.set(self))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Exit the settings context, restoring the enclosing one.

        Returns:
            False to propagate any exceptions.
        """
        _active_settings.reset(self._tokens.pop())
        return False

    @classmethod
    def current(cls) -> 'Settings':
        """Return the active settings, or a fresh default instance."""
        active = _active_settings.get()
        if active is not None:
            return active
        return cls()

    @classmethod
    def is_active(cls) -> bool:
        """Check if a Settings context is currently active."""
        return _active_settings.get() is not None

    def __repr__(self) -> str:
        return (
            f"Settings(min_quantile={self.min_quantile}, "
            f"max_quantile={self.max_quantile}, "
            f"trapezoid_points={self.trapezoid_points}, "
            f"method={self.method.value!r})"
        )
