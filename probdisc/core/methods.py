"""Alignment methods for discretised distributions."""

from __future__ import annotations

import enum
import warnings
from typing import Union

from .errors import UnsupportedInputWarning


class Method(enum.Enum):
    """How the probability mass of each interval is represented.

    - ``INTERVAL``: keep intervals as support values.
    - ``LEFT_ALIGNED``: place each mass on its interval's lower bound.
    - ``CENTRED``: place each mass on its interval's midpoint.
    - ``RIGHT_ALIGNED``: place each mass on its interval's upper bound.
    - ``UNBIASED``: place masses on the interval edges so that the mean of
      the original distribution is preserved (local moment matching, as in
      the ``discretize`` function of the R package ``actuar``). For
      integer-valued distributions the lowest edge only receives
      ``P(X > e_0)``, so mass sitting exactly on it is shifted upwards and
      the mean is overstated.
    """

    INTERVAL = "interval"
    LEFT_ALIGNED = "left_aligned"
    CENTRED = "centred"
    RIGHT_ALIGNED = "right_aligned"
    UNBIASED = "unbiased"

    @classmethod
    def coerce(cls, value: Union[Method, str, None]) -> Method:
        """Convert *value* to a :class:`Method`.

        Strings are matched case-insensitively against the enum values;
        ``"centered"`` is accepted as an alias of ``"centred"``. Anything
        unrecognised falls back to ``INTERVAL`` with an
        :class:`UnsupportedInputWarning`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().lstrip(":")
            if key == "centered":
                key = "centred"
            try:
                return cls(key)
            except ValueError:
                pass
        warnings.warn(
            f"Unknown discretisation method {value!r}, using 'interval'",
            UnsupportedInputWarning,
            stacklevel=3,
        )
        return cls.INTERVAL
