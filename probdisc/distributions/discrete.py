"""Integer-valued discrete probability distributions."""

from scipy import stats

from .wrapped import ScipyDist


class Bernoulli(ScipyDist):
    """Bernoulli distribution for binary outcomes.

    Parameters
    ----------
    p : float
        Probability of success (1), must be in [0, 1].
    """

    def __init__(self, p=0.5):
        if not 0 <= p <= 1:
            raise ValueError(f"p must be in [0, 1], got {p}")
        self.p = float(p)
        super().__init__(stats.bernoulli(self.p))

    def __repr__(self):
        return f"Bernoulli(p={self.p})"


class Poisson(ScipyDist):
    """Poisson distribution for count data.

    Parameters
    ----------
    lambda_ : float
        Rate parameter (mean), must be > 0.
    """

    def __init__(self, lambda_=1.0):
        if lambda_ <= 0:
            raise ValueError(f"lambda_ must be > 0, got {lambda_}")
        self.lambda_ = float(lambda_)
        super().__init__(stats.poisson(self.lambda_))

    def __repr__(self):
        return f"Poisson(lambda_={self.lambda_})"


class Binomial(ScipyDist):
    """Binomial distribution: successes in *n* independent trials.

    Parameters
    ----------
    n : int
        Number of trials, must be >= 0.
    p : float
        Success probability, must be in [0, 1].
    """

    def __init__(self, n=1, p=0.5):
        if int(n) != n or n < 0:
            raise ValueError(f"n must be a non-negative integer, got {n}")
        if not 0 <= p <= 1:
            raise ValueError(f"p must be in [0, 1], got {p}")
        self.n = int(n)
        self.p = float(p)
        super().__init__(stats.binom(self.n, self.p))

    def __repr__(self):
        return f"Binomial(n={self.n}, p={self.p})"


class Geometric(ScipyDist):
    """Geometric distribution counting failures before the first success.

    Support starts at 0, so the mean is ``(1 - p) / p``.

    Parameters
    ----------
    p : float
        Success probability, must be in (0, 1].
    """

    def __init__(self, p=0.5):
        if not 0 < p <= 1:
            raise ValueError(f"p must be in (0, 1], got {p}")
        self.p = float(p)
        # scipy's geom counts trials (support starts at 1)
        super().__init__(stats.geom(self.p, loc=-1))

    def __repr__(self):
        return f"Geometric(p={self.p})"
