"""Example usage of the ProbDisc package.

This example demonstrates the core features of the ProbDisc package including:
- Discretising continuous and discrete distributions onto intervals
- Aligning interval masses onto points
- The mean-preserving ("unbiased") method
- Using the Settings context manager
- Rescaling a discretisation, e.g. to turn daily delays into weeks
"""

import warnings

import numpy as np

from probdisc import (
    Gamma, LogNormal, Normal, Poisson, Truncated,
    Interval, Settings,
    discretise, centre, right_align,
)


def interval_example():
    """Demonstrate interval-valued discretisation."""
    print("=" * 60)
    print("Interval Discretisation Example")
    print("=" * 60)

    # Fixed width: edges at multiples of the width
    print("\n1. Fixed width")
    d = discretise(Normal(0, 1), 0.5)
    print(f"   Intervals: {len(d)}, first {d.intervals[0]}, last {d.intervals[-1]}")
    print(f"   Total probability: {d.probs.sum():.6f}")

    # Custom boundaries: support bounds are added, here giving infinite tails
    print("\n2. Custom boundaries")
    d = discretise(Normal(0, 1), [1.0, -1.0, 0.0])
    for interval, p in d:
        print(f"   {interval}: {p:.4f}")

    # Explicit intervals
    print("\n3. Explicit intervals")
    d = discretise(LogNormal(1.0, 0.5), [Interval(0.0, 2.0), Interval(2.0, 5.0), Interval(5.0, 20.0)])
    print(f"   Probabilities: {np.round(d.probs, 4)}")

    # Discrete distributions spread integer mass over [k, k + 1)
    print("\n4. Discrete distribution")
    d = discretise(Poisson(3.0), 2.0)
    print(f"   Edges: {d.edges}")
    print(f"   Probabilities: {np.round(d.probs, 4)}")


def alignment_example():
    """Demonstrate point alignment."""
    print("\n" + "=" * 60)
    print("Alignment Example")
    print("=" * 60)

    dist = Gamma(2.0, 7.0)
    for method in ("left_aligned", "centred", "right_aligned", "unbiased"):
        d = discretise(dist, 1.0, method=method)
        print(f"   {method:<14} points={len(d):3d}  mean={d.mean():.4f}")
    print(f"   {'exact':<14} mean={dist.mean():.4f}")

    # Aligning an interval result afterwards is the same as asking for it
    intervals = discretise(dist, 1.0)
    print(f"\n   centre() after the fact: mean={centre(intervals).mean():.4f}")

    # Tails from custom boundaries are dropped with a warning
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        d = discretise(dist, [10.0, 20.0, 30.0], method="centred")
    print(f"   Custom boundaries: points={d.points}, warnings={len(caught)}")


def unbiased_example():
    """Demonstrate the accuracy of the unbiased method."""
    print("\n" + "=" * 60)
    print("Unbiased Method Example")
    print("=" * 60)

    # Truncated distributions have no closed-form mean, so it is integrated
    dist = Truncated(Gamma(2.0, 7.0), upper=50.0)
    for points in (100, 1000, 10000):
        d = discretise(dist, 0.5, method="unbiased", trapezoid_points=points)
        print(f"   trapezoid_points={points:>6}: mean={d.mean():.8f}")


def settings_example():
    """Demonstrate the Settings context manager."""
    print("\n" + "=" * 60)
    print("Settings Context Manager Example")
    print("=" * 60)

    with Settings(min_quantile=0.01, max_quantile=0.99, method="centred") as settings:
        print(f"   Active: {Settings.is_active()} {settings}")
        d = discretise(Normal(10, 2), 1.0)
        print(f"   Points: {d.points}")

    print(f"   After exiting: active={Settings.is_active()}")


def rescaling_example():
    """Discretise a daily delay, then express it in weeks."""
    print("\n" + "=" * 60)
    print("Rescaling Example")
    print("=" * 60)

    # Delay in days, censored to whole days and moved to interval ends
    days = discretise(LogNormal(1.5, 0.6), 1.0, method="left_aligned")
    days = right_align(days, 1.0)
    weeks = days / 7
    print(f"   Mean delay: {days.mean():.3f} days = {weeks.mean():.3f} weeks")
    print(f"   P(delay <= 1 week): {weeks.cdf(1.0):.4f}")


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("ProbDisc Package Examples")
    print("=" * 60)

    interval_example()
    alignment_example()
    unbiased_example()
    settings_example()
    rescaling_example()

    print("\n" + "=" * 60)
    print("Examples completed successfully!")
    print("=" * 60 + "\n")
