#!/usr/bin/env python3
"""
Histogram Summarizer
====================

Bins a finite sample sequence over [min_range, max_range] and reports the
relative frequency of each bin.

Binning rules:
  - interval_size = (max_range - min_range) / num_intervals
  - samples with min_range <= v <= max_range (both ends inclusive) go to
    bin floor((v - min_range) / interval_size), clamped to the last bin,
    so v == max_range lands in the last bin
  - out-of-range samples (and NaN) are dropped from the counts

Relative frequency = bin count / TOTAL sample count, out-of-range samples
included. Frequencies therefore sum to less than 1 as soon as anything
falls outside the range.
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

import numpy as np
from scipy import stats

from prng_suite.errors import InvalidParameterError


@dataclass(frozen=True)
class HistogramBin:
    """One histogram row."""
    range_low: float
    range_high: float
    relative_frequency: float
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _validate_config(min_range: float, max_range: float, num_intervals: int):
    if isinstance(num_intervals, bool) or not isinstance(num_intervals, (int, np.integer)):
        raise InvalidParameterError(f"Bin count must be an integer, got {num_intervals!r}")
    if num_intervals <= 0:
        raise InvalidParameterError(f"Bin count must be positive, got {num_intervals}")
    for label, value in (("min_range", min_range), ("max_range", max_range)):
        if not math.isfinite(value):
            raise InvalidParameterError(f"{label} must be finite, got {value}")
    if max_range <= min_range:
        raise InvalidParameterError(
            f"max_range must exceed min_range, got [{min_range}, {max_range}]"
        )
    interval_size = (max_range - min_range) / num_intervals
    if interval_size == 0.0 or not math.isfinite(interval_size):
        raise InvalidParameterError(
            f"Range [{min_range}, {max_range}] over {num_intervals} bins gives "
            f"an unusable bin width {interval_size}"
        )


def bin_counts(samples: Sequence[float], min_range: float, max_range: float,
               num_intervals: int) -> np.ndarray:
    """
    Count in-range samples per bin.

    Returns:
        int64 array of length num_intervals
    """
    _validate_config(min_range, max_range, num_intervals)
    values = np.asarray(samples, dtype=np.float64).ravel()
    interval_size = (max_range - min_range) / num_intervals

    in_range = values[(values >= min_range) & (values <= max_range)]
    index = np.floor((in_range - min_range) / interval_size).astype(np.int64)
    index = np.clip(index, 0, num_intervals - 1)
    return np.bincount(index, minlength=num_intervals)


def histogram(samples: Sequence[float], min_range: float, max_range: float,
              num_intervals: int) -> List[HistogramBin]:
    """
    Summarize samples as per-bin relative frequencies.

    Args:
        samples: Finite sequence of sample values
        min_range: Lower edge of the first bin
        max_range: Upper edge of the last bin (must exceed min_range)
        num_intervals: Number of bins (> 0)

    Returns:
        num_intervals HistogramBin rows in ascending range order.
        An empty sample sequence yields all-zero frequencies.

    Raises:
        InvalidParameterError: Non-positive bin count or bad range
    """
    counts = bin_counts(samples, min_range, max_range, num_intervals)
    total = len(np.asarray(samples, dtype=np.float64).ravel())
    interval_size = (max_range - min_range) / num_intervals

    bins = []
    for i in range(num_intervals):
        count = int(counts[i])
        bins.append(HistogramBin(
            range_low=min_range + i * interval_size,
            range_high=min_range + (i + 1) * interval_size,
            relative_frequency=count / total if total else 0.0,
            count=count,
        ))
    return bins


def format_histogram(bins: Sequence[HistogramBin], precision: int = 6) -> str:
    """Render bins as the two-column 'Interval   Frequency' table."""
    lines = ["Interval   Frequency"]
    for b in bins:
        lines.append(
            f"[{b.range_low:.{precision}g}; {b.range_high:.{precision}g}]    "
            f"{b.relative_frequency:.{precision}g}"
        )
    return "\n".join(lines)


def uniformity_test(samples: Sequence[float], min_range: float, max_range: float,
                    num_intervals: int, significance: float = 0.01) -> Dict[str, Any]:
    """
    Chi-square goodness of fit of the in-range bin counts against a flat
    expectation.

    Returns:
        Dict with chi2, p_value, in_range, uniform (p_value >= significance)
    """
    counts = bin_counts(samples, min_range, max_range, num_intervals)
    in_range = int(counts.sum())
    if in_range < 1:
        raise InvalidParameterError("No samples inside the histogram range")

    expected = np.full(num_intervals, in_range / num_intervals)
    chi2, p_value = stats.chisquare(counts, expected)
    return {
        "chi2": float(chi2),
        "p_value": float(p_value),
        "in_range": in_range,
        "uniform": bool(p_value >= significance),
    }
