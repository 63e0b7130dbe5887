# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Sequence

import numpy as np

from k6perf.common.models import TrendStats

TREND_PERCENTILES: dict[str, float] = {"p90": 0.90, "p95": 0.95, "p99": 0.99}


def nearest_rank_index(count: int, quantile: float) -> int:
    """Zero-based index of a quantile in a sorted sample, ``floor(count * quantile)``.

    The index is clamped to the last element so that a quantile of 1.0 stays in range.

    Examples:
        >>> nearest_rank_index(10, 0.90)
        9
        >>> nearest_rank_index(3, 0.5)
        1
    """
    if count <= 0:
        raise ValueError("count must be positive")
    return min(int(count * quantile), count - 1)


def compute_trend_stats(values: Sequence[float] | np.ndarray) -> TrendStats:
    """Summarize a trend with nearest-rank statistics, without interpolation.

    The values are sorted ascending; min and max are the ends, the median is the
    value at ``n // 2`` and every percentile the value at ``floor(n * q)``.
    An empty sample yields all zeros.

    Examples:
        >>> compute_trend_stats([30, 10, 20]).med
        20.0
        >>> compute_trend_stats([]).p99
        0.0
    """
    ordered = np.sort(np.asarray(values, dtype=np.float64))
    count = len(ordered)
    if count == 0:
        return TrendStats()

    percentiles = {
        name: float(ordered[nearest_rank_index(count, quantile)])
        for name, quantile in TREND_PERCENTILES.items()
    }
    return TrendStats(
        min=float(ordered[0]),
        avg=float(ordered.sum() / count),
        med=float(ordered[count // 2]),
        max=float(ordered[-1]),
        **percentiles,
    )
