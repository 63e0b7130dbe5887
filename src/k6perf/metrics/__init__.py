# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.metrics.accumulators import (
    ACCUMULATOR_TYPES,
    BaseMetricAccumulator,
    CounterAccumulator,
    GaugeAccumulator,
    RateAccumulator,
    TrendAccumulator,
)
from k6perf.metrics.aggregator import MetricAggregator, MetricSeries
from k6perf.metrics.statistics import compute_trend_stats, nearest_rank_index

__all__ = [
    "ACCUMULATOR_TYPES",
    "BaseMetricAccumulator",
    "CounterAccumulator",
    "GaugeAccumulator",
    "MetricAggregator",
    "MetricSeries",
    "RateAccumulator",
    "TrendAccumulator",
    "compute_trend_stats",
    "nearest_rank_index",
]
