# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from k6perf.common.enums import MetricKind
from k6perf.metrics import (
    ACCUMULATOR_TYPES,
    CounterAccumulator,
    GaugeAccumulator,
    RateAccumulator,
    TrendAccumulator,
)


class TestAccumulatorTypes:
    @pytest.mark.parametrize(
        "kind,accumulator_type",
        [
            (MetricKind.COUNTER, CounterAccumulator),
            (MetricKind.GAUGE, GaugeAccumulator),
            (MetricKind.RATE, RateAccumulator),
            (MetricKind.TREND, TrendAccumulator),
        ],
    )  # fmt: skip
    def test_every_kind_has_an_accumulator(self, kind, accumulator_type):
        assert ACCUMULATOR_TYPES[kind] is accumulator_type


class TestCounterAccumulator:
    def test_sums_values(self):
        counter = CounterAccumulator("data_received")
        for value in (100, 250.5, 0):
            counter.add(value)

        summary = counter.summarize()

        assert summary.kind == MetricKind.COUNTER
        assert summary.count == 3
        assert summary.sum == 350.5


class TestGaugeAccumulator:
    def test_keeps_max_and_last(self):
        gauge = GaugeAccumulator("vus")
        for value in (5, 20, 10):
            gauge.add(value)

        summary = gauge.summarize()

        assert summary.max == 20.0
        assert summary.last == 10.0

    def test_empty_gauge_reports_zero(self):
        summary = GaugeAccumulator("vus").summarize()

        assert summary.max == 0.0
        assert summary.last == 0.0


class TestRateAccumulator:
    def test_counts_ones_as_passes(self):
        rate = RateAccumulator("checks")
        for value in (1, 1, 1, 0, 0.5):
            rate.add(value)

        assert rate.passes == 3
        assert rate.fails == 2
        assert rate.rate == pytest.approx(60.0)

    def test_empty_rate_is_fully_passing(self):
        """Test that a rate without observations reports 100%, not 0% or an error."""
        summary = RateAccumulator("checks").summarize()

        assert summary.rate == 100.0
        assert summary.passes == 0
        assert summary.fails == 0


class TestTrendAccumulator:
    def test_retains_values_beyond_initial_capacity(self):
        trend = TrendAccumulator("http_req_duration")
        for value in range(1000):
            trend.add(value)

        assert len(trend.values) == 1000
        assert trend.values[0] == 0.0
        assert trend.values[-1] == 999.0

    def test_summary_uses_nearest_rank(self):
        trend = TrendAccumulator("http_req_duration")
        for value in (100, 90, 80, 70, 60, 50, 40, 30, 20, 10):
            trend.add(value)

        summary = trend.summarize()

        assert summary.count == 10
        assert summary.trend.p90 == 100.0
        assert summary.trend.med == 60.0
