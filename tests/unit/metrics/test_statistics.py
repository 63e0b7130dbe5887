# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from k6perf.common.models import TrendStats
from k6perf.metrics import compute_trend_stats, nearest_rank_index


class TestNearestRankIndex:
    @pytest.mark.parametrize(
        "count,quantile,expected",
        [
            (10, 0.90, 9),
            (10, 0.95, 9),
            (10, 0.99, 9),
            (100, 0.90, 90),
            (100, 0.95, 95),
            (100, 0.99, 99),
            (1, 0.99, 0),
            (3, 0.5, 1),
            (4, 1.0, 3),
        ],
    )  # fmt: skip
    def test_index_is_floor_of_count_times_quantile(self, count, quantile, expected):
        assert nearest_rank_index(count, quantile) == expected

    def test_rejects_empty_sample(self):
        with pytest.raises(ValueError):
            nearest_rank_index(0, 0.5)


class TestComputeTrendStats:
    def test_empty_sample_is_all_zeros(self):
        """Test that no values yields zeros instead of NaN or a division error."""
        assert compute_trend_stats([]) == TrendStats()

    def test_ten_values(self):
        """Test the nearest-rank statistics of [10, 20, ..., 100]."""
        stats = compute_trend_stats([10, 20, 30, 40, 50, 60, 70, 80, 90, 100])

        assert stats.min == 10.0
        assert stats.max == 100.0
        assert stats.avg == 55.0
        assert stats.med == 60.0
        assert stats.p90 == 100.0
        assert stats.p95 == 100.0
        assert stats.p99 == 100.0

    def test_values_are_sorted_first(self):
        stats = compute_trend_stats([300, 100, 200])

        assert (stats.min, stats.med, stats.max) == (100.0, 200.0, 300.0)
        assert stats.avg == 200.0

    def test_hundred_values(self):
        stats = compute_trend_stats(list(range(1, 101)))

        assert stats.med == 51.0
        assert stats.p90 == 91.0
        assert stats.p95 == 96.0
        assert stats.p99 == 100.0

    def test_single_value(self):
        stats = compute_trend_stats([42.5])

        assert stats == TrendStats(
            min=42.5, avg=42.5, med=42.5, p90=42.5, p95=42.5, p99=42.5, max=42.5
        )
