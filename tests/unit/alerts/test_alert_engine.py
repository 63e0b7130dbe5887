# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for evaluating runs against warning and critical thresholds."""

import pytest

from k6perf.alerts import AlertEngine, crosses
from k6perf.common.config import AlertThresholdsConfig, ThresholdPair
from k6perf.common.enums import AlertLevel, AlertMetric, ThresholdDirection


class TestCrosses:
    @pytest.mark.parametrize(
        "value,threshold,direction,expected",
        [
            (1001, 1000, ThresholdDirection.ABOVE, True),
            (1000, 1000, ThresholdDirection.ABOVE, False),
            (999, 1000, ThresholdDirection.ABOVE, False),
            (79, 80, ThresholdDirection.BELOW, True),
            (80, 80, ThresholdDirection.BELOW, False),
            (81, 80, ThresholdDirection.BELOW, False),
        ],
    )  # fmt: skip
    def test_strict_comparison(self, value, threshold, direction, expected):
        assert crosses(value, threshold, direction) is expected


class TestAlertEngine:
    """Tests for AlertEngine."""

    def test_healthy_run_raises_nothing(self, make_run_stats):
        engine = AlertEngine()

        assert engine.monitor_run(make_run_stats(), "healthy") == []
        assert engine.get_alerts() == []

    def test_critical_excludes_warning(self, make_run_stats):
        """Test that a value past both thresholds raises exactly one CRITICAL alert."""
        engine = AlertEngine()

        alerts = engine.monitor_run(make_run_stats(avg=1500.0, p95=1500.0), "slow")

        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.level == AlertLevel.CRITICAL
        assert alert.metric == AlertMetric.RESPONSE_TIME
        assert alert.message == "Average response time is critically high"
        assert alert.current_value == "1500.00ms"
        assert alert.threshold == "1000ms"
        assert alert.test_name == "slow"

    def test_warning_between_thresholds(self, make_run_stats):
        engine = AlertEngine()

        (alert,) = engine.monitor_run(make_run_stats(error_rate=7.5))

        assert alert.level == AlertLevel.WARNING
        assert alert.metric == AlertMetric.ERROR_RATE
        assert alert.message == "Error rate exceeds warning threshold"
        assert alert.current_value == "7.50%"
        assert alert.threshold == "5%"

    def test_low_checks_pass_rate_is_critical(self, make_run_stats):
        """Test that a 75% checks pass rate is below the 80% critical threshold."""
        engine = AlertEngine()

        (alert,) = engine.monitor_run(make_run_stats(checks_pass_rate=75.0), "checks")

        assert alert.level == AlertLevel.CRITICAL
        assert alert.metric == AlertMetric.CHECKS_PASS_RATE
        assert alert.message == "Checks pass rate is critically low"
        assert alert.current_value == "75.00%"
        assert alert.threshold == "80%"

    def test_low_throughput_warning(self, make_run_stats):
        (alert,) = AlertEngine().monitor_run(make_run_stats(request_rate=7.0))

        assert alert.level == AlertLevel.WARNING
        assert alert.message == "Throughput is below warning threshold"
        assert alert.current_value == "7.00 req/s"
        assert alert.threshold == "10 req/s"

    def test_metrics_are_evaluated_in_order(self, make_run_stats):
        stats = make_run_stats(
            avg=600.0, p95=2500.0, error_rate=20.0, checks_pass_rate=85.0, request_rate=1.0
        )

        alerts = AlertEngine().monitor_run(stats)

        assert [(a.metric, a.level) for a in alerts] == [
            (AlertMetric.RESPONSE_TIME, AlertLevel.WARNING),
            (AlertMetric.ERROR_RATE, AlertLevel.CRITICAL),
            (AlertMetric.P95_RESPONSE_TIME, AlertLevel.CRITICAL),
            (AlertMetric.CHECKS_PASS_RATE, AlertLevel.WARNING),
            (AlertMetric.THROUGHPUT, AlertLevel.CRITICAL),
        ]

    def test_alerts_accumulate_across_runs(self, make_run_stats):
        engine = AlertEngine()

        engine.monitor_runs(
            {
                "a": make_run_stats(error_rate=12.0),
                "b": make_run_stats(),
                "c": make_run_stats(avg=700.0),
            }
        )

        assert [a.test_name for a in engine.get_alerts()] == ["a", "c"]
        assert len(engine.get_alerts_by_level(AlertLevel.CRITICAL)) == 1
        assert len(engine.get_alerts_by_level("warning")) == 1
        assert engine.get_alerts_by_level(AlertLevel.INFO) == []

    def test_get_alerts_returns_a_copy(self, make_run_stats):
        engine = AlertEngine()
        engine.monitor_run(make_run_stats(error_rate=12.0))

        engine.get_alerts().clear()

        assert len(engine.get_alerts()) == 1

    def test_custom_thresholds(self, make_run_stats):
        thresholds = AlertThresholdsConfig(response_time=ThresholdPair(warning=50, critical=80.5))

        (alert,) = AlertEngine(thresholds).monitor_run(make_run_stats(avg=100.0))

        assert alert.level == AlertLevel.CRITICAL
        assert alert.threshold == "80.5ms"

    def test_build_report_counts_levels(self, make_run_stats):
        engine = AlertEngine()
        engine.monitor_run(make_run_stats(error_rate=12.0, avg=700.0, request_rate=8.0))

        report = engine.build_report()

        assert report.total_alerts == 3
        assert report.critical_count == 1
        assert report.warning_count == 2
        assert report.info_count == 0
        assert report.alerts == engine.get_alerts()

    def test_alert_string(self, make_run_stats):
        (alert,) = AlertEngine().monitor_run(make_run_stats(error_rate=12.0), "api")

        assert str(alert) == (
            "[CRITICAL] [api] Error rate is critically high (Current: 12.00%, Threshold: 10%)"
        )
