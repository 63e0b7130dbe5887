# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Mapping

from k6perf.common.config import AlertThresholdsConfig
from k6perf.common.display_utils import format_threshold, format_value
from k6perf.common.enums import AlertLevel, AlertMetric, ThresholdDirection
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import Alert, AlertReport, RunStats


def metric_value(stats: RunStats, metric: AlertMetric) -> float:
    """The value of a run that an alert metric is evaluated against."""
    match metric:
        case AlertMetric.RESPONSE_TIME:
            return stats.response_time.avg
        case AlertMetric.ERROR_RATE:
            return stats.error_rate
        case AlertMetric.P95_RESPONSE_TIME:
            return stats.response_time.p95
        case AlertMetric.CHECKS_PASS_RATE:
            return stats.checks_pass_rate
        case AlertMetric.THROUGHPUT:
            return stats.request_rate
    raise ValueError(f"Unsupported alert metric: {metric!r}")


def crosses(value: float, threshold: float, direction: ThresholdDirection) -> bool:
    """Whether ``value`` is on the alerting side of ``threshold``. Equality never alerts."""
    if direction == ThresholdDirection.BELOW:
        return value < threshold
    return value > threshold


class AlertEngine(K6PerfLoggerMixin):
    """Evaluates runs against warning and critical thresholds.

    For every metric at most one alert is raised per run: CRITICAL when the
    critical threshold is crossed, otherwise WARNING when the warning threshold is
    crossed. Alerts accumulate, in evaluation order, for the lifetime of the engine.

    Examples:
        >>> engine = AlertEngine()
        >>> alerts = engine.monitor_run(RunStats(checks_pass_rate=75.0, request_rate=50.0))
        >>> [str(alert.level) for alert in alerts]
        ['CRITICAL']
    """

    def __init__(self, thresholds: AlertThresholdsConfig | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.thresholds = thresholds or AlertThresholdsConfig()
        self._alerts: list[Alert] = []

    def monitor_run(self, stats: RunStats, test_name: str | None = None) -> list[Alert]:
        """Evaluate one run. Returns the alerts raised for it, which are also retained."""
        raised = []
        for metric in AlertMetric:
            alert = self._evaluate(metric, metric_value(stats, metric), test_name)
            if alert is not None:
                raised.append(alert)

        self._alerts.extend(raised)
        for alert in raised:
            if alert.level == AlertLevel.CRITICAL:
                self.error(str(alert))
            else:
                self.warning(str(alert))
        return raised

    def monitor_runs(self, results: Mapping[str, RunStats]) -> list[Alert]:
        """Evaluate several runs in iteration order."""
        raised = []
        for test_name, stats in results.items():
            raised.extend(self.monitor_run(stats, test_name))
        return raised

    def _evaluate(
        self, metric: AlertMetric, value: float, test_name: str | None
    ) -> Alert | None:
        pair = self.thresholds.get(metric)
        if crosses(value, pair.critical, metric.direction):
            level, threshold = AlertLevel.CRITICAL, pair.critical
        elif crosses(value, pair.warning, metric.direction):
            level, threshold = AlertLevel.WARNING, pair.warning
        else:
            return None

        return Alert(
            level=level,
            metric=metric,
            message=self._message(metric, level),
            current_value=format_value(value, metric.unit_suffix),
            threshold=format_threshold(threshold, metric.unit_suffix),
            test_name=test_name,
        )

    @staticmethod
    def _message(metric: AlertMetric, level: AlertLevel) -> str:
        if metric.direction == ThresholdDirection.BELOW:
            if level == AlertLevel.CRITICAL:
                return f"{metric.label} is critically low"
            return f"{metric.label} is below warning threshold"
        if level == AlertLevel.CRITICAL:
            return f"{metric.label} is critically high"
        return f"{metric.label} exceeds warning threshold"

    def get_alerts(self) -> list[Alert]:
        return list(self._alerts)

    def get_alerts_by_level(self, level: AlertLevel | str) -> list[Alert]:
        level = AlertLevel(level)
        return [alert for alert in self._alerts if alert.level == level]

    def build_report(self) -> AlertReport:
        """Counts by level plus every alert raised so far."""
        return AlertReport(
            total_alerts=len(self._alerts),
            critical_count=len(self.get_alerts_by_level(AlertLevel.CRITICAL)),
            warning_count=len(self.get_alerts_by_level(AlertLevel.WARNING)),
            info_count=len(self.get_alerts_by_level(AlertLevel.INFO)),
            alerts=self.get_alerts(),
        )
