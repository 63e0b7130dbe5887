# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field, model_validator
from typing_extensions import Self

from k6perf.common.enums import AlertMetric, ThresholdDirection
from k6perf.common.exceptions import ConfigurationError
from k6perf.common.models.base_models import K6PerfBaseModel


class ThresholdPair(K6PerfBaseModel):
    """The warning and critical thresholds of one alert metric."""

    warning: float = Field(..., description="Crossing this raises a WARNING alert.")
    critical: float = Field(..., description="Crossing this raises a CRITICAL alert.")


class AlertThresholdsConfig(K6PerfBaseModel):
    """Thresholds of the alert engine, one pair per :class:`AlertMetric`.

    Metrics with an ``above`` direction must have ``warning <= critical``; metrics
    with a ``below`` direction (pass rate, throughput) must have
    ``warning >= critical``. Invalid pairs raise :class:`ConfigurationError`.
    """

    response_time: ThresholdPair = Field(
        default_factory=lambda: ThresholdPair(warning=500, critical=1000),
        description="Average response time in milliseconds.",
    )
    error_rate: ThresholdPair = Field(
        default_factory=lambda: ThresholdPair(warning=5, critical=10),
        description="Error rate in percent.",
    )
    p95_response_time: ThresholdPair = Field(
        default_factory=lambda: ThresholdPair(warning=1000, critical=2000),
        description="95th percentile response time in milliseconds.",
    )
    checks_pass_rate: ThresholdPair = Field(
        default_factory=lambda: ThresholdPair(warning=90, critical=80),
        description="Checks pass rate in percent. Alerts when below.",
    )
    throughput: ThresholdPair = Field(
        default_factory=lambda: ThresholdPair(warning=10, critical=5),
        description="Requests per second. Alerts when below.",
    )

    @model_validator(mode="after")
    def validate_threshold_order(self) -> Self:
        """Reject pairs whose warning threshold is stricter than the critical one."""
        for metric in AlertMetric:
            pair = self.get(metric)
            if pair.warning < 0 or pair.critical < 0:
                raise ConfigurationError(
                    f"Thresholds for '{metric}' must not be negative "
                    f"(warning={pair.warning}, critical={pair.critical})"
                )
            if metric.direction == ThresholdDirection.ABOVE and pair.warning > pair.critical:
                raise ConfigurationError(
                    f"Warning threshold for '{metric}' ({pair.warning}) must not exceed "
                    f"its critical threshold ({pair.critical})"
                )
            if metric.direction == ThresholdDirection.BELOW and pair.warning < pair.critical:
                raise ConfigurationError(
                    f"Warning threshold for '{metric}' ({pair.warning}) must not be below "
                    f"its critical threshold ({pair.critical})"
                )
        return self

    def get(self, metric: AlertMetric) -> ThresholdPair:
        """Get the threshold pair of a metric."""
        return getattr(self, AlertMetric(metric).value)
