# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from k6perf.common.enums.base_enums import (
    BasePydanticBackedStrEnum,
    BasePydanticEnumInfo,
    CaseInsensitiveStrEnum,
)


class AlertLevel(CaseInsensitiveStrEnum):
    """Severity of an alert raised by the alert engine."""

    INFO = "INFO"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class IssueSeverity(CaseInsensitiveStrEnum):
    """Severity of an issue found by the issue reporter."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ThresholdDirection(CaseInsensitiveStrEnum):
    """Which side of a threshold is bad."""

    ABOVE = "above"
    """The metric alerts when its value is greater than the threshold (latency, error rate)."""

    BELOW = "below"
    """The metric alerts when its value is less than the threshold (pass rate, throughput)."""


class AlertMetricInfo(BasePydanticEnumInfo):
    """Declaration of a metric the alert engine can evaluate."""

    label: str = Field(
        ..., description="Human readable name used at the start of alert messages."
    )
    direction: ThresholdDirection = Field(
        ..., description="Which side of the threshold raises an alert."
    )
    unit_suffix: str = Field(
        ...,
        description="Suffix appended to formatted values and thresholds (e.g. 'ms', '%', ' req/s').",
    )


class AlertMetric(BasePydanticBackedStrEnum):
    """The metrics evaluated by the alert engine, in evaluation order."""

    RESPONSE_TIME = AlertMetricInfo(
        tag="response_time",
        label="Average response time",
        direction=ThresholdDirection.ABOVE,
        unit_suffix="ms",
    )
    ERROR_RATE = AlertMetricInfo(
        tag="error_rate",
        label="Error rate",
        direction=ThresholdDirection.ABOVE,
        unit_suffix="%",
    )
    P95_RESPONSE_TIME = AlertMetricInfo(
        tag="p95_response_time",
        label="P95 response time",
        direction=ThresholdDirection.ABOVE,
        unit_suffix="ms",
    )
    CHECKS_PASS_RATE = AlertMetricInfo(
        tag="checks_pass_rate",
        label="Checks pass rate",
        direction=ThresholdDirection.BELOW,
        unit_suffix="%",
    )
    THROUGHPUT = AlertMetricInfo(
        tag="throughput",
        label="Throughput",
        direction=ThresholdDirection.BELOW,
        unit_suffix=" req/s",
    )

    @property
    def label(self) -> str:
        return self.info.label

    @property
    def direction(self) -> ThresholdDirection:
        return self.info.direction

    @property
    def unit_suffix(self) -> str:
        return self.info.unit_suffix
