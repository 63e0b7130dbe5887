# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from datetime import datetime, timezone

from pydantic import Field

from k6perf.common.enums import AlertLevel, AlertMetric
from k6perf.common.models.base_models import K6PerfBaseModel, K6PerfFrozenModel


class Alert(K6PerfFrozenModel):
    """A threshold crossing detected by the alert engine."""

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the alert was raised.",
    )
    level: AlertLevel = Field(..., description="The severity of the alert.")
    metric: AlertMetric = Field(..., description="The metric that crossed a threshold.")
    message: str = Field(..., description="Human readable description.")
    current_value: str = Field(..., description="The observed value, with unit.")
    threshold: str = Field(..., description="The crossed threshold, with unit.")
    test_name: str | None = Field(
        default=None, description="The run the alert belongs to, if any."
    )

    def __str__(self) -> str:
        test = f"[{self.test_name}] " if self.test_name else ""
        return (
            f"[{self.level}] {test}{self.message} "
            f"(Current: {self.current_value}, Threshold: {self.threshold})"
        )


class AlertReport(K6PerfBaseModel):
    """Counts by level plus every alert of one monitoring pass."""

    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    total_alerts: int = 0
    critical_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    alerts: list[Alert] = Field(default_factory=list)
