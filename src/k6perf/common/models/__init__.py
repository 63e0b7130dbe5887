# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.common.models.alert_models import Alert, AlertReport
from k6perf.common.models.base_models import K6PerfBaseModel, K6PerfFrozenModel
from k6perf.common.models.comparison_models import ComparisonRow, CrossRunAggregate
from k6perf.common.models.export_models import SummaryExportData
from k6perf.common.models.issue_models import Issue
from k6perf.common.models.point_models import K6Record, MetricPoint, PointData
from k6perf.common.models.run_models import (
    MetricSummary,
    ResponseTimeStats,
    RunFailure,
    RunStats,
    TrendStats,
)

__all__ = [
    "Alert",
    "AlertReport",
    "ComparisonRow",
    "CrossRunAggregate",
    "Issue",
    "K6PerfBaseModel",
    "K6PerfFrozenModel",
    "K6Record",
    "MetricPoint",
    "MetricSummary",
    "PointData",
    "ResponseTimeStats",
    "RunFailure",
    "RunStats",
    "SummaryExportData",
    "TrendStats",
]
