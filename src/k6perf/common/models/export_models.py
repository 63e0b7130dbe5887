# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from datetime import datetime, timezone

from pydantic import Field

from k6perf.common.models.base_models import K6PerfBaseModel
from k6perf.common.models.comparison_models import ComparisonRow, CrossRunAggregate
from k6perf.common.models.issue_models import Issue
from k6perf.common.models.run_models import RunFailure, RunStats


class SummaryExportData(K6PerfBaseModel):
    """Layout of ``aggregated-report.json``."""

    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    summary: CrossRunAggregate | None = None
    comparison: list[ComparisonRow] = Field(default_factory=list)
    issues: list[Issue] = Field(default_factory=list)
    raw_data: dict[str, RunStats] = Field(default_factory=dict)
    failures: list[RunFailure] = Field(default_factory=list)
