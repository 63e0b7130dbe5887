# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import io

import pytest
from rich.console import Console

from k6perf.alerts import AlertEngine
from k6perf.common.models import AlertReport, SummaryExportData
from k6perf.comparison import RunComparator
from k6perf.issues import IssueReporter


@pytest.fixture
def sample_results(make_run_stats):
    return {
        "smoke": make_run_stats(avg=100.0),
        "checks": make_run_stats(avg=300.0, checks_pass_rate=75.0),
    }


@pytest.fixture
def sample_export_data(sample_results) -> SummaryExportData:
    comparator = RunComparator()
    return SummaryExportData(
        summary=comparator.aggregate(sample_results),
        comparison=comparator.compare(sample_results),
        issues=IssueReporter().identify_issues(sample_results),
        raw_data=sample_results,
    )


@pytest.fixture
def sample_alert_report(sample_results) -> AlertReport:
    engine = AlertEngine()
    engine.monitor_runs(sample_results)
    return engine.build_report()


@pytest.fixture
def capture_console() -> Console:
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)
