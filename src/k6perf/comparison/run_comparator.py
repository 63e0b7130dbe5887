# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Mapping

from k6perf.common.display_utils import format_millis, format_percent, format_rate
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import ComparisonRow, CrossRunAggregate, RunStats


class RunComparator(K6PerfLoggerMixin):
    """Builds the cross-run summary and the run comparison table.

    Runs are compared in the iteration order of the mapping they are given in,
    and every run weighs the same in the averages no matter how many requests it made.
    """

    def aggregate(self, results: Mapping[str, RunStats]) -> CrossRunAggregate | None:
        """Summarize several runs. Returns None when there are no runs."""
        if not results:
            self.debug("No runs to aggregate")
            return None

        runs = list(results.values())
        total_tests = len(runs)
        return CrossRunAggregate(
            total_tests=total_tests,
            total_requests=sum(run.total_requests for run in runs),
            total_failed_requests=sum(run.failed_requests for run in runs),
            avg_error_rate=sum(run.error_rate for run in runs) / total_tests,
            avg_response_time=sum(run.response_time.avg for run in runs) / total_tests,
            avg_checks_pass_rate=sum(run.checks_pass_rate for run in runs) / total_tests,
            max_vus=max(run.vus_max for run in runs),
            total_data_transferred=sum(run.data_transferred for run in runs),
            tests=dict(results),
        )

    def compare(self, results: Mapping[str, RunStats]) -> list[ComparisonRow]:
        """One display-formatted row per run, in input order."""
        return [
            ComparisonRow(
                test=name,
                requests=stats.total_requests,
                errors=stats.failed_requests,
                error_rate=format_percent(stats.error_rate),
                avg_response_time=format_millis(stats.response_time.avg),
                p95_response_time=format_millis(stats.response_time.p95),
                checks_pass_rate=format_percent(stats.checks_pass_rate),
                max_vus=stats.vus_max,
                throughput=format_rate(stats.request_rate),
            )
            for name, stats in results.items()
        ]
