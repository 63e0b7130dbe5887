# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from k6perf.common.display_utils import (
    MILLIS_SUFFIX,
    PERCENT_SUFFIX,
    RATE_SUFFIX,
    format_threshold,
    format_value,
)
from k6perf.common.enums import IssueSeverity, ThresholdDirection
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import Issue, RunStats


@dataclass(frozen=True, slots=True)
class IssueRule:
    """A fixed quality rule. A run violates it when its value crosses the threshold."""

    issue: str
    severity: IssueSeverity
    value_of: Callable[[RunStats], float]
    threshold: float
    direction: ThresholdDirection
    unit_suffix: str

    def is_violated_by(self, stats: RunStats) -> bool:
        value = self.value_of(stats)
        if self.direction == ThresholdDirection.BELOW:
            return value < self.threshold
        return value > self.threshold

    def to_issue(self, test_name: str, stats: RunStats) -> Issue:
        return Issue(
            severity=self.severity,
            test=test_name,
            issue=self.issue,
            value=format_value(self.value_of(stats), self.unit_suffix),
            threshold=format_threshold(self.threshold, self.unit_suffix),
        )


DEFAULT_ISSUE_RULES: tuple[IssueRule, ...] = (
    IssueRule(
        issue="High Error Rate",
        severity=IssueSeverity.HIGH,
        value_of=lambda stats: stats.error_rate,
        threshold=5,
        direction=ThresholdDirection.ABOVE,
        unit_suffix=PERCENT_SUFFIX,
    ),
    IssueRule(
        issue="Slow Average Response Time",
        severity=IssueSeverity.MEDIUM,
        value_of=lambda stats: stats.response_time.avg,
        threshold=1000,
        direction=ThresholdDirection.ABOVE,
        unit_suffix=MILLIS_SUFFIX,
    ),
    IssueRule(
        issue="Slow P95 Response Time",
        severity=IssueSeverity.MEDIUM,
        value_of=lambda stats: stats.response_time.p95,
        threshold=2000,
        direction=ThresholdDirection.ABOVE,
        unit_suffix=MILLIS_SUFFIX,
    ),
    IssueRule(
        issue="Low Checks Pass Rate",
        severity=IssueSeverity.HIGH,
        value_of=lambda stats: stats.checks_pass_rate,
        threshold=90,
        direction=ThresholdDirection.BELOW,
        unit_suffix=PERCENT_SUFFIX,
    ),
    IssueRule(
        issue="Low Throughput",
        severity=IssueSeverity.LOW,
        value_of=lambda stats: stats.request_rate,
        threshold=10,
        direction=ThresholdDirection.BELOW,
        unit_suffix=RATE_SUFFIX,
    ),
)


class IssueReporter(K6PerfLoggerMixin):
    """Flags quality problems in finished runs using a fixed set of rules.

    Its thresholds are independent of the alert engine's. Issues are grouped by run
    in the iteration order of the results, then ordered by rule.
    """

    def __init__(self, rules: Sequence[IssueRule] = DEFAULT_ISSUE_RULES, **kwargs) -> None:
        super().__init__(**kwargs)
        self.rules = tuple(rules)

    def identify_issues(self, results: Mapping[str, RunStats]) -> list[Issue]:
        issues = [
            rule.to_issue(test_name, stats)
            for test_name, stats in results.items()
            for rule in self.rules
            if rule.is_violated_by(stats)
        ]
        self.debug(lambda: f"Found {len(issues)} issues in {len(results)} runs")
        return issues
