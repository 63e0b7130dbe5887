# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Per-run result models."""

from pydantic import Field

from k6perf.common.enums import MetricKind
from k6perf.common.models.base_models import K6PerfBaseModel


class TrendStats(K6PerfBaseModel):
    """Nearest-rank summary of a trend metric. All fields are 0 when there were no samples."""

    min: float = Field(default=0.0, description="The smallest observed value.")
    avg: float = Field(default=0.0, description="The arithmetic mean.")
    med: float = Field(default=0.0, description="The value at index floor(n/2).")
    p90: float = Field(default=0.0, description="The value at index floor(n*0.90).")
    p95: float = Field(default=0.0, description="The value at index floor(n*0.95).")
    p99: float = Field(default=0.0, description="The value at index floor(n*0.99).")
    max: float = Field(default=0.0, description="The largest observed value.")


class ResponseTimeStats(TrendStats):
    """Trend statistics of ``http_req_duration``, in milliseconds."""


class MetricSummary(K6PerfBaseModel):
    """Summary of one metric of a run. Which fields are set depends on ``kind``."""

    kind: MetricKind = Field(..., description="How the metric was aggregated.")
    count: int = Field(default=0, description="The number of points observed.")
    sum: float | None = Field(default=None, description="Counter: the sum of all values.")
    last: float | None = Field(
        default=None, description="Gauge: the most recently observed value."
    )
    max: float | None = Field(default=None, description="Gauge: the largest value.")
    passes: int | None = Field(
        default=None, description="Rate: the number of points equal to 1."
    )
    fails: int | None = Field(
        default=None, description="Rate: the number of points not equal to 1."
    )
    rate: float | None = Field(
        default=None,
        description="Rate: passes / (passes + fails) * 100, or 100 when there were no points.",
    )
    trend: TrendStats | None = Field(
        default=None, description="Trend: the distribution statistics."
    )


class RunStats(K6PerfBaseModel):
    """Aggregated statistics of a single run."""

    duration: float = Field(
        default=0.0,
        description="Seconds between the first and last point timestamp, 0 if unknown.",
    )
    total_requests: int = Field(default=0, description="Sum of the http_reqs counter.")
    failed_requests: int = Field(
        default=0, description="Number of http_req_failed points equal to 1."
    )
    request_rate: float = Field(
        default=0.0,
        description="Requests per second. Falls back to total_requests / 60 when the duration is unknown.",
    )
    response_time: ResponseTimeStats = Field(
        default_factory=ResponseTimeStats,
        description="Statistics of http_req_duration in milliseconds.",
    )
    error_rate: float = Field(
        default=0.0,
        description="100 * failed_requests / total_requests, or 0 when there were no requests.",
    )
    checks_pass_rate: float = Field(
        default=100.0,
        description="Percentage of passing checks, 100 when no checks ran.",
    )
    vus_max: int = Field(default=0, description="Peak number of virtual users.")
    data_transferred: float = Field(
        default=0.0, description="Sum of the data_received counter, in bytes."
    )
    skipped_lines: int = Field(
        default=0, description="Number of input lines that could not be decoded."
    )
    metrics: dict[str, MetricSummary] = Field(
        default_factory=dict,
        description="Summary of every metric observed in the run, keyed by metric name.",
    )


class RunFailure(K6PerfBaseModel):
    """A run whose input could not be processed."""

    test: str = Field(..., description="The name of the run.")
    path: str | None = Field(default=None, description="The input that failed.")
    error_type: str = Field(..., description="The exception class name.")
    message: str = Field(..., description="The explanatory error message.")
