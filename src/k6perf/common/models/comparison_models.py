# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from k6perf.common.models.base_models import K6PerfBaseModel
from k6perf.common.models.run_models import RunStats


class CrossRunAggregate(K6PerfBaseModel):
    """Summary across several runs.

    The averages are unweighted: every run contributes equally, regardless of how
    many requests it made.
    """

    total_tests: int = Field(..., description="Number of runs aggregated.")
    total_requests: int = Field(default=0, description="Sum of requests over all runs.")
    total_failed_requests: int = Field(
        default=0, description="Sum of failed requests over all runs."
    )
    avg_error_rate: float = Field(
        default=0.0, description="Mean of the per-run error rates."
    )
    avg_response_time: float = Field(
        default=0.0, description="Mean of the per-run average response times."
    )
    avg_checks_pass_rate: float = Field(
        default=0.0, description="Mean of the per-run checks pass rates."
    )
    max_vus: int = Field(default=0, description="Largest per-run peak of virtual users.")
    total_data_transferred: float = Field(
        default=0.0, description="Sum of bytes received over all runs."
    )
    tests: dict[str, RunStats] = Field(
        default_factory=dict, description="The per-run statistics, in discovery order."
    )


class ComparisonRow(K6PerfBaseModel):
    """One row of the run comparison table, with display-formatted values."""

    test: str
    requests: int
    errors: int
    error_rate: str
    avg_response_time: str
    p95_response_time: str
    checks_pass_rate: str
    max_vus: int = Field(..., alias="maxVUs")
    throughput: str
