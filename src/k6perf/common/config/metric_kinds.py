# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from k6perf.common import metric_names
from k6perf.common.enums import MetricKind
from k6perf.common.models.base_models import K6PerfBaseModel

# Built-in k6 metrics that are not trends.
DEFAULT_METRIC_KINDS: dict[str, MetricKind] = {
    metric_names.HTTP_REQS: MetricKind.COUNTER,
    metric_names.ITERATIONS: MetricKind.COUNTER,
    metric_names.DATA_RECEIVED: MetricKind.COUNTER,
    metric_names.DATA_SENT: MetricKind.COUNTER,
    metric_names.VUS: MetricKind.GAUGE,
    metric_names.VUS_MAX: MetricKind.GAUGE,
    metric_names.HTTP_REQ_FAILED: MetricKind.RATE,
    metric_names.CHECKS: MetricKind.RATE,
}


class MetricKindTable(K6PerfBaseModel):
    """Classification of metric names into :class:`MetricKind`.

    Names missing from the table are trends, so custom metrics such as
    ``api_response_time`` are summarized as distributions unless listed here.

    Examples:
        >>> table = MetricKindTable(overrides={"total_errors": MetricKind.COUNTER})
        >>> table.kind_of("total_errors")
        <MetricKind.COUNTER: 'counter'>
        >>> table.kind_of("pet_endpoint_time")
        <MetricKind.TREND: 'trend'>
    """

    kinds: dict[str, MetricKind] = Field(
        default_factory=lambda: dict(DEFAULT_METRIC_KINDS),
        description="Known metric names and their kinds.",
    )
    overrides: dict[str, MetricKind] = Field(
        default_factory=dict,
        description="Extra or replacement entries, applied on top of 'kinds'.",
    )
    default_kind: MetricKind = Field(
        default=MetricKind.TREND, description="Kind of names found in neither mapping."
    )

    def kind_of(self, metric_name: str) -> MetricKind:
        if metric_name in self.overrides:
            return self.overrides[metric_name]
        return self.kinds.get(metric_name, self.default_kind)
