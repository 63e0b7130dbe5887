# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Models for the lines of the k6 JSON output.

k6 writes one JSON object per line. Two record types occur::

    {"type":"Metric","data":{"name":"http_reqs","type":"counter","contains":"default",...},"metric":"http_reqs"}
    {"type":"Point","data":{"time":"2024-01-01T00:00:00.123456789Z","value":1,"tags":{"status":"200"}},"metric":"http_reqs"}
"""

from typing import Any

from pydantic import Field, field_validator

from k6perf.common.models.base_models import K6PerfBaseModel, K6PerfFrozenModel


class K6Record(K6PerfBaseModel):
    """A decoded line of the k6 JSON output, before it is interpreted."""

    type: str = Field(..., description="The record type, e.g. 'Point' or 'Metric'.")
    metric: str | None = Field(
        default=None, description="The name of the metric the record refers to."
    )
    data: dict[str, Any] | None = Field(
        default=None, description="The record payload. Its layout depends on the type."
    )


class PointData(K6PerfBaseModel):
    """The ``data`` payload of a ``Point`` record."""

    value: float = Field(..., description="The observed value.")
    time: str | int | float | None = Field(
        default=None,
        description="Observation time as an ISO-8601 string or epoch milliseconds.",
    )
    tags: dict[str, str] | None = Field(
        default=None, description="The tags attached to the observation."
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _stringify_tags(cls, value: Any) -> Any:
        # k6 tag values are strings, but custom tags may carry numbers or null.
        if isinstance(value, dict):
            return {
                str(key): "" if tag is None else str(tag) for key, tag in value.items()
            }
        return value


class MetricPoint(K6PerfFrozenModel):
    """One timestamped numeric observation for a named metric."""

    name: str = Field(..., min_length=1, description="The metric name.")
    value: float = Field(..., description="The observed value.")
    timestamp_millis: int | None = Field(
        default=None,
        description="Observation time in epoch milliseconds, or None if the record had no usable time.",
    )
    tags: dict[str, str] = Field(
        default_factory=dict, description="The tags attached to the observation."
    )
