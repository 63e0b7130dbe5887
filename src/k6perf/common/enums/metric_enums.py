# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.common.enums.base_enums import CaseInsensitiveStrEnum


class RecordType(CaseInsensitiveStrEnum):
    """The ``type`` field of a line in the k6 JSON output."""

    POINT = "Point"
    """A single timestamped observation of a metric. Only these are aggregated."""

    METRIC = "Metric"
    """The declaration of a metric (name, type, thresholds). Recognized but not aggregated."""


class MetricKind(CaseInsensitiveStrEnum):
    """The statistical kind of a metric, which decides how its points are aggregated."""

    COUNTER = "counter"
    """Accumulated by summation (e.g. ``http_reqs``, ``data_received``)."""

    GAUGE = "gauge"
    """Keeps the maximum and the most recent value (e.g. ``vus_max``)."""

    RATE = "rate"
    """Boolean outcomes aggregated as a pass percentage (e.g. ``checks``)."""

    TREND = "trend"
    """All values are retained and summarized as a distribution (e.g. ``http_req_duration``)."""
