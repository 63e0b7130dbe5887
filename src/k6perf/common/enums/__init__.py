# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.common.enums.alert_enums import (
    AlertLevel,
    AlertMetric,
    AlertMetricInfo,
    IssueSeverity,
    ThresholdDirection,
)
from k6perf.common.enums.base_enums import (
    BasePydanticBackedStrEnum,
    BasePydanticEnumInfo,
    CaseInsensitiveStrEnum,
)
from k6perf.common.enums.metric_enums import MetricKind, RecordType

__all__ = [
    "AlertLevel",
    "AlertMetric",
    "AlertMetricInfo",
    "BasePydanticBackedStrEnum",
    "BasePydanticEnumInfo",
    "CaseInsensitiveStrEnum",
    "IssueSeverity",
    "MetricKind",
    "RecordType",
    "ThresholdDirection",
]
