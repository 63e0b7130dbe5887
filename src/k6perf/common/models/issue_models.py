# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from k6perf.common.enums import IssueSeverity
from k6perf.common.models.base_models import K6PerfFrozenModel


class Issue(K6PerfFrozenModel):
    """A quality problem found by the issue reporter."""

    severity: IssueSeverity
    test: str = Field(..., description="The run the issue was found in.")
    issue: str = Field(..., description="The issue label, e.g. 'High Error Rate'.")
    value: str = Field(..., description="The observed value, with unit.")
    threshold: str = Field(..., description="The rule's threshold, with unit.")
