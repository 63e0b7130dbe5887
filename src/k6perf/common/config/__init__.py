# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.common.config.config_loader import load_thresholds_config
from k6perf.common.config.metric_kinds import DEFAULT_METRIC_KINDS, MetricKindTable
from k6perf.common.config.pipeline_config import PipelineConfig
from k6perf.common.config.threshold_config import AlertThresholdsConfig, ThresholdPair

__all__ = [
    "DEFAULT_METRIC_KINDS",
    "AlertThresholdsConfig",
    "MetricKindTable",
    "PipelineConfig",
    "ThresholdPair",
    "load_thresholds_config",
]
