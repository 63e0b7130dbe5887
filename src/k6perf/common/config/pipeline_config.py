# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

from pydantic import Field, model_validator
from typing_extensions import Self

from k6perf.common.config.metric_kinds import MetricKindTable
from k6perf.common.config.threshold_config import AlertThresholdsConfig
from k6perf.common.constants import FALLBACK_DURATION_SECONDS, RESULT_FILE_SUFFIX
from k6perf.common.exceptions import ConfigurationError
from k6perf.common.models.base_models import K6PerfBaseModel


class PipelineConfig(K6PerfBaseModel):
    """Configuration of one report pipeline run."""

    results_dir: Path | None = Field(
        default=None,
        description="Directory scanned for '<run>-result.json' files.",
    )
    result_files: list[Path] = Field(
        default_factory=list,
        description="Explicit result files. Used instead of scanning results_dir when given.",
    )
    output_dir: Path | None = Field(
        default=None,
        description="Where reports are written. Defaults to results_dir.",
    )
    result_suffix: str = Field(
        default=RESULT_FILE_SUFFIX,
        min_length=1,
        description="File name suffix identifying result files; stripped to get the run name.",
    )
    fallback_duration_seconds: float = Field(
        default=FALLBACK_DURATION_SECONDS,
        gt=0,
        description="Duration used for the request rate when timestamps do not give one.",
    )
    thresholds: AlertThresholdsConfig = Field(default_factory=AlertThresholdsConfig)
    metric_kinds: MetricKindTable = Field(default_factory=MetricKindTable)

    @model_validator(mode="after")
    def validate_inputs(self) -> Self:
        if self.results_dir is None and not self.result_files:
            raise ConfigurationError(
                "Either a results directory or at least one result file is required"
            )
        return self

    @property
    def resolved_output_dir(self) -> Path:
        if self.output_dir is not None:
            return self.output_dir
        if self.results_dir is not None:
            return self.results_dir
        return self.result_files[0].parent
