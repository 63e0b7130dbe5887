# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from k6perf.common.config.threshold_config import AlertThresholdsConfig
from k6perf.common.exceptions import ConfigurationError
from k6perf.common.k6perf_logger import K6PerfLogger

_logger = K6PerfLogger(__name__)
_yaml = YAML(typ="safe")


def load_thresholds_config(path: Path) -> AlertThresholdsConfig:
    """Load alert thresholds from a YAML (or JSON) file.

    Only the metrics present in the file are overridden; the others keep their
    defaults. Keys may be snake_case or camelCase::

        response_time:
          warning: 300
          critical: 800
        checksPassRate: {warning: 95, critical: 90}

    Raises:
        ConfigurationError: If the file cannot be read, is not a mapping, or holds
            invalid thresholds.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read thresholds file {path}: {e}") from e

    try:
        data = _yaml.load(content)
    except YAMLError as e:
        raise ConfigurationError(f"Cannot parse thresholds file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Thresholds file {path} must contain a mapping, got {type(data).__name__}"
        )

    try:
        config = AlertThresholdsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid thresholds in {path}: {e}") from e

    _logger.debug(lambda: f"Loaded thresholds from {path}: {config}")
    return config
