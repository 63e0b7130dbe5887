# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import orjson
from pydantic import ValidationError

from k6perf.common.exceptions import SourceUnavailableError
from k6perf.common.k6perf_logger import K6PerfLogger
from k6perf.common.models import SummaryExportData

_logger = K6PerfLogger(__name__)


def load_summary_report(path: Path) -> SummaryExportData:
    """
    Read an ``aggregated-report.json`` written by a previous ``aggregate`` run.

    Raises:
        SourceUnavailableError: If the file is missing, unreadable or not a report.
    """
    if not path.is_file():
        raise SourceUnavailableError("Aggregated report not found", path=path)

    try:
        data = orjson.loads(path.read_bytes())
    except OSError as e:
        raise SourceUnavailableError(f"Failed to read report ({e})", path=path) from e
    except orjson.JSONDecodeError as e:
        raise SourceUnavailableError(f"Invalid JSON in report ({e})", path=path) from e

    try:
        report = SummaryExportData.model_validate(data)
    except ValidationError as e:
        raise SourceUnavailableError(f"Invalid report layout ({e})", path=path) from e

    _logger.debug(lambda: f"Loaded {len(report.raw_data)} runs from {path}")
    return report
