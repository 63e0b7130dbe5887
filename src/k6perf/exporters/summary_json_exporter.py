# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

from k6perf.common.constants import AGGREGATED_REPORT_FILE
from k6perf.common.models import SummaryExportData
from k6perf.exporters.base_json_exporter import BaseJsonExporter


class SummaryJsonExporter(BaseJsonExporter):
    """
    Writes ``aggregated-report.json``: the cross-run summary, the comparison table,
    the issues, the statistics of every run and the runs that failed to load.
    """

    export_type = "Aggregated Report"

    def __init__(
        self,
        output_dir: Path,
        export_data: SummaryExportData,
        file_name: str = AGGREGATED_REPORT_FILE,
        **kwargs,
    ) -> None:
        super().__init__(output_dir, file_name, **kwargs)
        self._export_data = export_data

    def _generate_content(self) -> str:
        return self._export_data.to_json(indent=2)
