# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

from k6perf.common.constants import ALERTS_REPORT_FILE
from k6perf.common.models import AlertReport
from k6perf.exporters.base_json_exporter import BaseJsonExporter


class AlertsJsonExporter(BaseJsonExporter):
    """Writes ``alerts.json``: alert counts by level plus every alert."""

    export_type = "Alerts Report"

    def __init__(
        self,
        output_dir: Path,
        report: AlertReport,
        file_name: str = ALERTS_REPORT_FILE,
        **kwargs,
    ) -> None:
        super().__init__(output_dir, file_name, **kwargs)
        self._report = report

    def _generate_content(self) -> str:
        self.debug(lambda: f"Exporting {self._report.total_alerts} alerts")
        return self._report.to_json(indent=2)
