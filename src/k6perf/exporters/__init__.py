# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.exporters.alerts_json_exporter import AlertsJsonExporter
from k6perf.exporters.base_json_exporter import BaseJsonExporter
from k6perf.exporters.console_alerts_exporter import ConsoleAlertsExporter
from k6perf.exporters.console_summary_exporter import ConsoleSummaryExporter
from k6perf.exporters.exporter_config import FileExportInfo
from k6perf.exporters.summary_json_exporter import SummaryJsonExporter

__all__ = [
    "AlertsJsonExporter",
    "BaseJsonExporter",
    "ConsoleAlertsExporter",
    "ConsoleSummaryExporter",
    "FileExportInfo",
    "SummaryJsonExporter",
]
