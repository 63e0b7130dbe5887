# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from rich.console import Console, Group, RenderableType
from rich.table import Table

from k6perf.common.enums import AlertLevel
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import AlertReport

_LEVEL_STYLES = {
    AlertLevel.CRITICAL: "bold red",
    AlertLevel.WARNING: "yellow",
    AlertLevel.INFO: "cyan",
}


class ConsoleAlertsExporter(K6PerfLoggerMixin):
    """Renders an alert report on a rich console."""

    def __init__(self, report: AlertReport, **kwargs) -> None:
        super().__init__(**kwargs)
        self._report = report

    def export(self, console: Console) -> None:
        console.print("\n")
        console.print(self.get_renderable())
        console.file.flush()

    def get_renderable(self) -> RenderableType:
        counts = (
            f"Total: {self._report.total_alerts} | "
            f"[bold red]Critical: {self._report.critical_count}[/bold red] | "
            f"[yellow]Warning: {self._report.warning_count}[/yellow] | "
            f"[cyan]Info: {self._report.info_count}[/cyan]"
        )
        if not self._report.alerts:
            return Group(counts, "[green]All metrics within thresholds[/green]")

        table = Table(title="k6perf | Alerts")
        for header in ("Level", "Test", "Message", "Current", "Threshold"):
            table.add_column(header)
        for alert in self._report.alerts:
            style = _LEVEL_STYLES[alert.level]
            table.add_row(
                f"[{style}]{alert.level}[/{style}]",
                alert.test_name or "",
                alert.message,
                alert.current_value,
                alert.threshold,
            )
        return Group(counts, table)
