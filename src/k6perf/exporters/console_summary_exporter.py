# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from rich.console import Console, Group, RenderableType
from rich.table import Table

from k6perf.common.display_utils import format_bytes, format_millis, format_percent
from k6perf.common.enums import IssueSeverity
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import SummaryExportData

_SEVERITY_STYLES = {
    IssueSeverity.HIGH: "bold red",
    IssueSeverity.MEDIUM: "yellow",
    IssueSeverity.LOW: "cyan",
}


class ConsoleSummaryExporter(K6PerfLoggerMixin):
    """Renders the aggregated report on a rich console."""

    COMPARISON_COLUMNS = [
        ("Test", "test"),
        ("Requests", "requests"),
        ("Errors", "errors"),
        ("Error Rate", "error_rate"),
        ("Avg Response", "avg_response_time"),
        ("P95 Response", "p95_response_time"),
        ("Checks", "checks_pass_rate"),
        ("Max VUs", "max_vus"),
        ("Throughput", "throughput"),
    ]

    def __init__(self, export_data: SummaryExportData, **kwargs) -> None:
        super().__init__(**kwargs)
        self._export_data = export_data

    def export(self, console: Console) -> None:
        console.print("\n")
        console.print(self.get_renderable())
        console.file.flush()

    def get_renderable(self) -> RenderableType:
        renderables: list[RenderableType] = []
        if self._export_data.summary is None:
            renderables.append("[yellow]No test results to summarize[/yellow]")
        else:
            renderables.append(self._summary_table())
            renderables.append(self._comparison_table())
        if self._export_data.issues:
            renderables.append(self._issues_table())
        else:
            renderables.append("[green]No issues identified[/green]")
        if self._export_data.failures:
            renderables.append(self._failures_table())
        return Group(*renderables)

    def _summary_table(self) -> Table:
        summary = self._export_data.summary
        table = Table(title="k6perf | Summary", show_header=False)
        table.add_column("Metric", justify="right", style="cyan")
        table.add_column("Value", justify="right", style="green")
        table.add_row("Total Tests", str(summary.total_tests))
        table.add_row("Total Requests", f"{summary.total_requests:,}")
        table.add_row("Failed Requests", f"{summary.total_failed_requests:,}")
        table.add_row("Avg Error Rate", format_percent(summary.avg_error_rate))
        table.add_row("Avg Response Time", format_millis(summary.avg_response_time))
        table.add_row("Avg Checks Pass Rate", format_percent(summary.avg_checks_pass_rate))
        table.add_row("Max VUs", str(summary.max_vus))
        table.add_row("Data Transferred", format_bytes(summary.total_data_transferred))
        return table

    def _comparison_table(self) -> Table:
        table = Table(title="k6perf | Test Comparison")
        for header, _ in self.COMPARISON_COLUMNS:
            table.add_column(header, justify="right", style="green")
        for row in self._export_data.comparison:
            table.add_row(*(str(getattr(row, field)) for _, field in self.COMPARISON_COLUMNS))
        return table

    def _issues_table(self) -> Table:
        table = Table(title="k6perf | Issues")
        for header in ("Severity", "Test", "Issue", "Value", "Threshold"):
            table.add_column(header)
        for issue in self._export_data.issues:
            style = _SEVERITY_STYLES.get(issue.severity, "")
            table.add_row(
                f"[{style}]{issue.severity}[/{style}]" if style else str(issue.severity),
                issue.test,
                issue.issue,
                issue.value,
                issue.threshold,
            )
        return table

    def _failures_table(self) -> Table:
        table = Table(title="k6perf | Failed Runs", style="red")
        for header in ("Test", "Error", "Message"):
            table.add_column(header)
        for failure in self._export_data.failures:
            table.add_row(failure.test, failure.error_type, failure.message)
        return table
