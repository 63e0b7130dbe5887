# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""End-to-end batch: load every run, compare them, flag issues and raise alerts."""

from pathlib import Path

from pydantic import Field

from k6perf.alerts import AlertEngine
from k6perf.common.config import PipelineConfig
from k6perf.common.constants import EXIT_FATAL_ERROR, EXIT_OK, EXIT_RUN_FAILURE
from k6perf.common.exceptions import SourceUnavailableError
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import (
    AlertReport,
    ComparisonRow,
    CrossRunAggregate,
    Issue,
    K6PerfBaseModel,
    RunFailure,
    RunStats,
    SummaryExportData,
)
from k6perf.comparison import RunComparator
from k6perf.exporters import AlertsJsonExporter, FileExportInfo, SummaryJsonExporter
from k6perf.issues import IssueReporter
from k6perf.loaders import RunLoader


def exit_code_for(loaded_runs: int, failed_runs: int) -> int:
    """0 when every run loaded, 1 when some failed, 2 when none could be loaded."""
    if loaded_runs == 0:
        return EXIT_FATAL_ERROR
    if failed_runs > 0:
        return EXIT_RUN_FAILURE
    return EXIT_OK


class PipelineResult(K6PerfBaseModel):
    """Everything produced by one pipeline run."""

    summary: CrossRunAggregate | None = Field(
        default=None, description="The cross-run summary, None when no run loaded."
    )
    comparison: list[ComparisonRow] = Field(default_factory=list)
    issues: list[Issue] = Field(default_factory=list)
    raw_data: dict[str, RunStats] = Field(
        default_factory=dict, description="The statistics of every loaded run."
    )
    failures: list[RunFailure] = Field(
        default_factory=list, description="The runs that could not be loaded."
    )
    alerts: AlertReport = Field(default_factory=AlertReport)
    exit_code: int = Field(default=EXIT_OK, description="The process exit status.")

    def to_export_data(self) -> SummaryExportData:
        return SummaryExportData(
            summary=self.summary,
            comparison=self.comparison,
            issues=self.issues,
            raw_data=self.raw_data,
            failures=self.failures,
        )


class ReportPipeline(K6PerfLoggerMixin):
    """
    Runs the whole report batch for a :class:`PipelineConfig`.

    A run whose file cannot be read is recorded as a :class:`RunFailure` and left
    out of the summary; the other runs are still processed.

    Examples:
        >>> pipeline = ReportPipeline(PipelineConfig(results_dir=Path("results")))
        >>> result = pipeline.run()
        >>> pipeline.export(result)
    """

    def __init__(self, config: PipelineConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.loader = RunLoader(
            metric_kinds=config.metric_kinds,
            result_suffix=config.result_suffix,
            fallback_duration_seconds=config.fallback_duration_seconds,
        )
        self.comparator = RunComparator()
        self.issue_reporter = IssueReporter()
        self.alert_engine = AlertEngine(config.thresholds)

    def result_paths(self) -> list[Path]:
        """
        The result files to load: the explicit ones, or those found in the results directory.

        Raises:
            SourceUnavailableError: If the results directory does not exist.
        """
        if self.config.result_files:
            return list(self.config.result_files)
        return self.loader.discover(self.config.results_dir)

    def load_runs(
        self, paths: list[Path] | None = None
    ) -> tuple[dict[str, RunStats], list[RunFailure]]:
        """Load the given result files, or those of :meth:`result_paths`."""
        results: dict[str, RunStats] = {}
        failures: list[RunFailure] = []

        for path in paths if paths is not None else self.result_paths():
            test_name = self.loader.run_name(path)
            try:
                stats = self.loader.load_run(path)
            except SourceUnavailableError as e:
                self.error(f"Failed to load run '{test_name}': {e}")
                failures.append(
                    RunFailure(
                        test=test_name,
                        path=str(path),
                        error_type=e.__class__.__name__,
                        message=str(e),
                    )
                )
                continue

            if test_name in results:
                self.warning(f"Duplicate run name '{test_name}', keeping {path}")
            results[test_name] = stats

        return results, failures

    def run(self, paths: list[Path] | None = None) -> PipelineResult:
        results, failures = self.load_runs(paths)
        exit_code = exit_code_for(len(results), len(failures))
        if not results:
            self.warning("No test results could be loaded")

        self.alert_engine.monitor_runs(results)
        result = PipelineResult(
            summary=self.comparator.aggregate(results),
            comparison=self.comparator.compare(results),
            issues=self.issue_reporter.identify_issues(results),
            raw_data=results,
            failures=failures,
            alerts=self.alert_engine.build_report(),
            exit_code=exit_code,
        )
        self.info(
            f"Processed {len(results)} runs ({len(failures)} failed): "
            f"{len(result.issues)} issues, {result.alerts.total_alerts} alerts"
        )
        return result

    def export(self, result: PipelineResult) -> list[FileExportInfo]:
        """Write ``aggregated-report.json`` and ``alerts.json`` into the output directory."""
        output_dir = self.config.resolved_output_dir
        exporters = [
            SummaryJsonExporter(output_dir, result.to_export_data()),
            AlertsJsonExporter(output_dir, result.alerts),
        ]
        return [exporter.export() for exporter in exporters]
