# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for k6perf."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text.
################################################################################

from pathlib import Path

from cyclopts import App

from k6perf.cli_utils import exit_on_error
from k6perf.common.constants import EXIT_OK

app = App(name="k6perf", help="Aggregate k6 results, compare runs and raise alerts")


def _is_results_dir(path: Path) -> bool:
    """Whether a single ``aggregate`` argument names a results directory.

    A missing path without a file extension is treated as a directory. A missing
    '<run>-result.json' stays a result file and is reported as a failed run.
    """
    return path.is_dir() or (not path.exists() and not path.suffix)


@app.command(name="aggregate")
def aggregate(
    paths: list[Path] | None = None,
    output_dir: Path | None = None,
    thresholds: Path | None = None,
    log_level: str = "INFO",
    quiet: bool = False,
) -> None:
    """Aggregate k6 JSON result files into aggregated-report.json and alerts.json.

    Exits with 0 when every run loaded, 1 when some runs failed to load and 2 when
    no run could be loaded or the configuration is invalid.

    Args:
        paths: A results directory holding '<run>-result.json' files, or explicit
            result files. Defaults to ./results.
        output_dir: Where reports are written. Defaults to the results directory.
        thresholds: Optional YAML/JSON file overriding the alert thresholds.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        quiet: Do not print the summary and alert tables.
    """
    with exit_on_error(title="Error Aggregating Results"):
        from rich.console import Console

        from k6perf.common.config import PipelineConfig, load_thresholds_config
        from k6perf.common.constants import LOG_FILE
        from k6perf.common.logging import setup_logging
        from k6perf.exporters import ConsoleAlertsExporter, ConsoleSummaryExporter
        from k6perf.pipeline import ReportPipeline

        paths = paths or [Path("results")]
        if len(paths) == 1 and _is_results_dir(paths[0]):
            config = PipelineConfig(results_dir=paths[0], output_dir=output_dir)
        else:
            config = PipelineConfig(result_files=paths, output_dir=output_dir)
        if thresholds is not None:
            config.thresholds = load_thresholds_config(thresholds)

        pipeline = ReportPipeline(config)
        result_paths = pipeline.result_paths()

        setup_logging(log_level, config.resolved_output_dir / LOG_FILE)
        result = pipeline.run(result_paths)
        pipeline.export(result)

        if not quiet:
            console = Console()
            ConsoleSummaryExporter(result.to_export_data()).export(console)
            ConsoleAlertsExporter(result.alerts).export(console)

    raise SystemExit(result.exit_code)


@app.command(name="monitor")
def monitor(
    report: Path = Path("results/aggregated-report.json"),
    output_dir: Path | None = None,
    thresholds: Path | None = None,
    log_level: str = "INFO",
    quiet: bool = False,
) -> None:
    """Evaluate alert thresholds against a previously written aggregated report.

    Writes alerts.json next to the report. Exits with 0 when the report was
    evaluated and 2 when it could not be read.

    Args:
        report: Path of an aggregated-report.json.
        output_dir: Where alerts.json is written. Defaults to the report's directory.
        thresholds: Optional YAML/JSON file overriding the alert thresholds.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        quiet: Do not print the alert table.
    """
    with exit_on_error(title="Error Monitoring Results"):
        from rich.console import Console

        from k6perf.alerts import AlertEngine
        from k6perf.common.config import AlertThresholdsConfig, load_thresholds_config
        from k6perf.common.logging import setup_logging
        from k6perf.exporters import AlertsJsonExporter, ConsoleAlertsExporter
        from k6perf.loaders import load_summary_report

        setup_logging(log_level)
        threshold_config = (
            load_thresholds_config(thresholds)
            if thresholds is not None
            else AlertThresholdsConfig()
        )
        summary = load_summary_report(report)

        engine = AlertEngine(threshold_config)
        engine.monitor_runs(summary.raw_data)
        alert_report = engine.build_report()
        AlertsJsonExporter(output_dir or report.parent, alert_report).export()

        if not quiet:
            ConsoleAlertsExporter(alert_report).export(Console())

    raise SystemExit(EXIT_OK)
