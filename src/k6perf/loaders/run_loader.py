# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Iterable
from pathlib import Path

from k6perf.common.config import MetricKindTable
from k6perf.common.constants import FALLBACK_DURATION_SECONDS, RESULT_FILE_SUFFIX
from k6perf.common.exceptions import SourceUnavailableError
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import RunStats
from k6perf.metrics import MetricAggregator
from k6perf.parsing import PointStreamParser


class RunLoader(K6PerfLoggerMixin):
    """
    Loads k6 result files and aggregates each of them into :class:`RunStats`.

    A results directory holds one ``<run name>-result.json`` file per run, as
    written by ``k6 run --out json=<run name>-result.json``.

    Examples:
        >>> loader = RunLoader()
        >>> for path in loader.discover(Path("results")):
        ...     stats = loader.load_run(path)
    """

    def __init__(
        self,
        metric_kinds: MetricKindTable | None = None,
        result_suffix: str = RESULT_FILE_SUFFIX,
        fallback_duration_seconds: float = FALLBACK_DURATION_SECONDS,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.metric_kinds = metric_kinds or MetricKindTable()
        self.result_suffix = result_suffix
        self.fallback_duration_seconds = fallback_duration_seconds

    def run_name(self, path: Path) -> str:
        """The run name of a result file: its file name without the result suffix."""
        name = path.name
        if name.endswith(self.result_suffix) and len(name) > len(self.result_suffix):
            return name[: -len(self.result_suffix)]
        return path.stem

    def discover(self, results_dir: Path) -> list[Path]:
        """
        Find the result files of a directory, sorted by file name.

        Raises:
            SourceUnavailableError: If the directory does not exist.
        """
        if not results_dir.is_dir():
            raise SourceUnavailableError("Results directory not found", path=results_dir)

        paths = sorted(
            path
            for path in results_dir.iterdir()
            if path.is_file() and path.name.endswith(self.result_suffix)
        )
        self.info(f"Found {len(paths)} result files in {results_dir}")
        return paths

    def load_run(self, path: Path) -> RunStats:
        """
        Parse and aggregate one result file.

        Args:
            path: Path of a k6 JSON output file.

        Returns:
            The statistics of the run. Undecodable lines are counted in
            ``skipped_lines``.

        Raises:
            SourceUnavailableError: If the file does not exist or cannot be read.
        """
        if not path.is_file():
            raise SourceUnavailableError("Result file not found", path=path)

        self.info(f"Loading run '{self.run_name(path)}' from {path}")
        try:
            with open(path, encoding="utf-8") as f:
                return self.aggregate_lines(f, source_name=str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(
                f"Failed to read result file ({e})", path=path
            ) from e

    def aggregate_lines(
        self, lines: Iterable[str], source_name: str = "<stream>"
    ) -> RunStats:
        """Aggregate the lines of one run's point stream."""
        parser = PointStreamParser(source_name=source_name)
        aggregator = MetricAggregator(
            metric_kinds=self.metric_kinds,
            fallback_duration_seconds=self.fallback_duration_seconds,
        )
        aggregator.add_points(parser.iter_points(lines))
        stats = aggregator.finalize()

        if parser.stats.skipped_lines:
            self.warning(
                f"Skipped {parser.stats.skipped_lines} undecodable lines in {source_name}"
            )
        self.debug(
            lambda: f"Parsed {parser.stats.points} points and "
            f"{parser.stats.excluded_records} other records from {source_name}"
        )
        return stats.model_copy(update={"skipped_lines": parser.stats.skipped_lines})
