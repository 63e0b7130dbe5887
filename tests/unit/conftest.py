# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for the k6perf unit tests.

This file contains fixtures that are automatically discovered by pytest
and made available to test functions in the same directory and subdirectories.
"""

from collections.abc import Callable
from pathlib import Path

import orjson
import pytest

from k6perf.common.models import ResponseTimeStats, RunStats

DEFAULT_TIME = "2024-01-01T00:00:00Z"


def point_line(
    metric: str,
    value: float,
    time: str | int | None = DEFAULT_TIME,
    tags: dict[str, str] | None = None,
) -> str:
    """One line of k6 JSON output holding a Point record."""
    data: dict = {"value": value}
    if time is not None:
        data["time"] = time
    if tags is not None:
        data["tags"] = tags
    return orjson.dumps({"type": "Point", "metric": metric, "data": data}).decode()


def metric_line(metric: str, kind: str = "counter") -> str:
    """One line of k6 JSON output declaring a metric."""
    return orjson.dumps(
        {
            "type": "Metric",
            "metric": metric,
            "data": {"name": metric, "type": kind, "contains": "default"},
        }
    ).decode()


@pytest.fixture
def make_point_line() -> Callable[..., str]:
    return point_line


@pytest.fixture
def make_metric_line() -> Callable[..., str]:
    return metric_line


@pytest.fixture
def sample_run_lines() -> list[str]:
    """A small but complete k6 run: 10 requests over 10 seconds, one failed, 3/4 checks passed."""
    lines = [metric_line("http_reqs"), metric_line("http_req_duration", "trend")]
    for i in range(10):
        time = f"2024-01-01T00:00:{i:02d}.500Z" if i < 9 else "2024-01-01T00:00:10.500Z"
        lines.append(point_line("http_reqs", 1, time))
        lines.append(point_line("http_req_duration", (i + 1) * 10, time))
        lines.append(point_line("http_req_failed", 1 if i == 0 else 0, time))
        lines.append(point_line("data_received", 100, time))
    lines.append(point_line("vus", 3, time=None))
    lines.append(point_line("vus_max", 5, time=None))
    lines.append(point_line("vus_max", 10, time=None))
    for passed in (1, 1, 1, 0):
        lines.append(point_line("checks", passed, time=None))
    return lines


@pytest.fixture
def write_result_file(tmp_path: Path) -> Callable[[str, list[str]], Path]:
    """Write '<name>-result.json' into tmp_path with the given lines."""

    def _write(name: str, lines: list[str]) -> Path:
        path = tmp_path / f"{name}-result.json"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_run_stats() -> Callable[..., RunStats]:
    """Build RunStats for a healthy run, with any field overridden."""

    def _make(avg: float = 100.0, p95: float = 200.0, **overrides) -> RunStats:
        fields = {
            "duration": 60.0,
            "total_requests": 1200,
            "failed_requests": 0,
            "request_rate": 20.0,
            "response_time": ResponseTimeStats(
                min=10.0, avg=avg, med=avg, p90=p95, p95=p95, p99=p95, max=p95
            ),
            "error_rate": 0.0,
            "checks_pass_rate": 100.0,
            "vus_max": 10,
            "data_transferred": 1024.0,
        }
        fields.update(overrides)
        return RunStats(**fields)

    return _make
