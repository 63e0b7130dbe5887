# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Iterable, Iterator

from k6perf.common.config import MetricKindTable
from k6perf.common.constants import FALLBACK_DURATION_SECONDS, MILLIS_PER_SECOND
from k6perf.common.exceptions import InvalidStateError
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import MetricPoint, ResponseTimeStats, RunStats
from k6perf.common import metric_names
from k6perf.metrics.accumulators import (
    ACCUMULATOR_TYPES,
    BaseMetricAccumulator,
    CounterAccumulator,
    GaugeAccumulator,
    RateAccumulator,
    TrendAccumulator,
)


class MetricSeries:
    """The accumulators of one run, keyed by metric name, plus the observed time span."""

    def __init__(self) -> None:
        self._accumulators: dict[str, BaseMetricAccumulator] = {}
        self.first_timestamp_millis: int | None = None
        self.last_timestamp_millis: int | None = None

    def __contains__(self, name: str) -> bool:
        return name in self._accumulators

    def __iter__(self) -> Iterator[str]:
        return iter(self._accumulators)

    def __len__(self) -> int:
        return len(self._accumulators)

    def get(self, name: str) -> BaseMetricAccumulator | None:
        return self._accumulators.get(name)

    def get_or_create(
        self, name: str, accumulator_type: type[BaseMetricAccumulator]
    ) -> BaseMetricAccumulator:
        if name not in self._accumulators:
            self._accumulators[name] = accumulator_type(name)
        return self._accumulators[name]

    def observe_timestamp(self, timestamp_millis: int) -> None:
        first, last = self.first_timestamp_millis, self.last_timestamp_millis
        if first is None or timestamp_millis < first:
            self.first_timestamp_millis = timestamp_millis
        if last is None or timestamp_millis > last:
            self.last_timestamp_millis = timestamp_millis

    @property
    def duration_seconds(self) -> float:
        """Seconds between the earliest and latest timestamp, 0 when unknown."""
        if self.first_timestamp_millis is None or self.last_timestamp_millis is None:
            return 0.0
        return (self.last_timestamp_millis - self.first_timestamp_millis) / MILLIS_PER_SECOND


class MetricAggregator(K6PerfLoggerMixin):
    """Aggregates the points of a single run into :class:`RunStats`.

    Every point is routed by metric name to an accumulator of the kind given by
    the :class:`MetricKindTable`. Once :meth:`finalize` has been called the result
    is cached and further points are rejected.

    Examples:
        >>> aggregator = MetricAggregator()
        >>> aggregator.add_point(MetricPoint(name="http_reqs", value=1))
        >>> aggregator.finalize().total_requests
        1
    """

    def __init__(
        self,
        metric_kinds: MetricKindTable | None = None,
        fallback_duration_seconds: float = FALLBACK_DURATION_SECONDS,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.metric_kinds = metric_kinds or MetricKindTable()
        self.fallback_duration_seconds = fallback_duration_seconds
        self.series = MetricSeries()
        self._run_stats: RunStats | None = None

    @property
    def is_finalized(self) -> bool:
        return self._run_stats is not None

    def add_point(self, point: MetricPoint) -> None:
        if self.is_finalized:
            raise InvalidStateError(
                f"Cannot add point for '{point.name}': the aggregator is finalized"
            )

        kind = self.metric_kinds.kind_of(point.name)
        accumulator_type = ACCUMULATOR_TYPES.get(kind)
        if accumulator_type is None:
            self.debug(
                lambda: f"Ignoring point of '{point.name}' with unhandled kind {kind!r}"
            )
            return

        self.series.get_or_create(point.name, accumulator_type).add(point.value)
        if point.timestamp_millis is not None:
            self.series.observe_timestamp(point.timestamp_millis)

    def add_points(self, points: Iterable[MetricPoint]) -> int:
        """Add every point of an iterable. Returns the number of points added."""
        added = 0
        for point in points:
            self.add_point(point)
            added += 1
        return added

    def finalize(self) -> RunStats:
        """Compute the run statistics. Calling it again returns the same result."""
        if self._run_stats is None:
            self._run_stats = self._compute_run_stats()
            self.debug(
                lambda: f"Finalized {len(self.series)} metrics: {self._run_stats}"
            )
        return self._run_stats

    def _accumulator(self, name: str, accumulator_type: type[BaseMetricAccumulator]):
        """The accumulator of a metric if it exists and has the expected kind."""
        accumulator = self.series.get(name)
        if isinstance(accumulator, accumulator_type):
            return accumulator
        return None

    def _compute_run_stats(self) -> RunStats:
        http_reqs = self._accumulator(metric_names.HTTP_REQS, CounterAccumulator)
        total_requests = int(http_reqs.total) if http_reqs else 0

        http_req_failed = self._accumulator(metric_names.HTTP_REQ_FAILED, RateAccumulator)
        failed_requests = http_req_failed.passes if http_req_failed else 0

        checks = self._accumulator(metric_names.CHECKS, RateAccumulator)
        vus_max = self._accumulator(metric_names.VUS_MAX, GaugeAccumulator)
        data_received = self._accumulator(metric_names.DATA_RECEIVED, CounterAccumulator)

        duration = self.series.duration_seconds
        if duration > 0:
            request_rate = total_requests / duration
        else:
            request_rate = total_requests / self.fallback_duration_seconds

        response_time = ResponseTimeStats()
        durations = self._accumulator(metric_names.HTTP_REQ_DURATION, TrendAccumulator)
        if durations:
            response_time = ResponseTimeStats.model_validate(
                durations.summarize().trend.model_dump()
            )

        return RunStats(
            duration=duration,
            total_requests=total_requests,
            failed_requests=failed_requests,
            request_rate=request_rate,
            response_time=response_time,
            error_rate=(
                failed_requests / total_requests * 100 if total_requests > 0 else 0.0
            ),
            checks_pass_rate=checks.rate if checks else 100.0,
            vus_max=int(vus_max.max) if vus_max and vus_max.max is not None else 0,
            data_transferred=data_received.total if data_received else 0.0,
            metrics={
                name: self.series.get(name).summarize() for name in self.series
            },
        )
