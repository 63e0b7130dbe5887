# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Per-metric accumulators, one class per :class:`MetricKind`."""

from abc import ABC, abstractmethod
from typing import ClassVar

import numpy as np

from k6perf.common.constants import RATE_TRUE_VALUE
from k6perf.common.enums import MetricKind
from k6perf.common.models import MetricSummary
from k6perf.metrics.statistics import compute_trend_stats

_INITIAL_CAPACITY = 256


class BaseMetricAccumulator(ABC):
    """Accumulates the values of one metric of one run."""

    kind: ClassVar[MetricKind]

    def __init__(self, name: str) -> None:
        self.name = name
        self.count = 0

    def add(self, value: float) -> None:
        self.count += 1
        self._add(value)

    @abstractmethod
    def _add(self, value: float) -> None:
        """Fold a single value into the accumulator."""

    @abstractmethod
    def summarize(self) -> MetricSummary:
        """Build the summary of the values seen so far."""


class CounterAccumulator(BaseMetricAccumulator):
    """Sums every value."""

    kind = MetricKind.COUNTER

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.total = 0.0

    def _add(self, value: float) -> None:
        self.total += value

    def summarize(self) -> MetricSummary:
        return MetricSummary(kind=self.kind, count=self.count, sum=self.total)


class GaugeAccumulator(BaseMetricAccumulator):
    """Keeps the largest and the most recent value."""

    kind = MetricKind.GAUGE

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.max: float | None = None
        self.last: float | None = None

    def _add(self, value: float) -> None:
        self.last = value
        if self.max is None or value > self.max:
            self.max = value

    def summarize(self) -> MetricSummary:
        return MetricSummary(
            kind=self.kind,
            count=self.count,
            max=self.max if self.max is not None else 0.0,
            last=self.last if self.last is not None else 0.0,
        )


class RateAccumulator(BaseMetricAccumulator):
    """Counts values equal to 1 as passes and everything else as fails."""

    kind = MetricKind.RATE

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.passes = 0
        self.fails = 0

    def _add(self, value: float) -> None:
        if value == RATE_TRUE_VALUE:
            self.passes += 1
        else:
            self.fails += 1

    @property
    def rate(self) -> float:
        """Pass percentage. A rate without observations counts as fully passing."""
        total = self.passes + self.fails
        if total == 0:
            return 100.0
        return self.passes / total * 100

    def summarize(self) -> MetricSummary:
        return MetricSummary(
            kind=self.kind,
            count=self.count,
            passes=self.passes,
            fails=self.fails,
            rate=self.rate,
        )


class TrendAccumulator(BaseMetricAccumulator):
    """Retains every value in a growable NumPy buffer for nearest-rank statistics."""

    kind = MetricKind.TREND

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._values: np.ndarray = np.empty(_INITIAL_CAPACITY, dtype=np.float64)

    def _add(self, value: float) -> None:
        if self.count > len(self._values):
            new_values = np.empty(len(self._values) * 2, dtype=np.float64)
            new_values[: len(self._values)] = self._values
            self._values = new_values
        self._values[self.count - 1] = value

    @property
    def values(self) -> np.ndarray:
        return self._values[: self.count]

    def summarize(self) -> MetricSummary:
        return MetricSummary(
            kind=self.kind, count=self.count, trend=compute_trend_stats(self.values)
        )


ACCUMULATOR_TYPES: dict[MetricKind, type[BaseMetricAccumulator]] = {
    accumulator.kind: accumulator
    for accumulator in (
        CounterAccumulator,
        GaugeAccumulator,
        RateAccumulator,
        TrendAccumulator,
    )
}
