# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Decoding of the line-delimited k6 JSON output into :class:`MetricPoint` objects."""

import math
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import orjson
from pydantic import ValidationError

from k6perf.common.enums import RecordType
from k6perf.common.exceptions import LineDecodeError
from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.common.models import K6Record, MetricPoint, PointData

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)
# k6 writes RFC3339 times with nanoseconds; datetime only keeps microseconds.
_FRACTION_RE = re.compile(r"\.(\d+)")


def parse_timestamp(value: Any) -> int | None:
    """Convert a k6 point time into epoch milliseconds.

    Strings are read as ISO-8601 / RFC3339 (a missing offset means UTC), numbers
    as epoch milliseconds. Returns None for anything else.

    Examples:
        >>> parse_timestamp("2024-01-01T00:00:00.123456789Z")
        1704067200123
        >>> parse_timestamp(1704067200123)
        1704067200123
        >>> parse_timestamp("yesterday") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text[-1] in "Zz":
        text = f"{text[:-1]}+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + f"{m.group(1):0<6}"[:6], text, count=1)

    try:
        timestamp = datetime.fromisoformat(text)
    except ValueError:
        return None
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return (timestamp - _EPOCH) // _ONE_MILLISECOND


@dataclass(slots=True)
class ParseStats:
    """Counters of a parser, updated as lines are consumed."""

    total_lines: int = 0
    """Non-empty lines seen."""
    points: int = 0
    """Lines that produced a :class:`MetricPoint`."""
    excluded_records: int = 0
    """Valid records of another type than Point (e.g. Metric declarations)."""
    skipped_lines: int = 0
    """Lines that could not be decoded."""


class PointStreamParser(K6PerfLoggerMixin):
    """Turns the lines of a k6 ``--out json`` file into metric points.

    Lines are decoded one at a time and points are yielded lazily. A line that is
    not valid JSON or not a well formed record is counted in
    :attr:`ParseStats.skipped_lines` and skipped; it never stops the stream.

    Examples:
        >>> parser = PointStreamParser()
        >>> lines = ['{"type":"Point","metric":"vus","data":{"value":5}}', "not-json"]
        >>> [p.value for p in parser.iter_points(lines)]
        [5.0]
        >>> parser.stats.skipped_lines
        1
    """

    def __init__(self, source_name: str = "<stream>", **kwargs) -> None:
        super().__init__(**kwargs)
        self.source_name = source_name
        self.stats = ParseStats()

    def parse_text(self, text: str) -> Iterator[MetricPoint]:
        """Split raw text on newlines and parse every line."""
        return self.iter_points(text.split("\n"))

    def iter_points(self, lines: Iterable[str]) -> Iterator[MetricPoint]:
        """Lazily yield the points decoded from ``lines``."""
        for line_number, line in enumerate(lines, 1):
            line = line.strip()
            if not line:
                continue
            self.stats.total_lines += 1

            try:
                point = self._decode_line(line_number, line)
            except LineDecodeError as e:
                self.stats.skipped_lines += 1
                self.debug(lambda e=e: f"Skipping line in {self.source_name}: {e}")
                continue

            if point is None:
                self.stats.excluded_records += 1
                continue
            self.stats.points += 1
            yield point

    def _decode_line(self, line_number: int, line: str) -> MetricPoint | None:
        """Decode one line. Returns None for valid records that are not points.

        Raises:
            LineDecodeError: If the line is not a well formed k6 record.
        """
        try:
            raw = orjson.loads(line)
        except orjson.JSONDecodeError as e:
            raise LineDecodeError(line_number, f"invalid JSON ({e})") from e
        if not isinstance(raw, dict):
            raise LineDecodeError(
                line_number, f"expected a JSON object, got {type(raw).__name__}"
            )

        try:
            record = K6Record.model_validate(raw)
        except ValidationError as e:
            raise LineDecodeError(line_number, f"invalid record ({e})") from e

        if record.type != RecordType.POINT.value:
            return None
        if not record.metric:
            raise LineDecodeError(line_number, "Point record without a metric name")

        try:
            data = PointData.model_validate(record.data or {})
        except ValidationError as e:
            raise LineDecodeError(line_number, f"invalid point data ({e})") from e

        return MetricPoint(
            name=record.metric,
            value=data.value,
            timestamp_millis=parse_timestamp(data.time),
            tags=data.tags or {},
        )
