# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for decoding k6 JSON output lines into metric points."""

import pytest

from k6perf.common.models import MetricPoint
from k6perf.parsing import PointStreamParser, parse_timestamp


class TestParseTimestamp:
    """Tests for converting k6 point times into epoch milliseconds."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-01-01T00:00:00Z", 1704067200000),
            ("2024-01-01T00:00:00.123Z", 1704067200123),
            ("2024-01-01T00:00:00.123456789Z", 1704067200123),
            ("2024-01-01T01:00:00.5+01:00", 1704067200500),
            ("2024-01-01T00:00:00", 1704067200000),
            (1704067200123, 1704067200123),
            (1704067200123.9, 1704067200123),
        ],
    )  # fmt: skip
    def test_parses_supported_formats(self, value, expected):
        """Test that ISO strings and epoch milliseconds are converted."""
        assert parse_timestamp(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "yesterday", True, [1], float("nan")])
    def test_unparsable_values_return_none(self, value):
        """Test that anything that is not a time yields None instead of raising."""
        assert parse_timestamp(value) is None


class TestPointStreamParser:
    """Tests for PointStreamParser."""

    def test_yields_point_records(self, make_point_line):
        """Test that a Point line becomes a MetricPoint with its fields."""
        parser = PointStreamParser()
        line = make_point_line("http_req_duration", 123.4, tags={"status": "200"})

        points = list(parser.iter_points([line]))

        assert points == [
            MetricPoint(
                name="http_req_duration",
                value=123.4,
                timestamp_millis=1704067200000,
                tags={"status": "200"},
            )
        ]
        assert parser.stats.points == 1
        assert parser.stats.skipped_lines == 0

    def test_excludes_other_record_types(self, make_point_line, make_metric_line):
        """Test that Metric declarations are recognized but produce no point."""
        parser = PointStreamParser()
        lines = [make_metric_line("http_reqs"), make_point_line("http_reqs", 1)]

        points = list(parser.iter_points(lines))

        assert [p.name for p in points] == ["http_reqs"]
        assert parser.stats.excluded_records == 1
        assert parser.stats.skipped_lines == 0

    @pytest.mark.parametrize(
        "bad_line",
        [
            "not-json",
            "[1, 2, 3]",
            '"Point"',
            '{"metric":"http_reqs","data":{"value":1}}',
            '{"type":"Point","data":{"value":1}}',
            '{"type":"Point","metric":"http_reqs"}',
            '{"type":"Point","metric":"http_reqs","data":{"value":"fast"}}',
            '{"type":"Point","metric":"http_reqs","data":[1]}',
        ],
    )  # fmt: skip
    def test_skips_malformed_lines_and_continues(self, make_point_line, bad_line):
        """Test that a malformed line is counted as skipped and parsing continues."""
        parser = PointStreamParser()
        lines = [make_point_line("http_reqs", 1), bad_line, make_point_line("http_reqs", 2)]

        points = list(parser.iter_points(lines))

        assert [p.value for p in points] == [1.0, 2.0]
        assert parser.stats.skipped_lines == 1
        assert parser.stats.total_lines == 3

    def test_ignores_blank_lines(self, make_point_line):
        """Test that empty and whitespace-only lines are not counted at all."""
        parser = PointStreamParser()
        text = "\n".join(["", make_point_line("vus", 1), "   ", ""])

        points = list(parser.parse_text(text))

        assert len(points) == 1
        assert parser.stats.total_lines == 1
        assert parser.stats.skipped_lines == 0

    @pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x85"])
    def test_splits_only_on_newlines(self, make_point_line, separator):
        """Test that Unicode line separators inside tag values do not split a line."""
        parser = PointStreamParser()
        tags = {"name": f"GET /pets{separator}list"}
        text = "\r\n".join(
            [make_point_line("http_reqs", 1, tags=tags), make_point_line("http_reqs", 2, tags=tags)]
        )

        points = list(parser.parse_text(text))

        assert [p.value for p in points] == [1.0, 2.0]
        assert points[0].tags == tags
        assert parser.stats.total_lines == 2
        assert parser.stats.skipped_lines == 0

    def test_parse_is_lazy(self, make_point_line):
        """Test that lines are only consumed as points are requested."""
        consumed = []

        def lines():
            for value in range(3):
                consumed.append(value)
                yield make_point_line("vus", value)

        iterator = PointStreamParser().iter_points(lines())
        first = next(iterator)

        assert first.value == 0
        assert consumed == [0]

    def test_point_without_time_is_kept(self, make_point_line):
        """Test that a point with a missing or unparsable time keeps a None timestamp."""
        parser = PointStreamParser()
        lines = [
            make_point_line("vus", 1, time=None),
            make_point_line("vus", 2, time="not-a-time"),
        ]

        points = list(parser.iter_points(lines))

        assert [p.timestamp_millis for p in points] == [None, None]

    def test_does_not_validate_value_ranges(self, make_point_line):
        """Test that negative and huge values are passed through unchanged."""
        parser = PointStreamParser()
        lines = [make_point_line("custom", -5), make_point_line("custom", 1e12)]

        assert [p.value for p in parser.iter_points(lines)] == [-5.0, 1e12]

    def test_tag_values_are_stringified(self):
        """Test that non-string tag values are converted to strings."""
        line = '{"type":"Point","metric":"checks","data":{"value":1,"tags":{"check":"ok","expected":200,"group":null}}}'

        (point,) = PointStreamParser().parse_text(line)

        assert point.tags == {"check": "ok", "expected": "200", "group": ""}
