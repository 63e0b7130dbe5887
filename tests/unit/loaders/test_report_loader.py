# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from k6perf.common.exceptions import SourceUnavailableError
from k6perf.common.models import SummaryExportData
from k6perf.loaders import load_summary_report


class TestLoadSummaryReport:
    def test_round_trips_written_report(self, tmp_path, make_run_stats):
        path = tmp_path / "aggregated-report.json"
        data = SummaryExportData(raw_data={"load": make_run_stats(avg=123.0)})
        path.write_text(data.to_json())

        report = load_summary_report(path)

        assert report.raw_data["load"].response_time.avg == 123.0

    def test_missing_report(self, tmp_path):
        with pytest.raises(SourceUnavailableError, match="not found"):
            load_summary_report(tmp_path / "aggregated-report.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "aggregated-report.json"
        path.write_text("{not json")

        with pytest.raises(SourceUnavailableError, match="Invalid JSON"):
            load_summary_report(path)

    def test_invalid_layout(self, tmp_path):
        path = tmp_path / "aggregated-report.json"
        path.write_text('{"rawData": {"load": {"totalRequests": "many"}}}')

        with pytest.raises(SourceUnavailableError, match="Invalid report layout"):
            load_summary_report(path)
