# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

MILLIS_PER_SECOND = 1_000

# k6 writes one result file per run, named "<run name>-result.json".
RESULT_FILE_SUFFIX = "-result.json"

AGGREGATED_REPORT_FILE = "aggregated-report.json"
ALERTS_REPORT_FILE = "alerts.json"
LOG_FILE = "k6perf.log"

# Used as the test duration when it cannot be derived from point timestamps.
FALLBACK_DURATION_SECONDS = 60.0

# Rate metrics count a point as a pass when its value equals this sentinel.
RATE_TRUE_VALUE = 1

# Exit codes of a report pipeline run.
EXIT_OK = 0
EXIT_RUN_FAILURE = 1
EXIT_FATAL_ERROR = 2
