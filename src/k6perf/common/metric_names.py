# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Names of the built-in k6 metrics that run statistics are derived from."""

HTTP_REQS = "http_reqs"
HTTP_REQ_DURATION = "http_req_duration"
HTTP_REQ_FAILED = "http_req_failed"
CHECKS = "checks"
VUS = "vus"
VUS_MAX = "vus_max"
DATA_RECEIVED = "data_received"
DATA_SENT = "data_sent"
ITERATIONS = "iterations"
