# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.parsing.point_stream_parser import (
    ParseStats,
    PointStreamParser,
    parse_timestamp,
)

__all__ = ["ParseStats", "PointStreamParser", "parse_timestamp"]
