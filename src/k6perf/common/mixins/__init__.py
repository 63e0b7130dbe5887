# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.common.mixins.k6perf_logger_mixin import K6PerfLoggerMixin

__all__ = ["K6PerfLoggerMixin"]
