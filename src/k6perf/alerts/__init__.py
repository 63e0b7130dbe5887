# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.alerts.alert_engine import AlertEngine, crosses, metric_value

__all__ = ["AlertEngine", "crosses", "metric_value"]
