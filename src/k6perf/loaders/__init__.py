# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.loaders.report_loader import load_summary_report
from k6perf.loaders.run_loader import RunLoader

__all__ = ["RunLoader", "load_summary_report"]
