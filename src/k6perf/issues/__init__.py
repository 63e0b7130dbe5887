# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.issues.issue_reporter import DEFAULT_ISSUE_RULES, IssueReporter, IssueRule

__all__ = ["DEFAULT_ISSUE_RULES", "IssueReporter", "IssueRule"]
