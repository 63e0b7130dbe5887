# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Formatting of values and thresholds shown in reports, alerts and issues.

Observed values are always rendered with two decimals (``"75.00%"``), thresholds
without a fractional part when they are whole numbers (``"90%"``, ``"10 req/s"``).
"""

PERCENT_SUFFIX = "%"
MILLIS_SUFFIX = "ms"
RATE_SUFFIX = " req/s"


def format_value(value: float, suffix: str = "") -> str:
    """Format an observed value with two decimals and a unit suffix.

    Examples:
        >>> format_value(1234.5, "ms")
        '1234.50ms'
    """
    return f"{value:.2f}{suffix}"


def format_threshold(threshold: float, suffix: str = "") -> str:
    """Format a threshold, dropping the fractional part of whole numbers.

    Examples:
        >>> format_threshold(1000.0, "ms")
        '1000ms'
        >>> format_threshold(2.5, "%")
        '2.5%'
    """
    if float(threshold).is_integer():
        return f"{int(threshold)}{suffix}"
    return f"{threshold}{suffix}"


def format_percent(value: float) -> str:
    return format_value(value, PERCENT_SUFFIX)


def format_millis(value: float) -> str:
    return format_value(value, MILLIS_SUFFIX)


def format_rate(value: float) -> str:
    return format_value(value, RATE_SUFFIX)


def format_bytes(num_bytes: float) -> str:
    """Format a byte count with a binary unit for console output.

    Examples:
        >>> format_bytes(1536)
        '1.50 KiB'
    """
    size = float(num_bytes)
    for unit in ("B", "KiB", "MiB", "GiB"):
        if abs(size) < 1024 or unit == "GiB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} GiB"
