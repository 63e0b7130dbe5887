# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Logging configuration for k6perf commands.

Logs render on the terminal through Rich and, when an output directory is in use,
are also written to a plain-text log file alongside the generated reports.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from k6perf.common.k6perf_logger import K6PerfLogger

_logger = K6PerfLogger(__name__)


def setup_logging(log_level: str = "INFO", log_file: Path | None = None) -> None:
    """
    Set up logging for a k6perf command.

    Replaces any handlers on the root logger with a RichHandler writing to stderr
    and, if ``log_file`` is given, a file handler writing to that path.

    Args:
        log_level: Logging level (e.g., "DEBUG", "INFO", "WARNING"). Defaults to "INFO".
        log_file: Optional path of a log file. Parent directories are created.

    Examples:
        >>> setup_logging("DEBUG", Path("./results/k6perf.log"))
    """
    root_logger = logging.getLogger()

    level = log_level.upper()
    root_logger.setLevel(level)

    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    rich_handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        tracebacks_show_locals=False,
        log_time_format="%H:%M:%S.%f",
        omit_repeated_times=False,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)
        _logger.debug(lambda: f"Log file: {log_file}")

    _logger.debug(lambda: f"Logging initialized with level: {level}")
