# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Thin wrapper around :class:`logging.Logger` with lazily evaluated messages.

Messages may be passed either as strings or as zero-argument callables. Callables
are only invoked when the level is enabled, so expensive f-strings in hot loops
(such as per-line parsing) cost nothing when debug logging is off::

    _logger = K6PerfLogger(__name__)
    _logger.debug(lambda: f"Parsed {len(points)} points from {path}")
"""

import logging
from collections.abc import Callable

MessageT = str | Callable[[], str]


class K6PerfLogger:
    """Logger that accepts lazily evaluated messages."""

    def __init__(self, logger_name: str | None = None) -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.DEBUG)

    def log(self, level: int, message: MessageT, *args, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        self._logger.log(level, message, *args, **kwargs)

    def debug(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: MessageT, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, message, *args, **kwargs)
