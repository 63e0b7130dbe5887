# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from k6perf.common.k6perf_logger import K6PerfLogger, MessageT


class K6PerfLoggerMixin:
    """Gives a class ``self.debug``, ``self.info``, ... backed by a :class:`K6PerfLogger`.

    The logger is named after the concrete class unless ``logger_name`` is provided.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.logger = K6PerfLogger(logger_name or self.__class__.__name__)

    @property
    def is_debug_enabled(self) -> bool:
        return self.logger.is_debug_enabled

    def debug(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.error(message, *args, **kwargs)

    def exception(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.exception(message, *args, **kwargs)
