# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path


class K6PerfError(Exception):
    """Base class for all exceptions raised by k6perf."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class LineDecodeError(K6PerfError):
    """Raised when a single line of a result stream cannot be decoded into a record.

    This is a recoverable, per-record error. The parser catches it, counts the
    line as skipped, and continues with the next line.
    """

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}")


class SourceUnavailableError(K6PerfError):
    """Raised when the input of a run cannot be read at all (missing file, unreadable stream)."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class ConfigurationError(K6PerfError):
    """Exception raised when something fails to configure, or there is a configuration error."""


class InvalidStateError(K6PerfError):
    """Exception raised when something is in an invalid state."""
