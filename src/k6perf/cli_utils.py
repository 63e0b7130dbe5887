# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel

from k6perf.common.constants import EXIT_FATAL_ERROR
from k6perf.common.exceptions import K6PerfError


@contextmanager
def exit_on_error(
    title: str = "Error", exit_code: int = EXIT_FATAL_ERROR
) -> Iterator[None]:
    """Print k6perf errors as a rich panel on stderr and exit with ``exit_code``.

    Any other exception propagates unchanged.

    Examples:
        >>> with exit_on_error(title="Error Loading Results"):
        ...     pipeline.run()
    """
    try:
        yield
    except K6PerfError as e:
        console = Console(stderr=True)
        console.print(
            Panel(
                f"[bold]{e.__class__.__name__}[/bold]: {e}",
                title=title,
                title_align="left",
                border_style="red",
            )
        )
        console.file.flush()
        raise SystemExit(exit_code) from e
