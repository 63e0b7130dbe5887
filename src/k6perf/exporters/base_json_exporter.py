# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from pathlib import Path

from k6perf.common.mixins import K6PerfLoggerMixin
from k6perf.exporters.exporter_config import FileExportInfo


class BaseJsonExporter(K6PerfLoggerMixin, ABC):
    """Base class of the exporters that write one JSON report into the output directory."""

    export_type: str = "JSON Export"

    def __init__(self, output_dir: Path, file_name: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._output_directory = output_dir
        self._file_path = output_dir / file_name

    def get_export_info(self) -> FileExportInfo:
        return FileExportInfo(export_type=self.export_type, file_path=self._file_path)

    @abstractmethod
    def _generate_content(self) -> str:
        """Generate the complete content of the report file."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _generate_content()"
        )

    def export(self) -> FileExportInfo:
        """Create the output directory if needed and write the report.

        Raises:
            OSError: If the file cannot be written.
        """
        self._output_directory.mkdir(parents=True, exist_ok=True)
        self.debug(lambda: f"Exporting data to file: {self._file_path}")

        try:
            content = self._generate_content()
            self._file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            self.error(lambda: f"Failed to export to {self._file_path}: {e}")
            raise

        self.info(f"{self.export_type} written to {self._file_path}")
        return self.get_export_info()
