# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from rich.logging import RichHandler

from k6perf.common.logging import setup_logging


class TestSetupLogging:
    def test_installs_rich_handler(self):
        setup_logging("debug")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root_logger.handlers)
        assert not any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)

    def test_writes_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "k6perf.log"
        setup_logging("INFO", log_file)

        logging.getLogger("k6perf.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()

    def test_replaces_existing_handlers(self):
        setup_logging("INFO")
        setup_logging("WARNING")

        rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
