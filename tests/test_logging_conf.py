"""
Logging Configuration Tests

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- zecrate.shared.logging_conf (setup_logging)
- pytest (testing framework)
"""
import logging
from logging.handlers import RotatingFileHandler

import pytest  # Testing framework for writing and running tests

from zecrate.shared.logging_conf import LOG_FILE_NAME, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_log_dir_creates_rotating_file(self, tmp_path, restore_root_logger):
        log_dir = tmp_path / "logs"

        setup_logging(level="debug", log_dir=log_dir, log_stdout=False, backup_count=3)
        logging.getLogger("zecrate.test").warning("degraded pricing")

        file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].backupCount == 3
        assert restore_root_logger.level == logging.DEBUG
        file_handlers[0].flush()
        assert "degraded pricing" in (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8")

    def test_stdout_only(self, restore_root_logger):
        setup_logging(level=logging.WARNING)

        assert restore_root_logger.level == logging.WARNING
        assert not any(isinstance(h, RotatingFileHandler) for h in restore_root_logger.handlers)

    def test_unknown_level_name_defaults_to_info(self, restore_root_logger):
        setup_logging(level="chatty")

        assert restore_root_logger.level == logging.INFO
