# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import unittest

from investor_quote.config.logging_config import setup_logging


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Clean up the investor_quote logger before each test."""
        logging.getLogger("investor_quote").handlers.clear()

    def tearDown(self) -> None:
        root_logger = logging.getLogger("investor_quote")
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers.clear()

    def test_setup_creates_log_file(self) -> None:
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches run_YYYYMMDD_HHMMSS.log format."""
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_file_handler_level_debug(self) -> None:
        setup_logging()
        root_logger = logging.getLogger("investor_quote")
        file_handlers = [
            h
            for h in root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

    def test_console_handler_level_warning(self) -> None:
        setup_logging()
        root_logger = logging.getLogger("investor_quote")
        stream_handlers: list[logging.Handler] = [
            h
            for h in root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(stream_handlers[0].level, logging.WARNING)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        setup_logging()
        root_logger = logging.getLogger("investor_quote")
        count_before = len(root_logger.handlers)
        setup_logging()
        self.assertEqual(count_before, len(root_logger.handlers))

    def test_child_loggers_propagate(self) -> None:
        """Module loggers like investor_quote.extractor reach the file."""
        log_path = setup_logging()
        logging.getLogger("investor_quote.extractor").debug("probe-line")
        for handler in logging.getLogger("investor_quote").handlers:
            handler.flush()
        self.assertIn("probe-line", log_path.read_text(encoding="utf-8"))

    def test_log_file_inside_logs_dir(self) -> None:
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")


if __name__ == "__main__":
    unittest.main()
