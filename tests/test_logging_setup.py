from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from fileexplorer.logging_setup import LOGGER_NAME, configure_logging


def _installed_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Handlers added by ``configure_logging``; test runners may attach their own."""
    return [handler for handler in logger.handlers if getattr(handler, "_fileexplorer_handler", False)]


class LoggingSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging()

    def test_default_installs_only_a_null_handler(self) -> None:
        logger = configure_logging()
        installed = _installed_handlers(logger)
        self.assertEqual(len(installed), 1)
        self.assertIsInstance(installed[0], logging.NullHandler)
        self.assertFalse(logger.propagate)

    def test_level_without_file_logs_to_stream(self) -> None:
        logger = configure_logging("debug")
        self.assertEqual(logger.level, logging.DEBUG)
        installed = _installed_handlers(logger)
        self.assertEqual(len(installed), 1)
        self.assertIsInstance(installed[0], logging.StreamHandler)
        self.assertNotIsInstance(installed[0], logging.FileHandler)

    def test_log_file_receives_package_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "explorer.log"
            configure_logging(log_file=log_path)

            logging.getLogger(f"{LOGGER_NAME}.explorer").info("hello from test")
            configure_logging()

            text = log_path.read_text(encoding="utf-8")
            self.assertIn("fileexplorer.explorer - INFO - hello from test", text)

    def test_reconfiguring_replaces_previous_handler(self) -> None:
        configure_logging("info")
        logger = configure_logging("warning")
        installed = _installed_handlers(logger)
        self.assertEqual(len(installed), 1)

    def test_unknown_level_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            configure_logging("chatty")


if __name__ == "__main__":
    unittest.main()
