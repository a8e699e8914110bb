import logging
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from logging_config import get_recent_history, setup_logging


class TestSetupLogging(unittest.TestCase):
    """Test cases for setup_logging and get_recent_history."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.log_dir = Path(self._tmp.name) / "logs"

    def tearDown(self):
        for name in ("test_service", "business"):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers = []
        self._tmp.cleanup()

    def test_creates_log_file(self):
        logger = setup_logging("test_service", log_dir=self.log_dir)
        logger.info("hello log")
        for handler in logger.handlers:
            handler.flush()

        log_file = self.log_dir / "test_service.log"
        self.assertTrue(log_file.exists())
        self.assertIn("test_service - INFO - hello log", log_file.read_text(encoding="utf-8"))

    def test_handlers_reset_between_calls(self):
        setup_logging("test_service", log_dir=self.log_dir)
        logger = setup_logging("test_service", log_dir=self.log_dir)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], RotatingFileHandler)

    def test_console_handler_optional(self):
        logger = setup_logging("test_service", log_dir=self.log_dir, console=True)
        self.assertEqual(len(logger.handlers), 2)

    def test_component_records_reach_service_log(self):
        setup_logging("test_service", log_dir=self.log_dir, level=logging.DEBUG)
        logging.getLogger("business.factorial_calculator").debug("component record")
        for handler in logging.getLogger("business").handlers:
            handler.flush()

        content = (self.log_dir / "test_service.log").read_text(encoding="utf-8")
        self.assertIn("component record", content)

    def test_component_logger_shares_handlers_without_propagating(self):
        logger = setup_logging("test_service", log_dir=self.log_dir)
        component_logger = logging.getLogger("business")
        self.assertFalse(component_logger.propagate)
        self.assertEqual(component_logger.handlers, logger.handlers)

    def test_get_recent_history(self):
        logger = setup_logging("test_service", log_dir=self.log_dir)
        for i in range(5):
            logger.info("line %d", i)
        for handler in logger.handlers:
            handler.flush()

        lines = get_recent_history("test_service", lines=2, log_dir=self.log_dir)
        self.assertEqual(len(lines), 2)
        self.assertIn("line 4", lines[-1])

    def test_get_recent_history_missing_file(self):
        lines = get_recent_history("missing", log_dir=self.log_dir)
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("File not found"))


if __name__ == '__main__':
    unittest.main()
