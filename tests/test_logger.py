import logging
import unittest
from unittest.mock import patch

from passgen.utils.logger import PACKAGE_LOGGER, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level

        def restore() -> None:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

        self.addCleanup(restore)

    def test_get_logger_leaves_root_untouched(self) -> None:
        root = logging.getLogger()
        root.handlers.clear()
        with patch("passgen.utils.logger.configure_logging") as configure:
            logger = get_logger("passgen.engine.generator")
        configure.assert_not_called()
        self.assertEqual(root.handlers, [])
        self.assertEqual(logger.name, "passgen.engine.generator")

    def test_package_logger_has_null_handler(self) -> None:
        get_logger()
        get_logger()
        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        self.assertEqual(sum(isinstance(h, logging.NullHandler) for h in handlers), 1)

    def test_configure_logging_installs_single_handler(self) -> None:
        configure_logging(logging.DEBUG)
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.DEBUG)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
