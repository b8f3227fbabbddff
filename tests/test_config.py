import logging
import os
import unittest
from unittest import mock

from gpacalc.config.logging_config import ROOT_LOGGER_NAME, GpacalcHandler, configure_logging
from gpacalc.config.settings import DEFAULT_LOG_FORMAT, Settings, SettingsError


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            config = Settings.from_env()
        self.assertEqual(config.log_level, "WARNING")
        self.assertEqual(config.log_format, DEFAULT_LOG_FORMAT)

    def test_env_overrides(self):
        env = {"GPACALC_LOG_LEVEL": " debug ", "GPACALC_LOG_FORMAT": "%(message)s"}
        with mock.patch.dict(os.environ, env, clear=True):
            config = Settings.from_env()
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.log_format, "%(message)s")

    def test_literal_defaults_ignore_env(self):
        with mock.patch.dict(os.environ, {"GPACALC_LOG_LEVEL": "DEBUG"}, clear=True):
            config = Settings()
        self.assertEqual(config.log_level, "WARNING")


class LoggingConfigTests(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger(ROOT_LOGGER_NAME)
        self._saved = (self.logger.level, list(self.logger.handlers))

    def tearDown(self):
        level, handlers = self._saved
        self.logger.setLevel(level)
        self.logger.handlers[:] = handlers

    def test_configure_sets_level_and_handler(self):
        logger = configure_logging(Settings(log_level="DEBUG", log_format="%(message)s"))
        self.assertIs(logger, self.logger)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logger.handlers[-1].formatter._fmt, "%(message)s")

    def test_configure_twice_keeps_one_handler(self):
        configure_logging(Settings(log_level="INFO"))
        count = len(self.logger.handlers)
        configure_logging(Settings(log_level="ERROR"))
        self.assertEqual(len(self.logger.handlers), count)
        self.assertEqual(self.logger.level, logging.ERROR)

    def test_foreign_handlers_left_alone(self):
        foreign = logging.StreamHandler()
        self.logger.addHandler(foreign)
        configure_logging(Settings(log_level="INFO"))
        ours = [h for h in self.logger.handlers if isinstance(h, GpacalcHandler)]
        self.assertEqual(len(ours), 1)
        self.assertIn(foreign, self.logger.handlers)
        self.assertIsNone(foreign.formatter)

    def test_unknown_level(self):
        with self.assertRaises(SettingsError):
            configure_logging(Settings(log_level="LOUD"))

    def test_calculator_logs_under_namespace(self):
        from gpacalc.core.gpa import calculate_weighted_average

        with self.assertLogs("gpacalc.core.gpa", level="DEBUG") as captured:
            calculate_weighted_average([])
        self.assertIn("without baseline", captured.output[0])


if __name__ == "__main__":
    unittest.main()
