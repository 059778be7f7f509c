"""Unit tests for environment-driven validator settings."""

from __future__ import annotations

import logging
import unittest

from schemacheck.config import ValidatorConfig, ValidatorConfigError


class ValidatorConfigTests(unittest.TestCase):
    def test_from_env_defaults(self) -> None:
        config = ValidatorConfig.from_env({})
        self.assertIsNone(config.max_depth)
        self.assertEqual(config.log_level, "WARNING")
        self.assertEqual(config.logging_level, logging.WARNING)

    def test_from_env_reads_depth_and_level(self) -> None:
        config = ValidatorConfig.from_env(
            {"SCHEMACHECK_MAX_DEPTH": " 12 ", "SCHEMACHECK_LOG_LEVEL": "debug"}
        )
        self.assertEqual(config.max_depth, 12)
        self.assertEqual(config.logging_level, logging.DEBUG)

    def test_blank_depth_means_unbounded(self) -> None:
        self.assertIsNone(ValidatorConfig.from_env({"SCHEMACHECK_MAX_DEPTH": "  "}).max_depth)

    def test_rejects_non_integer_depth(self) -> None:
        with self.assertRaisesRegex(ValidatorConfigError, "must be a positive integer"):
            ValidatorConfig.from_env({"SCHEMACHECK_MAX_DEPTH": "deep"})

    def test_rejects_non_positive_depth(self) -> None:
        with self.assertRaisesRegex(ValidatorConfigError, "max_depth must be >= 1"):
            ValidatorConfig.from_env({"SCHEMACHECK_MAX_DEPTH": "0"})

    def test_rejects_unknown_log_level(self) -> None:
        with self.assertRaisesRegex(ValidatorConfigError, "log_level must be one of"):
            ValidatorConfig.from_env({"SCHEMACHECK_LOG_LEVEL": "verbose"})

    def test_with_max_depth_overrides_only_when_given(self) -> None:
        config = ValidatorConfig(max_depth=3, log_level="INFO")
        self.assertIs(config.with_max_depth(None), config)
        self.assertEqual(config.with_max_depth(8), ValidatorConfig(max_depth=8, log_level="INFO"))


if __name__ == "__main__":
    unittest.main()
