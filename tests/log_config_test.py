"""Tests for root logger setup."""

from __future__ import annotations

import logging
import sys
from unittest.mock import patch

import pytest
from sfas import log_config


class TestResolveLevel:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            (" debug ", logging.DEBUG),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_known_names(self, name, expected):
        assert log_config.resolve_level(name) == expected

    def test_verbose_wins(self):
        assert log_config.resolve_level("ERROR", verbose=True) == logging.DEBUG

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            log_config.resolve_level("chatty")


class TestSetup:
    def test_configures_root_logger_on_stderr(self):
        with patch("sfas.log_config.logging.basicConfig") as basic_config:
            result = log_config.setup(level="warning")

        assert result == logging.WARNING
        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.WARNING
        assert kwargs["stream"] is sys.stderr
        assert kwargs["format"] == log_config.LOG_FORMAT

    def test_verbose_sets_debug(self):
        with patch("sfas.log_config.logging.basicConfig") as basic_config:
            log_config.setup(verbose=True, level="ERROR")

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
