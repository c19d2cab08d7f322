"""Tests for the Laravel-style logger helper."""

from __future__ import annotations

import logging

import pytest

from config.logging import channels
from config.properties import settings
from graphnode.Utils.Logger import LaravelStyleLogger, get_logger


class TestLaravelStyleLogger:
    """Test suite for LaravelStyleLogger."""

    def test_format_message_with_context(self) -> None:
        logger = get_logger('graphnode.tests.format')

        assert logger._format_message('Declared property', {'name': 'age', 'indexed': False}) == (
            'Declared property | name=age | indexed=False'
        )
        assert logger._format_message('plain') == 'plain'

    def test_warning_reaches_log_records(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = LaravelStyleLogger('graphnode.tests.records')

        with caplog.at_level(logging.WARNING, logger='graphnode.tests.records'):
            logger.warning('Typecast failed', {'type': 'int'})

        assert 'Typecast failed | type=int' in caplog.text

    def test_null_channel_installs_null_handler(self) -> None:
        logger = LaravelStyleLogger('graphnode.tests.null', channel='null')

        assert any(isinstance(handler, logging.NullHandler) for handler in logger.logger.handlers)

    def test_stderr_channel_uses_configured_level(self) -> None:
        logger = LaravelStyleLogger('graphnode.tests.level', channel='stderr')

        assert channels['stderr']['level'] == settings.LOG_LEVEL
        assert logger.logger.level == getattr(logging, settings.LOG_LEVEL.upper())
