# Path: fin_ratio/tests/unit/test_ipo_logging.py
"""
Unit Tests for IPO Logging

Tests layer loggers, layer filtering and handler setup.
"""

import logging
import sys
from pathlib import Path

# Add fin_ratio to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from core.logger.ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)


def _flush(root_logger):
    for handler in root_logger.handlers:
        handler.flush()


class TestLayerLoggers:
    """Test layer logger naming."""

    def test_logger_names(self):
        assert get_input_logger('main').name == 'input.main'
        assert get_process_logger('ratio_engine').name == 'process.ratio_engine'
        assert get_output_logger('report_generator').name == 'output.report_generator'


class TestIPOFilter:
    """Test filtering by layer prefix."""

    def _record(self, name):
        return logging.LogRecord(name, logging.INFO, __file__, 1, 'msg', None, None)

    def test_matches_layer(self):
        assert IPOFilter('process').filter(self._record('process.ratio_engine'))

    def test_rejects_other_layer(self):
        assert not IPOFilter('input').filter(self._record('output.report_generator'))


class TestSetupIpoLogging:
    """Test handler setup."""

    def test_layer_files(self, temp_dir, restore_root_logger):
        log_dir = temp_dir / 'logs'
        setup_ipo_logging(log_dir=log_dir, log_level='DEBUG', console_output=False)

        get_process_logger('test').info('process message')
        get_input_logger('test').info('input message')
        _flush(restore_root_logger)

        process_log = (log_dir / 'process_activity.log').read_text(encoding='utf-8')
        input_log = (log_dir / 'input_activity.log').read_text(encoding='utf-8')
        full_log = (log_dir / 'full_activity.log').read_text(encoding='utf-8')

        assert 'process message' in process_log
        assert 'input message' not in process_log
        assert 'input message' in input_log
        assert 'process message' in full_log and 'input message' in full_log
        assert (log_dir / 'output_activity.log').exists()

    def test_console_only(self, restore_root_logger):
        setup_ipo_logging(log_dir=None, console_output=True)

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_no_handlers(self, restore_root_logger):
        setup_ipo_logging(log_dir=None, console_output=False)
        assert restore_root_logger.handlers == []

    def test_level(self, restore_root_logger):
        setup_ipo_logging(log_level='warning', console_output=False)
        assert restore_root_logger.level == logging.WARNING

    def test_unknown_level_defaults_to_info(self, restore_root_logger):
        setup_ipo_logging(log_level='loud', console_output=False)
        assert restore_root_logger.level == logging.INFO

    def test_repeated_setup_replaces_handlers(self, temp_dir, restore_root_logger):
        setup_ipo_logging(log_dir=temp_dir, console_output=False)
        setup_ipo_logging(log_dir=temp_dir, console_output=False)
        assert len(restore_root_logger.handlers) == 4
