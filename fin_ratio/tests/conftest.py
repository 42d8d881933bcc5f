# Path: fin_ratio/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for fin_ratio

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
import tempfile
from io import StringIO
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add fin_ratio to path for imports
FIN_RATIO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(FIN_RATIO_ROOT))


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'FIN_RATIO_ENVIRONMENT': 'test',
        'FIN_RATIO_DEBUG': 'true',

        # Logging
        'FIN_RATIO_LOG_DIR': '/tmp/fin_ratio_test/logs',
        'FIN_RATIO_LOG_LEVEL': 'DEBUG',
        'FIN_RATIO_LOG_CONSOLE': 'false',
        'FIN_RATIO_LOG_MAX_SIZE_MB': '2',
        'FIN_RATIO_LOG_BACKUP_COUNT': '3',

        # Output
        'FIN_RATIO_OUTPUT_DIR': '/tmp/fin_ratio_test/output',
        'FIN_RATIO_OUTPUT_TEXT': 'true',
        'FIN_RATIO_OUTPUT_JSON': 'true',
        'FIN_RATIO_OUTPUT_CSV': 'false',
        'FIN_RATIO_JSON_INDENT': '4',
        'FIN_RATIO_CHART_WIDTH': '30',

        # Analysis
        'FIN_RATIO_DEFAULT_CATEGORY': 'liquidity',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def valuation_inputs():
    """Complete valuation inputs with round results."""
    return {
        'marketPrice': 50,
        'eps': 5,
        'forecastEps': 6.25,
        'bookValuePerShare': 25,
        'marketCap': 1000,
        'revenue': 500,
        'operatingCashFlow': 200,
        'enterpriseValue': 1200,
        'ebitda': 150,
        'earningsGrowthRate': 0.2,
        'annualDividendPerShare': 2,
        'sharePrice': 40,
    }


@pytest.fixture
def liquidity_inputs():
    """Complete liquidity inputs as raw strings, the way forms send them."""
    return {
        'currentAssets': '200',
        'currentLiabilities': '100',
        'inventory': '50',
        'cashAndEquivalents': '30',
        'operatingCashFlow': '80',
    }


@pytest.fixture
def efficiency_inputs():
    """Complete efficiency inputs."""
    return {
        'revenue': 730,
        'totalAssets': 365,
        'avgInventory': 50,
        'cogs': 365,
        'avgAccountsReceivable': 73,
        'accountsReceivable': 100,
        'inventory': 50,
        'daysPayablesOutstanding': 30,
    }


@pytest.fixture
def intrinsic_inputs():
    """Complete intrinsic value inputs."""
    return {
        'cfSeries': '110, 121',
        'discountRate': 0.1,
        'nopat': 100,
        'wacc': 0.08,
        'investedCapital': 1000,
        'E': 600,
        'V': 1000,
        'Re': 0.1,
        'D': 400,
        'Rd': 0.05,
        'taxRate': 0.25,
    }


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config(temp_dir):
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'environment': 'test',
        'debug': False,
        'log_dir': None,
        'log_level': 'INFO',
        'log_console': False,
        'output_dir': temp_dir / 'output',
        'output_text': True,
        'output_json': True,
        'output_csv': True,
        'json_indent': 2,
        'chart_width': 20,
        'default_category': '',
    }.get(key, default)
    return config


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def restore_root_logger():
    """Remove handlers installed by setup_ipo_logging and restore the level."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield root_logger

    for handler in list(root_logger.handlers):
        if isinstance(handler, RotatingFileHandler) or type(handler) is logging.StreamHandler:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def reset_singletons():
    """Reset ConfigLoader singleton between tests."""
    from config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
