# Path: fin_ratio/config_loader.py
"""
Configuration Loader for fin_ratio

Loads configuration from .env file for the ratio analysis tool.
Singleton pattern ensures consistent configuration across all components.

All configuration comes from environment variables. Nothing is required:
without a log directory logging goes to the console only, and without an
output directory reports are printed but not written.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_LOG_MAX_SIZE_MB: int = 10
DEFAULT_LOG_BACKUP_COUNT: int = 5

# Output Defaults
DEFAULT_JSON_INDENT: int = 2
DEFAULT_CHART_WIDTH: int = 40


class ConfigLoader:
    """
    Singleton configuration loader for fin_ratio.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        output_dir = config.get('output_dir')  # Path or None
        width = config.get('chart_width')  # int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        sitting next to this module, if there is one.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path(__file__).resolve().parent / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('FIN_RATIO_ENVIRONMENT', 'development'),
            'debug': self._get_bool('FIN_RATIO_DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('FIN_RATIO_LOG_DIR'),
            'log_level': self._get_env('FIN_RATIO_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('FIN_RATIO_LOG_CONSOLE', False),
            'log_max_size_mb': self._get_int(
                'FIN_RATIO_LOG_MAX_SIZE_MB', DEFAULT_LOG_MAX_SIZE_MB
            ),
            'log_backup_count': self._get_int(
                'FIN_RATIO_LOG_BACKUP_COUNT', DEFAULT_LOG_BACKUP_COUNT
            ),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'output_dir': self._get_path('FIN_RATIO_OUTPUT_DIR'),
            'output_text': self._get_bool('FIN_RATIO_OUTPUT_TEXT', True),
            'output_json': self._get_bool('FIN_RATIO_OUTPUT_JSON', True),
            'output_csv': self._get_bool('FIN_RATIO_OUTPUT_CSV', True),
            'json_indent': self._get_int('FIN_RATIO_JSON_INDENT', DEFAULT_JSON_INDENT),
            'chart_width': self._get_int('FIN_RATIO_CHART_WIDTH', DEFAULT_CHART_WIDTH),

            # ================================================================
            # ANALYSIS DEFAULTS
            # ================================================================
            'default_category': self._get_env('FIN_RATIO_DEFAULT_CATEGORY', ''),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config.get(key)
        return default if value is None else value

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value).expanduser()

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing environment and output location."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"output_dir={self._config.get('output_dir')})"
        )


__all__ = ['ConfigLoader']
