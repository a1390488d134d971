"""
ScriptVol Configuration Loader

Configuration management for the archive volume:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Author: YSNRFD
Version: 1.0.0
"""

import json
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from scriptvol.exceptions import ConfigLoadError, ConfigValidationError
from scriptvol.logger import Logger, LogLevel


ARCHIVE_ENV_VAR = "SCRIPTVOL_ARCHIVE"
DEFAULT_ARCHIVE_ROOT = os.path.join("Ships", "Script")


def _default_root_path() -> str:
    return os.environ.get(ARCHIVE_ENV_VAR, DEFAULT_ARCHIVE_ROOT)


@dataclass
class ArchiveConfig:
    """Archive volume settings."""
    root_path: str = field(default_factory=_default_root_path)
    create_on_start: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the volume layer.
    """
    archive: ArchiveConfig = field(default_factory=ArchiveConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files and providing
    runtime configuration access. There is one loader per process.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('scriptvol.json')
        >>> print(config.archive.root_path)
        /games/ksp/Ships/Script
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigLoadError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigLoadError(
                f"Configuration file not found: {config_path}",
                config_path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(
                f"Invalid JSON in configuration file: {e}",
                config_path=config_path
            ) from e
        except OSError as e:
            raise ConfigLoadError(
                f"Cannot read configuration file: {e}",
                config_path=config_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigLoadError(
                "Configuration root must be a JSON object",
                config_path=config_path
            )

        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'archive' in data:
            archive_data = data['archive']
            config.archive = ArchiveConfig(
                root_path=archive_data.get('root_path', config.archive.root_path),
                create_on_start=archive_data.get('create_on_start', config.archive.create_on_start),
            )

        if 'logging' in data:
            log_data = data['logging']
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
            )

        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'archive.root_path')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'archive.root_path')
            value: Value to set

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
        else:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)

    def reset(self) -> None:
        """Drop any loaded configuration and go back to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config


def initialize_logging(config: Optional[Config] = None) -> None:
    """
    Set up logging from the ``logging`` section of a configuration.

    Logging is only ever set up once per process; later calls do
    nothing.

    Args:
        config: Configuration to read; the global one when omitted

    Raises:
        ConfigValidationError: If the configured level is unknown
    """
    config = config if config is not None else get_config()

    level_name = str(config.logging.level).upper()
    if level_name not in LogLevel.__members__:
        raise ConfigValidationError(
            f"Unknown log level: {config.logging.level}",
            key="logging.level"
        )

    Logger.initialize(
        level=LogLevel[level_name],
        log_file=config.logging.log_file,
        console_output=config.logging.console_output
    )
