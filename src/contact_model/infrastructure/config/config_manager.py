"""Configuration management for Contact Model."""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

from contact_model.infrastructure.logging import get_logger
from contact_model.shared.exceptions import ConfigError
from contact_model.utils.paths import get_config_dir

logger = get_logger(__name__)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    """Application configuration."""
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    json_logs: bool = False

    # Collation locale for display label ordering; empty uses the environment
    collation_locale: str = ""

    # Directory scanned for account type definition files
    definitions_dir: Optional[str] = None

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level}", key="log_level")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """Create from dictionary."""
        # Filter out None values and unknown keys
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {
            k: v for k, v in data.items()
            if k in valid_fields and v is not None
        }
        return cls(**filtered_data)


class ConfigManager:
    """Manages application configuration."""

    _instance: Optional['ConfigManager'] = None

    def __new__(cls) -> 'ConfigManager':
        """Ensure singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize configuration manager."""
        if self._initialized:
            return

        self._config = AppConfig()
        self._config_file = self._get_config_path()
        self._load_config()
        self._initialized = True

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next construction reloads from disk."""
        cls._instance = None

    def _get_config_path(self) -> Path:
        """Get platform-specific config file path.

        Returns:
            Path to configuration file
        """
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir / "config.json"

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> None:
        """Load configuration from file."""
        if not self._config_file.exists():
            # Use defaults
            return

        try:
            with open(self._config_file, 'r') as f:
                data = json.load(f)

            # Merge with defaults
            self._config = AppConfig.from_dict(data)
            logger.info(f"Loaded config from {self._config_file}")

        except (json.JSONDecodeError, OSError, ConfigError) as e:
            logger.error(f"Error loading config, using defaults: {e}")

    def save_config(self) -> None:
        """Save configuration to file."""
        try:
            data = {k: v for k, v in self._config.to_dict().items()
                   if v is not None}

            # Write atomically
            temp_file = self._config_file.with_suffix('.tmp')
            with open(temp_file, 'w') as f:
                json.dump(data, f, indent=2)

            temp_file.replace(self._config_file)
            logger.debug(f"Saved config to {self._config_file}")

        except OSError as e:
            logger.error(f"Error saving config: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return getattr(self._config, key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value.

        Args:
            key: Configuration key
            value: New value

        Raises:
            ConfigError: If the key is unknown or the value invalid
        """
        self.update(**{key: value})

    def update(self, **kwargs) -> None:
        """Update multiple configuration values.

        Args:
            **kwargs: Key-value pairs to update

        Raises:
            ConfigError: If a key is unknown or a value invalid
        """
        unknown = [k for k in kwargs if not hasattr(self._config, k)]
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", keys=unknown)

        self._config = AppConfig.from_dict({**self._config.to_dict(), **kwargs})
        self.save_config()

    def get_config(self) -> AppConfig:
        """Get the entire configuration object.

        Returns:
            Current configuration
        """
        return self._config

    def reset_to_defaults(self) -> None:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager.

    Returns:
        ConfigManager singleton instance
    """
    return ConfigManager()


def get_config() -> AppConfig:
    """Get the current configuration.

    Returns:
        Current application configuration
    """
    return get_config_manager().get_config()
