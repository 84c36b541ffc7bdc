"""Configuration infrastructure."""

from contact_model.infrastructure.config.config_manager import (
    AppConfig,
    ConfigManager,
    get_config,
    get_config_manager,
)

__all__ = ["AppConfig", "ConfigManager", "get_config", "get_config_manager"]
