"""Utilities package for Contact Model."""

from contact_model.utils.paths import get_config_dir, get_log_dir

__all__ = ["get_config_dir", "get_log_dir"]
