"""Common path utilities."""

import sys
from pathlib import Path

def get_config_dir() -> Path:
    """Get configuration directory."""
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Roaming" / "ContactModel"
    elif sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "Contact Model"
    else:
        return Path.home() / ".config" / "contact-model"

def get_log_dir() -> Path:
    """Get log directory."""
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Local" / "ContactModel" / "logs"
    elif sys.platform == "darwin":
        return Path.home() / "Library" / "Logs" / "ContactModel"
    else:
        return Path.home() / ".local" / "state" / "contact-model"
