"""Shared fixtures for the Contact Model test suite."""

from unittest.mock import patch

import pytest
from loguru import logger

from contact_model.domain.interfaces.resources import ResourceContext
from contact_model.domain.models import AccountType
from contact_model.infrastructure.config import ConfigManager
from contact_model.infrastructure.resources import InMemoryContext, InMemoryPackageManager

LOCAL_STRINGS = {
    1: "Local label",
    5: "Local five",
    10: "Home",
    11: "Work",
    12: "Other",
    20: "Call {}",
}

EXTERNAL_STRINGS = {
    5: "External five",
    7: "Invite via Example",
    100: "Example Sync",
}


class StubAccountType(AccountType):
    """Minimal concrete account type."""

    def __init__(self, account_type="com.example", data_set=None, res_package_name=None):
        super().__init__()
        self.account_type = account_type
        self.data_set = data_set
        self.res_package_name = res_package_name

    def is_group_membership_editable(self) -> bool:
        return True

    def get_header_color(self, context: ResourceContext) -> int:
        return 0xFF000000

    def get_side_bar_color(self, context: ResourceContext) -> int:
        return 0xFFFFFFFF


@pytest.fixture
def package_manager():
    """Package manager holding the com.example resources."""
    pm = InMemoryPackageManager()
    pm.register_strings("com.example", EXTERNAL_STRINGS)
    pm.register_drawables("com.example", {2: "external-icon"})
    return pm


@pytest.fixture
def context(package_manager):
    """Resource context with local strings and drawables."""
    return InMemoryContext(
        strings=LOCAL_STRINGS,
        drawables={2: "local-icon"},
        package_manager=package_manager,
    )


@pytest.fixture
def make_account_type():
    """Factory for concrete account types."""
    return StubAccountType


@pytest.fixture
def log_messages():
    """Capture loguru messages at WARNING and above."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def isolated_config(tmp_path):
    """Keep configuration files inside the test's temporary directory."""
    ConfigManager.reset_instance()
    with patch('contact_model.infrastructure.config.config_manager.get_config_dir') as mock_dir:
        mock_dir.return_value = tmp_path / "config"
        yield mock_dir
    ConfigManager.reset_instance()
