"""YAML parser for account type definition files."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from contact_model.domain.account_types.defined import DefinedAccountType
from contact_model.domain.models.definition import AccountTypeDefinition
from contact_model.infrastructure.logging import get_logger
from contact_model.infrastructure.resources.in_memory import InMemoryPackageManager
from contact_model.shared.exceptions import DefinitionError, ParseError

logger = get_logger(__name__)


class YamlParserError(ParseError):
    """YAML parsing error."""
    pass


class DefinitionParser:
    """Parser for account type definition files.

    When given a package manager, the ``strings`` table of each definition
    is registered under the definition's summary resource package so its
    labels resolve.
    """

    def __init__(self, package_manager: Optional[InMemoryPackageManager] = None):
        self.package_manager = package_manager

    def parse_file(self, filepath: Path) -> DefinedAccountType:
        """Parse a YAML definition file.

        Args:
            filepath: Path to YAML file

        Returns:
            Populated DefinedAccountType

        Raises:
            FileNotFoundError: If file doesn't exist
            YamlParserError: If the file is not readable YAML
            DefinitionError: If the document is not a valid definition
        """
        if not filepath.exists():
            raise FileNotFoundError(f"Definition file not found: {filepath}")

        logger.info(f"Parsing definition file: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise YamlParserError(f"Invalid YAML: {e}", file=str(filepath)) from e
        except OSError as e:
            raise YamlParserError(f"Failed to read file: {e}", file=str(filepath)) from e

        if data is None:
            data = {}

        return self.parse_data(data, source=str(filepath))

    def parse_directory(self, directory: Path) -> list[DefinedAccountType]:
        """Parse every ``*.yaml``/``*.yml`` file of a directory, in name order."""
        files = sorted(p for p in directory.iterdir() if p.suffix in ('.yaml', '.yml'))
        return [self.parse_file(p) for p in files]

    def parse_data(self, data: Dict[str, Any], source: str = "unknown") -> DefinedAccountType:
        """Parse a definition mapping.

        Args:
            data: Parsed YAML data
            source: Source identifier for errors

        Returns:
            Populated DefinedAccountType

        Raises:
            DefinitionError: If validation fails
        """
        if not isinstance(data, dict):
            raise DefinitionError(f"Expected dict, got {type(data).__name__}", file=source)

        try:
            definition = AccountTypeDefinition.model_validate(data)
        except ValidationError as e:
            raise DefinitionError(
                f"Invalid account type definition in {source}: {e}",
                file=source, errors=e.errors()
            ) from e

        if self.package_manager is not None and definition.strings:
            if definition.summary_res_package_name is None:
                logger.warning(f"{source}: strings given without a resource package, ignored")
            else:
                # Kinds resolve through res_package_name, labels through the summary package
                packages = {definition.summary_res_package_name, definition.res_package_name}
                for package_name in sorted(p for p in packages if p is not None):
                    self.package_manager.register_strings(package_name, definition.strings)

        return DefinedAccountType(definition)
