"""Definition file parsing."""

from contact_model.infrastructure.parser.yaml_parser import DefinitionParser, YamlParserError

__all__ = ["DefinitionParser", "YamlParserError"]
