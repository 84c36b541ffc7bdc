"""Command-line interface for Contact Model."""

import sys
import argparse
from pathlib import Path
from typing import Optional

from contact_model.domain.account_types import FallbackAccountType
from contact_model.domain.account_types.resources import DEFAULT_STRINGS
from contact_model.domain.models import AccountType, DataKind
from contact_model.domain.services import (
    apply_environment_collation,
    configure_collation,
    get_resource_text,
    sort_by_display_label,
)
from contact_model.infrastructure.config import get_config
from contact_model.infrastructure.logging import get_logger, setup_logging
from contact_model.infrastructure.parser import DefinitionParser
from contact_model.infrastructure.resources import InMemoryContext, InMemoryPackageManager
from contact_model.shared.exceptions import ContactModelError
from contact_model.shared.types import UNBOUNDED

# Version will be populated by setuptools_scm
try:
    from contact_model._version import version as __version__
except ImportError:
    __version__ = "0.0.0+unknown"


logger = get_logger(__name__)


def _format_cap(value: int) -> str:
    return "unbounded" if value == UNBOUNDED else str(value)


class ContactModelCLI:
    """Command-line interface for inspecting account type definitions."""

    def __init__(self):
        """Initialize CLI."""
        self.parser = self._create_parser()
        self.package_manager = InMemoryPackageManager()
        self.context = InMemoryContext(strings=DEFAULT_STRINGS, package_manager=self.package_manager)

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="contact-model",
            description="Inspect contact account types and their data kinds",
        )

        parser.add_argument(
            "--version",
            action="version",
            version=f"contact-model {__version__}"
        )

        parser.add_argument(
            "--debug",
            type=str,
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Set debug logging level"
        )

        subparsers = parser.add_subparsers(dest="command")

        kinds = subparsers.add_parser("kinds", help="List data kinds by weight")
        kinds.add_argument(
            "definition",
            nargs="?",
            type=Path,
            help="Account type definition file (default: built-in local account type)"
        )

        lookup = subparsers.add_parser("lookup", help="Show the data kind for a mime type")
        lookup.add_argument("definition", type=Path, help="Account type definition file")
        lookup.add_argument("mime_type", help="Mime type to look up")

        labels = subparsers.add_parser("labels", help="List account types by display label")
        labels.add_argument(
            "definitions",
            nargs="*",
            type=Path,
            help="Definition files (default: every file in the configured definitions_dir)"
        )
        labels.add_argument(
            "--include-fallback",
            action="store_true",
            help="Also list the built-in local account type"
        )

        return parser

    def parse_args(self, args: Optional[list] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Args:
            args: Arguments to parse (default: sys.argv[1:])

        Returns:
            Parsed arguments
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[list] = None) -> int:
        """Run the CLI.

        Args:
            args: Arguments to parse

        Returns:
            Exit code (0 = success, non-zero = error)
        """
        try:
            parsed_args = self.parse_args(args)
            config = get_config()

            setup_logging(
                log_level=parsed_args.debug or config.log_level,
                log_file=Path(config.log_file) if config.log_file else None,
                json_output=config.json_logs,
            )
            if config.collation_locale:
                configure_collation(config.collation_locale)
            else:
                apply_environment_collation()

            if parsed_args.command == "kinds":
                return self._cmd_kinds(parsed_args.definition)
            if parsed_args.command == "lookup":
                return self._cmd_lookup(parsed_args.definition, parsed_args.mime_type)
            if parsed_args.command == "labels":
                return self._cmd_labels(
                    parsed_args.definitions, parsed_args.include_fallback, config.definitions_dir
                )

            # If no command, show help
            self.parser.print_help()
            return 0

        except KeyboardInterrupt:
            print("\nInterrupted by user", file=sys.stderr)
            return 130  # Standard SIGINT exit code

        except (ContactModelError, FileNotFoundError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            logger.exception("Unexpected error in CLI")
            return 1

    # ========================================
    # Commands
    # ========================================

    def _load(self, path: Optional[Path]) -> AccountType:
        if path is None:
            return FallbackAccountType()
        return DefinitionParser(self.package_manager).parse_file(path)

    def _describe_kind(self, kind: DataKind) -> str:
        labels = []
        for edit_type in kind.type_list:
            text = get_resource_text(
                self.context, kind.res_package_name, edit_type.label_res, str(edit_type.raw_value)
            )
            if edit_type.specific_max != UNBOUNDED:
                text = f"{text}(max {edit_type.specific_max})"
            if edit_type.secondary:
                text = f"{text}*"
            labels.append(text)

        line = (f"{kind.weight:>5}  {kind.mime_type}  "
                f"max={_format_cap(kind.type_overall_max)}  fields={len(kind.field_list)}")
        if labels:
            line += f"  types={', '.join(labels)}"
        return line

    def _cmd_kinds(self, path: Optional[Path]) -> int:
        account_type = self._load(path)
        for kind in account_type.get_sorted_data_kinds():
            print(self._describe_kind(kind))
        return 0

    def _cmd_lookup(self, path: Path, mime_type: str) -> int:
        account_type = self._load(path)
        kind = account_type.get_kind_for_mimetype(mime_type)
        if kind is None:
            print(f"{mime_type} is not supported by {account_type.account_type}", file=sys.stderr)
            return 1

        print(self._describe_kind(kind))
        for field in kind.field_list:
            title = get_resource_text(
                self.context, kind.res_package_name, field.title_res, field.column
            )
            flags = [name for name, on in (
                ("optional", field.optional),
                ("multi-line", field.is_multi_line()),
                ("short", field.short_form),
                ("long", field.long_form),
            ) if on]
            suffix = f" [{', '.join(flags)}]" if flags else ""
            print(f"       {field.column}: {title}{suffix}")
        return 0

    def _cmd_labels(self, paths: list[Path], include_fallback: bool,
                    definitions_dir: Optional[str] = None) -> int:
        account_types: list[AccountType] = [self._load(p) for p in paths]
        if not paths and definitions_dir:
            parser = DefinitionParser(self.package_manager)
            account_types.extend(parser.parse_directory(Path(definitions_dir)))
        if include_fallback:
            account_types.append(FallbackAccountType())

        for account_type in sort_by_display_label(account_types, self.context):
            label = account_type.get_display_label(self.context) or ""
            external = " (external)" if account_type.is_external() else ""
            print(f"{label}\t{account_type.get_account_type_and_data_set()}{external}")
        return 0


def main() -> None:
    """Main entry point for CLI."""
    cli = ContactModelCLI()
    exit_code = cli.run()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
