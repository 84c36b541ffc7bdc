"""Locale-aware ordering of account types by display label."""

import locale
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, Protocol, runtime_checkable

from contact_model.domain.interfaces.resources import ResourceContext
from contact_model.infrastructure.logging import get_logger
from contact_model.shared.exceptions import CollationError

if TYPE_CHECKING:
    from contact_model.domain.models.account_type import AccountType

logger = get_logger(__name__)

# Set once LC_COLLATE has been chosen explicitly or from the environment
_collation_configured = False


@runtime_checkable
class Collator(Protocol):
    """Compares two strings under some collation rules."""

    def compare(self, source: str, target: str) -> int:
        """Return <0, 0 or >0 as source sorts before, with or after target."""
        ...


class LocaleCollator:
    """Collator following the process LC_COLLATE rules.

    Python starts with the "C" collation whatever the environment says, so
    the first collator applies the environment locale unless
    ``configure_collation`` already chose one. Ordering of accented and
    non-Latin text therefore depends on the locale the host has configured.
    """

    def __init__(self):
        if not _collation_configured:
            apply_environment_collation()

    def compare(self, source: str, target: str) -> int:
        return locale.strcoll(source, target)


def configure_collation(locale_name: str) -> None:
    """Set the process LC_COLLATE category.

    Args:
        locale_name: Locale such as "de_DE.UTF-8"; empty uses the environment

    Raises:
        CollationError: If the locale is not installed
    """
    global _collation_configured
    try:
        locale.setlocale(locale.LC_COLLATE, locale_name)
    except locale.Error as e:
        raise CollationError(f"Unsupported collation locale: {locale_name!r}",
                             locale_name=locale_name) from e
    _collation_configured = True
    logger.debug(f"Collation locale set to {locale.setlocale(locale.LC_COLLATE)}")


def apply_environment_collation() -> None:
    """Set LC_COLLATE from the environment (LC_ALL, LC_COLLATE, LANG).

    An environment naming a locale that is not installed leaves the current
    collation in place and logs a warning.
    """
    global _collation_configured
    try:
        configure_collation("")
    except CollationError as e:
        _collation_configured = True
        logger.warning(f"{e}: keeping {locale.setlocale(locale.LC_COLLATE)!r} collation")


class DisplayLabelComparator:
    """Compares account types by their display label in the current locale."""

    def __init__(self, context: ResourceContext, collator: Optional[Collator] = None):
        self._context = context
        self._collator = collator if collator is not None else LocaleCollator()

    def _get_display_label(self, account_type: "AccountType") -> str:
        label = account_type.get_display_label(self._context)
        return "" if label is None else str(label)

    def compare(self, lhs: "AccountType", rhs: "AccountType") -> int:
        return self._collator.compare(self._get_display_label(lhs), self._get_display_label(rhs))

    __call__ = compare

    def sort_key(self) -> Callable[["AccountType"], Any]:
        """Key function for sorted() and list.sort()."""
        return cmp_to_key(self.compare)


def sort_by_display_label(account_types: Iterable["AccountType"],
                          context: ResourceContext,
                          collator: Optional[Collator] = None) -> list["AccountType"]:
    """Sort account types by display label.

    Args:
        account_types: Account types to sort
        context: Resource context used to resolve labels
        collator: Collation rules; the process locale when omitted

    Returns:
        New sorted list
    """
    comparator = DisplayLabelComparator(context, collator)
    return sorted(account_types, key=comparator.sort_key())
