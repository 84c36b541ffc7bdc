"""String inflater capability."""

from typing import Optional, Protocol, runtime_checkable

from contact_model.domain.interfaces.resources import ResourceContext
from contact_model.shared.types import ContentValues, RowLike


@runtime_checkable
class StringInflater(Protocol):
    """Turns the stored values of a data row into user-facing text.

    For example an inflater can combine the columns of a postal address
    using a string resource before it is presented. Both entry points must
    produce the same text for equivalent data.
    """

    def inflate_row(self, context: ResourceContext, row: RowLike) -> Optional[str]:
        """Inflate a materialized query row.

        Args:
            context: Resource context for label lookups
            row: Row exposing keys() and item access

        Returns:
            Display text, or None if nothing can be shown
        """
        ...

    def inflate_values(self, context: ResourceContext, values: ContentValues) -> Optional[str]:
        """Inflate a mapping of pending edits.

        Args:
            context: Resource context for label lookups
            values: Column to value mapping

        Returns:
            Display text, or None if nothing can be shown
        """
        ...
