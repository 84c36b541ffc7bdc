"""String inflaters that render data rows as display text."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence

from contact_model.domain.interfaces.resources import ResourceContext
from contact_model.shared.types import ContentValues, NO_RESOURCE, ResId, RowLike

if TYPE_CHECKING:
    from contact_model.domain.models.data_kind import DataKind


def row_to_values(row: RowLike) -> dict:
    """Copy a query row into a plain column mapping."""
    return {column: row[column] for column in row.keys()}


class BaseInflater(ABC):
    """Inflater whose row entry point delegates to the values entry point.

    Subclasses only implement ``inflate_values``, so both entry points
    agree for equivalent data.
    """

    def inflate_row(self, context: ResourceContext, row: RowLike) -> Optional[str]:
        return self.inflate_values(context, row_to_values(row))

    @abstractmethod
    def inflate_values(self, context: ResourceContext, values: ContentValues) -> Optional[str]:
        ...


class SimpleInflater(BaseInflater):
    """Renders one column, one string resource, or the resource formatted with the column.

    The string resource is a ``str.format`` template taking the column value
    as its single positional argument, e.g. ``"Call {}"``.
    """

    def __init__(self, column: Optional[str] = None, string_res: ResId = NO_RESOURCE):
        self.column = column
        self.string_res = string_res

    def inflate_values(self, context: ResourceContext, values: ContentValues) -> Optional[str]:
        column_value = None
        if self.column is not None and values.get(self.column) is not None:
            column_value = str(values[self.column])
        string_value = None
        if self.string_res != NO_RESOURCE:
            string_value = context.get_text(self.string_res)

        if string_value is not None and column_value is not None:
            return string_value.format(column_value)
        elif string_value is not None:
            return string_value
        else:
            return column_value

    def __repr__(self) -> str:
        return f"SimpleInflater(column={self.column!r}, string_res={self.string_res})"


class JoinInflater(BaseInflater):
    """Joins the non-empty values of several columns, e.g. a postal address."""

    def __init__(self, columns: Sequence[str], separator: str = ", "):
        self.columns = list(columns)
        self.separator = separator

    def inflate_values(self, context: ResourceContext, values: ContentValues) -> Optional[str]:
        parts = [str(values[c]).strip() for c in self.columns if values.get(c) not in (None, "")]
        parts = [p for p in parts if p]
        return self.separator.join(parts) if parts else None


class TypeLabelInflater(BaseInflater):
    """Renders the label of a row's variant.

    Variants that store a user-defined label read it from their custom
    column; all others resolve their label resource.
    """

    def __init__(self, kind: "DataKind"):
        self.kind = kind

    def inflate_values(self, context: ResourceContext, values: ContentValues) -> Optional[str]:
        if self.kind.type_column is None:
            return None
        raw_value = values.get(self.kind.type_column)
        if raw_value is None:
            return None

        edit_type = self.kind.get_edit_type(int(raw_value))
        if edit_type is None:
            return None
        if edit_type.custom_column is not None:
            custom = values.get(edit_type.custom_column)
            if custom:
                return str(custom)
        if edit_type.label_res == NO_RESOURCE:
            return None
        return context.get_text(edit_type.label_res)
