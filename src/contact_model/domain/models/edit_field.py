"""Editable field descriptors for data kind rows."""

from contact_model.shared.types import ResId, TYPE_TEXT_FLAG_MULTI_LINE


class EditField:
    """Description of a user-editable field on a data kind row.

    Holds the storage column, the input type bits to apply to the editor and
    display hints. ``short_form`` and ``long_form`` mark fields shown in the
    collapsed and expanded editor respectively.
    """

    def __init__(self, column: str, title_res: ResId, input_type: int = 0):
        self.column = column
        self.title_res = title_res
        self.input_type = input_type
        self.min_lines = 0
        self.optional = False
        self.short_form = False
        self.long_form = False
        self.is_full_name = False

    def set_optional(self, optional: bool) -> "EditField":
        self.optional = optional
        return self

    def set_short_form(self, short_form: bool) -> "EditField":
        self.short_form = short_form
        return self

    def set_long_form(self, long_form: bool) -> "EditField":
        self.long_form = long_form
        return self

    def set_min_lines(self, min_lines: int) -> "EditField":
        self.min_lines = min_lines
        return self

    def set_is_full_name(self, is_full_name: bool) -> "EditField":
        self.is_full_name = is_full_name
        return self

    def is_multi_line(self) -> bool:
        """Check if the multi-line flag is set in the input type."""
        return (self.input_type & TYPE_TEXT_FLAG_MULTI_LINE) != 0

    def __repr__(self) -> str:
        return f"EditField(column={self.column!r}, title_res={self.title_res})"
