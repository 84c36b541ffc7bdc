"""Edit type descriptors: the labeled variants of a data kind."""

from typing import Optional

from contact_model.shared.types import ResId, UNBOUNDED


class EditType:
    """Description of a specific "type" or "label" of a data kind row.

    Examples are the Home and Work variants of a phone number. Carries the
    cap on how many rows of this variant a contact may have and, for
    user-defined labels, the column that stores the custom label text.

    Two edit types are equal when their ``raw_value`` codes match, whatever
    their other attributes or concrete class.
    """

    def __init__(self, raw_value: int, label_res: ResId):
        self.raw_value = raw_value
        self.label_res = label_res
        self.secondary = False
        # Number of entries allowed for this type; UNBOUNDED if not specified
        self.specific_max = UNBOUNDED
        self.custom_column: Optional[str] = None

    def set_secondary(self, secondary: bool) -> "EditType":
        self.secondary = secondary
        return self

    def set_specific_max(self, specific_max: int) -> "EditType":
        self.specific_max = specific_max
        return self

    def set_custom_column(self, custom_column: Optional[str]) -> "EditType":
        self.custom_column = custom_column
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EditType):
            return other.raw_value == self.raw_value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.raw_value)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(raw_value={self.raw_value}, "
                f"label_res={self.label_res}, specific_max={self.specific_max})")


class EventEditType(EditType):
    """Edit type for dated rows (birthdays, anniversaries)."""

    def __init__(self, raw_value: int, label_res: ResId):
        super().__init__(raw_value, label_res)
        self._year_optional = False

    def is_year_optional(self) -> bool:
        """Whether a date of this variant may omit its year."""
        return self._year_optional

    def set_year_optional(self, year_optional: bool) -> "EventEditType":
        self._year_optional = year_optional
        return self
