"""Data kind definition: one category of contact data."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from contact_model.domain.interfaces.inflater import StringInflater
from contact_model.domain.models.edit_field import EditField
from contact_model.domain.models.edit_type import EditType
from contact_model.shared.types import NO_RESOURCE, ResId, UNBOUNDED


@dataclass(eq=False)
class DataKind:
    """Constraints and presentation details for one mime type.

    A kind lists the variants rows may take (``type_list``), the fields a
    row carries (``field_list``) and the cap on rows across all variants.
    When ``type_list`` is non-empty its raw values are the only valid
    variant codes for rows of this kind.

    ``res_package_name`` is stamped by ``AccountType.add_kind``.
    """
    mime_type: str
    title_res: ResId = NO_RESOURCE
    weight: int = 0
    editable: bool = True
    res_package_name: Optional[str] = None
    icon_alt_res: ResId = NO_RESOURCE
    type_overall_max: int = UNBOUNDED
    type_column: Optional[str] = None
    type_list: list[EditType] = field(default_factory=list)
    field_list: list[EditField] = field(default_factory=list)
    action_header: Optional[StringInflater] = None
    action_body: Optional[StringInflater] = None
    default_values: dict[str, Any] = field(default_factory=dict)

    def get_edit_type(self, raw_value: int) -> Optional[EditType]:
        """Get the variant with the given raw value.

        Args:
            raw_value: Variant code

        Returns:
            Matching EditType, or None if this kind has no such variant
        """
        for edit_type in self.type_list:
            if edit_type.raw_value == raw_value:
                return edit_type
        return None

    def accepts_type(self, raw_value: int) -> bool:
        """Check if a row of this kind may use the given variant code."""
        if not self.type_list:
            return True
        return self.get_edit_type(raw_value) is not None

    def get_valid_types(self,
                        existing: Iterable[int],
                        for_type: Optional[EditType] = None) -> list[EditType]:
        """Get the variants a new or edited row may still take.

        A variant is valid while its ``specific_max`` is unbounded or not yet
        reached. Secondary variants are only offered when they equal
        ``for_type``, which is also always kept so a row can keep its current
        variant. Once ``type_overall_max`` is reached only ``for_type``
        remains.

        Args:
            existing: Raw values of the rows already present
            for_type: Variant of the row being edited, if any

        Returns:
            Valid variants in ``type_list`` order
        """
        counts = Counter(existing)
        total = sum(counts.values())
        if self.type_overall_max != UNBOUNDED and total >= self.type_overall_max:
            return [t for t in self.type_list if for_type is not None and t == for_type]

        valid = []
        for edit_type in self.type_list:
            allowed = (edit_type.specific_max == UNBOUNDED
                       or counts[edit_type.raw_value] < edit_type.specific_max)
            allowed = allowed and not edit_type.secondary
            if for_type is not None and edit_type == for_type:
                allowed = True
            if allowed:
                valid.append(edit_type)
        return valid

    def can_insert(self, existing: Iterable[int]) -> bool:
        """Check if another row of this kind may be added.

        Args:
            existing: Raw values of the rows already present

        Returns:
            True if the overall cap allows it and, for typed kinds, some
            variant is still available
        """
        existing = list(existing)
        if self.type_overall_max != UNBOUNDED and len(existing) >= self.type_overall_max:
            return False
        if not self.type_list:
            return True
        return len(self.get_valid_types(existing)) > 0

    def __repr__(self) -> str:
        return f"DataKind(mime_type={self.mime_type!r}, weight={self.weight})"
