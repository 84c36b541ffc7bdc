"""Pydantic models describing an account type definition document.

A definition document declares an account type together with its data
kinds, their variants and fields. ``DefinedAccountType`` turns a validated
document into a populated registry.
"""

from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from contact_model.shared.types import NO_RESOURCE, UNBOUNDED


# =====================
# Base Pydantic Model
# =====================

class StrictModel(BaseModel):
    """Base model with strict validation."""
    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )


def _validate_cap(v: int) -> int:
    if v < UNBOUNDED:
        raise ValueError(f"Cardinality cap must be {UNBOUNDED} (unbounded) or >= 0: {v}")
    return v


# =====================
# Inflaters
# =====================

class InflaterDefinition(StrictModel):
    """How a row of a kind is rendered as text.

    Exactly one style applies: ``column``/``string_res`` for a simple
    inflater, ``columns`` for a joined one, or ``type_label`` for the label
    of the row's variant.
    """
    column: Optional[str] = None
    string_res: int = NO_RESOURCE
    columns: Optional[list[str]] = None
    separator: str = ", "
    type_label: bool = False

    @model_validator(mode='after')
    def validate_style(self) -> 'InflaterDefinition':
        """Reject definitions mixing inflater styles."""
        simple = self.column is not None or self.string_res != NO_RESOURCE
        styles = [simple, self.columns is not None, self.type_label]
        if sum(styles) != 1:
            raise ValueError(
                "Inflater needs exactly one of column/string_res, columns or type_label"
            )
        if self.columns is not None and not self.columns:
            raise ValueError("Inflater columns must not be empty")
        return self


# =====================
# Variants and fields
# =====================

class EditTypeDefinition(StrictModel):
    """One labeled variant of a data kind."""
    raw_value: int
    label_res: int = NO_RESOURCE
    secondary: bool = False
    specific_max: int = UNBOUNDED
    custom_column: Optional[str] = None
    year_optional: Optional[bool] = None

    @field_validator('specific_max')
    @classmethod
    def validate_specific_max(cls, v: int) -> int:
        return _validate_cap(v)


class EditFieldDefinition(StrictModel):
    """One editable column of a data kind row."""
    column: str = Field(..., min_length=1)
    title_res: int = NO_RESOURCE
    input_type: int = Field(0, ge=0)
    min_lines: int = Field(0, ge=0)
    optional: bool = False
    short_form: bool = False
    long_form: bool = False
    is_full_name: bool = False


# =====================
# Data kinds
# =====================

class DataKindDefinition(StrictModel):
    """A data kind with its variants and fields."""
    mime_type: str = Field(..., min_length=1)
    title_res: int = NO_RESOURCE
    icon_alt_res: int = NO_RESOURCE
    weight: int = 0
    editable: bool = True
    type_overall_max: int = UNBOUNDED
    type_column: Optional[str] = None
    types: list[EditTypeDefinition] = Field(default_factory=list)
    fields: list[EditFieldDefinition] = Field(default_factory=list)
    action_header: Optional[InflaterDefinition] = None
    action_body: Optional[InflaterDefinition] = None
    default_values: dict[str, Any] = Field(default_factory=dict)

    @field_validator('type_overall_max')
    @classmethod
    def validate_type_overall_max(cls, v: int) -> int:
        return _validate_cap(v)

    @model_validator(mode='after')
    def validate_types(self) -> 'DataKindDefinition':
        """Check variant codes are unique and typed kinds name their type column."""
        seen = set()
        for edit_type in self.types:
            if edit_type.raw_value in seen:
                raise ValueError(
                    f"Duplicate raw_value {edit_type.raw_value} in {self.mime_type}"
                )
            seen.add(edit_type.raw_value)
        if self.types and self.type_column is None:
            raise ValueError(f"Kind {self.mime_type} declares types but no type_column")
        return self


# =====================
# Account type
# =====================

class AccountTypeDefinition(StrictModel):
    """Complete account type definition document."""
    account_type: str = Field(..., min_length=1)
    data_set: Optional[str] = None
    res_package_name: Optional[str] = None
    summary_res_package_name: Optional[str] = None
    title_res: int = NO_RESOURCE
    icon_res: int = NO_RESOURCE
    read_only: bool = False
    external: bool = True
    group_membership_editable: bool = True
    header_color: int = 0
    side_bar_color: int = 0
    edit_contact_activity: Optional[str] = None
    create_contact_activity: Optional[str] = None
    invite_contact_activity: Optional[str] = None
    invite_action_label_res: int = NO_RESOURCE
    view_contact_notify_service: Optional[str] = None
    view_group_activity: Optional[str] = None
    view_stream_item_activity: Optional[str] = None
    view_stream_item_photo_activity: Optional[str] = None
    extension_packages: list[str] = Field(default_factory=list)
    strings: dict[int, str] = Field(default_factory=dict)
    kinds: list[DataKindDefinition] = Field(default_factory=list)

    @model_validator(mode='before')
    @classmethod
    def default_summary_package(cls, data: Any) -> Any:
        """Summary resources live in the resource package unless stated otherwise."""
        if isinstance(data, dict) and data.get('summary_res_package_name') is None:
            if data.get('res_package_name') is not None:
                data = {**data, 'summary_res_package_name': data['res_package_name']}
        return data

    @model_validator(mode='after')
    def validate_kinds(self) -> 'AccountTypeDefinition':
        """Reject documents declaring the same mime type twice."""
        seen = set()
        for kind in self.kinds:
            if kind.mime_type in seen:
                raise ValueError(f"Duplicate data kind {kind.mime_type}")
            seen.add(kind.mime_type)
        return self
