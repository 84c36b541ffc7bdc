"""Account type populated from a definition document."""

from typing import Optional

from contact_model.domain.interfaces.inflater import StringInflater
from contact_model.domain.interfaces.resources import ResourceContext
from contact_model.domain.models.account_type import AccountType
from contact_model.domain.models.data_kind import DataKind
from contact_model.domain.models.definition import (
    AccountTypeDefinition,
    DataKindDefinition,
    EditFieldDefinition,
    EditTypeDefinition,
    InflaterDefinition,
)
from contact_model.domain.models.edit_field import EditField
from contact_model.domain.models.edit_type import EditType, EventEditType
from contact_model.domain.services.inflaters import (
    JoinInflater,
    SimpleInflater,
    TypeLabelInflater,
)
from contact_model.infrastructure.logging import get_logger
from contact_model.shared.types import ColorInt, ResId

logger = get_logger(__name__)


class DefinedAccountType(AccountType):
    """Account type whose kinds and hooks come from an ``AccountTypeDefinition``.

    This is how third-party sources describe themselves, so instances are
    external unless the definition says otherwise.
    """

    def __init__(self, definition: AccountTypeDefinition):
        super().__init__()
        self.definition = definition

        self.account_type = definition.account_type
        self.data_set = definition.data_set
        self.res_package_name = definition.res_package_name
        self.summary_res_package_name = definition.summary_res_package_name
        self.title_res = definition.title_res
        self.icon_res = definition.icon_res
        self.read_only = definition.read_only

        for kind_definition in definition.kinds:
            self.add_kind(build_data_kind(kind_definition))

        logger.info(
            f"Loaded account type {self.get_account_type_and_data_set()} "
            f"with {len(definition.kinds)} kinds"
        )

    def is_external(self) -> bool:
        return self.definition.external

    def is_group_membership_editable(self) -> bool:
        return self.definition.group_membership_editable

    def get_header_color(self, context: ResourceContext) -> ColorInt:
        return self.definition.header_color

    def get_side_bar_color(self, context: ResourceContext) -> ColorInt:
        return self.definition.side_bar_color

    def get_edit_contact_activity_class_name(self) -> Optional[str]:
        return self.definition.edit_contact_activity

    def get_create_contact_activity_class_name(self) -> Optional[str]:
        return self.definition.create_contact_activity

    def get_invite_contact_activity_class_name(self) -> Optional[str]:
        return self.definition.invite_contact_activity

    def get_view_contact_notify_service_class_name(self) -> Optional[str]:
        return self.definition.view_contact_notify_service

    def get_view_group_activity(self) -> Optional[str]:
        return self.definition.view_group_activity

    def get_view_stream_item_activity(self) -> Optional[str]:
        return self.definition.view_stream_item_activity

    def get_view_stream_item_photo_activity(self) -> Optional[str]:
        return self.definition.view_stream_item_photo_activity

    def get_invite_contact_action_res_id(self, context: ResourceContext) -> ResId:
        return self.definition.invite_action_label_res

    def get_extension_package_names(self) -> list[str]:
        return list(self.definition.extension_packages)


def build_edit_type(definition: EditTypeDefinition) -> EditType:
    """Create an EditType, or an EventEditType when ``year_optional`` is given."""
    if definition.year_optional is not None:
        edit_type: EditType = EventEditType(
            definition.raw_value, definition.label_res
        ).set_year_optional(definition.year_optional)
    else:
        edit_type = EditType(definition.raw_value, definition.label_res)

    return (edit_type
            .set_secondary(definition.secondary)
            .set_specific_max(definition.specific_max)
            .set_custom_column(definition.custom_column))


def build_edit_field(definition: EditFieldDefinition) -> EditField:
    return (EditField(definition.column, definition.title_res, definition.input_type)
            .set_min_lines(definition.min_lines)
            .set_optional(definition.optional)
            .set_short_form(definition.short_form)
            .set_long_form(definition.long_form)
            .set_is_full_name(definition.is_full_name))


def build_inflater(definition: Optional[InflaterDefinition],
                   kind: DataKind) -> Optional[StringInflater]:
    if definition is None:
        return None
    if definition.type_label:
        return TypeLabelInflater(kind)
    if definition.columns is not None:
        return JoinInflater(definition.columns, definition.separator)
    return SimpleInflater(definition.column, definition.string_res)


def build_data_kind(definition: DataKindDefinition) -> DataKind:
    """Create an unregistered DataKind from its definition.

    Args:
        definition: Validated kind definition

    Returns:
        DataKind ready for ``AccountType.add_kind``
    """
    kind = DataKind(
        mime_type=definition.mime_type,
        title_res=definition.title_res,
        weight=definition.weight,
        editable=definition.editable,
        icon_alt_res=definition.icon_alt_res,
        type_overall_max=definition.type_overall_max,
        type_column=definition.type_column,
        type_list=[build_edit_type(t) for t in definition.types],
        field_list=[build_edit_field(f) for f in definition.fields],
        default_values=dict(definition.default_values),
    )
    kind.action_header = build_inflater(definition.action_header, kind)
    kind.action_body = build_inflater(definition.action_body, kind)
    return kind
