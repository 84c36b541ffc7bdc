"""Built-in account type for contacts stored only on the device."""

from contact_model.domain.account_types.resources import DrawableRes, StringRes
from contact_model.domain.interfaces.resources import ResourceContext
from contact_model.domain.models.account_type import AccountType
from contact_model.domain.models.data_kind import DataKind
from contact_model.domain.models.edit_field import EditField
from contact_model.domain.models.edit_type import EditType, EventEditType
from contact_model.domain.services.inflaters import (
    JoinInflater,
    SimpleInflater,
    TypeLabelInflater,
)
from contact_model.infrastructure.logging import get_logger
from contact_model.shared.types import (
    ColorInt,
    DATA1, DATA2, DATA3, DATA4, DATA5, DATA6, DATA7, DATA8, DATA9, DATA10,
    MIMETYPE_EMAIL,
    MIMETYPE_EVENT,
    MIMETYPE_NICKNAME,
    MIMETYPE_NOTE,
    MIMETYPE_PHONE,
    MIMETYPE_POSTAL,
    MIMETYPE_STRUCTURED_NAME,
    TYPE_CLASS_DATETIME,
    TYPE_CLASS_PHONE,
    TYPE_CLASS_TEXT,
    TYPE_TEXT_FLAG_CAP_SENTENCES,
    TYPE_TEXT_FLAG_CAP_WORDS,
    TYPE_TEXT_FLAG_MULTI_LINE,
    TYPE_TEXT_VARIATION_EMAIL_ADDRESS,
    TYPE_TEXT_VARIATION_PERSON_NAME,
    TYPE_TEXT_VARIATION_POSTAL_ADDRESS,
)

logger = get_logger(__name__)

FLAGS_PERSON_NAME = TYPE_CLASS_TEXT | TYPE_TEXT_FLAG_CAP_WORDS | TYPE_TEXT_VARIATION_PERSON_NAME
FLAGS_EMAIL = TYPE_CLASS_TEXT | TYPE_TEXT_VARIATION_EMAIL_ADDRESS
FLAGS_POSTAL = (TYPE_CLASS_TEXT | TYPE_TEXT_VARIATION_POSTAL_ADDRESS
                | TYPE_TEXT_FLAG_CAP_WORDS | TYPE_TEXT_FLAG_MULTI_LINE)
FLAGS_NOTE = TYPE_CLASS_TEXT | TYPE_TEXT_FLAG_CAP_SENTENCES | TYPE_TEXT_FLAG_MULTI_LINE

HEADER_COLOR: ColorInt = 0xFF7F93BC
SIDE_BAR_COLOR: ColorInt = 0xFFBDC7B8


class Phone:
    """Phone variant codes."""
    TYPE_CUSTOM = 0
    TYPE_HOME = 1
    TYPE_MOBILE = 2
    TYPE_WORK = 3
    TYPE_FAX_WORK = 4
    TYPE_FAX_HOME = 5
    TYPE_PAGER = 6
    TYPE_OTHER = 7


class Email:
    """Email variant codes."""
    TYPE_CUSTOM = 0
    TYPE_HOME = 1
    TYPE_WORK = 2
    TYPE_OTHER = 3
    TYPE_MOBILE = 4


class StructuredPostal:
    """Postal address variant codes."""
    TYPE_CUSTOM = 0
    TYPE_HOME = 1
    TYPE_WORK = 2
    TYPE_OTHER = 3


class Event:
    """Event variant codes."""
    TYPE_CUSTOM = 0
    TYPE_ANNIVERSARY = 1
    TYPE_OTHER = 2
    TYPE_BIRTHDAY = 3


class FallbackAccountType(AccountType):
    """Account type for contacts that are not synced anywhere.

    Uses resources of the current package and supports names, phone
    numbers, email and postal addresses, nicknames, notes and events.
    """

    def __init__(self):
        super().__init__()
        self.account_type = None
        self.data_set = None
        self.title_res = StringRes.ACCOUNT_PHONE
        self.icon_res = DrawableRes.IC_LAUNCHER_CONTACTS

        self.add_data_kind_structured_name()
        self.add_data_kind_phone()
        self.add_data_kind_email()
        self.add_data_kind_structured_postal()
        self.add_data_kind_nickname()
        self.add_data_kind_note()
        self.add_data_kind_event()
        logger.debug(f"Built fallback account type with {len(self._kinds)} kinds")

    def is_group_membership_editable(self) -> bool:
        return False

    def get_header_color(self, context: ResourceContext) -> ColorInt:
        return HEADER_COLOR

    def get_side_bar_color(self, context: ResourceContext) -> ColorInt:
        return SIDE_BAR_COLOR

    # ========================================
    # Data kind builders
    # ========================================

    def add_data_kind_structured_name(self) -> DataKind:
        kind = self.add_kind(DataKind(MIMETYPE_STRUCTURED_NAME, StringRes.NAME_LABELS_GROUP, -1))
        kind.action_header = SimpleInflater(string_res=StringRes.NAME_LABELS_GROUP)
        kind.action_body = SimpleInflater(DATA1)
        kind.type_overall_max = 1

        kind.field_list = [
            EditField(DATA1, StringRes.FULL_NAME, FLAGS_PERSON_NAME)
                .set_short_form(True).set_is_full_name(True),
            EditField(DATA4, StringRes.NAME_PREFIX, FLAGS_PERSON_NAME)
                .set_long_form(True).set_optional(True),
            EditField(DATA2, StringRes.NAME_GIVEN, FLAGS_PERSON_NAME).set_long_form(True),
            EditField(DATA5, StringRes.NAME_MIDDLE, FLAGS_PERSON_NAME)
                .set_long_form(True).set_optional(True),
            EditField(DATA3, StringRes.NAME_FAMILY, FLAGS_PERSON_NAME).set_long_form(True),
            EditField(DATA6, StringRes.NAME_SUFFIX, FLAGS_PERSON_NAME)
                .set_long_form(True).set_optional(True),
        ]
        return kind

    def add_data_kind_phone(self) -> DataKind:
        kind = self.add_kind(DataKind(MIMETYPE_PHONE, StringRes.PHONE_LABELS_GROUP, 10))
        kind.type_column = DATA2
        kind.action_header = TypeLabelInflater(kind)
        kind.action_body = SimpleInflater(DATA1)

        kind.type_list = [
            EditType(Phone.TYPE_HOME, StringRes.PHONE_HOME),
            EditType(Phone.TYPE_MOBILE, StringRes.PHONE_MOBILE),
            EditType(Phone.TYPE_WORK, StringRes.PHONE_WORK),
            EditType(Phone.TYPE_FAX_WORK, StringRes.PHONE_FAX_WORK).set_secondary(True),
            EditType(Phone.TYPE_FAX_HOME, StringRes.PHONE_FAX_HOME).set_secondary(True),
            EditType(Phone.TYPE_PAGER, StringRes.PHONE_PAGER).set_secondary(True),
            EditType(Phone.TYPE_OTHER, StringRes.PHONE_OTHER),
            EditType(Phone.TYPE_CUSTOM, StringRes.PHONE_CUSTOM)
                .set_secondary(True).set_custom_column(DATA3),
        ]
        kind.field_list = [
            EditField(DATA1, StringRes.PHONE_LABELS_GROUP, TYPE_CLASS_PHONE),
        ]
        return kind

    def add_data_kind_email(self) -> DataKind:
        kind = self.add_kind(DataKind(MIMETYPE_EMAIL, StringRes.EMAIL_LABELS_GROUP, 15))
        kind.type_column = DATA2
        kind.action_header = TypeLabelInflater(kind)
        kind.action_body = SimpleInflater(DATA1)

        kind.type_list = [
            EditType(Email.TYPE_HOME, StringRes.EMAIL_HOME),
            EditType(Email.TYPE_WORK, StringRes.EMAIL_WORK),
            EditType(Email.TYPE_OTHER, StringRes.EMAIL_OTHER),
            EditType(Email.TYPE_MOBILE, StringRes.EMAIL_MOBILE),
            EditType(Email.TYPE_CUSTOM, StringRes.EMAIL_CUSTOM)
                .set_secondary(True).set_custom_column(DATA3),
        ]
        kind.field_list = [
            EditField(DATA1, StringRes.EMAIL_LABELS_GROUP, FLAGS_EMAIL),
        ]
        return kind

    def add_data_kind_structured_postal(self) -> DataKind:
        kind = self.add_kind(DataKind(MIMETYPE_POSTAL, StringRes.POSTAL_LABELS_GROUP, 25))
        kind.type_column = DATA2
        kind.action_header = TypeLabelInflater(kind)
        kind.action_body = JoinInflater([DATA4, DATA7, DATA8, DATA9, DATA10])

        kind.type_list = [
            EditType(StructuredPostal.TYPE_HOME, StringRes.POSTAL_HOME),
            EditType(StructuredPostal.TYPE_WORK, StringRes.POSTAL_WORK),
            EditType(StructuredPostal.TYPE_OTHER, StringRes.POSTAL_OTHER),
            EditType(StructuredPostal.TYPE_CUSTOM, StringRes.POSTAL_CUSTOM)
                .set_secondary(True).set_custom_column(DATA3),
        ]
        kind.field_list = [
            EditField(DATA4, StringRes.POSTAL_STREET, FLAGS_POSTAL).set_min_lines(3),
            EditField(DATA7, StringRes.POSTAL_CITY, FLAGS_POSTAL & ~TYPE_TEXT_FLAG_MULTI_LINE),
            EditField(DATA8, StringRes.POSTAL_REGION, FLAGS_POSTAL & ~TYPE_TEXT_FLAG_MULTI_LINE)
                .set_optional(True),
            EditField(DATA9, StringRes.POSTAL_POSTCODE, FLAGS_POSTAL & ~TYPE_TEXT_FLAG_MULTI_LINE),
            EditField(DATA10, StringRes.POSTAL_COUNTRY, FLAGS_POSTAL & ~TYPE_TEXT_FLAG_MULTI_LINE)
                .set_optional(True),
        ]
        return kind

    def add_data_kind_nickname(self) -> DataKind:
        kind = self.add_kind(DataKind(MIMETYPE_NICKNAME, StringRes.NICKNAME_LABELS_GROUP, 115))
        kind.type_overall_max = 1
        kind.action_header = SimpleInflater(string_res=StringRes.NICKNAME_LABELS_GROUP)
        kind.action_body = SimpleInflater(DATA1)

        kind.field_list = [
            EditField(DATA1, StringRes.NICKNAME_LABELS_GROUP, FLAGS_PERSON_NAME),
        ]
        return kind

    def add_data_kind_note(self) -> DataKind:
        kind = self.add_kind(DataKind(MIMETYPE_NOTE, StringRes.NOTE_LABELS_GROUP, 110))
        kind.type_overall_max = 1
        kind.action_header = SimpleInflater(string_res=StringRes.NOTE_LABELS_GROUP)
        kind.action_body = SimpleInflater(DATA1)

        kind.field_list = [
            EditField(DATA1, StringRes.NOTE_LABELS_GROUP, FLAGS_NOTE).set_min_lines(3),
        ]
        return kind

    def add_data_kind_event(self) -> DataKind:
        kind = self.add_kind(DataKind(MIMETYPE_EVENT, StringRes.EVENT_LABELS_GROUP, 120))
        kind.type_column = DATA2
        kind.action_header = TypeLabelInflater(kind)
        kind.action_body = SimpleInflater(DATA1)
        kind.default_values = {DATA2: Event.TYPE_BIRTHDAY}

        kind.type_list = [
            EventEditType(Event.TYPE_BIRTHDAY, StringRes.EVENT_BIRTHDAY)
                .set_year_optional(True).set_specific_max(1),
            EventEditType(Event.TYPE_ANNIVERSARY, StringRes.EVENT_ANNIVERSARY),
            EventEditType(Event.TYPE_OTHER, StringRes.EVENT_OTHER),
            EventEditType(Event.TYPE_CUSTOM, StringRes.EVENT_CUSTOM)
                .set_secondary(True).set_custom_column(DATA3),
        ]
        kind.field_list = [
            EditField(DATA1, StringRes.EVENT_DATE, TYPE_CLASS_DATETIME),
        ]
        return kind
