"""Resource ids and default strings of the built-in account types."""


class StringRes:
    """String resource ids."""
    ACCOUNT_PHONE = 0x7F0B0001

    NAME_LABELS_GROUP = 0x7F0B0010
    FULL_NAME = 0x7F0B0011
    NAME_PREFIX = 0x7F0B0012
    NAME_GIVEN = 0x7F0B0013
    NAME_MIDDLE = 0x7F0B0014
    NAME_FAMILY = 0x7F0B0015
    NAME_SUFFIX = 0x7F0B0016

    PHONE_LABELS_GROUP = 0x7F0B0020
    PHONE_HOME = 0x7F0B0021
    PHONE_MOBILE = 0x7F0B0022
    PHONE_WORK = 0x7F0B0023
    PHONE_FAX_WORK = 0x7F0B0024
    PHONE_FAX_HOME = 0x7F0B0025
    PHONE_PAGER = 0x7F0B0026
    PHONE_OTHER = 0x7F0B0027
    PHONE_CUSTOM = 0x7F0B0028

    EMAIL_LABELS_GROUP = 0x7F0B0030
    EMAIL_HOME = 0x7F0B0031
    EMAIL_WORK = 0x7F0B0032
    EMAIL_OTHER = 0x7F0B0033
    EMAIL_MOBILE = 0x7F0B0034
    EMAIL_CUSTOM = 0x7F0B0035

    POSTAL_LABELS_GROUP = 0x7F0B0040
    POSTAL_HOME = 0x7F0B0041
    POSTAL_WORK = 0x7F0B0042
    POSTAL_OTHER = 0x7F0B0043
    POSTAL_CUSTOM = 0x7F0B0044
    POSTAL_STREET = 0x7F0B0045
    POSTAL_CITY = 0x7F0B0046
    POSTAL_REGION = 0x7F0B0047
    POSTAL_POSTCODE = 0x7F0B0048
    POSTAL_COUNTRY = 0x7F0B0049

    NICKNAME_LABELS_GROUP = 0x7F0B0050
    NOTE_LABELS_GROUP = 0x7F0B0060

    EVENT_LABELS_GROUP = 0x7F0B0070
    EVENT_BIRTHDAY = 0x7F0B0071
    EVENT_ANNIVERSARY = 0x7F0B0072
    EVENT_OTHER = 0x7F0B0073
    EVENT_CUSTOM = 0x7F0B0074
    EVENT_DATE = 0x7F0B0075


class DrawableRes:
    """Drawable resource ids."""
    IC_LAUNCHER_CONTACTS = 0x7F020001


DEFAULT_STRINGS: dict[int, str] = {
    StringRes.ACCOUNT_PHONE: "Phone-only, unsynced contact",

    StringRes.NAME_LABELS_GROUP: "Name",
    StringRes.FULL_NAME: "Name",
    StringRes.NAME_PREFIX: "Name prefix",
    StringRes.NAME_GIVEN: "Given name",
    StringRes.NAME_MIDDLE: "Middle name",
    StringRes.NAME_FAMILY: "Family name",
    StringRes.NAME_SUFFIX: "Name suffix",

    StringRes.PHONE_LABELS_GROUP: "Phone",
    StringRes.PHONE_HOME: "Home",
    StringRes.PHONE_MOBILE: "Mobile",
    StringRes.PHONE_WORK: "Work",
    StringRes.PHONE_FAX_WORK: "Work Fax",
    StringRes.PHONE_FAX_HOME: "Home Fax",
    StringRes.PHONE_PAGER: "Pager",
    StringRes.PHONE_OTHER: "Other",
    StringRes.PHONE_CUSTOM: "Custom",

    StringRes.EMAIL_LABELS_GROUP: "Email",
    StringRes.EMAIL_HOME: "Home",
    StringRes.EMAIL_WORK: "Work",
    StringRes.EMAIL_OTHER: "Other",
    StringRes.EMAIL_MOBILE: "Mobile",
    StringRes.EMAIL_CUSTOM: "Custom",

    StringRes.POSTAL_LABELS_GROUP: "Address",
    StringRes.POSTAL_HOME: "Home",
    StringRes.POSTAL_WORK: "Work",
    StringRes.POSTAL_OTHER: "Other",
    StringRes.POSTAL_CUSTOM: "Custom",
    StringRes.POSTAL_STREET: "Street",
    StringRes.POSTAL_CITY: "City",
    StringRes.POSTAL_REGION: "State",
    StringRes.POSTAL_POSTCODE: "ZIP code",
    StringRes.POSTAL_COUNTRY: "Country",

    StringRes.NICKNAME_LABELS_GROUP: "Nickname",
    StringRes.NOTE_LABELS_GROUP: "Notes",

    StringRes.EVENT_LABELS_GROUP: "Events",
    StringRes.EVENT_BIRTHDAY: "Birthday",
    StringRes.EVENT_ANNIVERSARY: "Anniversary",
    StringRes.EVENT_OTHER: "Other",
    StringRes.EVENT_CUSTOM: "Custom",
    StringRes.EVENT_DATE: "Date",
}
