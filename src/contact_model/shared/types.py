"""Core type definitions and constants used throughout the package."""

from typing import Any, Iterable, Mapping, Protocol, TypeAlias

# Basic type aliases
ResId: TypeAlias = int                # Opaque resource identifier
ColorInt: TypeAlias = int             # ARGB color packed into an int
ContentValues: TypeAlias = Mapping[str, Any]  # Pending edits keyed by column

# Sentinels
NO_RESOURCE: ResId = -1   # Resource id is not defined
UNBOUNDED = -1            # No cardinality cap


class RowLike(Protocol):
    """A materialized query row: column names plus item access (sqlite3.Row fits)."""

    def keys(self) -> Iterable[str]:
        ...

    def __getitem__(self, column: str) -> Any:
        ...


# =====================
# Input type bits
# =====================

TYPE_CLASS_TEXT = 0x00000001
TYPE_CLASS_NUMBER = 0x00000002
TYPE_CLASS_PHONE = 0x00000003
TYPE_CLASS_DATETIME = 0x00000004

TYPE_TEXT_VARIATION_EMAIL_ADDRESS = 0x00000020
TYPE_TEXT_VARIATION_PERSON_NAME = 0x00000060
TYPE_TEXT_VARIATION_POSTAL_ADDRESS = 0x00000070

TYPE_TEXT_FLAG_CAP_WORDS = 0x00002000
TYPE_TEXT_FLAG_CAP_SENTENCES = 0x00004000
TYPE_TEXT_FLAG_MULTI_LINE = 0x00020000


# =====================
# Mime types
# =====================

MIMETYPE_STRUCTURED_NAME = "vnd.android.cursor.item/name"
MIMETYPE_PHONE = "vnd.android.cursor.item/phone_v2"
MIMETYPE_EMAIL = "vnd.android.cursor.item/email_v2"
MIMETYPE_POSTAL = "vnd.android.cursor.item/postal-address_v2"
MIMETYPE_NICKNAME = "vnd.android.cursor.item/nickname"
MIMETYPE_NOTE = "vnd.android.cursor.item/note"
MIMETYPE_EVENT = "vnd.android.cursor.item/contact_event"


# =====================
# Generic data columns
# =====================

DATA1 = "data1"
DATA2 = "data2"
DATA3 = "data3"
DATA4 = "data4"
DATA5 = "data5"
DATA6 = "data6"
DATA7 = "data7"
DATA8 = "data8"
DATA9 = "data9"
DATA10 = "data10"
