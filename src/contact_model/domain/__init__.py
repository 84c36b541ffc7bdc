"""Domain layer - account types, data kinds and their constraints."""

from contact_model.domain.models import (
    AccountType,
    AccountTypeWithDataSet,
    DataKind,
    EditField,
    EditType,
    EventEditType,
)
from contact_model.domain.services import DisplayLabelComparator, get_resource_text

__all__ = [
    "AccountType",
    "AccountTypeWithDataSet",
    "DataKind",
    "EditField",
    "EditType",
    "EventEditType",
    "DisplayLabelComparator",
    "get_resource_text",
]
