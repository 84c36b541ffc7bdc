"""Domain models."""

from contact_model.domain.models.edit_type import EditType, EventEditType
from contact_model.domain.models.edit_field import EditField
from contact_model.domain.models.data_kind import DataKind
from contact_model.domain.models.account_type import AccountType, AccountTypeWithDataSet

__all__ = [
    "EditType",
    "EventEditType",
    "EditField",
    "DataKind",
    "AccountType",
    "AccountTypeWithDataSet",
]
