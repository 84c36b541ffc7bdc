"""Concrete account types."""

from contact_model.domain.account_types.fallback import FallbackAccountType
from contact_model.domain.account_types.defined import DefinedAccountType, build_data_kind

__all__ = ["FallbackAccountType", "DefinedAccountType", "build_data_kind"]
