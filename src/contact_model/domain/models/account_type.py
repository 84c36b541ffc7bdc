"""Account type: the per-source registry of data kinds."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Optional

from contact_model.domain.interfaces.resources import ResourceContext
from contact_model.domain.models.data_kind import DataKind
from contact_model.domain.services.resource_text import get_resource_text
from contact_model.infrastructure.logging import get_logger
from contact_model.shared.types import ColorInt, NO_RESOURCE, ResId

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccountTypeWithDataSet:
    """Immutable (account type, data set) pair identifying an account type."""
    account_type: Optional[str]
    data_set: Optional[str] = None

    @classmethod
    def get(cls, account_type: Optional[str], data_set: Optional[str]) -> "AccountTypeWithDataSet":
        return cls(account_type, data_set)

    def has_data_set(self) -> bool:
        """Check if a non-empty data set is present."""
        return bool(self.data_set)

    def __str__(self) -> str:
        return f"[{self.account_type}/{self.data_set}]"


class AccountType(ABC):
    """Constraints and styles for a specific contact data source.

    Holds the data kinds the source supports, in registration order and
    indexed by mime type. ``add_kind`` is the only way a kind becomes
    visible to lookups and keeps both structures in sync.

    Registration is expected to happen once during construction; reads
    afterwards need no locking, concurrent registration does.
    """

    def __init__(self):
        self.account_type: Optional[str] = None
        self.data_set: Optional[str] = None

        # Package that resources are loaded from
        self.res_package_name: Optional[str] = None
        self.summary_res_package_name: Optional[str] = None

        self.title_res: ResId = NO_RESOURCE
        self.icon_res: ResId = NO_RESOURCE

        self.read_only = False

        self._kinds: list[DataKind] = []
        self._mime_kinds: dict[str, DataKind] = {}

    # ========================================
    # Capabilities
    # ========================================

    @abstractmethod
    def is_group_membership_editable(self) -> bool:
        """Whether groups created under this account type accept membership edits."""
        ...

    @abstractmethod
    def get_header_color(self, context: ResourceContext) -> ColorInt:
        ...

    @abstractmethod
    def get_side_bar_color(self, context: ResourceContext) -> ColorInt:
        ...

    def is_external(self) -> bool:
        return False

    def get_edit_contact_activity_class_name(self) -> Optional[str]:
        """Optional custom edit activity, residing in ``res_package_name``."""
        return None

    def get_create_contact_activity_class_name(self) -> Optional[str]:
        """Optional custom new-contact activity, residing in ``res_package_name``."""
        return None

    def get_invite_contact_activity_class_name(self) -> Optional[str]:
        """Optional custom invite-contact activity, residing in ``res_package_name``."""
        return None

    def get_view_contact_notify_service_class_name(self) -> Optional[str]:
        """Optional service started whenever a contact of this source is viewed."""
        return None

    def get_view_group_activity(self) -> Optional[str]:
        return None

    def get_view_stream_item_activity(self) -> Optional[str]:
        return None

    def get_view_stream_item_photo_activity(self) -> Optional[str]:
        return None

    def get_invite_contact_action_res_id(self, context: ResourceContext) -> ResId:
        """Resource id of the invite action label, or NO_RESOURCE."""
        return NO_RESOURCE

    def get_extension_package_names(self) -> list[str]:
        """Packages to inspect as additional external account types.

        Lets a primary account type point at packages that are not sync
        adapters but still provide contact data, for instance under a
        separate data set.
        """
        return []

    # ========================================
    # Presentation
    # ========================================

    def get_account_type_and_data_set(self) -> AccountTypeWithDataSet:
        return AccountTypeWithDataSet.get(self.account_type, self.data_set)

    def get_display_label(self, context: ResourceContext) -> Optional[str]:
        """Resolve the label, falling back to the raw account type string."""
        return get_resource_text(
            context, self.summary_res_package_name, self.title_res, self.account_type
        )

    def get_invite_contact_action_label(self, context: ResourceContext) -> Optional[str]:
        return get_resource_text(
            context,
            self.summary_res_package_name,
            self.get_invite_contact_action_res_id(context),
            "",
        )

    def get_display_icon(self, context: ResourceContext) -> Any:
        """Resolve the icon, or None when no title resource is defined."""
        if self.title_res != NO_RESOURCE and self.summary_res_package_name is not None:
            return context.package_manager.get_drawable(
                self.summary_res_package_name, self.icon_res
            )
        elif self.title_res != NO_RESOURCE:
            return context.get_drawable(self.icon_res)
        else:
            return None

    # ========================================
    # Data kinds
    # ========================================

    def get_sorted_data_kinds(self) -> list[DataKind]:
        """Get all registered kinds by ascending weight.

        Kinds of equal weight keep their registration order.
        """
        return sorted(self._kinds, key=attrgetter("weight"))

    def get_kind_for_mimetype(self, mime_type: str) -> Optional[DataKind]:
        """Find the kind handling a mime type.

        Args:
            mime_type: Mime type to look up

        Returns:
            Registered DataKind, or None if this source does not handle it
        """
        return self._mime_kinds.get(mime_type)

    def add_kind(self, kind: DataKind) -> DataKind:
        """Register a kind with this account type.

        Stamps the kind with this type's ``res_package_name``. A second kind
        for an already registered mime type replaces it for lookups while
        both stay in the ordered list.

        Args:
            kind: Kind to register

        Returns:
            The same kind
        """
        kind.res_package_name = self.res_package_name
        if kind.mime_type in self._mime_kinds:
            logger.warning(
                f"Duplicate data kind {kind.mime_type} for "
                f"{self.get_account_type_and_data_set()}, replacing lookup entry"
            )
        self._kinds.append(kind)
        self._mime_kinds[kind.mime_type] = kind
        logger.debug(f"Registered {kind.mime_type} (weight {kind.weight})")
        return kind

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(account_type={self.account_type!r}, "
                f"data_set={self.data_set!r}, kinds={len(self._kinds)})")
