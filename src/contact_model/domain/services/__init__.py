"""Domain services."""

from contact_model.domain.services.resource_text import get_resource_text
from contact_model.domain.services.display_label import (
    Collator,
    LocaleCollator,
    DisplayLabelComparator,
    apply_environment_collation,
    configure_collation,
    sort_by_display_label,
)
from contact_model.domain.services.inflaters import (
    BaseInflater,
    SimpleInflater,
    JoinInflater,
    TypeLabelInflater,
)

__all__ = [
    "get_resource_text",
    "Collator",
    "LocaleCollator",
    "DisplayLabelComparator",
    "apply_environment_collation",
    "configure_collation",
    "sort_by_display_label",
    "BaseInflater",
    "SimpleInflater",
    "JoinInflater",
    "TypeLabelInflater",
]
