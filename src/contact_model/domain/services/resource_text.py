"""Resource text resolution shared by display and invite labels."""

from typing import Optional

from contact_model.domain.interfaces.resources import ResourceContext
from contact_model.shared.types import NO_RESOURCE, ResId


def get_resource_text(context: ResourceContext,
                      package_name: Optional[str],
                      res_id: ResId,
                      default_value: Optional[str]) -> Optional[str]:
    """Load a string resource, falling back to a default.

    The text comes from ``package_name`` when both the id and the package
    are set, from the current context when only the id is set, and is
    ``default_value`` otherwise. Failures of the collaborator are not
    caught here.

    Args:
        context: Resource context of the caller
        package_name: Package holding the resource, or None for the current one
        res_id: Resource id, or NO_RESOURCE
        default_value: Returned unchanged when res_id is NO_RESOURCE

    Returns:
        Resolved text or the default
    """
    if res_id != NO_RESOURCE and package_name is not None:
        return context.package_manager.get_text(package_name, res_id)
    elif res_id != NO_RESOURCE:
        return context.get_text(res_id)
    else:
        return default_value
