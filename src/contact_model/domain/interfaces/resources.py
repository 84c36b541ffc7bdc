"""Resource collaborator interfaces.

Label and icon resolution is supplied by the host environment. The model
only ever calls these methods; what a missing package or resource does is
up to the implementation.
"""

from typing import Any, Protocol, runtime_checkable

from contact_model.shared.types import ResId


@runtime_checkable
class PackageManager(Protocol):
    """Resolves resources that live in another package."""

    def get_text(self, package_name: str, res_id: ResId) -> str:
        """Get a string resource from the given package."""
        ...

    def get_drawable(self, package_name: str, res_id: ResId) -> Any:
        """Get a drawable (icon handle) from the given package."""
        ...


@runtime_checkable
class ResourceContext(Protocol):
    """Resolves resources of the current package."""

    @property
    def package_manager(self) -> PackageManager:
        """Package manager for cross-package lookups."""
        ...

    def get_text(self, res_id: ResId) -> str:
        """Get a string resource from the current package."""
        ...

    def get_drawable(self, res_id: ResId) -> Any:
        """Get a drawable (icon handle) from the current package."""
        ...
