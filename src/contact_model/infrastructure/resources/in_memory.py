"""Dictionary-backed resource collaborators."""

from typing import Any, Mapping, Optional

from contact_model.infrastructure.logging import get_logger
from contact_model.shared.exceptions import ResourceNotFoundError
from contact_model.shared.types import ResId

logger = get_logger(__name__)


class InMemoryPackageManager:
    """Package manager holding string and drawable tables per package."""

    def __init__(self):
        self._strings: dict[str, dict[ResId, str]] = {}
        self._drawables: dict[str, dict[ResId, Any]] = {}

    def register_strings(self, package_name: str, strings: Mapping[ResId, str]) -> None:
        """Add string resources for a package, replacing ids already present."""
        self._strings.setdefault(package_name, {}).update(strings)
        logger.debug(f"Registered {len(strings)} strings for {package_name}")

    def register_drawables(self, package_name: str, drawables: Mapping[ResId, Any]) -> None:
        """Add drawable resources for a package, replacing ids already present."""
        self._drawables.setdefault(package_name, {}).update(drawables)

    def has_package(self, package_name: str) -> bool:
        return package_name in self._strings or package_name in self._drawables

    def get_text(self, package_name: str, res_id: ResId) -> str:
        try:
            return self._strings[package_name][res_id]
        except KeyError:
            raise ResourceNotFoundError(
                f"String {res_id:#x} not found in {package_name}",
                package_name=package_name, res_id=res_id
            ) from None

    def get_drawable(self, package_name: str, res_id: ResId) -> Any:
        try:
            return self._drawables[package_name][res_id]
        except KeyError:
            raise ResourceNotFoundError(
                f"Drawable {res_id:#x} not found in {package_name}",
                package_name=package_name, res_id=res_id
            ) from None


class InMemoryContext:
    """Resource context over local string and drawable tables."""

    def __init__(self,
                 strings: Optional[Mapping[ResId, str]] = None,
                 drawables: Optional[Mapping[ResId, Any]] = None,
                 package_manager: Optional[InMemoryPackageManager] = None):
        self._strings: dict[ResId, str] = dict(strings or {})
        self._drawables: dict[ResId, Any] = dict(drawables or {})
        self._package_manager = package_manager if package_manager is not None else InMemoryPackageManager()

    @property
    def package_manager(self) -> InMemoryPackageManager:
        return self._package_manager

    def get_text(self, res_id: ResId) -> str:
        try:
            return self._strings[res_id]
        except KeyError:
            raise ResourceNotFoundError(f"String {res_id:#x} not found", res_id=res_id) from None

    def get_drawable(self, res_id: ResId) -> Any:
        try:
            return self._drawables[res_id]
        except KeyError:
            raise ResourceNotFoundError(f"Drawable {res_id:#x} not found", res_id=res_id) from None
