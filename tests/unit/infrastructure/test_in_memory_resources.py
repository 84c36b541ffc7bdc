"""Tests for dictionary-backed resource collaborators."""

import pytest

from contact_model.domain.interfaces import PackageManager, ResourceContext
from contact_model.infrastructure.resources import InMemoryContext, InMemoryPackageManager
from contact_model.shared.exceptions import ResourceNotFoundError


class TestInMemoryPackageManager:
    """Test InMemoryPackageManager."""

    def test_register_and_get(self):
        """Test strings and drawables resolve per package."""
        pm = InMemoryPackageManager()
        pm.register_strings("com.a", {1: "One"})
        pm.register_drawables("com.a", {2: "icon"})

        assert pm.get_text("com.a", 1) == "One"
        assert pm.get_drawable("com.a", 2) == "icon"
        assert pm.has_package("com.a")
        assert not pm.has_package("com.b")

    def test_register_merges(self):
        """Test later registrations add to and replace earlier ones."""
        pm = InMemoryPackageManager()
        pm.register_strings("com.a", {1: "One", 2: "Two"})
        pm.register_strings("com.a", {2: "Deux"})
        assert pm.get_text("com.a", 1) == "One"
        assert pm.get_text("com.a", 2) == "Deux"

    def test_missing_resources(self):
        """Test missing packages and ids raise ResourceNotFoundError."""
        pm = InMemoryPackageManager()
        pm.register_strings("com.a", {1: "One"})

        with pytest.raises(ResourceNotFoundError) as exc:
            pm.get_text("com.a", 9)
        assert exc.value.package_name == "com.a"
        assert exc.value.res_id == 9
        with pytest.raises(ResourceNotFoundError):
            pm.get_text("com.b", 1)
        with pytest.raises(ResourceNotFoundError):
            pm.get_drawable("com.a", 1)

    def test_satisfies_protocol(self):
        """Test the package manager protocol is met."""
        assert isinstance(InMemoryPackageManager(), PackageManager)


class TestInMemoryContext:
    """Test InMemoryContext."""

    def test_local_lookups(self):
        """Test local strings and drawables."""
        ctx = InMemoryContext(strings={1: "One"}, drawables={2: "icon"})
        assert ctx.get_text(1) == "One"
        assert ctx.get_drawable(2) == "icon"

    def test_missing_local_resources(self):
        """Test missing ids raise ResourceNotFoundError."""
        ctx = InMemoryContext()
        with pytest.raises(ResourceNotFoundError):
            ctx.get_text(1)
        with pytest.raises(ResourceNotFoundError):
            ctx.get_drawable(1)

    def test_package_manager(self):
        """Test a package manager is always available."""
        pm = InMemoryPackageManager()
        assert InMemoryContext(package_manager=pm).package_manager is pm
        assert isinstance(InMemoryContext().package_manager, InMemoryPackageManager)

    def test_tables_copied(self):
        """Test later changes to the source dict are not seen."""
        strings = {1: "One"}
        ctx = InMemoryContext(strings=strings)
        strings[1] = "Changed"
        assert ctx.get_text(1) == "One"

    def test_satisfies_protocol(self):
        """Test the resource context protocol is met."""
        assert isinstance(InMemoryContext(), ResourceContext)
