"""Resource collaborators."""

from contact_model.infrastructure.resources.in_memory import InMemoryContext, InMemoryPackageManager

__all__ = ["InMemoryContext", "InMemoryPackageManager"]
