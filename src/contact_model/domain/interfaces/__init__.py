"""Interfaces implemented by host collaborators."""

from contact_model.domain.interfaces.resources import PackageManager, ResourceContext
from contact_model.domain.interfaces.inflater import StringInflater

__all__ = ["PackageManager", "ResourceContext", "StringInflater"]
