"""Contact Model - Account type constraints for contact data kinds."""

try:
    from contact_model._version import version as __version__
except ImportError:
    __version__ = "0.0.0+unknown"

__all__ = ["__version__"]
