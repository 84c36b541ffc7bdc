"""Custom exceptions for Contact Model."""


class ContactModelError(Exception):
    """Base exception for all Contact Model errors."""
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)

class ParseError(ContactModelError):
    """Error reading an account type definition file."""
    pass

class DefinitionError(ParseError):
    """Account type definition failed validation."""
    pass

class ResourceNotFoundError(ContactModelError):
    """A string or drawable resource could not be resolved."""
    pass

class ConfigError(ContactModelError):
    """Configuration error."""
    pass

class CollationError(ContactModelError):
    """Requested collation locale is not available."""
    pass
