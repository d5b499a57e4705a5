"""Exceptions raised by jsoncheck."""


class JSONCheckError(Exception):
    """Base exception for jsoncheck errors."""
    pass


class SchemaError(JSONCheckError):
    """A schema value could not be compiled (strict mode only)."""
    pass


class ConfigError(JSONCheckError, ValueError):
    """Validator configuration is missing, unreadable or has bad values."""
    pass


class DocumentError(JSONCheckError):
    """A data or schema document could not be loaded."""
    pass
