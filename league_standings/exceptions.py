"""
Exception classes for the league standings package.

Centralized location for all custom exceptions to avoid circular imports.
"""


class ValidationError(Exception):
    """Raised when a score or model value is out of range or mistyped."""
    pass


class DecodeError(Exception):
    """Raised when a results payload cannot be decoded into a results table."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason: str = reason


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""
    pass
