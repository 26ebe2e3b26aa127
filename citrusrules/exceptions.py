"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class CitrusRulesError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(CitrusRulesError):
    """Raised for issues related to configuration loading or validation."""


class ResolutionError(CitrusRulesError):
    """Raised when a template identifier does not map to a safe canonical name."""


class TemplateError(CitrusRulesError):
    """Base class for failures tied to a single template."""

    def __init__(self, name: str, message: str):
        super().__init__(f"{name}: {message}")
        self.name = name
        self.message = message


class FetchError(TemplateError):
    """
    Raised when a template cannot be retrieved (network error, non-2xx status or
    timeout).
    """


class WriteError(TemplateError):
    """Raised when a fetched template cannot be written to disk."""
