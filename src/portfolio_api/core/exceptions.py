"""
Custom exceptions for the application.

This module defines domain-specific exceptions for better error handling
and more meaningful error messages throughout the application. Each class
carries the HTTP status it is rendered with by the handlers in ``main``.
"""

from typing import Optional, Any, Dict


class ApplicationException(Exception):
    """Base exception for all application-specific exceptions."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DatabaseException(ApplicationException):
    """
    Exception raised for storage failures.

    ``message`` is safe to show to a client; the driver error lives in
    ``details["error"]`` and is only logged.
    """
    status_code = 500


class ValidationException(ApplicationException):
    """Exception raised for missing or malformed input."""
    status_code = 400


class DuplicateException(ApplicationException):
    """Exception raised when a uniqueness constraint rejects a write."""

    status_code = 400

    def __init__(self, resource: str, field: str, value: Any, message: Optional[str] = None):
        message = message or f"{resource} already exists with {field}: {value}"
        super().__init__(message, {"resource": resource, "field": field, "value": value})


class ConfigurationException(ApplicationException):
    """Exception raised for configuration-related errors."""
    pass
