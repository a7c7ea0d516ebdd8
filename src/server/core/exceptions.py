"""
Custom exceptions for the application.

This module defines domain-specific exceptions for better error handling
and more meaningful error messages throughout the application.
"""

from typing import Optional, Any, Dict


class ApplicationException(Exception):
    """Base exception for all application-specific exceptions."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DatabaseException(ApplicationException):
    """Exception raised for database-related errors."""
    pass


class ValidationException(ApplicationException):
    """Exception raised when an argument is well-formed but not acceptable (e.g. unknown status)."""
    pass


class UnauthorizedException(ApplicationException):
    """Exception raised for missing, malformed or expired credentials."""
    pass


class NotFoundException(ApplicationException):
    """
    Exception raised when a requested resource is not found.

    For owned resources this also covers "exists but belongs to someone else";
    callers cannot tell the two apart.
    """

    def __init__(self, resource: str, identifier: Any, message: Optional[str] = None):
        message = message or f"{resource} with id {identifier} not found"
        super().__init__(message, {"resource": resource, "identifier": identifier})


class DuplicateException(ApplicationException):
    """Exception raised when attempting to create a duplicate resource."""

    def __init__(self, resource: str, field: str, value: Any, message: Optional[str] = None):
        message = message or f"{resource} already exists with {field}: {value}"
        super().__init__(message, {"resource": resource, "field": field, "value": value})


class ExternalServiceException(ApplicationException):
    """Exception raised when an external service (image host, scraper) fails."""

    def __init__(self, service: str, message: str, details: Optional[Dict[str, Any]] = None):
        full_message = f"{service} error: {message}"
        details = details or {}
        details["service"] = service
        super().__init__(full_message, details)


class ImageHostException(ExternalServiceException):
    """Exception raised for image upload failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("Image host", message, details)


class ScraperException(ExternalServiceException):
    """Exception raised for LinkedIn scraping failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("LinkedIn scraper", message, details)
