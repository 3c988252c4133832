"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(DomainError):
    """Raised when credentials or identifiers are missing or invalid."""


class CloudApiError(DomainError):
    """Base class for failures talking to the cloud platform."""


class CloudTransportError(CloudApiError):
    """Raised when the platform cannot be reached or returns garbage."""

    def __init__(
        self, message: str, url: str, details: Optional[Dict[str, Any]] = None
    ):
        self.url = url
        super().__init__(message, details)


class CloudPlatformError(CloudApiError):
    """Raised when the platform answers with ``success=false``."""

    def __init__(
        self,
        code: Optional[int],
        msg: Optional[str],
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.msg = msg
        super().__init__(f"Tuya API error [{code}]: {msg}", details)


class ScheduleValidationError(DomainError):
    """Raised when caller-supplied schedule or countdown input is invalid."""
