"""
Custom exceptions for the Cloudinary client.
"""

from typing import Optional, Dict, Any


class CloudinaryError(Exception):
    """Base exception for all Cloudinary client errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CloudinaryConfigurationError(CloudinaryError):
    """Exception raised when the cloud configuration lacks a required value."""

    def __init__(
        self,
        message: str = "Invalid cloud configuration",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


class CloudinaryValidationError(CloudinaryError):
    """Exception raised when an asset cannot be delivered with the given options."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
