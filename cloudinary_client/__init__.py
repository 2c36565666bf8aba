"""
Cloudinary Client - A Python client for building Cloudinary delivery URLs.

This package provides a convenient interface for describing media assets and
turning them into delivery URLs, including transformations, signatures and
shortened URLs.
"""

from .client import CloudinaryClient
from .asset import MediaAsset, Image, Video, File
from .exceptions import (
    CloudinaryError,
    CloudinaryConfigurationError,
    CloudinaryValidationError,
)
from .models import (
    AssetDescriptor,
    AssetType,
    AuthToken,
    CloudConfig,
    DeliveryType,
    UrlConfig,
)
from .transformation import Transformation

__version__ = "0.1.0"
__author__ = "Cloudinary Client Team"

__all__ = [
    "CloudinaryClient",
    "MediaAsset",
    "Image",
    "Video",
    "File",
    "CloudinaryError",
    "CloudinaryConfigurationError",
    "CloudinaryValidationError",
    "AssetDescriptor",
    "AssetType",
    "AuthToken",
    "CloudConfig",
    "DeliveryType",
    "UrlConfig",
    "Transformation",
]
