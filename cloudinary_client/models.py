"""
Pydantic models for the Cloudinary client.
These models describe the asset, the cloud and the URL options used to build delivery URLs.
"""

from enum import Enum
from pydantic import BaseModel, field_validator
from typing import Optional, Union


class AssetType(str, Enum):
    """Top-level type of a delivered asset."""

    IMAGE = "image"
    VIDEO = "video"
    RAW = "raw"


class DeliveryType(str, Enum):
    """How an asset is stored and delivered."""

    UPLOAD = "upload"
    PRIVATE = "private"
    AUTHENTICATED = "authenticated"
    FETCH = "fetch"


class AssetDescriptor(BaseModel):
    """Logical description of a single asset."""

    public_id: str
    asset_type: AssetType = AssetType.IMAGE
    delivery_type: DeliveryType = DeliveryType.UPLOAD
    version: Optional[Union[int, str]] = None
    suffix: Optional[str] = None
    extension: Optional[str] = None

    class Config:
        frozen = True

    @field_validator("public_id")
    @classmethod
    def public_id_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("public_id must not be empty")
        return value

    @field_validator("extension")
    @classmethod
    def strip_extension_dot(cls, value: Optional[str]) -> Optional[str]:
        if value:
            return value.lstrip(".")
        return value

    def public_id_with_extension(self) -> str:
        """Return the public ID followed by its extension, if any."""
        if self.extension:
            return f"{self.public_id}.{self.extension}"
        return self.public_id


class CloudConfig(BaseModel):
    """Cloud credentials. The API secret is only needed for signed URLs."""

    cloud_name: str
    api_key: Optional[str] = None
    api_secret: Optional[str] = None

    class Config:
        frozen = True


class UrlConfig(BaseModel):
    """Options controlling how delivery URLs are built."""

    secure: bool = True
    private_cdn: bool = False
    secure_cname: Optional[str] = None
    cname: Optional[str] = None
    sign_url: bool = False
    long_url_signature: bool = False
    shorten: bool = False
    use_root_path: bool = False
    force_version: bool = True
    responsive_width: bool = False
    responsive_width_transformation: str = "c_limit,w_auto"

    class Config:
        frozen = True


class AuthToken(BaseModel):
    """Token-based authentication settings. When enabled, simple signatures are not added."""

    key: Optional[str] = None
    duration: Optional[int] = None
    acl: Optional[str] = None

    class Config:
        frozen = True

    def is_enabled(self) -> bool:
        return bool(self.key)
