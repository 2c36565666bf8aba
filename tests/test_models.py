"""
Unit tests for the Cloudinary client models.
"""

import pytest
from pydantic import ValidationError

from cloudinary_client.models import (
    AssetDescriptor,
    AssetType,
    AuthToken,
    DeliveryType,
    UrlConfig,
)


def test_asset_descriptor_defaults():
    """Test default asset and delivery types."""
    descriptor = AssetDescriptor(public_id="sample")
    assert descriptor.asset_type == AssetType.IMAGE
    assert descriptor.delivery_type == DeliveryType.UPLOAD
    assert descriptor.public_id_with_extension() == "sample"


def test_asset_descriptor_extension():
    """Test public ID with extension."""
    descriptor = AssetDescriptor(public_id="sample", extension=".jpg")
    assert descriptor.extension == "jpg"
    assert descriptor.public_id_with_extension() == "sample.jpg"


def test_asset_descriptor_rejects_empty_public_id():
    """Test public ID validation."""
    with pytest.raises(ValidationError):
        AssetDescriptor(public_id="  ")


def test_asset_descriptor_rejects_unknown_type():
    """Test asset type validation."""
    with pytest.raises(ValidationError):
        AssetDescriptor(public_id="sample", asset_type="document")


def test_models_are_immutable():
    """Test that value objects cannot be changed."""
    config = UrlConfig()
    with pytest.raises(ValidationError):
        config.sign_url = True


def test_auth_token_enabled():
    """Test that a key enables token authentication."""
    assert not AuthToken().is_enabled()
    assert AuthToken(key="abcd", duration=300).is_enabled()
