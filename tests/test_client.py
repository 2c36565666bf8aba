"""
Unit tests for the Cloudinary client.
"""

import pytest
from unittest.mock import patch

from cloudinary_client import CloudinaryClient
from cloudinary_client.asset import File, Image, Video
from cloudinary_client.exceptions import CloudinaryConfigurationError
from cloudinary_client.models import AssetDescriptor, AuthToken, UrlConfig

from conftest import expected_signature


class TestCloudinaryClient:
    """Test cases for the CloudinaryClient class."""

    @pytest.fixture
    def client(self):
        """Create a test client instance."""
        return CloudinaryClient(
            cloud_name="demo", api_key="123456", api_secret="test-secret"
        )

    def test_client_initialization(self):
        """Test client initialization with various parameters."""
        # Test basic initialization
        client = CloudinaryClient("demo")
        assert client.cloud.cloud_name == "demo"
        assert client.cloud.api_secret is None
        assert client.url_config == UrlConfig()
        assert not client.auth_token.is_enabled()

        # Test with custom parameters
        client = CloudinaryClient(
            cloud_name="demo",
            api_secret="test-secret",
            url_config=UrlConfig(shorten=True),
            auth_token=AuthToken(key="abcd"),
        )
        assert client.url_config.shorten is True
        assert client.auth_token.is_enabled()

    def test_get_version(self, client):
        """Test version retrieval."""
        version = client._get_version()
        assert version in ["0.1.0", "unknown"]

    def test_asset_factories(self, client):
        """Test that each factory creates the matching asset class."""
        image = client.image("sample", extension="jpg")
        video = client.video("dog", extension="mp4")
        raw = client.raw("report", extension="pdf")

        assert isinstance(image, Image)
        assert isinstance(video, Video)
        assert isinstance(raw, File)
        assert image.cloud is client.cloud
        assert video.to_url() == "https://res.cloudinary.com/demo/video/upload/dog.mp4"

    def test_asset_from_descriptor(self, client):
        """Test that a descriptor decides the asset class."""
        descriptor = AssetDescriptor(public_id="dog", asset_type="video")
        asset = client.asset(descriptor)

        assert isinstance(asset, Video)
        assert asset.asset is descriptor

    def test_asset_uses_client_defaults(self):
        """Test that assets share the client URL options."""
        client = CloudinaryClient("demo", url_config=UrlConfig(shorten=True))
        assert client.image("sample").to_url() == "https://res.cloudinary.com/demo/iu/sample"

    def test_url(self, client):
        """Test building a URL in one call."""
        url = client.url(
            "sample",
            transformation={"width": 100, "crop": "scale"},
            version=1234,
            extension="jpg",
        )
        assert url == (
            "https://res.cloudinary.com/demo/image/upload/c_scale,w_100/v1234/sample.jpg"
        )

    def test_url_options_override_defaults(self, client):
        """Test per-call URL options."""
        url = client.url("sample", extension="jpg", sign_url=True, shorten=True)
        signature = expected_signature("sample.jpg")

        assert url == f"https://res.cloudinary.com/demo/iu/{signature}/sample.jpg"
        assert client.url_config.sign_url is False

    def test_url_unknown_option(self, client):
        """Test that unknown URL options are rejected."""
        with pytest.raises(TypeError):
            client.url("sample", sign=True)

    def test_url_signing_requires_secret(self):
        """Test signing with a client that has no API secret."""
        client = CloudinaryClient("demo")
        with pytest.raises(CloudinaryConfigurationError):
            client.url("sample", sign_url=True)

    def test_url_delegates_to_asset(self, client):
        """Test that url() builds the asset and returns its URL."""
        with patch.object(Image, "to_url", return_value="built") as mock_to_url:
            assert client.url("sample") == "built"
        mock_to_url.assert_called_once_with()

    def test_auth_token_disables_signature(self):
        """Test that token authentication suppresses simple signatures."""
        client = CloudinaryClient(
            "demo", api_secret="test-secret", auth_token=AuthToken(key="abcd")
        )
        assert client.url("sample", sign_url=True) == (
            "https://res.cloudinary.com/demo/image/upload/sample"
        )
