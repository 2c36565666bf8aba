import base64
import hashlib

import pytest

from cloudinary_client.models import CloudConfig


@pytest.fixture
def cloud():
    """Create a test cloud configuration."""
    return CloudConfig(cloud_name="demo", api_key="123456", api_secret="test-secret")


def expected_signature(to_sign, secret="test-secret", algorithm="sha1", length=8):
    digest = hashlib.new(algorithm, (to_sign + secret).encode()).digest()
    return f"s--{base64.urlsafe_b64encode(digest).decode()[:length]}--"
