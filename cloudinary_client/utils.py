"""
Utility functions for the Cloudinary client.
"""

import base64
import hashlib
import re
from typing import Iterable, Optional
from urllib.parse import quote

ALGO_SHA1 = "sha1"
ALGO_SHA256 = "sha256"

SHORT_URL_SIGNATURE_LENGTH = 8
LONG_URL_SIGNATURE_LENGTH = 32


def sign(
    to_sign: str,
    api_secret: str,
    raw_output: bool = False,
    algorithm: str = ALGO_SHA1,
):
    """
    Compute the digest of a string keyed with the cloud API secret.

    Args:
        to_sign: The string to sign
        api_secret: The API secret appended to the string before hashing
        raw_output: Return raw digest bytes instead of a hex string
        algorithm: Either ALGO_SHA1 or ALGO_SHA256

    Returns:
        bytes if raw_output is True, otherwise the hex digest
    """
    if algorithm not in (ALGO_SHA1, ALGO_SHA256):
        raise ValueError(f"Unsupported signature algorithm: {algorithm}")

    digest = hashlib.new(algorithm, (to_sign + api_secret).encode("utf-8"))
    return digest.digest() if raw_output else digest.hexdigest()


def base64url_encode(value) -> str:
    """Encode bytes (or str) as URL-safe base64, keeping the padding."""
    if isinstance(value, str):
        value = value.encode("utf-8")
    return base64.urlsafe_b64encode(value).decode("ascii")


def format_simple_signature(signature: str, length: int) -> str:
    """Truncate an encoded signature and wrap it in the s--...-- URL component."""
    return f"s--{signature[:length]}--"


def implode_url(parts: Iterable[Optional[object]]) -> str:
    """Join the non-empty parts of a URL with slashes."""
    return "/".join(str(part) for part in parts if part is not None and str(part) != "")


def smart_escape(source: str, unsafe: str = r"([^a-zA-Z0-9_.\-\/:]+)") -> str:
    """
    Percent-encode a source path, leaving slashes and colons intact.

    Args:
        source: The public ID or remote URL to escape
        unsafe: Regex character class of characters to encode

    Returns:
        The escaped source
    """
    return re.sub(unsafe, lambda m: quote(m.group(1), safe=""), source)
