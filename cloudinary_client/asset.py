"""
Media assets and their delivery URLs.
"""

import logging
import re
from typing import Any, Dict, Optional, Union

from .exceptions import CloudinaryValidationError
from .finalizer import MediaAssetFinalizerMixin
from .models import (
    AssetDescriptor,
    AssetType,
    AuthToken,
    CloudConfig,
    DeliveryType,
    UrlConfig,
)
from .transformation import Transformation
from .utils import implode_url, smart_escape

logger = logging.getLogger(__name__)

SHARED_CDN_HOST = "res.cloudinary.com"

# (asset type, delivery type) -> URL segment used when the asset has an SEO suffix
SUFFIX_ASSET_TYPES = {
    (AssetType.IMAGE, DeliveryType.UPLOAD): "images",
    (AssetType.IMAGE, DeliveryType.PRIVATE): "private_images",
    (AssetType.IMAGE, DeliveryType.AUTHENTICATED): "authenticated_images",
    (AssetType.RAW, DeliveryType.UPLOAD): "files",
    (AssetType.VIDEO, DeliveryType.UPLOAD): "videos",
}

VERSIONED_PUBLIC_ID = re.compile(r"^v[0-9]+/")
REMOTE_URL = re.compile(r"^(https?:|s3:|gs:|data:|ftp:)", re.IGNORECASE)


class MediaAsset(MediaAssetFinalizerMixin):
    """
    A media asset that can be delivered through a URL.

    The URL is assembled from the distribution, asset type, signature,
    transformation, version and source segments.
    """

    asset_type: AssetType = AssetType.IMAGE

    def __init__(
        self,
        public_id: Union[str, AssetDescriptor],
        cloud: CloudConfig,
        url_config: Optional[UrlConfig] = None,
        auth_token: Optional[AuthToken] = None,
        transformation: Optional[Union[str, Dict[str, Any], Transformation]] = None,
        **asset_options: Any,
    ):
        """
        Initialize the asset.

        Args:
            public_id: Public ID of the asset, or a complete AssetDescriptor
            cloud: Cloud credentials
            url_config: URL options, defaults to UrlConfig()
            auth_token: Token authentication settings, disabled by default
            transformation: Transformation applied to the asset
            **asset_options: Extra AssetDescriptor fields (delivery_type, version,
                suffix, extension)
        """
        if isinstance(public_id, AssetDescriptor):
            if asset_options:
                raise TypeError(
                    "Asset options cannot be combined with an AssetDescriptor: "
                    + ", ".join(sorted(asset_options))
                )
            self.asset = public_id
        else:
            asset_options.setdefault("asset_type", self.asset_type)
            self.asset = AssetDescriptor(public_id=public_id, **asset_options)

        self.cloud = cloud
        self.url_config = url_config or UrlConfig()
        self.auth_token = auth_token or AuthToken()

        if transformation is None or isinstance(transformation, Transformation):
            self.transformation = transformation
        else:
            self.transformation = Transformation(transformation)

    def finalize_distribution(self) -> str:
        """Build the scheme, host and (for shared hosts) cloud name prefix."""
        config = self.url_config
        cloud_name = self.cloud.cloud_name

        if config.secure:
            if config.secure_cname:
                host = config.secure_cname
            elif config.private_cdn:
                host = f"{cloud_name}-{SHARED_CDN_HOST}"
            else:
                host = SHARED_CDN_HOST
            scheme = "https"
        else:
            if config.cname:
                host = config.cname
            elif config.private_cdn:
                host = f"{cloud_name}-{SHARED_CDN_HOST}"
            else:
                host = SHARED_CDN_HOST
            scheme = "http"

        if config.private_cdn:
            return f"{scheme}://{host}"
        return f"{scheme}://{host}/{cloud_name}"

    def finalize_asset_type(self) -> Optional[str]:
        """
        Build the asset type segment.

        Raises:
            CloudinaryValidationError: If a suffix or root path is not supported
                for this asset and delivery type
        """
        asset_type = self.asset.asset_type
        delivery_type = self.asset.delivery_type

        if self.asset.suffix:
            segment = SUFFIX_ASSET_TYPES.get((asset_type, delivery_type))
            if segment is None:
                raise CloudinaryValidationError(
                    "URL suffix is only supported for image/upload, image/private, "
                    "image/authenticated, video/upload and raw/upload",
                    {"asset_type": asset_type.value, "delivery_type": delivery_type.value},
                )
        else:
            segment = implode_url([asset_type.value, delivery_type.value])

        if self.url_config.use_root_path and not (
            asset_type == AssetType.IMAGE and delivery_type == DeliveryType.UPLOAD
        ):
            raise CloudinaryValidationError(
                "Root path is only supported for image/upload",
                {"asset_type": asset_type.value, "delivery_type": delivery_type.value},
            )

        return self.finalize_shorten(segment)

    def finalize_version(self) -> Optional[str]:
        """Build the version segment, forcing v1 for nested public IDs when configured."""
        if self.asset.version is not None:
            return f"v{self.asset.version}"

        public_id = self.asset.public_id
        if (
            self.url_config.force_version
            and self.asset.delivery_type != DeliveryType.FETCH
            and "/" in public_id
            and not VERSIONED_PUBLIC_ID.match(public_id)
            and not REMOTE_URL.match(public_id)
        ):
            return "v1"

        return None

    def finalize_source(self) -> str:
        """
        Build the escaped source segment.

        Raises:
            CloudinaryValidationError: If the suffix contains a dot or slash
        """
        if self.asset.delivery_type == DeliveryType.FETCH:
            return smart_escape(self.asset.public_id)

        source = smart_escape(self.asset.public_id)

        suffix = self.asset.suffix
        if suffix:
            if "." in suffix or "/" in suffix:
                raise CloudinaryValidationError(
                    "URL suffix must not contain '.' or '/'", {"suffix": suffix}
                )
            source = f"{source}/{suffix}"

        if self.asset.extension:
            source = f"{source}.{self.asset.extension}"

        return source

    def path(
        self,
        with_transformation: Optional[Union[str, Dict[str, Any], Transformation]] = None,
        append: bool = True,
    ) -> str:
        """
        Build the URL path, without the distribution prefix.

        Args:
            with_transformation: Additional transformation
            append: Whether to append the additional transformation or use it instead

        Returns:
            The URL path
        """
        transformation = self.finalize_transformation(with_transformation, append)
        return implode_url(
            [
                self.finalize_asset_type(),
                self.finalize_simple_signature(transformation),
                transformation,
                self.finalize_version(),
                self.finalize_source(),
            ]
        )

    def to_url(
        self,
        with_transformation: Optional[Union[str, Dict[str, Any], Transformation]] = None,
        append: bool = True,
    ) -> str:
        """
        Build the full delivery URL of the asset.

        Args:
            with_transformation: Additional transformation
            append: Whether to append the additional transformation or use it instead

        Returns:
            The delivery URL
        """
        url = implode_url(
            [self.finalize_distribution(), self.path(with_transformation, append)]
        )
        logger.debug("Built delivery URL for %s", self.asset.public_id)
        return url

    def __str__(self) -> str:
        return self.to_url()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(public_id={self.asset.public_id!r}, "
            f"delivery_type={self.asset.delivery_type.value!r})"
        )


class Image(MediaAsset):
    """An image asset."""

    asset_type = AssetType.IMAGE


class Video(MediaAsset):
    """A video asset."""

    asset_type = AssetType.VIDEO


class File(MediaAsset):
    """A raw file asset."""

    asset_type = AssetType.RAW
