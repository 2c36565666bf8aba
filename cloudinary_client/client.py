"""
Main Cloudinary client for building delivery URLs.
"""

import logging
from typing import Optional, Dict, Any, Union, Type

from .asset import MediaAsset, Image, Video, File
from .models import (
    AssetDescriptor,
    AssetType,
    AuthToken,
    CloudConfig,
    DeliveryType,
    UrlConfig,
)
from .transformation import Transformation

logger = logging.getLogger(__name__)

ASSET_CLASSES: Dict[AssetType, Type[MediaAsset]] = {
    AssetType.IMAGE: Image,
    AssetType.VIDEO: Video,
    AssetType.RAW: File,
}


class CloudinaryClient:
    """
    A client for building Cloudinary delivery URLs.

    This client holds the cloud credentials and default URL options and creates
    assets that share them. It does not perform any HTTP requests.
    """

    def __init__(
        self,
        cloud_name: str,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        url_config: Optional[UrlConfig] = None,
        auth_token: Optional[AuthToken] = None,
    ):
        """
        Initialize the Cloudinary client.

        Args:
            cloud_name: The name of the cloud (e.g., "demo")
            api_key: Optional API key
            api_secret: Optional API secret, required for signed URLs
            url_config: Default URL options for all assets
            auth_token: Optional token authentication settings
        """
        self.cloud = CloudConfig(
            cloud_name=cloud_name, api_key=api_key, api_secret=api_secret
        )
        self.url_config = url_config or UrlConfig()
        self.auth_token = auth_token or AuthToken()

        logger.debug(
            "Initialized cloudinary-client/%s for cloud %s",
            self._get_version(),
            cloud_name,
        )

    def _get_version(self) -> str:
        """Get the client version."""
        try:
            from . import __version__

            return __version__
        except ImportError:
            return "unknown"

    def _resolve_url_config(self, url_options: Dict[str, Any]) -> UrlConfig:
        """
        Apply per-call URL options on top of the client defaults.

        Args:
            url_options: UrlConfig field overrides

        Returns:
            UrlConfig object

        Raises:
            TypeError: If an option is not a UrlConfig field
        """
        if not url_options:
            return self.url_config

        unknown = set(url_options) - set(UrlConfig.model_fields)
        if unknown:
            raise TypeError(f"Unknown URL options: {', '.join(sorted(unknown))}")

        return UrlConfig(**{**self.url_config.model_dump(), **url_options})

    # Asset Methods

    def asset(
        self,
        public_id: Union[str, AssetDescriptor],
        asset_type: Union[str, AssetType] = AssetType.IMAGE,
        transformation: Optional[Union[str, Dict[str, Any], Transformation]] = None,
        url_config: Optional[UrlConfig] = None,
        **asset_options: Any,
    ) -> MediaAsset:
        """
        Create an asset of the given type.

        Args:
            public_id: Public ID of the asset, or a complete AssetDescriptor
            asset_type: Asset type, ignored when an AssetDescriptor is given
            transformation: Transformation applied to the asset
            url_config: URL options, defaults to the client options
            **asset_options: Extra AssetDescriptor fields (delivery_type, version,
                suffix, extension)

        Returns:
            MediaAsset object
        """
        if isinstance(public_id, AssetDescriptor):
            asset_type = public_id.asset_type
        asset_class = ASSET_CLASSES[AssetType(asset_type)]
        return asset_class(
            public_id,
            self.cloud,
            url_config=url_config or self.url_config,
            auth_token=self.auth_token,
            transformation=transformation,
            **asset_options,
        )

    def image(self, public_id: str, **kwargs: Any) -> Image:
        """Create an image asset."""
        return self.asset(public_id, AssetType.IMAGE, **kwargs)

    def video(self, public_id: str, **kwargs: Any) -> Video:
        """Create a video asset."""
        return self.asset(public_id, AssetType.VIDEO, **kwargs)

    def raw(self, public_id: str, **kwargs: Any) -> File:
        """Create a raw file asset."""
        return self.asset(public_id, AssetType.RAW, **kwargs)

    def url(
        self,
        public_id: str,
        asset_type: Union[str, AssetType] = AssetType.IMAGE,
        delivery_type: Union[str, DeliveryType] = DeliveryType.UPLOAD,
        transformation: Optional[Union[str, Dict[str, Any], Transformation]] = None,
        version: Optional[Union[int, str]] = None,
        suffix: Optional[str] = None,
        extension: Optional[str] = None,
        **url_options: Any,
    ) -> str:
        """
        Build a delivery URL in one call.

        Args:
            public_id: Public ID of the asset
            asset_type: Asset type
            delivery_type: Delivery type
            transformation: Transformation applied to the asset
            version: Asset version
            suffix: SEO suffix
            extension: File extension
            **url_options: UrlConfig overrides for this URL (e.g. sign_url=True)

        Returns:
            The delivery URL
        """
        descriptor = AssetDescriptor(
            public_id=public_id,
            asset_type=asset_type,
            delivery_type=delivery_type,
            version=version,
            suffix=suffix,
            extension=extension,
        )
        return self.asset(
            descriptor,
            transformation=transformation,
            url_config=self._resolve_url_config(url_options),
        ).to_url()
