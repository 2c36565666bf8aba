"""
Final formatting steps shared by all media assets.
"""

import logging
from typing import Any, Dict, Optional, Union

from .exceptions import CloudinaryConfigurationError
from .models import AssetType, DeliveryType
from .transformation import Transformation
from .utils import (
    ALGO_SHA1,
    ALGO_SHA256,
    LONG_URL_SIGNATURE_LENGTH,
    SHORT_URL_SIGNATURE_LENGTH,
    base64url_encode,
    format_simple_signature,
    implode_url,
    sign,
)

logger = logging.getLogger(__name__)

SHORTEN_ASSET_TYPE = "iu"


class MediaAssetFinalizerMixin:
    """
    Finalizers for the transformation, signature and asset type parts of a URL.

    Classes using this mixin provide ``asset``, ``cloud``, ``url_config``,
    ``auth_token`` and ``transformation`` attributes.
    """

    def finalize_transformation(
        self,
        with_transformation: Optional[Union[str, Dict[str, Any], Transformation]] = None,
        append: bool = True,
    ) -> str:
        """
        Finalize the asset transformation.

        Args:
            with_transformation: Additional transformation
            append: Whether to append the additional transformation to the asset
                transformation or use it instead

        Returns:
            The serialized transformation, empty if there is none
        """
        if with_transformation is not None and not isinstance(
            with_transformation, Transformation
        ):
            with_transformation = Transformation(with_transformation)

        if with_transformation is None and not self.url_config.responsive_width:
            return str(self.transformation) if self.transformation is not None else ""

        if not append or self.transformation is None:
            return str(with_transformation) if with_transformation is not None else ""

        resulting = self.transformation.copy()

        if self.url_config.responsive_width:
            resulting.add_transformation(self.url_config.responsive_width_transformation)

        resulting.add_transformation(with_transformation)

        return str(resulting)

    def finalize_simple_signature(
        self, transformation: Optional[Union[str, Transformation]] = None
    ) -> str:
        """
        Sign both the transformation and the asset parts of the URL.

        Args:
            transformation: Transformation that appears in the URL. Defaults to
                the asset transformation.

        Returns:
            The formatted signature component, empty if the URL is not signed

        Raises:
            CloudinaryConfigurationError: If signing is requested without an API secret
        """
        if not self.url_config.sign_url or self.auth_token.is_enabled():
            return ""

        if not self.cloud.api_secret:
            raise CloudinaryConfigurationError(
                "Must supply api_secret to sign URLs",
                {"cloud_name": self.cloud.cloud_name},
            )

        if transformation is None:
            transformation = self.transformation

        long_signature = self.url_config.long_url_signature
        if self.asset.delivery_type == DeliveryType.FETCH:
            source = self.asset.public_id
        else:
            source = self.asset.public_id_with_extension()
        to_sign = implode_url([transformation, source])
        signature = base64url_encode(
            sign(
                to_sign,
                self.cloud.api_secret,
                True,
                ALGO_SHA256 if long_signature else ALGO_SHA1,
            )
        )

        logger.debug("Signing delivery URL for %s", self.asset.public_id)

        return format_simple_signature(
            signature,
            LONG_URL_SIGNATURE_LENGTH if long_signature else SHORT_URL_SIGNATURE_LENGTH,
        )

    def finalize_shorten(self, asset_type: Optional[str]) -> Optional[str]:
        """
        Finalize the 'shorten' functionality.

        Only image/upload assets can be shortened.

        Args:
            asset_type: The asset type segment to finalize

        Returns:
            The finalized asset type segment, None when it is omitted
        """
        if (
            self.url_config.shorten
            and self.asset.delivery_type == DeliveryType.UPLOAD
            and self.asset.asset_type == AssetType.IMAGE
        ):
            asset_type = SHORTEN_ASSET_TYPE

        if self.url_config.use_root_path:
            asset_type = None

        return asset_type
