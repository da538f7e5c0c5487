import io
import logging
from typing import Any, Dict

import cloudinary.exceptions
import cloudinary.uploader
from fastapi import Depends

from app.core.config import Settings, get_settings
from app.core.interfaces import MediaClientInterface, MediaHostConfig, MediaHostError, UploadResult

logger = logging.getLogger(__name__)

class CloudinaryMediaClient(MediaClientInterface):
    """Media host client backed by the Cloudinary SDK"""

    def __init__(self, config: MediaHostConfig):
        self.config = config

    def _options(self) -> Dict[str, Any]:
        # credentials go with each call instead of the SDK's global config
        return {
            "cloud_name": self.config.cloud_name,
            "api_key": self.config.api_key,
            "api_secret": self.config.api_secret,
            "timeout": self.config.timeout,
        }

    def upload(self, data: bytes, filename: str = "poster", content_type: str = "application/octet-stream") -> UploadResult:
        """Upload an image into the configured folder"""
        try:
            logger.info(f"Uploading {filename} to folder {self.config.folder}")
            result = cloudinary.uploader.upload(
                io.BytesIO(data),
                folder=self.config.folder,
                resource_type="image",
                quality=self.config.quality,
                fetch_format=self.config.fetch_format,
                flags=self.config.flags,
                **self._options(),
            )
        except cloudinary.exceptions.Error as e:
            logger.error(f"Upload failed: {str(e)}")
            raise MediaHostError(f"Upload failed: {str(e)}")

        url = result.get("secure_url") or result.get("url")
        public_id = result.get("public_id")
        if not url or not public_id:
            raise MediaHostError("Upload response is missing url or public_id")

        logger.info(f"Uploaded image {public_id}")
        return UploadResult(url=url, public_id=public_id)

    def destroy(self, public_id: str) -> bool:
        """Remove an image; an already missing image counts as removed"""
        try:
            result = cloudinary.uploader.destroy(public_id, resource_type="image", **self._options())
        except cloudinary.exceptions.Error as e:
            logger.error(f"Destroy failed for {public_id}: {str(e)}")
            raise MediaHostError(f"Destroy failed: {str(e)}")

        outcome = result.get("result")
        if outcome not in ("ok", "not found"):
            raise MediaHostError(f"Unexpected destroy result: {outcome}")

        logger.info(f"Destroyed image {public_id} ({outcome})")
        return True

class MediaClientFactory:
    """Factory class for creating media host clients"""

    @staticmethod
    def create_client(settings: Settings) -> CloudinaryMediaClient:
        config = MediaHostConfig(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME or "",
            api_key=settings.CLOUDINARY_API_KEY or "",
            api_secret=settings.CLOUDINARY_API_SECRET or "",
            folder=settings.MEDIA_HOST_FOLDER,
            quality=settings.MEDIA_HOST_QUALITY,
            timeout=settings.MEDIA_HOST_TIMEOUT,
        )
        return CloudinaryMediaClient(config)

def get_media_client(settings: Settings = Depends(get_settings)) -> MediaClientInterface:
    """Dependency to get the media host client"""
    return MediaClientFactory.create_client(settings)
