"""
Image host client.

Uploads profile images to Cloudinary through the official SDK. The image is
sent as a base64 data URI; only the returned ``secure_url`` is kept by the
application.
"""

import base64
from typing import Optional, Callable, Dict, Any
import logging

import cloudinary.uploader

from core.config import get_settings, Settings
from core.exceptions import ImageHostException, ValidationException
from services.error_handling import handle_upstream_errors

logger = logging.getLogger(__name__)


class CloudinaryImageHost:
    """
    Wrapper class for Cloudinary uploads.

    ``uploader`` defaults to ``cloudinary.uploader.upload``; credentials are
    passed per call so no global SDK configuration is needed.

    Example:
        host = CloudinaryImageHost()
        url = host.upload_image(content, "me.png", "image/png")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        uploader: Optional[Callable[..., Dict[str, Any]]] = None,
    ):
        self.settings = settings or get_settings()
        self.uploader = uploader or cloudinary.uploader.upload

    @handle_upstream_errors("Image host", ImageHostException)
    def upload_image(self, content: bytes, filename: str, content_type: Optional[str] = None) -> str:
        """
        Upload raw image bytes.

        Args:
            content: File body
            filename: Name of the uploaded file (logged only)
            content_type: MIME type used for the data URI

        Returns:
            str: HTTPS URL of the hosted image

        Raises:
            ValidationException: Empty upload
            ImageHostException: Host not configured, rejected the upload, or unreachable
        """
        if not content:
            raise ValidationException("Invalid file upload")
        if not self.settings.image_host_configured():
            raise ImageHostException("image host credentials are not configured")

        data_uri = f"data:{content_type or 'application/octet-stream'};base64,{base64.b64encode(content).decode('ascii')}"

        logger.info(f"Uploading {filename} ({len(content)} bytes) to image host")
        result = self.uploader(
            data_uri,
            resource_type="auto",
            folder=self.settings.cloudinary_folder,
            cloud_name=self.settings.cloudinary_cloud_name,
            api_key=self.settings.cloudinary_api_key,
            api_secret=self.settings.cloudinary_api_secret,
            timeout=self.settings.cloudinary_timeout,
        )

        secure_url = result.get("secure_url")
        if not secure_url:
            raise ImageHostException("upload response did not contain a secure_url")
        return secure_url
