"""
Image host and scraper collaborators, without network or browser.
"""

from unittest.mock import Mock

import pytest

from core.config import Settings
from core.exceptions import (
    ExternalServiceException,
    ImageHostException,
    NotFoundException,
    ValidationException,
)
from integrations.image_host import CloudinaryImageHost
from integrations.linkedin_scraper import is_auth_wall
from services.error_handling import handle_upstream_errors


pytestmark = pytest.mark.unit


def cloudinary_settings(**overrides):
    values = {
        "database_url": "sqlite://",
        "cloudinary_cloud_name": "demo",
        "cloudinary_api_key": "key",
        "cloudinary_api_secret": "shh",
    }
    values.update(overrides)
    return Settings(**values)


def ok_uploader(secure_url="https://res.cloudinary.com/demo/image/upload/me.png"):
    return Mock(return_value={"secure_url": secure_url, "public_id": "profile_images/me"})


def test_upload_sends_data_uri_with_credentials():
    uploader = ok_uploader()
    host = CloudinaryImageHost(settings=cloudinary_settings(), uploader=uploader)

    url = host.upload_image(b"abc", "me.png", "image/png")

    assert url == "https://res.cloudinary.com/demo/image/upload/me.png"
    args, kwargs = uploader.call_args
    assert args[0] == "data:image/png;base64,YWJj"
    assert kwargs["resource_type"] == "auto"
    assert kwargs["folder"] == "profile_images"
    assert kwargs["cloud_name"] == "demo"
    assert kwargs["api_key"] == "key"
    assert kwargs["api_secret"] == "shh"


def test_empty_upload_is_invalid():
    uploader = ok_uploader()
    host = CloudinaryImageHost(settings=cloudinary_settings(), uploader=uploader)

    with pytest.raises(ValidationException):
        host.upload_image(b"", "empty.png", "image/png")
    uploader.assert_not_called()


def test_unconfigured_host_fails_before_upload():
    uploader = ok_uploader()
    settings = cloudinary_settings(cloudinary_cloud_name=None, cloudinary_api_key=None, cloudinary_api_secret=None)
    host = CloudinaryImageHost(settings=settings, uploader=uploader)

    with pytest.raises(ImageHostException):
        host.upload_image(b"abc", "me.png")
    uploader.assert_not_called()


def test_rejected_upload_is_wrapped():
    uploader = Mock(side_effect=RuntimeError("Invalid Signature"))
    host = CloudinaryImageHost(settings=cloudinary_settings(), uploader=uploader)

    with pytest.raises(ImageHostException) as excinfo:
        host.upload_image(b"abc", "me.png")

    assert excinfo.value.message == "Image host error: Invalid Signature"


def test_response_without_url_is_an_error():
    uploader = Mock(return_value={"error": {"message": "nope"}})
    host = CloudinaryImageHost(settings=cloudinary_settings(), uploader=uploader)

    with pytest.raises(ImageHostException):
        host.upload_image(b"abc", "me.png")


def test_default_uploader_is_the_sdk():
    import cloudinary.uploader

    host = CloudinaryImageHost(settings=cloudinary_settings())

    assert host.uploader is cloudinary.uploader.upload


@pytest.mark.parametrize("url,expected", [
    ("https://www.linkedin.com/authwall?trk=foo", True),
    ("https://www.linkedin.com/in/alice/", False),
])
def test_is_auth_wall(url, expected):
    assert is_auth_wall(url) is expected


def test_upstream_errors_wrap_unknown_exceptions():
    @handle_upstream_errors("Thing")
    def boom():
        raise RuntimeError("socket closed")

    with pytest.raises(ExternalServiceException) as excinfo:
        boom()

    assert excinfo.value.message == "Thing error: socket closed"
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_upstream_errors_pass_domain_exceptions_through():
    @handle_upstream_errors("Thing")
    def missing():
        raise NotFoundException("User", "u1")

    with pytest.raises(NotFoundException):
        missing()
