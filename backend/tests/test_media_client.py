"""
Media Host Client Tests

Upload and destroy through the Cloudinary SDK, with the uploader mocked out.
"""

from unittest.mock import patch

import cloudinary.exceptions
import pytest

from app.core.interfaces import MediaHostConfig, MediaHostError
from app.core.media_client import CloudinaryMediaClient, MediaClientFactory


@pytest.fixture
def config():
    return MediaHostConfig(
        cloud_name="demo",
        api_key="key-123",
        api_secret="shh",
        folder="movies",
        timeout=30,
    )


@pytest.fixture
def media(config):
    return CloudinaryMediaClient(config)


class TestUpload:
    """Tests for image upload."""

    def test_upload_returns_url_and_public_id(self, media):
        with patch("cloudinary.uploader.upload", return_value={
            "secure_url": "https://res.cloudinary.com/demo/image/upload/v1/movies/abc.jpg",
            "public_id": "movies/abc",
        }):
            result = media.upload(b"img", "poster.jpg", "image/jpeg")

        assert result.url == "https://res.cloudinary.com/demo/image/upload/v1/movies/abc.jpg"
        assert result.public_id == "movies/abc"

    def test_upload_requests_compression_with_credentials_and_timeout(self, media):
        with patch("cloudinary.uploader.upload", return_value={"secure_url": "u", "public_id": "p"}) as upload:
            media.upload(b"img", "poster.jpg", "image/jpeg")

        args, kwargs = upload.call_args
        assert args[0].read() == b"img"
        assert kwargs["folder"] == "movies"
        assert kwargs["quality"] == "auto:good"
        assert kwargs["fetch_format"] == "auto"
        assert kwargs["flags"] == "lossy"
        assert kwargs["timeout"] == 30
        assert kwargs["cloud_name"] == "demo"
        assert kwargs["api_key"] == "key-123"
        assert kwargs["api_secret"] == "shh"

    def test_sdk_error_raises(self, media):
        with patch("cloudinary.uploader.upload", side_effect=cloudinary.exceptions.GeneralError("timed out")):
            with pytest.raises(MediaHostError):
                media.upload(b"img")

    def test_incomplete_payload_raises(self, media):
        with patch("cloudinary.uploader.upload", return_value={"secure_url": "u"}):
            with pytest.raises(MediaHostError):
                media.upload(b"img")


class TestDestroy:
    """Tests for image removal."""

    def test_destroy_ok(self, media):
        with patch("cloudinary.uploader.destroy", return_value={"result": "ok"}) as destroy:
            assert media.destroy("movies/abc") is True

        args, kwargs = destroy.call_args
        assert args[0] == "movies/abc"
        assert kwargs["timeout"] == 30

    def test_destroy_missing_image_is_success(self, media):
        with patch("cloudinary.uploader.destroy", return_value={"result": "not found"}):
            assert media.destroy("movies/gone") is True

    def test_destroy_unexpected_result_raises(self, media):
        with patch("cloudinary.uploader.destroy", return_value={"result": "error"}):
            with pytest.raises(MediaHostError):
                media.destroy("movies/abc")

    def test_destroy_sdk_error_raises(self, media):
        with patch("cloudinary.uploader.destroy", side_effect=cloudinary.exceptions.Error("denied")):
            with pytest.raises(MediaHostError):
                media.destroy("movies/abc")


def test_factory_reads_settings(settings):
    settings = settings.model_copy(update={
        "CLOUDINARY_CLOUD_NAME": "catalog",
        "MEDIA_HOST_TIMEOUT": 5,
    })

    client = MediaClientFactory.create_client(settings)

    assert client.config.cloud_name == "catalog"
    assert client.config.timeout == 5
    assert client.config.folder == "movies"
