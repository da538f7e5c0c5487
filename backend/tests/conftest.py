"""
Pytest Configuration and Fixtures

Shared fixtures: in-memory database, fake media host and an API client
wired to both through dependency overrides.
"""

import os
import sys
from pathlib import Path

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.core.interfaces import MediaClientInterface, MediaHostError, UploadResult
from app.core.media_client import get_media_client
from app.core.rate_limit import limiter
from app.db import Base, get_db
from app.main import app
from app import models  # noqa: F401


JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01" + b"\x00" * 256 + b"\xff\xd9"


class FakeMediaClient(MediaClientInterface):
    """In-memory media host recording every call"""

    def __init__(self):
        self.objects = {}
        self.calls = []
        self.fail_upload = False
        self.fail_destroy = False
        self._counter = 0

    def upload(self, data, filename="poster", content_type="application/octet-stream"):
        self.calls.append(("upload", filename))
        if self.fail_upload:
            raise MediaHostError("upload timed out")
        self._counter += 1
        public_id = f"movies/poster{self._counter}"
        self.objects[public_id] = data
        return UploadResult(
            url=f"https://res.cloudinary.com/demo/image/upload/v1/{public_id}.jpg",
            public_id=public_id,
        )

    def destroy(self, public_id):
        self.calls.append(("destroy", public_id))
        if self.fail_destroy:
            raise MediaHostError("destroy failed", 500)
        self.objects.pop(public_id, None)
        return True


@pytest.fixture
def settings():
    return Settings(
        SECRET_KEY="test-secret-key",
        ACCESS_TOKEN_EXPIRE_MINUTES=15,
        REFRESH_TOKEN_EXPIRE_DAYS=7,
        MAX_POSTER_BYTES=64 * 1024,
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def media_client():
    return FakeMediaClient()


@pytest.fixture
def client(db_session, media_client, settings):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_client] = lambda: media_client
    app.dependency_overrides[get_settings] = lambda: settings
    limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def register(client, email="viewer@example.com", password="secret123"):
    return client.post("/auth/register", json={"email": email, "password": password})


@pytest.fixture
def auth_headers(client):
    response = register(client)
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


def poster(content=JPEG_BYTES, filename="poster.jpg", content_type="image/jpeg"):
    return {"poster": (filename, content, content_type)}


def create_movie(client, headers, title="Inception", year=2010, files=None):
    return client.post(
        "/movies",
        data={"title": title, "publishingYear": str(year)},
        files=files if files is not None else poster(),
        headers=headers,
    )
