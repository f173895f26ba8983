"""
Shared pytest fixtures for NEXTRA tests.
"""
import io
from typing import Optional

import pytest

from nextra.core.config import Settings
from nextra.di.container import DIContainer


class FakeUpload:
    """Stand-in for fastapi.UploadFile in unit tests"""

    def __init__(self, filename: Optional[str], content: bytes = b"\xff\xd8\xff fake jpeg"):
        self.filename = filename
        self._buffer = io.BytesIO(content)

    async def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)


@pytest.fixture
def make_upload():
    """Factory for fake uploads: make_upload("alice.jpg", b"...")"""
    return FakeUpload


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Settings pointing every directory at a temporary location."""
    monkeypatch.setenv("NEXTRA_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("NEXTRA_UPLOADS_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("NEXTRA_FRONTEND_DIR", str(tmp_path / "frontend"))
    monkeypatch.setenv("NEXTRA_UPLOAD_MAX_MB", "1")
    monkeypatch.setenv("NEXTRA_CORS_ORIGINS", "*")
    return Settings()


@pytest.fixture
def container(settings):
    """A DI container wired to the temporary settings."""
    return DIContainer(settings=settings)
