"""
Shared test fixtures and configuration for the menu admin tests.
"""
import io
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from menu_admin import create_app
from menu_admin.config import Config
from menu_admin.storage.json_store import JsonStore
from menu_admin.storage.uploads import UploadManager


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for JsonStore tests."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def temp_upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def app(temp_data_dir: Path, temp_upload_dir: Path, tmp_path: Path) -> Flask:
    """A fresh application per test, with every collection backed by tmp_path."""

    class TestConfig(Config):
        TESTING = True
        DATA_DIR = temp_data_dir
        UPLOAD_DIR = temp_upload_dir
        FRONTEND_DIR = tmp_path / "dist"

    yield create_app(TestConfig)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def json_store(temp_data_dir: Path) -> JsonStore:
    """Create a JsonStore instance with temporary directory."""
    return JsonStore(temp_data_dir)


@pytest.fixture
def upload_manager(temp_upload_dir: Path) -> UploadManager:
    return UploadManager(temp_upload_dir)


@pytest.fixture
def sample_png() -> bytes:
    """Bytes of a small real PNG image."""
    return create_test_image()


# Helper functions for tests

def create_test_image(width: int = 32, height: int = 32,
                      color: tuple = (255, 0, 0, 255)) -> bytes:
    """Render an RGBA PNG in memory and return its bytes."""
    from PIL import Image

    buf = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buf, "PNG")
    return buf.getvalue()
