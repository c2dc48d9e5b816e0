"""Pytest configuration and fixtures."""

import io
import sys
from pathlib import Path

import pytest

# Make the flat top-level modules importable without installing
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))

from app import create_app
from utils.data import ProjectStore
from utils.uploads import VideoStorage


# ---------------------------------------------------------------------------
# Storage Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads" / "videos"


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "projects.json"


@pytest.fixture
def videos(upload_dir: Path) -> VideoStorage:
    """VideoStorage writing into a temporary upload directory."""
    return VideoStorage(upload_folder=str(upload_dir))


@pytest.fixture
def store(data_file: Path, videos: VideoStorage) -> ProjectStore:
    """ProjectStore backed by an empty temporary JSON file."""
    project_store = ProjectStore(data_file=str(data_file), videos=videos)
    project_store.ensure_file()
    return project_store


@pytest.fixture
def proxy_fields() -> dict:
    """Minimal valid project payload."""
    return {
        "title": "Proxy",
        "description": "TLS proxy",
        "technologies": ["Go"],
        "githubLink": "https://github.com/x/proxy",
    }


@pytest.fixture
def stored_video(videos: VideoStorage) -> str:
    """A small video already accepted by the storage; returns its filename."""
    stored = videos.accept(io.BytesIO(b"\x00\x00\x00\x18ftypmp42"), "video/mp4", "demo.mp4")
    return stored["filename"]


# ---------------------------------------------------------------------------
# Application Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def app(data_file: Path, upload_dir: Path):
    """Flask app pointed at temporary storage."""
    return create_app("testing", {
        "DATA_FILE": str(data_file),
        "UPLOAD_FOLDER": str(upload_dir),
    })


@pytest.fixture
def client(app):
    return app.test_client()
