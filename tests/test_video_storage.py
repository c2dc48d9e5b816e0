"""Tests for VideoStorage - upload validation, storage and removal."""

import io
import os
import re

import pytest

from utils.errors import NotFoundError, StorageWriteError, ValidationError
from utils.uploads import MAX_VIDEO_SIZE, VideoStorage


class TestAcceptVideo:
    """Tests for accept()."""

    def test_stores_under_generated_name(self, videos, upload_dir):
        stored = videos.accept(io.BytesIO(b"frames"), "video/mp4", "My Demo.MP4")

        assert re.fullmatch(r"video-\d+-\d+\.mp4", stored["filename"])
        assert stored["originalName"] == "My Demo.MP4"
        assert (upload_dir / stored["filename"]).read_bytes() == b"frames"

    def test_original_name_never_used_as_path(self, videos, upload_dir):
        stored = videos.accept(io.BytesIO(b"x"), "video/webm", "../../etc/passwd.webm")

        assert "/" not in stored["filename"]
        assert stored["filename"].endswith(".webm")
        assert os.listdir(upload_dir) == [stored["filename"]]

    def test_field_prefix(self, videos):
        stored = videos.accept(io.BytesIO(b"x"), "video/mp4", "a.mp4", field="clip")

        assert stored["filename"].startswith("clip-")

    def test_name_without_extension(self, videos):
        stored = videos.accept(io.BytesIO(b"x"), "video/quicktime", "recording")

        assert re.fullmatch(r"video-\d+-\d+", stored["filename"])

    @pytest.mark.parametrize("name", ["видео.mp4", "عرض.MP4", "デモ動画.mp4"])
    def test_non_ascii_name_keeps_extension(self, videos, name):
        stored = videos.accept(io.BytesIO(b"x"), "video/mp4", name)

        assert re.fullmatch(r"video-\d+-\d+\.mp4", stored["filename"])
        assert stored["originalName"] == name

    @pytest.mark.parametrize("name", ["clip.mp4 ", "clip.mp4\n", "clip.m p4", "clip.averyverylongext"])
    def test_odd_extension_is_dropped(self, videos, name):
        stored = videos.accept(io.BytesIO(b"x"), "video/mp4", name)

        assert re.fullmatch(r"video-\d+-\d+", stored["filename"])

    def test_rejects_non_video(self, videos, upload_dir):
        with pytest.raises(ValidationError, match="Only video files"):
            videos.accept(io.BytesIO(b"%PDF"), "application/pdf", "cv.pdf")

        assert os.listdir(upload_dir) == []

    def test_rejects_missing_media_type(self, videos):
        with pytest.raises(ValidationError):
            videos.accept(io.BytesIO(b"x"), None, "a.mp4")

    def test_default_ceiling_is_50mb(self):
        assert MAX_VIDEO_SIZE == 50 * 1024 * 1024
        assert VideoStorage().max_size == MAX_VIDEO_SIZE

    def test_exactly_50mb_succeeds(self, videos, upload_dir):
        payload = io.BytesIO(bytes(MAX_VIDEO_SIZE))

        stored = videos.accept(payload, "video/mp4", "big.mp4")

        assert (upload_dir / stored["filename"]).stat().st_size == MAX_VIDEO_SIZE

    def test_one_byte_over_fails_and_leaves_nothing(self, videos, upload_dir):
        payload = io.BytesIO(bytes(MAX_VIDEO_SIZE + 1))

        with pytest.raises(ValidationError, match="too large"):
            videos.accept(payload, "video/mp4", "big.mp4")

        assert os.listdir(upload_dir) == []

    def test_declared_size_over_limit_fails_early(self, videos):
        with pytest.raises(ValidationError, match="too large"):
            videos.accept(io.BytesIO(b"x"), "video/mp4", "a.mp4", declared_size=MAX_VIDEO_SIZE + 1)

    def test_write_failure_is_storage_error(self, videos, upload_dir):
        class BrokenStream:
            def read(self, size):
                raise OSError(5, "Input/output error")

        with pytest.raises(StorageWriteError):
            videos.accept(BrokenStream(), "video/mp4", "a.mp4")

        assert os.listdir(upload_dir) == []


class TestRemoveVideo:
    """Tests for remove()."""

    def test_removes_file(self, videos, upload_dir, stored_video):
        assert videos.remove(stored_video) is True

        assert not (upload_dir / stored_video).exists()

    def test_remove_is_idempotent(self, videos, stored_video):
        videos.remove(stored_video)

        assert videos.remove(stored_video) is False

    def test_rejects_path_traversal(self, videos):
        with pytest.raises(ValidationError):
            videos.remove("../projects.json")


class TestFetchVideo:
    """Tests for fetch() and exists()."""

    def test_fetch_returns_path(self, videos, upload_dir, stored_video):
        path = videos.fetch(stored_video)

        assert os.path.samefile(path, upload_dir / stored_video)

    def test_fetch_missing_raises(self, videos):
        with pytest.raises(NotFoundError):
            videos.fetch("video-1-2.mp4")

    @pytest.mark.parametrize("name", ["../secret.mp4", "a/b.mp4", "a\\b.mp4", "..", ".hidden", ""])
    def test_fetch_rejects_unsafe_names(self, videos, name):
        with pytest.raises(ValidationError):
            videos.fetch(name)

    def test_exists(self, videos, stored_video):
        assert videos.exists(stored_video)
        assert not videos.exists("video-1-2.mp4")
        assert not videos.exists("../etc/passwd")
