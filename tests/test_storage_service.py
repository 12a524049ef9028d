"""Testy StorageService (walidacja, upload, usuwanie)"""

import re
from unittest.mock import MagicMock

import pytest

from config.settings import MAX_IMAGE_SIZE
from core.events import EventType
from core.exceptions import (
    FileTooLargeError,
    FileUploadError,
    InvalidFileTypeError,
    StorageError,
    ValidationError,
)
from images import ImageFile, MemoryImageStorage, StorageService, SupabaseImageStorage

PUBLIC_PREFIX = "https://demo.supabase.co/storage/v1/object/public/articles/"


def png(name="photo.png", size=128):
    return ImageFile(name=name, content=b"\x89PNG" + b"0" * size, content_type="image/png")


@pytest.fixture
def backend():
    storage = MagicMock()
    storage.get_public_url.side_effect = lambda path: PUBLIC_PREFIX + path
    return storage


@pytest.fixture
def service(backend, event_bus):
    return StorageService(backend, event_bus)


# ============================================================
# Walidacja
# ============================================================

def test_too_large_file_fails_before_network(service, backend):
    big = ImageFile("big.jpg", b"0" * (6 * 1024 * 1024), "image/jpeg")

    with pytest.raises(FileTooLargeError):
        service.upload(big)
    backend.upload.assert_not_called()


def test_file_at_size_limit_is_accepted(service, backend):
    service.upload(ImageFile("limit.jpg", b"0" * MAX_IMAGE_SIZE, "image/jpeg"))
    backend.upload.assert_called_once()


def test_bmp_is_rejected(service, backend):
    with pytest.raises(InvalidFileTypeError):
        service.upload(ImageFile("scan.bmp", b"BM", "image/bmp"))
    backend.upload.assert_not_called()


def test_missing_file(service):
    with pytest.raises(ValidationError):
        service.upload(None)


# ============================================================
# Upload
# ============================================================

def test_upload_returns_url_and_path(service, backend, published):
    result = service.upload(png(), folder="covers")

    assert re.fullmatch(r"covers/\d{13}_[a-z0-9]{6}\.png", result["path"])
    assert result["url"] == PUBLIC_PREFIX + result["path"]

    path, data, content_type = backend.upload.call_args.args
    assert path == result["path"]
    assert content_type == "image/png"
    assert published[-1].type == EventType.IMAGE_UPLOADED


def test_default_folder(service):
    assert service.upload(png())["path"].startswith("images/")


def test_backend_failure_becomes_upload_error(service, backend):
    backend.upload.side_effect = Exception("Bucket not found")

    with pytest.raises(FileUploadError) as exc_info:
        service.upload(png())
    assert "Bucket not found" in str(exc_info.value)


def test_upload_multiple_keeps_input_order(service):
    files = [png("a.png"), png("b.gif"), png("c.webp")]

    results = service.upload_multiple(files, folder="gallery")

    assert [r["path"].rsplit(".", 1)[1] for r in results] == ["png", "gif", "webp"]
    assert len({r["path"] for r in results}) == 3


def test_upload_multiple_fails_as_a_whole(service, backend):
    def upload(path, data, content_type):
        if path.endswith(".gif"):
            raise Exception("network down")
        return path

    backend.upload.side_effect = upload

    with pytest.raises(FileUploadError):
        service.upload_multiple([png("a.png"), png("b.gif"), png("c.png")])


def test_upload_multiple_validates_before_any_upload(service, backend):
    files = [png("a.png"), ImageFile("b.bmp", b"BM", "image/bmp")]

    with pytest.raises(InvalidFileTypeError):
        service.upload_multiple(files)
    backend.upload.assert_not_called()


def test_upload_multiple_empty(service, backend):
    assert service.upload_multiple([]) == []


# ============================================================
# Usuwanie
# ============================================================

def test_delete_by_public_url(service, backend):
    assert service.delete(PUBLIC_PREFIX + "images/1_abc123.png") is True
    backend.remove.assert_called_once_with(["images/1_abc123.png"])


@pytest.mark.parametrize("value", [None, "", "https://images.unsplash.com/photo-1.jpg"])
def test_delete_ignores_foreign_values(service, backend, value):
    assert service.delete(value) is False
    backend.remove.assert_not_called()


def test_delete_multiple_filters_foreign_urls(service, backend):
    removed = service.delete_multiple([
        PUBLIC_PREFIX + "images/a.png",
        "https://images.unsplash.com/photo-1.jpg",
        None,
        PUBLIC_PREFIX + "gallery/b.png",
    ])

    assert removed == 2
    backend.remove.assert_called_once_with(["images/a.png", "gallery/b.png"])


def test_delete_multiple_without_own_files(service, backend):
    assert service.delete_multiple(["https://example.com/x.png"]) == 0
    backend.remove.assert_not_called()


def test_delete_failure_raises_storage_error(service, backend):
    backend.remove.side_effect = Exception("permission denied")

    with pytest.raises(StorageError):
        service.delete(PUBLIC_PREFIX + "images/a.png")


def test_is_managed_url(service):
    assert service.is_managed_url(PUBLIC_PREFIX + "images/a.png") is True
    assert service.is_managed_url("https://images.unsplash.com/photo-1.jpg") is False
    assert service.is_managed_url(None) is False


# ============================================================
# Backendy
# ============================================================

def test_memory_storage_round_trip():
    storage = MemoryImageStorage()
    service = StorageService(storage)

    result = service.upload(png())
    assert result["path"] in storage.files
    assert "/storage/v1/object/public/articles/" in result["url"]

    service.delete(result["url"])
    assert storage.files == {}


def test_memory_storage_refuses_overwrite():
    storage = MemoryImageStorage()
    storage.upload("images/a.png", b"1", "image/png")

    with pytest.raises(StorageError):
        storage.upload("images/a.png", b"2", "image/png")


def test_supabase_storage_uploads_without_overwrite(fake_client):
    storage = SupabaseImageStorage(fake_client)

    storage.upload("images/a.png", b"data", "image/png")

    fake_client.storage.from_.assert_called_with("articles")
    fake_client.storage.from_.return_value.upload.assert_called_once_with(
        path="images/a.png",
        file=b"data",
        file_options={"content-type": "image/png", "cache-control": "3600", "upsert": "false"},
    )


def test_image_file_from_path(tmp_path):
    file_path = tmp_path / "buty.webp"
    file_path.write_bytes(b"RIFF")

    image = ImageFile.from_path(str(file_path))

    assert image.name == "buty.webp"
    assert image.content_type == "image/webp"
    assert image.size == 4
