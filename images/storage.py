#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ImageStorage - Warstwa dostępu do bucketa ze zdjęciami artykułów

Odpowiedzialność:
- Upload bajtów pod wskazaną ścieżkę (bez nadpisywania)
- Usuwanie plików
- Generowanie publicznych URL

Dwie implementacje o tym samym interfejsie:
- SupabaseImageStorage - Supabase Storage (client.storage)
- MemoryImageStorage   - bucket w pamięci (tryb mock)

Błędy backendu NIE są tu tłumaczone - robi to StorageService.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple
import logging

from supabase import Client

from config.settings import (
    SUPABASE_URL,
    STORAGE_BUCKET,
    STORAGE_CACHE_CONTROL,
    get_mime_type,
)
from core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass
class ImageFile:
    """
    Plik do wysłania.

    Attributes:
        name: Oryginalna nazwa pliku (z rozszerzeniem)
        content: Dane binarne
        content_type: MIME type
    """
    name: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content or b"")

    @property
    def extension(self) -> str:
        """Rozszerzenie bez kropki, np. 'jpg'"""
        return Path(self.name).suffix.lstrip(".")

    @classmethod
    def from_path(cls, file_path: str) -> "ImageFile":
        """Wczytaj plik z dysku; MIME type z rozszerzenia"""
        path = Path(file_path)
        return cls(
            name=path.name,
            content=path.read_bytes(),
            content_type=get_mime_type(path.name),
        )


def public_url(path: str, bucket: str = STORAGE_BUCKET) -> str:
    """
    Publiczny URL pliku w buckecie.

    Example:
        >>> public_url("images/1700000000000_ab12cd.jpg")
        "https://xxx.supabase.co/storage/v1/object/public/articles/images/1700000000000_ab12cd.jpg"
    """
    if not path:
        return ""
    return f"{SUPABASE_URL}/storage/v1/object/public/{bucket}/{path}"


class SupabaseImageStorage:
    """
    Bucket Supabase Storage.

    Example:
        from core import get_supabase_client

        storage = SupabaseImageStorage(get_supabase_client())
        storage.upload("images/a.png", data, "image/png")
        url = storage.get_public_url("images/a.png")
    """

    def __init__(self, client: Client, bucket: str = STORAGE_BUCKET):
        self.client = client
        self.bucket = bucket

    def _bucket(self):
        return self.client.storage.from_(self.bucket)

    def upload(self, path: str, data: bytes, content_type: str) -> str:
        # upsert jako STRING (wymagane przez Supabase)
        self._bucket().upload(
            path=path,
            file=data,
            file_options={
                "content-type": content_type,
                "cache-control": STORAGE_CACHE_CONTROL,
                "upsert": "false",
            }
        )
        logger.debug(f"[Storage] Uploaded: {path} ({len(data):,} bytes)")
        return path

    def remove(self, paths: List[str]) -> None:
        self._bucket().remove(paths)
        logger.debug(f"[Storage] Removed: {paths}")

    def get_public_url(self, path: str) -> str:
        return self._bucket().get_public_url(path)


class MemoryImageStorage:
    """
    Bucket w pamięci (tryb mock).

    Pliki żyją do końca procesu; URL-e mają ten sam format co w Supabase.
    """

    def __init__(self, bucket: str = STORAGE_BUCKET):
        self.bucket = bucket
        self.files: Dict[str, Tuple[bytes, str]] = {}

    def upload(self, path: str, data: bytes, content_type: str) -> str:
        if path in self.files:
            raise StorageError(f"Duplicate: the resource already exists: {path}")
        self.files[path] = (data, content_type)
        logger.debug(f"[Storage] Uploaded (mock): {path} ({len(data):,} bytes)")
        return path

    def remove(self, paths: List[str]) -> None:
        for path in paths:
            self.files.pop(path, None)
        logger.debug(f"[Storage] Removed (mock): {paths}")

    def get_public_url(self, path: str) -> str:
        return public_url(path, self.bucket)
