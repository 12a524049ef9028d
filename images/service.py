"""
StorageService - Zdjęcia artykułów w buckecie "articles"

Odpowiedzialność:
- Walidacja pliku (typ MIME, rozmiar) PRZED jakimkolwiek wywołaniem sieciowym
- Unikalne nazwy plików: {folder}/{epoch_ms}_{losowe6}.{ext}
- Upload pojedynczy i równoległy (wszystko albo nic)
- Usuwanie tylko plików z własnego bucketa
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional
import logging
import secrets
import string
import time

from config.settings import (
    STORAGE_BUCKET,
    STORAGE_DEFAULT_FOLDER,
    MAX_IMAGE_SIZE,
    MAX_IMAGE_SIZE_MB,
    ALLOWED_IMAGE_TYPES,
    MAX_CONCURRENT_UPLOADS,
)
from core.events import EventBus, EventType, create_event
from core.exceptions import (
    StorageError,
    FileUploadError,
    FileTooLargeError,
    InvalidFileTypeError,
    ValidationError,
)

from images.storage import ImageFile

logger = logging.getLogger(__name__)

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def generate_file_name(file: ImageFile, folder: str = STORAGE_DEFAULT_FOLDER) -> str:
    """
    Ścieżka docelowa pliku w buckecie.

    Example:
        >>> generate_file_name(ImageFile("buty.JPG", b"...", "image/jpeg"), "gallery")
        "gallery/1700000000000_k3x9qa.JPG"
    """
    timestamp = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(6))
    extension = file.extension or file.name
    return f"{folder}/{timestamp}_{suffix}.{extension}"


class StorageService:
    """
    Serwis zdjęć artykułów.

    Example:
        service = StorageService(SupabaseImageStorage(client))

        result = service.upload(ImageFile.from_path("buty.jpg"), folder="covers")
        result["url"]   # publiczny URL
        result["path"]  # "covers/1700000000000_k3x9qa.jpg"

        service.delete(result["url"])
    """

    def __init__(self, storage, event_bus: EventBus = None, bucket: str = STORAGE_BUCKET):
        """
        Args:
            storage: SupabaseImageStorage lub MemoryImageStorage
            event_bus: Szyna eventów (opcjonalna)
            bucket: Nazwa bucketa (do rozpoznawania własnych URL)
        """
        self.storage = storage
        self.event_bus = event_bus or EventBus()
        self.bucket = bucket

    # =========================================================
    # WALIDACJA
    # =========================================================

    @staticmethod
    def validate(file: Optional[ImageFile]) -> None:
        """
        Sprawdź plik przed uploadem.

        Raises:
            ValidationError: Brak pliku
            InvalidFileTypeError: Typ spoza listy dozwolonych
            FileTooLargeError: Plik większy niż MAX_IMAGE_SIZE
        """
        if file is None:
            raise ValidationError("No file provided", code="NO_FILE")

        if file.content_type not in ALLOWED_IMAGE_TYPES:
            raise InvalidFileTypeError(file.name, file.content_type, ALLOWED_IMAGE_TYPES)

        if file.size > MAX_IMAGE_SIZE:
            raise FileTooLargeError(file.name, file.size / (1024 * 1024), MAX_IMAGE_SIZE_MB)

    # =========================================================
    # UPLOAD
    # =========================================================

    def upload(self, file: ImageFile, folder: str = STORAGE_DEFAULT_FOLDER) -> Dict[str, str]:
        """
        Wyślij zdjęcie do bucketa.

        Returns:
            {"url": publiczny URL, "path": ścieżka w buckecie}

        Raises:
            ValidationError / InvalidFileTypeError / FileTooLargeError: przed wysłaniem
            FileUploadError: Błąd backendu (z jego komunikatem)
        """
        self.validate(file)

        path = generate_file_name(file, folder)
        try:
            self.storage.upload(path, file.content, file.content_type)
        except Exception as e:
            logger.error(f"[Storage] Upload failed: {path} - {e}")
            raise FileUploadError(path, str(e)) from e

        result = {"url": self.storage.get_public_url(path), "path": path}

        self._publish(EventType.IMAGE_UPLOADED, {**result, "name": file.name, "size": file.size})
        logger.info(f"[Storage] Uploaded: {file.name} -> {path}")
        return result

    def upload_multiple(
        self,
        files: Iterable[ImageFile],
        folder: str = STORAGE_DEFAULT_FOLDER
    ) -> List[Dict[str, str]]:
        """
        Wyślij wiele zdjęć równolegle.

        Wszystko albo nic: pierwszy błąd (w kolejności plików) jest
        rzucany dalej, wyniki pozostałych są pomijane.

        Returns:
            Lista {"url", "path"} w kolejności plików wejściowych
        """
        files = list(files)
        if not files:
            return []

        # walidacja całej partii zanim cokolwiek trafi do sieci
        for file in files:
            self.validate(file)

        workers = min(MAX_CONCURRENT_UPLOADS, len(files))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(lambda f: self.upload(f, folder), files))

        logger.info(f"[Storage] Uploaded {len(results)} files to {folder}/")
        return results

    # =========================================================
    # USUWANIE
    # =========================================================

    def _relative_path(self, value: str) -> str:
        """URL lub ścieżka -> ścieżka względem bucketa"""
        return value.split(f"{self.bucket}/")[-1]

    def _is_own(self, value: Any) -> bool:
        return bool(value) and isinstance(value, str) and self.bucket in value

    def delete(self, path: str) -> bool:
        """
        Usuń zdjęcie (URL lub ścieżka zawierająca nazwę bucketa).

        Wartości spoza bucketa (np. zewnętrzne URL) są ignorowane.

        Returns:
            True jeśli wysłano żądanie usunięcia

        Raises:
            StorageError: Błąd backendu
        """
        if not self._is_own(path):
            return False

        relative = self._relative_path(path)
        if not relative:
            return False

        self._remove([relative])
        return True

    def delete_multiple(self, paths: Iterable[str]) -> int:
        """
        Usuń wiele zdjęć jednym żądaniem.

        Returns:
            Liczba ścieżek przekazanych do usunięcia (0 = brak żądania)
        """
        relative = [self._relative_path(p) for p in paths if self._is_own(p)]
        relative = [p for p in relative if p]
        if not relative:
            return 0

        self._remove(relative)
        return len(relative)

    def _remove(self, paths: List[str]) -> None:
        try:
            self.storage.remove(paths)
        except StorageError:
            logger.error(f"[Storage] Delete failed: {paths}")
            raise
        except Exception as e:
            logger.error(f"[Storage] Delete failed: {paths} - {e}")
            raise StorageError(f"Failed to delete files: {e}", details={"paths": paths}) from e

        for path in paths:
            self._publish(EventType.IMAGE_DELETED, {"path": path})
        logger.info(f"[Storage] Deleted: {', '.join(paths)}")

    # =========================================================
    # POMOCNICZE
    # =========================================================

    def is_managed_url(self, url: Optional[str]) -> bool:
        """Czy URL wskazuje na zdjęcie w buckecie Supabase (kandydat do sprzątania)"""
        return bool(url) and "supabase" in url and self.bucket in url

    def _publish(self, event_type: EventType, data: Dict[str, Any]):
        self.event_bus.publish(create_event(event_type, data, source="Storage"))
