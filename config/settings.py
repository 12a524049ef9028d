#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Konfiguracja aplikacji ShopCatalog
Panel administracyjny katalogu produktów (artykuły, kategorie, warianty)

UWAGA: Klucze Supabase trzymaj w pliku .env, nie w repozytorium!
Brak klucza (lub klucz-zaślepka) = tryb mock (dane w pamięci).
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Wczytaj zmienne środowiskowe z .env
load_dotenv()

# ============================================================
# SUPABASE - KONFIGURACJA BAZY DANYCH I STORAGE
# ============================================================

SUPABASE_URL = os.getenv(
    "SUPABASE_URL",
    "https://oxtwoujwwnzbcnaovvqv.supabase.co"
).rstrip("/")

# ANON KEY - klucz publiczny (RLS po stronie Supabase)
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "").strip()

# Wartość z szablonu .env.example - traktowana jak brak klucza
PLACEHOLDER_ANON_KEY = "VOTRE_CLE_ANON"

# Adres front-endu (link w mailu resetu hasła)
SITE_URL = os.getenv("SITE_URL", "http://localhost:5173").rstrip("/")

# ============================================================
# TABELE
# ============================================================

ARTICLES_TABLE = "articles"
CATEGORIES_TABLE = "categories"
VARIANTS_TABLE = "article_variantes"

# ============================================================
# KATALOG - WARTOŚCI DOMYŚLNE
# ============================================================

DEFAULT_CATEGORY_COLOR = "#6b7280"
UNCATEGORIZED_LABEL = "Non catégorisé"

# Sloty na zdjęcia artykułu (maks. 5)
PHOTO_FIELDS = ("photo", "photo_2", "photo_3", "photo_4", "photo_5")

# ============================================================
# STORAGE - KONFIGURACJA PLIKÓW
# ============================================================

# Bucket na zdjęcia artykułów
STORAGE_BUCKET = "articles"

# Domyślny folder w bucket
STORAGE_DEFAULT_FOLDER = "images"

# Cache-Control dla uploadowanych plików (sekundy)
STORAGE_CACHE_CONTROL = "3600"

# Maksymalny rozmiar obrazu (5 MB)
MAX_IMAGE_SIZE_MB = 5
MAX_IMAGE_SIZE = MAX_IMAGE_SIZE_MB * 1024 * 1024

# Dozwolone typy MIME obrazów
ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")

# Maksymalna liczba równoległych uploadów
MAX_CONCURRENT_UPLOADS = 4

# ============================================================
# LOGOWANIE
# ============================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# ============================================================
# MIME TYPES - MAPOWANIE ROZSZERZEŃ
# ============================================================

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
    ".tiff": "image/tiff",
    ".svg": "image/svg+xml",
}


def get_mime_type(filename: str) -> str:
    """
    Zwróć MIME type dla pliku na podstawie rozszerzenia.

    Args:
        filename: Nazwa pliku lub ścieżka

    Returns:
        MIME type string
    """
    ext = Path(filename).suffix.lower()
    return MIME_TYPES.get(ext, "application/octet-stream")


def is_supabase_configured(anon_key: str = None) -> bool:
    """
    Sprawdź czy Supabase jest skonfigurowany.

    False = aplikacja działa w trybie mock (dane w pamięci).
    """
    key = SUPABASE_ANON_KEY if anon_key is None else anon_key.strip()
    return bool(SUPABASE_URL) and bool(key) and key != PLACEHOLDER_ANON_KEY


# ============================================================
# WALIDACJA KONFIGURACJI
# ============================================================

def validate_config():
    """
    Sprawdź czy konfiguracja trybu zdalnego jest poprawna.
    Wywołaj przy starcie aplikacji (tryb mock nie wymaga kluczy).
    """
    errors = []

    if not SUPABASE_URL:
        errors.append("SUPABASE_URL is not set")
    elif not SUPABASE_URL.startswith(("http://", "https://")):
        errors.append("SUPABASE_URL must start with http:// or https://")

    if SUPABASE_ANON_KEY and SUPABASE_ANON_KEY != PLACEHOLDER_ANON_KEY and len(SUPABASE_ANON_KEY) < 30:
        errors.append("SUPABASE_ANON_KEY looks invalid (too short)")

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return True


if __name__ == "__main__":
    print("=" * 60)
    print("KONFIGURACJA ShopCatalog")
    print("=" * 60)
    print(f"Supabase URL: {SUPABASE_URL}")
    print(f"Tryb: {'supabase' if is_supabase_configured() else 'mock'}")
    print(f"Storage Bucket: {STORAGE_BUCKET}")
    print(f"Max Image Size: {MAX_IMAGE_SIZE_MB} MB")
