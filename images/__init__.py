"""
ShopCatalog - Images Module
===========================
Zdjęcia artykułów w Supabase Storage (lub w pamięci w trybie mock).
"""

from images.storage import (
    ImageFile,
    SupabaseImageStorage,
    MemoryImageStorage,
    public_url,
)
from images.service import StorageService, generate_file_name

__all__ = [
    'ImageFile',
    'SupabaseImageStorage',
    'MemoryImageStorage',
    'public_url',
    'StorageService',
    'generate_file_name',
]
