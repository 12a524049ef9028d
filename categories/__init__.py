"""
ShopCatalog - Categories Module
===============================
Moduł zarządzania kategoriami artykułów.
"""

from categories.repository import (
    CategoryRepository,
    SupabaseCategoryRepository,
    MemoryCategoryRepository,
)
from categories.service import CategoryService

__all__ = [
    'CategoryRepository',
    'SupabaseCategoryRepository',
    'MemoryCategoryRepository',
    'CategoryService',
]
