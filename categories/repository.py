"""
ShopCatalog - Category Repository
=================================
Repozytorium kategorii (tabela categories).
"""

from config.settings import CATEGORIES_TABLE
from core.base_repository import BaseRepository, SupabaseRepository, MemoryRepository


class CategoryRepository(BaseRepository):
    """
    Kontrakt repozytorium kategorii.

    Lista sortowana po nazwie (nom) rosnąco.
    """

    TABLE_NAME = CATEGORIES_TABLE
    ENTITY_NAME = "Category"
    ORDER_BY = "nom"


class SupabaseCategoryRepository(SupabaseRepository, CategoryRepository):
    """Kategorie w Supabase"""


class MemoryCategoryRepository(MemoryRepository, CategoryRepository):
    """Kategorie w MemoryStore (tryb mock)"""
