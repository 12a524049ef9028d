"""
ShopCatalog - Variants Module
=============================
Moduł wariantów artykułów (rozmiar, kolor, ...).
"""

from variants.repository import (
    VariantRepository,
    SupabaseVariantRepository,
    MemoryVariantRepository,
)
from variants.service import VariantService

__all__ = [
    'VariantRepository',
    'SupabaseVariantRepository',
    'MemoryVariantRepository',
    'VariantService',
]
