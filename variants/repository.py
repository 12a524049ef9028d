"""
ShopCatalog - Variant Repository
================================
Repozytorium wariantów artykułów (tabela article_variantes).
"""

from datetime import datetime
from typing import Any, Dict, List

from config.settings import VARIANTS_TABLE
from core.base_repository import BaseRepository, SupabaseRepository, MemoryRepository


class VariantRepository(BaseRepository):
    """
    Kontrakt repozytorium wariantów.

    list_for_article: sortowanie po nazwie osi (nom_variante) rosnąco,
    w ramach osi - kolejność wstawiania.
    """

    TABLE_NAME = VARIANTS_TABLE
    ENTITY_NAME = "Variant"
    ORDER_BY = "nom_variante"

    def list_for_article(self, article_id: Any) -> List[Dict[str, Any]]:
        return self.find_many(article_id=article_id)


class SupabaseVariantRepository(SupabaseRepository, VariantRepository):
    """Warianty w Supabase"""

    def find_many(self, order_by: str = None, **filters) -> List[Dict[str, Any]]:
        query = self._select()
        for field, value in filters.items():
            query = query.eq(field, value)
        # drugi klucz sortowania = kolejność wstawiania
        query = query.order(order_by or self.ORDER_BY).order(self.ID_COLUMN)

        response = self._run(query, "Find")
        return response.data or []


class MemoryVariantRepository(MemoryRepository, VariantRepository):
    """Warianty w MemoryStore (tryb mock)"""

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = {**data}
        data.setdefault("created_at", datetime.now().isoformat())
        return super().create(data)

    def list_for_article(self, article_id: Any) -> List[Dict[str, Any]]:
        try:
            article_id = int(article_id)
        except (TypeError, ValueError):
            return []
        return self.find_many(article_id=article_id)
