"""
ArticleRepository - Warstwa dostępu do tabeli articles

Odpowiedzialność:
- CRUD operacje na artykułach
- Dołączanie kategorii (nazwa, kolor) i spłaszczanie do widoku
- Wyszukiwanie po nazwie artykułu i nazwie kategorii

Zasady:
- list / get_by_id / find_many / search zwracają WIDOK płaski:
  {..., 'categorie': <nazwa>, 'categorie_couleur': <kolor>}
- create / update zwracają surowy rekord tabeli (bez pól kategorii)
- Pola 'categorie' i 'categorie_couleur' nigdy nie są zapisywane
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional
import logging
import re

from supabase import Client

from config.settings import (
    ARTICLES_TABLE,
    CATEGORIES_TABLE,
    DEFAULT_CATEGORY_COLOR,
    UNCATEGORIZED_LABEL,
)
from core.base_repository import BaseRepository, SupabaseRepository, MemoryRepository
from core.memory_store import MemoryStore

logger = logging.getLogger(__name__)

# Znaki sterujące składnią filtra or=(...) w PostgREST
_FILTER_SYNTAX = re.compile(r'[,()]')


def flatten_article(row: Dict[str, Any], category: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Spłaszcz artykuł z dołączoną kategorią do widoku.

    Brak kategorii (NULL lub nieistniejące ID) -> etykieta "Non catégorisé".
    """
    if isinstance(category, list):
        category = category[0] if category else None

    view = {k: v for k, v in row.items() if k != 'categories'}
    view['categorie'] = category.get('nom') if category else UNCATEGORIZED_LABEL
    view['categorie_couleur'] = (category or {}).get('couleur') or DEFAULT_CATEGORY_COLOR
    return view


class ArticleRepository(BaseRepository):
    """
    Kontrakt repozytorium artykułów.

    Lista sortowana po ID rosnąco.
    """

    TABLE_NAME = ARTICLES_TABLE
    ENTITY_NAME = "Article"
    ORDER_BY = "id"

    @abstractmethod
    def list_by_category(self, category_id: Any) -> List[Dict[str, Any]]:
        """Artykuły danej kategorii (widok płaski)"""

    @abstractmethod
    def search(self, term: str) -> List[Dict[str, Any]]:
        """
        Wyszukiwanie bez rozróżniania wielkości liter
        po nazwie artykułu lub nazwie jego kategorii.
        """


class SupabaseArticleRepository(SupabaseRepository, ArticleRepository):
    """
    Artykuły w Supabase.

    Kategoria dołączana przez relację categorie_id -> categories.id.
    """

    SELECT = "*, categories(nom, couleur)"

    def __init__(self, client: Client):
        super().__init__(client)

    def list(self, order_by: str = None, ascending: bool = True) -> List[Dict[str, Any]]:
        rows = super().list(order_by, ascending)
        return [self._view(row) for row in rows]

    def find_many(self, order_by: str = None, **filters) -> List[Dict[str, Any]]:
        rows = super().find_many(order_by, **filters)
        return [self._view(row) for row in rows]

    def get_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        row = super().get_by_id(id)
        return self._view(row) if row else None

    def list_by_category(self, category_id: Any) -> List[Dict[str, Any]]:
        return self.find_many(categorie_id=category_id)

    def search(self, term: str) -> List[Dict[str, Any]]:
        term = _FILTER_SYNTAX.sub(' ', term or '').strip()
        if not term:
            return self.list()

        pattern = f"%{term}%"

        # Kategorie pasujące do frazy
        categories_query = self.client.table(CATEGORIES_TABLE)\
            .select('id')\
            .ilike('nom', pattern)
        category_ids = [str(c['id']) for c in (self._run(categories_query, "Search").data or [])]

        conditions = [f"nom.ilike.{pattern}"]
        if category_ids:
            conditions.append(f"categorie_id.in.({','.join(category_ids)})")

        query = self._select()\
            .or_(','.join(conditions))\
            .order(self.ORDER_BY)

        response = self._run(query, "Search")
        return [self._view(row) for row in (response.data or [])]

    @staticmethod
    def _view(row: Dict[str, Any]) -> Dict[str, Any]:
        return flatten_article(row, row.get('categories'))


class MemoryArticleRepository(MemoryRepository, ArticleRepository):
    """
    Artykuły w MemoryStore (tryb mock).

    Kategorie czytane z tego samego magazynu (tabela categories).
    """

    def __init__(self, store: MemoryStore):
        super().__init__(store)

    def _categories(self) -> Dict[Any, Dict[str, Any]]:
        return {c['id']: c for c in self.store.rows(CATEGORIES_TABLE)}

    def _views(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        categories = self._categories()
        return [flatten_article(row, categories.get(row.get('categorie_id'))) for row in rows]

    def list(self, order_by: str = None, ascending: bool = True) -> List[Dict[str, Any]]:
        return self._views(super().list(order_by, ascending))

    def find_many(self, order_by: str = None, **filters) -> List[Dict[str, Any]]:
        return self._views(super().find_many(order_by, **filters))

    def get_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        row = super().get_by_id(id)
        if row is None:
            return None
        return flatten_article(row, self._categories().get(row.get('categorie_id')))

    def list_by_category(self, category_id: Any) -> List[Dict[str, Any]]:
        try:
            category_id = int(category_id)
        except (TypeError, ValueError):
            return []
        return self.find_many(categorie_id=category_id)

    def search(self, term: str) -> List[Dict[str, Any]]:
        needle = (term or '').strip().casefold()
        if not needle:
            return self.list()

        categories = self._categories()
        results = []
        for row in self.list():
            category = categories.get(row.get('categorie_id'))
            category_name = category['nom'] if category else ''
            if needle in (row.get('nom') or '').casefold() or needle in category_name.casefold():
                results.append(row)
        return results
