"""
ShopCatalog - Base Repository
=============================
Kontrakt repozytorium (CRUD) i dwie bazowe implementacje:

- SupabaseRepository - tabela w Supabase (PostgREST),
- MemoryRepository   - tabela w MemoryStore (tryb mock).

Implementacja jest wybierana RAZ przy starcie (fabryka aplikacji),
serwisy widzą tylko kontrakt BaseRepository.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

from supabase import Client

from core.exceptions import DatabaseError
from core.memory_store import MemoryStore

logger = logging.getLogger(__name__)


class BaseRepository(ABC):
    """
    Kontrakt repozytorium.

    Zasady:
    - zwraca surowe dict / list,
    - brak rekordu = None (get/update) lub False (delete), nie wyjątek,
    - błędy backendu są logowane i przekazywane dalej bez zmian.

    Usage:
        class CategoryRepository(BaseRepository):
            TABLE_NAME = "categories"
            ENTITY_NAME = "Category"
            ORDER_BY = "nom"
    """

    # Subklasy muszą zdefiniować
    TABLE_NAME: str = None
    ENTITY_NAME: str = None

    # Domyślne kolumny
    ID_COLUMN = "id"
    ORDER_BY = "id"

    # True = dane przeżywają restart procesu (baza zdalna)
    PERSISTENT = False

    def __init__(self):
        if not self.TABLE_NAME:
            raise ValueError(f"{self.__class__.__name__} must define TABLE_NAME")
        if not self.ENTITY_NAME:
            self.ENTITY_NAME = self.TABLE_NAME

    # ============================================================
    # Core CRUD Operations
    # ============================================================

    @abstractmethod
    def list(self, order_by: str = None, ascending: bool = True) -> List[Dict[str, Any]]:
        """Wszystkie rekordy tabeli"""

    @abstractmethod
    def find_many(self, order_by: str = None, **filters) -> List[Dict[str, Any]]:
        """Rekordy o polach równych podanym wartościom"""

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        """Rekord po ID lub None"""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Utwórz rekord; zwraca rekord z ID"""

    @abstractmethod
    def create_many(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Utwórz wiele rekordów jednym wywołaniem"""

    @abstractmethod
    def update(self, id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Zaktualizuj rekord; None jeśli nie istnieje"""

    @abstractmethod
    def delete(self, id: Any) -> bool:
        """Usuń rekord; True jeśli istniał i został usunięty"""

    @abstractmethod
    def count(self) -> int:
        """Liczba rekordów w tabeli"""


class SupabaseRepository(BaseRepository):
    """
    Repozytorium tabeli Supabase.

    SELECT pozwala dołączyć tabele powiązane, np. "*, categories(nom)".
    """

    SELECT = "*"
    PERSISTENT = True

    def __init__(self, client: Client):
        super().__init__()
        self.client = client

    def _table(self):
        return self.client.table(self.TABLE_NAME)

    def _select(self, columns: str = None):
        return self._table().select(columns or self.SELECT)

    def _run(self, query, action: str):
        """Wykonaj zapytanie; błąd jest logowany i przekazywany dalej"""
        try:
            return query.execute()
        except Exception as e:
            logger.error(f"[{self.ENTITY_NAME}] {action} failed: {e}")
            raise

    # ============================================================
    # Core CRUD Operations
    # ============================================================

    def list(self, order_by: str = None, ascending: bool = True) -> List[Dict[str, Any]]:
        query = self._select().order(order_by or self.ORDER_BY, desc=not ascending)
        response = self._run(query, "List")
        return response.data or []

    def find_many(self, order_by: str = None, **filters) -> List[Dict[str, Any]]:
        query = self._select()
        for field, value in filters.items():
            query = query.eq(field, value)
        query = query.order(order_by or self.ORDER_BY)

        response = self._run(query, "Find")
        return response.data or []

    def get_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        # limit(1) zamiast single(): brak wiersza to pusta lista, nie błąd PGRST116
        query = self._select().eq(self.ID_COLUMN, id).limit(1)
        response = self._run(query, "Get by ID")
        return response.data[0] if response.data else None

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = {k: v for k, v in data.items() if k != self.ID_COLUMN}
        response = self._run(self._table().insert(data), "Create")

        if response.data:
            record = response.data[0]
            logger.info(f"[{self.ENTITY_NAME}] Created: {record.get(self.ID_COLUMN)}")
            return record

        raise DatabaseError(f"Failed to create {self.ENTITY_NAME}: no data returned")

    def create_many(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not records:
            return []

        records = [{k: v for k, v in r.items() if k != self.ID_COLUMN} for r in records]
        response = self._run(self._table().insert(records), "Bulk create")

        created = response.data or []
        logger.info(f"[{self.ENTITY_NAME}] Bulk created: {len(created)} records")
        return created

    def update(self, id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        data = {k: v for k, v in data.items() if k != self.ID_COLUMN}
        query = self._table().update(data).eq(self.ID_COLUMN, id)
        response = self._run(query, "Update")

        if not response.data:
            return None

        logger.info(f"[{self.ENTITY_NAME}] Updated: {id}")
        return response.data[0]

    def delete(self, id: Any) -> bool:
        query = self._table().delete().eq(self.ID_COLUMN, id)
        response = self._run(query, "Delete")

        deleted = bool(response.data)
        if deleted:
            logger.info(f"[{self.ENTITY_NAME}] Deleted: {id}")
        return deleted

    def count(self) -> int:
        query = self._table().select(self.ID_COLUMN, count="exact").limit(1)
        response = self._run(query, "Count")
        if response.count is not None:
            return response.count
        return len(response.data or [])


class MemoryRepository(BaseRepository):
    """
    Repozytorium tabeli w MemoryStore (tryb mock).
    """

    def __init__(self, store: MemoryStore):
        super().__init__()
        self.store = store

    def _rows(self) -> List[Dict[str, Any]]:
        return self.store.rows(self.TABLE_NAME)

    @staticmethod
    def _sorted(rows: List[Dict[str, Any]], order_by: str, ascending: bool = True):
        # sort stabilny: przy równych kluczach zostaje kolejność wstawiania
        def key(row):
            value = row.get(order_by)
            if isinstance(value, str):
                value = value.casefold()
            return (value is None, value if value is not None else 0)

        return sorted(rows, key=key, reverse=not ascending)

    # ============================================================
    # Core CRUD Operations
    # ============================================================

    def list(self, order_by: str = None, ascending: bool = True) -> List[Dict[str, Any]]:
        return self._sorted(self._rows(), order_by or self.ORDER_BY, ascending)

    def find_many(self, order_by: str = None, **filters) -> List[Dict[str, Any]]:
        rows = [
            row for row in self._rows()
            if all(row.get(field) == value for field, value in filters.items())
        ]
        return self._sorted(rows, order_by or self.ORDER_BY)

    def get_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        return self.store.get(self.TABLE_NAME, id)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        record = self.store.insert(self.TABLE_NAME, data)
        logger.info(f"[{self.ENTITY_NAME}] Created (mock): {record[self.ID_COLUMN]}")
        return record

    def create_many(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return self.store.insert_many(self.TABLE_NAME, records)

    def update(self, id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        record = self.store.update(self.TABLE_NAME, id, data)
        if record:
            logger.info(f"[{self.ENTITY_NAME}] Updated (mock): {id}")
        return record

    def delete(self, id: Any) -> bool:
        deleted = self.store.delete(self.TABLE_NAME, id)
        if deleted:
            logger.info(f"[{self.ENTITY_NAME}] Deleted (mock): {id}")
        return deleted

    def count(self) -> int:
        return len(self._rows())
