"""
ShopCatalog - Memory Store
==========================
Magazyn danych w pamięci procesu dla trybu mock.

- Tworzony jawnie (przez fabrykę aplikacji) i przekazywany do repozytoriów,
- zasilany świeżą kopią danych startowych przy każdym starcie,
- nie jest zapisywany na dysk,
- nie jest synchronizowany (jeden konsument).
"""

from typing import Any, Dict, Iterable, List, Optional
import copy
import logging

logger = logging.getLogger(__name__)


class MemoryStore:
    """
    Uporządkowane kolekcje rekordów (tabele) z przydziałem ID.

    ID = max(istniejące, najwyższe kiedykolwiek przydzielone) + 1,
    więc numer usuniętego rekordu nigdy nie wraca.

    Usage:
        store = MemoryStore.from_fixtures()
        row = store.insert("categories", {"nom": "Sport"})
    """

    ID_COLUMN = "id"

    def __init__(self, tables: Dict[str, List[Dict[str, Any]]] = None):
        self._tables: Dict[str, List[Dict[str, Any]]] = {}
        self._high_water: Dict[str, int] = {}

        for name, rows in (tables or {}).items():
            self._tables[name] = [dict(row) for row in rows]
            self._high_water[name] = self._max_id(self._tables[name])

    @classmethod
    def from_fixtures(cls) -> 'MemoryStore':
        """Magazyn z danymi startowymi katalogu"""
        from core.fixtures import fixture_tables

        store = cls(fixture_tables())
        logger.info(f"[MemoryStore] Seeded: {store.counts()}")
        return store

    # ============================================================
    # Odczyt
    # ============================================================

    def rows(self, table: str) -> List[Dict[str, Any]]:
        """Kopie wszystkich rekordów tabeli (w kolejności wstawiania)"""
        return [dict(row) for row in self._tables.get(table, [])]

    def get(self, table: str, id: Any) -> Optional[Dict[str, Any]]:
        """Kopia rekordu po ID lub None"""
        index = self._index_of(table, id)
        if index is None:
            return None
        return dict(self._tables[table][index])

    def counts(self) -> Dict[str, int]:
        return {name: len(rows) for name, rows in self._tables.items()}

    # ============================================================
    # Zapis
    # ============================================================

    def next_id(self, table: str) -> int:
        rows = self._tables.get(table, [])
        return max(self._max_id(rows), self._high_water.get(table, 0)) + 1

    def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]:
        """Wstaw rekord z nowym ID; zwraca kopię zapisanego rekordu"""
        new_id = self.next_id(table)
        row = {self.ID_COLUMN: new_id, **{k: v for k, v in record.items() if k != self.ID_COLUMN}}

        self._tables.setdefault(table, []).append(row)
        self._high_water[table] = new_id
        return dict(row)

    def insert_many(self, table: str, records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [self.insert(table, record) for record in records]

    def update(self, table: str, id: Any, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Scal zmiany z rekordem; None jeśli rekord nie istnieje"""
        index = self._index_of(table, id)
        if index is None:
            return None

        changes = {k: v for k, v in changes.items() if k != self.ID_COLUMN}
        self._tables[table][index] = {**self._tables[table][index], **copy.deepcopy(changes)}
        return dict(self._tables[table][index])

    def delete(self, table: str, id: Any) -> bool:
        """Usuń rekord; False jeśli nie istniał"""
        index = self._index_of(table, id)
        if index is None:
            return False

        del self._tables[table][index]
        return True

    # ============================================================
    # Pomocnicze
    # ============================================================

    def _index_of(self, table: str, id: Any) -> Optional[int]:
        try:
            id = int(id)
        except (TypeError, ValueError):
            return None

        for index, row in enumerate(self._tables.get(table, [])):
            if row.get(self.ID_COLUMN) == id:
                return index
        return None

    def _max_id(self, rows: List[Dict[str, Any]]) -> int:
        return max((row.get(self.ID_COLUMN) or 0 for row in rows), default=0)
