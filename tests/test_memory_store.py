"""Testy MemoryStore - tabele w pamięci dla trybu mock"""

from config.settings import ARTICLES_TABLE, CATEGORIES_TABLE, VARIANTS_TABLE
from core.memory_store import MemoryStore


def test_from_fixtures_loads_all_tables(store):
    counts = store.counts()
    assert counts[ARTICLES_TABLE] == 12
    assert counts[CATEGORIES_TABLE] == 5
    assert counts[VARIANTS_TABLE] == 6


def test_each_store_gets_a_fresh_copy(store):
    store.delete(ARTICLES_TABLE, 1)
    assert MemoryStore.from_fixtures().get(ARTICLES_TABLE, 1) is not None


def test_first_id_in_empty_table_is_one():
    store = MemoryStore()
    row = store.insert("categories", {"nom": "Sport"})
    assert row["id"] == 1


def test_insert_uses_max_plus_one(store):
    row = store.insert(ARTICLES_TABLE, {"nom": "Nouveau"})
    assert row["id"] == 13


def test_deleted_highest_id_is_not_reused(store):
    row = store.insert(ARTICLES_TABLE, {"nom": "Temporaire"})
    assert store.delete(ARTICLES_TABLE, row["id"]) is True

    again = store.insert(ARTICLES_TABLE, {"nom": "Suivant"})
    assert again["id"] == row["id"] + 1


def test_insert_ignores_caller_id(store):
    row = store.insert(CATEGORIES_TABLE, {"id": 1, "nom": "Doublon"})
    assert row["id"] == 6


def test_update_merges_fields(store):
    row = store.update(ARTICLES_TABLE, 3, {"quantite": 7})
    assert row["quantite"] == 7
    assert row["nom"] == "Nike Air Max 90"


def test_missing_records():
    store = MemoryStore()
    assert store.get("articles", 1) is None
    assert store.update("articles", 1, {"nom": "x"}) is None
    assert store.delete("articles", 1) is False


def test_non_numeric_id_is_not_found(store):
    assert store.get(ARTICLES_TABLE, "abc") is None
    assert store.get(ARTICLES_TABLE, "3")["id"] == 3


def test_rows_are_copies(store):
    rows = store.rows(ARTICLES_TABLE)
    rows[0]["nom"] = "Zmienione"
    assert store.get(ARTICLES_TABLE, rows[0]["id"])["nom"] != "Zmienione"
