"""Testy ArticleService w trybie mock"""

import pytest

from config.settings import PHOTO_FIELDS, DEFAULT_CATEGORY_COLOR, UNCATEGORIZED_LABEL
from core.events import EventType
from core.exceptions import InvalidFieldValueError, RequiredFieldError


@pytest.fixture
def articles(catalog):
    return catalog.articles


# ============================================================
# Odczyt
# ============================================================

def test_list_is_ordered_by_id_and_flattened(articles):
    result = articles.list()

    assert [a["id"] for a in result] == list(range(1, 13))
    assert result[0]["categorie"] == "Électronique"
    assert result[0]["categorie_couleur"] == "#3b82f6"
    assert "categories" not in result[0]


def test_get_by_id_unknown_returns_none(articles):
    assert articles.get_by_id(999) is None
    assert articles.get_by_id("abc") is None


def test_list_by_category(articles):
    assert [a["id"] for a in articles.list_by_category(1)] == [1, 2, 4, 6, 11]
    assert [a["id"] for a in articles.list_by_category("3")] == [3, 10]
    assert articles.list_by_category("abc") == []


def test_search_is_case_insensitive_on_name(articles):
    result = articles.search("Max")

    assert [a["id"] for a in result] == [3]
    assert result[0]["categorie"] == "Chaussures"


def test_search_matches_category_name(articles):
    assert [a["id"] for a in articles.search("chaussures")] == [3, 10]


def test_empty_search_returns_everything(articles):
    assert len(articles.search("")) == 12
    assert len(articles.search("   ")) == 12


def test_list_categories(articles):
    names = articles.list_categories()
    assert len(names) == 5
    assert "Chaussures" in names


# ============================================================
# Zapis
# ============================================================

def test_create_coerces_numbers(articles):
    created = articles.create({
        "nom": "Nike Air Force 1",
        "prix": "119.99",
        "quantite": "20",
        "categorie_id": "3",
    })

    fetched = articles.get_by_id(created["id"])
    assert fetched["prix"] == 119.99
    assert isinstance(fetched["prix"], float)
    assert fetched["quantite"] == 20
    assert isinstance(fetched["quantite"], int)
    assert fetched["categorie"] == "Chaussures"


def test_create_accepts_decimal_comma(articles):
    created = articles.create({"nom": "Lampe", "prix": "12,5", "quantite": 1})
    assert created["prix"] == 12.5


def test_create_writes_every_photo_slot(articles):
    created = articles.create({
        "nom": "Chaise",
        "prix": 10,
        "quantite": 1,
        "photo": "https://example.com/a.jpg",
        "photo_3": "",
    })

    assert created["photo"] == "https://example.com/a.jpg"
    for field in PHOTO_FIELDS[1:]:
        assert created[field] is None


def test_create_without_category_is_uncategorized(articles):
    created = articles.create({"nom": "Divers", "prix": 1, "quantite": 1, "categorie_id": ""})

    assert created["categorie_id"] is None
    assert created["categorie"] == UNCATEGORIZED_LABEL
    assert created["categorie_couleur"] == DEFAULT_CATEGORY_COLOR


def test_dangling_category_falls_back_to_uncategorized(articles):
    created = articles.create({"nom": "Orphelin", "prix": 1, "quantite": 1, "categorie_id": 999})
    assert created["categorie"] == UNCATEGORIZED_LABEL


@pytest.mark.parametrize("data", [
    {"nom": "X", "prix": -1, "quantite": 1},
    {"nom": "X", "prix": "abc", "quantite": 1},
    {"nom": "X", "prix": 1, "quantite": -3},
    {"nom": "X", "prix": 1, "quantite": "2.5"},
    {"nom": "X", "prix": "nan", "quantite": 1},
    {"nom": "X", "prix": "inf", "quantite": 1},
    {"nom": "X", "prix": float("nan"), "quantite": 1},
    {"nom": "X", "prix": float("-inf"), "quantite": 1},
    {"nom": "X", "prix": 1, "quantite": "inf"},
])
def test_create_rejects_invalid_numbers(articles, data):
    with pytest.raises(InvalidFieldValueError):
        articles.create(data)


@pytest.mark.parametrize("field", ["photo", "photo_4"])
def test_create_rejects_non_text_photo(articles, field):
    with pytest.raises(InvalidFieldValueError):
        articles.create({"nom": "X", "prix": 1, "quantite": 1, field: 123})


def test_create_requires_name(articles):
    with pytest.raises(RequiredFieldError):
        articles.create({"nom": "  ", "prix": 1, "quantite": 1})


def test_update_only_given_fields(articles):
    updated = articles.update(3, {"prix": "99,90"})

    assert updated["prix"] == 99.9
    assert updated["nom"] == "Nike Air Max 90"
    assert updated["quantite"] == 50


def test_update_any_photo_writes_whole_gallery(articles):
    updated = articles.update(3, {"photo_2": "https://example.com/b.jpg"})

    assert updated["photo_2"] == "https://example.com/b.jpg"
    assert updated["photo"] is None


def test_update_unknown_returns_none(articles):
    assert articles.update(999, {"prix": 1}) is None


def test_update_rejects_negative_price(articles):
    with pytest.raises(InvalidFieldValueError):
        articles.update(3, {"prix": -5})


def test_delete(articles):
    assert articles.delete(3) is True
    assert articles.get_by_id(3) is None


def test_delete_unknown_returns_false(articles):
    assert articles.delete(999) is False


def test_delete_keeps_variants(catalog):
    catalog.articles.delete(3)
    assert len(catalog.variants.list_for_article(3)) == 4


def test_events_are_published(articles, published):
    created = articles.create({"nom": "Nouveau", "prix": 1, "quantite": 1})
    articles.update(created["id"], {"quantite": 2})
    articles.delete(created["id"])

    types = [e.type for e in published]
    assert types == [
        EventType.ARTICLE_CREATED,
        EventType.ARTICLE_UPDATED,
        EventType.ARTICLE_DELETED,
    ]
    assert published[0].data["id"] == created["id"]
    assert published[1].data["new"]["quantite"] == 2


def test_seed_is_skipped_in_mock_mode(articles, store):
    before = store.counts()
    assert articles.seed_database() is False
    assert store.counts() == before
