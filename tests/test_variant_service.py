"""Testy VariantService w trybie mock"""

import pytest

from core.events import EventType
from core.exceptions import InvalidFieldValueError, RequiredFieldError


@pytest.fixture
def variants(catalog):
    return catalog.variants


def test_list_for_article_orders_by_axis(variants):
    result = variants.list_for_article(3)
    assert [(v["nom_variante"], v["valeur"]) for v in result] == [
        ("couleur", "blanc"),
        ("couleur", "noir"),
        ("pointure", "41"),
        ("pointure", "42"),
    ]


def test_list_for_unknown_article(variants):
    assert variants.list_for_article(1) == []
    assert variants.list_for_article("abc") == []


def test_list_grouped(variants):
    grouped = variants.list_grouped(7)
    assert grouped == {
        "taille": [
            {"id": 5, "valeur": "M", "image_url": None},
            {"id": 6, "valeur": "L", "image_url": None},
        ]
    }


def test_list_grouped_keeps_insertion_order(variants):
    variants.create(1, {"nom_variante": "couleur", "valeur": "rouge"})
    variants.create(1, {"nom_variante": "couleur", "valeur": "bleu"})

    grouped = variants.list_grouped(1)
    assert [v["valeur"] for v in grouped["couleur"]] == ["rouge", "bleu"]


def test_create(variants, published):
    created = variants.create("2", {
        "nom_variante": " stockage ",
        "valeur": "256 Go",
        "image_url": "",
    })

    assert created["article_id"] == 2
    assert created["nom_variante"] == "stockage"
    assert created["image_url"] is None
    assert created["created_at"]
    assert published[-1].type == EventType.VARIANT_CREATED


def test_create_requires_value(variants):
    with pytest.raises(RequiredFieldError):
        variants.create(3, {"nom_variante": "pointure"})


def test_create_rejects_non_text_image_url(variants):
    with pytest.raises(InvalidFieldValueError):
        variants.create(3, {"nom_variante": "pointure", "valeur": "43", "image_url": 42})


def test_create_rejects_bad_article_id(variants):
    with pytest.raises(InvalidFieldValueError):
        variants.create("abc", {"nom_variante": "pointure", "valeur": "43"})


def test_update(variants):
    updated = variants.update(1, {"valeur": "40"})
    assert updated["valeur"] == "40"
    assert updated["nom_variante"] == "pointure"


def test_update_unknown_returns_none(variants):
    assert variants.update(999, {"valeur": "40"}) is None


def test_delete(variants):
    assert variants.delete(1) is True
    assert variants.delete(1) is False
    assert len(variants.list_for_article(3)) == 3
