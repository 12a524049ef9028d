"""
ShopCatalog - Dane startowe
===========================
Dane fikcyjne katalogu: kategorie, artykuły, warianty.

Używane:
- jako zawartość MemoryStore w trybie mock,
- przez ArticleService.seed_database() do zasilenia pustej bazy Supabase.
"""

import copy
from typing import Any, Dict, List

from config.settings import ARTICLES_TABLE, CATEGORIES_TABLE, VARIANTS_TABLE


_UNSPLASH = "https://images.unsplash.com/{}?w=500&h=400&fit=crop"

CATEGORIES: List[Dict[str, Any]] = [
    {"id": 1, "nom": "Électronique", "description": "Appareils électroniques et gadgets", "couleur": "#3b82f6"},
    {"id": 2, "nom": "Vêtements", "description": "Mode et habillement", "couleur": "#f59e0b"},
    {"id": 3, "nom": "Chaussures", "description": "Chaussures et accessoires", "couleur": "#8b5cf6"},
    {"id": 4, "nom": "Accessoires", "description": "Accessoires divers", "couleur": "#06b6d4"},
    {"id": 5, "nom": "Mobilier", "description": "Meubles et décoration", "couleur": "#10b981"},
]


def _article(id, nom, prix, quantite, photo_id, categorie_id, description=None):
    return {
        "id": id,
        "nom": nom,
        "description": description,
        "prix": prix,
        "quantite": quantite,
        "photo": _UNSPLASH.format(photo_id),
        "photo_2": None,
        "photo_3": None,
        "photo_4": None,
        "photo_5": None,
        "categorie_id": categorie_id,
    }


ARTICLES: List[Dict[str, Any]] = [
    _article(1, 'MacBook Pro 14"', 2499.99, 15, "photo-1517336714731-489689fd1ca8", 1,
             "Ordinateur portable puce M3, écran Liquid Retina XDR"),
    _article(2, "iPhone 15 Pro", 1199.99, 25, "photo-1592750475338-74b7b21085ab", 1),
    _article(3, "Nike Air Max 90", 149.99, 50, "photo-1542291026-7eec264c27ff", 3,
             "Sneakers iconiques avec amorti Air visible"),
    _article(4, "Casque Sony WH-1000XM5", 379.99, 30, "photo-1505740420928-5e560c06d30e", 1),
    _article(5, "Sac à dos Fjällräven", 89.99, 40, "photo-1553062407-98eeb64c6a62", 4),
    _article(6, "Montre Apple Watch Ultra", 899.99, 20, "photo-1434493789847-2f02dc6ca35d", 1),
    _article(7, "Veste en cuir classique", 299.99, 12, "photo-1551028719-00167b16eac5", 2),
    _article(8, "Lunettes de soleil Ray-Ban", 179.99, 35, "photo-1572635196237-14b3f281503f", 4),
    _article(9, "Chaise de bureau ergonomique", 449.99, 8, "photo-1580480055273-228ff5388ef8", 5),
    _article(10, "Sneakers Adidas Ultraboost", 189.99, 45, "photo-1556906781-9a412961c28c", 3),
    _article(11, 'Tablette iPad Pro 12.9"', 1299.99, 18, "photo-1544244015-0df4b3ffc6b0", 1),
    _article(12, "Lampe de bureau LED", 79.99, 60, "photo-1507473885765-e6ed057f782c", 5),
]

VARIANTS: List[Dict[str, Any]] = [
    {"id": 1, "article_id": 3, "nom_variante": "pointure", "valeur": "41", "image_url": None,
     "created_at": "2024-01-10T10:00:00"},
    {"id": 2, "article_id": 3, "nom_variante": "pointure", "valeur": "42", "image_url": None,
     "created_at": "2024-01-10T10:00:01"},
    {"id": 3, "article_id": 3, "nom_variante": "couleur", "valeur": "blanc", "image_url": None,
     "created_at": "2024-01-10T10:00:02"},
    {"id": 4, "article_id": 3, "nom_variante": "couleur", "valeur": "noir", "image_url": None,
     "created_at": "2024-01-10T10:00:03"},
    {"id": 5, "article_id": 7, "nom_variante": "taille", "valeur": "M", "image_url": None,
     "created_at": "2024-01-11T09:30:00"},
    {"id": 6, "article_id": 7, "nom_variante": "taille", "valeur": "L", "image_url": None,
     "created_at": "2024-01-11T09:30:01"},
]


def fixture_tables() -> Dict[str, List[Dict[str, Any]]]:
    """Świeża (głęboka) kopia wszystkich tabel - do zasilenia MemoryStore."""
    return {
        CATEGORIES_TABLE: copy.deepcopy(CATEGORIES),
        ARTICLES_TABLE: copy.deepcopy(ARTICLES),
        VARIANTS_TABLE: copy.deepcopy(VARIANTS),
    }
