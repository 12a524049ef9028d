#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Articles Module - Moduł katalogu artykułów

Architektura:
─────────────────────────────────────────────────────────────
    ArticleService (articles.service) ← Główny punkt wejścia
         │
         ├────────────────────────────┐
         ▼                            ▼
    ArticleRepository            CategoryRepository
    (articles.repository)        (categories.repository)
         │
         ├─ SupabaseArticleRepository → Supabase DB (articles + categories)
         └─ MemoryArticleRepository   → MemoryStore (tryb mock)
─────────────────────────────────────────────────────────────

Użycie:
    from app_factory import create_catalog

    catalog = create_catalog()
    for article in catalog.articles.search("max"):
        print(article['nom'], article['categorie'])
"""

from articles.service import ArticleService
from articles.repository import (
    ArticleRepository,
    SupabaseArticleRepository,
    MemoryArticleRepository,
    flatten_article,
)

__all__ = [
    'ArticleService',
    'ArticleRepository',
    'SupabaseArticleRepository',
    'MemoryArticleRepository',
    'flatten_article',
]
