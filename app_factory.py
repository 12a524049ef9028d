#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ShopCatalog - Fabryka aplikacji
===============================
Składa wszystkie serwisy katalogu i RAZ wybiera tryb pracy:

- "supabase" - repozytoria, Storage i Auth z klienta Supabase,
- "mock"     - MemoryStore z danymi startowymi, bucket i konta w pamięci.

Użycie:
    from app_factory import create_catalog

    catalog = create_catalog()
    catalog.mode                       # "mock" lub "supabase"
    catalog.articles.search("max")
    catalog.router.resolve("/admin").path
"""

from dataclasses import dataclass
from typing import Optional
import logging

from supabase import Client

from config.settings import is_supabase_configured
from core.events import EventBus
from core.memory_store import MemoryStore
from core.supabase_client import get_supabase_client

from articles import ArticleService, SupabaseArticleRepository, MemoryArticleRepository
from categories import CategoryService, SupabaseCategoryRepository, MemoryCategoryRepository
from variants import VariantService, SupabaseVariantRepository, MemoryVariantRepository
from images import StorageService, SupabaseImageStorage, MemoryImageStorage
from auth import AuthService, LocalAuthProvider
from routing import Router

logger = logging.getLogger(__name__)

MODE_SUPABASE = "supabase"
MODE_MOCK = "mock"


@dataclass
class Catalog:
    """Komplet serwisów jednej instancji aplikacji"""
    mode: str
    articles: ArticleService
    categories: CategoryService
    variants: VariantService
    storage: StorageService
    auth: AuthService
    router: Router
    event_bus: EventBus
    store: Optional[MemoryStore] = None

    @property
    def is_mock(self) -> bool:
        return self.mode == MODE_MOCK


def create_catalog(
    client: Client = None,
    store: MemoryStore = None,
    use_mock: bool = None,
    event_bus: EventBus = None,
) -> Catalog:
    """
    Zbuduj serwisy katalogu.

    Args:
        client: Gotowy klient Supabase (domyślnie singleton z core.supabase_client)
        store: Gotowy MemoryStore (domyślnie świeże dane startowe)
        use_mock: Wymuś tryb; None = na podstawie konfiguracji
        event_bus: Wspólna szyna eventów (domyślnie nowa)

    Returns:
        Catalog
    """
    event_bus = event_bus or EventBus()

    if use_mock is None:
        use_mock = client is None and not is_supabase_configured()

    if use_mock:
        store = store or MemoryStore.from_fixtures()
        category_repo = MemoryCategoryRepository(store)
        article_repo = MemoryArticleRepository(store)
        variant_repo = MemoryVariantRepository(store)
        image_storage = MemoryImageStorage()
        auth_provider = LocalAuthProvider()
        mode = MODE_MOCK
        logger.warning("[Catalog] Supabase not configured - running in mock mode (in-memory data)")
    else:
        client = client or get_supabase_client()
        category_repo = SupabaseCategoryRepository(client)
        article_repo = SupabaseArticleRepository(client)
        variant_repo = SupabaseVariantRepository(client)
        image_storage = SupabaseImageStorage(client)
        auth_provider = client.auth
        store = None
        mode = MODE_SUPABASE
        logger.info("[Catalog] Using Supabase backend")

    auth = AuthService(auth_provider, event_bus)

    return Catalog(
        mode=mode,
        articles=ArticleService(article_repo, category_repo, event_bus),
        categories=CategoryService(category_repo, event_bus),
        variants=VariantService(variant_repo, event_bus),
        storage=StorageService(image_storage, event_bus),
        auth=auth,
        router=Router(auth),
        event_bus=event_bus,
        store=store,
    )
