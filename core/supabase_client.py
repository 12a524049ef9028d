#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Centralny moduł połączenia z Supabase

Singleton pattern - jeden klient dla całej aplikacji.
Używa ANON_KEY (uprawnienia zależne od sesji i polityk RLS).
"""

import logging
from typing import Optional

from supabase import create_client, Client, ClientOptions

from config.settings import (
    SUPABASE_URL,
    SUPABASE_ANON_KEY,
    ARTICLES_TABLE,
    STORAGE_BUCKET,
    is_supabase_configured,
)
from core.exceptions import SupabaseConnectionError

logger = logging.getLogger(__name__)


# Globalny klient Supabase
_supabase_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Zwraca singleton instancję klienta Supabase.

    Sesja auth jest odświeżana automatycznie i trzymana w pamięci procesu.

    Returns:
        Client: Klient Supabase

    Raises:
        SupabaseConnectionError: Jeśli brak konfiguracji (tryb mock)
    """
    global _supabase_client

    if _supabase_client is None:
        if not is_supabase_configured():
            raise SupabaseConnectionError(
                "missing SUPABASE_URL / SUPABASE_ANON_KEY (check .env)"
            )

        options = ClientOptions(
            auto_refresh_token=True,
            persist_session=True,
        )
        _supabase_client = create_client(SUPABASE_URL, SUPABASE_ANON_KEY, options)
        logger.info(f"[Supabase] Connected: {SUPABASE_URL}")

    return _supabase_client


def reset_client():
    """
    Resetuj klienta (przydatne do testów).
    """
    global _supabase_client
    _supabase_client = None


def test_connection(client: Client = None) -> bool:
    """
    Testuj połączenie z Supabase.

    Returns:
        True jeśli połączenie działa
    """
    try:
        client = client or get_supabase_client()

        # Prosty test - sprawdź czy można wykonać zapytanie
        client.table(ARTICLES_TABLE).select("id").limit(1).execute()

        logger.info("[Supabase] Connection test OK")
        return True

    except Exception as e:
        logger.error(f"[Supabase] Connection test failed: {e}")
        return False


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("=" * 60)
    print("TEST POŁĄCZENIA Z SUPABASE")
    print("=" * 60)

    try:
        client = get_supabase_client()
        print(f"[OK] URL: {SUPABASE_URL}")

        print("\nTest dostępu do tabel:")
        for table in [ARTICLES_TABLE, 'categories', 'article_variantes']:
            try:
                response = client.table(table).select("*").limit(1).execute()
                count = len(response.data) if response.data else 0
                print(f"  [OK] {table}: dostęp OK ({count} rekord)")
            except Exception as e:
                print(f"  [ERROR] {table}: {e}")

        print(f"\nBucket Storage: {STORAGE_BUCKET}")

    except Exception as e:
        print(f"[ERROR] {e}")
