#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ShopCatalog - Katalog sklepu
Główny plik uruchomieniowy (konsola administracyjna)

Uruchomienie:
    python main.py                      # Lista artykułów
    python main.py --search max         # Wyszukiwanie po nazwie / kategorii
    python main.py --categories         # Lista kategorii
    python main.py --variants 3         # Warianty artykułu
    python main.py --seed               # Zasil pustą bazę danymi startowymi
    python main.py --test               # Test połączenia
"""

import sys
import argparse
import logging

from config.settings import LOG_LEVEL, LOG_FORMAT, validate_config, is_supabase_configured

# Konfiguracja logowania
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)


def run_tests():
    """Uruchom test połączenia"""
    if not is_supabase_configured():
        print("Tryb mock: brak SUPABASE_ANON_KEY, dane w pamięci")
        return 0

    from core import test_connection
    success = test_connection()
    print("Połączenie z Supabase: OK" if success else "Połączenie z Supabase: BŁĄD")
    return 0 if success else 1


def print_articles(articles):
    """Wypisz artykuły w formie tabeli"""
    if not articles:
        print("(brak artykułów)")
        return

    for article in articles:
        print(
            f"{article['id']:>4}  {article['nom'][:40]:<40}  "
            f"{article['prix']:>10.2f}  {article['quantite']:>5}  {article['categorie']}"
        )
    print(f"\nRazem: {len(articles)}")


def print_categories(catalog):
    for category in catalog.categories.list():
        print(f"{category['id']:>4}  {category['nom']:<30}  {category['couleur']}")


def print_variants(catalog, article_id):
    grouped = catalog.variants.list_grouped(article_id)
    if not grouped:
        print(f"(artykuł {article_id} nie ma wariantów)")
        return

    for axis, values in grouped.items():
        print(f"{axis}: {', '.join(str(v['valeur']) for v in values)}")


def run_seed(catalog):
    if catalog.articles.seed_database():
        print("Baza zasilona danymi startowymi")
    else:
        print("Pominięto: tryb mock lub baza nie jest pusta")
    return 0


def main():
    """Główna funkcja"""
    parser = argparse.ArgumentParser(description="ShopCatalog - katalog sklepu")
    parser.add_argument('--test', action='store_true', help='Test połączenia z Supabase')
    parser.add_argument('--seed', action='store_true', help='Zasil pustą bazę danymi startowymi')
    parser.add_argument('--list', action='store_true', help='Lista artykułów (domyślnie)')
    parser.add_argument('--search', metavar='TERM', help='Szukaj artykułów po nazwie lub kategorii')
    parser.add_argument('--categories', action='store_true', help='Lista kategorii')
    parser.add_argument('--variants', metavar='ARTICLE_ID', help='Warianty artykułu')
    parser.add_argument('--debug', action='store_true', help='Tryb debug (więcej logów)')

    args = parser.parse_args()

    # Tryb debug
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Walidacja konfiguracji
    try:
        validate_config()
        logger.info("Configuration OK")
    except ValueError as e:
        print(f"Błąd konfiguracji: {e}")
        print("\nSprawdź plik config/settings.py lub utwórz plik .env")
        return 1

    if args.test:
        return run_tests()

    from app_factory import create_catalog
    from core.events import setup_event_logging

    catalog = create_catalog()
    if args.debug:
        setup_event_logging(catalog.event_bus)

    if args.seed:
        return run_seed(catalog)

    if args.categories:
        print_categories(catalog)
        return 0

    if args.variants is not None:
        print_variants(catalog, args.variants)
        return 0

    if args.search is not None:
        print_articles(catalog.articles.search(args.search))
        return 0

    # Domyślnie - lista artykułów
    print_articles(catalog.articles.list())
    return 0


if __name__ == "__main__":
    sys.exit(main())
