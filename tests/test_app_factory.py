"""Testy fabryki aplikacji i konsoli"""

import sys

import pytest

import app_factory
import main
from app_factory import MODE_MOCK, MODE_SUPABASE, create_catalog
from articles import MemoryArticleRepository, SupabaseArticleRepository
from auth import LocalAuthProvider
from images import MemoryImageStorage


def test_mock_mode(catalog, store):
    assert catalog.mode == MODE_MOCK
    assert catalog.is_mock is True
    assert catalog.store is store
    assert isinstance(catalog.articles.repository, MemoryArticleRepository)
    assert isinstance(catalog.storage.storage, MemoryImageStorage)
    assert isinstance(catalog.auth.provider, LocalAuthProvider)


def test_services_share_one_event_bus(catalog):
    bus = catalog.event_bus
    assert catalog.articles.event_bus is bus
    assert catalog.variants.event_bus is bus
    assert catalog.storage.event_bus is bus
    assert catalog.auth.event_bus is bus


def test_supabase_mode_with_client(fake_client):
    catalog = create_catalog(client=fake_client)

    assert catalog.mode == MODE_SUPABASE
    assert catalog.store is None
    assert isinstance(catalog.articles.repository, SupabaseArticleRepository)
    assert catalog.auth.provider is fake_client.auth


def test_mode_follows_configuration(monkeypatch):
    monkeypatch.setattr(app_factory, "is_supabase_configured", lambda: False)
    assert create_catalog().mode == MODE_MOCK


def test_router_uses_catalog_session(catalog):
    assert catalog.router.resolve("/admin").path == "/login?redirect=/admin"


@pytest.fixture
def offline(monkeypatch):
    monkeypatch.setattr(app_factory, "is_supabase_configured", lambda: False)
    monkeypatch.setattr(main, "is_supabase_configured", lambda: False)


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["main.py", *args])
    return main.main()


def test_cli_search(offline, monkeypatch, capsys):
    assert run_main(monkeypatch, "--search", "max") == 0
    output = capsys.readouterr().out
    assert "Nike Air Max 90" in output
    assert "Razem: 1" in output


def test_cli_variants(offline, monkeypatch, capsys):
    assert run_main(monkeypatch, "--variants", "3") == 0
    output = capsys.readouterr().out
    assert "couleur: blanc, noir" in output
    assert "pointure: 41, 42" in output


def test_cli_seed_in_mock_mode(offline, monkeypatch, capsys):
    assert run_main(monkeypatch, "--seed") == 0
    assert "Pominięto" in capsys.readouterr().out


def test_cli_connection_test_in_mock_mode(offline, monkeypatch):
    assert run_main(monkeypatch, "--test") == 0
