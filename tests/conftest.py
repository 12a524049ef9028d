"""
Wspólne fixture'y testów ShopCatalog.

Tryb mock: świeży MemoryStore z danymi startowymi dla każdego testu.
Tryb Supabase: FakeSupabaseClient nagrywający wywołania query buildera.
"""

import os
import sys
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app_factory import create_catalog
from core.events import EventBus
from core.memory_store import MemoryStore


class FakeQuery:
    """
    Query builder PostgREST: każda metoda łańcucha jest zapisywana,
    execute() zwraca kolejną zaprogramowaną odpowiedź klienta.
    """

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.calls = []

    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)

        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self

        return method

    def called(self, name):
        return [(args, kwargs) for method, args, kwargs in self.calls if method == name]

    def execute(self):
        result = self.client.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class FakeSupabaseClient:
    """Zastępnik supabase.Client (tabele nagrywane, storage/auth jako MagicMock)"""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.queries = []
        self.storage = MagicMock()
        self.auth = MagicMock()

    def table(self, name):
        query = FakeQuery(self, name)
        self.queries.append(query)
        return query

    def queries_for(self, table):
        return [q for q in self.queries if q.table == table]


def response(data=None, count=None):
    return SimpleNamespace(data=data if data is not None else [], count=count)


@pytest.fixture
def store():
    return MemoryStore.from_fixtures()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def published(event_bus):
    """Lista wszystkich opublikowanych eventów"""
    events = []
    event_bus.subscribe_all(events.append)
    return events


@pytest.fixture
def catalog(store, event_bus):
    return create_catalog(store=store, use_mock=True, event_bus=event_bus)


@pytest.fixture
def fake_client():
    return FakeSupabaseClient()


@pytest.fixture
def make_response():
    return response
