"""Testy EventBus"""

import logging

from core.events import EventType, create_event, setup_event_logging


def test_typed_handlers_run_before_global(event_bus):
    calls = []
    event_bus.subscribe_all(lambda e: calls.append("global"))
    event_bus.subscribe(EventType.ARTICLE_CREATED, lambda e: calls.append("typed"))

    event_bus.publish(create_event(EventType.ARTICLE_CREATED, {"id": 1}))
    event_bus.publish(create_event(EventType.ARTICLE_DELETED, {"id": 1}))

    assert calls == ["typed", "global", "global"]


def test_failing_handler_does_not_stop_others(event_bus, published, caplog):
    def broken(event):
        raise RuntimeError("boom")

    event_bus.subscribe(EventType.CATEGORY_DELETED, broken)

    with caplog.at_level(logging.ERROR, logger="core.events"):
        event_bus.publish(create_event(EventType.CATEGORY_DELETED, {"id": 3}))

    assert [e.type for e in published] == [EventType.CATEGORY_DELETED]
    assert "boom" in caplog.text


def test_event_logging(event_bus, caplog):
    setup_event_logging(event_bus)

    with caplog.at_level(logging.INFO, logger="core.events"):
        event_bus.publish(create_event(EventType.USER_SIGNED_IN, {"email": "a@b.c"}, user_id="u-1"))

    assert "[EVENT] auth.signed_in" in caplog.text
    assert "User: u-1" in caplog.text
