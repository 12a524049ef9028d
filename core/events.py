"""
ShopCatalog - Events
====================
Zdarzenia publikowane przez serwisy katalogu i szyna, która je rozsyła.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from enum import Enum
import uuid
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Typy zdarzeń w systemie"""

    # ========== Article Events ==========
    ARTICLE_CREATED = "article.created"
    ARTICLE_UPDATED = "article.updated"
    ARTICLE_DELETED = "article.deleted"
    CATALOG_SEEDED = "article.seeded"

    # ========== Category Events ==========
    CATEGORY_CREATED = "category.created"
    CATEGORY_UPDATED = "category.updated"
    CATEGORY_DELETED = "category.deleted"

    # ========== Variant Events ==========
    VARIANT_CREATED = "variant.created"
    VARIANT_UPDATED = "variant.updated"
    VARIANT_DELETED = "variant.deleted"

    # ========== Storage Events ==========
    IMAGE_UPLOADED = "image.uploaded"
    IMAGE_DELETED = "image.deleted"

    # ========== Auth Events ==========
    USER_SIGNED_IN = "auth.signed_in"
    USER_SIGNED_OUT = "auth.signed_out"
    USER_REGISTERED = "auth.registered"


@dataclass
class Event:
    """Zdarzenie opublikowane przez serwis (typ + payload)"""
    type: EventType
    data: Dict[str, Any]
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    user_id: Optional[str] = None
    source: Optional[str] = None


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Synchroniczna szyna zdarzeń jednej instancji katalogu.

    Handlery typu są wołane przed handlerami globalnymi, w kolejności
    rejestracji. Wyjątek handlera jest logowany i nie przerywa publikacji.
    """

    def __init__(self):
        self._handlers: Dict[EventType, List[EventHandler]] = {}
        self._global_handlers: List[EventHandler] = []

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Nasłuchuj jednego typu zdarzenia"""
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"[EventBus] Subscribed handler to {event_type.value}")

    def subscribe_all(self, handler: EventHandler) -> None:
        """Nasłuchuj wszystkich zdarzeń (logowanie, testy)"""
        self._global_handlers.append(handler)
        logger.debug("[EventBus] Subscribed global handler")

    def publish(self, event: Event) -> None:
        logger.debug(f"[EventBus] Publishing: {event.type.value} | ID: {event.event_id[:8]}")

        handlers = self._handlers.get(event.type, []) + self._global_handlers
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"[EventBus] Handler failed on {event.type.value}: {e}", exc_info=True)


def create_event(
    event_type: EventType,
    data: Dict[str, Any],
    user_id: str = None,
    source: str = None
) -> Event:
    return Event(type=event_type, data=data, user_id=user_id, source=source)


def logging_handler(event: Event) -> None:
    """Loguje każde zdarzenie na poziomie INFO"""
    logger.info(
        f"[EVENT] {event.type.value} | "
        f"ID: {event.event_id[:8]} | "
        f"User: {event.user_id or 'system'} | "
        f"Data: {event.data}"
    )


def setup_event_logging(event_bus: EventBus) -> None:
    """Podepnij logging_handler pod wszystkie zdarzenia (tryb --debug)"""
    event_bus.subscribe_all(logging_handler)
