"""
ShopCatalog - Base Service
==========================
Bazowa klasa serwisu: walidacja i koercja danych, emitowanie eventów.
Wszystkie serwisy katalogu dziedziczą po tej klasie.
"""

from abc import ABC
from typing import Any, Callable, Dict, List, Union
import logging
import math

from core.events import EventBus, EventType, create_event
from core.exceptions import RequiredFieldError, InvalidFieldValueError

logger = logging.getLogger(__name__)


class BaseService(ABC):
    """
    Bazowa klasa serwisu.

    Zapewnia:
    - Walidację danych (wymagane pola, dozwolone pola, typy)
    - Emitowanie eventów
    - Logowanie

    Usage:
        class CategoryService(BaseService):
            ENTITY_NAME = "Category"

            REQUIRED_FIELDS = ["nom"]
            OPTIONAL_FIELDS = ["description", "couleur"]
    """

    # Subklasy powinny zdefiniować
    ENTITY_NAME: str = None

    # Pola do walidacji
    REQUIRED_FIELDS: List[str] = []
    OPTIONAL_FIELDS: List[str] = []

    # Mapowanie pól na typy lub funkcje konwertujące
    FIELD_TYPES: Dict[str, Union[type, Callable[[Any], Any]]] = {}

    # Mapowanie eventów
    EVENT_CREATE: EventType = None
    EVENT_UPDATE: EventType = None
    EVENT_DELETE: EventType = None

    def __init__(self, event_bus: EventBus = None):
        self.event_bus = event_bus or EventBus()

    # ============================================================
    # Validation
    # ============================================================

    def validate(self, data: Dict[str, Any], is_update: bool = False) -> Dict[str, Any]:
        """
        Waliduj dane wejściowe.

        Args:
            data: Dane do walidacji
            is_update: True jeśli aktualizacja (nie wymaga wszystkich pól)

        Returns:
            Zwalidowane dane (tylko dozwolone pola, po konwersji typów)

        Raises:
            RequiredFieldError: Brak wymaganego pola
            InvalidFieldValueError: Nieprawidłowa wartość
        """
        validated = {}

        # Sprawdź wymagane pola
        if not is_update:
            for field in self.REQUIRED_FIELDS:
                value = data.get(field)
                if value is None or (isinstance(value, str) and not value.strip()):
                    raise RequiredFieldError(field, self.ENTITY_NAME)

        allowed_fields = set(self.REQUIRED_FIELDS) | set(self.OPTIONAL_FIELDS)

        for field, value in data.items():
            if field not in allowed_fields:
                logger.warning(f"[{self.ENTITY_NAME}] Ignoring unknown field: {field}")
                continue

            if field in self.FIELD_TYPES and value is not None:
                value = self._convert(field, value, self.FIELD_TYPES[field])

            validated[field] = value

        # Custom walidacja (do nadpisania w subklasach)
        self._validate_business_rules(validated, is_update)

        return validated

    def _convert(self, field: str, value: Any, converter) -> Any:
        if isinstance(converter, type) and isinstance(value, converter) \
                and not isinstance(value, bool):
            return value
        try:
            return converter(value)
        except (ValueError, TypeError):
            name = getattr(converter, '__name__', 'value')
            raise InvalidFieldValueError(field, value, f"Expected {name}")

    def _validate_business_rules(self, data: Dict[str, Any], is_update: bool):
        """
        Hook do walidacji reguł biznesowych.
        Subklasy mogą nadpisać.
        """
        pass

    # ============================================================
    # Events
    # ============================================================

    def emit_event(self, event_type: EventType, data: Dict[str, Any]):
        """Wyemituj event"""
        event = create_event(
            event_type=event_type,
            data=data,
            source=self.ENTITY_NAME,
        )
        self.event_bus.publish(event)

    def emit_create_event(self, entity_id: Any, data: Dict[str, Any]):
        if self.EVENT_CREATE:
            self.emit_event(self.EVENT_CREATE, {"id": entity_id, **data})

    def emit_update_event(self, entity_id: Any, new_data: Dict[str, Any]):
        if self.EVENT_UPDATE:
            self.emit_event(self.EVENT_UPDATE, {"id": entity_id, "new": new_data})

    def emit_delete_event(self, entity_id: Any):
        if self.EVENT_DELETE:
            self.emit_event(self.EVENT_DELETE, {"id": entity_id})


# ============================================================
# Konwertery pól
# ============================================================

def to_float(value: Any) -> float:
    """Liczba zmiennoprzecinkowa; akceptuje przecinek dziesiętny ("12,5"), odrzuca nan/inf"""
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{value} is not a finite number")
    return number


def to_int(value: Any) -> int:
    """Liczba całkowita; "12" i "12.0" -> 12, "12.5" -> błąd"""
    if isinstance(value, bool):
        raise TypeError("bool is not a quantity")
    if isinstance(value, str):
        value = value.strip()
        if value.lstrip("-").isdigit():
            return int(value)
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"{value} is not an integer")
    return int(number)
