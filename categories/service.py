"""
ShopCatalog - Category Service
==============================
Serwis z logiką biznesową dla kategorii.
"""

from typing import Any, Dict, List, Optional
import logging
import re

from config.settings import DEFAULT_CATEGORY_COLOR
from core.base_service import BaseService
from core.events import EventType, EventBus
from core.exceptions import InvalidFieldValueError, RequiredFieldError

from categories.repository import CategoryRepository

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


class CategoryService(BaseService):
    """
    Serwis do zarządzania kategoriami.

    Odpowiada za:
    - Wartości domyślne (opis, kolor)
    - Walidację koloru (hex)
    - Emitowanie eventów
    """

    ENTITY_NAME = "Category"

    REQUIRED_FIELDS = ["nom"]
    OPTIONAL_FIELDS = ["description", "couleur"]

    EVENT_CREATE = EventType.CATEGORY_CREATED
    EVENT_UPDATE = EventType.CATEGORY_UPDATED
    EVENT_DELETE = EventType.CATEGORY_DELETED

    def __init__(self, repository: CategoryRepository, event_bus: EventBus = None):
        super().__init__(event_bus)
        self.repository = repository

    # ============================================================
    # Validation
    # ============================================================

    def _validate_business_rules(self, data: Dict[str, Any], is_update: bool):
        if 'nom' in data:
            if not data['nom'] or not str(data['nom']).strip():
                raise RequiredFieldError('nom', self.ENTITY_NAME)
            data['nom'] = str(data['nom']).strip()

        couleur = data.get('couleur')
        if couleur not in (None, '') and not (isinstance(couleur, str) and HEX_COLOR.match(couleur)):
            raise InvalidFieldValueError('couleur', couleur, 'Expected hex color like #3b82f6')

    # ============================================================
    # Query Operations
    # ============================================================

    def list(self) -> List[Dict[str, Any]]:
        """Wszystkie kategorie, alfabetycznie"""
        return self.repository.list()

    def get_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        """Kategoria po ID lub None"""
        return self.repository.get_by_id(id)

    def list_names(self) -> List[str]:
        """Nazwy kategorii (do selektorów)"""
        return [category['nom'] for category in self.list()]

    # ============================================================
    # CRUD Operations
    # ============================================================

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Utwórz nową kategorię.

        Args:
            data: {nom, description?, couleur?}

        Returns:
            Utworzona kategoria z ID
        """
        validated = self.validate(data)
        record = {
            'nom': validated['nom'],
            'description': validated.get('description') or '',
            'couleur': validated.get('couleur') or DEFAULT_CATEGORY_COLOR,
        }

        category = self.repository.create(record)
        self.emit_create_event(category['id'], category)

        logger.info(f"[Category] Created: {category['id']} - {category['nom']}")
        return category

    def update(self, id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Aktualizuj kategorię (tylko podane pola).

        Returns:
            Zaktualizowana kategoria lub None jeśli nie istnieje
        """
        validated = self.validate(data, is_update=True)
        if not validated:
            return self.repository.get_by_id(id)

        category = self.repository.update(id, validated)
        if category is None:
            logger.warning(f"[Category] Update skipped, not found: {id}")
            return None

        self.emit_update_event(category['id'], category)
        return category

    def delete(self, id: Any) -> bool:
        """
        Usuń kategorię.

        Artykuły z tej kategorii zostają (etykieta "Non catégorisé").

        Returns:
            True jeśli kategoria istniała i została usunięta
        """
        deleted = self.repository.delete(id)
        if deleted:
            self.emit_delete_event(id)
        return deleted
