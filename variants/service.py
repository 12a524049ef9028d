"""
ShopCatalog - Variant Service
=============================
Warianty artykułu: oś wariantu (np. "couleur", "pointure") + wartość.
"""

from typing import Any, Dict, List, Optional
import logging

from core.base_service import BaseService, to_int
from core.events import EventType, EventBus
from core.exceptions import InvalidFieldValueError

from variants.repository import VariantRepository

logger = logging.getLogger(__name__)


class VariantService(BaseService):
    """
    Serwis wariantów artykułów.

    Cykl życia wariantu jest niezależny od artykułu - usunięcie artykułu
    nie usuwa jego wariantów.
    """

    ENTITY_NAME = "Variant"

    REQUIRED_FIELDS = ["nom_variante", "valeur"]
    OPTIONAL_FIELDS = ["image_url"]

    EVENT_CREATE = EventType.VARIANT_CREATED
    EVENT_UPDATE = EventType.VARIANT_UPDATED
    EVENT_DELETE = EventType.VARIANT_DELETED

    def __init__(self, repository: VariantRepository, event_bus: EventBus = None):
        super().__init__(event_bus)
        self.repository = repository

    def _validate_business_rules(self, data: Dict[str, Any], is_update: bool):
        for field in ("nom_variante", "valeur"):
            if field in data:
                value = str(data[field] or '').strip()
                if not value:
                    raise InvalidFieldValueError(field, data[field], 'Cannot be empty')
                data[field] = value

        image_url = data.get('image_url')
        if image_url is not None and not isinstance(image_url, str):
            raise InvalidFieldValueError('image_url', image_url, 'Expected image URL')
        if 'image_url' in data and not (image_url or '').strip():
            data['image_url'] = None

    # ============================================================
    # Query Operations
    # ============================================================

    def list_for_article(self, article_id: Any) -> List[Dict[str, Any]]:
        """Warianty artykułu (po nazwie osi, potem kolejność dodania)"""
        return self.repository.list_for_article(article_id)

    def list_grouped(self, article_id: Any) -> Dict[str, List[Dict[str, Any]]]:
        """
        Warianty pogrupowane po osi.

        Returns:
            {"couleur": [{"id": 3, "valeur": "blanc", "image_url": None}, ...], ...}
            Kolejność w grupie = kolejność zwrócona przez repozytorium.
        """
        grouped: Dict[str, List[Dict[str, Any]]] = {}
        for variant in self.list_for_article(article_id):
            grouped.setdefault(variant['nom_variante'], []).append({
                'id': variant.get('id'),
                'valeur': variant.get('valeur'),
                'image_url': variant.get('image_url'),
            })
        return grouped

    # ============================================================
    # CRUD Operations
    # ============================================================

    def create(self, article_id: Any, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Dodaj wariant do artykułu.

        Args:
            article_id: ID artykułu
            data: {nom_variante, valeur, image_url?}
        """
        try:
            article_id = to_int(article_id)
        except (TypeError, ValueError):
            raise InvalidFieldValueError('article_id', article_id, 'Expected integer')

        validated = self.validate(data)
        record = {
            'article_id': article_id,
            'nom_variante': validated['nom_variante'],
            'valeur': validated['valeur'],
            'image_url': validated.get('image_url'),
        }

        variant = self.repository.create(record)
        self.emit_create_event(variant['id'], variant)

        logger.info(
            f"[Variant] Created: {variant['id']} "
            f"({variant['nom_variante']}={variant['valeur']}) for article {article_id}"
        )
        return variant

    def update(self, variant_id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Aktualizuj wariant (tylko podane pola).

        Returns:
            Zaktualizowany wariant lub None jeśli nie istnieje
        """
        validated = self.validate(data, is_update=True)
        if not validated:
            return self.repository.get_by_id(variant_id)

        variant = self.repository.update(variant_id, validated)
        if variant is None:
            logger.warning(f"[Variant] Update skipped, not found: {variant_id}")
            return None

        self.emit_update_event(variant['id'], variant)
        return variant

    def delete(self, variant_id: Any) -> bool:
        """Usuń wariant; True jeśli istniał"""
        deleted = self.repository.delete(variant_id)
        if deleted:
            self.emit_delete_event(variant_id)
        return deleted
