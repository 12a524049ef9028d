"""
ArticleService - Warstwa logiki biznesowej dla artykułów

Odpowiedzialność:
- Walidacja i konwersja (prix -> float, quantite -> int)
- Normalizacja slotów na zdjęcia (photo .. photo_5)
- Widok płaski z kategorią (przez ArticleRepository)
- Jednorazowe zasilenie pustej bazy danymi startowymi
- Emitowanie eventów
"""

from typing import Any, Dict, List, Optional
import logging

from config.settings import PHOTO_FIELDS
from core.base_service import BaseService, to_float, to_int
from core.events import EventType, EventBus
from core.exceptions import InvalidFieldValueError
from core.fixtures import ARTICLES as FIXTURE_ARTICLES, CATEGORIES as FIXTURE_CATEGORIES

from articles.repository import ArticleRepository
from categories.repository import CategoryRepository

logger = logging.getLogger(__name__)


def _optional_id(value: Any) -> Optional[int]:
    """ID kategorii z formularza: "" / None -> brak kategorii"""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return to_int(value)


class ArticleService(BaseService):
    """
    Serwis do zarządzania artykułami katalogu.

    Example:
        service = ArticleService(article_repo, category_repo)

        article = service.create({
            'nom': 'Nike Air Max 90',
            'prix': '149.99',
            'quantite': '50',
            'categorie_id': 3,
        })
        article['prix']       # 149.99 (float)
        article['categorie']  # 'Chaussures'
    """

    ENTITY_NAME = "Article"

    REQUIRED_FIELDS = ["nom", "prix", "quantite"]
    OPTIONAL_FIELDS = ["description", "categorie_id", *PHOTO_FIELDS]

    FIELD_TYPES = {
        "prix": to_float,
        "quantite": to_int,
        "categorie_id": _optional_id,
    }

    EVENT_CREATE = EventType.ARTICLE_CREATED
    EVENT_UPDATE = EventType.ARTICLE_UPDATED
    EVENT_DELETE = EventType.ARTICLE_DELETED

    def __init__(
        self,
        repository: ArticleRepository,
        category_repository: CategoryRepository,
        event_bus: EventBus = None
    ):
        super().__init__(event_bus)
        self.repository = repository
        self.category_repository = category_repository

    # =========================================================
    # WALIDACJA
    # =========================================================

    def _validate_business_rules(self, data: Dict[str, Any], is_update: bool):
        if 'nom' in data:
            nom = (data['nom'] or '').strip() if isinstance(data['nom'], str) else data['nom']
            if not nom:
                raise InvalidFieldValueError('nom', data['nom'], 'Name cannot be empty')
            data['nom'] = nom

        if data.get('prix') is not None and data['prix'] < 0:
            raise InvalidFieldValueError('prix', data['prix'], 'Price cannot be negative')

        if data.get('quantite') is not None and data['quantite'] < 0:
            raise InvalidFieldValueError('quantite', data['quantite'], 'Quantity cannot be negative')

        # Puste sloty na zdjęcia zapisujemy jako NULL
        for field in PHOTO_FIELDS:
            if field not in data or data[field] is None:
                continue
            if not isinstance(data[field], str):
                raise InvalidFieldValueError(field, data[field], 'Expected image URL')
            if not data[field].strip():
                data[field] = None

    @staticmethod
    def _with_all_photo_slots(data: Dict[str, Any]) -> Dict[str, Any]:
        """Uzupełnij brakujące sloty na zdjęcia wartością None"""
        for field in PHOTO_FIELDS:
            data.setdefault(field, None)
        return data

    # =========================================================
    # ODCZYT
    # =========================================================

    def list(self) -> List[Dict[str, Any]]:
        """Wszystkie artykuły (rosnąco po ID) z nazwą i kolorem kategorii"""
        return self.repository.list()

    def get_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        """Artykuł po ID lub None"""
        return self.repository.get_by_id(id)

    def list_by_category(self, category_id: Any) -> List[Dict[str, Any]]:
        """Artykuły danej kategorii"""
        return self.repository.list_by_category(category_id)

    def search(self, term: str) -> List[Dict[str, Any]]:
        """
        Wyszukaj artykuły po nazwie lub nazwie kategorii.

        Bez rozróżniania wielkości liter; pusta fraza = wszystkie artykuły.
        """
        return self.repository.search(term)

    def list_categories(self) -> List[str]:
        """Nazwy kategorii (do filtrów katalogu)"""
        return [category['nom'] for category in self.category_repository.list()]

    # =========================================================
    # ZAPIS
    # =========================================================

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Utwórz nowy artykuł.

        Args:
            data: {nom, prix, quantite, description?, categorie_id?, photo..photo_5?}

        Returns:
            Utworzony artykuł (widok płaski)
        """
        validated = self.validate(data)
        validated.setdefault('description', None)
        validated.setdefault('categorie_id', None)
        self._with_all_photo_slots(validated)

        record = self.repository.create(validated)
        article = self.repository.get_by_id(record['id']) or record

        self.emit_create_event(article['id'], article)
        logger.info(f"[Article] Created: {article['id']} - {article['nom']}")
        return article

    def update(self, id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Aktualizuj artykuł (tylko podane pola).

        Jeśli podano choć jedno zdjęcie, zapisywane są wszystkie sloty
        (galeria edytowana jako całość).

        Returns:
            Zaktualizowany artykuł (widok płaski) lub None jeśli nie istnieje
        """
        validated = self.validate(data, is_update=True)

        if any(field in validated for field in PHOTO_FIELDS):
            self._with_all_photo_slots(validated)

        if not validated:
            return self.repository.get_by_id(id)

        record = self.repository.update(id, validated)
        if record is None:
            logger.warning(f"[Article] Update skipped, not found: {id}")
            return None

        article = self.repository.get_by_id(record['id']) or record
        self.emit_update_event(article['id'], article)
        return article

    def delete(self, id: Any) -> bool:
        """
        Usuń artykuł.

        Warianty artykułu NIE są usuwane (decydują więzy w bazie).

        Returns:
            True jeśli artykuł istniał i został usunięty
        """
        deleted = self.repository.delete(id)
        if deleted:
            self.emit_delete_event(id)
        else:
            logger.info(f"[Article] Delete: not found {id}")
        return deleted

    # =========================================================
    # DANE STARTOWE
    # =========================================================

    def seed_database(self) -> bool:
        """
        Zasil pustą bazę Supabase danymi startowymi (kategorie + artykuły).

        Returns:
            True jeśli dane zostały wstawione;
            False w trybie mock lub gdy tabela artykułów nie jest pusta
        """
        if not self.repository.PERSISTENT:
            logger.info("[Article] Seed skipped: mock mode")
            return False

        if self.repository.count() > 0:
            logger.info("[Article] Seed skipped: table already populated")
            return False

        # Kategorie - użyj istniejących (po nazwie), dodaj brakujące
        category_ids = {c['nom']: c['id'] for c in self.category_repository.list()}
        missing = [
            {k: v for k, v in c.items() if k != 'id'}
            for c in FIXTURE_CATEGORIES
            if c['nom'] not in category_ids
        ]
        for created in self.category_repository.create_many(missing):
            category_ids[created['nom']] = created['id']

        fixture_category_names = {c['id']: c['nom'] for c in FIXTURE_CATEGORIES}
        articles = []
        for fixture in FIXTURE_ARTICLES:
            article = {k: v for k, v in fixture.items() if k != 'id'}
            article['categorie_id'] = category_ids.get(
                fixture_category_names.get(fixture['categorie_id'])
            )
            articles.append(article)

        created = self.repository.create_many(articles)

        self.emit_event(EventType.CATALOG_SEEDED, {
            "articles": len(created),
            "categories": len(missing),
        })
        logger.info(f"[Article] Seeded: {len(created)} articles, {len(missing)} new categories")
        return True
