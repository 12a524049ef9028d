"""
ShopCatalog - Router
====================
Tabela tras aplikacji i strażnik sesji (bez frameworka webowego).

    router = Router(auth_service)
    nav = router.resolve("/admin")
    nav.path        # "/login?redirect=/admin" gdy brak sesji
    nav.redirected  # True
"""

from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import parse_qs, quote, urlsplit
import logging

logger = logging.getLogger(__name__)

APP_NAME = "ShopCatalog"

HOME_PATH = "/"
LOGIN_PATH = "/login"
ADMIN_PATH = "/admin"


@dataclass(frozen=True)
class Route:
    path: str
    name: str
    title: str = None
    requires_auth: bool = False
    guest_only: bool = False


@dataclass(frozen=True)
class Navigation:
    """Wynik nawigacji: docelowa ścieżka, trasa i tytuł strony"""
    path: str
    name: str
    title: str
    redirected: bool = False


ROUTES: List[Route] = [
    Route(HOME_PATH, "Catalog", f"Catalogue - {APP_NAME}"),
    Route(LOGIN_PATH, "Login", f"Connexion - {APP_NAME}", guest_only=True),
    Route(ADMIN_PATH, "Admin", f"Administration - {APP_NAME}", requires_auth=True),
    Route("/admin/categories", "AdminCategories", f"Catégories - {APP_NAME}", requires_auth=True),
]


def _normalize(path: str) -> str:
    path = path or HOME_PATH
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or HOME_PATH
    return path


class Router:
    """
    Router z kontrolą sesji.

    Args:
        auth: Obiekt z metodą get_session() (AuthService)
        routes: Tabela tras (domyślnie ROUTES)
    """

    def __init__(self, auth, routes: List[Route] = None):
        self.auth = auth
        self.routes = {route.path: route for route in (routes or ROUTES)}

    def match(self, path: str) -> Optional[Route]:
        """Trasa dla ścieżki (bez query) lub None"""
        return self.routes.get(_normalize(urlsplit(path).path))

    def _has_session(self) -> bool:
        return self.auth.get_session() is not None

    def _navigate(self, route: Route, path: str, redirected: bool) -> Navigation:
        return Navigation(
            path=path,
            name=route.name,
            title=route.title or APP_NAME,
            redirected=redirected,
        )

    def resolve(self, path: str) -> Navigation:
        """
        Rozwiąż nawigację do ścieżki.

        - nieznana ścieżka -> "/"
        - trasa chroniona bez sesji -> "/login?redirect=<ścieżka>"
        - "/login" z sesją -> cel z ?redirect= (jeśli to trasa chroniona) lub "/admin"
        """
        parts = urlsplit(path or HOME_PATH)
        route = self.match(path or HOME_PATH)

        if route is None:
            logger.debug(f"[Router] Unknown path {path!r}, redirecting to {HOME_PATH}")
            return self._navigate(self.routes[HOME_PATH], HOME_PATH, True)

        target = _normalize(parts.path)
        if parts.query:
            target = f"{target}?{parts.query}"

        if route.requires_auth and not self._has_session():
            login = f"{LOGIN_PATH}?redirect={quote(target, safe='/')}"
            logger.info(f"[Router] {target} requires authentication, redirecting to login")
            return self._navigate(self.routes[LOGIN_PATH], login, True)

        if route.guest_only and self._has_session():
            destination = ADMIN_PATH
            redirect = parse_qs(parts.query).get("redirect", [None])[0]
            # tylko ścieżki lokalne, bez "//host"
            if redirect and redirect.startswith("/") and not redirect.startswith("//"):
                wanted = self.match(redirect)
                if wanted is not None and wanted.requires_auth:
                    destination = redirect
            logger.debug(f"[Router] Already authenticated, redirecting to {destination}")
            return self._navigate(self.match(destination), destination, True)

        return self._navigate(route, target, False)
