"""
AuthService - Sesja administratora

Cienka warstwa nad client.auth (Supabase) lub LocalAuthProvider (mock):
każde wywołanie idzie prosto do dostawcy, błąd jest logowany i rzucany dalej.
"""

from typing import Any, Callable, Optional
import logging

from config.settings import SITE_URL
from core.events import EventBus, EventType, create_event

logger = logging.getLogger(__name__)


class AuthService:
    """
    Serwis uwierzytelniania.

    Example:
        auth = AuthService(get_supabase_client().auth)

        auth.login("admin@shop.fr", "secret")
        auth.is_authenticated()  # True

        unsubscribe = auth.on_auth_state_change(lambda event, session: print(event))
        unsubscribe()
    """

    def __init__(self, provider, event_bus: EventBus = None):
        """
        Args:
            provider: client.auth z supabase-py lub LocalAuthProvider
            event_bus: Szyna eventów (opcjonalna)
        """
        self.provider = provider
        self.event_bus = event_bus or EventBus()

    def _call(self, action: str, func: Callable, *args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"[Auth] {action} failed: {e}")
            raise

    def _publish(self, event_type: EventType, user) -> None:
        user_id = getattr(user, "id", None)
        self.event_bus.publish(create_event(
            event_type,
            {"email": getattr(user, "email", None)},
            user_id=str(user_id) if user_id else None,
            source="Auth",
        ))

    # ============================================================
    # Sesja
    # ============================================================

    def login(self, email: str, password: str):
        """
        Zaloguj administratora.

        Returns:
            Odpowiedź dostawcy (user + session)
        """
        response = self._call(
            "Login", self.provider.sign_in_with_password,
            {"email": email, "password": password}
        )
        self._publish(EventType.USER_SIGNED_IN, response.user)
        logger.info(f"[Auth] Signed in: {email}")
        return response

    def register(self, email: str, password: str, nom: str = ""):
        """Załóż konto administratora; nom trafia do metadanych użytkownika"""
        response = self._call(
            "Register", self.provider.sign_up,
            {"email": email, "password": password, "options": {"data": {"nom": nom}}}
        )
        self._publish(EventType.USER_REGISTERED, response.user)
        logger.info(f"[Auth] Registered: {email}")
        return response

    def logout(self) -> None:
        session = self.get_session()
        user = session.user if session else None
        self._call("Logout", self.provider.sign_out)
        self._publish(EventType.USER_SIGNED_OUT, user)
        logger.info("[Auth] Signed out")

    def get_current_user(self):
        """Zalogowany użytkownik lub None"""
        response = self._call("Get user", self.provider.get_user)
        return response.user if response else None

    def get_session(self):
        """Aktualna sesja lub None"""
        return self._call("Get session", self.provider.get_session)

    def is_authenticated(self) -> bool:
        return self.get_session() is not None

    def on_auth_state_change(self, callback: Callable[[str, Any], None]) -> Callable[[], None]:
        """
        Nasłuchuj zmian stanu (SIGNED_IN, SIGNED_OUT, TOKEN_REFRESHED, ...).

        Returns:
            Funkcja wyrejestrowująca callback
        """
        subscription = self._call(
            "Subscribe", self.provider.on_auth_state_change,
            lambda event, session: callback(event, session)
        )
        return subscription.unsubscribe

    def reset_password(self, email: str, redirect_to: Optional[str] = None) -> None:
        """Wyślij email z linkiem do zmiany hasła"""
        self._call(
            "Reset password", self.provider.reset_password_for_email,
            email, {"redirect_to": redirect_to or f"{SITE_URL}/reset-password"}
        )
        logger.info(f"[Auth] Password reset sent: {email}")
