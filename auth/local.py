"""
ShopCatalog - Local Auth Provider
=================================
Dostawca uwierzytelniania w pamięci dla trybu mock.

Ma ten sam zestaw metod co client.auth z supabase-py
(sign_in_with_password, sign_up, sign_out, get_user, get_session,
on_auth_state_change, reset_password_for_email), więc AuthService
nie rozróżnia trybów.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
import logging
import secrets
import uuid

from passlib.context import CryptContext

from core.exceptions import AuthError, InvalidCredentialsError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass
class LocalUser:
    id: str
    email: str
    user_metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class LocalSession:
    access_token: str
    user: LocalUser
    token_type: str = "bearer"


@dataclass
class LocalAuthResponse:
    """Odpowiednik AuthResponse / UserResponse z supabase-py"""
    user: Optional[LocalUser]
    session: Optional[LocalSession] = None


@dataclass
class LocalSubscription:
    id: str
    callback: Callable[[str, Optional[LocalSession]], None]
    unsubscribe: Callable[[], None]


class LocalAuthProvider:
    """
    Konta i sesja w pamięci procesu.

    Example:
        provider = LocalAuthProvider({"admin@shop.test": "secret123"})
        provider.sign_in_with_password({"email": "admin@shop.test", "password": "secret123"})
        provider.get_session()  # LocalSession
    """

    def __init__(self, users: Dict[str, str] = None):
        """
        Args:
            users: Początkowe konta {email: hasło}
        """
        self._users: Dict[str, Dict[str, Any]] = {}
        self._session: Optional[LocalSession] = None
        self._subscriptions: List[LocalSubscription] = []

        for email, password in (users or {}).items():
            self._add_user(email, password)

    def _add_user(self, email: str, password: str, metadata: Dict[str, Any] = None) -> LocalUser:
        user = LocalUser(id=str(uuid.uuid4()), email=email, user_metadata=dict(metadata or {}))
        self._users[email.lower()] = {"user": user, "password": pwd_context.hash(password)}
        return user

    def _start_session(self, user: LocalUser) -> LocalSession:
        self._session = LocalSession(access_token=secrets.token_urlsafe(24), user=user)
        self._notify("SIGNED_IN", self._session)
        return self._session

    def _notify(self, event: str, session: Optional[LocalSession]):
        for subscription in list(self._subscriptions):
            subscription.callback(event, session)

    # ============================================================
    # client.auth API
    # ============================================================

    def sign_in_with_password(self, credentials: Dict[str, Any]) -> LocalAuthResponse:
        email = (credentials.get("email") or "").strip()
        password = credentials.get("password") or ""

        account = self._users.get(email.lower())
        if not account or not pwd_context.verify(password, account["password"]):
            raise InvalidCredentialsError(email)

        session = self._start_session(account["user"])
        return LocalAuthResponse(user=account["user"], session=session)

    def sign_up(self, credentials: Dict[str, Any]) -> LocalAuthResponse:
        email = (credentials.get("email") or "").strip()
        password = credentials.get("password") or ""
        metadata = (credentials.get("options") or {}).get("data") or {}

        if not email or "@" not in email:
            raise AuthError("Invalid email address", code="INVALID_EMAIL", details={"email": email})
        if len(password) < MIN_PASSWORD_LENGTH:
            raise AuthError(
                f"Password should be at least {MIN_PASSWORD_LENGTH} characters",
                code="WEAK_PASSWORD"
            )
        if email.lower() in self._users:
            raise AuthError("User already registered", code="USER_EXISTS", details={"email": email})

        user = self._add_user(email, password, metadata)
        session = self._start_session(user)
        return LocalAuthResponse(user=user, session=session)

    def sign_out(self) -> None:
        if self._session is None:
            return
        self._session = None
        self._notify("SIGNED_OUT", None)

    def get_user(self) -> Optional[LocalAuthResponse]:
        if self._session is None:
            return None
        return LocalAuthResponse(user=self._session.user)

    def get_session(self) -> Optional[LocalSession]:
        return self._session

    def on_auth_state_change(
        self,
        callback: Callable[[str, Optional[LocalSession]], None]
    ) -> LocalSubscription:
        subscription_id = str(uuid.uuid4())

        def unsubscribe():
            self._subscriptions[:] = [s for s in self._subscriptions if s.id != subscription_id]

        subscription = LocalSubscription(id=subscription_id, callback=callback, unsubscribe=unsubscribe)
        self._subscriptions.append(subscription)
        return subscription

    def reset_password_for_email(self, email: str, options: Dict[str, Any] = None) -> None:
        # nieznany email nie jest ujawniany, jak w Supabase
        redirect_to = (options or {}).get("redirect_to")
        logger.info(f"[Auth] Password reset requested (mock): {email} -> {redirect_to}")
