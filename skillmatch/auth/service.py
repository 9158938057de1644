"""
Authentication service.

Logs in against the remote backend when one is configured and falls back to
a local demo mode when the backend fails. Demo mode accepts one fixed
account and keeps signed-up accounts in the local store. None of this is
real security: passwords are never stored or checked outside the fixed demo
account.
"""
from __future__ import annotations
import asyncio
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional

from pydantic import ValidationError

from skillmatch.auth.backend import AuthBackend
from skillmatch.auth.channel import AuthStateChannel, Listener
from skillmatch.auth.models import User
from skillmatch.config.models import LatencyCfg, ValidationCfg
from skillmatch.errors import AuthError, CollaboratorError
from skillmatch.observability import get_logger, counter, AnalysisMetrics
from skillmatch.services.http import run_blocking
from skillmatch.storage.local_store import LocalStore
from skillmatch.validation import validate_signup_password

logger = get_logger(__name__)

USER_KEY = "rj_user"
TOKEN_KEY = "rj_token"
DEMO_USERS_KEY = "rj_demo_users"

DEMO_EMAIL = "demo@rj.ai"
DEMO_PASSWORD = "demo123"
DEMO_USER_ID = "demo-1"
DEMO_USER_NAME = "Demo User"
DEMO_TOKEN = "demo-token"
DEMO_TOKEN_PREFIX = "demo-"
AVATAR_URL = "https://api.dicebear.com/7.x/avataaars/svg?seed={email}"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _demo_user_id() -> str:
    return f"demo-{int(time.time() * 1000)}"


class AuthService:
    """Current-user state, persisted under ``rj_user`` / ``rj_token``"""

    def __init__(
        self,
        store: LocalStore,
        backend: Optional[AuthBackend] = None,
        channel: Optional[AuthStateChannel] = None,
        latency: Optional[LatencyCfg] = None,
        validation: Optional[ValidationCfg] = None,
        clock: Callable[[], str] = _utc_now_iso,
        id_factory: Callable[[], str] = _demo_user_id,
    ):
        self.store = store
        self.backend = backend
        self.channel = channel or AuthStateChannel()
        self.latency = latency or LatencyCfg()
        self.validation = validation or ValidationCfg()
        self.clock = clock
        self.id_factory = id_factory
        self.current_user: Optional[User] = self._load_saved_user()

    def _load_saved_user(self) -> Optional[User]:
        saved_user = self.store.get(USER_KEY)
        if not saved_user or not self.store.get(TOKEN_KEY):
            return None
        try:
            return User.model_validate(saved_user)
        except ValidationError as e:
            logger.warning("Discarding malformed saved user", error=str(e))
            return None

    async def restore_session(self) -> Optional[User]:
        """Re-check a saved remote token; drop the session only if the backend rejects it"""
        token = self.get_auth_token()
        if self.current_user is None or token is None:
            return None
        if self.backend is not None and not token.startswith(DEMO_TOKEN_PREFIX):
            try:
                accepted = await run_blocking(self.backend.verify, token)
            except CollaboratorError as e:
                logger.warning("Could not verify saved token, keeping session",
                               user=self.current_user.email, error=str(e))
                return self.current_user
            if not accepted:
                logger.info("Saved token rejected, logging out", user=self.current_user.email)
                await self.logout()
        return self.current_user

    async def login(self, email: str, password: str) -> User:
        if self.backend is not None:
            try:
                response = await run_blocking(self.backend.login, email, password)
                return self._start_session(response.user, response.token)
            except CollaboratorError as e:
                self._record_fallback("login", e)
        return await self._demo_login(email, password)

    async def _demo_login(self, email: str, password: str) -> User:
        await asyncio.sleep(self.latency.demo_login)
        if email != DEMO_EMAIL or password != DEMO_PASSWORD:
            raise AuthError(
                f"Invalid credentials. Use {DEMO_EMAIL} / {DEMO_PASSWORD} for demo access."
            )
        now = self.clock()
        user = User(
            id=DEMO_USER_ID,
            email=email,
            name=DEMO_USER_NAME,
            avatar=AVATAR_URL.format(email=email),
            created_at=now,
            last_login=now,
        )
        return self._start_session(user, DEMO_TOKEN)

    async def signup(self, name: str, email: str, password: str, confirm_password: str) -> User:
        validate_signup_password(password, confirm_password,
                                 min_chars=self.validation.min_password_chars)
        if self.backend is not None:
            try:
                response = await run_blocking(self.backend.signup, email, password, name)
                return self._start_session(response.user, response.token)
            except CollaboratorError as e:
                self._record_fallback("signup", e)
        return await self._demo_signup(name, email)

    async def _demo_signup(self, name: str, email: str) -> User:
        await asyncio.sleep(self.latency.demo_signup)
        existing = self._demo_users()
        if any(u.get("email") == email for u in existing):
            raise AuthError("Email already exists")

        now = self.clock()
        user = User(
            id=self.id_factory(),
            email=email,
            name=name,
            avatar=AVATAR_URL.format(email=email),
            created_at=now,
            last_login=now,
        )
        existing.append(user.model_dump(by_alias=True))
        self.store.set(DEMO_USERS_KEY, existing)
        return self._start_session(user, f"demo-token-{user.id}")

    def _demo_users(self) -> List[dict]:
        users = self.store.get(DEMO_USERS_KEY, [])
        if not isinstance(users, list):
            logger.warning("Ignoring malformed demo user registry", type=type(users).__name__)
            return []
        return [u for u in users if isinstance(u, dict)]

    async def logout(self) -> None:
        token = self.get_auth_token()
        if self.backend is not None and token and not token.startswith(DEMO_TOKEN_PREFIX):
            try:
                await run_blocking(self.backend.logout, token)
            except CollaboratorError as e:
                logger.warning("Backend logout failed", error=str(e))

        self.current_user = None
        self.store.remove(USER_KEY)
        self.store.remove(TOKEN_KEY)
        self.channel.publish(None)

    def get_current_user(self) -> Optional[User]:
        return self.current_user

    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def get_auth_token(self) -> Optional[str]:
        return self.store.get(TOKEN_KEY)

    def on_auth_state_change(self, listener: Listener) -> Callable[[], None]:
        return self.channel.subscribe(listener)

    def _start_session(self, user: User, token: str) -> User:
        self.current_user = user
        self.store.set(USER_KEY, user.model_dump(by_alias=True))
        self.store.set(TOKEN_KEY, token)
        logger.info("User logged in", user=user.email, demo=token.startswith(DEMO_TOKEN_PREFIX))
        self.channel.publish(user)
        return user

    @staticmethod
    def _record_fallback(operation: str, error: CollaboratorError) -> None:
        counter(AnalysisMetrics.REMOTE_FALLBACK, tags={"operation": operation})
        logger.warning("Backend authentication failed, using demo mode",
                       operation=operation, error=str(error))

