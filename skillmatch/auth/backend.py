"""Remote authentication collaborator"""
from __future__ import annotations
from abc import ABC, abstractmethod

from pydantic import ValidationError

from skillmatch.auth.models import AuthResponse
from skillmatch.errors import CollaboratorError
from skillmatch.observability import get_logger
from skillmatch.services.http import HttpClient

logger = get_logger(__name__)


class AuthBackend(ABC):
    """Account backend. Every method raises ``CollaboratorError`` when unusable."""

    @abstractmethod
    def login(self, email: str, password: str) -> AuthResponse:
        pass

    @abstractmethod
    def signup(self, email: str, password: str, name: str) -> AuthResponse:
        pass

    @abstractmethod
    def logout(self, token: str) -> None:
        pass

    @abstractmethod
    def verify(self, token: str) -> bool:
        """True when the backend still accepts ``token``, False when it rejects it.

        Raises ``CollaboratorError`` when the backend gives no verdict.
        """
        pass


class HttpAuthBackend(AuthBackend):
    """``POST {base}/auth/{login,signup,logout,verify}``"""

    def __init__(self, client: HttpClient):
        self.client = client

    def login(self, email: str, password: str) -> AuthResponse:
        body = self.client.post("auth/login", json={"email": email, "password": password})
        return self._decode(body)

    def signup(self, email: str, password: str, name: str) -> AuthResponse:
        body = self.client.post(
            "auth/signup", json={"email": email, "password": password, "name": name}
        )
        return self._decode(body)

    def logout(self, token: str) -> None:
        self.client.post("auth/logout", token=token)

    def verify(self, token: str) -> bool:
        try:
            self.client.post("auth/verify", token=token)
        except CollaboratorError as e:
            if e.status_code is None or not 400 <= e.status_code < 500:
                raise
            logger.info("Token rejected by backend", status=e.status_code)
            return False
        return True

    def _decode(self, body) -> AuthResponse:
        try:
            return AuthResponse.model_validate(body)
        except ValidationError as e:
            raise CollaboratorError(
                self.client.collaborator, f"unexpected auth payload: {e.error_count()} errors"
            ) from e
