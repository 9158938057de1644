"""
Thin JSON-over-HTTP client for the remote collaborators.

Every transport or decoding problem surfaces as ``CollaboratorError`` so the
services can decide whether a local fallback is allowed.
"""
from __future__ import annotations
import asyncio
import functools
from typing import Any, Callable, Dict, Optional, TypeVar

import requests
from requests.adapters import HTTPAdapter

from skillmatch.errors import CollaboratorError
from skillmatch.observability import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args: Any) -> T:
    """Run a blocking collaborator call on the default executor"""
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args))


class HttpClient:
    """POSTs to ``{base_url}/{path}`` and returns the decoded JSON body"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        collaborator: str = "api",
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.collaborator = collaborator
        self.session = session or requests.Session()
        if session is None:
            # No retries: a dead backend should fall back quickly
            adapter = HTTPAdapter(max_retries=0)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def post(
        self,
        path: str,
        json: Any = None,
        files: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Any:
        headers = {}
        if token:
            headers['Authorization'] = f"Bearer {token}"
        url = self.url(path)
        logger.debug("POST", url=url)

        try:
            response = self.session.post(
                url, json=json, files=files, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise CollaboratorError(self.collaborator, f"POST {url} failed: {e}") from e

        if not response.ok:
            raise CollaboratorError(
                self.collaborator,
                self._error_message(response) or f"POST {url} returned {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise CollaboratorError(
                self.collaborator, f"POST {url} returned invalid JSON", status_code=response.status_code
            ) from e

    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get('message'):
            return str(body['message'])
        return None
