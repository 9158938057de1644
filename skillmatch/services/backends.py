"""Remote resume collaborators"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Optional

from pydantic import ValidationError

from skillmatch.errors import CollaboratorError
from skillmatch.resume.models import MLAnalysis, ParsedResume
from skillmatch.services.http import HttpClient


class ResumeBackend(ABC):
    """Remote resume parsing and analysis."""

    @abstractmethod
    def parse(self, content: bytes, filename: str, content_type: Optional[str] = None) -> ParsedResume:
        """Parse an uploaded resume file.

        Raises:
            CollaboratorError: backend unreachable or response unusable
        """
        pass

    @abstractmethod
    def analyze(self, resume: ParsedResume) -> MLAnalysis:
        """Produce an analysis for an already parsed resume.

        Raises:
            CollaboratorError: backend unreachable or response unusable
        """
        pass


class HttpResumeBackend(ResumeBackend):
    """``POST {base}/resume/parse`` and ``POST {base}/resume/analyze``"""

    def __init__(self, client: HttpClient, token_provider: Optional[Callable[[], Optional[str]]] = None):
        self.client = client
        self.token_provider = token_provider or (lambda: None)

    def parse(self, content: bytes, filename: str, content_type: Optional[str] = None) -> ParsedResume:
        body = self.client.post(
            "resume/parse",
            files={"resume": (filename, content, content_type or "application/octet-stream")},
            token=self.token_provider(),
        )
        return self._decode(ParsedResume, body)

    def analyze(self, resume: ParsedResume) -> MLAnalysis:
        body = self.client.post(
            "resume/analyze",
            json=resume.model_dump(mode="json", by_alias=True),
            token=self.token_provider(),
        )
        return self._decode(MLAnalysis, body)

    def _decode(self, model, body):
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise CollaboratorError(
                self.client.collaborator, f"unexpected {model.__name__} payload: {e.error_count()} errors"
            ) from e
