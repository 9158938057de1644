"""Exception hierarchy shared by the SkillMatch services.

Only ``CollaboratorError`` permits falling back to local heuristics. Input
validation problems fail fast and everything else propagates unchanged.
"""
from __future__ import annotations
from typing import Optional


class SkillMatchError(Exception):
    """Base class for all SkillMatch errors"""


class InputValidationError(SkillMatchError):
    """User input rejected before any analysis runs"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class CollaboratorError(SkillMatchError):
    """A remote collaborator was unreachable or answered with garbage"""

    def __init__(self, collaborator: str, message: str, status_code: Optional[int] = None):
        self.collaborator = collaborator
        self.message = message
        self.status_code = status_code
        super().__init__(f"{collaborator}: {message}")

    def __str__(self):
        if self.status_code is not None:
            return f"CollaboratorError(collaborator={self.collaborator}, status={self.status_code}, error={self.message})"
        return f"CollaboratorError(collaborator={self.collaborator}, error={self.message})"


class ResumeReadError(SkillMatchError):
    """The uploaded file could not be read"""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Failed to parse resume {filename}: {reason}")


class AuthError(SkillMatchError):
    """Login or signup rejected"""
