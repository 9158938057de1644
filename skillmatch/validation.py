"""Input validation run before any analysis starts.

Every check raises ``InputValidationError``; none of them is eligible for
fallback.
"""
from __future__ import annotations
from enum import Enum
from pathlib import PurePath
from typing import Optional

from skillmatch.errors import InputValidationError

MAX_RESUME_BYTES = 5 * 1024 * 1024
MIN_JOB_DESCRIPTION_CHARS = 50
MIN_PASSWORD_CHARS = 6


class ResumeFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    TEXT = "text"


CONTENT_TYPES = {
    "application/pdf": ResumeFormat.PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ResumeFormat.DOCX,
    "text/plain": ResumeFormat.TEXT,
}

EXTENSIONS = {
    ".pdf": ResumeFormat.PDF,
    ".docx": ResumeFormat.DOCX,
    ".txt": ResumeFormat.TEXT,
}


def detect_format(filename: str, content_type: Optional[str] = None) -> Optional[ResumeFormat]:
    """Resolve the resume format from the declared content type, else the extension."""
    if content_type:
        fmt = CONTENT_TYPES.get(content_type.split(";")[0].strip().lower())
        if fmt is not None:
            return fmt
    return EXTENSIONS.get(PurePath(filename or "").suffix.lower())


def validate_resume_upload(
    filename: str,
    size: int,
    content_type: Optional[str] = None,
    max_bytes: int = MAX_RESUME_BYTES,
) -> ResumeFormat:
    fmt = detect_format(filename, content_type)
    if fmt is None:
        raise InputValidationError("file", "Please upload a PDF, DOCX, or TXT file")
    if size > max_bytes:
        raise InputValidationError(
            "file", f"File size exceeds {max_bytes // (1024 * 1024)}MB limit"
        )
    return fmt


def validate_job_description(text: Optional[str], min_chars: int = MIN_JOB_DESCRIPTION_CHARS) -> str:
    cleaned = (text or "").strip()
    if len(cleaned) < min_chars:
        raise InputValidationError(
            "job_description",
            f"Please enter a more detailed job description (at least {min_chars} characters).",
        )
    return cleaned


def validate_signup_password(
    password: str,
    confirm_password: str,
    min_chars: int = MIN_PASSWORD_CHARS,
) -> None:
    if password != confirm_password:
        raise InputValidationError("confirm_password", "Passwords do not match")
    if len(password) < min_chars:
        raise InputValidationError(
            "password", f"Password must be at least {min_chars} characters long"
        )
