"""Text extractors for skills, contact details and experience level."""

from __future__ import annotations
import re
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .vocabulary import (
    SKILL_VOCABULARY,
    DEFAULT_CONTACT_NAME,
    DEFAULT_EXPERIENCE_YEARS,
)


class ExperienceLevel(str, Enum):
    """Seniority buckets derived from estimated years of experience"""
    ENTRY = "Entry"
    MID = "Mid"
    SENIOR = "Senior"
    EXECUTIVE = "Executive"


def skills_related(a: str, b: str) -> bool:
    """True when either skill name is a case-insensitive substring of the other."""
    a_lower, b_lower = a.lower(), b.lower()
    return a_lower in b_lower or b_lower in a_lower


class SkillExtractor:
    """Find vocabulary skills in free text.

    Matching is plain case-insensitive substring search, so "Java" is found
    inside "JavaScript" and "AI" inside "maintain". Results follow vocabulary
    order and contain each skill once.
    """

    def __init__(self, vocabulary: Iterable[str] = SKILL_VOCABULARY):
        self.vocabulary = tuple(dict.fromkeys(vocabulary))

    def extract_skills(self, text: str) -> List[str]:
        text_lower = text.lower()
        return [skill for skill in self.vocabulary if skill.lower() in text_lower]


class ContactExtractor:
    """Regex extraction of email, phone and a best-guess name line."""

    EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
    PHONE_PATTERN = re.compile(r"\(?\d{3}\)?[-\s]?\d{3}[-\s]?\d{4}")
    NAME_PATTERN = re.compile(r"[A-Za-z\s]+")
    NAME_SCAN_LINES = 5

    def extract_contact(self, text: str) -> Dict[str, Optional[str]]:
        email_match = self.EMAIL_PATTERN.search(text)
        phone_match = self.PHONE_PATTERN.search(text)
        return {
            'email': email_match.group(0) if email_match else None,
            'phone': phone_match.group(0) if phone_match else None,
            'name': self.extract_name(text),
        }

    def extract_name(self, text: str) -> str:
        for line in text.split("\n")[:self.NAME_SCAN_LINES]:
            candidate = line.strip()
            lower = candidate.lower()
            if (
                2 < len(candidate) < 50
                and self.NAME_PATTERN.fullmatch(candidate)
                and "resume" not in lower
                and "cv" not in lower
            ):
                return candidate
        return DEFAULT_CONTACT_NAME


class ExperienceLevelEstimator:
    """Estimate years of experience from the earliest year mentioned.

    Any 19xx/20xx token counts, including graduation and certification
    years. With fewer than two mentions a fixed default is assumed.
    """

    YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")

    def __init__(self, current_year: Optional[int] = None):
        self._current_year = current_year

    @property
    def current_year(self) -> int:
        return self._current_year if self._current_year is not None else datetime.now().year

    def extract_years(self, text: str) -> List[int]:
        return [int(match.group(0)) for match in self.YEAR_PATTERN.finditer(text)]

    def estimate_years(self, text: str) -> int:
        years = self.extract_years(text)
        if len(years) < 2:
            return DEFAULT_EXPERIENCE_YEARS
        return max(0, self.current_year - min(years))

    @staticmethod
    def level_for_years(years: float) -> ExperienceLevel:
        if years < 2:
            return ExperienceLevel.ENTRY
        if years < 5:
            return ExperienceLevel.MID
        if years < 10:
            return ExperienceLevel.SENIOR
        return ExperienceLevel.EXECUTIVE

    def estimate_level(self, text: str) -> ExperienceLevel:
        return self.level_for_years(self.estimate_years(text))
