"""Line-oriented section scanning for resume text.

A section opens on any line containing one of its header keywords and
closes on a line containing one of its terminator keywords. Inside an open
section each line is kept only when it passes a shape filter. When nothing
survives, a fixed placeholder is returned and flagged as such.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .vocabulary import (
    SECTION_HEADERS,
    SECTION_TERMINATORS,
    FALLBACK_EXPERIENCE,
    FALLBACK_EDUCATION,
    FALLBACK_SUMMARY,
)

_FOUR_DIGITS = re.compile(r"\d{4}")
_EDUCATION_MARKERS = ("university", "college", "degree")


@dataclass(frozen=True)
class SectionResult:
    """Lines extracted for one section"""
    lines: Tuple[str, ...]
    is_fallback: bool = False


def _is_experience_line(line: str) -> bool:
    return len(line) > 10 and (
        "|" in line or "•" in line or _FOUR_DIGITS.search(line) is not None
    )


def _is_education_line(line: str) -> bool:
    lower = line.lower()
    return len(line) > 10 and (
        any(marker in lower for marker in _EDUCATION_MARKERS)
        or _FOUR_DIGITS.search(line) is not None
    )


def _is_summary_line(line: str) -> bool:
    return len(line) > 20


class SectionScanner:
    """Extract experience, education and summary blocks from raw text."""

    def split_lines(self, text: str) -> List[str]:
        return [line.strip() for line in text.split("\n")]

    def scan(
        self,
        lines: Sequence[str],
        section: str,
        keep: Callable[[str], bool],
        stop_at_end: bool = False,
    ) -> List[str]:
        """Collect the kept lines of ``section``.

        Args:
            lines: Stripped resume lines
            section: Key into the header/terminator tables
            keep: Shape filter applied to lines inside the section
            stop_at_end: Stop scanning for good at the first terminator
                instead of waiting for the header to reappear

        Returns:
            Kept lines in text order
        """
        headers = SECTION_HEADERS[section]
        terminators = SECTION_TERMINATORS[section]
        kept: List[str] = []
        in_section = False

        for line in lines:
            lower = line.lower()
            if any(header in lower for header in headers):
                in_section = True
                continue
            if not in_section:
                continue
            if any(term in lower for term in terminators):
                if stop_at_end:
                    break
                in_section = False
                continue
            if keep(line):
                kept.append(line)

        return kept

    def experience(self, text: str) -> SectionResult:
        kept = self.scan(self.split_lines(text), "experience", _is_experience_line)
        if kept:
            return SectionResult(tuple(kept))
        return SectionResult(FALLBACK_EXPERIENCE, is_fallback=True)

    def education(self, text: str) -> SectionResult:
        kept = self.scan(self.split_lines(text), "education", _is_education_line)
        if kept:
            return SectionResult(tuple(kept))
        return SectionResult(FALLBACK_EDUCATION, is_fallback=True)

    def summary(self, text: str) -> SectionResult:
        """Summary lines joined into a single paragraph (one-element result)."""
        kept = self.scan(self.split_lines(text), "summary", _is_summary_line, stop_at_end=True)
        if kept:
            return SectionResult((" ".join(kept),))
        return SectionResult((FALLBACK_SUMMARY,), is_fallback=True)
