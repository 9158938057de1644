"""Keyword heuristics over resume and job-description text"""
from .extractors import (
    ExperienceLevel,
    SkillExtractor,
    ContactExtractor,
    ExperienceLevelEstimator,
    skills_related,
)
from .sections import SectionScanner, SectionResult

__all__ = [
    'ExperienceLevel',
    'SkillExtractor',
    'ContactExtractor',
    'ExperienceLevelEstimator',
    'skills_related',
    'SectionScanner',
    'SectionResult',
]
