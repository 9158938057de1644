"""Job match scoring for SkillMatch

Compares resume skills with the skills named in a job description and
produces a percentage score, a skill-gap breakdown and suggestions.
"""

from .models import Suggestion, JobMatch, SavedAnalysis
from .scorer import JobMatchScorer, MatchingConfig, partition_skills, compute_match_score
from .suggestions import SuggestionGenerator

__all__ = [
    'Suggestion',
    'JobMatch',
    'SavedAnalysis',
    'JobMatchScorer',
    'MatchingConfig',
    'partition_skills',
    'compute_match_score',
    'SuggestionGenerator',
]
