"""Jobs package for SkillMatch"""
from .catalog import SuggestedJob, JOB_CATALOG
from .ranker import JobSuggestionRanker, RankingConfig

__all__ = [
    'SuggestedJob',
    'JOB_CATALOG',
    'JobSuggestionRanker',
    'RankingConfig',
]
