"""Job match scorer.

Compares the skills of a resume with the skills mentioned in a job
description. Two skills are related when either name is a case-insensitive
substring of the other.

The score denominator always includes the partial-skill list, so with the
default three partial skills a perfect overlap on two job skills scores
round(100 * 2 / 5) = 40.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from skillmatch.matching.models import JobMatch
from skillmatch.matching.suggestions import SuggestionGenerator
from skillmatch.nlp.extractors import SkillExtractor, skills_related
from skillmatch.nlp.vocabulary import JOB_SKILL_VOCABULARY, PARTIAL_SKILLS
from skillmatch.observability import get_logger, timer, counter, histogram, AnalysisMetrics
from skillmatch.utils import round_half_up

logger = get_logger(__name__)


@dataclass
class MatchingConfig:
    """Configuration for the job match scorer"""
    job_vocabulary: Tuple[str, ...] = JOB_SKILL_VOCABULARY
    # Reported for every job regardless of input.
    partial_skills: Tuple[str, ...] = PARTIAL_SKILLS


def partition_skills(
    resume_skills: Sequence[str],
    job_skills: Sequence[str],
) -> Tuple[List[str], List[str]]:
    """Split into (resume skills related to some job skill, job skills related to none)."""
    matching = [
        skill for skill in resume_skills
        if any(skills_related(skill, job_skill) for job_skill in job_skills)
    ]
    missing = [
        job_skill for job_skill in job_skills
        if not any(skills_related(skill, job_skill) for skill in resume_skills)
    ]
    return matching, missing


def compute_match_score(matching: int, missing: int, partial: int) -> int:
    denominator = matching + missing + partial
    if denominator == 0:
        return 0
    return round_half_up(100 * matching / denominator)


class JobMatchScorer:
    """Score a resume's skills against a job description"""

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        suggestion_generator: Optional[SuggestionGenerator] = None,
    ):
        self.config = config or MatchingConfig()
        self.job_skill_extractor = SkillExtractor(self.config.job_vocabulary)
        self.suggestion_generator = suggestion_generator or SuggestionGenerator()

    def extract_job_skills(self, job_description: str) -> List[str]:
        return self.job_skill_extractor.extract_skills(job_description)

    def score(
        self,
        resume_skills: Sequence[str],
        job_description: str,
        rng: random.Random,
    ) -> JobMatch:
        with timer("matching.score"):
            job_skills = self.extract_job_skills(job_description)
            matching, missing = partition_skills(resume_skills, job_skills)
            partial = list(self.config.partial_skills)

            match_score = compute_match_score(len(matching), len(missing), len(partial))
            result = JobMatch(
                match_score=match_score,
                matching_skills=matching,
                missing_skills=missing,
                partial_skills=partial,
                suggestions=self.suggestion_generator.generate(missing, partial, rng),
            )

        counter(AnalysisMetrics.MATCH_SCORED)
        histogram(AnalysisMetrics.MATCH_SCORE, match_score)
        logger.info("Scored job match", score=match_score, job_skills=len(job_skills),
                    matching=len(matching), missing=len(missing))
        return result
