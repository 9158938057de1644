"""Rank catalog jobs by skill overlap with a resume.

Quirks kept on purpose:
- a job with no overlap gets a random percentage in [35, 64], so it can
  outrank a job with a small real overlap (which is lifted to 45);
- short required skills such as "R" are related to any resume skill that
  contains the letter.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from skillmatch.jobs.catalog import JOB_CATALOG, SuggestedJob
from skillmatch.nlp.extractors import skills_related
from skillmatch.observability import get_logger, timer, counter, AnalysisMetrics
from skillmatch.utils import round_half_up

logger = get_logger(__name__)


@dataclass
class RankingConfig:
    """Thresholds for the job suggestion ranker"""
    max_percentage: int = 95
    min_reported_percentage: int = 45
    no_overlap_low: int = 35
    no_overlap_high: int = 64
    min_score_threshold: int = 40
    max_results: int = 8
    fallback_results: int = 5


class JobSuggestionRanker:
    """Score every catalog job and return the most relevant ones"""

    def __init__(
        self,
        catalog: Sequence[SuggestedJob] = JOB_CATALOG,
        config: Optional[RankingConfig] = None,
    ):
        self.catalog = tuple(catalog)
        self.config = config or RankingConfig()

    def overlap_percentage(self, resume_skills: Sequence[str], job: SuggestedJob) -> int:
        """Share of the job's required skills covered by the resume, capped"""
        if not job.required_skills:
            return 0
        hits = [
            required for required in job.required_skills
            if any(skills_related(skill, required) for skill in resume_skills)
        ]
        raw = round_half_up(100 * len(hits) / len(job.required_skills))
        return min(raw, self.config.max_percentage)

    def reported_percentage(self, overlap: int, rng: random.Random) -> int:
        if overlap > 0:
            return max(overlap, self.config.min_reported_percentage)
        return rng.randint(self.config.no_overlap_low, self.config.no_overlap_high)

    def score_catalog(self, resume_skills: Sequence[str], rng: random.Random) -> List[SuggestedJob]:
        """Copies of every catalog job with ``match_percentage`` filled in, in catalog order"""
        return [
            job.model_copy(update={
                "match_percentage": self.reported_percentage(
                    self.overlap_percentage(resume_skills, job), rng
                )
            })
            for job in self.catalog
        ]

    def rank(self, resume_skills: Sequence[str], rng: random.Random) -> List[SuggestedJob]:
        with timer("jobs.rank"):
            scored = self.score_catalog(resume_skills, rng)
            relevant = [
                job for job in scored
                if job.match_percentage >= self.config.min_score_threshold
            ]
            relevant.sort(key=lambda job: job.match_percentage, reverse=True)
            relevant = relevant[:self.config.max_results]

        if not relevant:
            counter(AnalysisMetrics.JOBS_RANK_FALLBACK)
            logger.info("No jobs above threshold, returning unfiltered head",
                        threshold=self.config.min_score_threshold)
            return scored[:self.config.fallback_results]

        counter(AnalysisMetrics.JOBS_RANKED, value=len(relevant))
        logger.info("Ranked suggested jobs", returned=len(relevant),
                    top=relevant[0].match_percentage)
        return relevant
