"""Job matching, history and job suggestion service"""
from __future__ import annotations
import asyncio
import random
from typing import List, Optional

from skillmatch.config.models import LatencyCfg, ValidationCfg
from skillmatch.errors import InputValidationError
from skillmatch.jobs.catalog import SuggestedJob
from skillmatch.jobs.ranker import JobSuggestionRanker
from skillmatch.matching.models import JobMatch, SavedAnalysis
from skillmatch.matching.scorer import JobMatchScorer
from skillmatch.observability import get_logger
from skillmatch.resume.models import ResumeAnalysis
from skillmatch.storage.history import AnalysisHistory
from skillmatch.validation import validate_job_description

logger = get_logger(__name__)


class MatchService:
    """Scores resumes against job descriptions and ranks catalog jobs"""

    def __init__(
        self,
        scorer: JobMatchScorer,
        ranker: JobSuggestionRanker,
        history: AnalysisHistory,
        rng: random.Random,
        latency: Optional[LatencyCfg] = None,
        validation: Optional[ValidationCfg] = None,
    ):
        self.scorer = scorer
        self.ranker = ranker
        self.history = history
        self.rng = rng
        self.latency = latency or LatencyCfg()
        self.validation = validation or ValidationCfg()

    async def analyze_job_match(
        self,
        resume: Optional[ResumeAnalysis],
        job_description: str,
    ) -> JobMatch:
        if resume is None:
            raise InputValidationError("resume", "Please upload your resume first before analyzing.")
        description = validate_job_description(
            job_description, min_chars=self.validation.min_job_description_chars
        )
        await asyncio.sleep(self.latency.match)
        return self.scorer.score(resume.skills, description, self.rng)

    async def save_analysis(self, match: JobMatch) -> SavedAnalysis:
        await asyncio.sleep(self.latency.save)
        return self.history.save(match)

    async def saved_analyses(self) -> List[SavedAnalysis]:
        await asyncio.sleep(self.latency.history)
        return self.history.list()

    async def match_and_save(
        self,
        resume: Optional[ResumeAnalysis],
        job_description: str,
    ) -> JobMatch:
        """Score, then mirror the result into the history.

        Saving is best effort: a storage failure is logged and the match is
        still returned.
        """
        match = await self.analyze_job_match(resume, job_description)
        try:
            await self.save_analysis(match)
        except OSError as e:
            logger.warning("Could not save analysis", error=str(e))
        return match

    async def suggested_jobs(self, resume: Optional[ResumeAnalysis]) -> List[SuggestedJob]:
        if resume is None:
            raise InputValidationError("resume", "Resume data is required to get job suggestions.")
        await asyncio.sleep(self.latency.suggestions)
        return self.ranker.rank(resume.skills, self.rng)
