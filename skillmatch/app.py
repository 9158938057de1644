"""
Service wiring.

Builds every service from an ``AppConfig`` so callers never reach for
module-level singletons.
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Optional

from skillmatch.auth.backend import HttpAuthBackend
from skillmatch.auth.service import AuthService, TOKEN_KEY
from skillmatch.config.models import AppConfig
from skillmatch.jobs.ranker import JobSuggestionRanker, RankingConfig
from skillmatch.matching.scorer import JobMatchScorer, MatchingConfig
from skillmatch.resume.analysis import ResumeAnalyzer
from skillmatch.resume.parser import create_resume_parser
from skillmatch.services.backends import HttpResumeBackend
from skillmatch.services.http import HttpClient
from skillmatch.services.match_service import MatchService
from skillmatch.services.resume_service import ResumeService
from skillmatch.storage.history import AnalysisHistory
from skillmatch.storage.local_store import LocalStore


@dataclass
class AppServices:
    config: AppConfig
    store: LocalStore
    resume: ResumeService
    matching: MatchService
    auth: AuthService


def create_app_services(
    config: Optional[AppConfig] = None,
    rng: Optional[random.Random] = None,
    store: Optional[LocalStore] = None,
) -> AppServices:
    """Factory function wiring the services for one process"""
    config = config or AppConfig()
    rng = rng or random.Random()
    store = store if store is not None else LocalStore(config.storage.resolved_path())

    resume_backend = None
    auth_backend = None
    if config.remote.enabled:
        resume_backend = HttpResumeBackend(
            HttpClient(config.remote.base_url, config.remote.timeout, collaborator="resume-api"),
            token_provider=lambda: store.get(TOKEN_KEY),
        )
        auth_backend = HttpAuthBackend(
            HttpClient(config.remote.base_url, config.remote.timeout, collaborator="auth-api")
        )

    resume = ResumeService(
        parser=create_resume_parser(),
        analyzer=ResumeAnalyzer(),
        rng=rng,
        backend=resume_backend,
        latency=config.latency,
        validation=config.validation,
    )
    matching = MatchService(
        scorer=JobMatchScorer(MatchingConfig(partial_skills=tuple(config.matching.partial_skills))),
        ranker=JobSuggestionRanker(config=RankingConfig(
            min_score_threshold=config.matching.min_score_threshold,
            max_results=config.matching.max_results,
            fallback_results=config.matching.fallback_results,
        )),
        history=AnalysisHistory(store),
        rng=rng,
        latency=config.latency,
        validation=config.validation,
    )
    auth = AuthService(
        store,
        backend=auth_backend,
        latency=config.latency,
        validation=config.validation,
    )
    return AppServices(config=config, store=store, resume=resume, matching=matching, auth=auth)
