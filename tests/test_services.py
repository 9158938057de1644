"""Tests for the async services and their fallback rules"""
import asyncio
import random
import threading
import pytest
import requests
from unittest.mock import Mock
from skillmatch.app import create_app_services
from skillmatch.config import AppConfig, LatencyCfg
from skillmatch.errors import CollaboratorError, InputValidationError
from skillmatch.jobs import JobSuggestionRanker
from skillmatch.matching import JobMatchScorer
from skillmatch.nlp import ExperienceLevelEstimator
from skillmatch.observability import get_metrics_collector
from skillmatch.resume import (
    ResumeAnalyzer, ResumeAnalysis, MLAnalysis, ParsedResume, create_resume_parser
)
from skillmatch.services import (
    HttpClient, HttpResumeBackend, ResumeBackend, ResumeService, MatchService
)
from skillmatch.storage import LocalStore, AnalysisHistory

RESUME_TEXT = b"""Casey Jordan
casey@example.com

Experience
Backend Engineer | DataCo | 2016 - 2024
\xe2\x80\xa2 Built Python and Docker services on AWS

Education
State University, BSc Computer Science
"""

JOB_DESCRIPTION = (
    "We are hiring a backend engineer with Python, Docker and Kubernetes experience "
    "to run services on AWS."
)


@pytest.fixture
def resume_service_factory():
    def _create(backend=None):
        return ResumeService(
            parser=create_resume_parser(),
            analyzer=ResumeAnalyzer(ExperienceLevelEstimator(current_year=2024)),
            rng=random.Random(0),
            backend=backend,
            latency=LatencyCfg.zero(),
        )
    return _create


@pytest.fixture
def match_service():
    return MatchService(
        scorer=JobMatchScorer(),
        ranker=JobSuggestionRanker(),
        history=AnalysisHistory(LocalStore()),
        rng=random.Random(0),
        latency=LatencyCfg.zero(),
    )


def _fallback_count():
    return get_metrics_collector().total("services.fallback")


@pytest.mark.asyncio
async def test_local_analysis_without_backend(resume_service_factory):
    service = resume_service_factory()
    analysis = await service.analyze_resume(RESUME_TEXT, "resume.txt")

    assert isinstance(analysis, ResumeAnalysis)
    assert analysis.contact.name == "Casey Jordan"
    assert {"Python", "Docker", "AWS"} <= set(analysis.skills)
    assert analysis.experience == [
        "Backend Engineer | DataCo | 2016 - 2024",
        "• Built Python and Docker services on AWS",
    ]
    assert analysis.ml_analysis.experience_level.value == "Senior"


@pytest.mark.asyncio
async def test_network_failure_falls_back(resume_service_factory):
    backend = Mock(spec=ResumeBackend)
    backend.parse.side_effect = CollaboratorError("resume-api", "connection refused")
    backend.analyze.side_effect = CollaboratorError("resume-api", "timeout")
    service = resume_service_factory(backend)
    before = _fallback_count()

    analysis = await service.analyze_resume(RESUME_TEXT, "resume.txt")

    assert analysis.contact.email == "casey@example.com"
    backend.parse.assert_called_once()
    backend.analyze.assert_called_once()
    assert _fallback_count() == before + 2


@pytest.mark.asyncio
async def test_malformed_response_falls_back(resume_service_factory):
    client = Mock(spec=HttpClient)
    client.collaborator = "resume-api"
    client.post.return_value = {"unexpected": "shape"}
    service = resume_service_factory(HttpResumeBackend(client))

    analysis = await service.analyze_resume(RESUME_TEXT, "resume.txt")

    assert analysis.contact.name == "Casey Jordan"
    assert client.post.call_count == 2


@pytest.mark.asyncio
async def test_validation_error_does_not_fall_back(resume_service_factory):
    backend = Mock(spec=ResumeBackend)
    service = resume_service_factory(backend)

    with pytest.raises(InputValidationError):
        await service.analyze_resume(b"x", "resume.exe")
    backend.parse.assert_not_called()


@pytest.mark.asyncio
async def test_programming_errors_propagate(resume_service_factory):
    backend = Mock(spec=ResumeBackend)
    backend.parse.side_effect = KeyError("bug")
    service = resume_service_factory(backend)

    with pytest.raises(KeyError):
        await service.analyze_resume(RESUME_TEXT, "resume.txt")


@pytest.mark.asyncio
async def test_remote_results_are_used(resume_service_factory):
    parsed = ParsedResume(text="remote", skills=["Go"])
    ml = MLAnalysis(
        description="remote analysis", experience_level="Mid", confidence_score=80
    )
    backend = Mock(spec=ResumeBackend)
    backend.parse.return_value = parsed
    backend.analyze.return_value = ml
    service = resume_service_factory(backend)

    analysis = await service.analyze_resume(RESUME_TEXT, "resume.txt")

    assert analysis.skills == ["Go"]
    assert analysis.summary == "remote analysis"


def test_http_client_maps_request_errors():
    session = Mock()
    session.post.side_effect = requests.ConnectionError("refused")
    client = HttpClient("http://backend/api", session=session, collaborator="resume-api")

    with pytest.raises(CollaboratorError) as exc_info:
        client.post("resume/parse")
    assert exc_info.value.collaborator == "resume-api"
    assert session.post.call_args[0][0] == "http://backend/api/resume/parse"


def test_http_client_maps_bad_status_and_json():
    session = Mock()
    response = Mock(ok=False, status_code=503, content=b"{}")
    response.json.return_value = {"message": "down for maintenance"}
    session.post.return_value = response
    client = HttpClient("http://backend/api", session=session)

    with pytest.raises(CollaboratorError) as exc_info:
        client.post("auth/login", json={}, token="t")
    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "down for maintenance"
    assert session.post.call_args[1]["headers"] == {"Authorization": "Bearer t"}

    response = Mock(ok=True, status_code=200, content=b"<html>")
    response.json.side_effect = ValueError("no json")
    session.post.return_value = response
    with pytest.raises(CollaboratorError):
        client.post("resume/analyze")


@pytest.mark.asyncio
async def test_job_match_and_history(resume_service_factory, match_service):
    resume = await resume_service_factory().analyze_resume(RESUME_TEXT, "resume.txt")

    match = await match_service.match_and_save(resume, JOB_DESCRIPTION)

    assert set(match.matching_skills) >= {"Python", "Docker", "AWS"}
    assert "Kubernetes" in match.missing_skills
    saved = await match_service.saved_analyses()
    assert len(saved) == 1
    assert saved[0].match_score == match.match_score


@pytest.mark.asyncio
async def test_job_match_requires_resume_and_description(match_service):
    with pytest.raises(InputValidationError):
        await match_service.analyze_job_match(None, JOB_DESCRIPTION)

    resume = ResumeAnalysis(skills=["Python"])
    with pytest.raises(InputValidationError):
        await match_service.analyze_job_match(resume, "Python please")


@pytest.mark.asyncio
async def test_suggested_jobs(match_service):
    with pytest.raises(InputValidationError):
        await match_service.suggested_jobs(None)

    jobs = await match_service.suggested_jobs(ResumeAnalysis(skills=["Python", "SQL"]))
    assert jobs
    assert all(job.match_percentage >= 40 for job in jobs)


def test_create_app_services_offline():
    config = AppConfig()
    config.remote.enabled = False
    services = create_app_services(config, rng=random.Random(0), store=LocalStore())

    assert services.resume.backend is None
    assert services.auth.backend is None
    assert services.matching.scorer.config.partial_skills == ("GraphQL", "Kubernetes", "MongoDB")


def test_create_app_services_remote():
    config = AppConfig.model_validate({"remote": {"base_url": "http://backend/api/"}})
    services = create_app_services(config, store=LocalStore())

    assert isinstance(services.resume.backend, HttpResumeBackend)
    assert services.resume.backend.client.base_url == "http://backend/api"


@pytest.mark.asyncio
async def test_backend_calls_run_off_the_event_loop(resume_service_factory):
    released = threading.Event()

    def slow_parse(content, filename, content_type=None):
        if not released.wait(timeout=2):
            raise CollaboratorError("resume-api", "event loop was blocked")
        return ParsedResume(text="remote", skills=["Go"])

    backend = Mock(spec=ResumeBackend)
    backend.parse.side_effect = slow_parse
    service = resume_service_factory(backend)

    async def release_when_called():
        while not backend.parse.called:
            await asyncio.sleep(0.01)
        released.set()

    parsed, _ = await asyncio.gather(
        service.parse_resume(RESUME_TEXT, "resume.txt"), release_when_called()
    )

    assert parsed.skills == ["Go"]
