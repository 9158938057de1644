"""Tests for the suggested job ranker"""
import random
import pytest
from skillmatch.jobs import JobSuggestionRanker, RankingConfig, SuggestedJob, JOB_CATALOG


@pytest.fixture
def ranker():
    return JobSuggestionRanker()


def test_catalog_has_ten_jobs():
    assert len(JOB_CATALOG) == 10
    assert [job.id for job in JOB_CATALOG] == [str(i) for i in range(1, 11)]
    assert all(job.url == f"https://example.com/job/{job.id}" for job in JOB_CATALOG)


def test_overlap_percentage_capped(ranker):
    job = JOB_CATALOG[0]  # React, TypeScript, JavaScript, CSS, HTML, Redux
    full = ["React", "TypeScript", "JavaScript", "CSS", "HTML", "Redux"]
    assert ranker.overlap_percentage(full, job) == 95
    assert ranker.overlap_percentage(["React"], job) == 17


def test_reported_percentage_floor_for_small_overlap(ranker):
    assert ranker.reported_percentage(17, random.Random(0)) == 45
    assert ranker.reported_percentage(80, random.Random(0)) == 80


def test_reported_percentage_random_without_overlap(ranker):
    rng = random.Random(123)
    values = {ranker.reported_percentage(0, rng) for _ in range(200)}
    assert min(values) >= 35
    assert max(values) <= 64


def test_rank_sorted_and_filtered(ranker):
    jobs = ranker.rank(["React", "JavaScript", "CSS", "Redux", "Git"], random.Random(1))

    assert 0 < len(jobs) <= 8
    percentages = [job.match_percentage for job in jobs]
    assert percentages == sorted(percentages, reverse=True)
    assert all(p >= 40 for p in percentages)
    # React Developer covers 5 of 6 required skills
    assert jobs[0].id == "3"
    assert jobs[0].match_percentage == 83


def test_rank_does_not_mutate_catalog(ranker):
    ranker.rank(["Python", "SQL"], random.Random(2))
    assert all(job.match_percentage == 0 for job in JOB_CATALOG)


def test_rank_falls_back_to_catalog_head():
    """With nothing above threshold the first jobs are returned unfiltered"""
    ranker = JobSuggestionRanker(config=RankingConfig(min_score_threshold=100))
    jobs = ranker.rank([], random.Random(0))

    assert [job.id for job in jobs] == ["1", "2", "3", "4", "5"]
    assert all(35 <= job.match_percentage <= 64 for job in jobs)


def test_rank_same_seed_same_result(ranker):
    first = ranker.rank(["Docker"], random.Random(9))
    second = ranker.rank(["Docker"], random.Random(9))
    assert [j.model_dump() for j in first] == [j.model_dump() for j in second]


def test_single_letter_skill_relates_to_any_resume_skill(ranker):
    analyst = next(job for job in JOB_CATALOG if job.id == "8")
    # "R" is contained in "React", so it counts as a hit
    assert ranker.overlap_percentage(["React"], analyst) == 17


def test_suggested_job_aliases():
    job = SuggestedJob.model_validate({
        "id": "x", "title": "t", "company": "c", "location": "l", "salary": "s",
        "description": "d", "requiredSkills": ["Go"], "url": "u", "postedDate": "2024-01-01",
    })
    assert job.required_skills == ["Go"]
    assert job.model_dump(by_alias=True)["matchPercentage"] == 0
