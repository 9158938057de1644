"""Tests for job match scoring and suggestions"""
import random
import pytest
from skillmatch.matching import (
    JobMatchScorer, MatchingConfig, JobMatch, Suggestion, SuggestionGenerator,
    partition_skills, compute_match_score
)
from skillmatch.matching.suggestions import GENERIC_SUGGESTIONS, MISSING_SKILL_TEMPLATES


@pytest.fixture
def scorer():
    return JobMatchScorer()


def test_matching_config_defaults():
    config = MatchingConfig()
    assert config.partial_skills == ("GraphQL", "Kubernetes", "MongoDB")
    assert len(config.job_vocabulary) == 33


def test_score_react_and_aws(scorer):
    """React matches, AWS is missing, three constant partial skills"""
    result = scorer.score(["React", "Node.js"], "We need React and AWS experience", random.Random(0))

    assert result.matching_skills == ["React"]
    assert result.missing_skills == ["AWS"]
    assert result.partial_skills == ["GraphQL", "Kubernetes", "MongoDB"]
    # round(100 * 1 / (1 + 1 + 3))
    assert result.match_score == 20


def test_matching_and_missing_are_disjoint(scorer):
    resume = ["JavaScript", "Python", "Docker", "Git"]
    description = "Python, Docker, Kubernetes, AWS, Git and PostgreSQL for a Java shop"
    result = scorer.score(resume, description, random.Random(3))

    assert not set(result.matching_skills) & set(result.missing_skills)
    assert set(result.missing_skills) <= set(scorer.extract_job_skills(description))


def test_substring_relation_counts_java_for_javascript(scorer):
    result = scorer.score(["JavaScript"], "Looking for a strong Java engineer", random.Random(0))
    assert result.matching_skills == ["JavaScript"]
    assert result.missing_skills == []


def test_no_job_skills_scores_zero(scorer):
    result = scorer.score(["React"], "A friendly team that values kindness", random.Random(0))
    assert result.matching_skills == []
    assert result.match_score == 0


def test_compute_match_score_edge_cases():
    assert compute_match_score(0, 0, 0) == 0
    assert compute_match_score(2, 0, 3) == 40
    # 100 * 1 / 8 = 12.5 rounds half up
    assert compute_match_score(1, 4, 3) == 13


def test_partition_skills_case_insensitive():
    matching, missing = partition_skills(["react", "Vue"], ["React", "Angular"])
    assert matching == ["react"]
    assert missing == ["Angular"]


def test_suggestions_for_missing_and_partial():
    generator = SuggestionGenerator()
    suggestions = generator.generate(["AWS", "Docker"], ["GraphQL"], random.Random(5))

    assert len(suggestions) == 3
    assert suggestions[0] == MISSING_SKILL_TEMPLATES["AWS"]
    assert suggestions[1].title == "Expand GraphQL expertise"
    assert suggestions[2] in GENERIC_SUGGESTIONS


def test_suggestions_generic_template_for_unknown_skill():
    suggestions = SuggestionGenerator().generate(["Rust"], [], random.Random(0))
    assert suggestions[0].title == "Add Rust experience"
    assert len(suggestions) == 3
    assert all(s in GENERIC_SUGGESTIONS for s in suggestions[1:])


def test_suggestions_without_gaps_take_two_generic():
    suggestions = SuggestionGenerator().generate([], [], random.Random(0))
    assert len(suggestions) == 2
    assert len({s.title for s in suggestions}) == 2


def test_suggestions_order_follows_rng():
    generator = SuggestionGenerator()
    first = generator.generate([], [], random.Random(42))
    second = generator.generate([], [], random.Random(42))
    assert first == second


def test_job_match_serializes_camel_case(scorer):
    result = scorer.score(["React"], "React and TypeScript", random.Random(0))
    dumped = result.model_dump(by_alias=True)
    assert set(dumped) == {"matchScore", "matchingSkills", "missingSkills", "partialSkills", "suggestions"}
    assert JobMatch.model_validate(dumped) == result


def test_job_match_rejects_too_many_suggestions():
    with pytest.raises(ValueError):
        JobMatch(match_score=50, suggestions=[Suggestion(title="t", description="d")] * 4)
