"""Improvement suggestions attached to a job match."""

from __future__ import annotations
import random
from typing import Dict, List, Sequence, Tuple

from skillmatch.matching.models import Suggestion

MAX_SUGGESTIONS = 3
MAX_GENERIC_SUGGESTIONS = 2

MISSING_SKILL_TEMPLATES: Dict[str, Suggestion] = {
    "AWS": Suggestion(
        title="Gain AWS Cloud Experience",
        description="AWS is a critical skill for this role. Consider getting certified and building cloud projects.",
        example="Migrated legacy applications to AWS, reducing infrastructure costs by 40% and improving "
                "scalability using EC2, S3, and Lambda services.",
    ),
    "Docker": Suggestion(
        title="Learn Containerization with Docker",
        description="Docker containerization is essential for modern development workflows.",
        example="Containerized microservices using Docker, reducing deployment time by 60% and ensuring "
                "consistent environments across development and production.",
    ),
    "Kubernetes": Suggestion(
        title="Master Container Orchestration",
        description="Kubernetes skills are highly valued for managing containerized applications at scale.",
        example="Orchestrated containerized applications using Kubernetes, managing 50+ microservices with "
                "automated scaling and zero-downtime deployments.",
    ),
    "GraphQL": Suggestion(
        title="Add GraphQL API Experience",
        description="GraphQL is becoming the preferred API technology for modern applications.",
        example="Implemented GraphQL APIs reducing data over-fetching by 70% and improving mobile app "
                "performance significantly.",
    ),
    "TypeScript": Suggestion(
        title="Strengthen TypeScript Skills",
        description="TypeScript is essential for large-scale JavaScript applications.",
        example="Migrated JavaScript codebase to TypeScript, reducing runtime errors by 80% and improving "
                "developer productivity through better IDE support.",
    ),
}

GENERIC_SUGGESTIONS: Tuple[Suggestion, ...] = (
    Suggestion(
        title="Quantify your achievements with metrics",
        description="Add specific numbers and percentages to demonstrate your impact and results.",
        example="Led a cross-functional team of 8 developers to deliver a critical project 3 weeks ahead of "
                "schedule, resulting in $500K cost savings and 25% performance improvement.",
    ),
    Suggestion(
        title="Highlight leadership and collaboration",
        description="Emphasize your ability to work with teams and lead initiatives.",
        example="Mentored 5 junior developers, established code review processes, and improved team "
                "productivity by 40% through knowledge sharing sessions.",
    ),
    Suggestion(
        title="Showcase problem-solving abilities",
        description="Demonstrate how you've solved complex technical challenges.",
        example="Identified and resolved critical performance bottleneck, reducing API response time from "
                "2.5s to 200ms, improving user satisfaction by 60%.",
    ),
    Suggestion(
        title="Add relevant certifications",
        description="Professional certifications validate your expertise and commitment to continuous learning.",
        example="Obtained AWS Solutions Architect certification and Google Cloud Professional Developer "
                "certification to demonstrate cloud expertise.",
    ),
    Suggestion(
        title="Include modern development practices",
        description="Show familiarity with current industry standards and methodologies.",
        example="Implemented CI/CD pipelines using Jenkins and GitLab, reducing deployment time by 75% and "
                "achieving 99.9% uptime through automated testing and monitoring.",
    ),
)


def missing_skill_suggestion(skill: str) -> Suggestion:
    template = MISSING_SKILL_TEMPLATES.get(skill)
    if template is not None:
        return template
    return Suggestion(
        title=f"Add {skill} experience",
        description=f"The job requires {skill} which is missing from your resume.",
        example=f"Developed applications using {skill} to improve system performance by 30%.",
    )


def partial_skill_suggestion(skill: str) -> Suggestion:
    return Suggestion(
        title=f"Expand {skill} expertise",
        description=f"You have some {skill} experience, but demonstrating deeper knowledge would "
                    "strengthen your profile.",
        example=f"Built enterprise-grade solutions using {skill}, handling 10,000+ concurrent users and "
                "processing 1M+ daily transactions.",
    )


class SuggestionGenerator:
    """Build up to three suggestions for a match.

    One for the first missing skill, one for the first partial skill, then
    generic advice drawn at random to fill the remaining slots.
    """

    def __init__(self, generic_pool: Sequence[Suggestion] = GENERIC_SUGGESTIONS):
        self.generic_pool = tuple(generic_pool)

    def generate(
        self,
        missing_skills: Sequence[str],
        partial_skills: Sequence[str],
        rng: random.Random,
    ) -> List[Suggestion]:
        suggestions: List[Suggestion] = []

        if missing_skills:
            suggestions.append(missing_skill_suggestion(missing_skills[0]))
        if partial_skills:
            suggestions.append(partial_skill_suggestion(partial_skills[0]))

        pool = list(self.generic_pool)
        rng.shuffle(pool)
        take = min(MAX_GENERIC_SUGGESTIONS, MAX_SUGGESTIONS - len(suggestions))
        suggestions.extend(pool[:take])

        return suggestions[:MAX_SUGGESTIONS]
