"""Local heuristic resume analysis.

Rule tables map the presence or absence of skills and experience keywords
to fixed strength, industry and improvement strings, and a template turns
the result into a short narrative description.
"""

from __future__ import annotations
import random
from typing import List, Optional, Sequence, Tuple

from skillmatch.nlp.extractors import ExperienceLevel, ExperienceLevelEstimator
from skillmatch.observability import get_logger, timer, counter, AnalysisMetrics
from skillmatch.resume.models import MLAnalysis, ParsedResume
from skillmatch.utils import round_half_up

logger = get_logger(__name__)

# (label, any-of skills)
SKILL_STRENGTH_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Frontend Development Expertise", ("React", "Vue", "Angular")),
    ("Backend Development Proficiency", ("Node.js", "Python", "Java")),
    ("Cloud & DevOps Knowledge", ("AWS", "Azure", "Docker", "Kubernetes")),
    ("Database Management Skills", ("MongoDB", "PostgreSQL", "MySQL")),
)

# (label, any-of substrings of the lower-cased experience text)
EXPERIENCE_STRENGTH_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Leadership & Mentoring", ("lead", "senior", "mentor")),
    ("Team Collaboration", ("team", "collaborate")),
    ("Project Management", ("project", "manage")),
)

INDUSTRY_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Web Development", ("React", "JavaScript", "CSS", "HTML")),
    ("Cloud Computing", ("AWS", "Docker", "Kubernetes", "DevOps")),
    ("Artificial Intelligence", ("Python", "Machine Learning", "AI", "TensorFlow")),
    ("Enterprise Software", ("Java", "Spring", "Microservices")),
    ("Startup/Tech", ("React", "Node.js", "MongoDB")),
)

LEVEL_PHRASES = {
    ExperienceLevel.ENTRY: "an emerging professional with strong foundational skills",
    ExperienceLevel.MID: "a mid-level professional with proven experience",
    ExperienceLevel.SENIOR: "a senior professional with extensive expertise",
    ExperienceLevel.EXECUTIVE: "an executive-level professional with strategic leadership experience",
}

MAX_STRENGTHS = 5
MAX_IMPROVEMENTS = 5
MAX_INDUSTRIES = 4
CONFIDENCE_FLOOR = 75
CONFIDENCE_SPREAD = 20


def _has_any(skills: Sequence[str], candidates: Sequence[str]) -> bool:
    return any(skill in candidates for skill in skills)


class ResumeAnalyzer:
    """Derive an ``MLAnalysis`` from a parsed resume.

    Everything is deterministic except the confidence score, which is drawn
    from the injected random source.
    """

    def __init__(self, estimator: Optional[ExperienceLevelEstimator] = None):
        self.estimator = estimator or ExperienceLevelEstimator()

    def identify_key_strengths(self, skills: Sequence[str], experience: Sequence[str]) -> List[str]:
        strengths = [label for label, wanted in SKILL_STRENGTH_RULES if _has_any(skills, wanted)]

        experience_text = " ".join(experience).lower()
        for label, keywords in EXPERIENCE_STRENGTH_RULES:
            if any(keyword in experience_text for keyword in keywords):
                strengths.append(label)

        return strengths[:MAX_STRENGTHS]

    def determine_industry_fit(self, skills: Sequence[str]) -> List[str]:
        industries = [label for label, wanted in INDUSTRY_RULES if _has_any(skills, wanted)]
        return industries[:MAX_INDUSTRIES]

    def generate_improvements(self, skills: Sequence[str], level: ExperienceLevel) -> List[str]:
        improvements: List[str] = []

        if "TypeScript" not in skills:
            improvements.append("Add TypeScript experience to strengthen JavaScript skills")
        if not _has_any(skills, ("AWS", "Azure", "GCP")):
            improvements.append("Gain cloud platform experience (AWS, Azure, or GCP)")
        if "Docker" not in skills:
            improvements.append("Learn containerization with Docker and Kubernetes")

        if level in (ExperienceLevel.ENTRY, ExperienceLevel.MID):
            improvements.append("Quantify achievements with specific metrics and numbers")
            improvements.append("Highlight problem-solving and impact in previous roles")
        else:
            improvements.append("Emphasize leadership experience and team management")
            improvements.append("Showcase strategic thinking and business impact")

        improvements.append("Add relevant certifications to validate expertise")
        improvements.append("Include links to portfolio or GitHub projects")

        return improvements[:MAX_IMPROVEMENTS]

    def generate_description(
        self,
        resume: ParsedResume,
        level: ExperienceLevel,
        key_strengths: Sequence[str],
    ) -> str:
        name = resume.contact.name or "This professional"
        skills_text = ", ".join(resume.skills[:5])
        strengths_text = ", ".join(key_strengths[:3])

        return (
            f"{name} is {LEVEL_PHRASES[level]} in software development and technology. "
            f"With expertise in {skills_text}, they demonstrate strong capabilities in {strengths_text}. "
            "Their background shows a progression of increasing responsibility and technical depth, "
            "making them well-suited for roles requiring both technical excellence and professional growth. "
            "The combination of technical skills and practical experience positions them as a valuable "
            "contributor to technology teams and projects."
        )

    def confidence_score(self, rng: random.Random) -> int:
        return round_half_up(rng.random() * CONFIDENCE_SPREAD + CONFIDENCE_FLOOR)

    def analyze(self, resume: ParsedResume, rng: random.Random) -> MLAnalysis:
        with timer("resume.analyze"):
            years = self.estimator.estimate_years(resume.text)
            level = self.estimator.level_for_years(years)

            key_strengths = self.identify_key_strengths(resume.skills, resume.experience)
            analysis = MLAnalysis(
                description=self.generate_description(resume, level, key_strengths),
                key_strengths=key_strengths,
                suggested_improvements=self.generate_improvements(resume.skills, level),
                industry_fit=self.determine_industry_fit(resume.skills),
                experience_level=level,
                confidence_score=self.confidence_score(rng),
            )

        counter(AnalysisMetrics.RESUME_ANALYZED, tags={"level": level.value})
        logger.debug("Resume analyzed", years=years, level=level.value,
                     strengths=len(key_strengths))
        return analysis
