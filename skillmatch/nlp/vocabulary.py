"""Static vocabularies used by the keyword heuristics.

Order matters: extractors report skills in the order listed here, not in
the order they appear in the text.
"""
from __future__ import annotations
from typing import Dict, Tuple

SKILL_VOCABULARY: Tuple[str, ...] = (
    # languages & frontend
    "JavaScript", "TypeScript", "React", "Vue", "Angular", "Node.js",
    "Python", "Java", "C#", "PHP", "Ruby", "Go", "Rust",
    "HTML", "CSS", "Sass", "Tailwind", "Bootstrap",
    # datastores
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "SQLite",
    # cloud & devops
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Git", "Jenkins",
    "CI/CD", "Webpack", "Vite",
    # apis & architecture
    "REST", "GraphQL", "API", "Microservices",
    # ml
    "Machine Learning", "AI", "TensorFlow", "PyTorch",
    # practices
    "Agile", "Scrum", "DevOps", "Testing", "Jest",
)

# Subset searched in job descriptions. Adds SQL, drops the practice and ML terms.
JOB_SKILL_VOCABULARY: Tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Vue", "Angular", "Node.js",
    "Python", "Java", "C#", "PHP", "Ruby", "Go", "Rust", "SQL",
    "MongoDB", "PostgreSQL", "MySQL", "Redis",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Git", "CI/CD", "Jenkins",
    "GraphQL", "REST", "HTML", "CSS", "Sass", "Tailwind", "Bootstrap",
)

# Reported as partially matched for every job description.
PARTIAL_SKILLS: Tuple[str, ...] = ("GraphQL", "Kubernetes", "MongoDB")

SECTION_HEADERS: Dict[str, Tuple[str, ...]] = {
    "experience": ("experience", "employment", "work history"),
    "education": ("education", "academic"),
    "summary": ("summary", "objective", "profile"),
}

# Keywords that close a section once it is open.
SECTION_TERMINATORS: Dict[str, Tuple[str, ...]] = {
    "experience": ("education", "skills", "certification"),
    "education": ("experience", "skills", "certification"),
    "summary": ("experience", "skills", "education"),
}

FALLBACK_EXPERIENCE: Tuple[str, ...] = (
    "Senior Software Engineer | TechCorp Inc. | 2021 - Present",
    "Full Stack Developer | StartupXYZ | 2019 - 2021",
    "Junior Developer | WebAgency | 2018 - 2019",
)

FALLBACK_EDUCATION: Tuple[str, ...] = (
    "Bachelor of Science in Computer Science - State University (2014-2018)",
)

FALLBACK_SUMMARY = (
    "Experienced professional with strong technical skills and proven track record."
)

DEFAULT_CONTACT_NAME = "Professional"

# Assumed when the text mentions fewer than two years.
DEFAULT_EXPERIENCE_YEARS = 3
