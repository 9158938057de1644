"""SkillMatch - heuristic resume to job-description matching."""

__version__ = "0.1.0"
