from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    example: Optional[str] = None


class JobMatch(BaseModel):
    """Skill-gap comparison of one resume against one job description"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    match_score: int = Field(..., alias="matchScore", ge=0, le=100)
    matching_skills: List[str] = Field(default_factory=list, alias="matchingSkills")
    missing_skills: List[str] = Field(default_factory=list, alias="missingSkills")
    partial_skills: List[str] = Field(default_factory=list, alias="partialSkills")
    suggestions: List[Suggestion] = Field(default_factory=list, max_length=3)


class SavedAnalysis(JobMatch):
    """A ``JobMatch`` as mirrored into the local store"""

    timestamp: str
