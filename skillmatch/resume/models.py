from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from skillmatch.nlp.extractors import ExperienceLevel


class Contact(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None

    @field_validator("email", "phone", "name", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if v is None:
            return None
        s = str(v).strip()
        return s or None


class ParsedResume(BaseModel):
    """Raw text plus everything the local heuristics pulled out of it.

    The ``*_fallback`` flags are set when a section yielded no lines and the
    placeholder content was substituted instead.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    skills: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    education: List[str] = Field(default_factory=list)
    contact: Contact = Field(default_factory=Contact)
    summary: Optional[str] = None
    experience_fallback: bool = Field(False, alias="experienceFallback")
    education_fallback: bool = Field(False, alias="educationFallback")
    summary_fallback: bool = Field(False, alias="summaryFallback")

    @field_validator("skills", mode="after")
    @classmethod
    def _dedupe_skills(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))


class MLAnalysis(BaseModel):
    """Heuristic resume assessment (the "ML" name is kept for wire compatibility)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str
    key_strengths: List[str] = Field(default_factory=list, alias="keyStrengths", max_length=5)
    suggested_improvements: List[str] = Field(default_factory=list, alias="suggestedImprovements", max_length=5)
    industry_fit: List[str] = Field(default_factory=list, alias="industryFit", max_length=4)
    experience_level: ExperienceLevel = Field(..., alias="experienceLevel")
    confidence_score: int = Field(..., alias="confidenceScore", ge=75, le=95)


class ResumeAnalysis(BaseModel):
    """Combined view handed to the matcher and the job ranker."""
    model_config = ConfigDict(populate_by_name=True)

    skills: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    education: List[str] = Field(default_factory=list)
    summary: str = ""
    ml_analysis: Optional[MLAnalysis] = Field(None, alias="mlAnalysis")
    contact: Optional[Contact] = None
    raw_text: Optional[str] = Field(None, alias="rawText")

    @classmethod
    def from_parsed(cls, parsed: ParsedResume, analysis: MLAnalysis) -> "ResumeAnalysis":
        return cls(
            skills=list(parsed.skills),
            experience=list(parsed.experience),
            education=list(parsed.education),
            summary=analysis.description,
            ml_analysis=analysis,
            contact=parsed.contact,
            raw_text=parsed.text,
        )
